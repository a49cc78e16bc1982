from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = "BrandResolver"
    debug: bool = False

    database_url: str = "sqlite:///./brand_resolver.db"

    relations_file: str = "brandConnections.json"
    products_file: str = "pharmacyItems.json"

    default_source: str = "pharmacy"
    default_country_code: str = "cz"

    log_level: str = "INFO"


settings = Settings()
