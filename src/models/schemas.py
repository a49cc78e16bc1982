from typing import Optional, Union

from pydantic import AliasChoices, BaseModel, Field, field_validator


class BrandRelationRecord(BaseModel):
    """One manufacturer relation; the secondary side may hold several ';'-joined names."""
    primary: str = Field("", alias="manufacturer_p1")
    secondary: str = Field("", alias="manufacturers_p2")

    model_config = {"populate_by_name": True}

    @field_validator("primary", "secondary", mode="before")
    @classmethod
    def _none_as_empty(cls, value):
        return "" if value is None else value


class ProductRecord(BaseModel):
    title: str = ""
    source_id: str = Field(validation_alias=AliasChoices("source_id", "sourceId"))
    m_id: Optional[Union[int, str]] = None
    already_classified: bool = Field(
        False, validation_alias=AliasChoices("already_classified", "alreadyClassified")
    )

    model_config = {"populate_by_name": True}

    @field_validator("title", mode="before")
    @classmethod
    def _title_as_text(cls, value):
        return "" if value is None else value

    @field_validator("source_id", mode="before")
    @classmethod
    def _source_id_as_text(cls, value):
        return str(value) if isinstance(value, int) else value

    @property
    def is_classified(self) -> bool:
        return self.already_classified or bool(self.m_id)
