from constants.brand_rules import (
    CASE_SENSITIVE_BRAND_FORMS,
    FRONT_ONLY_BRANDS,
    FRONT_OR_SECOND_BRANDS,
    IGNORED_BRANDS,
)

__all__ = [
    "CASE_SENSITIVE_BRAND_FORMS",
    "FRONT_ONLY_BRANDS",
    "FRONT_OR_SECOND_BRANDS",
    "IGNORED_BRANDS",
]
