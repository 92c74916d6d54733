from enum import StrEnum


class ValidationType(StrEnum):
    """Phase that produced the terminal verdict for a schema."""

    META_SCHEMA = "meta-schema"
    COMPILATION = "compilation"
    ERROR = "error"
