"""Request/response models for the translation API."""

from typing import Any

from pydantic import BaseModel, Field, field_validator

from template_resolver.resolver import COUNT_FIELD


class LocaleModel(BaseModel):
    locale: str = Field(min_length=1)


class TranslateRequest(BaseModel):
    """Translate a key, optionally in a locale other than the active one."""

    key: str
    data: dict[str, Any] | None = None
    locale: str | None = None

    @field_validator("data")
    @classmethod
    def _numeric_count(cls, value: dict[str, Any] | None) -> dict[str, Any] | None:
        # "n" picks plural variants and must be a real number
        if value is not None and COUNT_FIELD in value:
            n = value[COUNT_FIELD]
            if isinstance(n, bool) or not isinstance(n, (int, float)):
                raise ValueError(f"'{COUNT_FIELD}' must be a number")
        return value


class TranslateResponse(BaseModel):
    key: str
    locale: str
    value: str
