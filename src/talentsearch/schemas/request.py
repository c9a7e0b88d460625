"""Search request and application configuration schemas."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .filters import SearchFilters

SortDirection = Literal["asc", "desc"]


class SearchRequest(BaseModel):
    """One resume search invocation."""

    query: str = ""
    filters: SearchFilters = Field(default_factory=SearchFilters)
    sort_field: str | None = None
    sort_direction: SortDirection | None = None
    page: int = 1
    page_size: int | None = Field(default=None, ge=1)

    model_config = ConfigDict(extra="forbid")


class SearchSettings(BaseModel):
    page_size: int | None = Field(default=None, ge=1)
    sort_field: str | None = None
    sort_direction: SortDirection | None = None


class GatewaySettings(BaseModel):
    table: str | None = None
    batch_size: int | None = Field(default=None, ge=1)
    timeout: float | None = Field(default=None, gt=0)


class ExportSettings(BaseModel):
    fields: list[str] | None = None


class AppConfig(BaseModel):
    search: SearchSettings = Field(default_factory=SearchSettings)
    gateway: GatewaySettings = Field(default_factory=GatewaySettings)
    export: ExportSettings = Field(default_factory=ExportSettings)

    model_config = ConfigDict(extra="forbid")

    def to_settings(self) -> dict[str, Any]:
        settings: dict[str, Any] = {}
        for section in ("search", "gateway", "export"):
            values = getattr(self, section).model_dump(exclude_none=True)
            if values:
                settings[section] = values
        return settings


def load_config(raw: Any) -> AppConfig:
    if raw is None:
        return AppConfig()
    if not isinstance(raw, dict):
        raise ValidationError.from_exception_data(
            "AppConfig",
            [{"type": "dict_type", "loc": ("config",), "input": raw}],
        )
    return AppConfig.model_validate(raw)
