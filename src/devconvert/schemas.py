"""Pydantic schemas for runtime validation of conversion inputs."""

from __future__ import annotations

import os
import re

from pydantic import BaseModel, ConfigDict, Field, field_validator

_IDENTIFIER = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


class GeneratorOptionsConfig(BaseModel):
    """Validated overrides for :class:`GeneratorOptions`."""

    model_config = ConfigDict(extra="forbid")

    root_name: str | None = None
    zod_schema_name: str | None = None
    typebox_schema_name: str | None = None
    mongoose_schema_name: str | None = None
    table_name: str | None = None
    placeholder_url: str | None = None

    @field_validator(
        "root_name",
        "zod_schema_name",
        "typebox_schema_name",
        "mongoose_schema_name",
        "table_name",
    )
    @classmethod
    def _validate_identifier(cls, value: str | None) -> str | None:
        if value is None:
            return None
        value = value.strip()
        if not _IDENTIFIER.match(value):
            raise ValueError(f"'{value}' is not a valid identifier.")
        return value

    @field_validator("placeholder_url")
    @classmethod
    def _validate_url(cls, value: str | None) -> str | None:
        if value is None:
            return None
        value = value.strip()
        if not value or "'" in value:
            raise ValueError("placeholder_url must be non-empty and contain no single quotes.")
        return value


class ConvertPayload(BaseModel):
    """Body of ``POST /v1/convert``."""

    model_config = ConfigDict(extra="forbid")

    conversion_id: str = Field(min_length=1)
    input_text: str
    options: GeneratorOptionsConfig | None = None

    @field_validator("conversion_id")
    @classmethod
    def _normalize_id(cls, value: str) -> str:
        normalized = value.strip()
        if not normalized:
            raise ValueError("conversion_id cannot be blank.")
        return normalized


class HttpServerConfig(BaseModel):
    """HTTP server settings, usually read from the environment."""

    model_config = ConfigDict(extra="forbid")

    host: str = "0.0.0.0"
    port: int = Field(default=8090, ge=1, le=65535)
    history_limit: int = Field(default=15, gt=0)

    @classmethod
    def from_env(cls) -> HttpServerConfig:
        """Build settings from ``DEVCONVERT_HTTP_*`` environment variables."""
        return cls(
            host=os.getenv("DEVCONVERT_HTTP_HOST", "0.0.0.0"),
            port=int(os.getenv("DEVCONVERT_HTTP_PORT", "8090")),
            history_limit=int(os.getenv("DEVCONVERT_HISTORY_LIMIT", "15")),
        )
