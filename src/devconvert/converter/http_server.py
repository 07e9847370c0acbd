"""HTTP server exposing the conversion engine."""

from __future__ import annotations

import argparse
import importlib
import logging
from types import ModuleType
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict

from devconvert import __version__
from devconvert.application.ports import HistoryEntry, HistoryStore
from devconvert.application.use_cases import default_registry
from devconvert.converter.core import execute_conversion, status_for
from devconvert.errors import ConversionError
from devconvert.infrastructure.history import InMemoryHistoryStore
from devconvert.registry.base import ConversionSpec
from devconvert.schemas import ConvertPayload, HttpServerConfig

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from fastapi import FastAPI

_fastapi_module: ModuleType | None = None
try:
    _fastapi_module = importlib.import_module("fastapi")
except ModuleNotFoundError:  # pragma: no cover
    pass

_uvicorn_module: ModuleType | None = None
try:
    _uvicorn_module = importlib.import_module("uvicorn")
except ModuleNotFoundError:  # pragma: no cover
    pass

fastapi: Any = _fastapi_module
uvicorn: Any = _uvicorn_module


def _require_http_runtime() -> None:
    """Ensure HTTP server runtime dependencies are available."""
    if fastapi is None:
        raise RuntimeError(
            "fastapi is required to run devconvert-http. Install with extra: .[server]"
        )


class HealthResponse(BaseModel):
    """Health response payload."""

    model_config = ConfigDict(extra="forbid")

    status: str


class ReadyResponse(BaseModel):
    """Readiness response payload."""

    model_config = ConfigDict(extra="forbid")

    status: str
    conversions: int


class ConversionSpecResponse(BaseModel):
    """One conversion as listed to callers."""

    id: str
    label: str
    source_language: str
    target_language: str
    example: str

    @classmethod
    def from_spec(cls, spec: ConversionSpec) -> ConversionSpecResponse:
        return cls(
            id=spec.id,
            label=spec.label,
            source_language=spec.source_language,
            target_language=spec.target_language,
            example=spec.example,
        )


class CategoryResponse(BaseModel):
    """Conversions sharing a category, in menu order."""

    name: str
    conversions: list[ConversionSpecResponse]


class ConvertResponse(BaseModel):
    """Successful conversion payload."""

    conversion_id: str
    output: str


class HistoryEntryResponse(BaseModel):
    """Recorded conversion as returned by ``/v1/history``."""

    id: str
    created_at: str
    input_text: str
    output_text: str
    format_type: str

    @classmethod
    def from_entry(cls, entry: HistoryEntry) -> HistoryEntryResponse:
        return cls(
            id=entry.id,
            created_at=entry.created_at.isoformat(),
            input_text=entry.input_text,
            output_text=entry.output_text,
            format_type=entry.format_type,
        )


def create_app(
    store: HistoryStore | None = None,
    config: HttpServerConfig | None = None,
) -> FastAPI:
    """Create the conversion HTTP application.

    Parameters
    ----------
    store : HistoryStore | None, optional
        History collaborator; defaults to a fresh in-memory store.
    config : HttpServerConfig | None, optional
        Server settings; defaults to values from the environment.
    """
    _require_http_runtime()
    history: HistoryStore = store if store is not None else InMemoryHistoryStore()
    settings = config or HttpServerConfig.from_env()
    registry = default_registry()

    app = fastapi.FastAPI(
        title="devconvert",
        version=__version__,
        description="Convert SVG, HTML, CSS, JSON and curl snippets between formats.",
    )
    user_header = fastapi.Header(default=None, alias="X-User-Id")
    query_param = fastapi.Query(default=None)

    @app.get("/healthz", response_model=HealthResponse)
    async def healthz() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.get("/readyz", response_model=ReadyResponse)
    async def readyz() -> ReadyResponse:
        return ReadyResponse(status="ready", conversions=len(registry))

    @app.get("/v1/conversions", response_model=list[CategoryResponse])
    async def list_conversions(q: str | None = query_param) -> list[CategoryResponse]:
        """List conversions grouped by category, optionally filtered by ``q``."""
        return [
            CategoryResponse(
                name=category.display_name,
                conversions=[ConversionSpecResponse.from_spec(spec) for spec in specs],
            )
            for category, specs in registry.search(q)
        ]

    @app.post("/v1/convert", response_model=ConvertResponse)
    def convert(
        payload: ConvertPayload,
        x_user_id: str | None = user_header,
    ) -> ConvertResponse:
        """Convert ``input_text`` and record history for identified callers."""
        options = payload.options.model_dump(exclude_none=True) if payload.options else None
        try:
            result = execute_conversion(
                payload.conversion_id,
                payload.input_text,
                user_id=x_user_id,
                store=history,
                options=options,
            )
        except (ValueError, ConversionError) as exc:
            raise fastapi.HTTPException(
                status_code=fastapi.status.HTTP_400_BAD_REQUEST,
                detail={"error": "invalid_request", "message": str(exc)},
            ) from exc
        except Exception as exc:  # pragma: no cover
            logger.exception("unexpected error during HTTP conversion")
            raise fastapi.HTTPException(
                status_code=fastapi.status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="internal server error",
            ) from exc

        if result.error is not None:
            raise fastapi.HTTPException(
                status_code=status_for(result),
                detail={"error": result.error.value, "message": result.message},
            )
        return ConvertResponse(conversion_id=result.conversion_id, output=result.output or "")

    @app.get("/v1/history", response_model=list[HistoryEntryResponse])
    def recent_history(x_user_id: str | None = user_header) -> list[HistoryEntryResponse]:
        """Return the caller's most recent conversions, newest first."""
        if not x_user_id or not x_user_id.strip():
            raise fastapi.HTTPException(
                status_code=fastapi.status.HTTP_401_UNAUTHORIZED,
                detail="X-User-Id header is required",
            )
        entries = history.recent(x_user_id.strip(), limit=settings.history_limit)
        return [HistoryEntryResponse.from_entry(entry) for entry in entries]

    return app


if TYPE_CHECKING:
    app: FastAPI | None

if _fastapi_module is not None:
    app = create_app()
else:  # pragma: no cover
    app = None


def main() -> None:
    """Run the HTTP entrypoint."""
    _require_http_runtime()
    if uvicorn is None:
        raise RuntimeError("uvicorn is required to run devconvert-http")
    settings = HttpServerConfig.from_env()
    parser = argparse.ArgumentParser(description="devconvert HTTP server.")
    parser.add_argument("--host", default=settings.host)
    parser.add_argument("--port", type=int, default=settings.port)
    parser.add_argument("--log-level", default="info")
    args = parser.parse_args()
    logging.basicConfig(level=args.log_level.upper())
    uvicorn.run(
        "devconvert.converter.http_server:app",
        host=args.host,
        port=args.port,
        reload=False,
    )


if __name__ == "__main__":
    main()
