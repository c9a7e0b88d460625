"""Typer CLI entrypoint for the resume search."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

import typer
from pydantic import ValidationError

from .config import load_yaml_file
from .container import create_container
from .errors import TalentSearchError
from .export import CATEGORY_LABELS, fields_by_category
from .gateways import SessionContext
from .logging import configure_logging
from .pipeline import AuditLogger, RequestLoader
from .schemas import SearchRequest, load_config

app = typer.Typer(help="Admin resume search over portal candidates.")


def _load_settings(config: Path | None) -> dict[str, Any]:
    if config is None:
        return {}
    try:
        return load_config(load_yaml_file(config)).to_settings()
    except (ValueError, ValidationError) as exc:
        raise typer.BadParameter(str(exc), param_name="config") from exc


def _build_request(
    request_path: Path | None,
    query: str | None,
    sort_field: str | None,
    sort_direction: str | None,
    page: int | None,
    page_size: int | None,
) -> SearchRequest:
    try:
        request = RequestLoader().load(request_path) if request_path else SearchRequest()
        overrides = {
            "query": query,
            "sort_field": sort_field,
            "sort_direction": sort_direction,
            "page": page,
            "page_size": page_size,
        }
        updates = {key: value for key, value in overrides.items() if value is not None}
        return SearchRequest.model_validate({**request.model_dump(), **updates})
    except (ValueError, ValidationError) as exc:
        raise typer.BadParameter(str(exc), param_name="request") from exc


@app.command()
def search(
    output: Path = typer.Option(..., dir_okay=False, resolve_path=True, help="Output JSON path."),
    candidates: Optional[Path] = typer.Option(
        None, exists=True, readable=True, dir_okay=False, help="Candidates JSONL path."
    ),
    backend_url: Optional[str] = typer.Option(
        None, envvar="TALENTSEARCH_BACKEND_URL", help="Hosted backend base URL."
    ),
    api_key: Optional[str] = typer.Option(
        None, envvar="TALENTSEARCH_API_KEY", help="Hosted backend API key."
    ),
    request: Optional[Path] = typer.Option(
        None, exists=True, readable=True, dir_okay=False, help="Search request YAML or JSON."
    ),
    query: Optional[str] = typer.Option(None, help='Boolean query, e.g. \'"Java" AND "AWS"\'.'),
    sort_field: Optional[str] = typer.Option(None, help="Sort field."),
    sort_direction: Optional[str] = typer.Option(None, help="asc or desc."),
    page: Optional[int] = typer.Option(None, help="1-based page number."),
    page_size: Optional[int] = typer.Option(None, help="Results per page."),
    export: Optional[Path] = typer.Option(
        None, dir_okay=False, help="Export all matches to .csv or .xlsx."
    ),
    fields: Optional[str] = typer.Option(None, help="Comma-separated export field keys."),
    config: Optional[Path] = typer.Option(None, exists=True, readable=True, dir_okay=False, help="YAML config path."),
    log_level: str = typer.Option("INFO", help="Log level for structured logging."),
    log_format: str = typer.Option("json", help="Log output: json or console."),
    audit_log: Optional[Path] = typer.Option(None, dir_okay=False, help="Audit log output (JSONL)."),
) -> None:
    """Run a resume search and write one page of results."""
    settings = _load_settings(config)
    search_request = _build_request(request, query, sort_field, sort_direction, page, page_size)

    if log_format not in ("json", "console"):
        raise typer.BadParameter("must be json or console", param_name="log_format")
    configure_logging(log_level, log_format)

    container = create_container(settings=settings)
    if candidates is not None:
        gateway = container.jsonl_gateway(path=candidates)
        session = SessionContext.operator()
    elif backend_url and api_key:
        gateway = container.hosted_gateway(base_url=backend_url, api_key=api_key)
        session = SessionContext.operator(access_token=api_key)
    else:
        raise typer.BadParameter(
            "provide --candidates or both --backend-url and --api-key",
            param_name="candidates",
        )

    export_fields = [key.strip() for key in fields.split(",") if key.strip()] if fields else None
    pipeline = container.pipeline(gateway=gateway)
    audit_logger = AuditLogger(audit_log) if audit_log else None

    try:
        result = pipeline.run(
            session=session,
            request=search_request,
            output_path=output,
            audit_logger=audit_logger,
            export_path=export,
            export_fields=export_fields,
        )
    except (TalentSearchError, ValueError) as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    typer.echo(
        f"Matched {result.total} candidates; page {result.page}/{result.total_pages} "
        f"saved to {output}."
    )


@app.command("fields")
def list_fields() -> None:
    """List exportable fields by category."""
    for category, entries in fields_by_category().items():
        typer.echo(f"{CATEGORY_LABELS[category]}:")
        for entry in entries:
            typer.echo(f"  {entry.key:<22} {entry.label}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
