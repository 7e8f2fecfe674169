"""Command line interface for the quotesys toolkit."""

from __future__ import annotations

import asyncio
import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Awaitable, Callable, List, Optional, TypeVar

import typer
import uvicorn
from loguru import logger

from .config import AppConfig, is_usable_credential, load_config
from .config.inspector import check_config, explain_config
from .service import QuoteService
from .web import create_app

T = TypeVar("T")


@dataclass(slots=True)
class CLIState:
    """Holds shared state between Typer commands."""

    config_path: Path
    _config: AppConfig | None = None

    def ensure_config(self) -> AppConfig:
        if self._config is None:
            logger.info("Loading configuration from {}", self.config_path)
            self._config = load_config(AppConfig, self.config_path)
        return self._config


app = typer.Typer(help="Quotesys orchestration helpers")
config_app = typer.Typer(help="Validate and document configuration files")
app.add_typer(config_app, name="config")


def _default_config_path() -> Path:
    repo_root = Path(__file__).resolve().parents[1]
    return repo_root / "config" / "example.toml"


def _normalize_format(value: str) -> str:
    return value.lower()


def _get_state(ctx: typer.Context) -> CLIState:
    state = ctx.obj
    if not isinstance(state, CLIState):  # pragma: no cover - defensive guard
        raise RuntimeError("CLI context is not initialised")
    return state


def _exit(code: int) -> None:
    raise typer.Exit(code)


def _run_with_service(config: AppConfig, action: Callable[[QuoteService], Awaitable[T]]) -> T:
    """Run ``action`` against a short-lived service and close it afterwards."""

    async def _runner() -> T:
        service = QuoteService(config)
        service.startup()
        try:
            return await action(service)
        finally:
            await service.aclose()

    return asyncio.run(_runner())


def _print_json(payload: Any) -> None:
    print(json.dumps(payload, indent=2, ensure_ascii=False, default=str))


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    config: Path = typer.Option(
        _default_config_path(),
        help="Path to the TOML configuration file",
    ),
) -> None:
    """Initialise CLI state."""

    ctx.obj = CLIState(config_path=config.resolve())

    if ctx.invoked_subcommand is None:
        logger.warning("No command provided. Try 'status' or 'quote'.")
        _exit(0)


@app.command(help="Show configuration and provider status")
def status(ctx: typer.Context) -> None:
    state = _get_state(ctx)
    config = state.ensure_config()
    _report_system_status(config)


@app.command(help="Resolve one quotation and print it as JSON")
def quote(ctx: typer.Context) -> None:
    config = _get_state(ctx).ensure_config()
    result = _run_with_service(config, lambda service: service.random_quote())
    _print_json(result.to_dict())


@app.command(help="Resolve one background photo and print it as JSON")
def background(
    ctx: typer.Context,
    term: List[str] = typer.Option(
        [],
        "--term",
        help="Search term to use instead of the configured ones (repeatable)",
    ),
) -> None:
    config = _get_state(ctx).ensure_config()
    settings = config.backgrounds
    if term:
        settings = settings.model_copy(update={"search_terms": list(term)})
    result = _run_with_service(config, lambda service: service.random_background(settings))
    _print_json(result.to_dict())


@app.command(help="Print one page of cached quotations")
def library(
    ctx: typer.Context,
    cursor: Optional[int] = typer.Option(None, help="Id of the last quote of the previous page"),
    limit: Optional[int] = typer.Option(None, help="Page size (clamped to the configured maximum)"),
) -> None:
    config = _get_state(ctx).ensure_config()

    async def _collect(service: QuoteService) -> dict[str, Any]:
        page = await service.library_page(cursor, limit)
        total = await service.quote_count()
        return {
            "quotes": [item.to_dict() for item in page.items],
            "nextCursor": page.next_cursor,
            "hasMore": page.has_more,
            "total": total,
        }

    _print_json(_run_with_service(config, _collect))


@app.command(help="Run the API server")
def serve(
    ctx: typer.Context,
    host: str = typer.Option("127.0.0.1", help="Host to bind the API server to"),
    port: int = typer.Option(8000, help="Port to bind the API server to"),
    dry_run: bool = typer.Option(
        False,
        help="Build the application and report status without running the server",
    ),
) -> None:
    state = _get_state(ctx)
    config = state.ensure_config()

    service = QuoteService(config)
    app_instance = create_app(service, config)
    logger.info("Registered {} routes", len(app_instance.routes))

    if dry_run:
        _report_system_status(config)
        logger.info("[Dry Run] Server will not be started.")
        asyncio.run(service.aclose())
        return

    uvicorn.run(app_instance, host=host, port=port, log_level=config.logging_level.lower())


@config_app.command(help="Validate the configuration file")
def check(
    ctx: typer.Context,
    format: str = typer.Option(  # noqa: A002 - match CLI option name
        "text",
        "--format",
        case_sensitive=False,
        help="Output format for validation results",
        callback=_normalize_format,
    ),
) -> None:
    state = _get_state(ctx)
    result, exit_code, _ = check_config(state.config_path)

    if format == "json":
        _print_json(result)
        _exit(exit_code)

    if result["status"] == "ok":
        logger.info("Configuration OK: {}", result["config_path"])
        for warning in result["warnings"]:
            logger.warning(warning)
    else:
        error: dict[str, Any] = result["error"]
        logger.error(
            "Configuration error ({}) for {}: {}",
            error["type"],
            result["config_path"],
            error["message"],
        )
        for detail in error.get("details", []):
            location = detail["loc"] or "<root>"
            logger.error("  - {}: {} ({})", location, detail["message"], detail["type"])

    _exit(exit_code)


@config_app.command(help="Describe available configuration fields")
def explain(
    format: str = typer.Option(  # noqa: A002 - match CLI option name
        "text",
        "--format",
        case_sensitive=False,
        help="Output format for configuration schema",
        callback=_normalize_format,
    ),
) -> None:
    fields = explain_config()

    if format == "json":
        _print_json({"fields": fields})
        return

    logger.info("Configuration schema ({} fields):", len(fields))
    for field in fields:
        default_value = field["default"]
        if isinstance(default_value, (dict, list)):
            default_repr = json.dumps(default_value, ensure_ascii=False, default=str)
        elif default_value is None:
            default_repr = "None"
        else:
            default_repr = str(default_value)
        logger.info(
            "  - {name}: type={type}, required={required}, default={default}, description={description}",
            name=field["name"],
            type=field["type"],
            required="yes" if field["required"] else "no",
            default=default_repr,
            description=field["description"] or "(no description)",
        )


def _report_system_status(config: AppConfig) -> None:
    logger.info("=== Quotesys Status ===")
    logger.info("Logging level: {}", config.logging_level)
    logger.info("Quote store: {}", config.store.database_url)
    logger.info("Quote provider: {}", config.quote_provider.url)

    logger.info("\n=== Image Providers ===")
    credentials = {
        "unsplash": is_usable_credential(config.unsplash.access_key_secret),
        "pexels": is_usable_credential(config.pexels.api_key_secret),
    }
    for provider in sorted(config.backgrounds.providers, key=lambda item: item.priority):
        logger.info(
            "  - {}: enabled={}, priority={}, credential={}",
            provider.name.value,
            provider.enabled,
            provider.priority,
            "configured" if credentials.get(provider.name.value) else "missing",
        )
    logger.info("Search terms: {}", ", ".join(config.backgrounds.search_terms) or "(defaults)")
    logger.info("Provider timeout: {}s", config.resolver.provider_timeout)

    logger.info("\n=== Web ===")
    logger.info("Title: {}", config.web.title)
    logger.info("Page size: default={}, max={}", config.web.default_page_size, config.web.max_page_size)


def main(argv: list[str] | None = None) -> int:
    """Entry point compatible with setuptools console scripts."""

    try:
        result = app(args=argv, standalone_mode=False)
    except typer.Exit as exc:  # pragma: no cover - Typer translates exit codes
        return exc.exit_code
    if isinstance(result, int):
        return result
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
