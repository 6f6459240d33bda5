"""
Typer CLI for the contextual-ai service.

Commands:
    contextual-ai serve                 - Run the API server
    contextual-ai info                  - Show current configuration
    contextual-ai context analyze       - Analyse a contextual snapshot
    contextual-ai personal analyze      - Analyse a learner snapshot
    contextual-ai adapt offline         - Prepare content for offline use
    contextual-ai adapt compress        - Compress content for a bandwidth tier
    contextual-ai adapt behavior        - Adapt content to learner behavior
    contextual-ai remote health         - Check a running API
    contextual-ai remote offline        - Offline content via a running API
    contextual-ai remote compress       - Compression via a running API

Usage:
    contextual-ai --help
    contextual-ai context analyze --offline --speed slow
    contextual-ai adapt compress "First. Second. Third. Fourth." --bandwidth slow
    contextual-ai remote health --url http://localhost:3000/api
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any, NoReturn, Optional

import typer
from loguru import logger
from pydantic import ValidationError
from rich import print as rprint
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from config import get_settings
from contextual_ai.adaptation import AdvancedAdaptationService
from contextual_ai.adaptation.models import (
    BehavioralAdaptationRequest,
    LowBandwidthRequest,
    OfflineFirstRequest,
)
from contextual_ai.api_client import ContextualAIClient
from contextual_ai.engines.contextual_engine import ContextualEngine
from contextual_ai.engines.personal_engine import PersonalEngine
from contextual_ai.exceptions import ApiClientError
from contextual_ai.logging_setup import configure_logging

console = Console()

app = typer.Typer(
    help="contextual-ai CLI: context-aware content adaptation for adaptive learning",
    no_args_is_help=True,
)

context_app = typer.Typer(help="Contextual snapshot analysis")
personal_app = typer.Typer(help="Learner snapshot analysis")
adapt_app = typer.Typer(help="Run the adaptation models locally")
remote_app = typer.Typer(help="Call a running contextual-ai API")

app.add_typer(context_app, name="context")
app.add_typer(personal_app, name="personal")
app.add_typer(adapt_app, name="adapt")
app.add_typer(remote_app, name="remote")


def _adaptation_service() -> AdvancedAdaptationService:
    settings = get_settings()
    return AdvancedAdaptationService(
        model_version=settings.adaptation_model_version,
        sync_max_age_hours=settings.offline_sync_max_age_hours,
    )


def _fail(message: str) -> NoReturn:
    rprint(f"[red]✗[/red] {escape(message)}")
    raise typer.Exit(code=1)


def _validation_failure(exc: ValidationError) -> NoReturn:
    fields = ", ".join(".".join(str(p) for p in err["loc"]) for err in exc.errors())
    _fail(f"Invalid input: {fields}")


def _print_analysis(title: str, rows: dict[str, Any], recommendations: list[str]) -> None:
    table = Table(title=title)
    table.add_column("Key", style="cyan")
    table.add_column("Value", style="green")
    for key, value in rows.items():
        table.add_row(key, str(value))
    console.print(table)

    if recommendations:
        console.print(Panel("\n".join(f"• {r}" for r in recommendations), title="Recommendations"))


# ========================================
# Top-level commands
# ========================================


@app.command("serve")
def serve(
    host: Optional[str] = typer.Option(None, "--host", help="Bind host (defaults to API_HOST)"),
    port: Optional[int] = typer.Option(None, "--port", "-p", help="Bind port (defaults to API_PORT)"),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes"),
) -> None:
    """Run the API server with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "contextual_ai.api.main:app",
        host=host or settings.api_host,
        port=port or settings.api_port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )


@app.command("info")
def info() -> None:
    """Show current configuration (non-sensitive)."""
    settings = get_settings()

    table = Table(title=f"{settings.app_name} {settings.app_version}")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")

    database = settings.database_url.split("@")[-1] if "@" in settings.database_url else settings.database_url
    table.add_row("Database", database)
    table.add_row("API", f"{settings.api_host}:{settings.api_port}{settings.api_prefix}")
    table.add_row("API client base URL", settings.api_base_url)
    table.add_row("Log level", settings.log_level)
    table.add_row("Model version", settings.adaptation_model_version)
    table.add_row("Offline sync max age (h)", str(settings.offline_sync_max_age_hours))

    console.print(table)


# ========================================
# Engine analysis
# ========================================


@context_app.command("analyze")
def context_analyze(
    offline: bool = typer.Option(False, "--offline", help="Learner has no connection"),
    speed: str = typer.Option("medium", "--speed", help="slow, medium or fast"),
    device: str = typer.Option("mobile", "--device", help="mobile, desktop or tablet"),
    country: str = typer.Option("Nigeria", "--country", help="Learner's country"),
    time_of_day: str = typer.Option("afternoon", "--time", help="morning, afternoon, evening or night"),
) -> None:
    """Analyse a contextual snapshot built from the default one."""
    engine = ContextualEngine()
    current = engine.get_context()

    engine.update_context(
        {
            "connectivity": current.connectivity.model_copy(
                update={"is_online": not offline, "speed": speed, "type": "offline" if offline else current.connectivity.type}
            ),
            "device": current.device.model_copy(update={"type": device}),
            "location": current.location.model_copy(update={"country": country}),
            "environment": current.environment.model_copy(update={"time_of_day": time_of_day}),
        }
    )

    analysis = engine.analyze_context()
    content_format = engine.get_optimal_content_format()
    rows = {
        **{f"adaptation.{k}": v for k, v in analysis.adaptations.items()},
        "constraints": ", ".join(analysis.constraints) or "-",
        "format": f"{content_format.format} / {content_format.size} / {content_format.complexity}",
        "offline mode": engine.should_use_offline_mode(),
        **{f"locale.{k}": v for k, v in engine.get_localized_settings().items()},
    }
    _print_analysis("Context Analysis", rows, analysis.recommendations)


@personal_app.command("analyze")
def personal_analyze(
    style: str = typer.Option("visual", "--style", help="visual, auditory, kinesthetic or reading"),
    pace: str = typer.Option("medium", "--pace", help="slow, medium or fast"),
    attention_span: float = typer.Option(30, "--attention-span", help="Minutes"),
    session_duration: float = typer.Option(45, "--session-duration", help="Average session minutes"),
    completion_rate: float = typer.Option(75, "--completion-rate", help="Percentage 0-100"),
    engagement: str = typer.Option("medium", "--engagement", help="low, medium or high"),
    visual_impairment: bool = typer.Option(False, "--visual-impairment"),
    hearing_impairment: bool = typer.Option(False, "--hearing-impairment"),
) -> None:
    """Analyse a learner snapshot built from the default one."""
    engine = PersonalEngine()
    current = engine.get_personal_data()

    engine.update_personal_data(
        {
            "learning": current.learning.model_copy(
                update={"style": style, "pace": pace, "attention_span": attention_span}
            ),
            "behavior": current.behavior.model_copy(
                update={
                    "session_duration": session_duration,
                    "completion_rate": completion_rate,
                    "engagement_level": engagement,
                }
            ),
            "accessibility": current.accessibility.model_copy(
                update={
                    "visual_impairment": visual_impairment,
                    "hearing_impairment": hearing_impairment,
                }
            ),
        }
    )

    needs = engine.analyze_learning_needs()
    rows = {
        **{f"adaptation.{k}": v for k, v in needs.adaptations.items()},
        "suggestions": ", ".join(needs.content_suggestions) or "-",
        "session duration": engine.get_optimal_session_duration(),
        "difficulty": engine.get_content_difficulty(),
        "immediate feedback": engine.should_provide_immediate_feedback(),
        "preferred format": engine.get_preferred_content_format(),
        "motivation": ", ".join(engine.get_motivational_factors()),
    }
    _print_analysis("Learning Needs", rows, needs.recommendations)


# ========================================
# Local adaptation
# ========================================


@adapt_app.command("offline")
def adapt_offline(
    content: str = typer.Argument(..., help="Content to prepare"),
    content_type: str = typer.Option("text", "--type", help="text, image, video or interactive"),
    priority: str = typer.Option("medium", "--priority", help="high, medium or low"),
    device: str = typer.Option("mobile", "--device", help="mobile, desktop or tablet"),
    storage: float = typer.Option(100, "--storage", help="Available storage in MB"),
    hours_since_sync: Optional[float] = typer.Option(
        None, "--hours-since-sync", help="Hours since the last sync"
    ),
) -> None:
    """Prepare content for offline use."""
    last_sync = None
    if hours_since_sync is not None:
        last_sync = datetime.now(timezone.utc) - timedelta(hours=hours_since_sync)

    try:
        request = OfflineFirstRequest(
            content=content,
            content_type=content_type,
            priority=priority,
            context={"device_type": device, "storage_available": storage, "last_sync_time": last_sync},
        )
    except ValidationError as exc:
        _validation_failure(exc)

    result = _adaptation_service().generate_offline_content(request)
    rprint(f"[bold]Offline content:[/bold] {escape(result.offline_content)}")
    rprint(f"Storage: {result.storage_size:.3f} MB | Sync required: {result.sync_required}")


@adapt_app.command("compress")
def adapt_compress(
    content: str = typer.Argument(..., help="Content to compress"),
    content_type: str = typer.Option("text", "--type", help="text, image, video or interactive"),
    bandwidth: str = typer.Option("slow", "--bandwidth", help="slow, medium or fast"),
) -> None:
    """Compress content for a bandwidth tier."""
    try:
        request = LowBandwidthRequest(content=content, content_type=content_type, bandwidth=bandwidth)
    except ValidationError as exc:
        _validation_failure(exc)

    result = _adaptation_service().compress_content(request)
    rprint(f"[bold]Compressed content:[/bold] {escape(result.compressed_content)}")
    rprint(
        f"Size: {result.original_size:.3f} KB -> {result.compressed_size:.3f} KB "
        f"(ratio {result.compression_ratio}, {result.quality} quality)"
    )


@adapt_app.command("behavior")
def adapt_behavior(
    content: str = typer.Argument(..., help="Content to adapt"),
    user_id: str = typer.Option("cli-user", "--user-id"),
    attention_span: float = typer.Option(30, "--attention-span", help="Minutes"),
    completion_rate: float = typer.Option(75, "--completion-rate", help="Percentage 0-100"),
    interactions: float = typer.Option(5, "--interactions", help="Interactions per session"),
    preferred_format: str = typer.Option("text", "--format", help="text, audio, video or interactive"),
    pace: str = typer.Option("medium", "--pace", help="slow, medium or fast"),
    session_duration: float = typer.Option(30, "--session-duration", help="Minutes"),
    device: str = typer.Option("mobile", "--device"),
    time_of_day: str = typer.Option("afternoon", "--time"),
) -> None:
    """Adapt content to a learner's observed behavior."""
    try:
        request = BehavioralAdaptationRequest(
            user_id=user_id,
            content=content,
            user_behavior={
                "attention_span": attention_span,
                "completion_rate": completion_rate,
                "interaction_frequency": interactions,
                "preferred_format": preferred_format,
                "learning_pace": pace,
            },
            context={
                "device_type": device,
                "session_duration": session_duration,
                "time_of_day": time_of_day,
            },
        )
    except ValidationError as exc:
        _validation_failure(exc)

    result = _adaptation_service().adapt_content(request)
    adaptations = result.adaptations
    rprint(f"[bold]Adapted content:[/bold] {escape(result.adapted_content)}")
    _print_analysis(
        "Behavioral Adaptations",
        {
            "pacing": adaptations.pacing,
            "format": adaptations.format,
            "complexity": adaptations.complexity,
            "engagement": adaptations.engagement,
        },
        result.recommendations,
    )


# ========================================
# Remote API
# ========================================


def _remote_client(url: Optional[str]) -> ContextualAIClient:
    settings = get_settings()
    return ContextualAIClient(url or settings.api_base_url, timeout=settings.api_timeout_seconds)


@remote_app.command("health")
def remote_health(
    url: Optional[str] = typer.Option(None, "--url", help="API base URL (defaults to API_BASE_URL)"),
) -> None:
    """Check that a running API is healthy."""
    try:
        with _remote_client(url) as client:
            health = client.health()
    except ApiClientError as e:
        logger.debug(f"Health check failed: {e}")
        _fail(f"API not available: {e}")

    rprint(f"[green]✓[/green] {health.get('service')} {health.get('version')}: {health.get('status')}")


@remote_app.command("offline")
def remote_offline(
    content: str = typer.Argument(..., help="Content to prepare"),
    content_type: str = typer.Option("text", "--type"),
    priority: str = typer.Option("medium", "--priority"),
    url: Optional[str] = typer.Option(None, "--url", help="API base URL (defaults to API_BASE_URL)"),
) -> None:
    """Prepare content for offline use through a running API."""
    try:
        request = OfflineFirstRequest(content=content, content_type=content_type, priority=priority)
    except ValidationError as exc:
        _validation_failure(exc)

    try:
        with _remote_client(url) as client:
            result = client.generate_offline_content(request)
    except ApiClientError as e:
        _fail(str(e))

    rprint(f"[bold]Offline content:[/bold] {escape(result.offline_content)}")
    rprint(f"Storage: {result.storage_size:.3f} MB | Sync required: {result.sync_required}")


@remote_app.command("compress")
def remote_compress(
    content: str = typer.Argument(..., help="Content to compress"),
    content_type: str = typer.Option("text", "--type"),
    bandwidth: str = typer.Option("slow", "--bandwidth"),
    url: Optional[str] = typer.Option(None, "--url", help="API base URL (defaults to API_BASE_URL)"),
) -> None:
    """Compress content through a running API."""
    try:
        request = LowBandwidthRequest(content=content, content_type=content_type, bandwidth=bandwidth)
    except ValidationError as exc:
        _validation_failure(exc)

    try:
        with _remote_client(url) as client:
            result = client.compress_content(request)
    except ApiClientError as e:
        _fail(str(e))

    rprint(f"[bold]Compressed content:[/bold] {escape(result.compressed_content)}")
    rprint(f"Ratio {result.compression_ratio} ({result.quality} quality)")


def main() -> None:
    """CLI entry point."""
    configure_logging(level="WARNING")
    app()


if __name__ == "__main__":
    main()
