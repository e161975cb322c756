"""CLI interface for Ad Assistant."""
import asyncio
import json
import logging
from pathlib import Path
from typing import Optional

import typer

from ..config.settings import AppSettings, ConfigurationError, load_overrides

app = typer.Typer(help="Ad Assistant - ad copy, performance analysis and negative keywords from keyword lists")

logger = logging.getLogger(__name__)

EXIT_NO_RESULT = 1
EXIT_CONFIG = 2


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )


def _load_settings(config: Optional[str]) -> AppSettings:
    """Read settings from the environment (+ optional file); exit on a config fault."""
    try:
        settings = AppSettings.from_env()
        settings = settings.with_overrides(load_overrides(config))
    except ConfigurationError as e:
        typer.echo(f"Configuration error: {e}", err=True)
        raise typer.Exit(code=EXIT_CONFIG)
    _configure_logging(settings.log_level)
    return settings


def _context(settings: AppSettings):
    from adcore.providers.audit import AuditLogger
    from adcore.providers.base import LLMConfigError
    from adcore.providers.registry import get_provider
    from ..tasks.runner import TaskContext

    try:
        provider = get_provider(settings.api_key, settings.model)
    except LLMConfigError as e:
        typer.echo(f"Configuration error: {e}", err=True)
        raise typer.Exit(code=EXIT_CONFIG)
    return TaskContext.from_settings(settings, provider, audit=AuditLogger())


def _require(**inputs: str) -> None:
    from ..tasks.runner import blank_fields

    missing = blank_fields(**inputs)
    if missing:
        typer.echo(f"Missing input: {', '.join(missing)}", err=True)
        raise typer.Exit(code=EXIT_NO_RESULT)


def _write_or_echo(text: str, output: Optional[str]) -> None:
    if output:
        Path(output).write_text(text, encoding="utf-8")
        typer.echo(f"Saved to {output}")
    else:
        typer.echo(text)


@app.command("ad-copy")
def ad_copy(
    keywords: str = typer.Argument(..., help="Target keywords (free text)"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="YAML/JSON config file"),
    as_json: bool = typer.Option(False, "--json", help="Print raw JSON instead of text"),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Write result to file"),
):
    """Generate headlines, long headlines and descriptions."""
    from ..export.formatters import ad_copy_to_text
    from ..tasks.runner import generate_ad_copy

    _require(keywords=keywords)
    ctx = _context(_load_settings(config))
    result = asyncio.run(generate_ad_copy(ctx, keywords))
    if result is None:
        typer.echo("Failed to generate ad copy. The response was empty or invalid.", err=True)
        raise typer.Exit(code=EXIT_NO_RESULT)

    if as_json:
        text = json.dumps(result.model_dump(by_alias=True), ensure_ascii=False, indent=2)
    else:
        text = ad_copy_to_text(result)
    _write_or_echo(text, output)


@app.command()
def analyze(
    keywords: str = typer.Argument(..., help="Campaign keywords"),
    ad_copy: str = typer.Option(..., "--ad-copy", "-a", help="Existing ad copy (headlines and descriptions)"),
    url: str = typer.Option(..., "--url", "-u", help="Landing page URL"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="YAML/JSON config file"),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Write report to file"),
):
    """Analyze Quality Score / Ad Rank potential of a campaign."""
    from ..export.formatters import analysis_to_report
    from ..tasks.runner import analyze_performance

    _require(keywords=keywords, ad_copy=ad_copy, landing_page_url=url)
    ctx = _context(_load_settings(config))
    result = asyncio.run(analyze_performance(ctx, keywords, ad_copy, url))
    if result is None:
        typer.echo("Failed to analyze performance. The response was empty or invalid.", err=True)
        raise typer.Exit(code=EXIT_NO_RESULT)
    _write_or_echo(analysis_to_report(result, keywords, url), output)


@app.command()
def negatives(
    keywords: str = typer.Argument(..., help="Primary keywords"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="YAML/JSON config file"),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Write CSV to file"),
):
    """Suggest negative keywords as CSV."""
    from ..export.formatters import negative_keywords_to_csv
    from ..tasks.runner import find_negative_keywords

    _require(keywords=keywords)
    ctx = _context(_load_settings(config))
    result = asyncio.run(find_negative_keywords(ctx, keywords))
    if result is None:
        typer.echo("Failed to find negative keywords. The response was empty or invalid.", err=True)
        raise typer.Exit(code=EXIT_NO_RESULT)
    _write_or_echo(negative_keywords_to_csv(result), output)


@app.command()
def models():
    """List supported Gemini models."""
    from adcore.providers.registry import get_model_catalog

    for m in get_model_catalog():
        typer.echo(f"{m['model_id']:<24} {m['tier']:<9} {m['description']}")


def main():
    app()


if __name__ == "__main__":
    main()
