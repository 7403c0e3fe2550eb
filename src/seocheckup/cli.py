"""Command-line interface for SEO Checkup."""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from seocheckup import __version__
from seocheckup.checkup.engine import handle_request
from seocheckup.checkup.models import CheckupRequest, CheckupResponse, Report
from seocheckup.config.config import Config, load_config
from seocheckup.crawler.http_client import HttpClient
from seocheckup.observability import configure_logging, write_metrics

console = Console()

NOTICE_STYLES = {"success": "green", "info": "blue", "error": "red"}


def _score_style(percentage: int) -> str:
    if percentage >= 80:
        return "green"
    if percentage >= 50:
        return "yellow"
    return "red"


def render_report(report: Report) -> None:
    """Print the report grouped by category, followed by the score and details."""
    for category, results in report.by_category().items():
        table = Table(title=category.value, title_justify="left", show_header=False, expand=True)
        table.add_column("Status", width=2)
        table.add_column("Check", style="cyan")
        table.add_column("Value", style="magenta")
        for result in results:
            table.add_row("✅" if result.passed else "⚠️", result.label, escape(result.value))
        console.print(table)

    details = Table(title="Details", title_justify="left", show_header=False, expand=True)
    details.add_column("Field", style="cyan")
    details.add_column("Value")
    for result in report.details:
        details.add_row(result.label, escape(result.value))
    console.print(details)

    load_time = f"{report.load_time_ms}ms" if report.load_time_ms is not None else "n/a"
    style = _score_style(report.score.percentage)
    console.print(
        Panel.fit(
            f"[bold {style}]{report.score.percentage}%[/bold {style}] "
            f"({report.score.passed}/{report.score.total} checks passed)\n"
            f"URL: {escape(report.url)}\n"
            f"Load time: {load_time}" + ("\n[dim]Preview data[/dim]" if report.preview else ""),
            title="SEO Score",
            border_style=style,
        )
    )


def render_response(response: CheckupResponse, output_format: str) -> None:
    if output_format == "json":
        payload = {
            "notice": {
                "level": response.notice.level,
                "title": response.notice.title,
                "description": response.notice.description,
            },
            "report": response.report.to_dict() if response.report else None,
        }
        click.echo(json.dumps(payload, indent=2, ensure_ascii=False))
        return

    if response.report is not None:
        render_report(response.report)
    style = NOTICE_STYLES.get(response.notice.level, "white")
    console.print(f"[{style}]{escape(response.notice.title)}: {escape(response.notice.description)}[/{style}]")


async def _run_live(url: str, config: Config) -> CheckupResponse:
    async with HttpClient(config.fetch) as client:
        return await handle_request(CheckupRequest(url=url), client, settings=config)


@click.group()
@click.version_option(version=__version__)
@click.option("--config", "-c", type=click.Path(exists=True, dir_okay=False), help="Configuration file path")
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"]),
    help="Logging level (overrides the configuration file)",
)
@click.option(
    "--metrics-file",
    type=click.Path(dir_okay=False, writable=True),
    help="Write Prometheus metrics to this file on exit (node exporter textfile format)",
)
@click.pass_context
def cli(ctx: click.Context, config: Optional[str], log_level: Optional[str], metrics_file: Optional[str]) -> None:
    """SEO Checkup - scan a page's HTML for SEO signals and score it."""
    ctx.ensure_object(dict)
    settings = load_config(Path(config) if config else None)
    if log_level:
        settings.monitoring.log_level = log_level
    configure_logging(settings.monitoring)
    ctx.obj["settings"] = settings
    if metrics_file:
        ctx.call_on_close(lambda: write_metrics(metrics_file))


@cli.command()
@click.argument("url")
@click.option(
    "--format",
    "output_format",
    default="table",
    type=click.Choice(["table", "json"]),
    help="Output format",
)
@click.pass_context
def check(ctx: click.Context, url: str, output_format: str) -> None:
    """Fetch URL and report its SEO checklist."""
    settings: Config = ctx.obj["settings"]
    response = asyncio.run(_run_live(url, settings))
    render_response(response, output_format)
    if not response.ok:
        ctx.exit(1)


@cli.command()
@click.argument("url", required=False, default="")
@click.option(
    "--format",
    "output_format",
    default="table",
    type=click.Choice(["table", "json"]),
    help="Output format",
)
@click.pass_context
def preview(ctx: click.Context, url: str, output_format: str) -> None:
    """Show a sample report without any network access."""
    settings: Config = ctx.obj["settings"]
    response = asyncio.run(handle_request(CheckupRequest(url=url, preview=True), None, settings=settings))
    render_response(response, output_format)


def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
