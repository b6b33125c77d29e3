"""CLI entry point - command definitions using Click.

Commands:
    init       Generate a template config file
    annotate   Turn detekt XML reports into review annotations (JSON or
               GitHub Actions workflow commands)
"""

import functools
import json
import os
import sys
from datetime import datetime, timezone
from typing import Any

import click

from danger_detekt import __version__


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _verbose(ctx: click.Context, message: str) -> None:
    if ctx.obj["verbose"]:
        click.echo(f"[verbose] {message}", err=True)


def _resolve_reports(ctx: click.Context, reports: tuple[str, ...]):
    """Return (report paths, config or None). Config is only read when no paths are given."""
    if reports:
        return list(reports), None

    from danger_detekt.config import load

    config = load(ctx.obj["config_path"])
    _verbose(ctx, f"Loaded {len(config.reports)} report path(s) from '{ctx.obj['config_path']}'")
    return config.reports, config


def _emit_json(data: Any, output_path: str | None, pretty: bool) -> None:
    """Write JSON to stdout or to *output_path*."""
    indent = 2 if pretty else None
    text = json.dumps(data, indent=indent, ensure_ascii=False)

    if output_path:
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(text)
        click.echo(f"Annotations written to '{output_path}'", err=True)
    else:
        click.echo(text)


def _handle_errors(func):
    """Decorator that turns plugin and config exceptions into a clean exit."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        from danger_detekt.config import ConfigError
        from danger_detekt.parser import DetektError, MalformedReportError

        try:
            return func(*args, **kwargs)
        except ConfigError as exc:
            click.echo(f"Configuration error: {exc}", err=True)
            sys.exit(1)
        except MalformedReportError as exc:
            click.echo(f"Malformed report: {exc}", err=True)
            sys.exit(1)
        except DetektError as exc:
            click.echo(f"Plugin error: {exc}", err=True)
            sys.exit(1)
        except OSError as exc:
            click.echo(f"Cannot read report: {exc}", err=True)
            sys.exit(1)

    return wrapper


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------

@click.group()
@click.option("--config", "config_path", default="detekt-config.yaml", show_default=True,
              help="Path to the configuration file.")
@click.option("--verbose", is_flag=True, default=False,
              help="Enable verbose logging.")
@click.version_option(__version__, prog_name="danger-detekt")
@click.pass_context
def cli(ctx: click.Context, config_path: str, verbose: bool) -> None:
    """Post detekt findings as inline review annotations."""
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path
    ctx.obj["verbose"] = verbose


# ---------------------------------------------------------------------------
# init
# ---------------------------------------------------------------------------

@cli.command("init")
@click.option("--output", "output_path", default="detekt-config.yaml", show_default=True,
              help="Path where the template config file will be written.")
def init_command(output_path: str) -> None:
    """Generate a template detekt-config.yaml file."""
    from danger_detekt.config import ConfigError, generate_template
    try:
        generate_template(output_path)
        click.echo(f"Template written to '{output_path}'.")
        click.echo("Edit it with the paths of your detekt XML reports.")
    except ConfigError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)


# ---------------------------------------------------------------------------
# annotate
# ---------------------------------------------------------------------------

@cli.command("annotate")
@click.argument("reports", nargs=-1, type=click.Path(dir_okay=False))
@click.option("--base-dir", default=None,
              help="Directory paths are made relative to (default: current directory).")
@click.option("--format", "fmt", type=click.Choice(["json", "github"]), default=None,
              help="Output format (overrides config; default: json).")
@click.option("--output", "output_path", default=None,
              help="Write JSON output to a file instead of stdout.")
@click.option("--pretty", is_flag=True, default=False,
              help="Pretty-print the JSON output.")
@click.option("--fail-on-issues", is_flag=True, default=False,
              help="Exit with status 2 when at least one issue is reported.")
@click.pass_context
@_handle_errors
def annotate_command(ctx: click.Context, reports: tuple[str, ...], base_dir: str | None,
                     fmt: str | None, output_path: str | None, pretty: bool,
                     fail_on_issues: bool) -> None:
    """Convert detekt XML REPORTS into one annotation per issue."""
    from danger_detekt.plugin import DetektPlugin
    from danger_detekt.reporters import AnnotationCollector, GitHubReporter

    paths, config = _resolve_reports(ctx, reports)
    if config is not None:
        base_dir = base_dir or config.base_dir
        fmt = fmt or config.format
    fmt = fmt or "json"

    plugin = DetektPlugin(base_dir=base_dir)
    _verbose(ctx, f"Dispatching {len(paths)} report(s) as '{fmt}'")

    if fmt == "github":
        reporter = GitHubReporter()
        total = plugin.parse_and_custom_report(reporter, *paths)
    else:
        collector = AnnotationCollector()
        total = plugin.parse_and_custom_report(collector, *paths)
        _emit_json(_build_output(collector, paths, base_dir), output_path, pretty)

    _verbose(ctx, f"{total} issue(s) reported")
    if fail_on_issues and total:
        sys.exit(2)


def _build_output(collector, paths: list[str], base_dir: str | None) -> dict:
    return {
        "report_type":  "detekt_annotations",
        "generated_at": datetime.now(timezone.utc).isoformat(),
        "base_dir":     os.path.abspath(base_dir) if base_dir else os.getcwd(),
        "reports":      [str(p) for p in paths],
        "summary": {
            "total":   len(collector),
            "by_file": collector.by_file(),
        },
        "annotations": [a.to_dict() for a in collector.annotations],
    }
