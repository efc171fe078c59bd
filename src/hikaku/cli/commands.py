from __future__ import annotations

from pathlib import Path
from typing import NoReturn

import typer

from hikaku.config import DiffConfig, ExportConfig, load_config_file
from hikaku.constants import EXIT_FAILURE, EXIT_SUCCESS
from hikaku.diff.models import TreeDiffResult
from hikaku.diff.values import NumberPolicy
from hikaku.diff.walker import iter_tree_diff
from hikaku.export.exporter import run_export
from hikaku.logging import configure_logging, get_logger
from hikaku.report import render_file_comparison, render_summary, write_json_report

logger = get_logger(__name__)


def _version_callback(value: bool) -> None:
    if value:
        from hikaku import __version__

        typer.echo(f"hikaku {__version__}")
        raise typer.Exit()


def _usage_error(ctx: typer.Context, message: str) -> NoReturn:
    typer.echo(f"ERROR: {message}", err=True)
    typer.echo(ctx.get_usage(), err=True)
    raise typer.Exit(EXIT_FAILURE)


def _fail(message: str) -> NoReturn:
    typer.echo(f"ERROR: {message}", err=True)
    raise typer.Exit(EXIT_FAILURE)


def export(
    ctx: typer.Context,
    label: str | None = typer.Option(None, "--label", help="Environment label (local, production, development)"),
    api: str | None = typer.Option(None, "--api", help="API to export: university | major"),
    api_host: str | None = typer.Option(None, "--api-host", "--apiHost", help="API host, e.g. http://localhost:8081"),
    csv_file: Path | None = typer.Option(None, "--csv", help="CSV file listing slugs (and major codes)"),
    access_token: str | None = typer.Option(
        None,
        "--access-token",
        "--accessToken",
        help="Bearer token; falls back to GET_JSON_ACCESS_TOKEN.",
    ),
    export_folder: Path | None = typer.Option(
        None, "--export-folder", "--exportFolder", help="Existing folder that receives the export"
    ),
    timeout: float | None = typer.Option(None, "--timeout", help="Per-request timeout in seconds"),
    config_file: Path | None = typer.Option(None, "--config", help="YAML file with default option values"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output."),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only log warnings and errors."),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Print version and exit."
    ),
) -> None:
    """Fetch university or major JSON listed in a CSV file and write it under the export folder."""
    configure_logging(verbose=verbose, quiet=quiet)
    try:
        file_values = load_config_file(config_file)
        config = ExportConfig.resolve(
            {
                "label": label,
                "api": api,
                "api_host": api_host,
                "csv": str(csv_file) if csv_file is not None else None,
                "access_token": access_token,
                "export_folder": str(export_folder) if export_folder is not None else None,
                "timeout_seconds": timeout,
            },
            file_values,
        )
    except ValueError as exc:
        _usage_error(ctx, str(exc))

    try:
        config.validate_paths()
    except ValueError as exc:
        _fail(str(exc))

    outcome = run_export(config)
    typer.echo(
        f"Exported {len(outcome.written)}/{outcome.processed} item(s) to {config.output_root}; "
        f"{len(outcome.errors)} error(s)"
    )
    raise typer.Exit(outcome.exit_code)


def diff(
    ctx: typer.Context,
    dir_a: Path | None = typer.Option(None, "--dirA", "--dir-a", help="Left directory (dirA)"),
    dir_b: Path | None = typer.Option(None, "--dirB", "--dir-b", help="Right directory (dirB)"),
    epsilon: float | None = typer.Option(
        None,
        "--epsilon",
        help="Numeric tolerance; 0 (default) compares numbers exactly.",
    ),
    json_output: Path | None = typer.Option(None, "--json-output", help="Also write a JSON report to this path"),
    fail_on_diff: bool = typer.Option(
        False, "--fail-on-diff", help="Exit 1 when any difference, missing file, or load error is found."
    ),
    config_file: Path | None = typer.Option(None, "--config", help="YAML file with default option values"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output."),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only log warnings and errors."),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Print version and exit."
    ),
) -> None:
    """Compare every JSON file under dirA with its counterpart under dirB."""
    configure_logging(verbose=verbose, quiet=quiet)
    try:
        file_values = load_config_file(config_file)
        config = DiffConfig.resolve(
            {
                "dir_a": str(dir_a) if dir_a is not None else None,
                "dir_b": str(dir_b) if dir_b is not None else None,
                "epsilon": epsilon,
            },
            file_values,
        )
        policy = NumberPolicy(epsilon=config.epsilon)
    except ValueError as exc:
        _usage_error(ctx, str(exc))

    try:
        config.validate_paths()
    except ValueError as exc:
        _fail(str(exc))

    result = TreeDiffResult(left_root=str(config.dir_a), right_root=str(config.dir_b), epsilon=policy.epsilon)
    for comparison in iter_tree_diff(config.dir_a, config.dir_b, policy):
        result.files.append(comparison)
        text = render_file_comparison(comparison)
        if text:
            typer.echo(text)

    logger.info(render_summary(result))
    if json_output is not None:
        try:
            write_json_report(result, json_output)
        except OSError as exc:
            _fail(f"Failed to write JSON report {json_output}: {exc}")
        logger.info("JSON report: %s", json_output)

    if fail_on_diff and result.has_differences:
        raise typer.Exit(EXIT_FAILURE)
    raise typer.Exit(EXIT_SUCCESS)


app = typer.Typer(add_completion=False, help="Export API JSON and compare exported JSON trees")
app.command("export")(export)
app.command("diff")(diff)

export_app = typer.Typer(add_completion=False, help="Export university/major JSON from the API")
export_app.command()(export)

diff_app = typer.Typer(add_completion=False, help="Compare two directory trees of JSON files")
diff_app.command()(diff)
