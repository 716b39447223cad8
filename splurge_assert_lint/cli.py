"""Command-line interface for the assertion linter.

This module defines the public CLI commands of the ``splurge-assert-lint``
application. It uses ``typer`` to expose the program entrypoint while
delegating the work to the programmatic API in
:mod:`splurge_assert_lint.main`, so the same logic can be used from
Python code or the CLI.

Exit codes: ``0`` when no problems were found, ``1`` when diagnostics were
reported or a file could not be linted, ``2`` for usage and
configuration errors.

Copyright (c) 2025 Jim Schilling
This software is released under the MIT License.
"""

import logging
import os

import typer
import yaml

from . import main as main_module
from .cli_helpers import build_config, collect_overrides, setup_logging_with_level
from .context import ConfigManager, LintConfig
from .exceptions import ConfigurationError
from .helpers.path_utils import discover_files
from .reporting import format_diagnostics

app = typer.Typer(
    name="splurge-assert-lint",
    help="Flag raw expressions passed to chai expect/assert in mocha test files",
    add_completion=False,
)

logger = logging.getLogger(__name__)

EXIT_PROBLEMS = 1
EXIT_USAGE = 2


@app.command("lint")
def lint(
    paths: list[str] = typer.Argument(..., help="Test files, directories or glob patterns to lint"),
    skip_skipped: bool | None = typer.Option(
        None,
        "--skip-skipped/--no-skip-skipped",
        help="Ignore assertions in skipped tests (it.skip, xit) and skipped suites",
    ),
    config_file: str | None = typer.Option(
        None, "--config", "-c", help="YAML configuration file (command-line options take precedence)"
    ),
    output_format: str | None = typer.Option(None, "--format", help="Output format: text or json"),
    file_patterns: list[str] | None = typer.Option(
        None, "--file", "-f", help="Glob pattern for files inside directories (repeatable)"
    ),
    recurse: bool | None = typer.Option(None, "--recurse/--no-recurse", help="Recurse into subdirectories"),
    test_names: list[str] | None = typer.Option(None, "--test-name", help="Test function name (repeatable)"),
    suite_names: list[str] | None = typer.Option(None, "--suite-name", help="Suite function name (repeatable)"),
    max_file_size: int | None = typer.Option(None, "--max-file-size", help="Maximum file size in MB (1-100)"),
    fail_fast: bool | None = typer.Option(None, "--fail-fast", help="Stop at the first unreadable file"),
    log_level: str | None = typer.Option(None, "--log-level", help="Logging level (DEBUG, INFO, WARNING, ERROR)"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging output", is_flag=True),
) -> None:
    """Lint JavaScript test files for raw expressions in assertions.

    Examples:
        # Lint a test directory
        splurge-assert-lint lint test/

        # Ignore skipped tests and emit JSON
        splurge-assert-lint lint --skip-skipped --format json test/

        # Use settings from a configuration file
        splurge-assert-lint lint --config assert-lint.yaml test/
    """
    if debug and log_level:
        typer.echo("Error: --debug and --log-level cannot be used together.", err=True)
        raise typer.Exit(code=EXIT_USAGE)

    base_config = LintConfig()
    if config_file is not None:
        config_result = ConfigManager.load_config_from_file(config_file)
        if not config_result.is_success():
            typer.echo(f"Error loading configuration file: {config_result.error}", err=True)
            raise typer.Exit(code=EXIT_USAGE)
        base_config = config_result.unwrap()

    overrides = collect_overrides(
        skip_skipped=skip_skipped,
        output_format=output_format,
        file_patterns=file_patterns,
        recurse_directories=recurse,
        test_names=test_names,
        suite_names=suite_names,
        max_file_size_mb=max_file_size,
        fail_fast=fail_fast,
        log_level="DEBUG" if debug else log_level,
    )
    try:
        config = build_config(base_config, overrides)
    except ConfigurationError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=EXIT_USAGE) from None

    setup_logging_with_level(config.log_level)
    if config_file is not None:
        logger.info("Loaded configuration from: %s", config_file)

    files = discover_files(paths, config.file_patterns, config.recurse_directories, config.exclude_dirs)
    if not files:
        typer.echo("Error: no source files found.", err=True)
        raise typer.Exit(code=EXIT_USAGE)

    result = main_module.lint(files, config)
    if result.is_error():
        typer.echo(f"Error: {result.error}", err=True)
        raise typer.Exit(code=EXIT_PROBLEMS)

    diagnostics = result.unwrap_or([])
    typer.echo(format_diagnostics(diagnostics, config.output_format))
    for warning in result.warnings or []:
        typer.echo(f"Warning: {warning}", err=True)

    if diagnostics or result.is_warning():
        raise typer.Exit(code=EXIT_PROBLEMS)


@app.command("init-config")
def init_config(
    output_file: str = typer.Argument("splurge-assert-lint.yaml", help="Output configuration file"),
    force: bool = typer.Option(False, "--force", help="Overwrite an existing file", is_flag=True),
) -> None:
    """Write a configuration file with every option at its default value."""
    if os.path.exists(output_file) and not force:
        typer.echo(f"Error: {output_file} already exists (use --force to overwrite).", err=True)
        raise typer.Exit(code=EXIT_USAGE)

    header = (
        "# splurge-assert-lint configuration file\n"
        "# Command-line options override the values below.\n"
    )
    try:
        with open(output_file, "w", encoding="utf-8") as f:
            f.write(header)
            yaml.safe_dump(LintConfig().to_dict(), f, default_flow_style=False, sort_keys=False)
    except OSError as e:
        typer.echo(f"Error: failed to create configuration file: {e}", err=True)
        raise typer.Exit(code=EXIT_PROBLEMS) from None

    typer.echo(f"Configuration file created: {output_file}")


@app.command("version")
def version() -> None:
    """Show the version of splurge-assert-lint."""
    from . import __version__

    typer.echo(f"splurge-assert-lint {__version__}")


def main() -> None:
    """Main entry point for the CLI application."""
    app()


if __name__ == "__main__":
    main()
