"""CLI entry point for license-classifier."""

from __future__ import annotations

import asyncio
import logging
import sys
from pathlib import Path
from typing import Literal, Optional, cast

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from license_classifier import __version__
from license_classifier.analysis.resolver import resolve_license
from license_classifier.config import load_config
from license_classifier.constants import EXIT_ERROR, EXIT_ISSUES, EXIT_SUCCESS
from license_classifier.exceptions import ConfigurationError, LicenseClassifierError
from license_classifier.models.config import ClassifierConfig
from license_classifier.models.scan import ScanOptions, ScanResult, Verbosity
from license_classifier.output.scan_json import ScanJsonFormatter
from license_classifier.output.terminal import TerminalFormatter
from license_classifier.scanner import load_dependencies, run_scan

# Module-level console for consistent output
_console = Console()
# Separate console for errors and logs (writes to stderr)
_error_console = Console(stderr=True)


def _configure_logging(verbosity: Verbosity) -> None:
    """Route package logs to stderr through Rich.

    Args:
        verbosity: DEBUG for verbose runs, WARNING otherwise.
    """
    level = logging.DEBUG if verbosity == Verbosity.VERBOSE else logging.WARNING
    package_logger = logging.getLogger("license_classifier")
    package_logger.handlers.clear()
    package_logger.addHandler(
        RichHandler(console=_error_console, show_path=False, markup=False)
    )
    package_logger.setLevel(level)


@click.group()
@click.version_option(version=__version__)
def main() -> None:
    """License Classifier - Classify dependency licenses by compliance risk.

    Resolves free-form license labels to SPDX identifiers with OSI,
    copyleft and risk information, and recovers missing labels from
    the npm and PyPI registries.

    \b
    Examples:
        license-classifier scan dependencies.json
        license-classifier scan dependencies.json --format json
        license-classifier classify "GPLv3" "Apache 2.0"
    """
    pass


@main.command()
@click.argument(
    "manifest",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["terminal", "json"], case_sensitive=False),
    default="terminal",
    help="Output format for scan results (default: terminal).",
)
@click.option(
    "--output",
    "-o",
    "output_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write JSON report to file instead of stdout.",
)
@click.option(
    "--verbose",
    "-v",
    "verbose_flag",
    is_flag=True,
    default=False,
    help="Show raw labels and debug logging.",
)
@click.option(
    "--quiet",
    "-q",
    "quiet_flag",
    is_flag=True,
    default=False,
    help="Suppress non-essential output.",
)
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to configuration file.",
)
@click.option(
    "--skip-enrichment",
    is_flag=True,
    default=False,
    help="Do not query package registries for missing licenses.",
)
@click.option(
    "--batch-size",
    type=click.IntRange(min=1),
    default=None,
    help="Maximum concurrent registry requests (default: 10).",
)
@click.option(
    "--timeout",
    "request_timeout",
    type=click.FloatRange(min=0, min_open=True),
    default=None,
    help="Per-request registry timeout in seconds (default: 5).",
)
def scan(
    manifest: Path,
    output_format: str,
    output_path: str | None,
    verbose_flag: bool,
    quiet_flag: bool,
    config_path: str | None,
    skip_enrichment: bool,
    batch_size: Optional[int],
    request_timeout: Optional[float],
) -> None:
    """Classify the licenses of dependencies listed in MANIFEST.

    MANIFEST is a JSON list of {name, version, ecosystem, license?}
    records, or an object holding that list under "dependencies".
    Missing npm and pip licenses are looked up in their registries.

    \b
    Examples:
        license-classifier scan deps.json
        license-classifier scan deps.json --format json -o report.json
        license-classifier scan deps.json --skip-enrichment
        license-classifier scan deps.json --batch-size 5 --timeout 2
        license-classifier scan deps.json --config custom-config.yaml
    """
    if verbose_flag and quiet_flag:
        raise click.UsageError("--verbose and --quiet are mutually exclusive.")

    if quiet_flag:
        verbosity = Verbosity.QUIET
    elif verbose_flag:
        verbosity = Verbosity.VERBOSE
    else:
        verbosity = Verbosity.NORMAL

    _configure_logging(verbosity)

    format_value = cast(Literal["terminal", "json"], output_format.lower())
    options = ScanOptions(format=format_value, verbosity=verbosity)

    try:
        config = _apply_cli_overrides(
            load_config(config_path), skip_enrichment, batch_size, request_timeout
        )
        dependencies = load_dependencies(manifest)

        show_status = (
            options.format == "terminal"
            and options.verbosity != Verbosity.QUIET
            and not config.skip_enrichment
        )
        if show_status:
            with _console.status("Looking up missing licenses..."):
                result = asyncio.run(run_scan(dependencies, config))
        else:
            result = asyncio.run(run_scan(dependencies, config))

        _display_result(result, options, output_path)

        if result.has_issues:
            sys.exit(EXIT_ISSUES)
        sys.exit(EXIT_SUCCESS)

    except LicenseClassifierError as e:
        _display_error(e, options.format)
        sys.exit(EXIT_ERROR)


@main.command()
@click.argument("licenses", nargs=-1, required=True)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["terminal", "json"], case_sensitive=False),
    default="terminal",
    help="Output format (default: terminal).",
)
def classify(licenses: tuple[str, ...], output_format: str) -> None:
    """Classify one or more raw license labels.

    \b
    Examples:
        license-classifier classify MIT
        license-classifier classify "GPLv3" "Apache License 2.0"
        license-classifier classify "Some Custom License" --format json
    """
    labels = list(licenses)
    infos = [resolve_license(label) for label in labels]

    if output_format.lower() == "json":
        click.echo(ScanJsonFormatter().format_license_infos(labels, infos))
    else:
        TerminalFormatter(console=_console).format_license_infos(labels, infos)


def _apply_cli_overrides(
    config: ClassifierConfig,
    skip_enrichment: bool,
    batch_size: Optional[int],
    request_timeout: Optional[float],
) -> ClassifierConfig:
    """Overlay command line options on the loaded configuration.

    Args:
        config: Configuration loaded from file or defaults.
        skip_enrichment: --skip-enrichment flag.
        batch_size: --batch-size value, None when not given.
        request_timeout: --timeout value, None when not given.

    Returns:
        Configuration with command line values taking precedence.
    """
    updates: dict[str, object] = {}
    if skip_enrichment:
        updates["skip_enrichment"] = True
    if batch_size is not None:
        updates["batch_size"] = batch_size
    if request_timeout is not None:
        updates["request_timeout"] = request_timeout
    return config.model_copy(update=updates)


def _write_output_to_file(content: str, path: str) -> None:
    """Write report content to file.

    Args:
        content: The report content to write.
        path: The file path to write to.

    Raises:
        ConfigurationError: If file cannot be written.
    """
    file_path = Path(path)

    try:
        if file_path.exists():
            _error_console.print(
                f"[yellow]Warning: Overwriting existing file: {escape(path)}[/yellow]"
            )
        file_path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise ConfigurationError(f"Cannot write to file '{path}': {e}") from e

    _error_console.print(f"[green]Report written to {escape(path)}[/green]")


def _display_result(
    result: ScanResult, options: ScanOptions, output_path: str | None = None
) -> None:
    """Display scan results in the specified format.

    Args:
        result: The scan result to display.
        options: Scan options including format.
        output_path: Optional file path to write output to.
    """
    if options.format == "terminal" and not output_path:
        TerminalFormatter(
            console=_console, verbosity=options.verbosity
        ).format_scan_result(result)
        return

    # Files always get the JSON report
    content = ScanJsonFormatter().format_scan_result(result)
    if output_path:
        _write_output_to_file(content, output_path)
    else:
        click.echo(content)


def _display_error(error: LicenseClassifierError, format_type: str) -> None:
    """Display error message to user on stderr.

    Args:
        error: The exception that occurred.
        format_type: Output format type for styling.
    """
    error_type = type(error).__name__
    message = f"Error: {error_type}: {error}"

    if format_type == "terminal":
        _error_console.print(f"[red bold]{escape(message)}[/red bold]")
    else:
        click.echo(message, err=True)


if __name__ == "__main__":
    main()
