"""Command-line entry point for decadesort."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from decadesort.config import Settings
from decadesort.errors import ConfigError, ReportWriteError
from decadesort.library import LibraryXmlLoader
from decadesort.logger import setup_logger
from decadesort.report import decade_summary, group_by_decade, render_csv, write_report


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--library",
    "library_path",
    type=click.Path(path_type=Path),
    default=None,
    help="Exported Library.xml to read.",
)
@click.option(
    "--output",
    "output_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="CSV file to write.",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, exists=True, dir_okay=False, readable=True),
    default=None,
    help="TOML settings file with library_path, output_path and log_file.",
)
@click.option(
    "--log-file",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Also write a debug log to this file.",
)
@click.option("-v", "--verbose", is_flag=True, help="Show debug output, including dropped entries.")
@click.option("-q", "--quiet", is_flag=True, help="Only show warnings and errors.")
@click.option(
    "--stdout",
    "to_stdout",
    is_flag=True,
    help="Print the CSV instead of writing it to the output file.",
)
def main(
    library_path: Path | None,
    output_path: Path | None,
    config_path: Path | None,
    log_file: Path | None,
    verbose: bool,
    quiet: bool,
    to_stdout: bool,
) -> None:
    """Sort an exported music library into a CSV grouped by decade."""
    if verbose and quiet:
        raise click.UsageError("--verbose and --quiet cannot be combined.")

    settings = Settings.defaults()
    if config_path is not None:
        try:
            settings = Settings.from_toml(config_path, base=settings)
        except ConfigError as exc:
            raise click.BadParameter(str(exc), param_hint="--config") from exc
    settings = settings.override(
        library_path=library_path, output_path=output_path, log_file=log_file
    )

    console_level = logging.DEBUG if verbose else logging.WARNING if quiet else logging.INFO
    logger = setup_logger(log_file=settings.log_file, console_level=console_level)
    logger.debug("Reading %s", settings.library_path)

    _echo("Starting Music Library Sorter...", quiet)

    loader = LibraryXmlLoader(settings.library_path)
    tracks = loader.load_tracks()
    _echo(f"Fetched {len(tracks)} tracks from XML.", quiet)
    if loader.dropped_count:
        logger.info("Skipped %d entries without a name or artist", loader.dropped_count)

    groups = group_by_decade(tracks)
    _echo(f"Sorted tracks into {len(groups)} decades.", quiet)
    for label, count in decade_summary(groups):
        logger.debug("%s: %d tracks", label, count)

    report = render_csv(tracks)
    if to_stdout:
        click.echo(report, nl=False)
        return

    try:
        destination = write_report(report, settings.output_path)
    except ReportWriteError as exc:
        click.echo(f"Failed to write CSV file: {exc}", err=True)
        raise SystemExit(1) from exc

    _echo(f"Sorted music saved to CSV: {destination}", quiet)


def _echo(message: str, quiet: bool) -> None:
    if not quiet:
        click.echo(message, err=True)


if __name__ == "__main__":
    main()
