"""CLI entrypoint for seat-finder — typer app that prints the lowest, highest and missing seat id."""

import logging
import sys
from pathlib import Path

import structlog
import typer

from seat_finder.cli.errors import InputError
from seat_finder.core.errors import SeatFinderError
from seat_finder.seat.application.finder import SeatFinder
from seat_finder.seat.domain.analysis import SeatAnalysis
from seat_finder.seat.infrastructure.file_loader import SeatFileLoader
from seat_finder.seat.infrastructure.observer import StructlogSeatObserver

app = typer.Typer(add_completion=False)

_LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


def _configure_structlog(log_format: str, log_level: str) -> None:
    """Configure structlog to write to stderr in the requested format and level."""
    if log_format == "console":
        renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer()
    elif log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        typer.echo(
            f"Invalid log format: {log_format!r}. Must be 'console' or 'json'.",
            err=True,
        )
        raise typer.Exit(code=1)

    level = _LOG_LEVELS.get(log_level.lower())
    if level is None:
        choices = ", ".join(repr(name) for name in _LOG_LEVELS)
        typer.echo(
            f"Invalid log level: {log_level!r}. Must be one of {choices}.", err=True
        )
        raise typer.Exit(code=1)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def _print_analysis(analysis: SeatAnalysis) -> None:
    typer.echo(f"The lowest seat id is {analysis.lowest}")
    typer.echo(f"The highest seat id is {analysis.highest}")
    typer.echo(f"My seat id is {analysis.missing}")


@app.command()
def run(
    seat_file: Path | None = typer.Argument(
        None, help="Path to a file of seat codes, one per line"
    ),
    log_format: str = typer.Option(
        "console",
        "--log-format",
        help="Log format: 'console' or 'json'",
    ),
    log_level: str = typer.Option(
        "warning",
        "--log-level",
        help="Minimum log level written to stderr",
    ),
) -> None:
    """Decode a seat code file and print the lowest, highest and missing seat id."""
    _configure_structlog(log_format=log_format, log_level=log_level)

    try:
        if seat_file is None:
            raise InputError("filename argument required")

        observer = StructlogSeatObserver()
        finder = SeatFinder(loader=SeatFileLoader(observer=observer), observer=observer)
        analysis = finder.find(path=seat_file)
        _print_analysis(analysis=analysis)

    except KeyboardInterrupt:
        typer.echo("Interrupted.", err=True)
        sys.exit(1)
    except SeatFinderError as exc:
        typer.echo(str(exc), err=True)
        sys.exit(1)
    except Exception as exc:  # noqa: BLE001
        typer.echo(f"Unexpected error: {exc}\nPlease report this bug.", err=True)
        sys.exit(1)


if __name__ == "__main__":
    app()
