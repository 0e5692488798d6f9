"""Command line entry point.

Exit codes:
    0: Success
    1: Anomaly found
    2: Malformed or unreadable capture
"""

import sys

import click

from ..analysis import ViewCaptureAnalyzer
from ..config import AnalyzerSettings
from ..exceptions import AnomalyError, MalformedCaptureError
from ..logging import setup_logging
from ..model import load_capture, validate_capture
from .formatters import format_check_result

# Exit codes
EXIT_SUCCESS = 0
EXIT_ANOMALY_FOUND = 1
EXIT_MALFORMED_CAPTURE = 2


@click.group()
@click.version_option(prog_name="viewcapture-analysis")
@click.pass_context
def main(ctx: click.Context) -> None:
    """Find rendering anomalies in exported view captures."""
    ctx.ensure_object(dict)


@main.command()
@click.argument("capture_path", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--tolerance",
    type=click.FloatRange(0.0, 1.0),
    default=None,
    help="Highest alpha allowed when a view appears or disappears",
)
@click.option(
    "--max-alpha-step",
    type=click.FloatRange(0.0, 1.0, min_open=True),
    default=None,
    help="Also flag alpha changes larger than this between consecutive frames",
)
@click.option("--ignore-class", multiple=True, help="Class name to ignore (repeatable)")
@click.option("--ignore-id", multiple=True, help="Resource id to ignore (repeatable)")
@click.option(
    "--no-reappearance",
    is_flag=True,
    help="Do not flag views that return after missing frames",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
def check(
    capture_path: str,
    tolerance: float | None,
    max_alpha_step: float | None,
    ignore_class: tuple[str, ...],
    ignore_id: tuple[str, ...],
    no_reappearance: bool,
    output_format: str,
    verbose: bool,
) -> None:
    """Analyze a capture and fail on the first anomaly.

    CAPTURE_PATH: Path to the exported capture (JSON)
    """
    setup_logging(level="DEBUG" if verbose else "WARNING", structured=False)

    # Only options given on the command line override environment settings
    overrides: dict = {}
    if ignore_class:
        overrides["ignored_class_names"] = list(ignore_class)
    if ignore_id:
        overrides["ignored_resource_ids"] = list(ignore_id)
    if no_reappearance:
        overrides["flag_reappearance"] = False
    if tolerance is not None:
        overrides["appearance_tolerance"] = tolerance
    if max_alpha_step is not None:
        overrides["max_alpha_step"] = max_alpha_step
    settings = AnalyzerSettings(**overrides)

    window_count = None
    try:
        capture = load_capture(capture_path)
        window_count = len(capture.windows)
        ViewCaptureAnalyzer(settings=settings).analyze(capture)
    except MalformedCaptureError as e:
        _echo_result(capture_path, window_count, e, output_format)
        sys.exit(EXIT_MALFORMED_CAPTURE)
    except AnomalyError as e:
        _echo_result(capture_path, window_count, e, output_format)
        sys.exit(EXIT_ANOMALY_FOUND)

    _echo_result(capture_path, window_count, None, output_format)
    sys.exit(EXIT_SUCCESS)


def _echo_result(capture_path, window_count, error, output_format: str) -> None:
    # Failures go to stderr unless a machine-readable report was asked for
    text = format_check_result(capture_path, window_count, error, output_format)
    click.echo(text, err=error is not None and output_format == "text")


@main.command()
@click.argument("capture_path", type=click.Path(exists=True, dir_okay=False))
@click.option("--verbose", "-v", is_flag=True, help="Show per-window frame counts")
def validate(capture_path: str, verbose: bool) -> None:
    """Check that a capture can be loaded and analyzed.

    CAPTURE_PATH: Path to the exported capture (JSON)
    """
    setup_logging(level="DEBUG" if verbose else "WARNING", structured=False)

    try:
        capture = load_capture(capture_path)
        validate_capture(capture)
    except MalformedCaptureError as e:
        click.echo(f"Malformed capture: {e}", err=True)
        sys.exit(EXIT_MALFORMED_CAPTURE)

    click.echo(f"Capture is valid: {capture_path}")
    if verbose:
        click.echo(f"\nClasses: {len(capture.class_names)}")
        click.echo(f"Windows: {len(capture.windows)}")
        for i, window in enumerate(capture.windows):
            click.echo(f"  - window {i}: {len(window.frames)} frame(s)")
    sys.exit(EXIT_SUCCESS)


if __name__ == "__main__":
    main()
