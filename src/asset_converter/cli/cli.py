#!/usr/bin/env python3
"""
asset_converter.cli.cli

Typer-based CLI that converts every JPEG/PNG under ``assets/`` into WebP and
AVIF siblings using whichever external encoders are installed.

Examples
--------
Convert with default qualities, skipping outputs that already exist:

    convert-assets

Regenerate everything at custom qualities:

    convert-assets --quality-webp 90 --quality-avif 50 --force

List the encoders that would be used:

    convert-assets doctor
"""

from __future__ import annotations

import sys
import traceback

import typer

from asset_converter.errors import AssetConverterError
from asset_converter.schemas import (
    DEFAULT_QUALITY_AVIF,
    DEFAULT_QUALITY_WEBP,
    DEFAULT_ROOT,
)

app = typer.Typer(
    name="convert-assets",
    help="Convert JPEG/PNG assets to WebP and AVIF siblings.",
    invoke_without_command=True,
)


def _print_fatal_error(exc: Exception, debug: bool) -> int:
    """Print a user-friendly fatal error.

    Parameters
    ----------
    exc : Exception
        Exception that aborted the run.
    debug : bool
        Whether to include traceback details.

    Returns
    -------
    int
        Process exit code.
    """
    typer.echo(f"✗ {type(exc).__name__}: {exc}", err=True)
    if debug:
        typer.echo("\nTraceback:", err=True)
        typer.echo("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)), err=True)
    code = getattr(exc, "exit_code", None)
    if isinstance(code, int) and code > 0:
        return code
    return 1


@app.callback()
def _main(
    ctx: typer.Context,
    quality_webp: int = typer.Option(
        DEFAULT_QUALITY_WEBP, "--quality-webp", min=0, max=100, help="WebP quality (0-100)."
    ),
    quality_avif: int = typer.Option(
        DEFAULT_QUALITY_AVIF, "--quality-avif", min=0, max=100, help="AVIF quality (0-100)."
    ),
    force: bool = typer.Option(
        False, "--force", help="Regenerate outputs that already exist."
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Log encoder command lines."),
    debug: bool = typer.Option(False, "--debug", help="Show full tracebacks on error."),
) -> None:
    """Convert every image under ./assets, or run a subcommand.

    Parameters
    ----------
    ctx : typer.Context
        Typer context; conversion only runs when no subcommand is given.
    quality_webp : int, default=80
        Quality passed to the WebP encoder.
    quality_avif : int, default=60
        Quality passed to the AVIF encoder.
    force : bool, default=False
        Whether existing outputs are regenerated.

    Notes
    -----
    - Per-file encoder failures are logged as warnings and do not change
      the exit code.
    - Missing encoders are reported once; affected formats are skipped.
    """
    from asset_converter.logging_setup import configure_logging

    configure_logging(verbose)
    ctx.obj = {"debug": debug}
    if ctx.invoked_subcommand is not None:
        return

    try:
        from asset_converter.application import build_conversion_options, convert_tree

        options = build_conversion_options(
            quality_webp=quality_webp,
            quality_avif=quality_avif,
            force=force,
        )
        summary = convert_tree(DEFAULT_ROOT, options)
    except AssetConverterError as exc:
        raise typer.Exit(code=_print_fatal_error(exc, debug))
    except Exception as exc:
        raise typer.Exit(code=_print_fatal_error(exc, debug))

    if summary.files == 0:
        typer.echo(f"No images found under {DEFAULT_ROOT}.")
        return
    typer.echo(
        f"✓ Processed {summary.files} image(s): {summary.converted} converted, "
        f"{summary.skipped} skipped, {summary.failed} failed."
    )


@app.command("doctor")
def doctor_cmd() -> None:
    """Print Python version and external encoder availability."""
    from asset_converter.adapters.tools import (
        AVIF_TOOL,
        UNIFIED_TOOL,
        WEBP_TOOL,
        ShutilToolLocator,
    )

    locator = ShutilToolLocator()
    typer.echo(f"Python: {sys.version.split()[0]}")
    for label, name in (
        ("unified", UNIFIED_TOOL),
        ("webp", WEBP_TOOL),
        ("avif", AVIF_TOOL),
    ):
        resolved = locator.which(name)
        typer.echo(f"{label} ({name}): {resolved or '<not found>'}")


if __name__ == "__main__":
    app()
