#!/usr/bin/env python3
"""
encode_base.cli.cli

Typer-based CLI for converting a UTF-8 text file to another encoding.

Examples
--------
Write ``encoded_file.txt`` into a directory:

    encode-base convert notes.txt --to EUC-KR --output-dir out/

Replace the source file in place:

    encode-base convert notes.txt --to SHIFT-JIS --overwrite
"""

from __future__ import annotations

import logging
import traceback
from pathlib import Path

import typer

from encode_base.errors import EncodeBaseError

app = typer.Typer(
    name="encode-base",
    help="Convert a UTF-8 text file to UTF-8, ISO8859-1, EUC-KR or SHIFT-JIS.",
    no_args_is_help=True,
)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _configure_logging(debug: bool, verbose: bool) -> None:
    """Install a stderr log handler when diagnostics were requested."""
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        return
    logging.basicConfig(level=level, format=LOG_FORMAT)


def _print_conversion_error(exc: Exception, debug: bool) -> int:
    """Print a user-friendly conversion error.

    Parameters
    ----------
    exc : Exception
        Exception raised during conversion.
    debug : bool
        Whether to include traceback details.

    Returns
    -------
    int
        Process exit code.
    """
    typer.secho(f"✗ {type(exc).__name__}: {exc}", fg=typer.colors.RED, err=True)
    if debug:
        typer.echo("\nTraceback:", err=True)
        typer.echo("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)), err=True)
    code = getattr(exc, "exit_code", None)
    if isinstance(code, int) and code > 0:
        return code
    return 1


# -----------------------------
# Global options
# -----------------------------
@app.callback()
def _main(
    ctx: typer.Context,
    debug: bool = typer.Option(False, "--debug", help="Show full tracebacks and debug logs."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log conversion steps."),
) -> None:
    """Initialize shared CLI state."""
    _configure_logging(debug, verbose)
    ctx.obj = {"debug": debug}


# -----------------------------
# Commands
# -----------------------------
@app.command("convert")
def convert_cmd(
    ctx: typer.Context,
    source_path: Path = typer.Argument(..., help="UTF-8 text file to convert."),
    target: str = typer.Option(
        "UTF-8",
        "--to",
        "-t",
        envvar="ENCODE_BASE_TARGET",
        help="Target encoding: UTF-8, ISO8859-1, EUC-KR or SHIFT-JIS.",
    ),
    output_dir: Path | None = typer.Option(
        None,
        "--output-dir",
        "-o",
        file_okay=False,
        help="Directory that receives encoded_file.txt.",
    ),
    overwrite: bool = typer.Option(
        False, "--overwrite", help="Replace the source file in place."
    ),
    unmappable: str = typer.Option(
        "replace",
        "--unmappable",
        envvar="ENCODE_BASE_UNMAPPABLE",
        help="Substitution for unencodable characters: replace or xmlcharref.",
    ),
) -> None:
    """Convert one file and report where it was written.

    Parameters
    ----------
    ctx : typer.Context
        Typer context containing global options.
    source_path : Path
        File to read as UTF-8.
    target : str
        Target encoding name or label.
    output_dir : Path | None
        Output directory; mutually exclusive with ``overwrite``.
    overwrite : bool
        Whether to replace the source file.
    """
    debug: bool = bool(ctx.obj.get("debug", False))

    try:
        from encode_base.api import convert_file_detailed

        result = convert_file_detailed(
            source_path,
            target=target,
            output_dir=output_dir,
            overwrite=overwrite,
            unmappable=unmappable,  # type: ignore[arg-type]
        )
    except EncodeBaseError as exc:
        raise typer.Exit(code=_print_conversion_error(exc, debug))
    except Exception as exc:
        raise typer.Exit(code=_print_conversion_error(exc, debug))

    if result.replaced_malformed:
        typer.secho(
            "! Source is not valid UTF-8; malformed bytes were replaced.",
            fg=typer.colors.YELLOW,
            err=True,
        )
    if result.substituted:
        typer.secho(
            f"! Some characters cannot be represented in {result.target.label} "
            "and were substituted.",
            fg=typer.colors.YELLOW,
            err=True,
        )
    typer.echo(f"✓ Saved: {result.output_path}")


@app.command("encodings")
def encodings_cmd() -> None:
    """List supported target encodings."""
    from encode_base.catalog import supported_encodings

    for spec in supported_encodings():
        typer.echo(f"{spec.label:<10} {spec.selector.name:<10} codec={spec.codec}")


if __name__ == "__main__":
    app()
