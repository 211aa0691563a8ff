"""
Top-level CLI: copy standard input into the file named on the command line.
"""

import logging
import sys
from typing import NoReturn, Optional

import typer
from pydantic import ValidationError
from rich.console import Console

from pipewrite.capture.capture_manager import CaptureManager
from pipewrite.capture.exceptions import InputReadError, OutputWriteError
from pipewrite.core.config import get_settings

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="Copy standard input into a file",
    add_completion=False,
)


def _err_console() -> Console:
    # Built per call so it follows whatever sys.stderr currently is
    return Console(
        stderr=True, markup=False, emoji=False, highlight=False, soft_wrap=True
    )


def _fail(*lines: str) -> NoReturn:
    """Print lines to stderr and exit with code 1."""
    console = _err_console()
    for line in lines:
        console.print(line, style="bold red")
    raise typer.Exit(code=1)


@app.command(
    context_settings={"allow_extra_args": True, "ignore_unknown_options": True}
)
def write(
    ctx: typer.Context,
    filename: Optional[str] = typer.Argument(
        None,
        metavar="FILENAME",
        help="File to create or overwrite with the content of stdin",
        show_default=False,
    ),
):
    """
    Read all of standard input and write it to FILENAME.

    Prints the created path and its size in bytes. Any failure exits with code 1.
    """
    if filename is None:
        _fail(
            f"Usage: {ctx.info_name or 'pipewrite'} <filename>",
            "Content will be read from stdin",
        )

    if ctx.args:
        logger.debug("Ignoring extra arguments: %s", ctx.args)

    try:
        settings = get_settings()
    except ValidationError as e:
        _fail(f"Error: invalid configuration: {e}")

    try:
        result = CaptureManager.capture(filename, sys.stdin, settings.encoding)
    except InputReadError as e:
        _fail(f"Error reading stdin: {e}")
    except OutputWriteError as e:
        _fail(f"Error writing file: {e}")

    typer.echo(result.summary())


def main():
    try:
        level = get_settings().log_level
    except ValidationError:
        # Reported by the command itself
        level = "WARNING"
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s - %(message)s"
    )
    app()


if __name__ == "__main__":
    main()
