"""Command-line entry point for Stack NT.

With a FILE argument the whole file is parsed and evaluated once. Without
one, an interactive loop collects lines until a blank line, evaluates them
and shows the resulting stack.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from stacknt import __version__
from stacknt.config import get_history_file
from stacknt.errors import StackNTRecursionError
from stacknt.interpreter import Interpreter
from stacknt.types.coerce import describe_stack

log = logging.getLogger(__name__)

BANNER = "Stack NT"
PROMPT = "> "
OPEN_FAILED = "Error! it fault to open the file"


def configure_logging(verbose: int) -> None:
    if verbose <= 0:
        return
    level = logging.DEBUG if verbose > 1 else logging.INFO
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )


def run_file(interp: Interpreter, path: str) -> None:
    """Evaluate a script once. An unreadable file runs as an empty program."""
    try:
        code = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as ex:
        log.info("Could not read %s: %s", path, ex)
        click.echo(OPEN_FAILED, err=True)
        code = ""
    try:
        interp.eval(code)
    except StackNTRecursionError as ex:
        click.echo(f"Error! {ex}", err=True)
        sys.exit(1)


def _enable_history(history_file: Optional[Path]) -> bool:
    """Turn on readline editing for a terminal session; returns True if history should be saved."""
    if not sys.stdin.isatty():
        return False
    try:
        import readline
    except ImportError:
        return False
    if history_file is None:
        return False
    try:
        readline.read_history_file(history_file)
    except FileNotFoundError:
        pass
    except OSError as ex:
        log.info("Could not load history from %s: %s", history_file, ex)
    return True


def _save_history(history_file: Path) -> None:
    import readline
    try:
        readline.write_history_file(history_file)
    except OSError as ex:
        log.info("Could not save history to %s: %s", history_file, ex)


def read_block() -> tuple[str, bool]:
    """Read lines until a blank one. Returns the code and whether input ended."""
    code = ""
    while True:
        try:
            line = input(PROMPT)
        except EOFError:
            click.echo()
            return code, True
        except KeyboardInterrupt:
            click.echo()
            return code, False
        if not line:
            return code, False
        code += f"{line}\n"


def repl(interp: Interpreter, history_file: Optional[Path] = None) -> None:
    click.echo(BANNER)
    save_history = _enable_history(history_file)
    while True:
        code, finished = read_block()
        # Saved before evaluation: `exit` ends the process with no cleanup
        if save_history:
            _save_history(history_file)
        if code or not finished:
            try:
                interp.eval(code)
            except StackNTRecursionError as ex:
                click.echo(f"Error! {ex}", err=True)
            click.echo(f"Stack: {describe_stack(interp.stack)}")
        if finished:
            break


@click.command()
@click.argument("file", required=False)
@click.option("--verbose", "-v", default=0, count=True, help="Log interpreter activity to stderr (-vv for debug).")
@click.version_option(__version__, prog_name=BANNER)
def main(file: Optional[str], verbose: int):
    """Run a Stack NT script, or start the REPL when no FILE is given."""
    configure_logging(verbose)
    interp = Interpreter()
    if file is not None:
        run_file(interp, file)
    else:
        repl(interp, get_history_file())
