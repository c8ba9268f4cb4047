"""Typer application wiring for the Cicero CLI."""

from __future__ import annotations

import typer

from cicero.core.exceptions import CiceroError, exception_hint

from ._options import DebugOption, VerboseOption
from .commands import describe, list_fonts, preview, show_settings
from .state import configure_logging, debug_enabled, emit_error, get_cli_state, set_cli_state


app = typer.Typer(
    help="Inspect Unicode characters and the installed fonts that render them.",
    context_settings={"help_option_names": ["--help"]},
    no_args_is_help=True,
)


@app.callback()
def _configure(ctx: typer.Context, verbose: VerboseOption = 0, debug: DebugOption = False) -> None:
    state = set_cli_state(ctx=ctx, verbosity=verbose, debug=debug)
    configure_logging(state)


app.command("describe")(describe)
app.command("fonts")(list_fonts)
app.command("preview")(preview)
app.command("settings")(show_settings)


def main() -> None:
    """Entry point compatible with console scripts."""
    try:
        app()
    except typer.Exit:
        raise
    except KeyboardInterrupt as exc:
        if debug_enabled():
            raise
        emit_error("Operation cancelled by user.", exception=exc)
        raise typer.Exit(code=1) from exc
    except SystemExit:
        raise
    except Exception as exc:
        state = get_cli_state()
        if state.show_tracebacks:
            from rich.traceback import Traceback

            tb = Traceback.from_exception(
                type(exc),
                exc,
                exc.__traceback__,
                show_locals=state.verbosity >= 2,
            )
            state.err_console.print(tb)
        elif isinstance(exc, CiceroError):
            message = str(exc)
            hint = exception_hint(exc)
            if hint and hint not in message:
                message = f"{message} ({hint})"
            emit_error(message, exception=exc)
        else:
            emit_error(str(exc), exception=exc)
        raise typer.Exit(code=1) from exc


__all__ = ["app", "main"]
