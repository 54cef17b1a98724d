from __future__ import annotations

from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from .config import CheckConfig, branch_view
from .errors import CanimergeError
from .evaluator import check_branch
from .logging import log_event, setup_logger
from .repo import current_branch

USAGE = "Usage: canimerge [--debug] [--detail] <--checkout | branchname>"

app = typer.Typer(add_completion=False)
console = Console(stderr=True)


def _resolve_branch(branch: Optional[str], checkout: bool) -> str:
    if checkout:
        return current_branch()
    return branch or ""


@app.command()
def main(
    ctx: typer.Context,
    branch: Optional[str] = typer.Argument(None, help="Branch whose branch-<name> view is checked."),
    detail: bool = typer.Option(False, "--detail", help="Print detailed job status."),
    debug: bool = typer.Option(False, "--debug", help="Print retrieved json (verbose)."),
    checkout: bool = typer.Option(
        False, "--checkout", help="Use the currently checked-out git branch instead of <branch>."
    ),
) -> None:
    """Check that master and a branch are both blue on CI."""
    logger = setup_logger(debug)
    config = CheckConfig(detail=detail, debug=debug)
    try:
        target = _resolve_branch(branch, checkout)
        if not target:
            console.print(USAGE, markup=False, highlight=False, soft_wrap=True)
            typer.echo(ctx.get_help())
            raise typer.Exit(code=0)

        log_event(logger, "run_started", {"branch": target, "detail": detail, "debug": debug})
        check_branch(config.master_view, config.master_display, config)
        if detail:
            typer.echo("")
        check_branch(branch_view(config, target), target, config)
        if detail:
            typer.echo("")
    except CanimergeError as exc:
        log_event(logger, "run_failed", {"error": str(exc)})
        console.print(f"[red]Error:[/red] {escape(str(exc))}", highlight=False, soft_wrap=True)
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
