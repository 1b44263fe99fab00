"""Main entry point for kubeconf."""

from typing import Optional

import typer

from kubeconf_cli import __version__
from kubeconf_cli.commands import config
from kubeconf_cli.services.config_access import ConfigAccess, PathOptions
from kubeconf_cli.utils.typer_helpers import SuggestingGroup
from kubeconf_cli.utils.ui.console import get_console

app = typer.Typer(
    name="kubeconf",
    cls=SuggestingGroup,
    help="Manage contexts in kubeconfig files",
    no_args_is_help=True,
    context_settings=config.CONTEXT_SETTINGS,
)

console = get_console()

app.add_typer(config.app, name="config", help="Modify kubeconfig files")


@app.callback()
def main_callback(
    ctx: typer.Context,
    kubeconfig: Optional[str] = typer.Option(
        None,
        "--kubeconfig",
        help="Path to the kubeconfig file to use (overrides $KUBECONFIG)",
        show_default=False,
    ),
) -> None:
    """Set up the kubeconfig accessor shared by all commands."""
    if kubeconfig is None and isinstance(ctx.obj, ConfigAccess):
        # Injected by the caller (tests, embedding applications)
        return
    ctx.obj = PathOptions(explicit_path=kubeconfig)


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]kubeconf[/bold] version [cyan]{__version__}[/cyan]")


def main() -> None:
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
