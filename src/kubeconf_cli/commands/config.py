"""Kubeconfig management commands (``kubeconf config ...``)."""

from __future__ import annotations

from enum import Enum
from typing import Optional

import typer

from kubeconf_cli.services.config_access import ConfigAccess, PathOptions
from kubeconf_cli.services.context_service import ContextService
from kubeconf_cli.services.rename_context import RenameContextOptions
from kubeconf_cli.utils.typer_helpers import SuggestingGroup
from kubeconf_cli.utils.ui.console import get_console
from kubeconf_cli.utils.ui.formatters import (
    format_output,
    format_table,
    format_warning,
)

from .decorators import command_wrapper

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}

app = typer.Typer(
    cls=SuggestingGroup,
    help="Modify kubeconfig files",
    no_args_is_help=True,
    context_settings=CONTEXT_SETTINGS,
)
console = get_console()


class OutputFormat(str, Enum):
    TABLE = "table"
    NAME = "name"
    JSON = "json"
    YAML = "yaml"


def get_config_access(ctx: typer.Context) -> ConfigAccess:
    """Return the ConfigAccess set up by the root callback.

    Falls back to the default loading rules when the group runs on its own.
    """
    if isinstance(ctx.obj, ConfigAccess):
        return ctx.obj
    return PathOptions()


@app.command(
    "rename-context",
    epilog=(
        "Example: rename the context 'old-name' to 'new-name' in your kubeconfig "
        "file:  kubeconf config rename-context old-name new-name"
    ),
)
@command_wrapper
def rename_context(
    ctx: typer.Context,
    args: Optional[list[str]] = typer.Argument(
        None, metavar="CONTEXT_NAME NEW_NAME", show_default=False
    ),
) -> None:
    """Renames a context from the kubeconfig file.

    CONTEXT_NAME is the context name that you wish to change.

    NEW_NAME is the new name you wish to set.

    Note: In case the context being renamed is the 'current-context', this
    field will also be updated.
    """
    options = RenameContextOptions(config_access=get_config_access(ctx))
    options.complete(args or [])
    options.validate()
    options.run(console)


@app.command("get-contexts")
@command_wrapper
def get_contexts(
    ctx: typer.Context,
    names: Optional[list[str]] = typer.Argument(
        None, metavar="[NAME]...", show_default=False
    ),
    output: OutputFormat = typer.Option(
        OutputFormat.TABLE, "--output", "-o", help="Output format"
    ),
) -> None:
    """Describe one or many contexts."""
    service = ContextService(get_config_access(ctx))
    config = service.load()
    contexts = service.list_contexts(names, config=config)

    if output == OutputFormat.NAME:
        for name in contexts:
            console.print(name, markup=False, highlight=False, emoji=False)
    elif output in (OutputFormat.JSON, OutputFormat.YAML):
        data = {
            name: record.model_dump(by_alias=True, exclude_none=True)
            for name, record in contexts.items()
        }
        format_output(data, output.value)
    elif not contexts:
        format_warning("No contexts configured")
    else:
        rows = [
            [
                "*" if name == config.current_context else "",
                name,
                record.cluster,
                record.user,
                record.namespace or "",
            ]
            for name, record in contexts.items()
        ]
        format_table(["CURRENT", "NAME", "CLUSTER", "AUTHINFO", "NAMESPACE"], rows)


@app.command("current-context")
@command_wrapper
def current_context(ctx: typer.Context) -> None:
    """Display the current-context."""
    name = ContextService(get_config_access(ctx)).current_context()
    console.print(name, markup=False, highlight=False, emoji=False)
