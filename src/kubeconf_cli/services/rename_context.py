"""The ``config rename-context`` operation.

Runs in three phases: ``complete`` takes the positional arguments,
``validate`` checks them without touching any file, and ``run`` loads the
kubeconfig, renames the context and writes it back.
"""

from __future__ import annotations

from dataclasses import dataclass

from rich.console import Console

from kubeconf_cli.models.exceptions import (
    ContextExistsError,
    ContextNotFoundError,
    NameValidationError,
    UsageError,
)
from kubeconf_cli.services.config_access import ConfigAccess
from kubeconf_cli.utils.logger import get_logger
from kubeconf_cli.utils.ui.console import get_console
from kubeconf_cli.utils.ui.formatters import quote_name

RENAME_CONTEXT_HELP_HINT = (
    "See 'kubeconf config rename-context -h' for help and examples."
)


@dataclass
class RenameContextOptions:
    """Options for renaming a context in a kubeconfig file."""

    config_access: ConfigAccess
    context_name: str = ""
    new_name: str = ""

    def complete(self, args: list[str]) -> None:
        """Assign the old and new names from exactly two positional args."""
        if len(args) != 2:
            raise UsageError(args, help_hint=RENAME_CONTEXT_HELP_HINT)

        self.context_name, self.new_name = args

    def validate(self) -> None:
        if not self.new_name:
            raise NameValidationError("You must specify a new non-empty context name")

    def run(self, console: Console | None = None) -> None:
        """Rename the context and persist the kubeconfig.

        Raises:
            ContextNotFoundError: If ``context_name`` is not in the kubeconfig
            ContextExistsError: If ``new_name`` is already in the kubeconfig
            ConfigIOError: If the kubeconfig cannot be loaded or written
        """
        config = self.config_access.get_starting_config()

        config_file = self.config_access.get_default_filename()
        if self.config_access.is_explicit_file():
            config_file = self.config_access.get_explicit_file()

        if self.context_name not in config.contexts:
            raise ContextNotFoundError.for_rename(self.context_name, config_file)

        # Also covers renaming a context to its own name
        if self.new_name in config.contexts:
            raise ContextExistsError(self.context_name, self.new_name, config_file)

        config.rename_context(self.context_name, self.new_name)
        self.config_access.modify_config(config)

        get_logger("rename_context").info(
            "renamed context %r to %r in %s",
            self.context_name,
            self.new_name,
            config_file,
        )

        console = console or get_console()
        console.print(
            f"Context {quote_name(self.context_name)} renamed to "
            f"{quote_name(self.new_name)}.",
            markup=False,
            highlight=False,
            emoji=False,
        )
