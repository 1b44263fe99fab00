"""Typed errors raised by kubeconf operations.

Each error carries an ``ErrorKind`` and the exit code the CLI should use,
so callers branch on the type or kind rather than on message text.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from kubeconf_cli.utils.exit_codes import (
    ERROR_CONFLICT,
    ERROR_GENERAL,
    ERROR_INVALID_ARGS,
    ERROR_NOT_FOUND,
    ERROR_PERMISSION_DENIED,
)
from kubeconf_cli.utils.ui.formatters import quote_name


class ErrorKind(str, Enum):
    """Category of a kubeconf failure."""

    USAGE = "usage"
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    COLLISION = "collision"
    IO = "io"


class KubeconfError(Exception):
    """Base exception for all kubeconf errors."""

    kind: ErrorKind = ErrorKind.IO
    exit_code: int = ERROR_GENERAL

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class UsageError(KubeconfError):
    """Raised when a command receives the wrong positional arguments."""

    kind = ErrorKind.USAGE
    exit_code = ERROR_INVALID_ARGS

    def __init__(self, arguments: list[str], help_hint: str | None = None):
        super().__init__(f"Unexpected args: [{' '.join(arguments)}]")
        self.arguments = list(arguments)
        self.help_hint = help_hint


class NameValidationError(KubeconfError):
    """Raised when a supplied name is not acceptable."""

    kind = ErrorKind.VALIDATION
    exit_code = ERROR_INVALID_ARGS


class ContextNotFoundError(KubeconfError):
    """Raised when a context name is not present in the kubeconfig."""

    kind = ErrorKind.NOT_FOUND
    exit_code = ERROR_NOT_FOUND

    def __init__(self, message: str, context_name: str, path: Path | None = None):
        super().__init__(message)
        self.context_name = context_name
        self.path = path

    @classmethod
    def for_rename(cls, context_name: str, path: Path) -> ContextNotFoundError:
        return cls(
            f"cannot rename the context {quote_name(context_name)}, it's not in {path}",
            context_name,
            path,
        )


class ContextExistsError(KubeconfError):
    """Raised when a rename target already names a context."""

    kind = ErrorKind.COLLISION
    exit_code = ERROR_CONFLICT

    def __init__(self, context_name: str, new_name: str, path: Path):
        super().__init__(
            f"cannot rename the context {quote_name(context_name)}, "
            f"the context {quote_name(new_name)} already exists in {path}"
        )
        self.context_name = context_name
        self.new_name = new_name
        self.path = path


class ConfigIOError(KubeconfError):
    """Raised when a kubeconfig file cannot be read, parsed or written.

    The underlying exception is chained as ``__cause__``.
    """

    kind = ErrorKind.IO

    def __init__(self, message: str, path: Path, permission_denied: bool = False):
        super().__init__(message)
        self.path = path
        self.exit_code = ERROR_PERMISSION_DENIED if permission_denied else ERROR_GENERAL
