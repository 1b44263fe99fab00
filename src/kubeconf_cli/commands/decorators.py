"""Decorators for command functions."""

import functools
import time
import traceback
from collections.abc import Callable

import typer

from kubeconf_cli.models.exceptions import KubeconfError, UsageError
from kubeconf_cli.utils.exit_codes import ERROR_GENERAL
from kubeconf_cli.utils.logger import get_logger
from kubeconf_cli.utils.ui.formatters import format_error, format_hint


def command_wrapper(func: Callable):
    """Log a command run and turn kubeconf errors into exit codes."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        logger = get_logger()
        cmd = func.__name__
        start = time.monotonic()
        logger.info("command started: %s", cmd)
        try:
            result = func(*args, **kwargs)

            elapsed = time.monotonic() - start
            logger.info("command completed: %s (%.3fs)", cmd, elapsed)
            return result

        except KubeconfError as e:
            elapsed = time.monotonic() - start
            logger.error(
                "command failed: %s (%.3fs) - %s: %s",
                cmd,
                elapsed,
                e.kind.value,
                e.message,
            )
            format_error(e.message)
            if isinstance(e, UsageError) and e.help_hint:
                format_hint(e.help_hint)
            raise typer.Exit(code=e.exit_code) from e

        except typer.Exit:
            # Re-raise Typer's own exits (like --help or explicit Exit(0))
            raise

        except Exception as e:
            elapsed = time.monotonic() - start
            logger.error(
                "command failed: %s (%.3fs) - %s\n%s",
                cmd,
                elapsed,
                str(e),
                traceback.format_exc(),
            )
            format_error(f"An unexpected error occurred: {e}")
            raise typer.Exit(code=ERROR_GENERAL) from e

    return wrapper
