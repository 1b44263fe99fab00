"""Console utilities for kubeconf."""

from functools import lru_cache

from rich.console import Console


@lru_cache(maxsize=2)
def get_console(highlight: bool = True) -> Console:
    """Get a Rich Console instance for consistent output formatting.

    Soft wrapping keeps long kubeconfig paths on one line so messages stay
    greppable.
    """
    return Console(highlight=highlight, soft_wrap=True)
