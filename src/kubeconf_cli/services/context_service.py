"""Read-only context queries against a kubeconfig."""

from __future__ import annotations

from kubeconf_cli.models.config_models import ContextInfo, KubeConfig
from kubeconf_cli.models.exceptions import ContextNotFoundError
from kubeconf_cli.services.config_access import ConfigAccess
from kubeconf_cli.utils.ui.formatters import quote_name


class ContextService:
    """Lookups over the contexts of the kubeconfig resolved by ``config_access``."""

    def __init__(self, config_access: ConfigAccess):
        self.config_access = config_access

    def load(self) -> KubeConfig:
        return self.config_access.get_starting_config()

    def list_contexts(
        self, names: list[str] | None = None, config: KubeConfig | None = None
    ) -> dict[str, ContextInfo]:
        """Return contexts by name, all of them or only those in ``names``.

        ``config`` may be passed to avoid reloading the kubeconfig.

        Raises:
            ContextNotFoundError: If any requested name is missing
        """
        if config is None:
            config = self.load()
        contexts = config.contexts
        if not names:
            return dict(contexts)

        selected: dict[str, ContextInfo] = {}
        for name in names:
            if name not in contexts:
                raise ContextNotFoundError(
                    f"context {quote_name(name)} not found", name
                )
            selected[name] = contexts[name]
        return selected

    def current_context(self) -> str:
        """Return the current context name.

        Raises:
            ContextNotFoundError: If no current context is set
        """
        current = self.load().current_context
        if not current:
            raise ContextNotFoundError("current-context is not set", "")
        return current
