"""Locating, loading and persisting kubeconfig files.

``ConfigAccess`` is the interface commands depend on; ``PathOptions`` is the
file-backed implementation. Files are resolved in this order:

1. an explicit ``--kubeconfig`` path,
2. the entries of ``$KUBECONFIG`` (``os.pathsep`` separated),
3. ``~/.kube/config``.

When several files are in play they are merged on load (first definition of
a name wins) and modifications are routed back to the file that owns each
entry.
"""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from pathlib import Path

import yaml

from kubeconf_cli.models.config_models import NAMED_SECTIONS, KubeConfig
from kubeconf_cli.models.exceptions import ConfigIOError
from kubeconf_cli.utils.logger import get_logger

KUBECONFIG_ENV_VAR = "KUBECONFIG"


def default_kubeconfig_path() -> Path:
    return Path.home() / ".kube" / "config"


def load_kubeconfig_file(path: Path) -> KubeConfig | None:
    """Load one kubeconfig file.

    Returns:
        The parsed config, or None if the file does not exist.

    Raises:
        ConfigIOError: If the file cannot be read or is not a valid kubeconfig
    """
    logger = get_logger("config_access")
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        logger.debug("kubeconfig %s does not exist", path)
        return None
    except OSError as e:
        raise ConfigIOError(
            f'error loading config file "{path}": {e}',
            path,
            permission_denied=isinstance(e, PermissionError),
        ) from e

    try:
        # pydantic's ValidationError is a ValueError
        config = KubeConfig.from_document(yaml.safe_load(text))
    except (yaml.YAMLError, ValueError) as e:
        raise ConfigIOError(f'error loading config file "{path}": {e}', path) from e

    logger.debug(
        "loaded kubeconfig %s (%d contexts)", path, len(config.contexts)
    )
    return config


def write_kubeconfig_file(path: Path, config: KubeConfig) -> None:
    """Rewrite ``path`` with the full document, creating parent directories."""
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            yaml.safe_dump(
                config.to_document(), f, default_flow_style=False, sort_keys=False
            )

        # Credentials live in here
        path.chmod(0o600)
    except OSError as e:
        raise ConfigIOError(
            f'error writing config file "{path}": {e}',
            path,
            permission_denied=isinstance(e, PermissionError),
        ) from e

    get_logger("config_access").debug("wrote kubeconfig %s", path)


def merge_configs(configs: list[KubeConfig]) -> KubeConfig:
    """Merge configs in precedence order.

    The first config to define a cluster, user or context name wins, as does
    the first non-empty current-context. All other top-level fields come from
    the first config.
    """
    if not configs:
        return KubeConfig()

    merged = configs[0].model_copy(deep=True)
    for config in configs[1:]:
        for section in NAMED_SECTIONS:
            target = getattr(merged, section)
            for name, record in getattr(config, section).items():
                if name not in target:
                    target[name] = record.model_copy(deep=True)
        if not merged.current_context:
            merged.current_context = config.current_context
    return merged


class ConfigAccess(ABC):
    """Resolves, loads and persists the kubeconfig a command works on."""

    @abstractmethod
    def get_loading_precedence(self) -> list[Path]:
        """Files consulted when loading, highest precedence first."""

    @abstractmethod
    def get_starting_config(self) -> KubeConfig:
        """Load a fresh copy of the (merged) configuration."""

    @abstractmethod
    def get_default_filename(self) -> Path:
        """File that receives entries not owned by any existing file."""

    @abstractmethod
    def is_explicit_file(self) -> bool:
        """Whether a file was named explicitly, e.g. with ``--kubeconfig``."""

    @abstractmethod
    def get_explicit_file(self) -> Path | None:
        """The explicitly named file, if any."""

    @abstractmethod
    def modify_config(self, config: KubeConfig) -> None:
        """Persist ``config``, a modified result of ``get_starting_config``."""


class PathOptions(ConfigAccess):
    """File-backed ConfigAccess following the kubectl loading rules."""

    def __init__(
        self,
        explicit_path: str | Path | None = None,
        env_var: str = KUBECONFIG_ENV_VAR,
        global_file: str | Path | None = None,
    ):
        self.explicit_path = (
            Path(explicit_path).expanduser() if explicit_path else None
        )
        self.env_var = env_var
        self.global_file = (
            Path(global_file).expanduser() if global_file else default_kubeconfig_path()
        )

    def get_env_var_files(self) -> list[Path]:
        """Paths listed in the environment variable, deduplicated, in order."""
        raw = os.environ.get(self.env_var, "")
        files: list[Path] = []
        for entry in raw.split(os.pathsep):
            if not entry.strip():
                continue
            path = Path(entry).expanduser()
            if path not in files:
                files.append(path)
        return files

    def get_loading_precedence(self) -> list[Path]:
        if self.explicit_path is not None:
            return [self.explicit_path]
        return self.get_env_var_files() or [self.global_file]

    def is_explicit_file(self) -> bool:
        return self.explicit_path is not None

    def get_explicit_file(self) -> Path | None:
        return self.explicit_path

    def get_default_filename(self) -> Path:
        if self.explicit_path is not None:
            return self.explicit_path

        env_files = self.get_env_var_files()
        if not env_files:
            return self.global_file
        if len(env_files) == 1:
            return env_files[0]
        for path in env_files:
            if path.exists():
                return path
        return env_files[-1]

    def _load_each(self) -> dict[Path, KubeConfig | None]:
        return {
            path: load_kubeconfig_file(path)
            for path in self.get_loading_precedence()
        }

    def get_starting_config(self) -> KubeConfig:
        loaded = self._load_each()
        return merge_configs([c for c in loaded.values() if c is not None])

    def modify_config(self, config: KubeConfig) -> None:
        precedence = self.get_loading_precedence()
        if len(precedence) == 1:
            write_kubeconfig_file(precedence[0], config)
            return

        loaded = self._load_each()
        starting = merge_configs([c for c in loaded.values() if c is not None])
        default_file = self.get_default_filename()
        touched: dict[Path, KubeConfig] = {}

        def file_config(path: Path) -> KubeConfig:
            if path not in touched:
                existing = loaded.get(path)
                touched[path] = existing if existing is not None else KubeConfig()
            return touched[path]

        def owner(predicate) -> Path:
            for path, cfg in loaded.items():
                if cfg is not None and predicate(cfg):
                    return path
            return default_file

        for section in NAMED_SECTIONS:
            before = getattr(starting, section)
            after = getattr(config, section)
            removed = [n for n in before if n not in after]

            for name, record in after.items():
                if before.get(name) == record:
                    continue
                lookup = name
                if name not in before:
                    # A removed record reappearing under a new name was renamed;
                    # keep it in the file it came from.
                    lookup = next(
                        (old for old in removed if before[old] == record), name
                    )
                dest = owner(lambda cfg: lookup in getattr(cfg, section))
                entries = getattr(file_config(dest), section)
                if lookup != name and lookup in entries:
                    # Swap the key where it stands so the entry keeps its place
                    setattr(
                        file_config(dest),
                        section,
                        dict(
                            (name, record) if key == lookup else (key, value)
                            for key, value in entries.items()
                        ),
                    )
                else:
                    entries[name] = record

            for name in removed:
                for path, cfg in loaded.items():
                    if cfg is not None and name in getattr(cfg, section):
                        del getattr(file_config(path), section)[name]

        if config.current_context != starting.current_context:
            dest = owner(lambda cfg: bool(cfg.current_context))
            file_config(dest).current_context = config.current_context

        for path, cfg in touched.items():
            write_kubeconfig_file(path, cfg)
