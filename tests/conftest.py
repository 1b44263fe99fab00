"""Shared test fixtures and configuration.

Keeps tests away from the real ~/.kube/config, $KUBECONFIG and log directory.
"""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path
from unittest.mock import patch

import pytest
import yaml

from kubeconf_cli.models.config_models import KubeConfig


SAMPLE_KUBECONFIG = {
    "apiVersion": "v1",
    "kind": "Config",
    "clusters": [
        {"name": "dev-cluster", "cluster": {"server": "https://dev.example.com"}},
        {"name": "prod-cluster", "cluster": {"server": "https://prod.example.com"}},
    ],
    "users": [
        {"name": "dev-admin", "user": {"token": "dev-token"}},
        {"name": "prod-admin", "user": {"token": "prod-token"}},
    ],
    "contexts": [
        {"name": "dev", "context": {"cluster": "dev-cluster", "user": "dev-admin"}},
        {
            "name": "prod",
            "context": {
                "cluster": "prod-cluster",
                "user": "prod-admin",
                "namespace": "web",
            },
        },
    ],
    "current-context": "dev",
    "preferences": {},
}


def write_kubeconfig(path: Path, document: dict) -> Path:
    """Write a raw kubeconfig document as YAML."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(yaml.safe_dump(document, sort_keys=False), encoding="utf-8")
    return path


def read_kubeconfig(path: Path) -> KubeConfig:
    return KubeConfig.from_document(yaml.safe_load(path.read_text(encoding="utf-8")))


# ---------------------------------------------------------------------------
# Isolation
# ---------------------------------------------------------------------------


def _drop_file_handlers() -> None:
    logger = logging.getLogger("kubeconf_cli")
    for handler in list(logger.handlers):
        if isinstance(handler, logging.handlers.RotatingFileHandler):
            handler.close()
            logger.removeHandler(handler)


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    """Send logs to tmp_path and hide any KUBECONFIG from the real environment."""
    import kubeconf_cli.utils.logger as logger_mod

    monkeypatch.delenv("KUBECONFIG", raising=False)
    monkeypatch.delenv("KUBECONF_LOG_LEVEL", raising=False)

    logger_mod._logger = None
    _drop_file_handlers()

    with patch(
        "kubeconf_cli.utils.logger.user_log_dir",
        return_value=str(tmp_path / "logs"),
    ):
        yield

    _drop_file_handlers()
    logger_mod._logger = None


# ---------------------------------------------------------------------------
# Kubeconfig files
# ---------------------------------------------------------------------------


@pytest.fixture()
def kubeconfig_path(tmp_path) -> Path:
    """A kubeconfig with contexts "dev" (current) and "prod"."""
    return write_kubeconfig(tmp_path / "kube" / "config", SAMPLE_KUBECONFIG)
