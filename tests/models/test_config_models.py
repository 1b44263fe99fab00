"""Unit tests for the kubeconfig document models (models/config_models.py)."""

from __future__ import annotations

import copy

import pytest

from conftest import SAMPLE_KUBECONFIG
from kubeconf_cli.models.config_models import ContextInfo, KubeConfig


@pytest.fixture()
def config() -> KubeConfig:
    return KubeConfig.from_document(copy.deepcopy(SAMPLE_KUBECONFIG))


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------


class TestFromDocument:
    def test_none_is_empty_config(self):
        config = KubeConfig.from_document(None)
        assert config.contexts == {}
        assert config.current_context == ""
        assert config.kind == "Config"

    def test_named_lists_become_mappings(self, config):
        assert list(config.contexts) == ["dev", "prod"]
        assert list(config.clusters) == ["dev-cluster", "prod-cluster"]
        assert list(config.users) == ["dev-admin", "prod-admin"]

    def test_context_fields(self, config):
        prod = config.contexts["prod"]
        assert prod.cluster == "prod-cluster"
        assert prod.user == "prod-admin"
        assert prod.namespace == "web"
        assert config.contexts["dev"].namespace is None

    def test_current_context_alias(self, config):
        assert config.current_context == "dev"

    def test_null_current_context_is_empty(self):
        config = KubeConfig.from_document({"current-context": None})
        assert config.current_context == ""

    def test_null_sections_are_empty(self):
        config = KubeConfig.from_document(
            {"contexts": None, "clusters": None, "users": None, "preferences": None}
        )
        assert config.contexts == {}
        assert config.preferences == {}

    def test_duplicate_names_rejected(self):
        doc = {
            "contexts": [
                {"name": "dev", "context": {"cluster": "a"}},
                {"name": "dev", "context": {"cluster": "b"}},
            ]
        }
        with pytest.raises(ValueError, match='duplicate name "dev" in contexts'):
            KubeConfig.from_document(doc)

    def test_entry_without_name_rejected(self):
        with pytest.raises(ValueError, match="without a valid name"):
            KubeConfig.from_document({"contexts": [{"context": {"cluster": "a"}}]})

    def test_section_must_be_list(self):
        with pytest.raises(ValueError, match="must be a list"):
            KubeConfig.from_document({"contexts": "dev"})

    def test_non_mapping_document_rejected(self):
        with pytest.raises(ValueError, match="must be a mapping"):
            KubeConfig.from_document(["not", "a", "config"])

    def test_entry_without_record_gets_defaults(self):
        config = KubeConfig.from_document({"contexts": [{"name": "bare"}]})
        assert config.contexts["bare"] == ContextInfo()


# ---------------------------------------------------------------------------
# Serialisation
# ---------------------------------------------------------------------------


class TestToDocument:
    def test_named_lists_restored(self, config):
        doc = config.to_document()
        assert doc["contexts"][0] == {
            "name": "dev",
            "context": {"cluster": "dev-cluster", "user": "dev-admin"},
        }
        assert doc["contexts"][1]["context"]["namespace"] == "web"
        assert doc["users"][0] == {"name": "dev-admin", "user": {"token": "dev-token"}}

    def test_hyphenated_keys(self, config):
        doc = config.to_document()
        assert doc["current-context"] == "dev"
        assert doc["apiVersion"] == "v1"
        assert "current_context" not in doc

    def test_unknown_keys_preserved(self):
        source = {
            "clusters": [
                {
                    "name": "c",
                    "cluster": {
                        "server": "https://c",
                        "certificate-authority-data": "Zm9v",
                    },
                }
            ],
            "contexts": [
                {"name": "x", "context": {"cluster": "c", "user": "u", "color": "red"}}
            ],
            "x-custom": {"owner": "ops"},
        }
        doc = KubeConfig.from_document(source).to_document()
        assert doc["clusters"][0]["cluster"]["certificate-authority-data"] == "Zm9v"
        assert doc["contexts"][0]["context"]["color"] == "red"
        assert doc["x-custom"] == {"owner": "ops"}

    def test_empty_sections_are_lists(self):
        doc = KubeConfig().to_document()
        assert doc["contexts"] == []
        assert doc["clusters"] == []
        assert doc["users"] == []


# ---------------------------------------------------------------------------
# rename_context
# ---------------------------------------------------------------------------


class TestRenameContext:
    def test_moves_record_to_new_key(self, config):
        record = config.contexts["dev"]
        config.rename_context("dev", "staging")
        assert "dev" not in config.contexts
        assert config.contexts["staging"] is record

    def test_keeps_position(self, config):
        config.rename_context("dev", "staging")
        assert list(config.contexts) == ["staging", "prod"]

    def test_mapping_size_unchanged(self, config):
        config.rename_context("prod", "live")
        assert len(config.contexts) == 2

    def test_current_context_follows(self, config):
        config.rename_context("dev", "staging")
        assert config.current_context == "staging"

    def test_other_current_context_untouched(self, config):
        config.rename_context("prod", "live")
        assert config.current_context == "dev"
