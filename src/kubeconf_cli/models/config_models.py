"""Kubeconfig document models.

On disk, clusters, users and contexts are stored as named lists::

    contexts:
    - name: dev
      context:
        cluster: dev-cluster
        user: dev-admin

In memory they are exposed as mappings keyed by name, which is what the
context commands operate on. ``from_document`` and ``to_document`` convert
between the two forms.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

# section name -> key holding the record inside each named entry
NAMED_SECTIONS = {
    "clusters": "cluster",
    "users": "user",
    "contexts": "context",
}


def _named_list_to_mapping(section: str, entries: Any) -> Any:
    """Convert a ``[{name: ..., <item>: {...}}]`` list to a name-keyed dict."""
    if entries is None:
        return {}
    if isinstance(entries, dict):
        # Already keyed by name (models built in memory)
        return entries
    if not isinstance(entries, list):
        raise ValueError(f"{section} must be a list of named entries")

    item_key = NAMED_SECTIONS[section]
    mapping: dict[str, Any] = {}
    for entry in entries:
        name = entry.get("name") if isinstance(entry, dict) else None
        if not isinstance(name, str) or not name:
            raise ValueError(f"{section} entry without a valid name: {entry!r}")
        if name in mapping:
            raise ValueError(f'duplicate name "{name}" in {section}')
        mapping[name] = entry.get(item_key) or {}
    return mapping


class _Record(BaseModel):
    """Base for kubeconfig records; unknown keys are kept for round-tripping."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)


class ClusterInfo(_Record):
    """Cluster connection details (server URL, CA data, ...)."""

    server: str | None = None


class AuthInfo(_Record):
    """User credentials. Kept opaque."""


class ContextInfo(_Record):
    """A context: which cluster and user to use, and an optional namespace."""

    cluster: str = ""
    user: str = ""
    namespace: str | None = None
    extensions: list[dict[str, Any]] | None = None


class KubeConfig(BaseModel):
    """A kubeconfig document."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    api_version: str = Field(default="v1", alias="apiVersion")
    clusters: dict[str, ClusterInfo] = Field(default_factory=dict)
    contexts: dict[str, ContextInfo] = Field(default_factory=dict)
    current_context: str = Field(default="", alias="current-context")
    kind: str = Field(default="Config")
    preferences: dict[str, Any] = Field(default_factory=dict)
    users: dict[str, AuthInfo] = Field(default_factory=dict)
    extensions: list[dict[str, Any]] | None = None

    @model_validator(mode="before")
    @classmethod
    def _mappings_from_named_lists(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        data = dict(data)
        for section in NAMED_SECTIONS:
            if section in data:
                data[section] = _named_list_to_mapping(section, data[section])
        return data

    @field_validator("current_context", mode="before")
    @classmethod
    def _null_current_context(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_validator("preferences", mode="before")
    @classmethod
    def _null_preferences(cls, v: Any) -> Any:
        return {} if v is None else v

    @classmethod
    def from_document(cls, data: Any) -> KubeConfig:
        """Build a config from a parsed YAML document (None means empty file)."""
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ValueError(
                f"kubeconfig must be a mapping, got {type(data).__name__}"
            )
        return cls.model_validate(data)

    def to_document(self) -> dict[str, Any]:
        """Return the YAML-ready form, with named lists and aliased keys."""
        data = self.model_dump(by_alias=True, exclude_none=True)
        for section, item_key in NAMED_SECTIONS.items():
            data[section] = [
                {"name": name, item_key: record}
                for name, record in data[section].items()
            ]
        return data

    def rename_context(self, old_name: str, new_name: str) -> None:
        """Move the context under ``old_name`` to ``new_name``.

        The entry keeps its position; ``current_context`` follows the rename.
        Callers are expected to have checked that ``old_name`` exists and
        ``new_name`` does not.
        """
        self.contexts = {
            (new_name if name == old_name else name): record
            for name, record in self.contexts.items()
        }
        if self.current_context == old_name:
            self.current_context = new_name
