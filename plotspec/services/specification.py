from __future__ import annotations

from copy import deepcopy
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from .diagnostics import DiagnosticLog
from .errors import SpecError

DEFAULT_SCOPE_KEY = "__default__"


@dataclass
class Dependency:
    """Named reference to a client-side bundle; ``payload`` is opaque here."""

    name: Optional[str]
    payload: Dict[str, Any] = field(default_factory=dict)
    kind: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "payload": deepcopy(self.payload), "kind": self.kind}


@dataclass
class Specification:
    data: List[Dict[str, Any]] = field(default_factory=list)
    layout: Dict[str, Any] = field(default_factory=dict)
    layout_overrides_by_scope: Dict[Optional[str], List[Dict[str, Any]]] = field(default_factory=dict)
    config: Dict[str, Any] = field(default_factory=dict)
    dependencies: List[Dependency] = field(default_factory=list)
    current_scope: Optional[str] = None
    diagnostics: DiagnosticLog = field(default_factory=DiagnosticLog, compare=False, repr=False)

    def dependency_names(self) -> List[Optional[str]]:
        return [dep.name for dep in self.dependencies]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "data": deepcopy(self.data),
            "layout": deepcopy(self.layout),
            "layoutOverridesByScope": {
                _scope_to_key(scope): deepcopy(entries) for scope, entries in self.layout_overrides_by_scope.items()
            },
            "config": deepcopy(self.config),
            "dependencies": [dep.to_dict() for dep in self.dependencies],
            "currentScope": self.current_scope,
        }

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any] | None) -> "Specification":
        raw = raw or {}
        layout = raw.get("layout") or {}
        config = raw.get("config") or {}
        if not isinstance(layout, Mapping):
            raise SpecError("spec.layout must be a mapping")
        if not isinstance(config, Mapping):
            raise SpecError("spec.config must be a mapping")
        overrides = {
            _key_to_scope(key): [dict(entry) for entry in entries]
            for key, entries in (raw.get("layoutOverridesByScope") or {}).items()
        }
        dependencies = [
            Dependency(name=dep.get("name"), payload=dict(dep.get("payload") or {}), kind=dep.get("kind"))
            for dep in raw.get("dependencies") or []
        ]
        return cls(
            data=deepcopy(list(raw.get("data") or [])),
            layout=deepcopy(dict(layout)),
            layout_overrides_by_scope=deepcopy(overrides),
            config=deepcopy(dict(config)),
            dependencies=dependencies,
            current_scope=raw.get("currentScope"),
        )


def _scope_to_key(scope: Optional[str]) -> str:
    return DEFAULT_SCOPE_KEY if scope is None else scope


def _key_to_scope(key: str) -> Optional[str]:
    return None if key == DEFAULT_SCOPE_KEY else key
