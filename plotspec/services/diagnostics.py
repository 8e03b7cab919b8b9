from __future__ import annotations

import logging
import time
from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Dict, List

from .errors import DeprecatedOptionError

logger = logging.getLogger(__name__)


class DiagnosticLevel(str, Enum):
    deprecation = "deprecation"


@dataclass
class Diagnostic:
    code: str
    message: str
    level: DiagnosticLevel = DiagnosticLevel.deprecation
    ts: float = field(default_factory=lambda: time.time())


class DiagnosticLog:
    """Append-only store of advisory diagnostics collected by the mutators."""

    def __init__(self) -> None:
        self.items: List[Diagnostic] = []

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    def append(self, diag: Diagnostic) -> None:
        self.items.append(diag)

    def deprecate(self, code: str, message: str) -> Diagnostic:
        diag = Diagnostic(code=code, message=message, level=DiagnosticLevel.deprecation)
        self.append(diag)
        logger.warning("%s: %s", code, message)
        return diag

    def codes(self) -> List[str]:
        return [diag.code for diag in self.items]

    def summary(self) -> Dict[str, Any]:
        return {
            "total": len(self.items),
            "by_level": {lvl.value: sum(1 for diag in self.items if diag.level == lvl) for lvl in DiagnosticLevel},
        }

    def to_json(self) -> List[Dict[str, Any]]:
        rows = []
        for diag in self.items:
            row = asdict(diag)
            row["level"] = diag.level.value
            rows.append(row)
        return rows

    def tail(self, n: int = 3) -> List[Diagnostic]:
        if n <= 0:
            return []
        return self.items[-n:]

    def raise_for_deprecations(self) -> None:
        deprecated = [diag for diag in self.items if diag.level == DiagnosticLevel.deprecation]
        if deprecated:
            raise DeprecatedOptionError("; ".join(diag.message for diag in deprecated))
