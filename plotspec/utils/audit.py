from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List


class AuditLogger:
    """Persist finalized documents for later inspection."""

    def __init__(self, root: Path) -> None:
        self.root = root
        self.root.mkdir(parents=True, exist_ok=True)

    def persist(
        self,
        spec_in: Dict[str, Any],
        document: Dict[str, Any],
        diagnostics: List[Dict[str, Any]],
    ) -> Path:
        run_id = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%S%fZ")
        run_dir = self.root / run_id
        run_dir.mkdir(parents=True, exist_ok=False)

        self._write_json(run_dir / "input.json", spec_in)
        self._write_json(run_dir / "document.json", document)
        self._write_json(run_dir / "diagnostics.json", diagnostics)
        return run_dir

    def _write_json(self, path: Path, data: Any) -> None:
        path.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")
