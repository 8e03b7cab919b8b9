from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv
from rich.console import Console
from rich.json import JSON
from rich.panel import Panel
from rich.table import Table

from .services import SpecError, Specification, add_range_slider, finalize, set_config, set_layout

console = Console(soft_wrap=False)


def _load_json(text: str | None) -> Dict[str, Any]:
    if not text:
        return {}
    path = Path(text)
    if path.suffix == ".json" and path.exists():
        text = path.read_text(encoding="utf-8")
    data = json.loads(text)
    if not isinstance(data, dict):
        raise SpecError("expected a JSON object")
    return data


def _diagnostics_table(rows: List[Dict[str, Any]]) -> Table:
    table = Table(show_header=True, header_style="bold")
    table.add_column("code", no_wrap=True)
    table.add_column("level", no_wrap=True)
    table.add_column("message")
    for row in rows:
        table.add_row(row["code"], row["level"], row["message"])
    return table


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="plotspec", description="Apply layout/config overrides to a plot spec.")
    parser.add_argument("spec_path", help="JSON specification to mutate")
    parser.add_argument("--layout", action="append", default=[], help="layout overrides (JSON text or .json file)")
    parser.add_argument("--scope", default=None, help="data scope for --layout overrides")
    parser.add_argument("--rangeslider", nargs=2, metavar=("START", "END"), default=None)
    parser.add_argument("--config", default=None, help="config options (JSON text or .json file)")
    parser.add_argument("--locale", default=None)
    parser.add_argument("--mathjax", default=None, choices=["cdn", "local"])
    parser.add_argument("--out", default=None, help="write the finalized document here")
    parser.add_argument("--verbose", "-v", action="store_true")
    return parser


def _bound(text: str) -> Optional[str]:
    return None if text.lower() in {"", "null", "none", "auto"} else text


def run(args: argparse.Namespace) -> Dict[str, Any]:
    spec = Specification.from_dict(_load_json(args.spec_path))
    for raw in args.layout:
        if args.scope is not None:
            set_layout(spec, _load_json(raw), scope=args.scope)
        else:
            set_layout(spec, _load_json(raw))
    if args.rangeslider:
        start, end = args.rangeslider
        add_range_slider(spec, _bound(start), _bound(end))
    if args.config is not None or args.locale or args.mathjax:
        set_config(spec, _load_json(args.config), locale=args.locale, mathjax=args.mathjax)
    return {"document": finalize(spec), "diagnostics": spec.diagnostics.to_json()}


def main(argv: Optional[List[str]] = None) -> None:
    load_dotenv()
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        result = run(args)
    except (SpecError, json.JSONDecodeError, OSError) as exc:
        console.print(Panel(str(exc), title="error", border_style="red"))
        raise SystemExit(1)

    document = result["document"]
    if args.out:
        Path(args.out).write_text(json.dumps(document, ensure_ascii=False, indent=2), encoding="utf-8")
        console.print(f"wrote [bold]{args.out}[/bold]")
    else:
        console.print(Panel(JSON.from_data(document, indent=2), title="document", border_style="cyan", expand=False))

    diagnostics = result["diagnostics"]
    if diagnostics:
        console.print(Panel(_diagnostics_table(diagnostics), title="diagnostics", border_style="yellow"))


if __name__ == "__main__":
    main()
