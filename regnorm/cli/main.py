from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from typing import List
from uuid import uuid4

from regnorm.core.config import load_config
from regnorm.core.errors import RegistryError
from regnorm.core.files import format_json_file
from regnorm.core.registry import iter_chains
from regnorm.core.runtime.context import FixContext
from regnorm.core.runtime.driver import Driver
from regnorm.utils.json_safe import to_jsonable

log = logging.getLogger("regnorm.cli")


def _configure_logging(level: str | None) -> None:
    name = (level or os.environ.get("REGNORM_LOG_LEVEL") or "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, name, logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )


def cmd_fix(args: argparse.Namespace) -> int:
    """Reconcile a registry checkout in place."""

    config = load_config(args.root)
    if not config.root.is_dir():
        log.error("registry root not found", extra={"root": str(config.root)})
        print(f"error: registry root not found: {config.root}", file=sys.stderr)
        return 2

    ctx = FixContext(context_id=args.context_id or f"fix-{uuid4().hex[:12]}", operation_name="fix")
    driver = Driver(config=config, context=ctx)
    try:
        report = driver.run(chains=args.chain or None)
    except RegistryError as e:
        log.error("reconcile aborted: %s", e)
        print(f"error: {e}", file=sys.stderr)
        return 2

    if args.json:
        out = {
            "context_id": ctx.context_id,
            "root": config.root,
            "processed": report.processed,
            "failures": [{"path": p, "error": err} for p, err in report.failures],
            "summary": ctx.summary(),
            "events": list(ctx.get_events()),
        }
        print(json.dumps(to_jsonable(out), indent=2, sort_keys=True))
    else:
        print(f"Processed: {report.processed}")
        for event_type, count in sorted(ctx.summary().items()):
            print(f"  {event_type}: {count}")
        for path, err in report.failures:
            print(f"FAILED {path}: {err}")

    return 0 if report.ok else 1


def cmd_format_json(args: argparse.Namespace) -> int:
    """Pretty-print JSON files in canonical form."""

    config = load_config()
    rc = 0
    for path in args.paths:
        try:
            changed = format_json_file(path, indent=config.json_indent)
        except RegistryError as e:
            log.error("format failed: %s", e)
            print(f"error: {e}", file=sys.stderr)
            rc = 1
            continue
        if changed:
            print(f"formatted {path}")
    return rc


def cmd_chains(args: argparse.Namespace) -> int:
    """List supported chains."""

    rows = [
        {"id": c.id, "handle": c.handle, "name": c.name, "evm": c.is_evm}
        for c in iter_chains()
    ]
    if args.json:
        print(json.dumps(rows, indent=2))
        return 0
    for r in rows:
        flag = "evm" if r["evm"] else "-"
        print(f"{r['handle']:<12} {r['id']:>10}  {flag:<4} {r['name']}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="regnorm",
        description="Reconcile asset registry metadata with canonical values",
    )
    p.add_argument("--log-level", default=None, help="Logging level (default: INFO)")
    sub = p.add_subparsers(dest="cmd", required=True)

    fx = sub.add_parser("fix", help="Run every fixer over a registry checkout")
    fx.add_argument("--root", default=None, help="Registry root (default: $REGNORM_ROOT or .)")
    fx.add_argument(
        "--chain",
        action="append",
        default=[],
        help="Only process this chain handle (repeatable)",
    )
    fx.add_argument("--context-id", default=None, help="Override FixContext.context_id")
    fx.add_argument("--json", action="store_true", help="Print a JSON report with all events")
    fx.set_defaults(func=cmd_fix)

    fj = sub.add_parser("format-json", help="Rewrite JSON files in canonical pretty form")
    fj.add_argument("paths", nargs="+", help="JSON files")
    fj.set_defaults(func=cmd_format_json)

    ch = sub.add_parser("chains", help="List supported chains")
    ch.add_argument("--json", action="store_true", help="Print JSON")
    ch.set_defaults(func=cmd_chains)

    return p


def main(argv: List[str] | None = None) -> int:
    """CLI entry."""
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.log_level)
    return int(args.func(args))


if __name__ == "__main__":
    raise SystemExit(main())
