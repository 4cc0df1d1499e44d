import argparse
import json
from pathlib import Path
from typing import Any, Dict, Optional

from . import __version__
from .client import RetrievalError, fetch_application_by_id
from .config import load_env, load_settings
from .database import init_database, get_session
from .logger import get_logger, reset_logger
from .methods import method_code, resolve_method
from .normalize import normalize_record
from .schema import validate_record
from .storage import list_views, save_view


def _load_json(path_str: str) -> Any:
    input_path = Path(path_str)
    if not input_path.exists():
        raise SystemExit(f"Input file not found: {input_path}")
    with input_path.open("r", encoding="utf-8") as f:
        try:
            return json.load(f)
        except json.JSONDecodeError as e:
            raise SystemExit(f"Input file is not valid JSON: {e}")


def _print_view(view: Dict[str, Any]) -> None:
    print(json.dumps(view, indent=2, ensure_ascii=False))


def ingest_record(record: Dict[str, Any], application_id: str, db_path: Optional[Path] = None) -> dict:
    """Validate and normalize a raw record, optionally persisting the view."""
    errors = validate_record(record)
    if errors:
        return {"application_id": application_id, "status": "validation_error", "errors": errors}

    view = normalize_record(record)
    get_logger().record_normalization(view["method"])
    outcome = {"application_id": application_id, "status": "normalized", "view": view}

    if db_path is not None:
        init_database(db_path)
        session = get_session(db_path)
        try:
            outcome.update(save_view(session, application_id, view))
        finally:
            session.close()
    return outcome


def _report(outcome: dict) -> None:
    if outcome["status"] == "validation_error":
        print("Invalid:")
        for e in outcome["errors"]:
            print(f" - {e}")
        raise SystemExit(2)
    _print_view(outcome["view"])
    if outcome["status"] != "normalized":
        print(f"Application: {outcome['application_id']}")
        print(f"Status: {outcome['status']}")


def cmd_resolve(args: argparse.Namespace) -> None:
    print(resolve_method(args.code) or "unknown")


def cmd_validate(args: argparse.Namespace) -> None:
    record = _load_json(args.input)
    errors = validate_record(record)
    if errors:
        print("Invalid:")
        for e in errors:
            print(f" - {e}")
        raise SystemExit(2)
    print(f"Valid (method: {resolve_method(method_code(record)) or 'unknown'})")


def cmd_normalize(args: argparse.Namespace) -> None:
    record = _load_json(args.input)
    application = record.get("application") if isinstance(record, dict) else None
    if not isinstance(application, dict):
        application = {}
    application_id = args.id or application.get("_id") or Path(args.input).stem
    db_path = Path(args.db) if args.db else None
    _report(ingest_record(record, application_id, db_path))


def cmd_fetch(args: argparse.Namespace) -> None:
    try:
        record = fetch_application_by_id(args.id)
    except RetrievalError as e:
        raise SystemExit(e.message)
    db_path = Path(args.db) if args.db else None
    _report(ingest_record(record, args.id, db_path))


def cmd_list(args: argparse.Namespace) -> None:
    db_path = Path(args.db or load_settings().db_path)
    if not db_path.exists():
        print(f"Database not found: {db_path}")
        return
    session = get_session(db_path)
    try:
        rows = list_views(session)
    finally:
        session.close()
    if not rows:
        print("No stored views.")
        return
    print(f"Found {len(rows)} views in {db_path}:\n")
    for row in rows:
        print(f"ID: {row.application_id}")
        print(f"  Method: {row.method or 'unknown'}")
        print(f"  Total score: {row.total_score}")
        print(f"  Priority score: {row.priority_score}")
        print(f"  Updated: {row.updated_at:%Y-%m-%d %H:%M:%S}")
        print()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="admitview", description="Admission application normalizer")
    parser.add_argument("--version", action="store_true", help="Show version")

    subparsers = parser.add_subparsers(dest="command")
    res = subparsers.add_parser("resolve", help="Show the label for an admission method code")
    res.add_argument("--code", required=True, help="Method code (hoc_ba, tot_nghiep, dgnl, tu_duy)")
    res.set_defaults(func=cmd_resolve)

    val = subparsers.add_parser("validate", help="Validate a raw application record JSON")
    val.add_argument("--input", required=True, help="Path to raw record JSON")
    val.set_defaults(func=cmd_validate)

    nrm = subparsers.add_parser("normalize", help="Normalize a raw application record JSON")
    nrm.add_argument("--input", required=True, help="Path to raw record JSON")
    nrm.add_argument("--id", help="Application id (default: application._id or file name)")
    nrm.add_argument("--db", help="Persist the view to this SQLite database")
    nrm.set_defaults(func=cmd_normalize)

    fch = subparsers.add_parser("fetch", help="Fetch an application from the API and normalize it")
    fch.add_argument("--id", required=True, help="Application id")
    fch.add_argument("--db", help="Persist the view to this SQLite database")
    fch.set_defaults(func=cmd_fetch)

    lst = subparsers.add_parser("list", help="List stored views")
    lst.add_argument("--db", help="Path to SQLite database (default: ADMITVIEW_DB_PATH)")
    lst.set_defaults(func=cmd_list)

    return parser


def main(argv=None):
    load_env()
    # Log level and directory may come from .env
    reset_logger()
    get_logger()
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.version:
        print(__version__)
        return

    if hasattr(args, "func"):
        args.func(args)
        return

    parser.print_help()


if __name__ == "__main__":
    main()
