from __future__ import annotations

import argparse
import json
import sys
from typing import List, Optional

import uvicorn
from pydantic import TypeAdapter, ValidationError

from api import ResolveRequest, resolve_views
from members.config import get_settings
from members.logging_config import setup_logging


def load_requests(path: str) -> List[ResolveRequest]:
	if path == "-":
		data = json.load(sys.stdin)
	else:
		with open(path, "r", encoding="utf-8") as fh:
			data = json.load(fh)
	if isinstance(data, dict):
		data = data.get("members", [data])
	return TypeAdapter(List[ResolveRequest]).validate_python(data)


def cmd_resolve(args: argparse.Namespace) -> int:
	try:
		requests = load_requests(args.path)
	except (OSError, json.JSONDecodeError, ValidationError) as e:
		print(f"error: cannot load {args.path}: {e}", file=sys.stderr)
		return 1
	views = resolve_views(requests)
	print(json.dumps([v.model_dump(mode="json") for v in views], indent=2))
	return 0


def cmd_serve(args: argparse.Namespace) -> int:
	uvicorn.run("api:app", host=args.host, port=args.port, reload=args.reload)
	return 0


def build_parser() -> argparse.ArgumentParser:
	settings = get_settings()
	parser = argparse.ArgumentParser(prog="members")
	parser.add_argument("--log-level", default=None, help="Override MEMBERS__LOG_LEVEL")
	sub = parser.add_subparsers(dest="cmd", required=True)

	pr = sub.add_parser("resolve", help="Resolve member facts from a JSON file and print views")
	pr.add_argument("path", help="JSON file with one member, a list, or {\"members\": [...]}; '-' for stdin")
	pr.set_defaults(func=cmd_resolve)

	ps = sub.add_parser("serve", help="Run FastAPI server")
	ps.add_argument("--host", default=settings.host)
	ps.add_argument("--port", type=int, default=settings.port)
	ps.add_argument("--reload", action="store_true")
	ps.set_defaults(func=cmd_serve)
	return parser


def main(argv: Optional[List[str]] = None) -> int:
	args = build_parser().parse_args(argv)
	if args.log_level:
		setup_logging(level=args.log_level.upper(), force=True)
	return args.func(args)


if __name__ == "__main__":
	sys.exit(main())
