"""Command line entry for the charity back office."""

from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

import uvicorn

from charity.core.config import settings
from charity.storage import EmployeeDirectory

logger = logging.getLogger("charity.cli")


def run_server(host: str, port: int) -> None:
    uvicorn.run("charity.api.main:app", host=host, port=port)


def ensure_president(email: Optional[str] = None) -> int:
    directory = EmployeeDirectory(settings.employees_path)
    target = email or settings.PRESIDENT_EMAIL
    if not target:
        logger.warning("PRESIDENT_EMAIL is not set; nothing to do.")
        return 1

    president = directory.ensure_president(target)
    if president is None:
        logger.info("An employee with %s already exists in %s", target, directory.path)
    else:
        logger.info("Created president %s (%s) in %s", president.email, president.id, directory.path)
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Charity back office")
    subcommands = parser.add_subparsers(dest="command")

    serve = subcommands.add_parser("serve", help="Run the HTTP API (default)")
    serve.add_argument("--host", default="0.0.0.0")
    serve.add_argument("--port", type=int, default=8080)

    bootstrap = subcommands.add_parser("ensure-president", help="Create the president account if missing")
    bootstrap.add_argument("--email", help="Defaults to PRESIDENT_EMAIL / HEAD_EMAIL")

    args = parser.parse_args(argv)
    logging.basicConfig(level=settings.LOG_LEVEL.upper())

    if args.command == "ensure-president":
        return ensure_president(args.email)

    run_server(getattr(args, "host", "0.0.0.0"), getattr(args, "port", 8080))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
