# -*- coding: utf-8 -*-
"""
Command line entry point.

Usage:
    python -m wellness serve [--host HOST] [--port PORT] [--reload]
    python -m wellness init-db
    python -m wellness token <email> [--password PASSWORD]
"""

from __future__ import annotations

import argparse
import getpass
import logging
import sys

from .config import settings


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def cmd_serve(args: argparse.Namespace) -> int:
    """Run the API with uvicorn."""
    import uvicorn

    uvicorn.run(
        "wellness.api:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=settings.log_level.lower(),
    )
    return 0


def cmd_init_db(args: argparse.Namespace) -> int:
    """Create the SQLite schema."""
    from .app_db import init_app_db

    init_app_db(settings.db_path)
    print(f"Database ready: {settings.db_path}")
    return 0


def cmd_token(args: argparse.Namespace) -> int:
    """Log in with existing credentials and print a bearer token."""
    from .app_db import init_app_db
    from .auth.service import login
    from .errors import WellnessError

    password = args.password or getpass.getpass("Password: ")
    init_app_db(settings.db_path)
    try:
        user, token = login(args.email, password)
    except WellnessError as exc:
        print(f"Error: {exc.message}", file=sys.stderr)
        return 1

    print(f"User: {user['email']} ({user['id']})", file=sys.stderr)
    print(token)
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="wellness",
        description="Wellness tracker backend",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        help=f"Logging level (default: {settings.log_level})",
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", default=settings.host, help=f"Bind address (default: {settings.host})")
    serve_parser.add_argument("--port", type=int, default=settings.port, help=f"Port (default: {settings.port})")
    serve_parser.add_argument("--reload", action="store_true", help="Reload on code changes")

    subparsers.add_parser("init-db", help="Create database tables")

    token_parser = subparsers.add_parser("token", help="Print a bearer token for an existing user")
    token_parser.add_argument("email", help="Account email")
    token_parser.add_argument("--password", help="Account password (prompted when omitted)")

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    _configure_logging(args.log_level)

    commands = {
        "serve": cmd_serve,
        "init-db": cmd_init_db,
        "token": cmd_token,
    }

    return commands[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
