# start_app.py
"""Create database tables and launch the API server."""

from __future__ import annotations

import argparse
import os
import sys

import uvicorn
from dotenv import load_dotenv

import config


def main(argv: list[str] | None = None) -> None:
    """Load settings, optionally create tables, then start the API."""

    parser = argparse.ArgumentParser()
    parser.add_argument(
        "--skip-init-db",
        action="store_true",
        help="Start without creating missing database tables",
    )
    args = parser.parse_args(argv)

    load_dotenv()  # load environment variables from a .env file
    config.get_settings.cache_clear()
    settings = config.get_settings()

    env_flag = os.getenv("SKIP_INIT_DB")
    skip = args.skip_init_db or (env_flag and env_flag.lower() not in {"0", "false"})
    if not skip:
        from carta.app.db import init_db

        init_db()

    try:
        uvicorn.run(
            "carta.app.main:app",
            host="0.0.0.0",  # nosec B104: bind for local development
            port=int(os.getenv("PORT", "8000")),
            log_level=settings.log_level.lower(),
        )
    except ModuleNotFoundError as exc:
        missing = exc.name or str(exc)
        print(
            f"Missing dependency: {missing}. Install it with 'pip install {missing}'",
            file=sys.stderr,
        )
        raise SystemExit(1)


if __name__ == "__main__":
    main()
