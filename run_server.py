#!/usr/bin/env python3
"""Run the todo API web server."""
import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv
load_dotenv()

from todo_api.config import get_settings
from todo_api.db.database import Database, StoreError

logger = logging.getLogger("run_server")


def main():
    settings = get_settings()

    parser = argparse.ArgumentParser(description="Serve the todo API")
    parser.add_argument("--db-path", type=str, help="Override database path")
    parser.add_argument("--host", type=str, help="Override bind address")
    parser.add_argument("--port", type=int, help="Override bind port")
    parser.add_argument("--log-level", type=str, help="Override log level")
    args = parser.parse_args()

    db_path = Path(args.db_path) if args.db_path else settings.DATABASE_PATH
    host = args.host or settings.API_HOST
    port = args.port if args.port is not None else settings.API_PORT
    log_level = (args.log_level or settings.LOG_LEVEL).upper()

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    db = Database(path=db_path)
    try:
        db.init()
    except StoreError as e:
        logger.error(f"Cannot start: {e}")
        sys.exit(1)

    import uvicorn
    from server.app import create_app

    logger.info(f"Serving on http://{host}:{port} (DB: {db_path})")
    try:
        uvicorn.run(create_app(db), host=host, port=port, log_level=log_level.lower())
    finally:
        db.close()


if __name__ == "__main__":
    main()
