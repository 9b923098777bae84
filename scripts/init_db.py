"""Create the attendance tables in the configured MySQL database.

Usage: python scripts/init_db.py [--env production]
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module, load_settings

from src.attendance_tracker.attendance_tracker.database.bootstrap import apply_schema, list_tables

logger = logging.getLogger("init_db")

SCHEMA_PATH = REPO_ROOT / "database" / "schema.sql"


def init_database(db_config: dict, schema_path: Path = SCHEMA_PATH) -> list[str]:
    apply_schema(db_config, schema_path=schema_path)
    return list_tables(db_config)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--env", help="settings environment (defaults to APP_ENV)")
    args = parser.parse_args(argv)

    load_dotenv(override=False)
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")

    settings = load_settings(args.env)
    db_config = dict(settings.DB_CONFIG)
    tables = init_database(db_config)
    logger.info(
        "%s: schema applied to %s@%s:%s/%s, tables: %s",
        get_settings_module(args.env),
        db_config.get("user"),
        db_config.get("host"),
        db_config.get("port", 3306),
        db_config.get("database"),
        ", ".join(sorted(tables)) or "-",
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
