"""Database maintenance for the HRMS backend.

    python scripts/manage_db.py init     # create the database and tables
    python scripts/manage_db.py seed     # demo employees plus their records
    python scripts/manage_db.py reset    # init, then seed
    python scripts/manage_db.py tables   # list the tables that exist

The target comes from the active settings module (APP_ENV, DB_* variables).
"""

from __future__ import annotations

import argparse
import importlib
import sys
from pathlib import Path
from typing import Optional, Sequence

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.dayflow.dayflow.database.bootstrap import (
    apply_schema,
    apply_seed_sql,
    ensure_demo_employees,
    list_tables,
)

SCHEMA_PATH = REPO_ROOT / "database" / "schema.sql"
SEED_PATH = REPO_ROOT / "database" / "seed.sql"


def _describe(db_config: dict) -> str:
    return (
        f"{db_config.get('user')}@{db_config.get('host')}:"
        f"{db_config.get('port', 3306)}/{db_config.get('database')}"
    )


def init(db_config: dict) -> None:
    apply_schema(db_config, schema_path=SCHEMA_PATH)
    print(f"OK: schema applied -> {_describe(db_config)} (tables={', '.join(list_tables(db_config))})")


def seed(db_config: dict) -> None:
    # seed.sql looks employees up by email, so they go in first.
    ensure_demo_employees(db_config)
    apply_seed_sql(db_config, seed_path=SEED_PATH)
    print(f"OK: demo data seeded -> {_describe(db_config)}")


def tables(db_config: dict) -> None:
    for name in list_tables(db_config):
        print(name)


def reset(db_config: dict) -> None:
    init(db_config)
    seed(db_config)


COMMANDS = {"init": init, "seed": seed, "reset": reset, "tables": tables}


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Manage the Dayflow HRMS database.")
    parser.add_argument("command", choices=sorted(COMMANDS))
    parser.add_argument(
        "--settings",
        default=None,
        help="settings module to read DB_CONFIG from (default: chosen by APP_ENV)",
    )
    args = parser.parse_args(argv)

    settings = importlib.import_module(args.settings or get_settings_module())
    COMMANDS[args.command](dict(settings.DB_CONFIG))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
