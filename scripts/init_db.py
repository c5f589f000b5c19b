from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.dayflow.dayflow.database.bootstrap import apply_schema, ensure_username_column, list_tables
from src.dayflow.dayflow.database.connection import DBConfig


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    apply_schema(db_config, schema_path=REPO_ROOT / "database" / "schema.sql")
    migrated = ensure_username_column(db_config)
    tables = list_tables(db_config)
    print(
        f"OK: Applied schema.sql -> {DBConfig.from_dict(db_config).describe()} "
        f"(tables={len(tables)}, username column added={migrated})"
    )


if __name__ == "__main__":
    main()
