"""Apply the SQL files in the configured directory, one statement file per call."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from quickquery.core.config import get_settings
from quickquery.core.database import close_pool, init_pool
from quickquery.services.executor import QuickQuery


def _load_sql_files(sql_dir: Path) -> Iterable[Path]:
    if not sql_dir.exists():
        return []
    return sorted(sql_dir.glob("*.sql"))


def _apply_file(executor: QuickQuery, path: Path) -> bool:
    sql = path.read_text(encoding="utf-8").strip()
    if not sql:
        return False
    print(f"Applying {path.name}...")
    executor.without_return(sql)
    return True


def run(sql_dir: Path | None = None, executor: QuickQuery | None = None) -> int:
    """Apply every ``*.sql`` file in name order and return how many ran."""
    sql_dir = sql_dir or get_settings().sql_dir
    files = list(_load_sql_files(sql_dir))
    if not files:
        print("No SQL files found.")
        return 0

    executor = executor or QuickQuery()
    applied = sum(1 for path in files if _apply_file(executor, path))
    print(f"Applied {applied} SQL file(s).")
    return applied


def main() -> None:
    init_pool()
    try:
        run()
    finally:
        close_pool()


if __name__ == "__main__":
    main()
