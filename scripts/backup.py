"""Backup the key-value store.

Note: Dumps every entry (raw JSON values) into backups/attendance_store_<ts>.json,
whatever the configured backend is.
"""

from __future__ import annotations

import importlib
import json
from datetime import datetime
from pathlib import Path

from attendance_tracker.config import get_settings_module
from attendance_tracker.container import build_store


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    store = build_store(settings.STORAGE_BACKEND, storage_path=settings.STORAGE_PATH, db_config=settings.DB_CONFIG)

    out_dir = Path(__file__).resolve().parents[1] / "backups"
    out_dir.mkdir(parents=True, exist_ok=True)

    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_file = out_dir / f"attendance_store_{ts}.json"

    dump = {key: store.get(key) for key in store.keys()}
    with out_file.open("w", encoding="utf-8") as f:
        json.dump(dump, f, ensure_ascii=False, indent=2)
    print(f"OK: Backup created: {out_file} ({len(dump)} keys)")


if __name__ == "__main__":
    main()
