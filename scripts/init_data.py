from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
for p in (REPO_ROOT, REPO_ROOT / "src" / "company_records"):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))

from dotenv import load_dotenv

from config import get_settings_module

from company_records.storage.file_store import FileStore


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())

    with FileStore(settings.DATA_FILE) as store:
        if store.create():
            print(f"OK: Created empty data file -> {store.path}")
        else:
            print(f"OK: Data file already exists -> {store.path}")


if __name__ == "__main__":
    main()
