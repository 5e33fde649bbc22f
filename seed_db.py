"""
Create the tables and load the development fixture.

Run this from the project root:

    (.venv) python seed_db.py

Uses DATABASE_URL (or the default local postgres database). Nothing is
inserted if the projects table already has rows.
"""

from swatches.core.config import settings
from swatches.db.init_db import SEED_PALETTES, init_db, seed_initial_data
from swatches.db.session import SessionLocal


def main() -> None:
    print(f"[INFO] Creating tables on {settings.environment} database...")
    init_db()

    db = SessionLocal()
    try:
        if seed_initial_data(db):
            print(f"[INFO] Inserted 1 project and {len(SEED_PALETTES)} palettes")
        else:
            print("[INFO] Projects already present, skipping seed")
        print("[INFO] Done.")
    finally:
        db.close()


if __name__ == "__main__":
    main()
