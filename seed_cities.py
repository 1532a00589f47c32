"""
Populate the cities table used by the signup location check.

Run this from the project root:

    (.venv) python seed_cities.py
    (.venv) python seed_cities.py --reset   # drop and recreate all tables first

It inserts the default city list (Cairo, Alexandria, ...) and skips rows
that are already there. DATABASE_URL selects the database.
"""

import argparse

from funapp.core.config import get_settings
from funapp.core.logging_config import configure_logging
from funapp.db.init_db import init_db, reset_db, seed_initial_data
from funapp.db.session import build_engine, build_session_factory


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed the cities table")
    parser.add_argument(
        "--reset",
        action="store_true",
        help="Drop and recreate all tables before seeding (deletes users too)",
    )
    args = parser.parse_args()

    settings = get_settings()
    configure_logging(settings.log_level)

    engine = build_engine(settings.database_url)
    if args.reset:
        print("[INFO] Resetting database...")
        reset_db(engine)
    else:
        init_db(engine)

    db = build_session_factory(engine)()
    try:
        count_new = seed_initial_data(db)
        print(f"[INFO] Inserted {count_new} new cities rows")
        print("[INFO] Done.")
    finally:
        db.close()


if __name__ == "__main__":
    main()
