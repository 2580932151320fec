"""Simple DB connection tester.

Uses the same DB URL lookup as the app (DATABASE_URL, data/db_link, then
local MySQL), connects with SQLAlchemy, runs `SELECT 1` and reports whether
the `restaurants` table exists and how many rows it holds.

    python -m fooddelivery.tools.check_db [DB_URL]
"""
import sys
import traceback

from sqlalchemy import create_engine, inspect, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from fooddelivery.config import load_db_url
from fooddelivery.errors import StorageFault
from fooddelivery.services import RestaurantRepository


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    url = argv[0] if argv else load_db_url()
    print("Using DB URL:", url)
    engine = create_engine(url, pool_pre_ping=True)
    try:
        with engine.connect() as conn:
            print("Connected to database server successfully.")
            result = conn.execute(text("SELECT 1"))
            print("SELECT 1 ->", list(result))

        if not inspect(engine).has_table("restaurants"):
            print("Table `restaurants` not found.")
            return 1

        with Session(engine) as session:
            total = RestaurantRepository(session).count()
        print(f"Table `restaurants` has {total} rows.")
        return 0
    except (SQLAlchemyError, StorageFault):
        print("Failed to connect to database:")
        traceback.print_exc()
        return 1
    finally:
        engine.dispose()


if __name__ == "__main__":
    sys.exit(main())
