"""Kitchen Shelf database management CLI.

Creates and drops the shelf schema on SQL-backed providers. With the
default in-memory provider there is nothing to create.

Usage:
    python src/manage.py setup-db   # Create all tables
    python src/manage.py drop-db    # Drop all tables
"""

import argparse
import sys


def setup_database():
    from shelf.domain import shelf
    from shelf.utils.db import setup_db

    print("Initializing shelf domain...")
    shelf.init()
    print("Creating shelf database schema...")
    touched = setup_db(shelf)
    print(f"  schema ready on: {', '.join(touched) or 'no SQL providers'}")
    print("Done.")


def drop_database():
    from shelf.domain import shelf
    from shelf.utils.db import drop_db

    print("Initializing shelf domain...")
    shelf.init()
    print("Dropping shelf database schema...")
    touched = drop_db(shelf)
    print(f"  schema dropped on: {', '.join(touched) or 'no SQL providers'}")
    print("Done.")


def main(argv=None):
    parser = argparse.ArgumentParser(description="Kitchen Shelf database management")
    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")

    args = parser.parse_args(argv)

    if args.command == "setup-db":
        setup_database()
    elif args.command == "drop-db":
        drop_database()
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
