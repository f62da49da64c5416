"""Checkout database management CLI.

Creates and drops the database schema of the checkout domain for the
providers configured in the active PROTEAN_ENV.

Usage:
    python src/manage.py setup-db   # Create all tables
    python src/manage.py drop-db    # Drop all tables
"""

import argparse
import sys


def setup_databases():
    """Create database schemas for the checkout domain."""
    from checkout.domain import checkout
    from checkout.utils.db import setup_db

    print("Initializing checkout domain...")
    checkout.init()
    print("Creating checkout database schema...")
    providers = setup_db(checkout)
    if providers:
        print(f"  schema ready for: {', '.join(providers)}")
    else:
        print("  no relational providers configured; nothing to create.")

    print("Done.")


def drop_databases():
    """Drop database schemas for the checkout domain."""
    from checkout.domain import checkout
    from checkout.utils.db import drop_db

    print("Initializing checkout domain...")
    checkout.init()
    print("Dropping checkout database schema...")
    providers = drop_db(checkout)
    if providers:
        print(f"  schema dropped for: {', '.join(providers)}")
    else:
        print("  no relational providers configured; nothing to drop.")

    print("Done.")


def main(argv=None):
    parser = argparse.ArgumentParser(description="Checkout database management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")

    args = parser.parse_args(argv)

    if args.command == "setup-db":
        setup_databases()
    elif args.command == "drop-db":
        drop_databases()
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
