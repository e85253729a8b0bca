"""ShopWindow management CLI.

Creates and drops database schemas and runs scheduled jobs.

Usage:
    python src/manage.py setup-db              # Create all tables
    python src/manage.py drop-db               # Drop all tables
    python src/manage.py run-job order/email/payment
"""

import argparse
import sys

DOMAIN_NAMES = ["ordering", "storefront"]


def _domains(names=None):
    from ordering.domain import ordering
    from storefront.domain import storefront

    all_domains = {"ordering": ordering, "storefront": storefront}
    return {name: all_domains[name] for name in names} if names else all_domains


def setup_databases(domains=None):
    """Create database schemas for the specified (or all) domains."""
    from shared.db import setup_db

    for name, domain in _domains(domains).items():
        print(f"Initializing {name} domain...")
        domain.init()
        print(f"Creating {name} database schema...")
        setup_db(domain)
        print(f"  {name} schema ready.")

    print("Done.")


def drop_databases(domains=None):
    """Drop database schemas for the specified (or all) domains."""
    from shared.db import drop_db

    for name, domain in _domains(domains).items():
        print(f"Initializing {name} domain...")
        domain.init()
        print(f"Dropping {name} database schema...")
        drop_db(domain)
        print(f"  {name} schema dropped.")

    print("Done.")


def run_job(name):
    """Run a registered job inside the ordering domain."""
    from ordering.domain import ordering
    from ordering.jobs.registry import JOB_REGISTRY
    from ordering.jobs.scheduling import RunJob
    from shared.logging import configure_logging

    if name not in JOB_REGISTRY:
        print(f"Unknown job: {name} (available: {', '.join(sorted(JOB_REGISTRY))})")
        sys.exit(1)

    configure_logging()
    ordering.init()

    with ordering.domain_context():
        ordering.process(RunJob(name=name), asynchronous=False)

    print(f"Job {name} finished.")


def main():
    parser = argparse.ArgumentParser(description="ShopWindow management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    setup_parser = subparsers.add_parser("setup-db", help="Create all database tables")
    setup_parser.add_argument(
        "--domain",
        choices=DOMAIN_NAMES,
        nargs="*",
        help="Specific domain(s) to set up (default: all)",
    )

    drop_parser = subparsers.add_parser("drop-db", help="Drop all database tables")
    drop_parser.add_argument(
        "--domain",
        choices=DOMAIN_NAMES,
        nargs="*",
        help="Specific domain(s) to drop (default: all)",
    )

    job_parser = subparsers.add_parser("run-job", help="Run a scheduled job")
    job_parser.add_argument("name", help="Registered job name, e.g. order/email/payment")

    args = parser.parse_args()

    if args.command == "setup-db":
        setup_databases(args.domain)
    elif args.command == "drop-db":
        drop_databases(args.domain)
    elif args.command == "run-job":
        run_job(args.name)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
