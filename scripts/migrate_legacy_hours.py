#!/usr/bin/env python3
"""
One-time migration of free-text business hours to the structured weekly schedule.

Old store rows kept their hours as a single string. This script parses each
of them (best effort, see app/services/business/legacy.py) and writes the
structured form back. Rows already in the structured form are left alone.

Usage:
    python scripts/migrate_legacy_hours.py [--dry-run]
"""

import sys
import argparse
from pathlib import Path

# add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from app.db.session import session_scope, SessionLocal
from app.services.stores import migrate_legacy_business_hours
import logging

# configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def main():
    parser = argparse.ArgumentParser(description="Convert legacy free-text business hours")
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Report how many stores would change without writing anything"
    )
    args = parser.parse_args()

    if args.dry_run:
        db = SessionLocal()
        try:
            count = migrate_legacy_business_hours(db)
            db.rollback()
        finally:
            db.close()
        logger.info(f"{count} stores would be migrated")
        return True

    with session_scope() as db:
        count = migrate_legacy_business_hours(db)
    logger.info(f"Migrated business hours for {count} stores")
    return True


if __name__ == "__main__":
    success = main()
    sys.exit(0 if success else 1)
