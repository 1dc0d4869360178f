#!/usr/bin/env python3
"""
Database initialization script for the Sukimise backend.

This script handles:
- Database creation (for PostgreSQL)
- Running Alembic migrations
- Optional sample store seeding

Usage:
    python scripts/init_db.py [--seed-data] [--check-only]
"""

import os
import sys
import argparse
import subprocess
from pathlib import Path

# add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from app.core.config import settings
from app.db.session import engine, SessionLocal
from sqlalchemy import create_engine, text
import logging

# configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


SAMPLE_STORES = [
    {
        "name": "らーめん 寿木",
        "address": "東京都渋谷区道玄坂1-2-3",
        "latitude": 35.6580,
        "longitude": 139.6980,
        "categories": ["ラーメン"],
        "business_hours": {
            day: {
                "is_closed": day == "monday",
                "time_slots": [] if day == "monday" else [
                    {"open_time": "11:00", "close_time": "15:00", "last_order_time": "14:30"},
                    {"open_time": "17:30", "close_time": "22:00", "last_order_time": "21:30"},
                ],
            }
            for day in ["monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"]
        },
        "tags": ["ランチ", "ディナー"],
    },
    {
        # stored in the old free-text format on purpose
        "name": "喫茶 すきみせ",
        "address": "東京都台東区浅草2-3-1",
        "latitude": 35.7148,
        "longitude": 139.7967,
        "categories": ["カフェ"],
        "business_hours": "営業時間: 08:00-18:00\nラストオーダー: 17:30\n定休日: 水曜日",
        "tags": ["モーニング"],
    },
]


def create_database_if_not_exists():
    """create db if it doesn't exist (PostgreSQL only)."""
    database_url = settings.DATABASE_URL

    if not database_url.startswith("postgresql"):
        logger.info("Database URL is not PostgreSQL, skipping database creation")
        return True

    try:
        # parse db URL to get db name
        from urllib.parse import urlparse
        parsed = urlparse(database_url)
        database_name = parsed.path[1:]  # Remove leading '/'

        # connect to the maintenance db to check for ours
        postgres_url = f"{parsed.scheme}://{parsed.netloc}/postgres"
        postgres_engine = create_engine(postgres_url, isolation_level="AUTOCOMMIT")

        with postgres_engine.connect() as conn:
            result = conn.execute(
                text("SELECT 1 FROM pg_database WHERE datname = :db_name"),
                {"db_name": database_name}
            )

            if result.fetchone() is None:
                logger.info(f"Creating database: {database_name}")
                conn.execute(text(f'CREATE DATABASE "{database_name}"'))
                logger.info(f"Database {database_name} created successfully")
            else:
                logger.info(f"Database {database_name} already exists")

        postgres_engine.dispose()
        return True

    except Exception as e:
        logger.error(f"Error creating database: {e}")
        return False


def run_migrations():
    """run Alembic migrations to create/update schema."""
    try:
        logger.info("Running Alembic migrations...")

        # change to project root directory
        os.chdir(project_root)

        result = subprocess.run(
            [sys.executable, "-m", "alembic", "upgrade", "head"],
            capture_output=True,
            text=True,
            check=True
        )

        logger.info("Migrations completed successfully")
        logger.debug(f"Migration output: {result.stdout}")
        return True

    except subprocess.CalledProcessError as e:
        logger.error(f"Error running migrations: {e}")
        logger.error(f"Migration error output: {e.stderr}")
        return False


def seed_initial_data():
    """add the sample stores that are not there yet."""
    from app.models.models import Store

    db = SessionLocal()
    try:
        created = 0
        for store_data in SAMPLE_STORES:
            existing = db.query(Store).filter(Store.name == store_data["name"]).first()
            if existing:
                logger.info(f"Store already exists: {store_data['name']}")
                continue
            db.add(Store(**store_data))
            created += 1
            logger.info(f"Created store: {store_data['name']}")

        db.commit()
        logger.info(f"Seeded {created} stores")
        return True

    except Exception as e:
        logger.error(f"Error seeding data: {e}")
        db.rollback()
        return False
    finally:
        db.close()


def check_database_connection():
    """check if db connection is working."""
    try:
        logger.info("Testing database connection...")

        with engine.connect() as conn:
            result = conn.execute(text("SELECT 1"))
            result.fetchone()

        logger.info("Database connection successful")
        return True

    except Exception as e:
        logger.error(f"Database connection failed: {e}")
        return False


def main():
    parser = argparse.ArgumentParser(description="Initialize Sukimise database")
    parser.add_argument(
        "--seed-data",
        action="store_true",
        help="Seed sample stores (one of them in the legacy hours format)"
    )
    parser.add_argument(
        "--check-only",
        action="store_true",
        help="Only check database connection, don't run migrations"
    )

    args = parser.parse_args()

    logger.info("Starting database initialization...")

    # step 1: create db if needed
    if not args.check_only:
        if not create_database_if_not_exists():
            logger.error("Failed to create database")
            return False

    # step 2: check db connection
    if not check_database_connection():
        logger.error("Database connection failed")
        return False

    if args.check_only:
        logger.info("Database check completed successfully")
        return True

    # step 3: run migrations
    if not run_migrations():
        logger.error("Migration failed")
        return False

    # step 4: seed sample data if requested
    if args.seed_data:
        if not seed_initial_data():
            logger.error("Data seeding failed")
            return False

    logger.info("Database initialization completed successfully!")
    return True


if __name__ == "__main__":
    success = main()
    sys.exit(0 if success else 1)
