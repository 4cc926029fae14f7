"""
Database Seeder.

Run this script to populate the database with the hardcoded devices and
decision trees defined in data/hardcoded_trees.py.

Usage:
    python -m troubleshooting_guide.scripts.db_seed

Existing records are replaced, so the script can be re-run safely.
"""

from sqlalchemy.engine import Engine

from troubleshooting_guide.data.hardcoded_trees import HARDCODED_DEVICES, HARDCODED_TREES
from troubleshooting_guide.infrastructure.database.connection import engine, init_db
from troubleshooting_guide.repositories.decision_tree import SqlDecisionTreeRepository
from troubleshooting_guide.repositories.device import SqlDeviceRepository


def seed(target: Engine = engine):
    print("Initializing Database Connection...")

    init_db(target)
    devices = SqlDeviceRepository(target)
    trees = SqlDecisionTreeRepository(target)

    print(f"Found {len(HARDCODED_DEVICES)} devices to seed.")
    for device in HARDCODED_DEVICES:
        print(f"Processing device: {device.id}")
        devices.upsert_device(device)

    print(f"Found {len(HARDCODED_TREES)} decision trees to seed.")
    for device_id, tree in HARDCODED_TREES.items():
        print(f"Processing decision tree: {device_id} ({len(tree.nodes)} nodes)")
        trees.upsert_tree(tree)

    print("Seeding complete.")


if __name__ == "__main__":
    seed()
