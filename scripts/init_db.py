# scripts/init_db.py
"""
Recreate the database schema and load the example data set.

Usage:
    python -m scripts.init_db            # drop, create, seed
    python -m scripts.init_db --no-seed  # drop and create only
"""

import argparse
import logging

from invoicing.db.engine import get_engine
from invoicing.db.schema import metadata
from invoicing.db.seed import init_db

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
)
logger = logging.getLogger(__name__)


def main():
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument("--no-seed", action="store_true", help="leave the database empty")
    args = parser.parse_args()

    engine = get_engine()
    metadata.drop_all(engine)
    init_db(engine, seed=not args.no_seed)
    logger.info("DB schema created%s.", "" if args.no_seed else " and seeded")


if __name__ == "__main__":
    main()
