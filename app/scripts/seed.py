"""Populate the database with demo problems, users and matches.

Usage::

    python -m app.scripts.seed

Requires the same environment as the API (``SUPABASE_URL``,
``SUPABASE_SERVICE_ROLE_KEY``, ``JWT_SECRET``).  Existing rows are deleted.
"""

import logging
import sys

from app.core.config import settings
from app.core.logging import setup_logging
from app.db.supabase import create_supabase
from app.services.seeding import Seeder

logger = logging.getLogger(__name__)


def main() -> int:
    setup_logging()
    try:
        Seeder(create_supabase(settings)).run_seed()
    except Exception:
        logger.exception("seed_failed")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
