#!/usr/bin/env python3
"""Seed the default subscription plans.

Existing plans are matched by name and updated in place, so the script can
be re-run safely after changing prices or features:
    python scripts/seed_billing.py
"""

import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from sqlmodel import Session  # noqa: E402

from aipromote.billing.seed import seed_plans  # noqa: E402
from aipromote.core.logging import configure_logging  # noqa: E402
from aipromote.db.engine import engine  # noqa: E402

logger = logging.getLogger("aipromote.scripts.seed_billing")


def main() -> int:
    configure_logging()
    with Session(engine) as session:
        plans = seed_plans(session)
    logger.info("Seeded %d subscription plans", len(plans))
    return 0


if __name__ == "__main__":
    sys.exit(main())
