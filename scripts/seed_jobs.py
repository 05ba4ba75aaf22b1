"""
Reseed the job catalog offline.

Deletes every application and job, then inserts freshly generated jobs.
Usage: python -m scripts.seed_jobs [count] [--seed N]
"""
import argparse
import asyncio
import logging
import random

from app.core.config import get_settings
from app.core.logging import configure_logging
from app.db.session import get_db, init_db
from app.modules.jobs.service import JobCatalogService

logger = logging.getLogger("scripts.seed_jobs")


async def seed_jobs(count: int, seed: int | None = None) -> None:
    await init_db()

    async for db in get_db():
        rng = random.Random(seed) if seed is not None else None
        service = JobCatalogService.with_session(db, rng=rng)
        jobs = await service.reseed(count)
        stable = sum(1 for job in jobs if job.is_stable)
        logger.info("Catalog now holds %d jobs (%d STABLE, %d FREELANCE)", len(jobs), stable, len(jobs) - stable)


def main() -> None:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Reseed the job catalog (destructive).")
    parser.add_argument("count", nargs="?", type=int, default=settings.maintenance.reseed_count)
    parser.add_argument("--seed", type=int, default=None, help="random seed for reproducible catalogs")
    args = parser.parse_args()
    if args.count <= 0:
        parser.error("count must be positive")

    configure_logging(settings)
    asyncio.run(seed_jobs(args.count, args.seed))


if __name__ == "__main__":
    main()
