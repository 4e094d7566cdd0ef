#!/usr/bin/env python3
"""
Seed Colleges Script

Creates tables and loads the residential colleges with their stereotype
tags, used by both the quiz and college recommendations. Existing
colleges (matched by slug) are updated in place.

Usage:
    python -m scripts.seed_colleges
"""

import asyncio
import logging

# Add parent directory to path for imports
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

from app.infrastructure.db.database import get_db_manager, get_session_context
from app.infrastructure.db.models.college import CollegeCreate, CollegeUpdate
from app.infrastructure.db.repositories.college_repository import CollegeRepository

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


SEED_COLLEGES = [
    CollegeCreate(
        slug="cowell",
        name="Cowell College",
        description="The social hub with a laid-back vibe",
        stereotypes=["social", "laid-back", "humanities", "community"],
    ),
    CollegeCreate(
        slug="stevenson",
        name="Stevenson College",
        description="Where extroverts thrive and parties never stop",
        stereotypes=["social", "extrovert", "party", "humanities"],
    ),
    CollegeCreate(
        slug="crown",
        name="Crown College",
        description="STEM central with a nerdy, focused atmosphere",
        stereotypes=["stem", "focused", "introvert", "technology"],
    ),
    CollegeCreate(
        slug="merrill",
        name="Merrill College",
        description="Quiet nature lovers find their zen here",
        stereotypes=["quiet", "nature", "introvert", "global"],
    ),
    CollegeCreate(
        slug="porter",
        name="Porter College",
        description="Artsy creatives and free spirits unite",
        stereotypes=["creative", "art", "free-spirited", "music"],
    ),
    CollegeCreate(
        slug="kresge",
        name="Kresge College",
        description="Activists and artists making change together",
        stereotypes=["activist", "creative", "art", "community"],
    ),
    CollegeCreate(
        slug="oakes",
        name="Oakes College",
        description="Social justice warriors building community",
        stereotypes=["social justice", "community", "activist", "diversity"],
    ),
    CollegeCreate(
        slug="rachel_carson",
        name="Rachel Carson College",
        description="Environmentalists and outdoor enthusiasts",
        stereotypes=["environment", "nature", "outdoors", "sustainability"],
    ),
    CollegeCreate(
        slug="college_nine_ten",
        name="College Nine",
        description="International STEM community with social flair and coding culture",
        stereotypes=["stem", "global", "social", "coding"],
    ),
    CollegeCreate(
        slug="john_r_lewis",
        name="John R. Lewis College",
        description="Activist leaders creating positive change",
        stereotypes=["activist", "leadership", "social justice", "community"],
    ),
]


async def seed_colleges() -> dict:
    """
    Upsert the seed colleges.

    Returns:
        Dict with created/updated counts
    """
    stats = {"created": 0, "updated": 0}

    await get_db_manager().create_tables()

    async with get_session_context() as session:
        repo = CollegeRepository(session)
        for college in SEED_COLLEGES:
            existing = await repo.get_by_slug(college.slug)
            if existing is None:
                await repo.create(college)
                stats["created"] += 1
                logger.info(f"Created {college.name}")
            else:
                await repo.update(
                    existing.id,
                    CollegeUpdate(
                        name=college.name,
                        description=college.description,
                        stereotypes=college.stereotypes,
                    ),
                )
                stats["updated"] += 1
                logger.info(f"Updated {college.name}")

    return stats


async def main():
    logger.info("Seeding colleges...")
    stats = await seed_colleges()
    logger.info(f"Done: {stats['created']} created, {stats['updated']} updated")
    await get_db_manager().close()


if __name__ == "__main__":
    asyncio.run(main())
