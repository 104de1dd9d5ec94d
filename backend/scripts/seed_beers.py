"""
Seed a small default beer catalogue.

Run locally (from the backend/ directory):
  python -m scripts.seed_beers

It uses the same DATABASE_* env vars as the backend (dotenv supported by core.config).
Beers whose name is already registered are left untouched, so the script can be re-run.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from core.config import settings
from core.exceptions import BeerAlreadyRegisteredError
from core.logging import configure_logging
from db.beer_repository import BeerRepository
from db.database import async_session_maker, create_db_and_tables
from schemas.beer import BeerCreate
from services.beer_service import BeerService

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class SeedBeer:
    name: str
    brand: str
    type: str
    max: int
    quantity: int = 0


SEED_BEERS: list[SeedBeer] = [
    SeedBeer(name="Brahma", brand="Ambev", type="LAGER", max=50, quantity=10),
    SeedBeer(name="Guinness Draught", brand="Guinness", type="STOUT", max=40, quantity=12),
    SeedBeer(name="Hoegaarden", brand="AB InBev", type="WITBIER", max=30, quantity=6),
    SeedBeer(name="Erdinger Weissbier", brand="Erdinger", type="WEISS", max=30),
    SeedBeer(name="Pilsner Urquell", brand="Plzensky Prazdroj", type="PILSEN", max=60, quantity=24),
]


async def seed_beers(db: AsyncSession, beers: list[SeedBeer] = SEED_BEERS) -> int:
    """Register every seed beer not stored yet; returns how many were created."""
    service = BeerService(BeerRepository(db))
    created = 0
    for b in beers:
        try:
            await service.create(
                BeerCreate(name=b.name, brand=b.brand, type=b.type, max=b.max, quantity=b.quantity)
            )
        except BeerAlreadyRegisteredError:
            continue
        created += 1
    return created


async def main() -> None:
    await create_db_and_tables()
    async with async_session_maker() as db:
        created = await seed_beers(db)
    logger.info("Seeded beer catalogue", created=created, seed_beers=len(SEED_BEERS))


if __name__ == "__main__":
    configure_logging(settings.log_level, settings.log_json)
    asyncio.run(main())
