"""Persistence for beers over an async SQLAlchemy session."""
from typing import List, Optional

import structlog
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from core.exceptions import BeerAlreadyRegisteredError
from .beer import Beer

logger = structlog.get_logger(__name__)


class BeerRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def find_by_name(self, name: str) -> Optional[Beer]:
        result = await self.session.execute(select(Beer).where(Beer.name == name))
        return result.scalar_one_or_none()

    async def find_by_id(self, beer_id: int) -> Optional[Beer]:
        return await self.session.get(Beer, beer_id)

    async def find_all(self) -> List[Beer]:
        result = await self.session.execute(select(Beer).order_by(Beer.id.asc()))
        return list(result.scalars().all())

    async def save(self, beer: Beer) -> Beer:
        """Insert or update ``beer`` and return it with its id populated."""
        is_insert = beer.id is None
        name = beer.name
        self.session.add(beer)
        try:
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            logger.warning("Beer save violated a constraint", name=name, error=str(e.orig))
            # an insert racing a concurrent create of the same name
            if is_insert and await self.find_by_name(name) is not None:
                raise BeerAlreadyRegisteredError(name) from e
            raise
        await self.session.refresh(beer)
        return beer

    async def delete(self, beer: Beer) -> None:
        await self.session.delete(beer)
        await self.session.commit()
