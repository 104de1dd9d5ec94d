"""Business rules for the beer stock.

The service owns every invariant on a beer's lifecycle: names are unique when
a beer is registered, and ``0 <= quantity <= max`` holds after each quantity
change. Storage is delegated to a repository exposing ``find_by_name``,
``find_by_id``, ``find_all``, ``save`` and ``delete``.

Each operation is a plain read-check-write. Nothing here serializes concurrent
requests on the same beer; that is left to the repository (row locks or a
transactional store).
"""
from typing import List

import structlog

from core.converters import model_to_schema, schema_to_model
from core.exceptions import (
    BeerAlreadyRegisteredError,
    BeerInvalidQuantityError,
    BeerNegativeQuantityError,
    BeerNotFoundError,
    BeerStockExceededError,
)
from db.beer import Beer
from db.beer_repository import BeerRepository
from schemas.beer import BeerCreate, BeerRead

logger = structlog.get_logger(__name__)


class BeerService:
    def __init__(self, repository: BeerRepository):
        self.repository = repository

    async def create(self, payload: BeerCreate) -> BeerRead:
        """Register a new beer; fails if the name is already taken."""
        await self._verify_not_registered(payload.name)
        saved = await self.repository.save(schema_to_model(payload))
        logger.info("Registered beer", beer_id=saved.id, name=saved.name, type=payload.type.label)
        return model_to_schema(saved)

    async def find_by_name(self, name: str) -> BeerRead:
        beer = await self.repository.find_by_name(name)
        if beer is None:
            raise BeerNotFoundError(name=name)
        return model_to_schema(beer)

    async def list_all(self) -> List[BeerRead]:
        return [model_to_schema(b) for b in await self.repository.find_all()]

    async def delete_by_id(self, beer_id: int) -> None:
        beer = await self._verify_exists(beer_id)
        await self.repository.delete(beer)
        logger.info("Deleted beer", beer_id=beer_id, name=beer.name)

    async def increment(self, beer_id: int, quantity_to_increment: int) -> BeerRead:
        """Add stock; the new quantity may reach ``max`` but not pass it."""
        beer = await self._verify_exists(beer_id)
        self._verify_amount(beer_id, quantity_to_increment)

        new_quantity = beer.quantity + quantity_to_increment
        if new_quantity > beer.max:
            logger.warning(
                "Rejected increment past max",
                beer_id=beer_id,
                amount=quantity_to_increment,
                quantity=beer.quantity,
                max=beer.max,
            )
            raise BeerStockExceededError(beer_id, quantity_to_increment)

        return await self._store_quantity(beer, new_quantity)

    async def decrement(self, beer_id: int, quantity_to_decrement: int) -> BeerRead:
        """Remove stock; the quantity may reach zero but never go below it."""
        beer = await self._verify_exists(beer_id)
        self._verify_amount(beer_id, quantity_to_decrement)

        new_quantity = beer.quantity - quantity_to_decrement
        if new_quantity < 0:
            logger.warning(
                "Rejected decrement below zero",
                beer_id=beer_id,
                amount=quantity_to_decrement,
                quantity=beer.quantity,
            )
            raise BeerNegativeQuantityError(beer_id, quantity_to_decrement)

        return await self._store_quantity(beer, new_quantity)

    async def _store_quantity(self, beer: Beer, new_quantity: int) -> BeerRead:
        old_quantity = beer.quantity
        beer.quantity = new_quantity
        saved = await self.repository.save(beer)
        logger.info("Changed beer quantity", beer_id=saved.id, old=old_quantity, new=saved.quantity)
        return model_to_schema(saved)

    @staticmethod
    def _verify_amount(beer_id: int, amount: int) -> None:
        # amounts are never negative; direction comes from the operation
        if amount < 0:
            logger.warning("Rejected negative amount", beer_id=beer_id, amount=amount)
            raise BeerInvalidQuantityError(beer_id, amount)

    async def _verify_not_registered(self, name: str) -> None:
        if await self.repository.find_by_name(name) is not None:
            logger.warning("Rejected duplicate beer registration", name=name)
            raise BeerAlreadyRegisteredError(name)

    async def _verify_exists(self, beer_id: int) -> Beer:
        beer = await self.repository.find_by_id(beer_id)
        if beer is None:
            raise BeerNotFoundError(id=beer_id)
        return beer
