from fastapi import APIRouter, Depends, status, Response
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from db.database import get_async_session
from db.beer_repository import BeerRepository
from schemas.beer import BeerCreate, BeerRead, QuantityUpdate
from services.beer_service import BeerService

router = APIRouter()


def get_beer_service(db: AsyncSession = Depends(get_async_session)) -> BeerService:
    return BeerService(BeerRepository(db))


@router.post("", response_model=BeerRead, status_code=status.HTTP_201_CREATED)
async def create_beer(beer: BeerCreate, service: BeerService = Depends(get_beer_service)):
    """Register a new beer"""
    return await service.create(beer)


@router.get("", response_model=List[BeerRead])
async def list_beers(service: BeerService = Depends(get_beer_service)):
    """List all beers registered in the system"""
    return await service.list_all()


@router.get("/{name}", response_model=BeerRead)
async def get_beer_by_name(name: str, service: BeerService = Depends(get_beer_service)):
    """Get a beer by its name"""
    return await service.find_by_name(name)


@router.delete("/{beer_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_beer(beer_id: int, service: BeerService = Depends(get_beer_service)):
    """Delete a beer by ID"""
    await service.delete_by_id(beer_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch("/{beer_id}/increment", response_model=BeerRead)
async def increment_beer(beer_id: int, payload: QuantityUpdate, service: BeerService = Depends(get_beer_service)):
    """Increment a beer's stock, up to its max"""
    return await service.increment(beer_id, payload.quantity)


@router.patch("/{beer_id}/decrement", response_model=BeerRead)
async def decrement_beer(beer_id: int, payload: QuantityUpdate, service: BeerService = Depends(get_beer_service)):
    """Decrement a beer's stock, down to zero"""
    return await service.decrement(beer_id, payload.quantity)
