"""Errors raised by the beer service.

Each error knows the HTTP status it maps to; the handler registered in
``main.py`` renders ``{"detail": ...}`` with that status.
"""
from typing import Optional

from fastapi import status


class BeerStockError(Exception):
    """Base class for request-scoped beer stock failures."""

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(detail)


class BeerAlreadyRegisteredError(BeerStockError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Beer with name {name} has already been registered in our database.")


class BeerNotFoundError(BeerStockError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, *, name: Optional[str] = None, id: Optional[int] = None):
        self.name = name
        self.id = id
        if name is not None:
            super().__init__(f"We could not find a beer with name {name} in our database.")
        else:
            super().__init__(f"We could not find a beer with id {id} in our database.")


class BeerStockExceededError(BeerStockError):
    def __init__(self, id: int, quantity_to_increment: int):
        self.id = id
        self.quantity = quantity_to_increment
        super().__init__(
            f"Beer with id {id} cannot be incremented by {quantity_to_increment}, it exceeds the stock limit."
        )


class BeerNegativeQuantityError(BeerStockError):
    def __init__(self, id: int, quantity_to_decrement: int):
        self.id = id
        self.quantity = quantity_to_decrement
        super().__init__(
            f"Beer with id {id} cannot be decremented by {quantity_to_decrement}, it cannot have a negative quantity."
        )


class BeerInvalidQuantityError(BeerStockError):
    def __init__(self, id: int, quantity: int):
        self.id = id
        self.quantity = quantity
        super().__init__(f"Beer with id {id} cannot be changed by {quantity}, the quantity must not be negative.")
