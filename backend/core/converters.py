from db.beer import Beer
from schemas.beer import BeerCreate, BeerRead


def model_to_schema(beer_model: Beer) -> BeerRead:
    """Convert SQLAlchemy model to Pydantic schema"""
    return BeerRead(
        id=beer_model.id,
        name=beer_model.name,
        brand=beer_model.brand,
        max=beer_model.max,
        quantity=beer_model.quantity,
        type=beer_model.type,
    )


def schema_to_model(beer_schema: BeerCreate) -> Beer:
    """Convert Pydantic schema to a new, not yet persisted model (id is left unset)"""
    return Beer(
        name=beer_schema.name,
        brand=beer_schema.brand,
        max=beer_schema.max,
        quantity=beer_schema.quantity,
        type=beer_schema.type.value,
    )
