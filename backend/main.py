from fastapi import FastAPI, Request, status
import structlog
import uvicorn
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from db.database import create_db_and_tables
from routers.beers import router as beers_router
from core.config import settings
from core.exceptions import BeerStockError
from core.logging import configure_logging
from contextlib import asynccontextmanager

configure_logging(settings.log_level, settings.log_json)
logger = structlog.get_logger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    await create_db_and_tables()
    yield


app = FastAPI(
    title="Beer Stock API",
    description="REST API for beer stock management",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(BeerStockError)
async def beer_stock_error_handler(request: Request, exc: BeerStockError):
    logger.info(
        "beer stock request rejected",
        method=request.method,
        path=request.url.path,
        status_code=exc.status_code,
        detail=exc.detail,
    )
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    # Missing or out-of-range fields are client errors: 400 rather than 422
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


# Beer stock routes
app.include_router(beers_router, prefix=f"{settings.api_prefix}/beers", tags=["beers"])

if __name__ == "__main__":
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=True)
