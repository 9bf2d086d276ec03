from fastapi import FastAPI, Depends, HTTPException, Query, Request, status
from fastapi.responses import JSONResponse
import logging
from contextlib import asynccontextmanager
from typing import Optional

# Use relative imports within the service package
from . import schemas, config
from .crud import InventoryManager, InvalidArgument, NotFound

# Configure logging basic setup
logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Catalog Service starting up...")
    logger.info(f"Listening on {config.APP_HOST}:{config.APP_PORT}")
    app.state.manager = InventoryManager() # One in-memory catalog per app instance
    yield
    logger.info(f"Catalog Service shutting down with {len(app.state.manager)} item(s) in memory")

app = FastAPI(
    title="Catalog Service",
    description="In-memory item catalog with stock tracking and filtered search.",
    version="0.1.0",
    lifespan=lifespan
)


def get_manager(request: Request) -> InventoryManager:
    """FastAPI dependency to inject the app's inventory manager."""
    return request.app.state.manager


@app.exception_handler(InvalidArgument)
async def invalid_argument_handler(request: Request, exc: InvalidArgument):
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": str(exc)})


@app.exception_handler(NotFound)
async def not_found_handler(request: Request, exc: NotFound):
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)})


@app.get("/health", tags=["Monitoring"], summary="Health Check")
async def health_check():
    return {"status": "healthy"}


@app.post(
    "/items",
    response_model=schemas.ItemRead,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": schemas.ErrorResponse}},
    tags=["Catalog"],
    summary="Register Item"
)
async def register_item_endpoint(
    request_data: schemas.ItemRegisterRequest,
    manager: InventoryManager = Depends(get_manager)
):
    """
    Registers a (category, brand) item with its price and zero stock.
    Registering an existing pair leaves it untouched and returns it as stored.
    """
    logger.info(f"Received registration for '{request_data.category}'/'{request_data.brand}'")
    manager.register_item(request_data.category, request_data.brand, request_data.price)
    return manager.get_item(request_data.category, request_data.brand)


@app.post(
    "/items/stock",
    response_model=schemas.ItemRead,
    responses={400: {"model": schemas.ErrorResponse}, 404: {"model": schemas.ErrorResponse}},
    tags=["Catalog"],
    summary="Add Stock"
)
async def add_stock_endpoint(
    request_data: schemas.StockAddRequest,
    manager: InventoryManager = Depends(get_manager)
):
    """Increases the stock of a registered item."""
    manager.add_stock(request_data.category, request_data.brand, request_data.quantity)
    return manager.get_item(request_data.category, request_data.brand)


@app.get(
    "/items",
    response_model=schemas.SearchResponse,
    tags=["Catalog"],
    summary="Search Items"
)
async def search_items_endpoint(
    category: Optional[str] = None,
    brand: Optional[str] = None,
    price_from: Optional[int] = None,
    price_to: Optional[int] = None,
    order_by: str = Query("price", description="'quantity' to sort by stock, anything else sorts by price"),
    ascending: bool = True,
    manager: InventoryManager = Depends(get_manager)
):
    try:
        items = manager.search(
            category=category,
            brand=brand,
            price_from=price_from,
            price_to=price_to,
            order_by=order_by,
            ascending=ascending,
        )
    except Exception as e:
        logger.exception("Error during item search") # Log full traceback
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"An unexpected error occurred during search: {e}"
        )
    return {"count": len(items), "items": items}


@app.get(
    "/items/{category}/{brand}",
    response_model=schemas.ItemRead,
    responses={404: {"model": schemas.ErrorResponse}},
    tags=["Catalog"],
    summary="Get Item Details"
)
async def read_item(category: str, brand: str, manager: InventoryManager = Depends(get_manager)):
    """Retrieves a registered item by category and brand, case-insensitively."""
    return manager.get_item(category, brand)


def run():
    import uvicorn
    uvicorn.run("catalog_service.main:app", host=config.APP_HOST, port=config.APP_PORT)


if __name__ == "__main__":
    run()
