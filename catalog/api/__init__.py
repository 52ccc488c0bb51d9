# catalog/api/__init__.py
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from catalog.api.routers import assignments, health, products
from catalog.data.store import CatalogStore
from catalog.domain.errors import CatalogError
from catalog.services.accounts_client import AccountsClient
from catalog.services.assignment_service import AccountsGateway
from catalog.utils.settings import CHARGE_ON_ASSIGN
from catalog.utils.logging import get_logger

logger = get_logger(__name__)


def _describe(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "invalid request"
    first = errors[0]
    loc = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    return f"{loc}: {first.get('msg')}" if loc else str(first.get("msg"))


def register_error_handlers(app: FastAPI) -> None:
    # every error response is {"error": message}

    @app.exception_handler(CatalogError)
    async def catalog_error_handler(request: Request, exc: CatalogError):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=400, content={"error": _describe(exc)})

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)})


def create_app(
    store: CatalogStore | None = None,
    accounts_client: AccountsGateway | None = None,
    charge_on_assign: bool | None = None,
) -> FastAPI:
    app = FastAPI(title="Catalog API", version="1.0.0")

    app.state.store = store or CatalogStore()
    app.state.accounts_client = accounts_client or AccountsClient()
    app.state.charge_on_assign = (
        CHARGE_ON_ASSIGN if charge_on_assign is None else charge_on_assign
    )
    logger.info(f"Charge on assign: {app.state.charge_on_assign}")

    register_error_handlers(app)

    app.include_router(health.router)
    app.include_router(products.router)
    app.include_router(assignments.router)

    return app
