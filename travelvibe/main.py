import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from travelvibe.core.config import settings
from travelvibe.core.log import setup_logging
from travelvibe.api.api import api_router
from travelvibe.db.errors import InvalidQueryError, RecordNotFoundError, StoreError
from travelvibe.db.selector import select_store
from travelvibe.db.store import RecordStore

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    owned = getattr(app.state, "store", None) is None
    if owned:
        app.state.store = select_store(settings)
    logger.info("%s started with %s storage", settings.APP_NAME, app.state.store.mode)
    yield
    if owned:
        app.state.store.close()


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=400, content={"detail": jsonable_encoder(exc.errors())})

    @app.exception_handler(RecordNotFoundError)
    async def handle_not_found(request: Request, exc: RecordNotFoundError):
        return JSONResponse(status_code=404, content={"detail": "Not found"})

    @app.exception_handler(InvalidQueryError)
    async def handle_invalid_query(request: Request, exc: InvalidQueryError):
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    # Details stay in the server log; clients get a generic message.
    @app.exception_handler(StoreError)
    @app.exception_handler(SQLAlchemyError)
    async def handle_storage_error(request: Request, exc: Exception):
        logger.error("%s %s failed", request.method, request.url.path, exc_info=exc)
        return JSONResponse(status_code=500, content={"detail": "Internal server error"})

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.error("Unexpected error on %s %s", request.method, request.url.path, exc_info=exc)
        return JSONResponse(status_code=500, content={"detail": "Internal server error"})


def create_app(store: RecordStore | None = None) -> FastAPI:
    app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)
    if store is not None:
        app.state.store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )
    register_exception_handlers(app)
    app.include_router(api_router)

    @app.get("/")
    def root():
        return {"message": f"{settings.APP_NAME} is running"}

    @app.get("/health")
    def health(request: Request):
        return {"status": "ok", "storage": request.app.state.store.mode}

    return app


app = create_app()
