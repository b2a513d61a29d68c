import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.encoders import jsonable_encoder

from config import CORS_ORIGINS, LOG_LEVEL, SEED_DEFAULT_DATA
from routes.reservation_route import reservation_router
from routes.table_route import table_router
from seed import seed_default_data
from storage import Storage

logging.basicConfig(
    level=LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def create_app(storage: Storage = None, seed: bool = SEED_DEFAULT_DATA) -> FastAPI:
    """
    Builds the API around one Storage instance.

    A storage passed in by the caller is used as is and left open on
    shutdown; otherwise one is created from the environment and disposed
    when the app stops.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        owned = storage is None
        app.state.storage = Storage() if owned else storage
        if seed:
            seed_default_data(app.state.storage)
        logger.info("Storage ready")
        yield
        if owned:
            app.state.storage.close()
            logger.info("Storage closed")

    app = FastAPI(title="Table Reservations API", lifespan=lifespan)

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        logger.error(f"[422 Validation Error] {request.method} {request.url.path}: {exc.errors()}")
        return JSONResponse(
            status_code=422,
            content={"detail": jsonable_encoder(exc.errors())},
        )

    @app.get("/")
    async def base_path():
        """
        Root endpoint to verify that the API is running.

        Returns:
            dict: A success message.
        """
        return {"success": True}

    app.include_router(table_router)
    app.include_router(reservation_router)

    return app


app = create_app()
