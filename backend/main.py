import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from core.config import Settings, settings as default_settings
from core.errors import InventoryValidationError
from core.logging_config import configure_logging
from routers.inventory import router as inventory_router
from storage import InventoryStorage, build_storage

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, storage: Optional[InventoryStorage] = None) -> FastAPI:
    settings = settings or default_settings
    configure_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        store = storage or build_storage(settings)
        await store.init()
        app.state.storage = store
        logger.info("Inventory storage ready (%s)", store.backend_name)
        try:
            yield
        finally:
            await store.close()
            logger.info("Inventory storage closed")

    app = FastAPI(
        title="Bar Inventory API",
        description="API for managing bar inventory stock",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(InventoryValidationError)
    async def inventory_validation_handler(request: Request, exc: InventoryValidationError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "Invalid data", "details": exc.errors},
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        details = {}
        for err in exc.errors():
            loc = [str(p) for p in err.get("loc", ()) if p != "body"]
            details.setdefault(".".join(loc) or "body", err.get("msg", "Invalid value"))
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "Invalid data", "details": details},
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.detail}, headers=exc.headers)

    @app.get("/health", tags=["health"])
    async def health(request: Request):
        return {"status": "ok", "storage": request.app.state.storage.backend_name}

    # Inventory routes
    app.include_router(inventory_router, prefix="/api/inventory", tags=["inventory"])

    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=True)
