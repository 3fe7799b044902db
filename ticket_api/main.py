import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.openapi.utils import get_openapi
from fastapi.responses import JSONResponse

from .config import settings
from .db import engine
from .errors import ErrorKind, HTTP_STATUS_BY_KIND
from .models import Base
from .routes import api_router

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

DOCS_PATH = f"{settings.api_prefix}/docs"


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.auto_create_schema:
        logger.warning(
            "Creating tables from model metadata; run alembic migrations outside development"
        )
        Base.metadata.create_all(engine)
    logger.info("Swagger documentation available at %s", DOCS_PATH)
    yield


app = FastAPI(
    title="Ticket API",
    description="API for managing event tickets",
    version="1.0",
    docs_url=DOCS_PATH,
    openapi_url=f"{settings.api_prefix}/docs-json",
    redoc_url=None,
    swagger_ui_parameters={"persistAuthorization": True},
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "HEAD", "PUT", "PATCH", "POST", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)

app.include_router(api_router, prefix=settings.api_prefix)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = exc.errors()
    if settings.is_production:
        # Field and constraint only; messages and echoed input stay server side.
        errors = [{"loc": error["loc"], "type": error["type"]} for error in errors]
    return JSONResponse(
        status_code=HTTP_STATUS_BY_KIND[ErrorKind.VALIDATION],
        content={"detail": jsonable_encoder(errors)},
    )


@app.get("/health", tags=["health"])
def health_check() -> dict:
    return {"status": "ok"}


def custom_openapi() -> dict:
    if app.openapi_schema:
        return app.openapi_schema
    schema = get_openapi(
        title=app.title,
        version=app.version,
        description=app.description,
        routes=app.routes,
    )
    # Documented only; no route checks the token.
    schema.setdefault("components", {}).setdefault("securitySchemes", {})["JWT-auth"] = {
        "type": "http",
        "scheme": "bearer",
        "bearerFormat": "JWT",
        "description": "Enter JWT token",
    }
    app.openapi_schema = schema
    return schema


app.openapi = custom_openapi


def run() -> None:
    logger.info("Starting ticket API on %s:%s", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
