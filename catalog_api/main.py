import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from catalog_api.core.config import settings
from catalog_api.db.session import create_tables

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    create_tables()
    if settings.SEED_DEMO_DATA:
        from catalog_api.scripts.seed import seed_demo_data
        seed_demo_data()
    logger.info("Catalog API started (env=%s)", settings.ENV)
    yield


app = FastAPI(
    title="Catalog API",
    version="1.0.0",
    lifespan=lifespan
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Ошибки валидации тела/параметров отдаём как 400 с читаемым текстом"""
    errors = []
    messages = []
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ()) if part != "body"]
        field = ".".join(loc)
        message = error.get("msg", "Invalid value")
        errors.append({"field": field or None, "message": message, "type": error.get("type")})
        messages.append(f"{field}: {message}" if field else message)

    logger.info("Validation failed on %s %s: %s", request.method, request.url.path, "; ".join(messages))
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "; ".join(messages), "errors": errors},
    )


# Import routers after app creation to avoid circular imports
from catalog_api.api import (  # noqa: E402
    auth,
    categories,
    products,
    dashboard,
)

# Routers - all already have /api prefix
app.include_router(auth.router)
app.include_router(categories.router)
app.include_router(products.router)
app.include_router(dashboard.router)


@app.get("/")
def root():
    return {"status": "ok", "service": "catalog-api"}


@app.get("/api/health")
def health_check():
    return {
        "status": "healthy",
        "env": settings.ENV
    }
