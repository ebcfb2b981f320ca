from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import logging

from app.core.config import get_settings
from app.core.lifespan import lifespan
from app.core.logging import configure_logging
from app.api.v1.routers.health import router as health_router
from app.api.v1.routers.products import router as products_router
from app.api.v1.routers.generation import router as generation_router
from app.api.v1.routers.visualize import router as visualize_router
from app.api.v1.routers.convai import router as convai_router
from app.domain.errors import AppError

settings = get_settings()
configure_logging(level=logging.DEBUG if settings.DEBUG else logging.INFO)

logger = logging.getLogger(__name__)

app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)

# ------- CORS -------
# ALLOWED_ORIGINS is a CSV, e.g. "https://shop.example.com,https://www.shop.example.com"
allowed_origins = [o.strip() for o in settings.ALLOWED_ORIGINS.split(",") if o.strip()]

app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins or ["http://localhost:3000"],
    allow_credentials=False,                        # keeps the preflight simple
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
    max_age=86400,
)

# ------- Error envelope -------
@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    if exc.status_code >= 500:
        logger.error("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"success": False, "error": exc.message})

@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    # malformed JSON, wrong field types, bad enum options: caller error, not 422
    errors = exc.errors()
    if errors:
        first = errors[0]
        loc = ".".join(str(p) for p in first.get("loc", ()) if p != "body")
        message = f"Invalid request: {loc} {first.get('msg', '')}".strip() if loc else f"Invalid request: {first.get('msg', '')}"
    else:
        message = "Invalid request"
    return JSONResponse(status_code=400, content={"success": False, "error": message})

# ------- Routes -------
app.include_router(health_router)
app.include_router(products_router, prefix=settings.api_prefix)     # catalog
app.include_router(generation_router, prefix=settings.api_prefix)   # generate-view, per-product views
app.include_router(visualize_router, prefix=settings.api_prefix)    # visualize-furniture
app.include_router(convai_router, prefix=settings.api_prefix)       # voice widget config
