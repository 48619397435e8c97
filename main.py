from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.v1 import auth, profile
from app.api.errors import register_error_handlers
from app.api.health import router as health_router
from app.core.config import settings
from app.core.logging import get_logger, setup_logging
from app.core.middleware import RequestLoggingMiddleware, ErrorHandlingMiddleware

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    logger.info("startup", app=settings.APP_NAME, version=settings.APP_VERSION)
    yield
    logger.info("shutdown")


app = FastAPI(
    title=settings.APP_NAME,
    description="Login, password change and profile forms with mock validation endpoints",
    version=settings.APP_VERSION,
    lifespan=lifespan,
)

# Add middleware (order matters - last added = first executed)
app.add_middleware(ErrorHandlingMiddleware)
app.add_middleware(RequestLoggingMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

app.include_router(health_router)
app.include_router(auth.router, prefix=settings.API_PREFIX)
app.include_router(profile.router, prefix=settings.API_PREFIX)

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
