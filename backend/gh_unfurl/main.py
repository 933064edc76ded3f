from fastapi import FastAPI
from contextlib import asynccontextmanager
from gh_unfurl.api import health, summary
from gh_unfurl.core.config import settings
from gh_unfurl.services.summarizer import close_summarizer
import logging

logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle startup and shutdown events."""
    # Startup
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info(f"{settings.PROJECT_NAME} starting up...")
    yield
    # Shutdown
    logger.info(f"{settings.PROJECT_NAME} shutting down, closing GitHub client...")
    await close_summarizer()

app = FastAPI(
    title=settings.PROJECT_NAME,
    description="Link previews for GitHub URLs",
    version="0.1.0",
    lifespan=lifespan
)

app.include_router(health.router, prefix=f"{settings.API_V1_STR}/health", tags=["health"])
app.include_router(summary.router, prefix=settings.API_V1_STR, tags=["summary"])
