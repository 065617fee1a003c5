from fastapi import FastAPI
from contextlib import asynccontextmanager
from app.api import stats
from app.core.config import settings
from app.core.logging import setup_logging

logger = setup_logging(settings.APP_NAME)

@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Stats function ready.")
    yield
    logger.info("Application shutdown initiated.")

app = FastAPI(
    title="Talk Ratings Stats API",
    description="Computes the average rating and total count of a talk's ratings histogram",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan
)

app.include_router(stats.router, tags=["Stats"])
