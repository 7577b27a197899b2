import logging
from contextlib import asynccontextmanager

from polling_finder.core.database import async_engine
from polling_finder.core.logging_config import configure_logging
from polling_finder.core.settings import settings
from polling_finder.routers import (
    health as health_router,
    polling_station as polling_station_router,
)
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(settings.LOG_LEVEL)
    logger.info('Polling station finder started')
    yield
    await async_engine.dispose()


app = FastAPI(lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=False,
    allow_methods=["*"], # Allows all methods
    allow_headers=["*"], # Allows all headers
)

app.include_router(polling_station_router.api_router, prefix='/polling_stations', tags=['polling_station'])
app.include_router(health_router.api_router, tags=['health'])
