import logging

from polling_finder.core.deps import get_db
from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

logger = logging.getLogger(__name__)


api_router = APIRouter(prefix='')


@api_router.get('/health')
async def health_check(db: AsyncSession = Depends(get_db)) -> dict:
    status: dict = {'healthy': True, 'database': 'ok'}
    try:
        await db.execute(text('SELECT 1'))
    except (SQLAlchemyError, OSError):
        logger.exception('Health check could not reach the database')
        status['healthy'] = False
        status['database'] = 'unreachable'
    return status
