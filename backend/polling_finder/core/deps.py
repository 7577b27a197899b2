from collections.abc import AsyncIterator

from polling_finder.core.database import AsyncSessionLocal
from polling_finder.core.directory import SqlStationDirectory
from polling_finder.core.settings import settings
from polling_finder.resolver import Resolver
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession


async def get_db() -> AsyncIterator[AsyncSession]:
    async with AsyncSessionLocal() as session:
        yield session


def get_directory(db: AsyncSession = Depends(get_db)) -> SqlStationDirectory:
    return SqlStationDirectory(db, limit=settings.DIRECTORY_QUERY_LIMIT)


def get_resolver(directory: SqlStationDirectory = Depends(get_directory)) -> Resolver:
    return Resolver(directory, postal_code_short_circuit=settings.POSTAL_CODE_SHORT_CIRCUIT)
