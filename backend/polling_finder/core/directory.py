"""
Read-only access to the polling-station dataset.

The resolver only needs three lookups, so it depends on the
``StationDirectory`` protocol rather than on a session or a table.
``SqlStationDirectory`` is the implementation used by the API.
"""
import logging
from collections.abc import Sequence
from typing import Protocol

from polling_finder.core.models import PollingStation
from polling_finder.exceptions import DirectoryError
from polling_finder.schemas.responses import PollingStationRecord
from sqlalchemy import Select, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

logger = logging.getLogger(__name__)

DEFAULT_QUERY_LIMIT = 50


class StationDirectory(Protocol):
    """Each lookup returns records in a stable order (primary key)."""

    async def find_by_postal_code(self, code: str) -> Sequence[PollingStationRecord]: ...

    async def find_by_settlement_contains(self, text: str) -> Sequence[PollingStationRecord]: ...

    async def find_by_address_contains(self, text: str) -> Sequence[PollingStationRecord]: ...


def to_record(row: PollingStation) -> PollingStationRecord:
    return PollingStationRecord(
        id=row.id,
        postal_code=row.postal_code,
        settlement=row.settlement,
        address=row.address,
        station_number=row.station_number,
        district=row.district,
        latitude=row.lat,
        longitude=row.lng,
    )


class SqlStationDirectory:
    def __init__(self, session: AsyncSession, limit: int | None = DEFAULT_QUERY_LIMIT):
        self._session = session
        self._limit = limit

    async def find_by_postal_code(self, code: str) -> list[PollingStationRecord]:
        stmt = select(PollingStation).where(PollingStation.postal_code == code)
        return await self._run('postal_code', stmt)

    async def find_by_settlement_contains(self, text: str) -> list[PollingStationRecord]:
        # autoescape keeps '%' and '_' typed by the user literal
        stmt = select(PollingStation).where(PollingStation.settlement.icontains(text, autoescape=True))
        return await self._run('settlement', stmt)

    async def find_by_address_contains(self, text: str) -> list[PollingStationRecord]:
        stmt = select(PollingStation).where(PollingStation.address.icontains(text, autoescape=True))
        return await self._run('address', stmt)

    async def _run(self, query: str, stmt: Select) -> list[PollingStationRecord]:
        stmt = stmt.order_by(PollingStation.id)
        if self._limit is not None:
            stmt = stmt.limit(self._limit)
        try:
            result = await self._session.execute(stmt)
            rows = result.scalars().all()
        except (SQLAlchemyError, OSError) as exc:
            # OSError: asyncpg raises connection failures without wrapping them
            raise DirectoryError(query, str(exc)) from exc
        logger.debug('Directory query %s returned %d rows', query, len(rows))
        return [to_record(row) for row in rows]
