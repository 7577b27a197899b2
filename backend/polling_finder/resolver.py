import logging
from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass

from polling_finder.core.directory import StationDirectory
from polling_finder.enums.matched_by import MatchedBy
from polling_finder.parsers.search_text import extract_postal_code, normalize_search_text
from polling_finder.schemas.responses import PollingStationRecord

logger = logging.getLogger(__name__)

Lookup = Callable[[str], Awaitable[Sequence[PollingStationRecord]]]

# ---------------------------
# Outcomes
# ---------------------------

@dataclass(frozen=True)
class Found:
    record: PollingStationRecord
    matched_by: MatchedBy

@dataclass(frozen=True)
class NotFound:
    pass

@dataclass(frozen=True)
class QueryFailed:
    cause: BaseException
    tier: MatchedBy

SearchOutcome = Found | NotFound | QueryFailed


def first_eligible(records: Sequence[PollingStationRecord]) -> PollingStationRecord | None:
    for record in records:
        if record.has_valid_coordinates:
            return record
    return None

# ---------------------------
# Resolver
# ---------------------------

class Resolver:
    """
    Maps free-form search text to at most one polling station.

    Tiers run in order (postal code, settlement, address) and the first tier
    with an eligible record wins. Holds no state between calls.
    """

    def __init__(self, directory: StationDirectory, postal_code_short_circuit: bool = True):
        self._directory = directory
        self._postal_code_short_circuit = postal_code_short_circuit

    async def resolve(self, text: str) -> SearchOutcome:
        """
        Returns:
            Found(record, matched_by) for the first eligible record of the first
            matching tier, NotFound when no tier matches, QueryFailed when a
            directory query raised. A query failure stops the search.

        A postal code that is present in the text but returns no rows at all
        ends the search with NotFound unless the short-circuit is disabled.
        """
        postal_code = extract_postal_code(text)
        if postal_code is not None:
            rows = await self._query(MatchedBy.POSTAL_CODE, self._directory.find_by_postal_code, postal_code)
            if isinstance(rows, QueryFailed):
                return rows
            record = first_eligible(rows)
            if record is not None:
                return self._found(record, MatchedBy.POSTAL_CODE)
            if not rows and self._postal_code_short_circuit:
                logger.info('Postal code %s is not in the directory', postal_code)
                return NotFound()

        needle = normalize_search_text(text)
        tiers: list[tuple[MatchedBy, Lookup]] = [
            (MatchedBy.SETTLEMENT, self._directory.find_by_settlement_contains),
            (MatchedBy.ADDRESS, self._directory.find_by_address_contains),
        ]
        for tier, lookup in tiers:
            rows = await self._query(tier, lookup, needle)
            if isinstance(rows, QueryFailed):
                return rows
            record = first_eligible(rows)
            if record is not None:
                return self._found(record, tier)

        logger.info('No polling station found (%d characters of input)', len(text))
        return NotFound()

    async def _query(self, tier: MatchedBy, lookup: Lookup, value: str) -> Sequence[PollingStationRecord] | QueryFailed:
        logger.debug('Trying %s tier', tier)
        try:
            return await lookup(value)
        except Exception as exc:
            # CancelledError is a BaseException and is not caught here
            logger.exception('Directory query failed in %s tier', tier)
            return QueryFailed(cause=exc, tier=tier)

    @staticmethod
    def _found(record: PollingStationRecord, matched_by: MatchedBy) -> Found:
        logger.info('Matched station %s by %s', record.station_number, matched_by)
        return Found(record=record, matched_by=matched_by)
