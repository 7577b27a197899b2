import logging

from polling_finder.core.deps import get_resolver
from polling_finder.resolver import Found, NotFound, QueryFailed, Resolver
from polling_finder.schemas import requests, responses
from polling_finder.utils import station_location
from fastapi import APIRouter, Depends, HTTPException, status

logger = logging.getLogger(__name__)

NOT_FOUND_DETAIL = 'No polling station found for this address'
QUERY_FAILED_DETAIL = 'Polling station lookup failed, try again later'


api_router = APIRouter(prefix='')


def _to_match(outcome: Found, destination_srid: int | None) -> responses.PollingStationMatch:
    record = outcome.record
    return responses.PollingStationMatch(
        id=record.id,
        postal_code=record.postal_code,
        settlement=record.settlement,
        address=record.address,
        station_number=record.station_number,
        district=record.district,
        latitude=record.latitude,
        longitude=record.longitude,
        matched_by=outcome.matched_by,
        location=station_location(record, destination_srid),
    )


@api_router.post('/search', responses={
    status.HTTP_404_NOT_FOUND: {'description': NOT_FOUND_DETAIL},
    status.HTTP_503_SERVICE_UNAVAILABLE: {'description': QUERY_FAILED_DETAIL},
})
async def search_polling_station(search: requests.SearchPollingStation, resolver: Resolver = Depends(get_resolver)) -> responses.PollingStationMatch:
    outcome = await resolver.resolve(search.free_text)
    match outcome:
        case Found():
            return _to_match(outcome, search.destination_srid)
        case NotFound():
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND_DETAIL)
        case QueryFailed(cause=cause, tier=tier):
            logger.warning('Search failed in %s tier: %s', tier, type(cause).__name__)
            raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=QUERY_FAILED_DETAIL)
