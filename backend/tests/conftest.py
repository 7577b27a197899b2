"""Shared test fixtures: a small polling-station dataset and an in-memory directory."""

import pytest

from polling_finder.schemas.responses import PollingStationRecord


def make_record(id: int, postal_code: str, settlement: str, address: str,
                latitude: float | None = 47.4979, longitude: float | None = 19.0402,
                station_number: str | None = None, district: str | None = None) -> PollingStationRecord:
    return PollingStationRecord(
        id=id,
        postal_code=postal_code,
        settlement=settlement,
        address=address,
        station_number=station_number or f'{id:03d}',
        district=district,
        latitude=latitude,
        longitude=longitude,
    )


STATIONS = [
    make_record(1, '1052', 'Budapest', 'Petőfi Sándor utca 10.', 47.4935, 19.0533, district='V. kerület'),
    # Same postal code twice: the first one has no coordinates and cannot be shown
    make_record(2, '1011', 'Budapest', 'Fő utca 1.', None, None, district='I. kerület'),
    make_record(3, '1011', 'Budapest', 'Fő utca 20.', 47.5003, 19.0386, district='I. kerület'),
    make_record(4, '7621', 'Pécs', 'Kossuth tér 1.', 46.0763, 18.2281),
    make_record(5, '1234', 'Nowhere', 'Main Street 1.', 47.0, 19.0),
    make_record(6, '3300', 'Eger', 'Dobó tér 2.', None, None),
    make_record(7, '2000', 'Szentendre', 'Duna korzó 5.', 91.0, 19.07),
    make_record(8, '2000', 'Szentendre', 'Duna korzó 18.', 47.6694, 19.0757),
]


class FakeDirectory:
    """In-memory station directory recording every lookup it serves."""

    def __init__(self, records: list[PollingStationRecord], failures: dict[str, Exception] | None = None):
        self.records = sorted(records, key=lambda r: r.id)
        self.failures = failures or {}
        self.calls: list[tuple[str, str]] = []

    async def find_by_postal_code(self, code: str) -> list[PollingStationRecord]:
        return self._lookup('postal_code', code, lambda r: r.postal_code == code)

    async def find_by_settlement_contains(self, text: str) -> list[PollingStationRecord]:
        return self._lookup('settlement', text, lambda r: text.lower() in r.settlement.lower())

    async def find_by_address_contains(self, text: str) -> list[PollingStationRecord]:
        return self._lookup('address', text, lambda r: text.lower() in r.address.lower())

    def _lookup(self, method, value, predicate) -> list[PollingStationRecord]:
        self.calls.append((method, value))
        if method in self.failures:
            raise self.failures[method]
        return [r for r in self.records if predicate(r)]


@pytest.fixture()
def stations() -> list[PollingStationRecord]:
    return list(STATIONS)


@pytest.fixture()
def directory(stations) -> FakeDirectory:
    return FakeDirectory(stations)


@pytest.fixture()
def resolver(directory):
    from polling_finder.resolver import Resolver

    return Resolver(directory)
