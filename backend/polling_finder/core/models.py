from polling_finder.core.constants import TABLE_POLLING_STATIONS
from sqlalchemy import Index, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    pass


class PollingStation(Base):
    __tablename__ = TABLE_POLLING_STATIONS
    __table_args__ = (
        Index('polling_stations_postal_code', 'postal_code'),
    )

    id: Mapped[int] = mapped_column(primary_key=True)
    postal_code: Mapped[str] = mapped_column(String(4))
    settlement: Mapped[str] = mapped_column()
    address: Mapped[str] = mapped_column()
    station_number: Mapped[str] = mapped_column()
    district: Mapped[str | None] = mapped_column()
    lat: Mapped[float | None] = mapped_column()
    lng: Mapped[float | None] = mapped_column()
