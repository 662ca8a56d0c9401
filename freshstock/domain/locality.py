from dataclasses import dataclass

from freshstock.domain.base import Snapshot

LOCALITY_EXISTS = "id already exists"
LOCALITY_NOT_FOUND = "locality not found"
LOCALITY_REPORT_NOT_FOUND = "Id {id} does not exist"


@dataclass(frozen=True)
class Locality(Snapshot):
    id: str
    locality_name: str
    province_name: str
    country_name: str


@dataclass(frozen=True)
class LocalitySellersReport(Snapshot):
    locality_id: str
    locality_name: str
    sellers_count: int


@dataclass(frozen=True)
class LocalityCarriesReport(Snapshot):
    locality_id: str
    locality_name: str
    carries_count: int
