from typing import List, Optional

from sqlalchemy import func, select

from freshstock.data.carry import Carry
from freshstock.data.locality import Locality
from freshstock.data.repositories.base import SqlRepository
from freshstock.data.seller import Seller
from freshstock.domain.locality import (
    LOCALITY_EXISTS,
    LOCALITY_NOT_FOUND,
    LOCALITY_REPORT_NOT_FOUND,
    LocalityCarriesReport,
    LocalitySellersReport,
)


class LocalityRepository(SqlRepository):
    model = Locality
    not_found_message = LOCALITY_NOT_FOUND
    already_exists_message = LOCALITY_EXISTS
    unique_field = 'id'

    def report_sellers(self, locality_id: Optional[str] = None) -> List[LocalitySellersReport]:
        """Sellers per locality, localities without sellers included with 0"""
        statement = (
            select(Locality.id, Locality.locality_name, func.count(Seller.id))
            .outerjoin(Seller, Seller.locality_id == Locality.id)
            .group_by(Locality.id, Locality.locality_name)
            .order_by(Locality.id)
        )
        return self._aggregate(statement, Locality.id, locality_id, LocalitySellersReport, LOCALITY_REPORT_NOT_FOUND)

    def report_carries(self, locality_id: Optional[str] = None) -> List[LocalityCarriesReport]:
        """Carries per locality, localities without carries included with 0"""
        statement = (
            select(Locality.id, Locality.locality_name, func.count(Carry.id))
            .outerjoin(Carry, Carry.locality_id == Locality.id)
            .group_by(Locality.id, Locality.locality_name)
            .order_by(Locality.id)
        )
        return self._aggregate(statement, Locality.id, locality_id, LocalityCarriesReport, LOCALITY_REPORT_NOT_FOUND)
