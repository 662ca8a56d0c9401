from typing import List, Optional

from freshstock.data.repositories import LocalityRepository
from freshstock.domain.locality import LOCALITY_EXISTS, LocalityCarriesReport, LocalitySellersReport
from freshstock.services.crud_service import CrudService


class LocalityService(CrudService):
    """
    Localities are keyed by a caller-supplied string id and never deleted.

    Also orchestrates the sellers-per-locality and carries-per-locality reports.
    """

    entity_name = "locality"
    unique_field = "id"
    already_exists_message = LOCALITY_EXISTS

    def __init__(self, repository=None):
        super().__init__(repository or LocalityRepository())

    def report_sellers(self, locality_id: Optional[str] = None) -> List[LocalitySellersReport]:
        """
        Count sellers per locality.

        Args:
            locality_id: Restrict to one locality; None reports all

        Raises:
            NotFound: If locality_id is given and does not exist
        """
        return self.repository.report_sellers(locality_id)

    def report_carries(self, locality_id: Optional[str] = None) -> List[LocalityCarriesReport]:
        """Count carries per locality; same filtering rules as report_sellers"""
        return self.repository.report_carries(locality_id)
