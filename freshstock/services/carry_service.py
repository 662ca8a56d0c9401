from freshstock.data.repositories import CarryRepository
from freshstock.domain.base import enforce_max_length
from freshstock.domain.carry import CARRY_BOUNDS, CARRY_EXISTS
from freshstock.services.crud_service import CrudService


class CarryService(CrudService):
    """Carries are create-only; cid is bounded and unique"""

    entity_name = "carry"
    unique_field = "cid"
    already_exists_message = CARRY_EXISTS

    def __init__(self, repository=None):
        super().__init__(repository or CarryRepository())

    def create(self, snapshot):
        enforce_max_length(snapshot, CARRY_BOUNDS)
        return super().create(snapshot)
