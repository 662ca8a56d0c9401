from freshstock.data.repositories import BuyerRepository
from freshstock.domain.buyer import BUYER_EXISTS
from freshstock.services.crud_service import CrudService


class BuyerService(CrudService):
    """Buyers: card_number_id is unique and may change on update"""

    entity_name = "buyer"
    unique_field = "card_number_id"
    already_exists_message = BUYER_EXISTS

    def __init__(self, repository=None):
        super().__init__(repository or BuyerRepository())
