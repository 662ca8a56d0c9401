from freshstock.data.repositories import SellerRepository
from freshstock.domain.seller import SELLER_EXISTS, SELLER_LOCALITY_MISSING
from freshstock.errors import ForeignKeyMissing
from freshstock.services.crud_service import CrudService


class SellerService(CrudService):
    """Sellers: cid is unique; every seller belongs to an existing locality"""

    entity_name = "seller"
    unique_field = "cid"
    already_exists_message = SELLER_EXISTS
    referent_errors = {"locality_id": (ForeignKeyMissing, SELLER_LOCALITY_MISSING)}

    def __init__(self, repository=None):
        super().__init__(repository or SellerRepository())
