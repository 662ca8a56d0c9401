from typing import List, Optional

from freshstock.data.repositories import ProductRepository
from freshstock.domain.product import PRODUCT_EXISTS, PRODUCT_SELLER_MISSING, ProductRecordsReport
from freshstock.errors import ReferentNotFound
from freshstock.services.crud_service import CrudService


class ProductService(CrudService):
    """
    Products: product_code is unique; seller is optional.

    Creates and updates answer with the row as re-read from storage.
    """

    entity_name = "product"
    unique_field = "product_code"
    already_exists_message = PRODUCT_EXISTS
    referent_errors = {"seller_id": (ReferentNotFound, PRODUCT_SELLER_MISSING)}

    def __init__(self, repository=None):
        super().__init__(repository or ProductRepository())

    def create(self, snapshot):
        created = super().create(snapshot)
        return self.repository.get(created.id)

    def update(self, entity_id, patch):
        super().update(entity_id, patch)
        return self.repository.get(entity_id)

    def report_records(self, product_id: Optional[int] = None) -> List[ProductRecordsReport]:
        """
        Count price records per product.

        Args:
            product_id: Restrict to one product; None reports all products

        Raises:
            NotFound: If product_id is given and does not exist
        """
        return self.repository.report_records(product_id)
