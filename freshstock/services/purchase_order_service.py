from dataclasses import replace
from typing import List, Optional

from freshstock.data.repositories import PurchaseOrderRepository
from freshstock.domain.base import enforce_max_length
from freshstock.domain.dates import normalize_date
from freshstock.domain.purchase_order import (
    PURCHASE_ORDER_BOUNDS,
    PURCHASE_ORDER_DATE_INVALID,
    PURCHASE_ORDER_EXISTS,
    BuyerPurchaseOrdersReport,
)
from freshstock.errors import DateInvalid
from freshstock.services.crud_service import CrudService


class PurchaseOrderService(CrudService):
    entity_name = "purchase order"
    unique_field = "order_number"
    already_exists_message = PURCHASE_ORDER_EXISTS

    def __init__(self, repository=None):
        super().__init__(repository or PurchaseOrderRepository())

    def create(self, snapshot):
        enforce_max_length(snapshot, PURCHASE_ORDER_BOUNDS)
        try:
            snapshot = replace(snapshot, order_date=normalize_date(snapshot.order_date))
        except ValueError as error:
            raise DateInvalid(PURCHASE_ORDER_DATE_INVALID) from error
        return super().create(snapshot)

    def report_by_buyer(self, buyer_id: Optional[int] = None) -> List[BuyerPurchaseOrdersReport]:
        """
        Count purchase orders per buyer.

        Args:
            buyer_id: Restrict to one buyer; None reports all buyers

        Raises:
            NotFound: If buyer_id is given and does not exist
        """
        return self.repository.report_by_buyer(buyer_id)
