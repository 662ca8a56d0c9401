from typing import List, Optional

from sqlalchemy import func, select

from freshstock.data.buyer import Buyer
from freshstock.data.lookups import OrderStatus
from freshstock.data.product_record import ProductRecord
from freshstock.data.purchase_order import PurchaseOrder
from freshstock.data.repositories.base import SqlRepository
from freshstock.domain.purchase_order import (
    PURCHASE_ORDER_EXISTS,
    PURCHASE_ORDER_NOT_FOUND,
    PURCHASE_ORDER_REFERENCE_MISSING,
    BuyerPurchaseOrdersReport,
)


class PurchaseOrderRepository(SqlRepository):
    model = PurchaseOrder
    not_found_message = PURCHASE_ORDER_NOT_FOUND
    already_exists_message = PURCHASE_ORDER_EXISTS
    foreign_key_message = PURCHASE_ORDER_REFERENCE_MISSING
    unique_field = 'order_number'
    references = (
        ('buyer_id', Buyer),
        ('product_record_id', ProductRecord),
        ('order_status_id', OrderStatus),
    )

    def report_by_buyer(self, buyer_id: Optional[int] = None) -> List[BuyerPurchaseOrdersReport]:
        """Purchase orders per buyer"""
        statement = (
            select(
                Buyer.id,
                Buyer.card_number_id,
                Buyer.first_name,
                Buyer.last_name,
                func.count(PurchaseOrder.id),
            )
            .outerjoin(PurchaseOrder, PurchaseOrder.buyer_id == Buyer.id)
            .group_by(Buyer.id, Buyer.card_number_id, Buyer.first_name, Buyer.last_name)
            .order_by(Buyer.id)
        )
        return self._aggregate(statement, Buyer.id, buyer_id, BuyerPurchaseOrdersReport, PURCHASE_ORDER_NOT_FOUND)
