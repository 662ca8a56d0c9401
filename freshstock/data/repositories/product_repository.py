from typing import List, Optional

from sqlalchemy import func, select

from freshstock.data.lookups import ProductType
from freshstock.data.product import Product
from freshstock.data.product_record import ProductRecord
from freshstock.data.repositories.base import SqlRepository
from freshstock.data.seller import Seller
from freshstock.domain.product import (
    PRODUCT_EXISTS,
    PRODUCT_NOT_FOUND,
    PRODUCT_REFERENCE_MISSING,
    ProductRecordsReport,
)


class ProductRepository(SqlRepository):
    model = Product
    not_found_message = PRODUCT_NOT_FOUND
    already_exists_message = PRODUCT_EXISTS
    foreign_key_message = PRODUCT_REFERENCE_MISSING
    unique_field = 'product_code'
    references = (('seller_id', Seller), ('product_type_id', ProductType))

    def report_records(self, product_id: Optional[int] = None) -> List[ProductRecordsReport]:
        """Price records per product"""
        statement = (
            select(Product.id, Product.description, func.count(ProductRecord.id))
            .outerjoin(ProductRecord, ProductRecord.product_id == Product.id)
            .group_by(Product.id, Product.description)
            .order_by(Product.id)
        )
        return self._aggregate(statement, Product.id, product_id, ProductRecordsReport, PRODUCT_NOT_FOUND)
