from typing import List, Optional

from sqlalchemy import func, select

from freshstock.data.lookups import ProductType
from freshstock.data.product_batch import ProductBatch
from freshstock.data.repositories.base import SqlRepository
from freshstock.data.section import Section
from freshstock.data.warehouse import Warehouse
from freshstock.domain.section import SECTION_EXISTS, SECTION_NOT_FOUND, SectionProductsReport


class SectionRepository(SqlRepository):
    model = Section
    not_found_message = SECTION_NOT_FOUND
    already_exists_message = SECTION_EXISTS
    unique_field = 'section_number'
    references = (('warehouse_id', Warehouse), ('product_type_id', ProductType))

    def report_products(self, section_id: Optional[int] = None) -> List[SectionProductsReport]:
        """Units stocked per section: the summed current quantity of its batches"""
        statement = (
            select(
                Section.id,
                Section.section_number,
                func.coalesce(func.sum(ProductBatch.current_quantity), 0),
            )
            .outerjoin(ProductBatch, ProductBatch.section_id == Section.id)
            .group_by(Section.id, Section.section_number)
            .order_by(Section.id)
        )
        return self._aggregate(statement, Section.id, section_id, SectionProductsReport, SECTION_NOT_FOUND)
