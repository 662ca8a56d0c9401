from typing import List, Optional

from freshstock.data.repositories import SectionRepository
from freshstock.domain.section import (
    SECTION_EXISTS,
    SECTION_PRODUCT_TYPE_MISSING,
    SECTION_WAREHOUSE_MISSING,
    SectionProductsReport,
)
from freshstock.errors import ForeignKeyMissing
from freshstock.services.crud_service import CrudService


class SectionService(CrudService):
    entity_name = "section"
    unique_field = "section_number"
    already_exists_message = SECTION_EXISTS
    referent_errors = {
        "warehouse_id": (ForeignKeyMissing, SECTION_WAREHOUSE_MISSING),
        "product_type_id": (ForeignKeyMissing, SECTION_PRODUCT_TYPE_MISSING),
    }

    def __init__(self, repository=None):
        super().__init__(repository or SectionRepository())

    def report_products(self, section_id: Optional[int] = None) -> List[SectionProductsReport]:
        """
        Units of product stocked per section.

        Args:
            section_id: Restrict to one section; None reports all sections

        Raises:
            NotFound: If section_id is given and does not exist
        """
        return self.repository.report_products(section_id)
