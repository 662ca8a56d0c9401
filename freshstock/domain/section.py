from dataclasses import dataclass
from typing import Optional

from freshstock.domain.base import Snapshot
from freshstock.domain.optional import ABSENT, Option

SECTION_EXISTS = "a section with the section_number {section_number} already exists"
SECTION_NOT_FOUND = "The section with id {id} does not exists"
SECTION_WAREHOUSE_MISSING = "the given id does not have a warehouse attached to it"
SECTION_PRODUCT_TYPE_MISSING = "the given id does not have a product type attached to it"


@dataclass(frozen=True)
class Section(Snapshot):
    id: Optional[int]
    section_number: int
    current_temperature: int
    minimum_temperature: int
    current_capacity: int
    minimum_capacity: int
    maximum_capacity: int
    warehouse_id: int
    product_type_id: int


@dataclass(frozen=True)
class SectionPatch:
    section_number: Option[int] = ABSENT
    current_temperature: Option[int] = ABSENT
    minimum_temperature: Option[int] = ABSENT
    current_capacity: Option[int] = ABSENT
    minimum_capacity: Option[int] = ABSENT
    maximum_capacity: Option[int] = ABSENT
    warehouse_id: Option[int] = ABSENT
    product_type_id: Option[int] = ABSENT


@dataclass(frozen=True)
class SectionProductsReport(Snapshot):
    section_id: int
    section_number: int
    products_count: int
