"""Pydantic request schemas for the API.

Create requests declare every required field; patch requests make every field
optional, and a field that is omitted or null is left untouched. Types are
strict: "5" is not an int and 5 is not a str.
"""

from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field


# Integer columns are 64-bit; anything wider is a binding error, not a storage one
INT64_MIN = -2**63
INT64_MAX = 2**63 - 1
Int64 = Annotated[int, Field(ge=INT64_MIN, le=INT64_MAX)]


class RequestSchema(BaseModel):
    model_config = ConfigDict(strict=True)


# ---------------------------------------------------------------------------
# Localities
# ---------------------------------------------------------------------------
class LocalityCreateRequest(RequestSchema):
    id: str
    locality_name: str
    province_name: str
    country_name: str


# ---------------------------------------------------------------------------
# Sellers
# ---------------------------------------------------------------------------
class SellerCreateRequest(RequestSchema):
    cid: Int64
    company_name: str
    address: str
    telephone: str
    locality_id: str


class SellerPatchRequest(RequestSchema):
    cid: Optional[Int64] = None
    company_name: Optional[str] = None
    address: Optional[str] = None
    telephone: Optional[str] = None
    locality_id: Optional[str] = None


# ---------------------------------------------------------------------------
# Warehouses
# ---------------------------------------------------------------------------
class WarehouseCreateRequest(RequestSchema):
    address: str
    telephone: str
    warehouse_code: str
    minimum_capacity: Int64
    minimum_temperature: Int64


class WarehousePatchRequest(RequestSchema):
    address: Optional[str] = None
    telephone: Optional[str] = None
    warehouse_code: Optional[str] = None
    minimum_capacity: Optional[Int64] = None
    minimum_temperature: Optional[Int64] = None


# ---------------------------------------------------------------------------
# Carries
# ---------------------------------------------------------------------------
class CarryCreateRequest(RequestSchema):
    cid: str
    company_name: str
    address: str
    telephone: str
    locality_id: str


# ---------------------------------------------------------------------------
# Employees
# ---------------------------------------------------------------------------
class EmployeeCreateRequest(RequestSchema):
    card_number_id: str
    first_name: str
    last_name: str
    warehouse_id: Int64


class EmployeePatchRequest(RequestSchema):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    warehouse_id: Optional[Int64] = None


# ---------------------------------------------------------------------------
# Buyers
# ---------------------------------------------------------------------------
class BuyerCreateRequest(RequestSchema):
    card_number_id: str
    first_name: str
    last_name: str


class BuyerPatchRequest(RequestSchema):
    card_number_id: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None


# ---------------------------------------------------------------------------
# Sections
# ---------------------------------------------------------------------------
class SectionCreateRequest(RequestSchema):
    section_number: Int64
    current_temperature: Int64
    minimum_temperature: Int64
    current_capacity: Int64
    minimum_capacity: Int64
    maximum_capacity: Int64
    warehouse_id: Int64
    product_type_id: Int64


class SectionPatchRequest(RequestSchema):
    section_number: Optional[Int64] = None
    current_temperature: Optional[Int64] = None
    minimum_temperature: Optional[Int64] = None
    current_capacity: Optional[Int64] = None
    minimum_capacity: Optional[Int64] = None
    maximum_capacity: Optional[Int64] = None
    warehouse_id: Optional[Int64] = None
    product_type_id: Optional[Int64] = None


# ---------------------------------------------------------------------------
# Products
# ---------------------------------------------------------------------------
class ProductCreateRequest(RequestSchema):
    description: str
    expiration_rate: Int64
    freezing_rate: Int64
    height: float
    length: float
    net_weight: float
    product_code: str
    recommended_freezing_temperature: float
    width: float
    product_type_id: Int64
    seller_id: Optional[Int64] = None


class ProductPatchRequest(RequestSchema):
    description: Optional[str] = None
    expiration_rate: Optional[Int64] = None
    freezing_rate: Optional[Int64] = None
    height: Optional[float] = None
    length: Optional[float] = None
    net_weight: Optional[float] = None
    product_code: Optional[str] = None
    recommended_freezing_temperature: Optional[float] = None
    width: Optional[float] = None
    product_type_id: Optional[Int64] = None
    seller_id: Optional[Int64] = None


# ---------------------------------------------------------------------------
# Product batches and records
# ---------------------------------------------------------------------------
class ProductBatchCreateRequest(RequestSchema):
    batch_number: Int64
    current_quantity: Int64
    current_temperature: Int64
    due_date: str
    initial_quantity: Int64
    manufacturing_date: str
    manufacturing_hour: Int64
    minimum_temperature: Int64
    product_id: Int64
    section_id: Int64


class ProductRecordCreateRequest(RequestSchema):
    last_update_date: str
    purchase_price: float
    sale_price: float
    product_id: Int64


# ---------------------------------------------------------------------------
# Orders
# ---------------------------------------------------------------------------
class PurchaseOrderCreateRequest(RequestSchema):
    order_number: str
    order_date: str
    tracking_code: str
    buyer_id: Int64
    product_record_id: Int64
    order_status_id: Int64


class InboundOrderCreateRequest(RequestSchema):
    order_date: str
    order_number: str
    employee_id: Int64
    product_batch_id: Int64
    warehouse_id: Int64
