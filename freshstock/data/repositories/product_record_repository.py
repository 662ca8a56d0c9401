from freshstock.data.product import Product
from freshstock.data.product_record import ProductRecord
from freshstock.data.repositories.base import SqlRepository
from freshstock.domain.product_record import RECORD_NOT_FOUND, RECORD_PRODUCT_MISSING


class ProductRecordRepository(SqlRepository):
    model = ProductRecord
    not_found_message = RECORD_NOT_FOUND
    foreign_key_message = RECORD_PRODUCT_MISSING
    references = (('product_id', Product),)
