from freshstock.data.product import Product
from freshstock.data.product_batch import ProductBatch
from freshstock.data.repositories.base import SqlRepository
from freshstock.data.section import Section
from freshstock.domain.product_batch import BATCH_EXISTS


class ProductBatchRepository(SqlRepository):
    model = ProductBatch
    not_found_message = "product batch not found"
    already_exists_message = BATCH_EXISTS
    unique_field = 'batch_number'
    references = (('product_id', Product), ('section_id', Section))
