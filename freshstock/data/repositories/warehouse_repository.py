from freshstock.data.repositories.base import SqlRepository
from freshstock.data.warehouse import Warehouse
from freshstock.domain.warehouse import WAREHOUSE_EXISTS, WAREHOUSE_NOT_FOUND


class WarehouseRepository(SqlRepository):
    model = Warehouse
    not_found_message = WAREHOUSE_NOT_FOUND
    already_exists_message = WAREHOUSE_EXISTS
    unique_field = 'warehouse_code'
