from freshstock.data.repositories import WarehouseRepository
from freshstock.domain.warehouse import WAREHOUSE_EXISTS
from freshstock.services.crud_service import CrudService


class WarehouseService(CrudService):
    entity_name = "warehouse"
    unique_field = "warehouse_code"
    already_exists_message = WAREHOUSE_EXISTS

    def __init__(self, repository=None):
        super().__init__(repository or WarehouseRepository())
