from freshstock.data.repositories.buyer_repository import BuyerRepository
from freshstock.data.repositories.carry_repository import CarryRepository
from freshstock.data.repositories.employee_repository import EmployeeRepository
from freshstock.data.repositories.inbound_order_repository import InboundOrderRepository
from freshstock.data.repositories.locality_repository import LocalityRepository
from freshstock.data.repositories.product_batch_repository import ProductBatchRepository
from freshstock.data.repositories.product_record_repository import ProductRecordRepository
from freshstock.data.repositories.product_repository import ProductRepository
from freshstock.data.repositories.purchase_order_repository import PurchaseOrderRepository
from freshstock.data.repositories.section_repository import SectionRepository
from freshstock.data.repositories.seller_repository import SellerRepository
from freshstock.data.repositories.warehouse_repository import WarehouseRepository
