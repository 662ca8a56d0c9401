"""
Data layer: SQLAlchemy models and the repositories that wrap them.
Importing this package registers every table with the metadata.
"""

from freshstock.data.locality import Locality
from freshstock.data.seller import Seller
from freshstock.data.warehouse import Warehouse
from freshstock.data.carry import Carry
from freshstock.data.employee import Employee
from freshstock.data.buyer import Buyer
from freshstock.data.lookups import OrderStatus, ProductType
from freshstock.data.section import Section
from freshstock.data.product import Product
from freshstock.data.product_batch import ProductBatch
from freshstock.data.product_record import ProductRecord
from freshstock.data.purchase_order import PurchaseOrder
from freshstock.data.inbound_order import InboundOrder
from freshstock.data.log_entry import LogEntry
