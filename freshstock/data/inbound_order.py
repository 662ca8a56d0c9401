from freshstock import db
from freshstock.data.snapshot_mixin import SnapshotMixin
from freshstock.domain.inbound_order import InboundOrder as InboundOrderSnapshot


class InboundOrder(db.Model, SnapshotMixin):
    __tablename__ = 'inbound_orders'

    snapshot_class = InboundOrderSnapshot

    id = db.Column(db.Integer, primary_key=True)
    order_date = db.Column(db.Date, nullable=False)
    order_number = db.Column(db.String(50), nullable=False, unique=True)
    employee_id = db.Column(db.Integer, db.ForeignKey('employees.id'), nullable=False)
    product_batch_id = db.Column(db.Integer, db.ForeignKey('product_batches.id'), nullable=False)
    warehouse_id = db.Column(db.Integer, db.ForeignKey('warehouses.id'), nullable=False)

    def __repr__(self):
        return f'<InboundOrder {self.order_number}>'
