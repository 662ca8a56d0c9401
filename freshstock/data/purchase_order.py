from freshstock import db
from freshstock.data.snapshot_mixin import SnapshotMixin
from freshstock.domain.purchase_order import (
    ORDER_NUMBER_MAX_LENGTH,
    TRACKING_CODE_MAX_LENGTH,
    PurchaseOrder as PurchaseOrderSnapshot,
)


class PurchaseOrder(db.Model, SnapshotMixin):
    __tablename__ = 'purchase_orders'

    snapshot_class = PurchaseOrderSnapshot

    id = db.Column(db.Integer, primary_key=True)
    order_number = db.Column(db.String(ORDER_NUMBER_MAX_LENGTH), nullable=False, unique=True)
    order_date = db.Column(db.Date, nullable=False)
    tracking_code = db.Column(db.String(TRACKING_CODE_MAX_LENGTH), nullable=False)
    buyer_id = db.Column(db.Integer, db.ForeignKey('buyers.id'), nullable=False)
    product_record_id = db.Column(db.Integer, db.ForeignKey('product_records.id'), nullable=False)
    order_status_id = db.Column(db.Integer, db.ForeignKey('order_statuses.id'), nullable=False)

    def __repr__(self):
        return f'<PurchaseOrder {self.order_number}>'
