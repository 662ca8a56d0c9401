from freshstock import db
from freshstock.data.snapshot_mixin import SnapshotMixin
from freshstock.domain.product_record import ProductRecord as ProductRecordSnapshot


class ProductRecord(db.Model, SnapshotMixin):
    __tablename__ = 'product_records'

    snapshot_class = ProductRecordSnapshot

    id = db.Column(db.Integer, primary_key=True)
    last_update_date = db.Column(db.Date, nullable=False)
    purchase_price = db.Column(db.Float, nullable=False)
    sale_price = db.Column(db.Float, nullable=False)
    product_id = db.Column(db.Integer, db.ForeignKey('products.id'), nullable=False)

    def __repr__(self):
        return f'<ProductRecord {self.id} product={self.product_id}>'
