from freshstock import db
from freshstock.data.snapshot_mixin import SnapshotMixin
from freshstock.domain.product_batch import ProductBatch as ProductBatchSnapshot


class ProductBatch(db.Model, SnapshotMixin):
    __tablename__ = 'product_batches'

    snapshot_class = ProductBatchSnapshot

    id = db.Column(db.Integer, primary_key=True)
    batch_number = db.Column(db.Integer, nullable=False, unique=True)
    current_quantity = db.Column(db.Integer, nullable=False)
    current_temperature = db.Column(db.Integer, nullable=False)
    due_date = db.Column(db.Date, nullable=False)
    initial_quantity = db.Column(db.Integer, nullable=False)
    manufacturing_date = db.Column(db.Date, nullable=False)
    manufacturing_hour = db.Column(db.Integer, nullable=False)
    minimum_temperature = db.Column(db.Integer, nullable=False)
    product_id = db.Column(db.Integer, db.ForeignKey('products.id'), nullable=False)
    section_id = db.Column(db.Integer, db.ForeignKey('sections.id'), nullable=False)

    def __repr__(self):
        return f'<ProductBatch {self.batch_number}>'
