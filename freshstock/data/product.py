from freshstock import db
from freshstock.data.snapshot_mixin import SnapshotMixin
from freshstock.domain.product import Product as ProductSnapshot


class Product(db.Model, SnapshotMixin):
    __tablename__ = 'products'

    snapshot_class = ProductSnapshot

    id = db.Column(db.Integer, primary_key=True)
    description = db.Column(db.Text, nullable=False)
    expiration_rate = db.Column(db.Integer, nullable=False)
    freezing_rate = db.Column(db.Integer, nullable=False)
    height = db.Column(db.Float, nullable=False)
    length = db.Column(db.Float, nullable=False)
    net_weight = db.Column(db.Float, nullable=False)
    product_code = db.Column(db.String(50), nullable=False, unique=True)
    recommended_freezing_temperature = db.Column(db.Float, nullable=False)
    width = db.Column(db.Float, nullable=False)
    product_type_id = db.Column(db.Integer, db.ForeignKey('product_types.id'), nullable=False)
    seller_id = db.Column(db.Integer, db.ForeignKey('sellers.id'), nullable=True)

    def __repr__(self):
        return f'<Product {self.product_code}>'
