"""
Lookup tables referenced by the API but not managed through it.
Rows are seeded by freshstock.build.
"""

from freshstock import db


class ProductType(db.Model):
    __tablename__ = 'product_types'

    id = db.Column(db.Integer, primary_key=True)
    description = db.Column(db.String(100), nullable=False, unique=True)

    def __repr__(self):
        return f'<ProductType {self.description}>'


class OrderStatus(db.Model):
    __tablename__ = 'order_statuses'

    id = db.Column(db.Integer, primary_key=True)
    description = db.Column(db.String(100), nullable=False, unique=True)

    def __repr__(self):
        return f'<OrderStatus {self.description}>'
