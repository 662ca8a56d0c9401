from freshstock import db
from freshstock.data.snapshot_mixin import SnapshotMixin
from freshstock.domain.warehouse import Warehouse as WarehouseSnapshot


class Warehouse(db.Model, SnapshotMixin):
    __tablename__ = 'warehouses'

    snapshot_class = WarehouseSnapshot

    id = db.Column(db.Integer, primary_key=True)
    address = db.Column(db.String(255), nullable=False)
    telephone = db.Column(db.String(50), nullable=False)
    warehouse_code = db.Column(db.String(50), nullable=False, unique=True)
    minimum_capacity = db.Column(db.Integer, nullable=False)
    minimum_temperature = db.Column(db.Integer, nullable=False)

    def __repr__(self):
        return f'<Warehouse {self.warehouse_code}>'
