from freshstock import db
from freshstock.data.snapshot_mixin import SnapshotMixin
from freshstock.domain.employee import Employee as EmployeeSnapshot


class Employee(db.Model, SnapshotMixin):
    __tablename__ = 'employees'

    snapshot_class = EmployeeSnapshot

    id = db.Column(db.Integer, primary_key=True)
    card_number_id = db.Column(db.String(50), nullable=False, unique=True)
    first_name = db.Column(db.String(100), nullable=False)
    last_name = db.Column(db.String(100), nullable=False)
    warehouse_id = db.Column(db.Integer, db.ForeignKey('warehouses.id'), nullable=False)

    def __repr__(self):
        return f'<Employee {self.card_number_id}>'
