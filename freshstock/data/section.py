from freshstock import db
from freshstock.data.snapshot_mixin import SnapshotMixin
from freshstock.domain.section import Section as SectionSnapshot


class Section(db.Model, SnapshotMixin):
    __tablename__ = 'sections'

    snapshot_class = SectionSnapshot

    id = db.Column(db.Integer, primary_key=True)
    section_number = db.Column(db.Integer, nullable=False, unique=True)
    current_temperature = db.Column(db.Integer, nullable=False)
    minimum_temperature = db.Column(db.Integer, nullable=False)
    current_capacity = db.Column(db.Integer, nullable=False)
    minimum_capacity = db.Column(db.Integer, nullable=False)
    maximum_capacity = db.Column(db.Integer, nullable=False)
    warehouse_id = db.Column(db.Integer, db.ForeignKey('warehouses.id'), nullable=False)
    product_type_id = db.Column(db.Integer, db.ForeignKey('product_types.id'), nullable=False)

    def __repr__(self):
        return f'<Section {self.section_number}>'
