from freshstock import db
from freshstock.data.snapshot_mixin import SnapshotMixin
from freshstock.domain.locality import Locality as LocalitySnapshot


class Locality(db.Model, SnapshotMixin):
    __tablename__ = 'localities'

    snapshot_class = LocalitySnapshot

    id = db.Column(db.String(50), primary_key=True)
    locality_name = db.Column(db.String(100), nullable=False)
    province_name = db.Column(db.String(100), nullable=False)
    country_name = db.Column(db.String(100), nullable=False)

    def __repr__(self):
        return f'<Locality {self.id}>'
