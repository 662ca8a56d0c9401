from freshstock import db
from freshstock.data.snapshot_mixin import SnapshotMixin
from freshstock.domain.carry import CID_MAX_LENGTH, Carry as CarrySnapshot


class Carry(db.Model, SnapshotMixin):
    __tablename__ = 'carries'

    snapshot_class = CarrySnapshot

    id = db.Column(db.Integer, primary_key=True)
    cid = db.Column(db.String(CID_MAX_LENGTH), nullable=False, unique=True)
    company_name = db.Column(db.String(100), nullable=False)
    address = db.Column(db.String(255), nullable=False)
    telephone = db.Column(db.String(50), nullable=False)
    locality_id = db.Column(db.String(50), db.ForeignKey('localities.id'), nullable=False)

    def __repr__(self):
        return f'<Carry {self.cid}>'
