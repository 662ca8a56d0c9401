from freshstock import db
from freshstock.data.snapshot_mixin import SnapshotMixin
from freshstock.domain.seller import Seller as SellerSnapshot


class Seller(db.Model, SnapshotMixin):
    __tablename__ = 'sellers'

    snapshot_class = SellerSnapshot

    id = db.Column(db.Integer, primary_key=True)
    cid = db.Column(db.Integer, nullable=False, unique=True)
    company_name = db.Column(db.String(100), nullable=False)
    address = db.Column(db.String(255), nullable=False)
    telephone = db.Column(db.String(50), nullable=False)
    locality_id = db.Column(db.String(50), db.ForeignKey('localities.id'), nullable=False)

    def __repr__(self):
        return f'<Seller {self.cid}>'
