from freshstock import db
from freshstock.data.snapshot_mixin import SnapshotMixin
from freshstock.domain.buyer import Buyer as BuyerSnapshot


class Buyer(db.Model, SnapshotMixin):
    __tablename__ = 'buyers'

    snapshot_class = BuyerSnapshot

    id = db.Column(db.Integer, primary_key=True)
    card_number_id = db.Column(db.String(50), nullable=False, unique=True)
    first_name = db.Column(db.String(100), nullable=False)
    last_name = db.Column(db.String(100), nullable=False)

    def __repr__(self):
        return f'<Buyer {self.card_number_id}>'
