from freshstock import db


class LogEntry(db.Model):
    """One surfaced error, appended by the database log handler"""
    __tablename__ = 'logs'

    id = db.Column(db.Integer, primary_key=True)
    time_stamp = db.Column(db.String(40), nullable=False)
    user = db.Column(db.String(100), nullable=True)
    file_path = db.Column(db.String(255), nullable=True)
    function_line = db.Column(db.String(20), nullable=True)
    caller_function = db.Column(db.String(255), nullable=True)
    msg = db.Column(db.Text, nullable=False)
