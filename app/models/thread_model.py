from app.db import db
from datetime import datetime


class Thread(db.Model):
    __tablename__ = "threads"

    id = db.Column(db.String(50), primary_key=True)
    title = db.Column(db.Text, nullable=False)
    body = db.Column(db.Text, nullable=False)

    owner = db.Column(
        db.String(50),
        db.ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False
    )

    date = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
