from app.db import db
from datetime import datetime


class Comment(db.Model):
    __tablename__ = "comments"

    id = db.Column(db.String(50), primary_key=True)

    thread_id = db.Column(
        db.String(50),
        db.ForeignKey("threads.id", ondelete="CASCADE"),
        nullable=False
    )

    owner = db.Column(
        db.String(50),
        db.ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False
    )

    content = db.Column(db.Text, nullable=False)

    date = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    is_deleted = db.Column(db.Boolean, default=False, nullable=False)
