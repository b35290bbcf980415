from app.db import db


class User(db.Model):
    __tablename__ = "users"

    id = db.Column(db.String(50), primary_key=True)
    username = db.Column(db.String(50), unique=True, nullable=False)
    password = db.Column(db.Text, nullable=False)
    fullname = db.Column(db.Text, nullable=False)
