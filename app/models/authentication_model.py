from app.db import db


class Authentication(db.Model):
    __tablename__ = "authentications"

    # refresh tokens issued at login and not yet revoked
    token = db.Column(db.Text, primary_key=True)
