from flask_jwt_extended import create_access_token, create_refresh_token, decode_token
from flask_jwt_extended.exceptions import JWTExtendedException
from jwt.exceptions import PyJWTError
from werkzeug.security import check_password_hash, generate_password_hash

from app.exceptions import AuthenticationError, InvariantError


class PasswordHash:
    def hash(self, password: str) -> str:
        return generate_password_hash(password)

    def compare_password(self, password: str, hashed_password: str) -> None:
        if not check_password_hash(hashed_password, password):
            raise AuthenticationError("wrong credentials")


class TokenManager:
    """Issues and checks JWTs through flask-jwt-extended.

    Must run inside an application context. The signing key and token
    lifetimes come from ``JWT_SECRET_KEY`` and ``JWT_*_TOKEN_EXPIRES``.
    """

    def create_access_token(self, user_id: str, username: str) -> str:
        return create_access_token(
            identity=user_id,
            additional_claims={"username": username},
        )

    def create_refresh_token(self, user_id: str, username: str) -> str:
        return create_refresh_token(
            identity=user_id,
            additional_claims={"username": username},
        )

    def verify_refresh_token(self, token: str) -> dict:
        try:
            claims = decode_token(token)
        except (PyJWTError, JWTExtendedException) as e:
            raise InvariantError("invalid refresh token") from e

        if claims.get("type") != "refresh":
            raise InvariantError("invalid refresh token")

        return claims
