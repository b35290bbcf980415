from app.domain.authentications import AuthenticationRepository
from app.exceptions import InvariantError
from app.models.authentication_model import Authentication


class AuthenticationRepositorySQLAlchemy(AuthenticationRepository):
    def __init__(self, session):
        self.session = session

    def add_token(self, token: str) -> None:
        self.session.add(Authentication(token=token))
        self.session.commit()

    def check_availability_token(self, token: str) -> None:
        exists = (
            self.session.query(Authentication.token)
            .filter(Authentication.token == token)
            .first()
        )
        if not exists:
            raise InvariantError("refresh token not found in database")

    def delete_token(self, token: str) -> None:
        self.session.query(Authentication).filter(
            Authentication.token == token
        ).delete(synchronize_session=False)
        self.session.commit()
