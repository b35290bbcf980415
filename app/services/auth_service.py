import logging

from app.domain.authentications import NewAuth, UserLogin
from app.exceptions import AuthenticationError


logger = logging.getLogger(__name__)


class LoginUserUseCase:
    def __init__(self, *, user_repository, authentication_repository, token_manager, password_hash):
        self.user_repository = user_repository
        self.authentication_repository = authentication_repository
        self.token_manager = token_manager
        self.password_hash = password_hash

    def execute(self, user_login: UserLogin) -> NewAuth:
        hashed_password = self.user_repository.get_password_by_username(user_login.username)
        try:
            self.password_hash.compare_password(user_login.password, hashed_password)
        except AuthenticationError:
            logger.warning("Rejected login for %s", user_login.username)
            raise

        user_id = self.user_repository.get_id_by_username(user_login.username)

        access_token = self.token_manager.create_access_token(user_id, user_login.username)
        refresh_token = self.token_manager.create_refresh_token(user_id, user_login.username)
        self.authentication_repository.add_token(refresh_token)

        logger.info("User %s logged in", user_id)
        return NewAuth(access_token=access_token, refresh_token=refresh_token)


class RefreshAuthenticationUseCase:
    def __init__(self, *, authentication_repository, token_manager):
        self.authentication_repository = authentication_repository
        self.token_manager = token_manager

    def execute(self, refresh_token: str) -> str:
        claims = self.token_manager.verify_refresh_token(refresh_token)
        self.authentication_repository.check_availability_token(refresh_token)

        return self.token_manager.create_access_token(claims["sub"], claims.get("username"))


class LogoutUserUseCase:
    def __init__(self, *, authentication_repository):
        self.authentication_repository = authentication_repository

    def execute(self, refresh_token: str) -> None:
        self.authentication_repository.check_availability_token(refresh_token)
        self.authentication_repository.delete_token(refresh_token)
