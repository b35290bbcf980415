import logging
from dataclasses import replace

from app.domain.users import RegisterUser, RegisteredUser


logger = logging.getLogger(__name__)


class AddUserUseCase:
    def __init__(self, *, user_repository, password_hash):
        self.user_repository = user_repository
        self.password_hash = password_hash

    def execute(self, register_user: RegisterUser) -> RegisteredUser:
        self.user_repository.verify_available_username(register_user.username)

        hashed = self.password_hash.hash(register_user.password)
        registered_user = self.user_repository.add_user(
            replace(register_user, password=hashed)
        )

        logger.info("Registered user %s", registered_user.id)
        return registered_user
