import unittest
from unittest.mock import Mock

from app.domain.authentications import AuthenticationRepository, NewAuth, UserLogin
from app.domain.users import UserRepository
from app.exceptions import AuthenticationError, InvariantError
from app.security import PasswordHash, TokenManager
from app.services.auth_service import (
    LoginUserUseCase,
    LogoutUserUseCase,
    RefreshAuthenticationUseCase,
)


class TestLoginUserUseCase(unittest.TestCase):
    def setUp(self):
        self.user_repository = Mock(spec=UserRepository)
        self.user_repository.get_password_by_username.return_value = "encrypted_password"
        self.user_repository.get_id_by_username.return_value = "user-123"
        self.authentication_repository = Mock(spec=AuthenticationRepository)
        self.token_manager = Mock(spec=TokenManager)
        self.token_manager.create_access_token.return_value = "access_token"
        self.token_manager.create_refresh_token.return_value = "refresh_token"
        self.password_hash = Mock(spec=PasswordHash)

        self.use_case = LoginUserUseCase(
            user_repository=self.user_repository,
            authentication_repository=self.authentication_repository,
            token_manager=self.token_manager,
            password_hash=self.password_hash,
        )

    def test_execute_issues_tokens_and_stores_refresh_token(self):
        new_auth = self.use_case.execute(UserLogin(username="dicoding", password="secret"))

        self.assertEqual(new_auth, NewAuth(access_token="access_token", refresh_token="refresh_token"))
        self.password_hash.compare_password.assert_called_once_with("secret", "encrypted_password")
        self.token_manager.create_access_token.assert_called_once_with("user-123", "dicoding")
        self.token_manager.create_refresh_token.assert_called_once_with("user-123", "dicoding")
        self.authentication_repository.add_token.assert_called_once_with("refresh_token")

    def test_execute_rejects_wrong_password(self):
        self.password_hash.compare_password.side_effect = AuthenticationError("wrong credentials")

        with self.assertRaises(AuthenticationError):
            self.use_case.execute(UserLogin(username="dicoding", password="wrong"))
        self.authentication_repository.add_token.assert_not_called()


class TestRefreshAuthenticationUseCase(unittest.TestCase):
    def test_execute_returns_new_access_token(self):
        authentication_repository = Mock(spec=AuthenticationRepository)
        token_manager = Mock(spec=TokenManager)
        token_manager.verify_refresh_token.return_value = {
            "sub": "user-123",
            "username": "dicoding",
            "type": "refresh",
        }
        token_manager.create_access_token.return_value = "new_access_token"

        access_token = RefreshAuthenticationUseCase(
            authentication_repository=authentication_repository,
            token_manager=token_manager,
        ).execute("refresh_token")

        self.assertEqual(access_token, "new_access_token")
        token_manager.verify_refresh_token.assert_called_once_with("refresh_token")
        authentication_repository.check_availability_token.assert_called_once_with("refresh_token")
        token_manager.create_access_token.assert_called_once_with("user-123", "dicoding")

    def test_execute_rejects_revoked_token(self):
        authentication_repository = Mock(spec=AuthenticationRepository)
        authentication_repository.check_availability_token.side_effect = InvariantError("revoked")
        token_manager = Mock(spec=TokenManager)
        token_manager.verify_refresh_token.return_value = {"sub": "user-123", "type": "refresh"}

        with self.assertRaises(InvariantError):
            RefreshAuthenticationUseCase(
                authentication_repository=authentication_repository,
                token_manager=token_manager,
            ).execute("refresh_token")
        token_manager.create_access_token.assert_not_called()


class TestLogoutUserUseCase(unittest.TestCase):
    def test_execute_deletes_stored_token(self):
        authentication_repository = Mock(spec=AuthenticationRepository)

        LogoutUserUseCase(authentication_repository=authentication_repository).execute("refresh_token")

        authentication_repository.check_availability_token.assert_called_once_with("refresh_token")
        authentication_repository.delete_token.assert_called_once_with("refresh_token")

    def test_execute_rejects_unknown_token(self):
        authentication_repository = Mock(spec=AuthenticationRepository)
        authentication_repository.check_availability_token.side_effect = InvariantError("unknown")

        with self.assertRaises(InvariantError):
            LogoutUserUseCase(authentication_repository=authentication_repository).execute("refresh_token")
        authentication_repository.delete_token.assert_not_called()


if __name__ == "__main__":
    unittest.main()
