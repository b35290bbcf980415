import uuid

from app.db import db
from app.repositories.authentication_repository import AuthenticationRepositorySQLAlchemy
from app.repositories.comment_repository import CommentRepositorySQLAlchemy
from app.repositories.reply_repository import ReplyRepositorySQLAlchemy
from app.repositories.thread_repository import ThreadRepositorySQLAlchemy
from app.repositories.user_repository import UserRepositorySQLAlchemy
from app.security import PasswordHash, TokenManager
from app.services.auth_service import (
    LoginUserUseCase,
    LogoutUserUseCase,
    RefreshAuthenticationUseCase,
)
from app.services.comment_service import AddCommentUseCase, DeleteCommentUseCase
from app.services.reply_service import AddReplyUseCase, DeleteReplyUseCase
from app.services.thread_service import AddThreadUseCase, GetThreadUseCase
from app.services.user_service import AddUserUseCase


def generate_id() -> str:
    return uuid.uuid4().hex[:16]


# Repositories are bound to the request-scoped ``db.session``.

def user_repository():
    return UserRepositorySQLAlchemy(db.session, generate_id)


def authentication_repository():
    return AuthenticationRepositorySQLAlchemy(db.session)


def thread_repository():
    return ThreadRepositorySQLAlchemy(db.session, generate_id)


def comment_repository():
    return CommentRepositorySQLAlchemy(db.session, generate_id)


def reply_repository():
    return ReplyRepositorySQLAlchemy(db.session, generate_id)


def add_user_use_case():
    return AddUserUseCase(
        user_repository=user_repository(),
        password_hash=PasswordHash(),
    )


def login_user_use_case():
    return LoginUserUseCase(
        user_repository=user_repository(),
        authentication_repository=authentication_repository(),
        token_manager=TokenManager(),
        password_hash=PasswordHash(),
    )


def refresh_authentication_use_case():
    return RefreshAuthenticationUseCase(
        authentication_repository=authentication_repository(),
        token_manager=TokenManager(),
    )


def logout_user_use_case():
    return LogoutUserUseCase(authentication_repository=authentication_repository())


def add_thread_use_case():
    return AddThreadUseCase(thread_repository=thread_repository())


def get_thread_use_case():
    return GetThreadUseCase(
        thread_repository=thread_repository(),
        comment_repository=comment_repository(),
        reply_repository=reply_repository(),
    )


def add_comment_use_case():
    return AddCommentUseCase(
        thread_repository=thread_repository(),
        comment_repository=comment_repository(),
    )


def delete_comment_use_case():
    return DeleteCommentUseCase(comment_repository=comment_repository())


def add_reply_use_case():
    return AddReplyUseCase(
        comment_repository=comment_repository(),
        reply_repository=reply_repository(),
    )


def delete_reply_use_case():
    return DeleteReplyUseCase(
        comment_repository=comment_repository(),
        reply_repository=reply_repository(),
    )
