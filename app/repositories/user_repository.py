from app.domain.users import RegisterUser, RegisteredUser, UserRepository
from app.exceptions import InvariantError
from app.models.user_model import User


class UserRepositorySQLAlchemy(UserRepository):
    def __init__(self, session, id_generator):
        self.session = session
        self.id_generator = id_generator

    def verify_available_username(self, username: str) -> None:
        if self.session.query(User.id).filter(User.username == username).first():
            raise InvariantError("username is not available")

    def add_user(self, register_user: RegisterUser) -> RegisteredUser:
        user = User(
            id=f"user-{self.id_generator()}",
            username=register_user.username,
            password=register_user.password,
            fullname=register_user.fullname,
        )
        registered_user = RegisteredUser(
            id=user.id,
            username=user.username,
            fullname=user.fullname,
        )

        self.session.add(user)
        self.session.commit()
        return registered_user

    def get_password_by_username(self, username: str) -> str:
        password = (
            self.session.query(User.password)
            .filter(User.username == username)
            .scalar()
        )
        if password is None:
            raise InvariantError("username not found")
        return password

    def get_id_by_username(self, username: str) -> str:
        user_id = self.session.query(User.id).filter(User.username == username).scalar()
        if user_id is None:
            raise InvariantError("user not found")
        return user_id
