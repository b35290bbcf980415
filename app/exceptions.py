class ClientError(Exception):
    status_code = 400

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class InvariantError(ClientError):
    status_code = 400


class AuthenticationError(ClientError):
    status_code = 401


class AuthorizationError(ClientError):
    status_code = 403


class NotFoundError(ClientError):
    status_code = 404
