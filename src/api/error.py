from fastapi import status
from src.libs.result import Error

ERROR_STATUS = {
    "VALIDATION_ERROR": status.HTTP_400_BAD_REQUEST,
    "INVALID_PASSWORD": status.HTTP_400_BAD_REQUEST,
    "INVALID_SUBREDDIT_NAME": status.HTTP_400_BAD_REQUEST,
    "INVALID_POST": status.HTTP_400_BAD_REQUEST,
    "RESET_TOKEN_INVALID": status.HTTP_400_BAD_REQUEST,
    "RESET_TOKEN_EXPIRED": status.HTTP_400_BAD_REQUEST,
    "INVALID_CREDENTIALS": status.HTTP_401_UNAUTHORIZED,
    "INVALID_OLD_PASSWORD": status.HTTP_401_UNAUTHORIZED,
    "UNAUTHORIZED": status.HTTP_401_UNAUTHORIZED,
    "FORBIDDEN": status.HTTP_403_FORBIDDEN,
    "USER_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "SUBREDDIT_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "POST_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "EMAIL_ALREADY_EXISTS": status.HTTP_409_CONFLICT,
    "USERNAME_ALREADY_EXISTS": status.HTTP_409_CONFLICT,
    "SUBREDDIT_NAME_TAKEN": status.HTTP_409_CONFLICT,
    "DISPLAY_NAME_TAKEN": status.HTTP_409_CONFLICT,
}


class ClientError(Exception):
    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class ServerError(Exception):
    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)


def raise_for_error(error: Error):
    """Map a use case error to the HTTP exception the handlers render"""
    status_code = ERROR_STATUS.get(error.code)
    if status_code is None:
        raise ServerError(error)
    raise ClientError(error, status_code=status_code)
