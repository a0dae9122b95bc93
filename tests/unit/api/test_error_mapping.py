import pytest

from src.api.error import ClientError, ServerError, raise_for_error
from src.libs.result import Error


@pytest.mark.parametrize(
    "code, status_code",
    [
        ("VALIDATION_ERROR", 400),
        ("RESET_TOKEN_EXPIRED", 400),
        ("INVALID_CREDENTIALS", 401),
        ("INVALID_OLD_PASSWORD", 401),
        ("FORBIDDEN", 403),
        ("USER_NOT_FOUND", 404),
        ("EMAIL_ALREADY_EXISTS", 409),
    ],
)
def test_client_errors(code, status_code):
    with pytest.raises(ClientError) as exc_info:
        raise_for_error(Error(code, "message"))

    assert exc_info.value.status_code == status_code
    assert exc_info.value.base_error.code == code


@pytest.mark.parametrize("code", ["HASHING_FAILED", "EMAIL_DELIVERY_FAILED", "SOMETHING_NEW"])
def test_unmapped_codes_are_server_errors(code):
    with pytest.raises(ServerError):
        raise_for_error(Error(code, "message"))
