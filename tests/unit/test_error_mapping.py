import pytest

from libs.result import Error
from src.api.error import ClientError, ServerError, raise_for_error


@pytest.mark.parametrize(
    "code, status_code",
    [
        ("UNAUTHORIZED", 401),
        ("TENANT_NOT_FOUND", 404),
        ("PROPERTY_TAX_NOT_FOUND", 404),
        ("INVALID_TENANT_STATUS", 400),
        ("INVALID_CSV_ROW", 400),
    ],
)
def test_client_errors(code, status_code):
    with pytest.raises(ClientError) as exc_info:
        raise_for_error(Error(code, "message"))

    assert exc_info.value.status_code == status_code
    assert exc_info.value.base_error.code == code


def test_action_failure_is_server_error():
    with pytest.raises(ServerError) as exc_info:
        raise_for_error(Error("LEASE_CREATE_ERROR", "Failed to create lease. Please try again."))

    assert exc_info.value.base_error.code == "LEASE_CREATE_ERROR"
