from fastapi import status
from libs.result import Error


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
    """
    Map a use case error code onto the HTTP error raised to the client.

    UNAUTHORIZED -> 401, *_NOT_FOUND -> 404, INVALID_* -> 400; every other
    code is a generic action failure and becomes a 500.
    """
    if error.code == "UNAUTHORIZED":
        raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)
    if error.code.endswith("_NOT_FOUND"):
        raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
    if error.code.startswith("INVALID_"):
        raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
    raise ServerError(error)
