from fastapi import status
from libs.result import Error


class ClientError(Exception):
    """Expected failure reported to the caller with a 4xx status"""

    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        super().__init__(base_error.message)
        self.base_error = base_error
        self.status_code = status_code


class ServerError(Exception):
    """Unexpected failure; details are logged, never returned"""

    def __init__(self, base_error: Error):
        super().__init__(base_error.message)
        self.base_error = base_error


STATUS_BY_ERROR_CODE = {
    "INVALID_FILTER_VALUE": status.HTTP_400_BAD_REQUEST,
    "INVALID_INPUT": status.HTTP_400_BAD_REQUEST,
    "UNAUTHENTICATED": status.HTTP_401_UNAUTHORIZED,
    "FORBIDDEN": status.HTTP_403_FORBIDDEN,
    "NOT_FOUND": status.HTTP_404_NOT_FOUND,
}


def client_error_for(error: Error) -> ClientError:
    return ClientError(
        error, status_code=STATUS_BY_ERROR_CODE.get(error.code, status.HTTP_400_BAD_REQUEST)
    )
