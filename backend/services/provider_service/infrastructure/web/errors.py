from fastapi import HTTPException, status

from services.provider_service.application.exceptions import (
    ApplicationError,
    EmailAlreadyRegisteredError,
    InvalidArgumentError,
    InvalidCredentialsError,
    InvalidTransitionError,
    NotFoundError,
)

_STATUS_BY_ERROR = (
    (InvalidArgumentError, status.HTTP_400_BAD_REQUEST),
    (InvalidCredentialsError, status.HTTP_401_UNAUTHORIZED),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (InvalidTransitionError, status.HTTP_409_CONFLICT),
    (EmailAlreadyRegisteredError, status.HTTP_409_CONFLICT),
)


def to_http_exception(exc: ApplicationError, server_message: str) -> HTTPException:
    """
    Maps an application error to its HTTP status. Anything unmapped, store
    failures included, becomes a 500 carrying ``server_message``.
    """
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return HTTPException(status_code=status_code, detail=str(exc))
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=server_message
    )
