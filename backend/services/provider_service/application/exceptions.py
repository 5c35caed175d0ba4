class ApplicationError(Exception):
    """Base class for application-level exceptions."""

    pass


class InvalidArgumentError(ApplicationError):
    """Raised for malformed identifiers or missing/invalid required fields."""

    pass


class NotFoundError(ApplicationError):
    """Base class for lookups that matched nothing."""

    pass


class ProviderNotFoundError(NotFoundError):
    pass


class JobNotFoundError(NotFoundError):
    pass


class ServiceNotFoundError(NotFoundError):
    pass


class InvalidTransitionError(ApplicationError):
    """Raised when the transition table forbids a job status change."""

    pass


class EmailAlreadyRegisteredError(ApplicationError):
    pass


class InvalidCredentialsError(ApplicationError):
    """Raised when login credentials are invalid."""

    pass


class StoreFailureError(ApplicationError):
    """
    Raised when the persistent store fails. Writes applied before the failure
    are not rolled back unless transactional mode is enabled.
    """

    pass
