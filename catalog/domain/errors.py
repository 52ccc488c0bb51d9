# catalog/domain/errors.py


class CatalogError(Exception):
    """Base error; carries the HTTP status it maps to at the API boundary."""

    status_code = 500

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(CatalogError):
    status_code = 400


class NotFoundError(CatalogError):
    status_code = 404


class CollaboratorError(CatalogError):
    """Failure reported by the accounts service, status kept as-is."""

    def __init__(self, status_code: int, message: str):
        super().__init__(message, status_code)


class InternalError(CatalogError):
    """Network or parse failure while talking to the accounts service."""

    status_code = 500
