class DomainError(Exception):
    pass


class ValidationError(DomainError):
    pass


class NotFoundError(DomainError):
    pass


class RepositoryError(DomainError):
    pass


class ConfigurationError(DomainError):
    pass


class CatalogError(DomainError):
    """Raised when the external movie catalog fails, times out or answers garbage"""

    pass


class DetailFetchFailedError(CatalogError):
    pass


class InsufficientFavoritesError(NotFoundError):
    pass


class MissingReleaseDateError(DomainError):
    pass


class DuplicateFavoriteError(DomainError):
    pass


class EmailAlreadyExistsError(DomainError):
    pass


class InvalidCredentialsError(DomainError):
    pass
