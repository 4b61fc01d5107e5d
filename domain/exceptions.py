"""
Domain exceptions.

Every failure a service can report is one of these. The API layer maps
each family to a status code; nothing below presentation knows about HTTP.
"""

from typing import Dict, List, Optional


class CatalogError(Exception):
    """Base exception for all movie catalog errors"""

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message


# === Validation (422) ===

class ValidationError(CatalogError):
    """Raised when request fields fail format validation"""

    def __init__(self, errors: List[Dict[str, str]]) -> None:
        super().__init__("; ".join(e["msg"] for e in errors) or "Invalid input")
        self.errors = errors


# === Authentication (401) ===

class AuthError(CatalogError):
    """Base exception for authentication failures"""
    pass


class InvalidCredentials(AuthError):
    """Unknown username or wrong password; the two are indistinguishable"""

    def __init__(self) -> None:
        super().__init__("Invalid username or password.")


class MalformedToken(AuthError):
    """Token structure, signature or claims are invalid"""

    def __init__(self, message: str = "Invalid token.") -> None:
        super().__init__(message)


class TokenExpired(AuthError):
    """Token signature is valid but its expiry has passed"""

    def __init__(self) -> None:
        super().__init__("Token expired.")


# === Missing entities (404) ===

class NotFoundError(CatalogError):
    """Base exception for absent entities"""
    pass


class UserNotFound(NotFoundError):
    def __init__(self, username: str) -> None:
        super().__init__(f"User {username} was not found")
        self.username = username


class MovieNotFound(NotFoundError):
    def __init__(self, movie_id: Optional[str] = None, title: Optional[str] = None) -> None:
        if title is not None:
            message = f"The movie {title} was not found"
        else:
            message = f"Movie id {movie_id} not found"
        super().__init__(message)
        self.movie_id = movie_id
        self.title = title


class GenreNotFound(NotFoundError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Genre {name} was not found")
        self.name = name


class DirectorNotFound(NotFoundError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Director {name} was not found")
        self.name = name


# === Conflicts (409) ===

class ConflictError(CatalogError):
    """Base exception for uniqueness violations"""
    pass


class DuplicateUsername(ConflictError):
    def __init__(self, username: str) -> None:
        super().__init__(f"{username} already exists")
        self.username = username


# === Infrastructure (500) ===

class StoreUnavailable(CatalogError):
    """The backing store failed; details are logged, never returned"""

    def __init__(self, message: str = "Store unavailable") -> None:
        super().__init__(message)
