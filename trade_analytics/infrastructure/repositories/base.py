"""Base Repository: Abstract interface for data access.

Repository Pattern provides:
- Abstraction over the storage collaborator (files today)
- Caching for repeated reads
- Consistent error handling (RepositoryError)
- Easy testing via dependency injection
"""

from abc import ABC, abstractmethod
from typing import TypeVar, Generic

T = TypeVar("T")


class Repository(ABC, Generic[T]):
    """Abstract base class for repositories.

    All repositories should:
    1. Provide a get_all() method
    2. Handle caching internally
    3. Raise RepositoryError on failures
    """

    @abstractmethod
    def get_all(self) -> T:
        """Retrieve all data from the repository.

        Returns:
            The complete dataset

        Raises:
            RepositoryError: If data cannot be loaded
        """

    @abstractmethod
    def clear_cache(self) -> None:
        """Clear any cached data."""


class RepositoryError(Exception):
    """Exception raised when repository operations fail.

    Covers missing sources (unknown user, missing file) as well as
    unreadable or invalid data.
    """

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        super().__init__(f"{message}" + (f" (path: {path})" if path else ""))
