"""Abstract repository for user records (the credential store)."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.user import User


class UserRepository(ABC):

    @abstractmethod
    def next_id(self) -> str:
        """Generate a new unique user ID."""

    @abstractmethod
    def get_by_id(self, user_id: str) -> User | None:
        """Return a user by ID, or None if not found."""

    @abstractmethod
    def get_by_email(self, email: str) -> User | None:
        """Return a user by (normalised) email, or None if not found."""

    @abstractmethod
    def add(self, user: User) -> None:
        """Persist a new user. Raises DuplicateEmailError if the email is taken."""
