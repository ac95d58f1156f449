"""JSON-file-backed implementation of UserRepository."""

from __future__ import annotations

import uuid
from pathlib import Path

from storefront.domain.exceptions import DuplicateEmailError
from storefront.domain.model.user import RoleFlags, User
from storefront.domain.repository.user_repository import UserRepository
from storefront.infrastructure.persistence.json_file import JsonFile


class JsonUserRepository(UserRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    def next_id(self) -> str:
        return uuid.uuid4().hex

    def get_by_id(self, user_id: str) -> User | None:
        for raw in self._file.load():
            if raw["id"] == user_id:
                return self._to_domain(raw)
        return None

    def get_by_email(self, email: str) -> User | None:
        for raw in self._file.load():
            if raw["email"] == email:
                return self._to_domain(raw)
        return None

    def add(self, user: User) -> None:
        with self._file.locked():
            users = self._file.load()
            if any(raw["email"] == user.email for raw in users):
                raise DuplicateEmailError()
            users.append(
                {
                    "id": user.id,
                    "name": user.name,
                    "email": user.email,
                    "password_hash": user.password_hash,
                    "is_admin": user.roles.is_admin,
                    "is_delivery_admin": user.roles.is_delivery_admin,
                }
            )
            self._file.persist(users)

    @staticmethod
    def _to_domain(raw: dict) -> User:
        return User(
            id=raw["id"],
            name=raw["name"],
            email=raw["email"],
            password_hash=raw["password_hash"],
            roles=RoleFlags(
                is_admin=raw.get("is_admin", False),
                is_delivery_admin=raw.get("is_delivery_admin", False),
            ),
        )
