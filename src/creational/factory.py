# Copyright (c) Meta Platforms, Inc. and affiliates
"""
Factory pattern: building user accounts by role.

Callers ask ``UserFactory`` for a user category by name and get back an object
implementing ``User`` without naming the concrete class.
"""

from abc import ABC, abstractmethod
from typing import List


class UnknownUserTypeError(ValueError):
    """Raised when the factory is asked for a user category it does not know."""

    def __init__(self, user_type: str):
        super().__init__(f"Invalid user type: {user_type}")
        self.user_type = user_type


class User(ABC):
    """Base class for user roles."""

    @property
    @abstractmethod
    def role(self) -> str:
        pass

    @property
    @abstractmethod
    def permissions(self) -> List[str]:
        pass


class Admin(User):

    @property
    def role(self) -> str:
        return "Admin"

    @property
    def permissions(self) -> List[str]:
        return ["create_user", "delete_user", "edit_user", "manage_system", "view_logs"]


class Moderator(User):

    @property
    def role(self) -> str:
        return "Moderator"

    @property
    def permissions(self) -> List[str]:
        return ["edit_content", "delete_content", "manage_users", "view_reports"]


class RegularUser(User):

    @property
    def role(self) -> str:
        return "Regular User"

    @property
    def permissions(self) -> List[str]:
        return ["view_content", "create_content", "edit_own_content"]


class UserFactory:
    """Factory class for creating User instances."""

    @staticmethod
    def create_user(user_type: str) -> User:
        """Create a user for the given category.

        Args:
            user_type: One of "admin", "moderator" or "regular" (any case)

        Returns:
            An instance of User

        Raises:
            UnknownUserTypeError: If the category is not supported
        """
        normalized = str(user_type).lower()

        if normalized == "admin":
            return Admin()
        elif normalized == "moderator":
            return Moderator()
        elif normalized == "regular":
            return RegularUser()
        else:
            raise UnknownUserTypeError(user_type)

    @staticmethod
    def available_types() -> List[str]:
        return ["admin", "moderator", "regular"]


def main():
    user_factory = UserFactory()

    admin = user_factory.create_user("admin")
    moderator = user_factory.create_user("moderator")
    regular_user = user_factory.create_user("regular")

    print("=== Admin ===")
    print(f"Role: {admin.role}")
    print(f"Permissions: {admin.permissions}")

    print("\n=== Moderator ===")
    print(f"Role: {moderator.role}")
    print(f"Permissions: {moderator.permissions}")

    print("\n=== Regular User ===")
    print(f"Role: {regular_user.role}")
    print(f"Permissions: {regular_user.permissions}")


if __name__ == '__main__':
    main()
