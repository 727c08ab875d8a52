"""User management use cases."""

from app.application.use_cases.users.user_operations import UserService

__all__ = ["UserService"]
