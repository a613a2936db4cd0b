"""Use-case handlers for identity bounded context."""

from identity.application.handlers.list_users import ListUsersHandler
from identity.application.handlers.login import LoginHandler
from identity.application.handlers.sign_up import SignUpHandler
from identity.application.handlers.update_profile import UpdateProfileHandler

__all__ = [
    "ListUsersHandler",
    "LoginHandler",
    "SignUpHandler",
    "UpdateProfileHandler",
]
