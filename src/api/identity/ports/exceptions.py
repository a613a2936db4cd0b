"""Port-level exceptions for identity bounded context.

These exceptions are raised by capability implementations and should be
caught and translated by the application layer.
"""


class DuplicateEmailError(Exception):
    """Raised when a user store rejects a user whose email is already taken.

    The store's unique index on the normalized email is the authoritative
    guard for concurrent registrations. The application layer translates
    this into an "email in use" failure.
    """

    def __init__(self, email: str):
        super().__init__(f"Email '{email}' is already registered")
        self.email = email
