"""JWT implementation of ITokenIssuer.

Issues HMAC-signed bearer tokens whose ``sub`` claim is the user id.
"""

from __future__ import annotations

import secrets
from datetime import UTC, datetime, timedelta
from typing import Any

from jose import JWTError, jwt

from identity.domain.value_objects import Email, UserId
from identity.ports.services import ITokenIssuer


class JWTTokenIssuer(ITokenIssuer):
    """Issues and validates signed JWT bearer tokens.

    Validation checks signature, expiry, issuer and audience.
    """

    def __init__(
        self,
        secret_key: str,
        issuer: str,
        audience: str,
        expiration: timedelta = timedelta(minutes=60),
        algorithm: str = "HS256",
    ):
        """Initialize the token issuer.

        Args:
            secret_key: HMAC signing key
            issuer: Value of the ``iss`` claim
            audience: Value of the ``aud`` claim
            expiration: Token lifetime
            algorithm: JWS signing algorithm
        """
        self._secret_key = secret_key
        self._issuer = issuer
        self._audience = audience
        self._expiration = expiration
        self._algorithm = algorithm

    def issue(self, user_id: UserId, email: Email | None = None) -> str:
        """Issue a signed token bound to a user id."""
        issued_at = datetime.now(UTC)
        claims: dict[str, Any] = {
            "sub": user_id.value,
            "iss": self._issuer,
            "aud": self._audience,
            "iat": issued_at,
            "exp": issued_at + self._expiration,
            "jti": secrets.token_urlsafe(16),
        }
        if email is not None:
            claims["email"] = email.value

        return jwt.encode(claims, self._secret_key, algorithm=self._algorithm)

    def validate(self, token: str) -> bool:
        """Return True if the token is authentic, unexpired and ours."""
        return self._decode(token) is not None

    def subject_of(self, token: str) -> UserId | None:
        """Return the user id in a valid token's ``sub`` claim."""
        claims = self._decode(token)
        if claims is None:
            return None

        try:
            return UserId.from_string(claims.get("sub", ""))
        except ValueError:
            return None

    def _decode(self, token: str) -> dict[str, Any] | None:
        try:
            return jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                audience=self._audience,
                issuer=self._issuer,
            )
        except JWTError:
            return None
