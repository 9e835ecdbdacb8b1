"""OAuth token data model."""

import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any


def parse_timestamp(value: Any) -> datetime | None:
    """
    Parse a wire timestamp into a timezone-aware datetime.

    Accepts RFC 3339 strings (as sent by gin-auth) and epoch seconds
    (as found in JWT claims). Naive values are taken to be UTC.
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        ts = value
    elif isinstance(value, (int, float)):
        return datetime.fromtimestamp(value, tz=timezone.utc)
    else:
        ts = datetime.fromisoformat(str(value))
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=timezone.utc)
    return ts


@dataclass
class Token:
    """
    Access token as returned by the identity provider's validate endpoint.

    Only ``jti``, ``login`` and ``exp`` are interpreted. All other claims
    (scope, client_id, ...) are kept in ``claims`` so that a stored token
    serialises back to the object the provider sent.
    """

    jti: str
    login: str
    exp: datetime
    claims: dict[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Token":
        """
        Build a token from its wire representation.

        Raises:
            ValueError: If a required claim is missing or malformed
        """
        if not isinstance(data, dict):
            raise ValueError("Token must be a JSON object")
        missing = [key for key in ("jti", "login", "exp") if not data.get(key)]
        if missing:
            raise ValueError(f"Token is missing claims: {', '.join(missing)}")
        try:
            exp = parse_timestamp(data["exp"])
        except (TypeError, OverflowError, OSError) as e:
            raise ValueError(f"Invalid token expiry: {data['exp']!r}") from e
        return cls(
            jti=str(data["jti"]),
            login=str(data["login"]),
            exp=exp,
            claims=dict(data),
        )

    @classmethod
    def from_json(cls, text: str) -> "Token":
        """Parse a token previously written by to_json()."""
        return cls.from_dict(json.loads(text))

    def to_dict(self) -> dict[str, Any]:
        data = dict(self.claims)
        data.setdefault("jti", self.jti)
        data.setdefault("login", self.login)
        data.setdefault("exp", self.exp.isoformat())
        return data

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    def is_expired(self, now: datetime | None = None) -> bool:
        """Return True once the expiry time has passed."""
        if now is None:
            now = datetime.now(timezone.utc)
        return self.exp < now
