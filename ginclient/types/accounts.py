"""Account and SSH key data models."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any


@dataclass
class Email:
    """Account e-mail address and its visibility."""

    email: str
    is_public: bool = False


@dataclass
class Affiliation:
    """Institutional affiliation of an account."""

    institute: str = ""
    department: str = ""
    city: str = ""
    country: str = ""
    is_public: bool = False


@dataclass
class Account:
    """User-editable account profile, identified by login."""

    login: str
    first_name: str = ""
    last_name: str = ""
    middle_name: str | None = None
    title: str | None = None
    email: Email | None = None
    affiliation: Affiliation | None = None
    url: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def to_dict(self) -> dict[str, Any]:
        """
        Convert the account to the body accepted by the account update endpoint.

        Server-managed fields (url, timestamps) are left out.
        """
        data: dict[str, Any] = {
            "login": self.login,
            "title": self.title,
            "first_name": self.first_name,
            "middle_name": self.middle_name,
            "last_name": self.last_name,
        }
        if self.email is not None:
            data["email"] = {"email": self.email.email, "is_public": self.email.is_public}
        if self.affiliation is not None:
            data["affiliation"] = {
                "institute": self.affiliation.institute,
                "department": self.affiliation.department,
                "city": self.affiliation.city,
                "country": self.affiliation.country,
                "is_public": self.affiliation.is_public,
            }
        return data


@dataclass
class SSHKey:
    """SSH public key registered for an account."""

    fingerprint: str
    public_key: str
    description: str = ""
    login: str | None = None
    temporary: bool = False
    url: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
