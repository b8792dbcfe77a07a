"""
User
---------------------------
"""

from dataclasses import dataclass


@dataclass
class User:
    """
    Represents a User in the system.

    Users are identified by their email. Once registered,
    the password holds the protected form of the credential.
    """

    name: str
    email: str
    password: str

    def serialize(self):
        return {
            "name": self.name,
            "email": self.email
        }

    def __str__(self):
        return f"{self.name} ({self.email})"
