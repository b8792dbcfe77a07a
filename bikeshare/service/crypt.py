"""
Crypt
-----

Password protection strategies. The rental service never stores
a plaintext password, instead it asks a :class:`Crypt` to turn it
into a protected form that can only be verified.
"""

import asyncio
from abc import ABC, abstractmethod
from functools import partial

from nacl.exceptions import InvalidkeyError
from nacl.pwhash import argon2id

from bikeshare import config

STRENGTHS = {
    "min": (argon2id.OPSLIMIT_MIN, argon2id.MEMLIMIT_MIN),
    "interactive": (argon2id.OPSLIMIT_INTERACTIVE, argon2id.MEMLIMIT_INTERACTIVE),
    "moderate": (argon2id.OPSLIMIT_MODERATE, argon2id.MEMLIMIT_MODERATE),
    "sensitive": (argon2id.OPSLIMIT_SENSITIVE, argon2id.MEMLIMIT_SENSITIVE),
}
"""Maps a strength name to its (opslimit, memlimit) pair."""


class Crypt(ABC):

    @abstractmethod
    async def protect(self, plaintext: str) -> str:
        """Derives the protected form of the given password."""

    @abstractmethod
    def matches(self, plaintext: str, protected: str) -> bool:
        """Checks whether the password corresponds to the protected form."""


class NaclCrypt(Crypt):
    """
    Protects passwords with Argon2id, as provided by libsodium.

    Hashing is run in the default executor.
    """

    def __init__(self, strength: str = None):
        strength = strength if strength is not None else config.pwhash_strength
        try:
            self.opslimit, self.memlimit = STRENGTHS[strength]
        except KeyError:
            raise ValueError(f"Unknown password hashing strength {strength!r}")
        self.strength = strength

    async def protect(self, plaintext: str) -> str:
        loop = asyncio.get_running_loop()
        hashed = await loop.run_in_executor(
            None,
            partial(argon2id.str, plaintext.encode(), opslimit=self.opslimit, memlimit=self.memlimit)
        )
        return hashed.decode()

    def matches(self, plaintext: str, protected: str) -> bool:
        try:
            return argon2id.verify(protected.encode(), plaintext.encode())
        except InvalidkeyError:
            return False
