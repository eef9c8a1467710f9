# backend/api/errors.py
from django.core.exceptions import ImproperlyConfigured


class PassForgeError(Exception):
    """Base class for errors raised by the generator and the cipher."""


class InvalidPolicy(PassForgeError, ValueError):
    """Password policy out of bounds or without any character class."""


class DecryptionError(PassForgeError):
    """Stored ciphertext is malformed, tampered or from another key."""


class MissingKey(ImproperlyConfigured):
    """No encryption key configured; the process must not serve requests."""
