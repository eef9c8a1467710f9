# backend/api/cipher.py
"""
Chiffrement au repos des mots de passe enregistrés.

Jeton = base64 urlsafe( version(1) || iv(12) || AES-256-GCM(data + tag) ).
La clé AES est dérivée une seule fois (PBKDF2-SHA256) du secret fourni par
l'environnement; le secret lui-même n'est pas conservé.
"""
import base64
import binascii
import os

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.ciphers.aead import AESGCM
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

from .errors import DecryptionError, MissingKey

TOKEN_VERSION = b"\x01"
IV_LEN = 12
TAG_LEN = 16
AES_KEY_LEN = 32
KDF_ITERATIONS = 200_000
KDF_SALT = b"passforge/credential-cipher/v1"


def derive_key(secret: str) -> bytes:
    kdf = PBKDF2HMAC(
        algorithm=hashes.SHA256(),
        length=AES_KEY_LEN,
        salt=KDF_SALT,
        iterations=KDF_ITERATIONS,
    )
    return kdf.derive(secret.encode("utf-8"))


class Cipher:
    def __init__(self, secret):
        if not secret or not str(secret).strip():
            raise MissingKey("PASSFORGE_ENCRYPTION_KEY is not configured")
        self._key = derive_key(str(secret))

    def __repr__(self):
        return "<Cipher AES-256-GCM>"

    def encrypt(self, plaintext: str) -> str:
        if not isinstance(plaintext, str):
            raise TypeError("plaintext must be a str")
        iv = os.urandom(IV_LEN)
        data = AESGCM(self._key).encrypt(iv, plaintext.encode("utf-8"), TOKEN_VERSION)
        return base64.urlsafe_b64encode(TOKEN_VERSION + iv + data).decode("ascii")

    def decrypt(self, token: str) -> str:
        if not isinstance(token, str):
            raise DecryptionError("ciphertext must be a str")
        try:
            # validate=True : tout caractère hors alphabet est refusé, pas ignoré
            raw = base64.b64decode(token.encode("ascii"), altchars=b"-_", validate=True)
        except (binascii.Error, UnicodeEncodeError, ValueError) as exc:
            raise DecryptionError("ciphertext is not valid base64") from exc

        if len(raw) < len(TOKEN_VERSION) + IV_LEN + TAG_LEN:
            raise DecryptionError("ciphertext is truncated")
        version, iv, data = raw[:1], raw[1:1 + IV_LEN], raw[1 + IV_LEN:]
        if version != TOKEN_VERSION:
            raise DecryptionError(f"unknown ciphertext version {version[0]}")

        try:
            plain = AESGCM(self._key).decrypt(iv, data, version)
        except InvalidTag as exc:
            raise DecryptionError("ciphertext was tampered with or encrypted under another key") from exc
        try:
            return plain.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise DecryptionError("plaintext is not valid UTF-8") from exc


def get_cipher() -> Cipher:
    """Le Cipher unique du processus, construit par ApiConfig.ready()."""
    from django.apps import apps
    return apps.get_app_config("api").cipher
