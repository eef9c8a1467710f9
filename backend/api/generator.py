# backend/api/generator.py
"""
Générateur de mots de passe.

Une politique (longueur + classes de caractères actives) donne un alphabet;
chaque position est tirée indépendamment dans cet alphabet avec ``secrets``.
Aucune garantie qu'une classe active apparaisse dans le résultat.
"""
import secrets
import string
from dataclasses import dataclass

from .errors import InvalidPolicy

MIN_LENGTH = 4
MAX_LENGTH = 128
DEFAULT_LENGTH = 16

SYMBOLS = "!@#$%^&*()_+~`|}{[]:;?><,./-="

# ordre fixe : majuscules, minuscules, chiffres, symboles
CHARSETS = (
    ("include_uppercase", string.ascii_uppercase),
    ("include_lowercase", string.ascii_lowercase),
    ("include_digits", string.digits),
    ("include_symbols", SYMBOLS),
)


@dataclass(frozen=True)
class PasswordPolicy:
    length: int = DEFAULT_LENGTH
    include_uppercase: bool = True
    include_lowercase: bool = True
    include_digits: bool = True
    include_symbols: bool = True

    def validate(self):
        # bool est un int en Python : True ne doit pas passer pour une longueur
        if isinstance(self.length, bool) or not isinstance(self.length, int):
            raise InvalidPolicy("Length must be an integer.")
        if not MIN_LENGTH <= self.length <= MAX_LENGTH:
            raise InvalidPolicy(
                f"Length must be between {MIN_LENGTH} and {MAX_LENGTH}, got {self.length}."
            )
        if not any(getattr(self, flag) for flag, _ in CHARSETS):
            raise InvalidPolicy("Select at least one character class.")


def build_alphabet(policy: PasswordPolicy) -> str:
    return "".join(chars for flag, chars in CHARSETS if getattr(policy, flag))


def generate(policy: PasswordPolicy) -> str:
    policy.validate()
    alphabet = build_alphabet(policy)
    return "".join(secrets.choice(alphabet) for _ in range(policy.length))
