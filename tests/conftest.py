"""
Shared pytest fixtures for the PassForge test suite.

Settings come from ``passforge.settings_test`` (SQLite in memory, fixed
encryption key); see ``[tool.pytest.ini_options]`` in pyproject.toml.
"""

import pytest
from django.contrib.auth import get_user_model
from rest_framework.test import APIClient

from api.cipher import Cipher, get_cipher
from api.models import Category, PasswordEntry


@pytest.fixture
def cipher():
    """The process-wide cipher built by ApiConfig.ready()."""
    return get_cipher()


@pytest.fixture
def foreign_cipher():
    """A cipher under a different key, for wrong-key scenarios."""
    return Cipher("some-other-key")


@pytest.fixture
def user(db):
    return get_user_model().objects.create_user(
        username="alice", email="alice@example.com", password="alice-pass"
    )


@pytest.fixture
def other_user(db):
    return get_user_model().objects.create_user(
        username="bob", email="bob@example.com", password="bob-pass"
    )


@pytest.fixture
def api(user):
    client = APIClient()
    client.force_authenticate(user=user)
    return client


@pytest.fixture
def anon(db):
    return APIClient()


@pytest.fixture
def category(user):
    return Category.objects.create(owner=user, name="Trabajo", color="#10b981")


@pytest.fixture
def make_entry(cipher):
    def _make(owner, title="GitHub", secret="Demo123!", category=None, **flags):
        return PasswordEntry.objects.create(
            owner=owner,
            title=title,
            encrypted_secret=cipher.encrypt(secret),
            length=flags.pop("length", len(secret)),
            category=category,
            **flags,
        )
    return _make
