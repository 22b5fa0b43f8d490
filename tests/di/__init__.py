"""Test doubles for the DI container."""

from .persistence import MockPersistenceProvider  # isort: skip
from .container import build_test_container

__all__ = ["MockPersistenceProvider", "build_test_container"]
