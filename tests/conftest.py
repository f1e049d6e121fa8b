# tests/conftest.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from unittest.mock import MagicMock

import pytest

from phaser.core.phase import Phase


class HookFailure(Exception):
    """Error raised by failing test hooks."""


@pytest.fixture
def hook_failure():
    """Exception class raised by failing hooks in tests."""
    return HookFailure


@pytest.fixture
def phase():
    """A zero-valued Phase: no name, no execute function, empty chains."""
    return Phase()


@pytest.fixture
def identity_phase():
    """A Phase whose execute step returns its input."""
    return Phase(name="identity", execute=lambda value: value)


@pytest.fixture
def recording_hook():
    """Factory for hooks that record their position in a shared call log."""
    calls = []

    def make(tag):
        def hook(value):
            calls.append(tag)
            return value

        hook.__name__ = f"hook_{tag}"
        return hook

    make.calls = calls
    return make


@pytest.fixture
def failing_hook():
    """A hook mock that always raises HookFailure."""
    return MagicMock(side_effect=HookFailure("hook failed"))


@pytest.fixture
def error_classes():
    """Provides a tuple of error classes for quick reference."""
    from phaser.core.errors import DuplicatePhaseError, PhaseNotFoundError, PhaseNotImplementedError, PhaserError

    return (PhaserError, PhaseNotImplementedError, PhaseNotFoundError, DuplicatePhaseError)
