# tests/unit/core/test_errors.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import pytest


def test_error_hierarchy(error_classes):
    PhaserError, PhaseNotImplementedError, PhaseNotFoundError, DuplicatePhaseError = error_classes
    assert issubclass(PhaseNotImplementedError, PhaserError)
    assert issubclass(PhaseNotFoundError, PhaserError)
    assert issubclass(DuplicatePhaseError, PhaserError)


def test_builtin_bases(error_classes):
    _, PhaseNotImplementedError, PhaseNotFoundError, DuplicatePhaseError = error_classes
    assert issubclass(PhaseNotImplementedError, NotImplementedError)
    assert issubclass(PhaseNotFoundError, KeyError)
    assert issubclass(DuplicatePhaseError, ValueError)


def test_phaser_error_base():
    from phaser.core.errors import PhaserError

    error = PhaserError("Base error")
    assert str(error) == "Base error"
    assert isinstance(error, Exception)


@pytest.mark.parametrize(
    "error_name,message",
    [
        ("PhaseNotImplementedError", "phase 'load' not implemented"),
        ("PhaseNotFoundError", "phase 'load' is not registered"),
        ("DuplicatePhaseError", "phase 'load' is already registered"),
    ],
)
def test_error_messages(error_name, message):
    from phaser.core import errors

    error = getattr(errors, error_name)("load")
    assert error.phase_name == "load"
    assert str(error) == message
