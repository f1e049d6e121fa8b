# phaser/core/errors.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details


class PhaserError(Exception):
    """
    Base exception class for errors raised by the phaser library itself.
    """


class PhaseNotImplementedError(PhaserError, NotImplementedError):
    """
    Raised when a phase is run or executed without an execute function.

    This signals a misconfigured phase, not a failed one. It is never handed
    to an error handler and never returned inside a PhaseResult.
    """

    def __init__(self, phase_name: str) -> None:
        self.phase_name = phase_name
        super().__init__(f"phase {phase_name!r} not implemented")


class PhaseNotFoundError(PhaserError, KeyError):
    """
    Raised when a phase name is not registered with a manager.
    """

    def __init__(self, phase_name: str) -> None:
        self.phase_name = phase_name
        super().__init__(f"phase {phase_name!r} is not registered")

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.args[0]


class DuplicatePhaseError(PhaserError, ValueError):
    """
    Raised when a phase name is registered more than once.
    """

    def __init__(self, phase_name: str) -> None:
        self.phase_name = phase_name
        super().__init__(f"phase {phase_name!r} is already registered")
