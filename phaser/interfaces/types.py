# phaser/interfaces/types.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
from typing import Any, Callable, NamedTuple, Optional


class PhaseResult(NamedTuple):
    """
    Outcome of applying a hook chain or running a phase.

    ``error`` is None on success. On failure ``value`` is whatever the error
    handler chose to return, None by default.
    """

    value: Any
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None


# Callback Types
PhaseHook = Callable[[Any], Any]
ExecuteFunc = Callable[[Any], Any]
ErrorHandler = Callable[[Exception], PhaseResult]
