# phaser/__init__.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
"""phaser: named phases of pre-hooks, an execute step and post-hooks.

A Phase threads one value through its pre-hooks, its execute function and
its post-hooks, stopping at the first failure and routing it through an
overridable error handler. PhaseRegistry is a reference manager that owns
phases by name.
"""

from phaser.core.errors import DuplicatePhaseError, PhaseNotFoundError, PhaseNotImplementedError, PhaserError
from phaser.core.hooks import HookChain, default_error_handler
from phaser.core.manager import PhaseRegistry
from phaser.core.phase import Phase, PhaseStage
from phaser.interfaces.protocols import PhaseManager, Phaser
from phaser.interfaces.types import ErrorHandler, ExecuteFunc, PhaseHook, PhaseResult

__version__ = "0.1.0"

__all__ = [
    "DuplicatePhaseError",
    "ErrorHandler",
    "ExecuteFunc",
    "HookChain",
    "Phase",
    "PhaseHook",
    "PhaseManager",
    "PhaseNotFoundError",
    "PhaseNotImplementedError",
    "PhaseRegistry",
    "PhaseResult",
    "PhaseStage",
    "Phaser",
    "PhaserError",
    "default_error_handler",
]
