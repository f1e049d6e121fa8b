# phaser/interfaces/protocols.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
from typing import Any, Protocol, runtime_checkable

from phaser.interfaces.types import PhaseHook, PhaseResult


@runtime_checkable
class Phaser(Protocol):
    """
    Phase protocol for type checking.

    You should rarely need to implement Phaser from scratch. Build a Phase
    with a custom error handler, or subclass Phase and override
    handle_error.

    Runtime Invariants:
    - Hooks run in the order the attachment methods produced.
    - run() stops at the first failing stage and routes the failure
      through handle_error().

    Error Handling:
    - Exceptions raised by hooks or the execute step are reported through
      PhaseResult.error, never raised.
    - A phase without an execute step raises PhaseNotImplementedError.
    """

    name: str

    def run(self, value: Any) -> PhaseResult:
        """Run pre-hooks, the execute step and post-hooks over value."""
        ...

    def handle_error(self, err: Exception) -> PhaseResult:
        """Handle a failure from any stage of run()."""
        ...

    def prepend_pre_hook(self, hook: PhaseHook) -> None:
        ...

    def append_pre_hook(self, hook: PhaseHook) -> None:
        ...

    def prepend_post_hook(self, hook: PhaseHook) -> None:
        ...

    def append_post_hook(self, hook: PhaseHook) -> None:
        ...


@runtime_checkable
class PhaseManager(Protocol):
    """
    Manager protocol for components that own a set of named phases.

    Methods:
        add_phase(): Registers a phase under a name.
        add_pre_hook(): Attaches a hook to a named phase's pre-hooks.
        add_post_hook(): Attaches a hook to a named phase's post-hooks.

    Runtime Invariants:
    - Attaching a hook through the manager is equivalent to appending it
      directly on the target phase.

    Duplicate-name and unknown-name policy is up to the implementation.
    """

    def add_phase(self, name: str, phase: Phaser) -> None:
        ...

    def add_pre_hook(self, name: str, hook: PhaseHook) -> None:
        ...

    def add_post_hook(self, name: str, hook: PhaseHook) -> None:
        ...
