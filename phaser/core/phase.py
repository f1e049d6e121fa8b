# phaser/core/phase.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import logging
from enum import Enum, auto
from typing import Generic, Optional, TypeVar

from phaser.core.errors import PhaseNotImplementedError
from phaser.core.hooks import HookChain, default_error_handler
from phaser.interfaces.types import ErrorHandler, ExecuteFunc, PhaseHook, PhaseResult

T = TypeVar("T")

logger = logging.getLogger(__name__)


class PhaseStage(Enum):
    """Stages a single run() call moves through."""

    PRE_HOOKS = auto()
    EXECUTE = auto()
    POST_HOOKS = auto()
    DONE = auto()
    FAILED = auto()


class Phase(Generic[T]):
    """
    A named unit of work: pre-hooks, an execute step, then post-hooks.

    run() threads one value through all three stages and stops at the first
    failure. Failures from any stage go through handle_error(), whose result
    is returned to the caller.

    Custom error handling can be plugged in by passing ``error_handler`` or
    by subclassing and overriding handle_error(), e.g. to release resources
    or substitute a fallback value.

    A Phase keeps no per-run state, so one instance can be run many times.
    Its hook chains are not synchronized: attach hooks before running the
    phase concurrently.
    """

    def __init__(
        self,
        name: str = "",
        execute: Optional[ExecuteFunc] = None,
        error_handler: Optional[ErrorHandler] = None,
    ) -> None:
        """
        :param name: Phase identifier. Expected to be unique within a manager.
        :param execute: The phase's core transformation. Required before run().
        :param error_handler: Replaces the default pass-through error handling.
        """
        self.name = name
        self.execute_fn = execute
        self._error_handler = error_handler
        self._pre_hooks: HookChain[T] = HookChain(on_error=self.handle_error)
        self._post_hooks: HookChain[T] = HookChain(on_error=self.handle_error)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(name={self.name!r}, "
            f"pre_hooks={len(self._pre_hooks)}, post_hooks={len(self._post_hooks)})"
        )

    @property
    def pre_hooks(self) -> HookChain[T]:
        return self._pre_hooks

    @property
    def post_hooks(self) -> HookChain[T]:
        return self._post_hooks

    def run(self, value: T) -> PhaseResult:
        """
        Run the phase's pre-hooks, execute step and post-hooks over value.

        :param value: Input to the first pre-hook.
        :return: PhaseResult of the last post-hook, or of handle_error() if
                 any stage failed.
        :raises PhaseNotImplementedError: If no execute function is assigned.
        """
        stage = PhaseStage.PRE_HOOKS
        logger.debug("Phase %r entering %s", self.name, stage.name)
        result, failed = self._pre_hooks.apply_with_status(value)
        if failed:
            return self._failed(stage, result)

        stage = PhaseStage.EXECUTE
        logger.debug("Phase %r entering %s", self.name, stage.name)
        try:
            value = self.execute(result.value)
        except PhaseNotImplementedError:
            raise
        except Exception as e:
            return self._failed(stage, PhaseResult(*self.handle_error(e)))

        stage = PhaseStage.POST_HOOKS
        logger.debug("Phase %r entering %s", self.name, stage.name)
        result, failed = self._post_hooks.apply_with_status(value)
        if failed:
            return self._failed(stage, result)

        logger.debug("Phase %r reached %s", self.name, PhaseStage.DONE.name)
        return result

    def execute(self, value: T) -> T:
        """
        Call the execute function directly, without any hooks.

        :raises PhaseNotImplementedError: If no execute function is assigned.
        """
        if self.execute_fn is None:
            logger.error("Phase %r has no execute function", self.name)
            raise PhaseNotImplementedError(self.name)
        return self.execute_fn(value)

    def handle_error(self, err: Exception) -> PhaseResult:
        """
        Handle a failure from any stage of run().

        If not overridden and no error_handler was given, returns the error
        unchanged with no value.
        """
        if self._error_handler is None:
            return default_error_handler(err)
        return PhaseResult(*self._error_handler(err))

    def prepend_pre_hook(self, hook: PhaseHook) -> None:
        self._pre_hooks.prepend(hook)
        logger.debug("Prepended pre-hook %r to phase %r", hook, self.name)

    def append_pre_hook(self, hook: PhaseHook) -> None:
        self._pre_hooks.append(hook)
        logger.debug("Appended pre-hook %r to phase %r", hook, self.name)

    def prepend_post_hook(self, hook: PhaseHook) -> None:
        self._post_hooks.prepend(hook)
        logger.debug("Prepended post-hook %r to phase %r", hook, self.name)

    def append_post_hook(self, hook: PhaseHook) -> None:
        self._post_hooks.append(hook)
        logger.debug("Appended post-hook %r to phase %r", hook, self.name)

    def _failed(self, stage: PhaseStage, result: PhaseResult) -> PhaseResult:
        logger.debug(
            "Phase %r moved to %s from %s, handled as error=%r", self.name, PhaseStage.FAILED.name, stage.name, result.error
        )
        return result
