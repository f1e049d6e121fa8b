# phaser/core/hooks.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import logging
from typing import Generic, Iterator, List, Optional, Tuple, TypeVar

from phaser.core.errors import PhaseNotImplementedError
from phaser.interfaces.types import ErrorHandler, PhaseHook, PhaseResult

T = TypeVar("T")

logger = logging.getLogger(__name__)


def default_error_handler(err: Exception) -> PhaseResult:
    """
    Pass-through error handler: drop the in-flight value and surface the error.
    """
    return PhaseResult(None, err)


class HookChain(Generic[T]):
    """
    Ordered sequence of hooks applied one after another to a single value.

    Each hook receives the previous hook's output. The first hook to raise
    stops the chain; the exception goes to the chain's error handler and the
    handler's result becomes the chain's result.

    The chain is not synchronized. Finish configuring it before calling
    apply() from multiple threads.
    """

    def __init__(self, hooks: List[PhaseHook] = None, on_error: Optional[ErrorHandler] = None) -> None:
        """
        :param hooks: Initial hooks, in execution order.
        :param on_error: Called with the first exception a hook raises.
                         Defaults to default_error_handler.
        """
        self._hooks: List[PhaseHook] = list(hooks or [])
        self._on_error = on_error or default_error_handler

    @property
    def hooks(self) -> Tuple[PhaseHook, ...]:
        """Snapshot of the hooks in execution order."""
        return tuple(self._hooks)

    def __len__(self) -> int:
        return len(self._hooks)

    def __iter__(self) -> Iterator[PhaseHook]:
        return iter(self.hooks)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({len(self._hooks)} hooks)"

    def prepend(self, hook: PhaseHook) -> None:
        """Insert a hook ahead of every hook currently in the chain."""
        self._hooks.insert(0, hook)

    def append(self, hook: PhaseHook) -> None:
        """Insert a hook after every hook currently in the chain."""
        self._hooks.append(hook)

    def apply(self, value: T) -> PhaseResult:
        """
        Thread value through every hook in order.

        :param value: Input to the first hook.
        :return: PhaseResult with the last hook's output, or the error
                 handler's result if a hook raised.
        :raises PhaseNotImplementedError: If a hook raises it; it is never
                 handled here.
        """
        result, _ = self.apply_with_status(value)
        return result

    def apply_with_status(self, value: T) -> Tuple[PhaseResult, bool]:
        """
        Like apply(), but also report whether a hook failed.

        The flag is True whenever a hook raised, even if the error handler
        recovered and returned a result with no error. Phase.run() uses it to
        stop after a failed stage.
        """
        hooks = self.hooks
        for index, hook in enumerate(hooks):
            try:
                value = hook(value)
            except PhaseNotImplementedError:
                raise
            except Exception as e:
                logger.debug("Hook %d of %d (%r) failed: %s", index + 1, len(hooks), hook, e)
                return PhaseResult(*self._on_error(e)), True

        return PhaseResult(value, None), False

