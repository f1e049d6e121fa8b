# phaser/core/manager.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import logging
import threading
from typing import Dict, Iterator, List

from phaser.core.errors import DuplicatePhaseError, PhaseNotFoundError
from phaser.interfaces.protocols import Phaser
from phaser.interfaces.types import PhaseHook

logger = logging.getLogger(__name__)


class PhaseRegistry:
    """
    Keeps named phases and routes hook attachment to them.

    Names are unique: registering a name twice raises DuplicatePhaseError.
    Hooks attached through the registry are appended, exactly as if
    append_pre_hook()/append_post_hook() were called on the phase.

    The registry's own mapping is guarded by a lock. The phases' hook chains
    are not; attach hooks before running phases concurrently.
    """

    def __init__(self) -> None:
        self._phases: Dict[str, Phaser] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._phases)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._phases

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def names(self) -> List[str]:
        """Registered phase names in registration order."""
        with self._lock:
            return list(self._phases)

    def add_phase(self, name: str, phase: Phaser) -> None:
        """
        Register a phase under a name.

        :param name: Registry key. The phase's own name is left untouched.
        :param phase: Any object implementing the Phaser protocol.
        :raises DuplicatePhaseError: If the name is already registered.
        """
        with self._lock:
            if name in self._phases:
                raise DuplicatePhaseError(name)
            self._phases[name] = phase
        logger.debug("Registered phase %r", name)

    def get(self, name: str) -> Phaser:
        """
        :raises PhaseNotFoundError: If no phase is registered under name.
        """
        with self._lock:
            try:
                return self._phases[name]
            except KeyError:
                raise PhaseNotFoundError(name) from None

    def add_pre_hook(self, name: str, hook: PhaseHook) -> None:
        """Append a hook to the named phase's pre-hooks."""
        self.get(name).append_pre_hook(hook)

    def add_post_hook(self, name: str, hook: PhaseHook) -> None:
        """Append a hook to the named phase's post-hooks."""
        self.get(name).append_post_hook(hook)
