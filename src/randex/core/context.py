from __future__ import annotations

import logging
import threading
from typing import Callable, Hashable

from randex.contracts import GeneratorConfig
from randex.core.config import default_config, validate_config
from randex.core.engine import PcgEngine
from randex.core.seeding import MASK64
from randex.distributions.sampler import Sampler

logger = logging.getLogger(__name__)

ContextKey = Callable[[], Hashable]


class ContextRegistry:
    """Maps execution-context identity to the sampler that context owns.

    Samplers are created on first access. Only the map itself is lock-guarded;
    drawing from a sampler is never synchronised, since each context is the
    sole user of its own engine.
    """

    def __init__(self, config: GeneratorConfig | None = None, key: ContextKey = threading.get_ident) -> None:
        self._config = config or default_config()
        validate_config(self._config)
        self._key = key
        self._samplers: dict[Hashable, Sampler] = {}
        self._lock = threading.Lock()

    @property
    def config(self) -> GeneratorConfig:
        return self._config

    def configure(self, config: GeneratorConfig) -> None:
        validate_config(config)
        self._config = config

    def current(self) -> Sampler:
        key = self._key()
        sampler = self._samplers.get(key)
        if sampler is not None:
            return sampler
        with self._lock:
            sampler = self._samplers.get(key)
            if sampler is None:
                sampler = self._create(key)
                self._samplers[key] = sampler
        return sampler

    def _create(self, key: Hashable) -> Sampler:
        context_id = (key if isinstance(key, int) else hash(key)) & MASK64
        engine = PcgEngine(policy=self._config.increment_policy, context_id=context_id)
        logger.debug("created sampler for context %r", key)
        return Sampler(engine, config=self._config)

    def discard(self, key: Hashable | None = None) -> bool:
        if key is None:
            key = self._key()
        with self._lock:
            removed = self._samplers.pop(key, None) is not None
        if removed:
            logger.debug("discarded sampler for context %r", key)
        return removed

    def prune(self) -> int:
        """Drop samplers of threads that are no longer alive. Only meaningful for thread-ident keys."""
        alive = {thread.ident for thread in threading.enumerate()}
        with self._lock:
            stale = [key for key in self._samplers if key not in alive]
            for key in stale:
                del self._samplers[key]
        if stale:
            logger.debug("pruned %d finished contexts", len(stale))
        return len(stale)

    def reset(self) -> None:
        with self._lock:
            self._samplers.clear()

    def __len__(self) -> int:
        return len(self._samplers)

    def __contains__(self, key: object) -> bool:
        return key in self._samplers


_default_registry = ContextRegistry()


def default_registry() -> ContextRegistry:
    return _default_registry


def current_sampler() -> Sampler:
    return _default_registry.current()
