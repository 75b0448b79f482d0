from __future__ import annotations

import threading
from typing import Callable

from cnfchart.chart._derivationnode import DerivationNode

class DerivationCache():
    """
    Maps substring content to the DerivationNode computed for it. Nodes are keyed
    by text alone, so the node for a substring is shared by every word (and every
    position) it appears in.

    There is no eviction: the cache grows for as long as it lives and clear() is
    the only way to release nodes. With thread_safe=True each key is computed at
    most once even when several threads ask for it at the same time; lookups of
    already published nodes never take a lock.
    """

    def __init__(self, thread_safe: bool = False):
        self.thread_safe = thread_safe
        self._nodes: dict[str, DerivationNode] = {}
        self._key_locks: dict[str, threading.Lock] = {}
        self._guard = threading.Lock()
        self.computations = 0
        self.hits = 0

    def get(self, text: str) -> DerivationNode | None:
        return self._nodes.get(text)

    def get_or_compute(self, text: str, compute_fn: Callable[[], DerivationNode]) -> DerivationNode:
        node = self._nodes.get(text)
        if node is not None:
            self._count_hit()
            return node

        if not self.thread_safe:
            return self._compute(text, compute_fn)

        with self._lock_for(text):
            # another thread may have published while we waited
            node = self._nodes.get(text)
            if node is not None:
                self._count_hit()
                return node
            node = self._compute(text, compute_fn)

        with self._guard:
            self._key_locks.pop(text, None)
        return node

    def _compute(self, text: str, compute_fn: Callable[[], DerivationNode]) -> DerivationNode:
        node = compute_fn()
        if node.text != text:
            raise ValueError(f"computed node for '{node.text}' cannot be cached as '{text}'")

        if self.thread_safe:
            with self._guard:
                self.computations += 1
        else:
            self.computations += 1
        self._nodes[text] = node
        return node

    def _count_hit(self):
        if self.thread_safe:
            with self._guard:
                self.hits += 1
        else:
            self.hits += 1

    def _lock_for(self, text: str) -> threading.Lock:
        with self._guard:
            return self._key_locks.setdefault(text, threading.Lock())

    def clear(self):
        with self._guard:
            self._nodes.clear()
            self._key_locks.clear()
            self.computations = 0
            self.hits = 0

    def __contains__(self, text: str) -> bool:
        return text in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def __str__(self):
        return f"{len(self)} entries, {self.computations} computed, {self.hits} hits"
