from __future__ import annotations

from dataclasses import dataclass, field
from functools import cached_property

from cnfchart.grammar import Production

@dataclass(frozen=True)
class Derivation:
    """A single way of deriving a substring: [production] applied with its first
    body symbol producing the first [split_offset] characters. The offset is 0
    for terminal rules."""
    production: Production
    split_offset: int

    def __str__(self):
        return f"{self.production} ({self.split_offset})"


@dataclass(frozen=True, eq=False)
class DerivationNode:
    """
    Every known way to derive [text].

    [left_ancestor] and [right_ancestor] are the two nodes that were combined to
    build this one; they are records of how the chart was grown, not a parse
    tree. Both are None for single character nodes. Identity is the only
    meaningful equality as each text is built at most once per cache.
    """
    text: str
    derivations: frozenset[Derivation] = field(default_factory=frozenset)
    left_ancestor: DerivationNode | None = field(default=None, repr=False)
    right_ancestor: DerivationNode | None = field(default=None, repr=False)

    @cached_property
    def variables(self) -> frozenset[str]:
        return frozenset(d.production.variable for d in self.derivations)

    @property
    def is_derivable(self) -> bool:
        return bool(self.derivations)

    def derives(self, symbol: str) -> bool:
        return symbol in self.variables

    def derivations_for(self, symbol: str) -> list[Derivation]:
        return sorted((d for d in self.derivations if d.production.variable == symbol),
            key=lambda d: (d.split_offset, d.production.key))

    def is_ambiguous_for(self, symbol: str) -> bool:
        return len(self.derivations_for(symbol)) > 1

    def _chain(self, step) -> list[DerivationNode]:
        chain = []
        node = self
        while node is not None:
            chain.append(node)
            node = step(node)
        return chain

    def left_chain(self) -> list[DerivationNode]:
        return self._chain(lambda n: n.left_ancestor)

    def right_chain(self) -> list[DerivationNode]:
        return self._chain(lambda n: n.right_ancestor)

    def __str__(self):
        return "\n".join(sorted(str(d) for d in self.derivations))
