from __future__ import annotations

import itertools

from cnfchart.chart._derivationcache import DerivationCache
from cnfchart.chart._derivationnode import Derivation, DerivationNode
from cnfchart.exceptions import EmptyWordError, UnbalancedChainError
from cnfchart.grammar import GrammarIndex
from cnfchart.logging import Logger

class Solver():
    """Decides whether words belong to the language of a CNF grammar."""

    implementation = """
    The chart is grown as a pyramid of rows. Row 0 holds one node per character
    of the word. Row k holds one node per substring of length k + 1, built by
    combining each pair of neighbouring nodes of row k - 1:

        row 2        [abb]   [bba]
        row 1     [ab]   [bb]   [ba]
        row 0   [a]   [b]   [b]   [a]

    The node for "abb" is combined from "ab" (its left ancestor) and "bb" (its
    right ancestor). Following left ancestors from "ab" gives every prefix of
    "abb" that is shorter than it: "ab", "a". Following right ancestors from
    "bb" gives every such suffix: "bb", "b". Zipping the prefixes with the
    reversed suffixes pairs fragments that concatenate back into "abb":

        ("ab", "b"), ("a", "bb")

    so every split point of the substring is visited without keeping an n x n
    table. Nodes are cached by their text, so a substring reached again (in the
    same word or in a later one) is never recomputed.
    """

    def __init__(self,
            grammar: GrammarIndex,
            cache: DerivationCache = None,
            start_symbol: str = "S",
            logger: Logger = None,
            thread_safe: bool = False):

        if cache is not None and thread_safe and not cache.thread_safe:
            raise ValueError("thread_safe=True needs a cache created with thread_safe=True")

        self.grammar = grammar
        self.cache = cache if cache is not None else DerivationCache(thread_safe=thread_safe)
        self.start_symbol = start_symbol
        self.logger = logger if logger is not None else Logger("cnfchart", "solver", log_level="silent")

    def solve(self, word: str) -> bool:
        """Tests whether [word] belongs to the language of the grammar."""
        result = self.derive(word).derives(self.start_symbol)
        self.logger.log(f"{word}: {result} ({self.cache})")
        return result

    def derive(self, word: str) -> DerivationNode:
        """Returns the node holding every derivation of the whole of [word]."""
        return self.chart(word)[-1][0]

    def chart(self, word: str) -> list[list[DerivationNode]]:
        if not word:
            raise EmptyWordError("cannot build a chart for the empty word")

        rows = [self._seed_row(word)]
        while len(rows[-1]) > 1:
            rows.append(self._grow_row(word, rows))
            self.logger.log_debug(f"built row {len(rows) - 1} of '{word}' with {len(rows[-1])} nodes")
        return rows

    def _seed_row(self, word: str) -> list[DerivationNode]:
        return [self.cache.get_or_compute(char, lambda char=char: self._terminal_node(char))
            for char in word]

    def _terminal_node(self, char: str) -> DerivationNode:
        derivations = frozenset(Derivation(production, 0)
            for production in self.grammar.lookup_by_body(char))
        return DerivationNode(char, derivations)

    def _grow_row(self, word: str, rows: list[list[DerivationNode]]) -> list[DerivationNode]:
        last_row = rows[-1]
        span = len(rows) + 1
        return [self.combine(last_row[i], last_row[i + 1], word[i : i + span])
            for i in range(len(last_row) - 1)]

    def combine(self, left: DerivationNode, right: DerivationNode, text: str) -> DerivationNode:
        """Combines [left] and [right], neighbours in the previous row, into the
        node for [text]."""
        return self.cache.get_or_compute(text, lambda: self._build_node(left, right, text))

    def _build_node(self, left: DerivationNode, right: DerivationNode, text: str) -> DerivationNode:
        left_chain = left.left_chain()
        right_chain = right.right_chain()

        if len(left_chain) != len(right_chain):
            self.logger.raise_exception(UnbalancedChainError(
                f"cannot combine '{left.text}' ({len(left_chain)} ancestors) with "
                f"'{right.text}' ({len(right_chain)} ancestors) into '{text}'"))

        pairs = [(l, r) for l, r in zip(left_chain, reversed(right_chain))
            if l.is_derivable and r.is_derivable]

        derivations = frozenset(itertools.chain.from_iterable(
            self._derivations_for_split(l, r) for l, r in pairs))
        return DerivationNode(text, derivations, left, right)

    def _derivations_for_split(self, l: DerivationNode, r: DerivationNode) -> list[Derivation]:
        split_offset = len(l.text)
        return [Derivation(production, split_offset)
            for body in itertools.product(sorted(l.variables), sorted(r.variables))
                for production in self.grammar.lookup_by_body(body)]

    def __str__(self):
        return f"Read {len(self.grammar)} rules. Current cache size: {len(self.cache)} entries."
