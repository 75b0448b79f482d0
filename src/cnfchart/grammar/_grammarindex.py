from __future__ import annotations

from typing import Iterable

from cnfchart.grammar._production import Production

class GrammarIndex():
    """
    Indexes productions by their body so that every production able to produce
    a given terminal, or a given pair of nonterminals, is found with a single
    dictionary lookup.

    Bodies are keyed by their canonical string form: the terminal itself, or the
    two nonterminals joined by one space (e.g. "A B").
    """

    def __init__(self, productions: Iterable[Production]):
        self.productions: list[Production] = list(productions)
        self._body_lookup_table: dict[str, frozenset[Production]] = {}
        self._init_lookup_table()

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[str, str]]) -> GrammarIndex:
        return cls(Production(variable, body) for variable, body in pairs)

    def _init_lookup_table(self):
        grouped: dict[str, set[Production]] = {}
        for production in self.productions:
            grouped.setdefault(production.key, set()).add(production)

        self._body_lookup_table = {key: frozenset(group) for key, group in grouped.items()}

    @staticmethod
    def key_for(body: str | tuple[str, ...] | list[str]) -> str:
        if isinstance(body, str):
            return " ".join(body.split()) if " " in body else body
        return " ".join(body)

    def lookup_by_body(self, body: str | tuple[str, ...] | list[str]) -> frozenset[Production]:
        return self._body_lookup_table.get(GrammarIndex.key_for(body), frozenset())

    @property
    def variables(self) -> set[str]:
        return {p.variable for p in self.productions}

    @property
    def terminals(self) -> set[str]:
        return {p.body[0] for p in self.productions if p.is_terminal_rule}

    def __len__(self) -> int:
        return len(self.productions)

    def __str__(self):
        return "\n".join(str(p) for p in self.productions)
