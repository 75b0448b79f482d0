from __future__ import annotations

from cnfchart.exceptions import MalformedGrammarError

"""
A production of a grammar in Chomsky Normal Form. The body is either a single
terminal symbol or a pair of nonterminal symbols. Productions are read-only
once built.
"""
class Production():
    __slots__ = ("_variable", "_body")

    separator = "->"

    def __init__(self, variable: str, body_str: str):
        variable = variable.strip()
        body = tuple(s.strip() for s in body_str.split(' ') if s.strip() != "")

        if not variable or len(variable.split()) != 1:
            raise MalformedGrammarError(f"'{variable}' is not a single variable symbol")
        if len(body) not in (1, 2):
            raise MalformedGrammarError(
                f"body '{body_str}' of '{variable}' has {len(body)} symbols, expected 1 or 2")

        object.__setattr__(self, "_variable", variable)
        object.__setattr__(self, "_body", body)

    @property
    def variable(self) -> str:
        return self._variable

    @property
    def body(self) -> tuple[str, ...]:
        return self._body

    @property
    def key(self) -> str:
        return " ".join(self.body)

    @property
    def is_terminal_rule(self) -> bool:
        return len(self.body) == 1

    def __setattr__(self, name, value):
        raise AttributeError(f"Production is read-only, cannot set '{name}'")

    def __delattr__(self, name):
        raise AttributeError(f"Production is read-only, cannot delete '{name}'")

    def __str__(self):
        return f"{self.variable}{Production.separator}{self.key}"

    def __repr__(self):
        return f"Production({self.variable!r}, {self.key!r})"

    def __eq__(self, __o: object) -> bool:
        if not isinstance(__o, Production):
            return NotImplemented
        return self.variable == __o.variable and self.body == __o.body

    def __hash__(self) -> int:
        return hash((self.variable, self.body))
