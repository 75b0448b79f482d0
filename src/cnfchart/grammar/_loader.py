from __future__ import annotations

import re
from importlib import resources

from cnfchart.exceptions import GrammarResourceError, MalformedGrammarError
from cnfchart.grammar._grammarindex import GrammarIndex
from cnfchart.grammar._production import Production
from cnfchart.logging import Logger

# a grammar file holds one production per line, of the form
#       <variable>->BODY
# where BODY is either a single terminal or two nonterminals separated by a
# space. blank lines and lines starting with '#' are skipped.
class GrammarLoader():
    resource_package = "cnfchart.grammars"
    default_resource = "palindromes.txt"

    empty_line_regex = re.compile(r"\s*$")
    comment_regex = re.compile(r"[ \t]*#.*$")

    @classmethod
    def run(cls, filename: str, logger: Logger = None) -> GrammarIndex:
        try:
            with open(filename, 'r') as f:
                txt = f.read()
        except OSError as e:
            raise GrammarResourceError(f"cannot read grammar file '{filename}': {e.strerror}") from e

        return cls.parse(txt, source=str(filename), logger=logger)

    @classmethod
    def run_resource(cls, name: str = None, logger: Logger = None) -> GrammarIndex:
        name = name or cls.default_resource
        try:
            txt = resources.files(cls.resource_package).joinpath(name).read_text()
        except (OSError, ModuleNotFoundError) as e:
            raise GrammarResourceError(f"no bundled grammar named '{name}'") from e

        return cls.parse(txt, source=f"resource:{name}", logger=logger)

    @classmethod
    def parse(cls, txt: str, source: str = "<string>", logger: Logger = None) -> GrammarIndex:
        productions = [cls._parse_line(line, line_number)
            for line_number, line in enumerate(txt.split("\n"), start=1)
            if not cls._should_skip(line)]

        if logger is not None:
            logger.log(f"loaded {len(productions)} productions from {source}")
        return GrammarIndex(productions)

    @classmethod
    def _should_skip(cls, line: str) -> bool:
        return bool(cls.empty_line_regex.match(line) or cls.comment_regex.match(line))

    @classmethod
    def _parse_line(cls, line: str, line_number: int) -> Production:
        parts = line.rstrip("\r").split(Production.separator)
        if len(parts) != 2:
            raise MalformedGrammarError(
                f"'{line.strip()}' does not split into exactly two parts on '{Production.separator}'",
                line_number)

        variable, body = parts
        try:
            return Production(variable, body)
        except MalformedGrammarError as e:
            raise MalformedGrammarError(e.msg, line_number) from e
