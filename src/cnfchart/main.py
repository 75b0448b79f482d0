from __future__ import annotations

import argparse

from cnfchart._raise import Raise
from cnfchart.chart import Solver
from cnfchart.config import Config
from cnfchart.exceptions import ConfigError, GrammarResourceError, MalformedGrammarError
from cnfchart.grammar import GrammarIndex, GrammarLoader
from cnfchart.logging import Logger
from cnfchart.utils import invalid_words, run_and_measure, valid_words

delim = "="*28

sample_words = ["abaaba", "abbbba", "bbabbbaabbaabbbabb", "aaabbbb"]

def load_grammar(config: Config, logger: Logger) -> GrammarIndex:
    if config.grammar is None:
        return GrammarLoader.run_resource(logger=logger)
    return GrammarLoader.run(config.grammar, logger=logger)

def build_solver(config: Config, measure: bool = False) -> Solver:
    logger = Logger("cnfchart", "main", log_level=config.log_level, log_dir=config.log_dir)
    if measure:
        grammar = run_and_measure("GrammarLoading", load_grammar, config, logger)
    else:
        grammar = load_grammar(config, logger)

    return Solver(grammar,
        start_symbol=config.start_symbol,
        logger=logger.child("solver"),
        thread_safe=config.thread_safe)

def run_word(solver: Solver, word: str, show_derivations: bool, measure: bool):
    if measure:
        node = run_and_measure(word[:24], solver.derive, word)
    else:
        node = solver.derive(word)

    print(f"{word}: {node.derives(solver.start_symbol)}")
    if show_derivations and node.is_derivable:
        print(node)

def make_config(args: argparse.Namespace) -> Config:
    config = Config.from_toml(args.config) if args.config else Config()
    return config.override(
        grammar=args.grammar,
        start_symbol=args.start,
        log_level=args.log_level)

def parse_args(argv: list[str] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="cnfchart",
        description="Decide membership of words in the language of a CNF grammar.")
    parser.add_argument("words", nargs="*")
    parser.add_argument("-g", "--grammar", action="store", type=str)
    parser.add_argument("-s", "--start", action="store", type=str)
    parser.add_argument("-c", "--config", action="store", type=str)
    parser.add_argument("-l", "--log-level",
        action="store",
        type=str,
        choices=["debug", "info", "error", "silent"])
    parser.add_argument("--samples", action="store_true")
    parser.add_argument("--generate", action="store", type=int, default=0)
    parser.add_argument("-d", "--derivations", action="store_true")
    parser.add_argument("-m", "--measure", action="store_true")
    return parser.parse_args(argv)

def main(argv: list[str] = None) -> int:
    args = parse_args(argv)
    try:
        config = make_config(args)
        solver = build_solver(config, measure=args.measure)
    except (ConfigError, GrammarResourceError, MalformedGrammarError) as e:
        Raise.error(e.report())

    words = list(args.words)
    if args.samples:
        words += sample_words
    if args.generate:
        words += valid_words(args.generate) + invalid_words(args.generate)
    if not words:
        Raise.notice("no words given, running the samples")
        words = sample_words

    for word in words:
        if not word:
            Raise.notice("skipping the empty word")
            continue
        run_word(solver, word, args.derivations, args.measure)

    print(delim)
    print(solver)
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
