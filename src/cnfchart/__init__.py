# CNFCHART, membership of words in CNF grammars via a cached derivation pyramid
import cnfchart.exceptions as exceptions
import cnfchart.logging as logging
import cnfchart.config as config
import cnfchart.grammar as grammar
import cnfchart.chart as chart
import cnfchart.utils as utils

from cnfchart.exceptions import (CnfChartException, GrammarResourceError, MalformedGrammarError,
    UnbalancedChainError, EmptyWordError, ConfigError)
from cnfchart.grammar import Production, GrammarIndex, GrammarLoader
from cnfchart.chart import Derivation, DerivationNode, DerivationCache, Solver
from cnfchart.config import Config
from cnfchart.logging import Logger
