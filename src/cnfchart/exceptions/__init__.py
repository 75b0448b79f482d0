from cnfchart.exceptions._exceptions import (CnfChartException, GrammarResourceError,
    MalformedGrammarError, UnbalancedChainError, EmptyWordError, ConfigError)
