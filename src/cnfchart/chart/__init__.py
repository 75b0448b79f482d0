from cnfchart.chart._derivationnode import Derivation, DerivationNode
from cnfchart.chart._derivationcache import DerivationCache
from cnfchart.chart._solver import Solver
