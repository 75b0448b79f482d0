from cnfchart.grammar._production import Production
from cnfchart.grammar._grammarindex import GrammarIndex
from cnfchart.grammar._loader import GrammarLoader
