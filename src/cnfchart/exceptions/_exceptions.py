from __future__ import annotations

class CnfChartException(Exception):
    size_bound = 56
    delineator = "="*74+"\n"
    type = "CnfChart"
    description = "unexpected failure"

    def __init__(self, msg : str, line_number : int = None):
        super().__init__(msg)
        self.msg = msg
        self.line_number = line_number

    def cut_to_size(self, s: str) -> list[str]:
        bits = s.split(" ")
        lines = []
        line = ""
        for bit in bits:
            if len(line) + len(bit) > CnfChartException.size_bound:
                lines.append(line + "\n")
                line = bit + " "
                continue
            else:
                line += bit + " "

        # flush the remainder
        lines.append(line + "\n")
        return lines

    def report(self) -> str:
        location = f"Line {self.line_number}: " if self.line_number is not None else ""
        prefix = f"    {location}"
        full_indent = " "*len(prefix)

        return (CnfChartException.delineator
            + f"{self.type}Exception\n"
            + prefix + full_indent.join(self.cut_to_size(self.description))
            + f"{full_indent}INFO: " + full_indent.join(self.cut_to_size(self.msg)))

    def __str__(self):
        if self.line_number is None:
            return self.msg
        return f"line {self.line_number}: {self.msg}"


class GrammarResourceError(CnfChartException):
    type = "GrammarResource"
    description = "grammar resource is missing or unreadable"

class MalformedGrammarError(CnfChartException):
    type = "MalformedGrammar"
    description = "grammar line is not of the form 'VARIABLE->BODY' with a body of one or two symbols"

class UnbalancedChainError(CnfChartException):
    type = "UnbalancedChain"
    description = "left and right ancestor chains differ in length; the chart is inconsistent"

class EmptyWordError(CnfChartException):
    type = "EmptyWord"
    description = "membership is only decided for non-empty words"

class ConfigError(CnfChartException):
    type = "Config"
    description = "configuration file is unreadable or holds an unknown key"
