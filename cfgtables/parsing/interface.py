"""
Error Definitions

Everything that can go wrong while building things is a ``GrammarError``.
Malformed grammar text raises one of the format errors while the ``Grammar``
is being constructed; a well-formed grammar outside some parsing class raises
a ``ConflictError`` from the corresponding table builder. Either way, nothing
half-built is returned.

Recognizers never raise: a string is either in the language or it isn't.
"""

class GrammarError(ValueError):
	""" Base class for every construction-time failure. """

class InvalidFormat(GrammarError):
	def __init__(self, detail):
		super().__init__("Invalid grammar format: %s"%detail)
		self.detail = detail

class InvalidProduction(GrammarError):
	def __init__(self, line):
		super().__init__("Invalid production format: %s"%line)
		self.line = line

class EmptyInput(GrammarError):
	def __init__(self):
		super().__init__("Empty grammar input")

class NotEnoughProductions(GrammarError):
	def __init__(self, expected:int, actual:int):
		super().__init__("Not enough production lines: expected %d, got %d"%(expected, actual))
		self.expected, self.actual = expected, actual


class ConflictError(GrammarError):
	""" The grammar is well-formed but not in the class the builder handles. """

class LL1Conflict(ConflictError):
	def __init__(self, nonterminal, terminal, prod1, prod2):
		super().__init__("LL(1) conflict at M[%s, %s]:\n  %s\n  %s"%(nonterminal, terminal, prod1, prod2))
		self.nonterminal, self.terminal, self.prod1, self.prod2 = nonterminal, terminal, prod1, prod2

class ShiftReduceConflict(ConflictError):
	def __init__(self, state:int, symbol, path=()):
		super().__init__("SLR(1) Shift/Reduce conflict at state %d, symbol %s"%(state, symbol))
		self.state, self.symbol, self.path = state, symbol, tuple(path)

class ReduceReduceConflict(ConflictError):
	def __init__(self, state:int, symbol, prod1, prod2, path=()):
		super().__init__("SLR(1) Reduce/Reduce conflict at state %d, symbol %s:\n  %s\n  %s"%(state, symbol, prod1, prod2))
		self.state, self.symbol, self.prod1, self.prod2, self.path = state, symbol, prod1, prod2, tuple(path)
