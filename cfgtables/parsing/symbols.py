"""
# The Grammar Alphabet

Every symbol in this system is spelled with a single character, and the
character alone decides what sort of symbol it is:

	* An uppercase ASCII letter is a nonterminal.
	* The letter ``e`` is epsilon, standing for the empty string.
	* The dollar sign ``$`` is the end-of-input marker.
	* Anything else (lowercase letters, digits, punctuation) is a terminal.

That rule is total: there is no such thing as an invalid character.

Symbols are plain values. They compare and hash structurally, and they sort
in the order: epsilon, then terminals by character, then nonterminals by
character, then the end marker. Sets of symbols are always displayed in this
order, so output is deterministic regardless of hashing.
"""

import enum
from typing import NamedTuple, Iterable

EPSILON_CHAR = 'e'
END_MARKER_CHAR = '$'

class Kind(enum.IntEnum):
	""" The variants are closed. Their numeric values fix the total order among kinds. """
	EPSILON = 0
	TERMINAL = 1
	NONTERMINAL = 2
	END_MARKER = 3

GLYPH = {Kind.EPSILON: 'ε', Kind.END_MARKER: '$'}

class Symbol(NamedTuple):
	kind: Kind
	char: str  # Terminal and nonterminal spelling. Epsilon and the end-marker keep their source character here.
	
	def __str__(self):
		if self.kind in (Kind.TERMINAL, Kind.NONTERMINAL): return self.char
		return GLYPH[self.kind]
	
	def __repr__(self):
		return "%s(%r)"%(self.kind.name.title().replace('_', ''), self.char)
	
	def is_terminal(self): return self.kind is Kind.TERMINAL
	def is_nonterminal(self): return self.kind is Kind.NONTERMINAL
	def is_epsilon(self): return self.kind is Kind.EPSILON
	def is_end_marker(self): return self.kind is Kind.END_MARKER
	
	def is_lookahead(self):
		""" Can this symbol label a column of an ACTION or predictive table? """
		return self.kind in (Kind.TERMINAL, Kind.END_MARKER)
	
	@staticmethod
	def classify(c:str) -> "Symbol":
		if len(c) != 1: raise ValueError("A symbol is exactly one character, not %r"%c)
		if 'A' <= c <= 'Z': return nonterminal(c)
		if c == EPSILON_CHAR: return EPSILON
		if c == END_MARKER_CHAR: return END_MARKER
		return terminal(c)

def terminal(c:str) -> Symbol: return Symbol(Kind.TERMINAL, c)
def nonterminal(c:str) -> Symbol: return Symbol(Kind.NONTERMINAL, c)

EPSILON = Symbol(Kind.EPSILON, EPSILON_CHAR)
END_MARKER = Symbol(Kind.END_MARKER, END_MARKER_CHAR)

def string_to_symbols(text:str) -> tuple:
	""" Classify each character independently. """
	return tuple(map(Symbol.classify, text))

def symbols_to_string(symbols:Iterable[Symbol]) -> str:
	return ''.join(map(str, symbols))
