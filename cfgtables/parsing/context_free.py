"""
# Context Free Grammars

In pure form, a context free grammar (CFG) consists of:
	* A set of terminal symbols,
	* A set of non-terminal symbols, disjoint from the terminals,
	* A set of production rules, each consisting of:
		* left-hand side (exactly one symbol)
		* right-hand side (ordered sequence of zero or more symbols)
	* and a start symbol.

Here, every symbol is a single character (see the ``symbols`` module) and the
start symbol is always ``S``, no matter which rule happens to come first.

# Textual form

A grammar arrives as a sequence of lines. The first line gives the number of
production lines to follow. Each production line looks like:

	A -> alt1 alt2 alt3

which declares one rule per whitespace-separated alternative. Each alternative
is a run of single-character symbols; the lone letter ``e`` stands for the empty
alternative. So ``B -> bBc e`` means B produces either ``b B c`` or nothing.

# Bookkeeping

Declaration order matters: fixed-point passes walk the rules in that order, and
when two rules collide in a parse table, the earlier one is reported first.
A nonterminal that appears only on the right is still a nonterminal; it simply
has no rules.
"""

from typing import NamedTuple, Iterable

from ..support import pretty
from .interface import InvalidFormat, InvalidProduction, EmptyInput, NotEnoughProductions
from .symbols import Symbol, EPSILON, nonterminal, string_to_symbols, symbols_to_string

ARROW = '->'
START_CHAR = 'S'

class Production(NamedTuple):
	"""
	lhs: The nonterminal symbol which is declared to produce...
	rhs: this sequence of symbols. Never empty: the empty alternative is spelled (EPSILON,).
	"""
	lhs: Symbol
	rhs: tuple
	
	def __str__(self):
		return "%s → %s"%(self.lhs, symbols_to_string(self.rhs))
	
	@property
	def body(self) -> tuple:
		""" The right-hand side with the epsilon placeholder taken out; this is what actually sits on a stack. """
		return tuple(s for s in self.rhs if not s.is_epsilon())
	
	def is_epsilon(self):
		return self.rhs == (EPSILON,)


class Grammar:
	"""
	Immutable once constructed. Build one with ``Grammar.parse(lines)``, or
	straight from a list of productions if you already have them.
	"""
	def __init__(self, productions:Iterable[Production]):
		productions = tuple(productions)
		if not productions: raise EmptyInput()
		nonterminals, terminals = set(), set()
		for production in productions:
			nonterminals.add(production.lhs)
			for symbol in production.rhs:
				if symbol.is_nonterminal(): nonterminals.add(symbol)
				elif symbol.is_terminal(): terminals.add(symbol)
		production_map = {symbol: [] for symbol in nonterminals}
		for production in productions:
			production_map[production.lhs].append(production)
		
		self.__productions = productions
		self.__nonterminals = frozenset(nonterminals)
		self.__terminals = frozenset(terminals)
		self.__production_map = {symbol: tuple(alternatives) for symbol, alternatives in production_map.items()}
		self.__start = nonterminal(START_CHAR)
	
	@classmethod
	def parse(cls, lines:Iterable[str]) -> "Grammar":
		lines = list(lines)
		if not lines: raise EmptyInput()
		try: n = int(lines[0].strip())
		except ValueError: raise InvalidFormat("Invalid number: %r"%lines[0]) from None
		if n < 0: raise InvalidFormat("Negative production count: %d"%n)
		if len(lines) < n + 1: raise NotEnoughProductions(n, len(lines) - 1)
		productions = []
		for line in lines[1:n+1]: productions.extend(parse_production_line(line))
		return cls(productions)
	
	@classmethod
	def from_text(cls, text:str) -> "Grammar":
		return cls.parse(text.splitlines())
	
	@property
	def productions(self) -> tuple: return self.__productions
	@property
	def nonterminals(self) -> frozenset: return self.__nonterminals
	@property
	def terminals(self) -> frozenset: return self.__terminals
	@property
	def start(self) -> Symbol: return self.__start
	
	def productions_for(self, symbol:Symbol) -> tuple:
		""" In declaration order. Empty for anything without rules of its own. """
		return self.__production_map.get(symbol, ())
	
	def __str__(self):
		return ''.join(str(production)+'\n' for production in self.__productions)
	
	def display(self):
		head = ['', 'Symbol', 'Produces']
		body = [[i, production.lhs, symbols_to_string(production.rhs)] for i, production in enumerate(self.__productions)]
		pretty.print_grid([head] + body)
		print("Terminals:", pretty.braced(self.__terminals))
		print("Nonterminals:", pretty.braced(self.__nonterminals))


def parse_production_line(line:str) -> list:
	""" One line of grammar text yields a production per alternative. """
	parts = line.split(ARROW)
	if len(parts) != 2: raise InvalidProduction(line)
	head, tail = parts[0].strip(), parts[1]
	if not head: raise InvalidProduction(line)
	lhs = Symbol.classify(head[0])
	if not lhs.is_nonterminal(): raise InvalidProduction(line)
	return [Production(lhs, string_to_symbols(alternative)) for alternative in tail.split()]
