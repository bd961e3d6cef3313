"""
LL(1): top-down, one symbol of look-ahead, no backtracking.

The predictive table M maps a (nonterminal, look-ahead) pair to the one rule
to expand. Rule A -> α claims M[A, t] for every t in FIRST(α), and if α can
vanish, also for every t in FOLLOW(A). Two different rules claiming one cell
means the grammar is not LL(1), and construction stops right there.

The recognizer is the classic stack machine: the stack starts as [$, S];
matching symbols cancel, nonterminals get replaced by a right-hand side
chosen from the table, and anything else is a rejection.
"""

from ..support import pretty
from .context_free import Grammar, Production
from .first_follow import first_of_sequence, follow_of_symbol
from .interface import LL1Conflict
from .symbols import EPSILON, END_MARKER, string_to_symbols, symbols_to_string

VERBOSE = False

class LL1Parser:
	"""
	Holds the grammar and its predictive table. Immutable after construction,
	so one instance can recognize as many strings as you like.
	"""
	
	def __init__(self, grammar:Grammar, table:dict):
		self.__grammar = grammar
		self.__table = dict(table)
	
	@classmethod
	def build(cls, grammar:Grammar, first_sets:dict, follow_sets:dict) -> "LL1Parser":
		table = {}
		
		def claim(production:Production, look_ahead):
			key = (production.lhs, look_ahead)
			prior = table.setdefault(key, production)
			if prior != production:
				raise LL1Conflict(str(production.lhs), str(look_ahead), str(prior), str(production))
		
		for production in grammar.productions:
			first = first_of_sequence(first_sets, production.rhs)
			for symbol in sorted(first):
				if symbol != EPSILON: claim(production, symbol)
			if EPSILON in first:
				for symbol in sorted(follow_of_symbol(follow_sets, production.lhs)): claim(production, symbol)
		if VERBOSE: print("LL(1) table has %d entries."%len(table))
		return cls(grammar, table)
	
	@property
	def grammar(self) -> Grammar: return self.__grammar
	
	@property
	def table(self) -> dict:
		""" A copy of M, keyed by (nonterminal, terminal-or-end-marker). """
		return dict(self.__table)
	
	def recognize(self, text:str) -> bool:
		"""
		Is ``text`` a sentence of the grammar? Characters are classified one by one,
		so anything the grammar never mentions simply fails to match.
		"""
		sentence = string_to_symbols(text) + (END_MARKER,)
		stack = [END_MARKER, self.__grammar.start]
		cursor = 0
		while stack and cursor < len(sentence):
			top, current = stack[-1], sentence[cursor]
			if top == current:
				stack.pop()
				cursor += 1
			elif top.is_nonterminal():
				try: production = self.__table[top, current]
				except KeyError: return False
				stack.pop()
				stack.extend(reversed(production.body))
			else:
				return False
		return not stack and cursor == len(sentence)
	
	def display(self):
		terminals = sorted(self.__grammar.terminals) + [END_MARKER]
		head = [''] + terminals
		body = []
		for symbol in sorted(self.__grammar.nonterminals):
			row = [symbol]
			for terminal in terminals:
				production = self.__table.get((symbol, terminal))
				row.append('' if production is None else symbols_to_string(production.rhs))
			body.append(row)
		pretty.print_grid([head] + body)
