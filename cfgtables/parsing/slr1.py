"""
SLR(1): the LR(0) automaton, with FOLLOW sets to decide when to reduce.

The ACTION table is keyed by (state, look-ahead). Shifts come straight from
the automaton's transitions on terminals. A completed item A -> α• asks for a
reduction on every look-ahead in FOLLOW(A), except the completed augmented rule
S' -> S•, which means "accept" on the end-marker. The GOTO table is just the
automaton's transitions on nonterminals.

If a shift finds its cell already taken (even by the same shift, from another
item) or a reduction finds a shift or a different reduction, the grammar is not
SLR(1). Construction stops at the first such cell, scanning states in order and
each state's items in rule-declaration order. Accept is recorded outright, and
a reduction landing on it leaves it be.

The recognizer only accepts once the whole input is consumed, so an end-marker
typed into the middle of a string is just another way to be wrong.
"""

from typing import NamedTuple

from ..support import pretty
from .context_free import Grammar, Production
from .first_follow import follow_of_symbol
from .interface import ShiftReduceConflict, ReduceReduceConflict
from .lr0 import LR0Automaton, AUGMENTED_START, lr0_construction
from .symbols import END_MARKER, string_to_symbols

VERBOSE = False

class Shift(NamedTuple):
	state: int
	def __str__(self): return "s%d"%self.state

class Reduce(NamedTuple):
	production: Production
	def __str__(self): return "r(%s)"%(self.production,)

class Accept(NamedTuple):
	def __str__(self): return "acc"

ACCEPT = Accept()


class SLR1Parser:
	"""
	Holds the automaton and the ACTION and GOTO tables built from it.
	Immutable after construction and safe to reuse for any number of sentences.
	"""
	
	def __init__(self, automaton:LR0Automaton, action:dict, goto:dict):
		self.__automaton = automaton
		self.__action = dict(action)
		self.__goto = dict(goto)
	
	@classmethod
	def build(cls, grammar:Grammar, follow_sets:dict, automaton:LR0Automaton=None) -> "SLR1Parser":
		if automaton is None: automaton = lr0_construction(grammar)
		action, goto = {}, {}
		
		def shift(q, symbol, target):
			# Any earlier occupant, even an identical shift from another item, is a conflict.
			if (q, symbol) in action:
				raise ShiftReduceConflict(q, str(symbol), automaton.path_to(q))
			action[q, symbol] = Shift(target)
		
		def reduce(q, symbol, production):
			prior = action.setdefault((q, symbol), Reduce(production))
			if isinstance(prior, Shift):
				raise ShiftReduceConflict(q, str(symbol), automaton.path_to(q))
			if isinstance(prior, Reduce) and prior.production != production:
				raise ReduceReduceConflict(q, str(symbol), str(prior.production), str(production), automaton.path_to(q))
			# A reduction never displaces an accept.
		
		def accept(q):
			action[q, END_MARKER] = ACCEPT
		
		for q in range(len(automaton)):
			for item in automaton.items(q):
				symbol = item.next_symbol()
				if symbol is not None:
					if symbol.is_lookahead() and (q, symbol) in automaton.transitions:
						shift(q, symbol, automaton.transitions[q, symbol])
				elif item.production.lhs == AUGMENTED_START:
					accept(q)
				else:
					lhs = item.production.lhs
					for look_ahead in sorted(follow_of_symbol(follow_sets, lhs)):
						reduce(q, look_ahead, item.production)
		
		for (q, symbol), target in automaton.transitions.items():
			if symbol.is_nonterminal(): goto[q, symbol] = target
		
		if VERBOSE: print("SLR(1) tables have %d action entries and %d goto entries."%(len(action), len(goto)))
		return cls(automaton, action, goto)
	
	@property
	def automaton(self) -> LR0Automaton: return self.__automaton
	
	@property
	def grammar(self) -> Grammar: return self.__automaton.grammar
	
	@property
	def action_table(self) -> dict: return dict(self.__action)
	
	@property
	def goto_table(self) -> dict: return dict(self.__goto)
	
	def recognize(self, text:str) -> bool:
		"""
		The shift-reduce loop. The symbol stack runs parallel to the state stack;
		it carries no semantic values, only the symbols, for anyone curious.
		"""
		sentence = string_to_symbols(text) + (END_MARKER,)
		states, symbols = [0], []
		cursor = 0
		while cursor < len(sentence):
			current = sentence[cursor]
			step = self.__action.get((states[-1], current))
			if step is None: return False
			if isinstance(step, Accept): return cursor == len(sentence) - 1
			if isinstance(step, Shift):
				symbols.append(current)
				states.append(step.state)
				cursor += 1
			else:
				production = step.production
				size = len(production.body)
				if size: # Python hiccup: don't let epsilon rules delete the whole stack.
					del states[-size:]
					del symbols[-size:]
				try: states.append(self.__goto[states[-1], production.lhs])
				except KeyError: return False
				symbols.append(production.lhs)
		return False
	
	def display(self):
		terminals = sorted(self.grammar.terminals) + [END_MARKER]
		nonterminals = sorted(self.grammar.nonterminals)
		print('Action and Goto: (%d states)' % len(self.__automaton))
		pretty.print_grid(self.__grid(terminals, nonterminals))
	
	def make_csv(self, pathstem):
		""" Generate action and goto tables into CSV files suitable for inspection in a spreadsheet program. """
		terminals = sorted(self.grammar.terminals) + [END_MARKER]
		nonterminals = sorted(self.grammar.nonterminals)
		pretty.write_csv_grid(pathstem + '.action.csv', self.__grid(terminals, []))
		pretty.write_csv_grid(pathstem + '.goto.csv', self.__grid([], nonterminals))
	
	def __grid(self, terminals, nonterminals):
		head = ['', ''] + terminals + nonterminals
		body = []
		for q in range(len(self.__automaton)):
			row = [q, ' '.join(map(str, self.__automaton.path_to(q)))]
			row.extend(self.__action.get((q, t), '') for t in terminals)
			row.extend(self.__goto.get((q, n), '') for n in nonterminals)
			body.append(row)
		return [head] + body
