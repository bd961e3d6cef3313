"""
FIRST and FOLLOW sets, by the textbook fixed-point method.

Both computations are least-fixed-point problems over finite sets that only
ever grow, so a plain "keep sweeping until nothing changes" loop terminates.
The sweeps go through the rules in declaration order. Results come back as
dictionaries from symbol to frozenset, and nothing is cached anywhere: if you
rebuild a grammar, recompute its sets.
"""

from typing import Iterable

from ..support import pretty
from .context_free import Grammar
from .symbols import Symbol, EPSILON, END_MARKER

def first_of_symbol(first_sets:dict, symbol:Symbol) -> frozenset:
	"""
	Terminals, epsilon, and the end-marker are their own FIRST sets by definition.
	A nonterminal unknown to the sets (say, one without rules) has the empty set.
	"""
	try: return first_sets[symbol]
	except KeyError:
		if symbol.is_nonterminal(): return frozenset()
		return frozenset([symbol])

def first_of_sequence(first_sets:dict, symbols:Iterable[Symbol]) -> set:
	"""
	The FIRST set of a string of symbols: collect FIRST of each symbol in turn
	(less epsilon) until one of them cannot vanish. If they all can (as happens
	trivially with the empty sequence) then so can the string, and the result
	includes epsilon.
	"""
	result = set()
	for symbol in symbols:
		first = first_of_symbol(first_sets, symbol)
		result.update(first)
		result.discard(EPSILON)
		if EPSILON not in first: return result
	result.add(EPSILON)
	return result

def compute_first(grammar:Grammar) -> dict:
	first = {terminal: {terminal} for terminal in grammar.terminals}
	first[EPSILON] = {EPSILON}
	first[END_MARKER] = {END_MARKER}
	for symbol in grammar.nonterminals: first[symbol] = set()
	changed = True
	while changed:
		changed = False
		for production in grammar.productions:
			target = first[production.lhs]
			size = len(target)
			target.update(first_of_sequence(first, production.rhs))
			if len(target) != size: changed = True
	return {symbol: frozenset(members) for symbol, members in first.items()}

def compute_follow(grammar:Grammar, first_sets:dict) -> dict:
	"""
	FOLLOW(A) is what may come right after A in some sentential form.
	The end-marker follows the start symbol; beyond that, each occurrence of a
	nonterminal B in a rule A -> αBβ contributes FIRST(β), and also FOLLOW(A)
	whenever β can vanish. FOLLOW(A) is read at whatever it happens to be so far;
	the sweep repeats until it stops growing.
	"""
	follow = {symbol: set() for symbol in grammar.nonterminals}
	follow.setdefault(grammar.start, set()).add(END_MARKER)
	changed = True
	while changed:
		changed = False
		for production in grammar.productions:
			rhs = production.rhs
			for i, symbol in enumerate(rhs):
				if not symbol.is_nonterminal(): continue
				target = follow[symbol]
				size = len(target)
				trailer = first_of_sequence(first_sets, rhs[i+1:])
				if EPSILON in trailer:
					trailer.discard(EPSILON)
					target.update(follow[production.lhs])
				target.update(trailer)
				if len(target) != size: changed = True
	return {symbol: frozenset(members) for symbol, members in follow.items()}

def follow_of_symbol(follow_sets:dict, symbol:Symbol) -> frozenset:
	return follow_sets.get(symbol, frozenset())

def display_sets(title:str, sets:dict, symbols:Iterable[Symbol]):
	""" Show the sets for the given symbols, one per row, in canonical symbol order. """
	head = ['', title]
	body = [[symbol, pretty.braced(sets.get(symbol, ()))] for symbol in sorted(symbols)]
	pretty.print_grid([head] + body)
