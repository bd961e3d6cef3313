"""
Of all the LR-style parsing methods, LR(0) is the least sophisticated and the easiest to understand.
It's also the foundation SLR(1) stands on, so it makes sense to start reading here.

A parse-item is a rule with a dot somewhere in its right-hand side, marking how
much of that side has been seen. A state of the automaton is a set of items,
closed under "if the dot is before a nonterminal X, then the dot may also be at
the start of any rule for X". From each state, shifting a symbol X moves the dot
over X in every item that allows it, and the closure of the result is the
successor state. Equal item sets are the same state; that's the whole trick.

The grammar gets augmented with a fresh start rule S' -> S, so that recognizing
the whole sentence is just another reduction, one which the table turns into
"accept" instead.
"""

from typing import NamedTuple, Optional, Iterable

from ..support import pretty
from ..support.foundation import transitive_closure, BreadthFirstTraversal
from .context_free import Grammar, Production
from .symbols import Symbol, Kind

VERBOSE = False

# Spelled with two characters, so it can never collide with a classified symbol.
AUGMENTED_START = Symbol(Kind.NONTERMINAL, "S'")

class Item(NamedTuple):
	"""
	The dot offset counts over the production's body, so the epsilon
	placeholder never sits after a dot: an empty rule is born complete.
	"""
	production: Production
	dot: int
	
	def next_symbol(self) -> Optional[Symbol]:
		""" None means end-of-rule. """
		body = self.production.body
		if self.dot < len(body): return body[self.dot]
	
	def is_reduce(self) -> bool:
		return self.dot >= len(self.production.body)
	
	def advance(self) -> "Item":
		return Item(self.production, self.dot + 1)
	
	def __str__(self):
		return "%s → %s"%(self.production.lhs, pretty.dotted(self.production.body, self.dot))


def augment(grammar:Grammar) -> Production:
	return Production(AUGMENTED_START, (grammar.start,))

def closure(grammar:Grammar, items:Iterable[Item]) -> frozenset:
	def successors(item:Item):
		symbol = item.next_symbol()
		if symbol is not None and symbol.is_nonterminal():
			return [Item(production, 0) for production in grammar.productions_for(symbol)]
	return frozenset(transitive_closure(items, successors))

def goto(grammar:Grammar, items:Iterable[Item], symbol:Symbol) -> frozenset:
	""" The empty set means there's no transition on that symbol. """
	moved = [item.advance() for item in items if item.next_symbol() == symbol]
	if moved: return closure(grammar, moved)
	return frozenset()


class LR0Automaton:
	"""
	The canonical collection of LR(0) item sets.
	
	states: item sets, indexed by state number. State 0 is the initial state.
	transitions: (state, symbol) -> state.
	start_production: the synthetic rule S' -> S.
	bft: The BreadthFirstTraversal used for the construction; its breadcrumbs
		name the symbol shifted into each state, which helps explain conflicts.
	"""
	def __init__(self, *, grammar:Grammar, start_production:Production, bft:BreadthFirstTraversal, transitions:dict):
		self.grammar = grammar
		self.start_production = start_production
		self.bft = bft
		self.states = bft.traversal
		self.transitions = transitions
		order = {production:i for i, production in reversed(list(enumerate(grammar.productions)))}
		order[start_production] = -1
		self.__order = order
	
	def __len__(self): return len(self.states)
	
	def items(self, q:int) -> list:
		""" The items of state q, in order of their rules' declaration and then by dot position. """
		return sorted(self.states[q], key=lambda item: (self.__order[item.production], item.dot))
	
	def successors(self, q:int) -> dict:
		return {symbol: target for (source, symbol), target in self.transitions.items() if source == q}
	
	def path_to(self, q:int) -> list:
		""" The symbols shifted along the shortest route from the initial state to state q. """
		return self.bft.breadcrumb_trail(q)
	
	def display(self):
		for q in range(len(self.states)):
			print("State %d: %s"%(q, ' '.join(map(str, self.path_to(q)))))
			for item in self.items(q): print("\t", item)
			for symbol, target in sorted(self.successors(q).items()): print("\t\t%s => %d"%(symbol, target))
	
	def make_dot_file(self, path):
		""" Make a file suitable for the "dot" application from the Graphviz package. """
		with open(path, 'w', encoding='utf-8') as fh:
			fh.write("digraph {\n")
			for q in range(len(self.states)):
				label = '\\n'.join(str(item).replace('"', r'\"') for item in self.items(q))
				fh.write("%d [shape=box label=\"%d\\n%s\"]\n"%(q, q, label))
			for (q, symbol), target in sorted(self.transitions.items()):
				fh.write("\t%d -> %d [label=\"%s\"]\n"%(q, target, str(symbol).replace('"', r'\"')))
			fh.write('}\n')


def lr0_construction(grammar:Grammar) -> LR0Automaton:
	"""
	A subset-construction over parse-items. States are visited in order of discovery,
	and each one's outgoing symbols are taken in canonical symbol order, so the
	numbering of states is fully determined by the grammar.
	"""
	def build_state(item_set:frozenset):
		q = bft.current
		symbols = {item.next_symbol() for item in item_set}
		symbols.discard(None)
		for symbol in sorted(symbols):
			successor = goto(grammar, item_set, symbol)
			if successor: transitions[q, symbol] = bft.lookup(successor, breadcrumb=symbol)
	
	start_production = augment(grammar)
	bft = BreadthFirstTraversal()
	transitions = {}
	bft.lookup(closure(grammar, [Item(start_production, 0)]))
	bft.execute(build_state)
	if VERBOSE: print("LR(0) automaton has %d states and %d transitions."%(len(bft.traversal), len(transitions)))
	return LR0Automaton(grammar=grammar, start_production=start_production, bft=bft, transitions=transitions)
