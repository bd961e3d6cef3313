import unittest

from cfgtables.parsing.context_free import Grammar
from cfgtables.parsing.first_follow import compute_first, compute_follow, first_of_sequence
from cfgtables.parsing.symbols import EPSILON, END_MARKER, string_to_symbols, nonterminal

def syms(text): return set(string_to_symbols(text))

BOTH = ["3", "S -> AB", "A -> aA d", "B -> bBc e"]
EXPRESSION = ["3", "S -> S+T T", "T -> T*F F", "F -> (S) i"]

class TestFirst(unittest.TestCase):
	def setUp(self):
		self.grammar = Grammar.parse(BOTH)
		self.first = compute_first(self.grammar)
	
	def test_terminals_are_their_own_first(self):
		for terminal in self.grammar.terminals:
			with self.subTest(terminal=terminal):
				self.assertEqual({terminal}, self.first[terminal])
		self.assertEqual({EPSILON}, self.first[EPSILON])
		self.assertEqual({END_MARKER}, self.first[END_MARKER])
	
	def test_nonterminals(self):
		self.assertEqual(syms('ad'), self.first[nonterminal('S')])
		self.assertEqual(syms('ad'), self.first[nonterminal('A')])
		self.assertEqual({EPSILON} | syms('b'), self.first[nonterminal('B')])
	
	def test_left_recursion(self):
		first = compute_first(Grammar.parse(EXPRESSION))
		for c in 'STF':
			with self.subTest(nonterminal=c):
				self.assertEqual(syms('(i'), first[nonterminal(c)])
	
	def test_first_of_sequence(self):
		self.assertEqual({EPSILON}, first_of_sequence(self.first, ()))
		self.assertEqual(syms('bc'), first_of_sequence(self.first, string_to_symbols('Bc')))
		self.assertEqual({EPSILON} | syms('b'), first_of_sequence(self.first, string_to_symbols('BB')))
		self.assertEqual(syms('ad'), first_of_sequence(self.first, string_to_symbols('AB')))
	
	def test_nonterminal_without_rules_has_empty_first(self):
		g = Grammar.parse(["1", "S -> Xa b"])
		first = compute_first(g)
		self.assertEqual(set(), first[nonterminal('X')])
		self.assertEqual(syms('b'), first[nonterminal('S')])
	
	def test_idempotent(self):
		self.assertEqual(self.first, compute_first(self.grammar))

class TestFollow(unittest.TestCase):
	def test_start_gets_end_marker(self):
		for lines in [BOTH, EXPRESSION, ["1", "A -> a"], ["2", "S -> A", "A -> A b"]]:
			with self.subTest(lines=lines):
				g = Grammar.parse(lines)
				self.assertIn(END_MARKER, compute_follow(g, compute_first(g))[g.start])
	
	def test_follow_sees_through_to_next_symbol(self):
		g = Grammar.parse(["3", "S -> AB", "A -> a", "B -> b"])
		follow = compute_follow(g, compute_first(g))
		self.assertIn(string_to_symbols('b')[0], follow[nonterminal('A')])
	
	def test_nullable_tail(self):
		g = Grammar.parse(BOTH)
		follow = compute_follow(g, compute_first(g))
		self.assertEqual({END_MARKER}, follow[nonterminal('S')])
		self.assertEqual(syms('b$'), follow[nonterminal('A')])
		self.assertEqual(syms('c$'), follow[nonterminal('B')])
	
	def test_expression_grammar(self):
		g = Grammar.parse(EXPRESSION)
		follow = compute_follow(g, compute_first(g))
		self.assertEqual(syms('+)$'), follow[nonterminal('S')])
		self.assertEqual(syms('+*)$'), follow[nonterminal('T')])
		self.assertEqual(syms('+*)$'), follow[nonterminal('F')])
	
	def test_idempotent(self):
		g = Grammar.parse(EXPRESSION)
		first = compute_first(g)
		self.assertEqual(compute_follow(g, first), compute_follow(g, compute_first(g)))

if __name__ == '__main__':
	unittest.main()
