import unittest

from cfgtables.parsing.context_free import Grammar
from cfgtables.parsing.first_follow import compute_first, compute_follow
from cfgtables.parsing.interface import LL1Conflict, ConflictError
from cfgtables.parsing.ll1 import LL1Parser
from cfgtables.parsing.symbols import END_MARKER, terminal, nonterminal

def build(*lines) -> LL1Parser:
	g = Grammar.parse([str(len(lines)), *lines])
	first = compute_first(g)
	return LL1Parser.build(g, first, compute_follow(g, first))

class TestLL1Construction(unittest.TestCase):
	def test_table(self):
		table = build("S -> AB", "A -> aA d", "B -> bBc e").table
		self.assertEqual('S → AB', str(table[nonterminal('S'), terminal('a')]))
		self.assertEqual('A → d', str(table[nonterminal('A'), terminal('d')]))
		self.assertEqual('B → ε', str(table[nonterminal('B'), END_MARKER]))
		self.assertEqual('B → ε', str(table[nonterminal('B'), terminal('c')]))
		self.assertNotIn((nonterminal('A'), terminal('b')), table)
		self.assertEqual(7, len(table))
	
	def test_left_recursion_conflicts(self):
		with self.assertRaises(LL1Conflict) as context:
			build("S -> Sa b", "A -> a")
		ex = context.exception
		self.assertEqual(('S', 'b', 'S → Sa', 'S → b'), (ex.nonterminal, ex.terminal, ex.prod1, ex.prod2))
		self.assertIsInstance(ex, ConflictError)
	
	def test_first_declared_is_reported_first(self):
		with self.assertRaises(LL1Conflict) as context:
			build("S -> S+T T", "T -> T*F F", "F -> (S) i")
		ex = context.exception
		self.assertEqual(('S', '(', 'S → S+T', 'S → T'), (ex.nonterminal, ex.terminal, ex.prod1, ex.prod2))
	
	def test_common_prefix_conflicts(self):
		with self.assertRaises(LL1Conflict):
			build("S -> ab ac")
	
	def test_nullable_versus_follow(self):
		# A may vanish, and then 'a' follows it; but A can also start with 'a'.
		with self.assertRaises(LL1Conflict):
			build("S -> Aa", "A -> a e")
	
	def test_duplicate_rule_is_not_a_conflict(self):
		parser = build("S -> a a")
		self.assertTrue(parser.recognize("a"))

class TestLL1Recognition(unittest.TestCase):
	def test_epsilon_production(self):
		parser = build("S -> A", "A -> a e")
		self.assertTrue(parser.recognize("a"))
		self.assertTrue(parser.recognize(""))
		self.assertFalse(parser.recognize("aa"))
	
	def test_balanced(self):
		parser = build("S -> (S)S e")
		for sentence in ["", "()", "(())", "()()", "(()())"]:
			with self.subTest(sentence=sentence):
				self.assertTrue(parser.recognize(sentence))
		for sentence in ["(", ")", ")(", "(()", "x"]:
			with self.subTest(sentence=sentence):
				self.assertFalse(parser.recognize(sentence))
	
	def test_foreign_characters_reject(self):
		parser = build("S -> ab")
		for sentence in ["a$b", "ab$", "e", "aBb", "ab "]:
			with self.subTest(sentence=sentence):
				self.assertFalse(parser.recognize(sentence))
	
	def test_start_without_rules(self):
		parser = build("A -> a")
		self.assertFalse(parser.recognize("a"))
		self.assertFalse(parser.recognize(""))

if __name__ == '__main__':
	unittest.main()
