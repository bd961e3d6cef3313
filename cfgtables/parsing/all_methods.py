"""
One grammar, every table-construction method.

Parse the grammar text once, solve FIRST and FOLLOW once, then try each method
on its own. A conflict in one method does not stop the others from being tried;
it just gets recorded against that method's name.
"""

from typing import NamedTuple, Iterable

from .context_free import Grammar
from .first_follow import compute_first, compute_follow
from .interface import ConflictError
from .ll1 import LL1Parser
from .slr1 import SLR1Parser

LL1 = 'LL(1)'
SLR1 = 'SLR(1)'

PARSE_TABLE_METHODS = {
	LL1: lambda grammar, first, follow: LL1Parser.build(grammar, first, follow),
	SLR1: lambda grammar, first, follow: SLR1Parser.build(grammar, follow),
}

class Analysis(NamedTuple):
	grammar: Grammar
	first: dict
	follow: dict
	parsers: dict  # method name -> recognizer, for each method that worked
	conflicts: dict  # method name -> ConflictError, for each method that didn't
	
	def is_class(self, method:str) -> bool:
		return method in self.parsers
	
	def classification(self) -> str:
		""" Human-readable verdict, in the same words the command line uses. """
		if self.is_class(LL1) and self.is_class(SLR1): return "Grammar is both LL(1) and SLR(1)."
		if self.is_class(LL1): return "Grammar is LL(1)."
		if self.is_class(SLR1): return "Grammar is SLR(1)."
		return "Grammar is neither LL(1) nor SLR(1)."

def analyze(lines:Iterable[str], methods:Iterable[str]=tuple(PARSE_TABLE_METHODS)) -> Analysis:
	"""
	Malformed grammar text raises straight out of here, since there's nothing to
	classify. Conflicts, on the other hand, are part of the answer.
	"""
	grammar = Grammar.parse(lines)
	first = compute_first(grammar)
	follow = compute_follow(grammar, first)
	parsers, conflicts = {}, {}
	for method in methods:
		try: parsers[method] = PARSE_TABLE_METHODS[method](grammar, first, follow)
		except ConflictError as ex: conflicts[method] = ex
	return Analysis(grammar, first, follow, parsers, conflicts)
