"""
Classify a context-free grammar as LL(1), SLR(1), both, or neither, and then
answer yes or no for each candidate string, one per line, until an empty line.

The grammar comes first: a line with the number n of production lines, then
those n lines, each like "S -> AB" with alternatives separated by spaces and
"e" for the empty alternative. The start symbol is always S.
"""

import sys, argparse

from cfgtables.parsing import lr0, ll1, slr1
from cfgtables.parsing.all_methods import analyze, LL1, SLR1
from cfgtables.parsing.first_follow import display_sets
from cfgtables.parsing.interface import GrammarError

PROMPT = "Select a parser (T: for LL(1), B: for SLR(1), Q: quit):"
CHOICES = {'T': LL1, 'B': SLR1}

def parse_arguments(argv=None):
	parser = argparse.ArgumentParser(prog='py -m cfgtables', description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
	parser.add_argument('source_path', nargs='?', help='path to input file (default: standard input)')
	parser.add_argument('--sets', action='store_true', help='Display the FIRST and FOLLOW sets.')
	parser.add_argument('--tables', action='store_true', help='Display the grammar, the LR(0) automaton, and every table that could be built.')
	parser.add_argument('--dot', metavar='PATH', help="Write the LR(0) automaton as a .dot file for the Graphviz package.")
	parser.add_argument('-v', '--verbose', action='store_true', help="Squawk about table sizes.")
	return parser.parse_args(argv)

def read_grammar(lines) -> list:
	""" Take the count line and that many production lines; leave the rest of the stream for candidate strings. """
	header = next(lines, None)
	if header is None: return []
	grammar_text = [header]
	try: count = int(header.strip())
	except ValueError: return grammar_text
	for _ in range(count):
		line = next(lines, None)
		if line is None: break
		grammar_text.append(line)
	return grammar_text

def recognize_each(lines, parser):
	for line in lines:
		text = line.strip()
		if not text: return
		print("yes" if parser.recognize(text) else "no")

def choose_and_recognize(lines, parsers):
	while True:
		print(PROMPT)
		sys.stdout.flush()
		line = next(lines, None)
		if line is None: return
		choice = line.strip().upper()
		if choice == 'Q': return
		if choice in CHOICES: recognize_each(lines, parsers[CHOICES[choice]])

def run(stream, args) -> int:
	lines = (line.rstrip('\r\n') for line in stream)
	try: analysis = analyze(read_grammar(lines))
	except GrammarError as e:
		print("Error: %s"%e, file=sys.stderr)
		return 1
	grammar = analysis.grammar
	if args.sets:
		display_sets('FIRST', analysis.first, grammar.nonterminals)
		display_sets('FOLLOW', analysis.follow, grammar.nonterminals)
	if args.verbose:
		for method, conflict in analysis.conflicts.items(): print("Not %s: %s"%(method, conflict), file=sys.stderr)
	if args.tables or args.dot:
		automaton = analysis.parsers[SLR1].automaton if SLR1 in analysis.parsers else lr0.lr0_construction(grammar)
		if args.dot: automaton.make_dot_file(args.dot)
		if args.tables:
			grammar.display()
			if LL1 in analysis.parsers: analysis.parsers[LL1].display()
			automaton.display()
			if SLR1 in analysis.parsers: analysis.parsers[SLR1].display()
	
	if analysis.is_class(LL1) and analysis.is_class(SLR1):
		choose_and_recognize(lines, analysis.parsers)
	elif analysis.is_class(LL1) or analysis.is_class(SLR1):
		print(analysis.classification())
		(parser,) = analysis.parsers.values()
		recognize_each(lines, parser)
	else:
		print(analysis.classification())
	return 0

def main(args) -> int:
	if args.verbose: lr0.VERBOSE = ll1.VERBOSE = slr1.VERBOSE = True
	if args.source_path is None: return run(sys.stdin, args)
	with open(args.source_path, encoding='utf-8') as fh: return run(fh, args)

if __name__ == '__main__': sys.exit(main(parse_arguments()))
