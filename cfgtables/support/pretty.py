""" Bits and bobs in support of visualizing grammars, sets, and tables. """
import csv

DOT = '•'

def dotted(rhs, position):
	""" Render a right-hand side with the parse-item dot inserted at the given position. """
	items = [str(s) for s in rhs]
	items.insert(position, DOT)
	return " ".join(items)

def print_grid(grid):
	"""
	Print a table with box-drawing rules: the first row is the header, and every
	row must be the same width. Column widths fit the widest rendered cell, so a
	parse table with long reductions like r(A → a B) still lines up.
	"""
	lens = list(map(len, grid))
	assert len(set(lens)) == 1, lens
	grid = [[str(cell) for cell in row] for row in grid]
	width = [max(map(len, column)) for column in zip(*grid)]
	horizontal = '─'
	vertical = ' │ '
	upper = horizontal + '┬' + horizontal
	inner = horizontal + '┼' + horizontal
	lower = horizontal + '┴' + horizontal
	segments = [horizontal*w for w in width]
	print(upper.join(segments))
	for r, row in enumerate(grid):
		if r == 1: print(inner.join(segments))
		print(vertical.join(s.rjust(w,' ') for s,w in zip(row, width)))
	print(lower.join(segments))

def braced(symbols):
	""" Render a set of symbols in their canonical order, like { a, b, $ } """
	return "{ %s }"%", ".join(map(str, sorted(symbols)))

def write_csv_grid(path, grid):
	with open(path, 'w', newline="", encoding='utf-8') as fh:
		csv.writer(fh).writerows(grid)
