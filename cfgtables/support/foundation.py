""" Small is beautiful. Graph-search chores shared by the table builders. """

from collections import deque

def allocate(a_list:list, item):
	""" Append an item and return its index. LR(0) states get their numbers this way, in order of discovery. """
	idx = len(a_list)
	a_list.append(item)
	return idx

def transitive_closure(roots, successors) -> set:
	"""
	Breadth-first search for everything reachable from ``roots``.
	
	The graph is given implicitly: ``successors(node)`` returns an iterable
	of neighbors, or ``None`` if there aren't any. Nodes must be hashable.
	The LR(0) closure operation is exactly this search over parse-items.
	"""
	closure = set(roots)
	queue = deque(closure)
	while queue:
		more = successors(queue.popleft())
		if more is not None:
			for item in more:
				if item not in closure:
					closure.add(item)
					queue.append(item)
	return closure

class BreadthFirstTraversal:
	"""
	Discover the nodes of a graph one at a time, numbering them in order of discovery.
	
	Seed the traversal by calling .lookup(root) as often as necessary, then call
	.execute(visit). Each key passed to .lookup(...) gets visited exactly once, and
	the visitor is expected to .lookup(...) the successors it finds. Equal keys
	get the same number, which is how the canonical LR(0) collection merges states.
	
	Fields, once the traversal is done:
	
	current: the index of the key being visited; ``None`` before and after.
	traversal: the keys in order of discovery.
	catalog: mapping from key to index.
	earliest_predecessor: for each node, the node whose visit discovered it.
	breadcrumbs: the label given with .lookup(key, breadcrumb=label) at discovery.
	"""
	def __init__(self):
		self.current, self.traversal, self.catalog, self.earliest_predecessor, self.breadcrumbs = None, [], {}, [], []
	def execute(self, visit):
		""" visit(key) should call .lookup(successor_key, breadcrumb=...), which returns an integer. """
		for self.current, key in enumerate(self.traversal):
			visit(key)
		self.current = None
	def lookup(self, key, *, breadcrumb=None) -> int:
		if key not in self.catalog:
			self.catalog[key] = allocate(self.traversal, key)
			self.earliest_predecessor.append(self.current)
			self.breadcrumbs.append(breadcrumb)
		return self.catalog[key]
	def shortest_path_to(self, index:int) -> list:
		""" Return the list of nodes along the discovery path from a root to the given node, root first. """
		path = []
		while index is not None:
			path.append(index)
			index = self.earliest_predecessor[index]
		path.reverse()
		return path
	def breadcrumb_trail(self, index:int) -> list:
		""" The labels of the edges followed to discover a node. Roots have no label, so they're skipped. """
		return [self.breadcrumbs[q] for q in self.shortest_path_to(index)[1:]]
