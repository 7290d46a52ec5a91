"""
Fresh names for the existentials and markers the checker invents.

Each checking run owns one NameSupply, so no state leaks between runs.
The "$" prefix keeps invented names apart from anything a user writes in an annotation.
"""

class NameSupply:
	def __init__(self, prefix="$"):
		self._prefix = prefix
		self._counter = 0

	def fresh(self) -> str:
		self._counter += 1
		return "%s%d"%(self._prefix, self._counter)

	def several(self, nr:int) -> tuple[str, ...]:
		return tuple(self.fresh() for _ in range(nr))

	def reset(self):
		self._counter = 0
