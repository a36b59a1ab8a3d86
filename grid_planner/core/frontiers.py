# grid_planner/core/frontiers.py
# Open lists for the strategies. All three share push/pop/peek/clear and are falsy when empty.
from __future__ import annotations
import heapq
import itertools
from collections import deque


class _Frontier:
    def __init__(self, items):
        self.items = items
    def __len__(self): return len(self.items)
    def clear(self): self.items.clear()


class LIFOStack(_Frontier):
    """DFS open list."""
    def __init__(self):
        super().__init__([])
    def push(self, state): self.items.append(state)
    def pop(self): return self.items.pop()
    def peek(self): return self.items[-1]


class FIFOQueue(_Frontier):
    """BFS open list; hill-climbing keeps its single current cell here."""
    def __init__(self):
        super().__init__(deque())
    def push(self, state): self.items.append(state)
    def pop(self): return self.items.popleft()
    def peek(self): return self.items[0]


class PriorityQueue(_Frontier):
    """
    Min-heap by key(state), with the key captured at push time.

    States are mutable (A* lowers their f while they sit in the heap), so an
    improved state is simply pushed again; the stale entry is left behind and
    the caller skips it when popped (lazy deletion). Equal keys pop in push order.
    """
    def __init__(self, key):
        super().__init__([])
        self.key = key
        self._seq = itertools.count()

    def push(self, state):
        heapq.heappush(self.items, (self.key(state), next(self._seq), state))

    def pop(self):
        return self.pop_with_key()[1]

    def pop_with_key(self):
        k, _, state = heapq.heappop(self.items)
        return k, state

    def peek(self):
        return self.items[0][2]
