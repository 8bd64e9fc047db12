import pytest

from indexed_heap.hash_table import MISSING


def check_heap_invariants(heap) -> None:
  n = len(heap.slots)
  assert heap.size() == n
  assert heap.index.size() == n
  for i in range(n):
    entry = heap.slots[i]
    assert entry is not None
    assert heap.index.get(entry.value) == i
    if i > 0:
      assert heap.slots[(i - 1) // 2].priority <= entry.priority
  assert len({heap.slots[i].value for i in range(n)}) == n
  for value, slot in heap.index.items():
    assert slot is not MISSING
    assert heap.slots[slot].value == value


@pytest.fixture
def heap_invariants():
  return check_heap_invariants
