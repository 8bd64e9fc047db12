from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

import pytest

from indexed_heap.exceptions import DuplicateValueError, EmptyHeapError, ValueNotFoundError
from indexed_heap.hash_table import MISSING, HashTable
from indexed_heap.heap import Heap

values = st.integers(min_value=0, max_value=30)
priorities = st.integers(min_value=-50, max_value=50)

operations = st.lists(
  st.one_of(
    st.tuples(st.just('add'), values, priorities),
    st.tuples(st.just('poll')),
    st.tuples(st.just('change'), values, priorities),
  ),
  max_size=200,
)


@settings(max_examples=200, suppress_health_check=[HealthCheck.function_scoped_fixture])
@given(operations)
def test_random_operations_keep_invariants(heap_invariants, ops):
  heap = Heap()
  model = {}
  for op in ops:
    if op[0] == 'add':
      _, value, priority = op
      if value in model:
        with pytest.raises(DuplicateValueError):
          heap.add(value, priority)
      else:
        heap.add(value, priority)
        model[value] = priority
    elif op[0] == 'poll':
      if not model:
        with pytest.raises(EmptyHeapError):
          heap.poll()
      else:
        value = heap.poll()
        assert model[value] == min(model.values())
        del model[value]
    else:
      _, value, priority = op
      if value in model:
        heap.change_priority(value, priority)
        model[value] = priority
      else:
        with pytest.raises(ValueNotFoundError):
          heap.change_priority(value, priority)
    heap_invariants(heap)
    assert heap.size() == len(model)
    for value in range(31):
      assert heap.contains(value) == (value in model)


@given(st.lists(priorities, unique=True, max_size=100))
def test_poll_yields_ascending_priorities(prios):
  heap = Heap()
  for p in prios:
    heap.add(str(p), p)
  assert [int(heap.poll()) for _ in prios] == sorted(prios)


@given(st.lists(st.integers(), unique=True, max_size=60), st.data())
def test_hash_table_removal_in_a_single_chain(keys, data):
  table = HashTable(7, hasher=lambda key: -(2 ** 63))
  for key in keys:
    table.put(key, str(key))
  removed = data.draw(st.lists(st.sampled_from(keys), unique=True) if keys else st.just([]))
  for key in removed:
    assert table.remove(key) == str(key)
    assert table.remove(key) is MISSING
  remaining = [key for key in keys if key not in removed]
  assert table.size() == len(remaining)
  assert sorted(table.keys()) == sorted(remaining)
  for key in remaining:
    assert table.get(key) == str(key)


@given(st.dictionaries(st.integers(), st.integers(), max_size=200))
def test_hash_table_load_factor_bound(mapping):
  table = HashTable()
  for key, value in mapping.items():
    table.put(key, value)
    assert table.load_factor() <= 0.8
  assert dict(table.items()) == mapping
