from dataclasses import dataclass
from typing import Any

from indexed_heap.exceptions import DuplicateValueError, EmptyHeapError, ValueNotFoundError
from indexed_heap.hash_table import DEFAULT_CAPACITY, MISSING, HashTable
from indexed_heap.slot_list import SlotList


@dataclass
class Entry:
  value: Any
  priority: Any

  def __str__(self):
    return str(self.value)


class Heap:
  """
  Min-heap of distinct values. Slot 0 holds the value with the smallest
  priority; slot i has children 2i+1 and 2i+2.

  Besides the heap order, the position index maps every value to the slot
  it occupies, so index.get(slots[i].value) == i for every i and
  len(index) == len(slots).
  """

  def __init__(self, index_capacity: int = DEFAULT_CAPACITY):
    self.slots = SlotList()
    self.index = HashTable(index_capacity)

  def __len__(self):
    return len(self.slots)

  def __contains__(self, value: Any) -> bool:
    return self.contains(value)

  def size(self) -> int:
    return len(self.slots)

  def add(self, value: Any, priority: Any) -> None:
    """Add value with the given priority. Raises DuplicateValueError if value is already present."""
    if self.index.contains_key(value):
      raise DuplicateValueError(f"Value already in heap: {value}")
    self.slots.append(Entry(value, priority))
    self.index.put(value, len(self.slots) - 1)
    self._bubble_up(len(self.slots) - 1)

  def peek(self) -> Any:
    if not self.slots:
      raise EmptyHeapError("peek from empty heap")
    return self.slots[0].value

  def poll(self) -> Any:
    """Remove and return the value with the smallest priority."""
    minimum = self.peek()
    self._swap(0, len(self.slots) - 1)
    self.slots.shrink()
    self.index.remove(minimum)
    self._bubble_down(0)
    return minimum

  def contains(self, value: Any) -> bool:
    return self.index.contains_key(value)

  def slot(self, value: Any) -> int:
    pos = self.index.get(value)
    if pos is MISSING:
      raise ValueNotFoundError(f"Value not in heap: {value}")
    return pos

  def priority(self, value: Any) -> Any:
    return self.slots[self.slot(value)].priority

  def change_priority(self, value: Any, priority: Any) -> None:
    pos = self.slot(value)
    entry = self.slots[pos]
    old_priority = entry.priority
    entry.priority = priority
    if priority > old_priority:
      self._bubble_down(pos)
    else:
      self._bubble_up(pos)

  def _swap(self, h: int, k: int) -> None:
    entry_h = self.slots[h]
    entry_k = self.slots[k]
    self.slots[h] = entry_k
    self.slots[k] = entry_h
    self.index.put(entry_h.value, k)
    self.index.put(entry_k.value, h)

  def _bubble_up(self, k: int) -> None:
    while k > 0:
      parent = (k - 1) // 2
      if not self.slots[k].priority < self.slots[parent].priority:
        break
      self._swap(k, parent)
      k = parent

  def _smaller_child(self, k: int) -> int:
    # Ties go to the right child.
    left = 2 * k + 1
    right = left + 1
    if right >= len(self.slots):
      return left
    if self.slots[left].priority < self.slots[right].priority:
      return left
    return right

  def _bubble_down(self, k: int) -> None:
    while 2 * k + 1 < len(self.slots):
      child = self._smaller_child(k)
      if not self.slots[child].priority < self.slots[k].priority:
        break
      self._swap(k, child)
      k = child

  def dump(self, logger=None) -> None:
    _print = logger.info if logger else print
    _print(f"Heap size: {len(self.slots)}")
    for i, entry in enumerate(self.slots):
      _print(f"{i}: {entry.value} ({entry.priority})")
    self.index.dump(logger)
