"""
Chained hash table used as the position index of the heap.

Keys are spread over a bucket array by `abs(hash) % capacity`; colliding
keys share a singly linked chain of `Pair` nodes, newest first. The bucket
array doubles and everything is rehashed whenever the load factor goes
above `MAX_LOAD_FACTOR`.
"""

from typing import Any, Callable, Iterator, List, Optional, Tuple

from indexed_heap.logger import logger

DEFAULT_CAPACITY = 17
MAX_LOAD_FACTOR = 0.8


class _Missing:
  def __repr__(self):
    return '<MISSING>'

  def __bool__(self):
    return False


# Returned by lookups on absent keys; never a storable value.
MISSING = _Missing()


class Pair:
  __slots__ = ('key', 'value', 'next')

  def __init__(self, key: Any, value: Any, next: Optional['Pair'] = None):
    self.key = key
    self.value = value
    self.next = next

  def __str__(self):
    return f"({self.key}, {self.value})"


class HashTable:
  def __init__(self, capacity: int = DEFAULT_CAPACITY, hasher: Callable[[Any], int] = hash):
    if capacity < 1:
      raise ValueError(f"Invalid hash table capacity: {capacity}")
    self._hasher = hasher
    self._buckets: List[Optional[Pair]] = [None] * capacity
    self._size = 0

  def __len__(self):
    return self._size

  def __contains__(self, key: Any) -> bool:
    return self.contains_key(key)

  def __iter__(self) -> Iterator[Any]:
    return self.keys()

  def size(self) -> int:
    return self._size

  def capacity(self) -> int:
    return len(self._buckets)

  def load_factor(self) -> float:
    return self._size / len(self._buckets)

  def _bucket_of(self, key: Any, capacity: int) -> int:
    return abs(self._hasher(key)) % capacity

  def _find(self, key: Any) -> Optional[Pair]:
    node = self._buckets[self._bucket_of(key, len(self._buckets))]
    while node is not None:
      if node.key == key:
        return node
      node = node.next
    return None

  def get(self, key: Any, default: Any = MISSING) -> Any:
    node = self._find(key)
    return default if node is None else node.value

  def contains_key(self, key: Any) -> bool:
    return self._find(key) is not None

  def put(self, key: Any, value: Any) -> Any:
    """
    Map key to value, returning the value it replaces or MISSING.
    A new key may trigger a resize.
    """
    if value is MISSING:
      raise ValueError("MISSING cannot be stored in a hash table")
    bucket = self._bucket_of(key, len(self._buckets))
    node = self._buckets[bucket]
    while node is not None:
      if node.key == key:
        previous = node.value
        node.value = value
        return previous
      node = node.next
    self._buckets[bucket] = Pair(key, value, self._buckets[bucket])
    self._size += 1
    self._grow_if_needed()
    return MISSING

  def remove(self, key: Any) -> Any:
    bucket = self._bucket_of(key, len(self._buckets))
    previous = None
    node = self._buckets[bucket]
    while node is not None and node.key != key:
      previous = node
      node = node.next
    if node is None:
      return MISSING
    if previous is None:
      self._buckets[bucket] = node.next
    else:
      previous.next = node.next
    self._size -= 1
    return node.value

  def _grow_if_needed(self) -> None:
    if self._size / len(self._buckets) <= MAX_LOAD_FACTOR:
      return
    old_buckets = self._buckets
    new_capacity = 2 * len(old_buckets)
    new_buckets: List[Optional[Pair]] = [None] * new_capacity
    for head in old_buckets:
      node = head
      while node is not None:
        following = node.next
        bucket = self._bucket_of(node.key, new_capacity)
        node.next = new_buckets[bucket]
        new_buckets[bucket] = node
        node = following
    self._buckets = new_buckets
    logger().debug(f"Hash table grown from {len(old_buckets)} to {new_capacity} buckets ({self._size} keys)")

  def keys(self) -> Iterator[Any]:
    for key, _ in self.items():
      yield key

  def items(self) -> Iterator[Tuple[Any, Any]]:
    for head in self._buckets:
      node = head
      while node is not None:
        yield node.key, node.value
        node = node.next

  def dump(self, logger=None) -> None:
    _print = logger.info if logger else print
    _print(f"Table size: {self._size} capacity: {len(self._buckets)}")
    for i, head in enumerate(self._buckets):
      line = f"{i}: --"
      node = head
      while node is not None:
        line += f">{node}--"
        node = node.next
      _print(line + "|")
