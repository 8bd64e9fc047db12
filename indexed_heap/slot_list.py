from typing import Any, Iterable, List, MutableSequence, Optional


class SlotList(MutableSequence[Any]):
  """
  Growable array whose slots 0..len-1 are always occupied. Elements only
  enter at the end (append) and only leave from the end (shrink).
  """

  def __init__(self, items: Optional[Iterable[Any]] = None):
    self.v: List[Any] = list(items) if items is not None else []

  def __setitem__(self, i: int, value: Any) -> None:
    self.v[i] = value

  def __getitem__(self, i: int) -> Any:
    return self.v[i]

  def __delitem__(self, i: int) -> None:
    if i not in (-1, len(self.v) - 1):
      raise IndexError(f"Only the last slot can be deleted, not {i}")
    del self.v[i]

  def __len__(self):
    return len(self.v)

  def insert(self, index: int, value: Any) -> None:
    if index != len(self.v):
      raise IndexError(f"Slots can only be added at the end ({len(self.v)}), not at {index}")
    self.v.append(value)

  def shrink(self) -> Any:
    if not self.v:
      raise IndexError("shrink from empty SlotList")
    return self.v.pop()
