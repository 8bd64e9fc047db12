class HeapError(Exception):
  def __init__(self, error_message: str):
    super().__init__(error_message)
    self.error_message = error_message

  def __str__(self):
    return self.error_message


class DuplicateValueError(HeapError, ValueError):
  pass


class EmptyHeapError(HeapError, IndexError):
  pass


class ValueNotFoundError(HeapError, KeyError):
  pass
