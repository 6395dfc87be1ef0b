"""Integer iterators over a measurement list."""
import abc
from typing import Sequence


class IntIterator(abc.ABC):
  """Produces integers one at a time until exhausted.

  Iterators are single pass. Once `__next__` raises StopIteration it keeps
  raising it.
  """

  def __iter__(self):
    return self

  @abc.abstractmethod
  def __next__(self) -> int:
    pass


class DirectIterator(IntIterator):
  """Walks the measurements in order."""

  def __init__(self, measurements: Sequence[int]):
    self._measurements = measurements
    self._position = 0

  def __next__(self) -> int:
    if self._position >= len(self._measurements):
      raise StopIteration
    value = int(self._measurements[self._position])
    self._position += 1
    return value


class WindowedSumIterator(IntIterator):
  """Produces the sums of each `width` consecutive measurements.

  The first sum is computed directly. Every later sum is derived from the
  previous one by dropping the element leaving the window and adding the one
  entering it, so each step costs the same whatever the width.
  """

  def __init__(self, measurements: Sequence[int], width: int = 3):
    if width <= 0:
      raise ValueError(f'Window width must be positive, got {width}.')
    self._measurements = measurements
    self._width = width
    # 0 until the first window has been summed.
    self._position = 0
    self._sum = 0

  def _first_window(self) -> int:
    if len(self._measurements) < self._width:
      self._position = len(self._measurements)
      raise StopIteration
    self._sum = sum(int(x) for x in self._measurements[:self._width])
    self._position = self._width
    return self._sum

  def __next__(self) -> int:
    if self._position == 0:
      return self._first_window()
    if self._position >= len(self._measurements):
      raise StopIteration
    leaving = int(self._measurements[self._position - self._width])
    entering = int(self._measurements[self._position])
    self._sum += entering - leaving
    self._position += 1
    return self._sum
