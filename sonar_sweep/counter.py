"""Counts strict increases in a sequence of integers."""
from typing import Iterator, Sequence


def count_increases(iterator: Iterator[int]) -> int:
  """Counts adjacent pairs where the later value is strictly greater."""
  try:
    previous = next(iterator)
  except StopIteration:
    return 0
  count = 0
  for value in iterator:
    if value > previous:
      count += 1
    previous = value
  return count


def count_lagged_increases(measurements: Sequence[int], lag: int) -> int:
  """Counts i such that measurements[i] > measurements[i - lag].

  Two adjacent windows of width w share all but one element on each end, so
  with lag == w this equals the number of increasing window sums.
  """
  if lag <= 0:
    raise ValueError(f'Lag must be positive, got {lag}.')
  count = 0
  for i in range(lag, len(measurements)):
    if measurements[i] > measurements[i - lag]:
      count += 1
  return count
