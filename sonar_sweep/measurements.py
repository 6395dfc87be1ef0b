"""Loads sonar sweep depth measurements, one integer per line."""
import re
from typing import Iterable

import numpy as np

_INTEGER_RE = re.compile(r'[+-]?[0-9]+')
_INT64 = np.iinfo(np.int64)


class MeasurementParseError(ValueError):
  """Raised when an input line is not a base-10 integer."""

  def __init__(self, line_number: int, line: str):
    super().__init__(f'Line {line_number} is not an integer: {line!r}')
    self.line_number = line_number
    self.line = line


def parse_measurements(lines: Iterable[str]) -> np.ndarray:
  """Parses lines of text into a read-only array of measurements.

  Args:
    lines: lines of text, with or without their line terminators.

  Returns:
    1-D int64 array in input order. The array is not writeable.

  Raises:
    MeasurementParseError: if a line (blank ones included) is not an integer
      or does not fit in int64.
  """
  values = []
  for line_number, line in enumerate(lines, start=1):
    line = line.rstrip('\r\n')
    if not _INTEGER_RE.fullmatch(line):
      raise MeasurementParseError(line_number, line)
    value = int(line)
    if not _INT64.min <= value <= _INT64.max:
      raise MeasurementParseError(line_number, line)
    values.append(value)
  measurements = np.array(values, dtype=np.int64)
  measurements.setflags(write=False)
  return measurements


def load_measurements(input_file: str) -> np.ndarray:
  """Reads measurements from `input_file`.

  Raises:
    OSError: if the file cannot be opened or read.
    MeasurementParseError: if a line is not an integer.
  """
  with open(input_file, 'r') as f:
    return parse_measurements(f)
