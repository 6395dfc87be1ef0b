"""Counts depth increases in a sonar sweep report.

Usage:
  python -m sonar_sweep.sweep --input=input.txt
"""
from typing import Tuple

from absl import app
from absl import flags
from absl import logging
import ml_collections

from sonar_sweep import config as config_lib
from sonar_sweep import counter
from sonar_sweep import iterators
from sonar_sweep import measurements as measurements_lib

FLAGS = flags.FLAGS

flags.DEFINE_string('input', config_lib.DEFAULT_INPUT_FILE, 'The input file.')


def solve(config: ml_collections.ConfigDict) -> Tuple[int, int]:
  """Loads `config.input_file` and returns the (part 1, part 2) counts."""
  measurements = measurements_lib.load_measurements(config.input_file)
  logging.info('Loaded %d measurements from %s', len(measurements),
               config.input_file)
  part1 = counter.count_increases(iterators.DirectIterator(measurements))
  windowed = iterators.WindowedSumIterator(measurements, config.window_width)
  part2 = counter.count_increases(windowed)
  logging.vlog(1, 'Window width %d: part 1 = %d, part 2 = %d',
               config.window_width, part1, part2)
  return part1, part2


def main(argv):
  if len(argv) > 1:
    raise app.UsageError('Too many command-line arguments.')
  config = config_lib.get_config()
  config.input_file = FLAGS.input
  try:
    part1, part2 = solve(config)
  except (OSError, measurements_lib.MeasurementParseError) as e:
    logging.error('Could not load measurements from %s: %s',
                  config.input_file, e)
    raise
  print(f'Part 1: {part1}')
  print(f'Part 2: {part2}')


def run():
  app.run(main)


if __name__ == '__main__':
  run()
