from absl.testing import absltest
from absl.testing import parameterized
import numpy as np

from sonar_sweep import counter
from sonar_sweep import iterators

EXAMPLE = [199, 200, 208, 210, 200, 207, 240, 269, 260, 263]


class CountIncreasesTest(parameterized.TestCase):

  @parameterized.named_parameters(
      ('example', EXAMPLE, 7, 5),
      ('decreasing', [5, 4, 3, 2, 1], 0, 0),
      ('too_short_for_window', [1, 2], 1, 0),
      ('flat', [3, 3, 3, 3, 3], 0, 0),
      ('empty', [], 0, 0),
  )
  def test_direct_and_windowed(self, values, expected_direct,
                               expected_windowed):
    direct = counter.count_increases(iterators.DirectIterator(values))
    windowed = counter.count_increases(
        iterators.WindowedSumIterator(values, 3))
    self.assertEqual(direct, expected_direct)
    self.assertEqual(windowed, expected_windowed)

  @parameterized.parameters([[]], [[42]])
  def test_zero_or_one_value(self, values):
    self.assertEqual(counter.count_increases(iter(values)), 0)

  def test_equal_values_do_not_count(self):
    self.assertEqual(counter.count_increases(iter([1, 1, 2, 2, 1])), 1)

  def test_same_sequence_counts_the_same(self):
    sums = list(iterators.WindowedSumIterator(EXAMPLE, 3))
    self.assertEqual(counter.count_increases(iter(sums)),
                     counter.count_increases(iter(sums)))

  def test_windowed_matches_recomputed_sums(self):
    rng_state = np.random.RandomState(8802)
    for _ in range(50):
      values = rng_state.randint(100, 400, size=rng_state.randint(0, 40))
      recomputed = [int(np.sum(values[i:i + 3]))
                    for i in range(len(values) - 2)]
      self.assertEqual(
          counter.count_increases(iterators.WindowedSumIterator(values, 3)),
          counter.count_increases(iter(recomputed)),
          f'Counts differ for input {values.tolist()}.')


class CountLaggedIncreasesTest(parameterized.TestCase):

  def test_example(self):
    self.assertEqual(counter.count_lagged_increases(EXAMPLE, 1), 7)
    self.assertEqual(counter.count_lagged_increases(EXAMPLE, 3), 5)

  def test_shorter_than_lag(self):
    self.assertEqual(counter.count_lagged_increases([1, 2], 3), 0)

  @parameterized.parameters(0, -2)
  def test_rejects_non_positive_lag(self, lag):
    with self.assertRaises(ValueError):
      counter.count_lagged_increases(EXAMPLE, lag)

  @parameterized.parameters(1, 2, 3, 4)
  def test_matches_windowed_count(self, width):
    rng_state = np.random.RandomState(width)
    for _ in range(20):
      values = rng_state.randint(0, 50, size=rng_state.randint(0, 25))
      self.assertEqual(
          counter.count_lagged_increases(values, width),
          counter.count_increases(
              iterators.WindowedSumIterator(values, width)))


if __name__ == '__main__':
  absltest.main()
