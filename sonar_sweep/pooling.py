"""Window sums computed by convolution, for checking the incremental ones."""
from typing import Sequence

import jax
import jax.numpy as jnp
import numpy as np

# Window sums are exact int64.
jax.config.update('jax_enable_x64', True)


def convolved_window_sums(measurements: Sequence[int],
                          width: int = 3) -> jnp.ndarray:
  """Sums every `width` consecutive measurements from scratch."""
  if width <= 0:
    raise ValueError(f'Window width must be positive, got {width}.')
  if len(measurements) < width:
    return jnp.zeros((0,), dtype=jnp.int64)
  x = jnp.asarray(np.asarray(measurements, dtype=np.int64))
  kernel = jnp.ones((width,), dtype=jnp.int64)
  return jnp.convolve(x, kernel, mode='valid')


def count_convolved_increases(measurements: Sequence[int],
                              width: int = 3) -> int:
  """Counts strictly increasing window sums, using `convolved_window_sums`."""
  summed = convolved_window_sums(measurements, width)
  # subtract each sum from the one following it
  diff = jnp.diff(summed)
  greater = diff > 0
  return int(jnp.sum(greater))
