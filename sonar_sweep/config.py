"""Default configuration for a sonar sweep run."""
import ml_collections

DEFAULT_INPUT_FILE = 'input.txt'


def get_config() -> ml_collections.ConfigDict:
  config = ml_collections.ConfigDict()
  config.input_file = DEFAULT_INPUT_FILE
  config.window_width = 3
  return config
