from absl import flags

# absltest parses flags in absltest.main(); under pytest nothing does.
flags.FLAGS.mark_as_parsed()
