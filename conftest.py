"""pytest hooks for running the absltest suites."""

from absl import flags


def pytest_configure(config):
	# absltest reads --test_tmpdir and friends; pytest never parses absl flags.
	flags.FLAGS.mark_as_parsed()
