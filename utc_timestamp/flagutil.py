from typing import TypeVar

from absl import flags

_T = TypeVar('_T')


def value_or_default(flag_holder: flags.FlagHolder[_T]) -> _T:
  """Reads a flag without requiring the command line to be parsed, e.g. from tests that set a few flags only."""
  if flag_holder.present:
    return flag_holder.value
  return flag_holder.default
