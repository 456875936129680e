__all__ = [
  "BoundsExceededError",
  "BroadcastIncompatibleError",
  "DimensionMismatchError",
  "NDAssignError",
  "ReadOnlyError",
  "UnsafeCastError",
]


class NDAssignError(Exception):
  """Base error which all ndassign errors are sub-classed from."""


class DimensionMismatchError(NDAssignError, IndexError):
  """Raised when the number of slice entries differs from the array rank."""


class BoundsExceededError(NDAssignError, IndexError):
  """Raised in strict mode when an index or slice exceeds an axis extent."""


class BroadcastIncompatibleError(NDAssignError, ValueError):
  """Raised when a shape cannot be broadcast to a target shape."""


class UnsafeCastError(NDAssignError, TypeError):
  """Raised when values of one dtype cannot be safely cast to another."""


class ReadOnlyError(NDAssignError, ValueError):
  """Raised when assigning into a read-only array view."""
