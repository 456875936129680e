import numpy as np

from ndassign.backend.numpy import NPArray
from ndassign.broadcast import broadcast_to
from ndassign.cast import plan
from ndassign.dtype import Kind, min_dtype
from ndassign.env import CHUNK_SIZE, DEBUG
from ndassign.errors import ReadOnlyError
from ndassign.slice import MultiSlice, resolve
from ndassign.utils.array import calculate_indices
from ndassign.utils.math import prod


def slice_assign(x, y, s, strict):
  """Assign values from a broadcasted input array to a view of an output array.

  Parameters
  ----------
  x : NPArray or array-like
      Input values. Scalars become 0-d arrays of the smallest fitting dtype,
      signed for ints assigned into a signed output.
  y : NPArray
      Output array, mutated in place.
  s : MultiSlice or tuple
      One entry per dimension of `y`: `Full()`/`None`, `Index(i)`/int or
      `Range(start, stop, step)`/`slice`.
  strict : bool
      Whether an index or slice exceeding the bounds of `y` raises. When
      false such a selection is empty and nothing is written.

  Returns
  -------
  NPArray
      `y` itself.

  Raises
  ------
  UnsafeCastError
      `x.dtype` cannot be safely (or, for floating-point outputs, same-kind) cast to `y.dtype`.
  DimensionMismatchError
      `len(s) != y.ndim`.
  BoundsExceededError
      In strict mode, `s` exceeds the bounds of `y`.
  BroadcastIncompatibleError
      `x` cannot be broadcast to the shape of the view.
  ReadOnlyError
      `y` is read-only.
  """
  if isinstance(x, int):
    # bare ints prefer a signed dtype when the output is signed
    x = NPArray.scalar(x, min_dtype(x, signed=y.dtype.kind is Kind.SIGNED))
  x = NPArray.asarray(x)
  s = s if isinstance(s, MultiSlice) else MultiSlice(*s)

  fcn = plan(x.dtype, y.dtype)
  view = resolve(y, s, strict, writable=True)
  if view.readonly:
    raise ReadOnlyError(f"Cannot assign to a read-only array {y}")
  x = broadcast_to(x, view.shape)

  if view.buffer is not y.buffer:
    # empty resolution, nothing is selected in y
    if DEBUG: print(f"[DEBUG] slice_assign {x.dtype} -> {y.dtype} {s}: out of bounds, nothing written")
    return y
  n = transfer(x, view, fcn)
  if DEBUG: print(f"[DEBUG] slice_assign {x.dtype} -> {y.dtype} {s}: {n} elements written")
  return y

def transfer(x, y, fcn):
  # x and y share the same shape, y addresses distinct elements and x may hold zero strides
  assert x.shape == y.shape, f"Invalid transfer {x.shape} -> {y.shape}"
  size = prod(y.shape)
  src = x.buffer
  if size and np.may_share_memory(src, y.buffer):
    # NOTE: overlapping assignment reads the input values as they were before the call
    src = src.copy()
  for start in range(0, size, CHUNK_SIZE):
    flat = np.arange(start, min(start + CHUNK_SIZE, size), dtype=np.intp)
    x_idx = calculate_indices(x.shape, x.strides, x.offset, flat)
    y_idx = calculate_indices(y.shape, y.strides, y.offset, flat)
    y.buffer[y_idx] = fcn(src[x_idx])
  return size
