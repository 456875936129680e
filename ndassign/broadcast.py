import copy

from ndassign.env import DEBUG
from ndassign.errors import BroadcastIncompatibleError
from ndassign.utils.array import calculate_contiguity


def broadcast_shapes(*shapes):
  # https://numpy.org/doc/stable/user/basics.broadcasting.html
  ndim = max((len(shape) for shape in shapes), default=0)
  padded = [(1,) * (ndim - len(shape)) + tuple(shape) for shape in shapes]
  ret = []
  for i, dims in enumerate(zip(*padded)):
    unique = set(dims) - {1}
    if len(unique) > 1:
      raise BroadcastIncompatibleError(f"Shapes {', '.join(map(str, shapes))} cannot be broadcast together "
                                       f"(mismatch at dimension {i}).")
    ret.append(unique.pop() if unique else 1)
  return tuple(ret)

def broadcast_to(x, shape):
  """Expand `x` to `shape` without copying.

  Dimensions are aligned from the right, missing leading dimensions count as
  size 1. Every expanded dimension gets stride 0 so the same element is read
  for each position along it.
  """
  shape = tuple(shape)
  lead = len(shape) - x.ndim
  if lead < 0:
    raise BroadcastIncompatibleError(f"Input array cannot be broadcast to the output array view shape. "
                                     f"Array shape: {x.shape}. Desired shape: {shape}.")
  strides = [0] * lead
  for i, (s1, s2) in enumerate(zip(x.shape, shape[lead:])):
    if s1 == s2:
      strides.append(x.strides[i])
    elif s1 == 1:
      strides.append(0)
    else:
      raise BroadcastIncompatibleError(f"Input array cannot be broadcast to the output array view shape. "
                                       f"Array shape: {x.shape}. Desired shape: {shape}. "
                                       f"Dimension {lead+i}: {s1} vs {s2}.")
  inst = copy.copy(x)
  inst.shape, inst.strides = shape, tuple(strides)
  inst.c_contiguous, inst.f_contiguous = calculate_contiguity(inst.shape, inst.strides)
  inst.readonly = True  # elements are shared along expanded dimensions
  if DEBUG: print(f"[DEBUG] broadcast {x.shape} -> {inst.shape}: strides={inst.strides} offset={inst.offset}")
  return inst
