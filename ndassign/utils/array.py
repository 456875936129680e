import numpy as np

from ndassign.utils.math import ceildiv, prod


def calculate_strides(shape, order="row-major"):
  # contiguous strides in element units
  assert order in ("row-major", "column-major"), f"Invalid order {order}"
  if order == "row-major":
    return tuple(prod(shape[i+1:]) for i in range(len(shape)))
  return tuple(prod(shape[:i]) for i in range(len(shape)))

def calculate_contiguity(shape, strides):
  # https://github.com/numpy/numpy/blob/93a97649aa0aefc0ee8ee5fc7cb78063bfe67255/numpy/core/src/multiarray/flagsobject.c#L115
  assert len(shape) == len(strides)
  ndim = len(shape)
  c_contiguous = f_contiguous = True
  if ndim:
    nitems = 1
    for i in range(ndim-1, -1, -1):
      if shape[i] == 0:
        return True, True
      if shape[i] != 1:
        if strides[i] != nitems:
          c_contiguous = False
        nitems *= shape[i]
    nitems = 1
    for i in range(ndim):
      if shape[i] != 1:
        if strides[i] != nitems:
          f_contiguous = False
        nitems *= shape[i]
  return c_contiguous, f_contiguous

def calculate_slices(start, stop, step, length):
  # https://github.com/python/cpython/blob/d034590294d4618880375a6db513c30bce3e126b/Objects/sliceobject.c#L264
  # NOTE: bounds are not clamped. `exceeded` is set when a normalized bound falls outside the axis,
  # -1 stands for "before the first element" when iterating backwards
  if step is None: step = 1
  assert step != 0, "Slice step cannot be zero"
  lo, hi = (0, length) if step > 0 else (-1, length-1)
  if start is None: start = lo if step > 0 else hi
  elif start < 0: start += length
  if stop is None: stop = hi if step > 0 else lo
  elif stop < 0: stop += length

  exceeded = not (lo <= start <= hi and lo <= stop <= hi)
  size = 0 if exceeded else max(0, ceildiv(stop - start, step))
  return start, stop, step, size, exceeded

def calculate_indices(shape, strides, offset, flat):
  # decompose row-major linear indices `flat` into per-axis coordinates (mixed radix),
  # then map the coordinates to buffer addresses
  assert len(shape) == len(strides)
  ptr = np.asarray(flat, dtype=np.intp)
  ret = np.full(ptr.shape, offset, dtype=np.intp)
  for res_s, s in zip(calculate_strides(shape), strides):
    idx, ptr = ptr // res_s, ptr % res_s
    ret += idx * s
  return ret
