from ndassign.broadcast import broadcast_shapes, broadcast_to
from ndassign.dtype import float64
from ndassign.utils.math import prod


class Array:
  def __init__(self, shape=None, dtype=float64, order="row-major"):
    assert order in ("row-major", "column-major"), f"Invalid order {order}"
    self.shape = None if shape is None else tuple(int(s) for s in shape)
    self.dtype, self.order = dtype, order

  def __repr__(self):
    clsname = self.__class__.__name__
    if self.readonly: clsname = "ReadOnly" + clsname
    return (f"<{clsname} dtype={self.dtype} shape={self.shape} strides={self.strides} offset={self.offset}>")

  @property
  def size(self):
    return prod(self.shape)

  @property
  def ndim(self):
    return len(self.shape)

  def __len__(self):
    assert self.shape, "Error getting length of a 0-d array"
    return self.shape[0]

  @classmethod
  def asarray(cls, obj): raise NotImplementedError

  def numpy(self):
    raise NotImplementedError

  @staticmethod
  def broadcast(*arrs):
    # https://numpy.org/doc/stable/user/basics.broadcasting.html
    shape = broadcast_shapes(*[arr.shape for arr in arrs])
    return [arr if arr.shape == shape else broadcast_to(arr, shape) for arr in arrs]

  # ##### Element Access #####
  def get(self, *idx): raise NotImplementedError
  def set(self, *args): raise NotImplementedError
  def iget(self, i): raise NotImplementedError

  # ##### Slice Ops #####
  def __getitem__(self, key): raise NotImplementedError
  def __setitem__(self, key, value): raise NotImplementedError

  # #### Creation Ops #####
  @classmethod
  def empty(cls, shape, dtype=float64, order="row-major"): raise NotImplementedError
  @classmethod
  def zeros(cls, shape, dtype=float64, order="row-major"): raise NotImplementedError
  @classmethod
  def full(cls, shape, value, dtype=float64, order="row-major"): raise NotImplementedError
  @classmethod
  def scalar(cls, value, dtype=None): raise NotImplementedError
