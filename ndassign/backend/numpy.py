import numpy as np

from ndassign.backend.base import Array
from ndassign.dtype import DType, float64, min_dtype
from ndassign.errors import BoundsExceededError, DimensionMismatchError, ReadOnlyError
from ndassign.utils.array import calculate_contiguity, calculate_indices, calculate_strides
from ndassign.utils.math import prod


class NPArray(Array):
  """Strided array over a flat, shared numpy buffer.

  `strides` and `offset` are in element units. Several arrays may share one
  buffer; views produced by slicing or broadcasting never copy it.
  """

  def __init__(self, data=None, shape=None, dtype=float64, buffer=None, strides=None, offset=0,
               order="row-major", readonly=False):
    dtype = dtype if isinstance(dtype, DType) else DType(dtype)
    super().__init__(shape, dtype, order)
    if buffer is not None:
      assert self.shape is not None, "Must specify shape when initializing array with raw buffer"
      assert isinstance(buffer, np.ndarray) and buffer.ndim == 1, "Buffer must be a 1-d numpy array"
      assert buffer.dtype == dtype.np_dtype, f"Buffer dtype {buffer.dtype} does not match {dtype}"
    else:
      if data is not None:
        data = np.asarray(data, dtype=dtype.np_dtype)
        self.shape = data.shape
        buffer = data.flatten(order="C" if order == "row-major" else "F")
      else:
        assert self.shape is not None, "Array shape is None!"
        buffer = np.zeros(prod(self.shape), dtype=dtype.np_dtype)
    self.__buffer = buffer
    # meta infos (https://numpy.org/doc/stable/dev/internals.html#numpy-internals)
    self.strides = calculate_strides(self.shape, order) if strides is None else tuple(int(s) for s in strides)
    assert len(self.strides) == len(self.shape), f"Strides {self.strides} do not match shape {self.shape}"
    self.offset = int(offset)  # offset relative to the beginning of the buffer
    self.c_contiguous, self.f_contiguous = calculate_contiguity(self.shape, self.strides)
    self.readonly = readonly

  @property
  def buffer(self):
    return self.__buffer

  @classmethod
  def asarray(cls, obj):
    if isinstance(obj, cls):
      return obj
    if isinstance(obj, (bool, np.bool_, int, float, complex)):
      return cls.scalar(obj)
    if isinstance(obj, np.generic):
      return cls.scalar(obj.item(), DType.from_numpy(obj.dtype))
    obj = np.asarray(obj)
    return cls(obj, dtype=DType.from_numpy(obj.dtype))

  def numpy(self):
    if not self.size:
      return np.empty(self.shape, dtype=self.dtype.np_dtype)
    if self.c_contiguous:
      return self.buffer[self.offset:self.offset+self.size].reshape(self.shape).copy()
    idx = calculate_indices(self.shape, self.strides, self.offset, np.arange(self.size))
    return self.buffer[idx].reshape(self.shape)

  def tolist(self):
    return self.numpy().tolist()

  # ##### Element Access #####
  def _address(self, idx):
    if len(idx) != self.ndim:
      raise DimensionMismatchError(f"Expected {self.ndim} indices, got {len(idx)}")
    ptr = self.offset
    for i, (k, n, s) in enumerate(zip(idx, self.shape, self.strides)):
      if k < 0: k += n
      if not 0 <= k < n:
        raise BoundsExceededError(f"Index {idx[i]} is out of bounds for axis {i} with size {n}")
      ptr += k * s
    return ptr

  def get(self, *idx):
    return self.buffer[self._address(idx)]

  def set(self, *args):
    *idx, value = args
    if self.readonly:
      raise ReadOnlyError("Cannot write to a read-only array")
    self.buffer[self._address(idx)] = value
    return self

  def iget(self, i):
    # linear index in row-major order, regardless of the memory layout
    if i < 0: i += self.size
    if not 0 <= i < self.size:
      raise BoundsExceededError(f"Linear index {i} is out of bounds for array with size {self.size}")
    return self.buffer[calculate_indices(self.shape, self.strides, self.offset, np.array([i]))[0]]

  # ##### Slice Ops #####
  def __getitem__(self, key):
    from ndassign.slice import MultiSlice, resolve
    return resolve(self, MultiSlice.from_key(key, self.ndim), strict=True, writable=False)

  def __setitem__(self, key, value):
    from ndassign.assign import slice_assign
    from ndassign.slice import MultiSlice
    slice_assign(value, self, MultiSlice.from_key(key, self.ndim), strict=True)

  # ##### Creation Ops #####
  @classmethod
  def empty(cls, shape, dtype=float64, order="row-major"):
    dtype = dtype if isinstance(dtype, DType) else DType(dtype)
    return cls(shape=shape, dtype=dtype, buffer=np.empty(prod(shape), dtype=dtype.np_dtype), order=order)

  @classmethod
  def zeros(cls, shape, dtype=float64, order="row-major"):
    return cls(shape=shape, dtype=dtype, order=order)

  @classmethod
  def full(cls, shape, value, dtype=float64, order="row-major"):
    inst = cls(shape=shape, dtype=dtype, order=order)
    inst.buffer.fill(value)
    return inst

  @classmethod
  def scalar(cls, value, dtype=None):
    dtype = min_dtype(value) if dtype is None else dtype
    return cls.full((), value, dtype=dtype)
