from enum import Enum

import numpy as np

Kind = Enum("Kind", ["SIGNED", "UNSIGNED", "REAL", "COMPLEX", "GENERIC"])


class DType(Enum):
  INT8 = "int8"
  INT16 = "int16"
  INT32 = "int32"
  INT64 = "int64"
  UINT8 = "uint8"
  UINT16 = "uint16"
  UINT32 = "uint32"
  UINT64 = "uint64"
  FLOAT32 = "float32"
  FLOAT64 = "float64"
  COMPLEX64 = "complex64"
  COMPLEX128 = "complex128"
  GENERIC = "generic"

  def __repr__(self):
    return f"<DType {self.value}>"

  def __str__(self):
    return self.value

  @property
  def np_dtype(self):
    return np.dtype(object) if self is DType.GENERIC else np.dtype(self.value)

  @property
  def kind(self):
    return KINDS[self]

  @property
  def itemsize(self):
    return self.np_dtype.itemsize

  @property
  def is_real(self):
    return self.kind in (Kind.SIGNED, Kind.UNSIGNED, Kind.REAL)

  @property
  def is_complex(self):
    return self.kind is Kind.COMPLEX

  @property
  def is_floating(self):
    return self.kind in (Kind.REAL, Kind.COMPLEX)

  @classmethod
  def from_numpy(cls, dtype):
    dtype = np.dtype(dtype)
    if dtype == np.dtype(object):
      return cls.GENERIC
    try:
      return cls(dtype.name)
    except ValueError:
      raise TypeError(f"numpy dtype {dtype} not supported") from None


KINDS = {
  DType.INT8: Kind.SIGNED, DType.INT16: Kind.SIGNED, DType.INT32: Kind.SIGNED, DType.INT64: Kind.SIGNED,
  DType.UINT8: Kind.UNSIGNED, DType.UINT16: Kind.UNSIGNED, DType.UINT32: Kind.UNSIGNED,
  DType.UINT64: Kind.UNSIGNED, DType.FLOAT32: Kind.REAL, DType.FLOAT64: Kind.REAL,
  DType.COMPLEX64: Kind.COMPLEX, DType.COMPLEX128: Kind.COMPLEX, DType.GENERIC: Kind.GENERIC,
}

int8, int16, int32, int64 = DType.INT8, DType.INT16, DType.INT32, DType.INT64
uint8, uint16, uint32, uint64 = DType.UINT8, DType.UINT16, DType.UINT32, DType.UINT64
float32, float64 = DType.FLOAT32, DType.FLOAT64
complex64, complex128 = DType.COMPLEX64, DType.COMPLEX128
generic = DType.GENERIC

def min_dtype(value, signed=False):
  """Smallest dtype able to represent a Python scalar.

  Non-negative integers map to unsigned dtypes unless `signed` is set.
  """
  if isinstance(value, (bool, np.bool_)):
    value = int(value)
  if isinstance(value, (int, np.integer)):
    value = int(value)
    candidates = (uint8, uint16, uint32, uint64) if value >= 0 and not signed else (int8, int16, int32, int64)
    for dtype in candidates:
      info = np.iinfo(dtype.np_dtype)
      if info.min <= value <= info.max:
        return dtype
    return float64
  if isinstance(value, (float, np.floating)):
    return float64
  if isinstance(value, (complex, np.complexfloating)):
    return complex128
  return generic
