import numpy as np

from ndassign.dtype import (DType, Kind, complex64, complex128, float32, float64, generic, int8, int16, int32,
                            int64, uint8, uint16, uint32, uint64)
from ndassign.env import DEBUG
from ndassign.errors import UnsafeCastError

# https://numpy.org/doc/stable/reference/generated/numpy.can_cast.html
_SAFE = {
  int8: {int8, int16, int32, int64, float32, float64, complex64, complex128},
  int16: {int16, int32, int64, float32, float64, complex64, complex128},
  int32: {int32, int64, float64, complex128},
  int64: {int64, float64, complex128},
  uint8: {uint8, uint16, uint32, uint64, int16, int32, int64, float32, float64, complex64, complex128},
  uint16: {uint16, uint32, uint64, int32, int64, float32, float64, complex64, complex128},
  uint32: {uint32, uint64, int64, float64, complex128},
  uint64: {uint64, float64, complex128},
  float32: {float32, float64, complex64, complex128},
  float64: {float64, complex128},
  complex64: {complex64, complex128},
  complex128: {complex128},
}
# generic values are boxed, they convert to and from anything
SAFE_CASTS = {src: frozenset(dst | {generic}) for src, dst in _SAFE.items()}
SAFE_CASTS[generic] = frozenset(DType)

# lossy casts allowed within the real family (integers and real floats) or within complex, on top of the safe casts
_FAMILY = {
  Kind.SIGNED: {Kind.SIGNED, Kind.REAL},
  Kind.UNSIGNED: {Kind.UNSIGNED, Kind.SIGNED, Kind.REAL},
  Kind.REAL: {Kind.REAL},
  Kind.COMPLEX: {Kind.COMPLEX},
  Kind.GENERIC: set(Kind),
}
SAME_KIND_CASTS = {
  src: SAFE_CASTS[src] | frozenset(dst for dst in DType if dst.kind in _FAMILY[src.kind]) for src in DType
}


def is_safe_cast(src, dst):
  return dst in SAFE_CASTS[src]

def is_same_kind_cast(src, dst):
  return dst in SAME_KIND_CASTS[src]

def identity(x):
  return x

def cast_return(func, dtype):
  # wrap the real-valued results of `func` as complex numbers of `dtype` with zero imaginary part
  def complex_wrapper(x):
    ret = np.asarray(func(x))
    out = np.empty(ret.shape, dtype=dtype.np_dtype)
    out.real, out.imag = ret, 0
    return out
  return complex_wrapper

def plan(src, dst):
  """Pick the function converting values of dtype `src` into values of dtype `dst`.

  Safe casts are always allowed. Same-kind casts (downcasts such as
  float64 -> float32, int64 -> float32 or complex128 -> complex64) are only
  allowed when `dst` is floating-point. Anything else raises `UnsafeCastError`.
  """
  if is_safe_cast(src, dst):
    fcn = cast_return(identity, dst) if src.is_real and dst.is_complex else identity
  elif dst.is_floating and is_same_kind_cast(src, dst):
    fcn = identity
  else:
    raise UnsafeCastError(f"Input array values cannot be safely cast to the output array data type. "
                          f"Data types: [{src}, {dst}].")
  if DEBUG: print(f"[DEBUG] cast plan {src} -> {dst}: {fcn.__name__}")
  return fcn
