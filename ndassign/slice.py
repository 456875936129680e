import copy
from dataclasses import dataclass
from typing import Optional

import numpy as np

from ndassign.env import DEBUG
from ndassign.errors import BoundsExceededError, DimensionMismatchError
from ndassign.utils.array import calculate_contiguity, calculate_slices


@dataclass(frozen=True)
class Full:
  """Selects an entire axis."""


@dataclass(frozen=True)
class Index:
  """Selects a single element along an axis and removes the axis."""
  index: int


@dataclass(frozen=True)
class Range:
  start: Optional[int] = None
  stop: Optional[int] = None
  step: int = 1

  def __post_init__(self):
    if self.step is None:
      object.__setattr__(self, "step", 1)
    if self.step == 0:
      raise ValueError("Range step cannot be zero")


def as_entry(k):
  if k is None: return Full()
  if isinstance(k, (Full, Index, Range)): return k
  if isinstance(k, slice): return Range(k.start, k.stop, k.step)
  if isinstance(k, (int, np.integer)) and not isinstance(k, (bool, np.bool_)): return Index(int(k))
  raise TypeError(f"Advanced indexing not supported yet. {k!r}")


class MultiSlice:
  def __init__(self, *entries):
    self.entries = tuple(as_entry(k) for k in entries)

  def __len__(self):
    return len(self.entries)

  def __iter__(self):
    return iter(self.entries)

  def __getitem__(self, i):
    return self.entries[i]

  def __eq__(self, other):
    return isinstance(other, MultiSlice) and self.entries == other.entries

  def __hash__(self):
    return hash(self.entries)

  def __repr__(self):
    return f"MultiSlice({', '.join(repr(k) for k in self.entries)})"

  @classmethod
  def from_key(cls, key, ndim):
    """Build a multi-slice from a `__getitem__`/`__setitem__` key.

    A single `...` expands to as many `Full()` entries as needed, and keys
    shorter than `ndim` are padded with trailing `Full()` entries. Longer keys
    are kept as is so that resolution reports the mismatch.
    """
    if isinstance(key, cls):
      return key
    key = key if isinstance(key, tuple) else (key,)
    n_ellipsis = sum(k is Ellipsis for k in key)
    if n_ellipsis > 1:
      raise IndexError("An index can only have a single ellipsis ('...')")
    if n_ellipsis:
      i = next(i for i, k in enumerate(key) if k is Ellipsis)
      fill = (Full(),) * max(ndim - len(key) + 1, 0)
      key = key[:i] + fill + key[i+1:]
    if len(key) < ndim:
      key = key + (Full(),) * (ndim - len(key))
    return cls(*key)


def resolve(x, s, strict, writable):
  """Resolve the multi-slice `s` into a view over the storage of `x`.

  The view shares the buffer of `x`. Integer indices remove their axis and
  only move the offset. When `strict` is false, an index or range exceeding
  an axis does not raise and the resolution is empty: the result is then a
  placeholder detached from `x` whose shape is the selection clamped to the
  bounds of `x` (out-of-bounds indices still remove their axis). It has zero
  strides over a single scratch element and must not be written through.
  """
  s = s if isinstance(s, MultiSlice) else MultiSlice(*s)
  if len(s) != x.ndim:
    raise DimensionMismatchError(
      f"Number of slice dimensions does not match the number of array dimensions. "
      f"Array shape: ({', '.join(map(str, x.shape))}). Slice dimensions: {len(s)}.")
  shape, strides, offset, empty = [], [], x.offset, False
  for i, k in enumerate(s):
    if isinstance(k, Index):  # indexing
      idx = k.index + x.shape[i] if k.index < 0 else k.index
      if 0 <= idx < x.shape[i]:
        offset += x.strides[i] * idx
        continue
      if strict:
        raise BoundsExceededError(f"Slice exceeds array bounds. Index {k.index} is out of bounds for axis {i} "
                                  f"with size {x.shape[i]}.")
      empty = True
    else:  # slicing/striding
      k = Range() if isinstance(k, Full) else k
      start, _, step, size, exceeded = calculate_slices(k.start, k.stop, k.step, x.shape[i])
      if exceeded:
        if strict:
          raise BoundsExceededError(f"Slice exceeds array bounds. {k} is out of bounds for axis {i} "
                                    f"with size {x.shape[i]}.")
        empty = True
        size = len(range(*slice(k.start, k.stop, k.step).indices(x.shape[i])))
      shape.append(size)
      strides.append(x.strides[i] * step)
      if size and not exceeded:
        offset += x.strides[i] * start
  if empty:
    buffer = np.empty(1, dtype=x.dtype.np_dtype)
    inst = x.__class__(shape=shape, dtype=x.dtype, buffer=buffer, strides=(0,) * len(shape))
  else:
    inst = copy.copy(x)
    inst.shape, inst.strides, inst.offset = tuple(shape), tuple(strides), offset
    inst.c_contiguous, inst.f_contiguous = calculate_contiguity(inst.shape, inst.strides)
  inst.readonly = x.readonly or not writable
  if DEBUG: print(f"[DEBUG] resolve {s} on shape={x.shape}: shape={inst.shape} strides={inst.strides} "
                  f"offset={inst.offset} empty={empty}")
  return inst
