import numpy as np
import pytest

from ndassign import (BoundsExceededError, BroadcastIncompatibleError, DimensionMismatchError, NPArray,
                      ReadOnlyError, broadcast_shapes, broadcast_to)
from ndassign.dtype import complex128, float32, float64, int32

np.random.seed(0)

rnd = lambda shape: np.random.normal(0, 1, shape)

def check_array(myarr, nparr, ignore=()):
  assert myarr.shape == nparr.shape
  assert myarr.dtype.np_dtype == nparr.dtype
  assert np.array_equal(myarr.numpy(), nparr)
  if "stride" not in ignore:
    np_strides = tuple(s // nparr.itemsize for s in nparr.strides)
    assert myarr.strides == np_strides
  if "contig" not in ignore:
    assert myarr.c_contiguous == nparr.flags.c_contiguous
    assert myarr.f_contiguous == nparr.flags.f_contiguous

def test_creation():
  shape = (2, 3, 4)
  nparr = np.arange(np.prod(shape)).reshape(shape).astype(np.float64)
  arr = NPArray(nparr)
  check_array(arr, nparr)
  assert arr.size == 24 and arr.ndim == 3 and len(arr) == 2
  assert arr.offset == 0 and not arr.readonly

  arr = NPArray(nparr, order="column-major")
  assert arr.strides == (1, 2, 6)
  assert arr.f_contiguous and not arr.c_contiguous
  check_array(arr, np.asfortranarray(nparr))

  arr = NPArray(nparr.astype(np.float32), dtype=float32)
  check_array(arr, nparr.astype(np.float32))
  arr = NPArray([[1, 2], [3, 4]], dtype="int32")
  assert arr.dtype is int32
  check_array(arr, np.array([[1, 2], [3, 4]], dtype=np.int32))

def test_creation_does_not_alias_input():
  nparr = np.zeros((2, 2))
  arr = NPArray(nparr)
  arr.set(0, 0, 1.0)
  assert nparr[0, 0] == 0.0

def test_creation_from_buffer():
  buffer = np.arange(30, dtype=np.float64)
  arr = NPArray(shape=(6,), buffer=buffer, strides=(2,), offset=4)
  assert arr.buffer is buffer
  assert arr.tolist() == [4, 6, 8, 10, 12, 14]
  arr = NPArray(shape=(3,), buffer=buffer, strides=(-4,), offset=14)
  assert arr.tolist() == [14, 10, 6]
  arr = NPArray(shape=(), buffer=buffer, strides=(), offset=7)
  assert arr.ndim == 0 and arr.get() == 7.0
  with pytest.raises(AssertionError):
    NPArray(shape=(6,), buffer=buffer, dtype=float32)
  with pytest.raises(AssertionError):
    NPArray(shape=(6,), buffer=buffer, strides=(1, 1))

def test_creation_ops():
  check_array(NPArray.zeros((2, 3)), np.zeros((2, 3)))
  check_array(NPArray.full((2, 3), 1.5, dtype=float32), np.full((2, 3), 1.5, dtype=np.float32))
  assert NPArray.empty((0, 3)).size == 0
  assert NPArray.empty((4,), dtype=complex128).dtype is complex128
  x = NPArray.scalar(3)
  assert x.shape == () and x.dtype.value == "uint8" and x.get() == 3
  x = NPArray.scalar(-1.5, dtype=float32)
  assert x.dtype is float32 and x.iget(0) == -1.5

def test_asarray():
  arr = NPArray.zeros((2,))
  assert NPArray.asarray(arr) is arr
  assert NPArray.asarray(1.5).dtype is float64
  assert NPArray.asarray(2j).dtype is complex128
  assert NPArray.asarray(np.float32(1.5)).dtype is float32
  assert NPArray.asarray([1, 2, 3]).dtype.value == "int64"
  check_array(NPArray.asarray(np.arange(6.0).reshape(2, 3)), np.arange(6.0).reshape(2, 3))
  with pytest.raises(TypeError):
    NPArray.asarray(np.array([True, False]))

def test_element_access():
  nparr = np.arange(24.0).reshape(2, 3, 4)
  arr = NPArray(nparr)
  assert arr.get(1, 2, 3) == nparr[1, 2, 3]
  assert arr.get(-1, 0, -2) == nparr[-1, 0, -2]
  for i in (0, 5, 23, -1):
    assert arr.iget(i) == nparr.reshape(-1)[i]
  arr.set(0, 1, 2, -7.0)
  assert arr.get(0, 1, 2) == -7.0
  with pytest.raises(BoundsExceededError):
    arr.get(2, 0, 0)
  with pytest.raises(BoundsExceededError):
    arr.iget(24)
  with pytest.raises(DimensionMismatchError):
    arr.get(0, 0)

def test_iget_follows_row_major_order():
  nparr = np.arange(6.0).reshape(2, 3)
  arr = NPArray(nparr, order="column-major")
  assert [arr.iget(i) for i in range(6)] == nparr.reshape(-1).tolist()

def test_getitem():
  shape = (2, 3, 4)
  nparr = np.arange(np.prod(shape)).reshape(shape).astype(np.float64)
  arr = NPArray(nparr)
  for key in (1, (slice(None), 1), slice(None, None, -1), (0, slice(1, 3), slice(None, None, 2)),
              (-1, -1, -1), (slice(None), slice(None), slice(3, 0, -2)), (Ellipsis, 2)):
    view = arr[key]
    check_array(view, np.asarray(nparr[key]))
    assert view.buffer is arr.buffer
    assert view.readonly

def test_getitem_bounds():
  arr = NPArray.zeros((2, 3))
  with pytest.raises(BoundsExceededError):
    arr[2]
  with pytest.raises(BoundsExceededError):
    arr[:, 1:10]
  with pytest.raises(DimensionMismatchError):
    arr[0, 0, 0]
  with pytest.raises(TypeError):
    arr[[0, 1]]

def test_setitem():
  shape = (3, 4)
  nparr = rnd(shape)
  arr = NPArray(nparr)
  nparr = nparr.copy()

  arr[1] = 5
  nparr[1] = 5
  check_array(arr, nparr)

  value = np.arange(4.0)
  arr[:, ::-1] = value
  nparr[:, ::-1] = value
  check_array(arr, nparr)

  arr[0, 1:3] = NPArray([-1.0, -2.0])
  nparr[0, 1:3] = [-1.0, -2.0]
  check_array(arr, nparr)

  arr[-1, -1] = 1.5
  nparr[-1, -1] = 1.5
  check_array(arr, nparr)

  arr[...] = 0
  check_array(arr, np.zeros(shape))

def test_setitem_errors():
  arr = NPArray.zeros((2, 3), dtype=int32)
  with pytest.raises(BoundsExceededError):
    arr[5] = 1
  with pytest.raises(DimensionMismatchError):
    arr[0, 0, 0] = 1
  with pytest.raises(TypeError):
    arr[0] = 1.5
  with pytest.raises(BroadcastIncompatibleError):
    arr[0] = NPArray.zeros((2,), dtype=int32)
  with pytest.raises(ReadOnlyError):
    arr[0][1] = 1
  assert not arr.numpy().any()

def test_broadcast():
  for shape1, shape2 in (
          [(), (1, 2, 3, 4)],
          [(1,), (1, 2, 3, 4)],
          [(1, 1, 1, 1), (1, 2, 3, 4)],
          [(4,), (1, 2, 3, 4)],
          [(3, 1), (1, 2, 3, 4)],
          [(1, 3, 1), (1, 2, 3, 4)],
          [(1, 2, 1, 1), (1, 2, 3, 4)],
          [(1,), (1,)]):
    arr1, arr2 = NPArray.empty(shape1), NPArray.empty(shape2)
    assert broadcast_shapes(shape1, shape2) == shape2
    assert all(a.shape == shape2 for a in NPArray.broadcast(arr1, arr2))
  assert broadcast_shapes((2, 1), (1, 3)) == (2, 3)
  assert broadcast_shapes((0,), (1,)) == (0,)
  assert broadcast_shapes() == ()
  with pytest.raises(BroadcastIncompatibleError):
    broadcast_shapes((2,), (3,))

def test_broadcast_to():
  nparr = np.arange(3.0).reshape(3, 1)
  arr = broadcast_to(NPArray(nparr), (2, 3, 4))
  assert arr.strides == (0, 1, 0)
  assert arr.readonly
  check_array(arr, np.broadcast_to(nparr, (2, 3, 4)), ignore=("stride",))

  arr = broadcast_to(NPArray.scalar(10.0), (4, 3))
  assert arr.strides == (0, 0)
  assert np.array_equal(arr.numpy(), np.full((4, 3), 10.0))

  for shape1, shape2 in (
          [(2,), (3,)],
          [(2, 2), (2,)],
          [(3, 1), (2, 4)],
          [(2,), (2, 0)]):
    with pytest.raises(BroadcastIncompatibleError):
      broadcast_to(NPArray.empty(shape1), shape2)
