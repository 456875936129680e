from ndassign.assign import slice_assign
from ndassign.backend.numpy import NPArray
from ndassign.broadcast import broadcast_shapes, broadcast_to
from ndassign.cast import is_safe_cast, is_same_kind_cast, plan
from ndassign.dtype import (DType, Kind, complex64, complex128, float32, float64, generic, int8, int16, int32, int64,
                            min_dtype, uint8, uint16, uint32, uint64)
from ndassign.errors import (BoundsExceededError, BroadcastIncompatibleError, DimensionMismatchError, NDAssignError,
                             ReadOnlyError, UnsafeCastError)
from ndassign.slice import Full, Index, MultiSlice, Range, resolve
