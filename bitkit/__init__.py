from .constants import BITWISE_SUPPORTED_DTYPES, LIBRARY_NAME, MAX_CUDA_BLOCK_SIZE, NONZERO_SUPPORTED_DTYPES
from .enums import BitwiseOp, KernelBackend
from .errors import (
    BitkitError,
    DeviceAllocationError,
    DeviceLaunchError,
    DeviceMismatchError,
    DTypeMismatchError,
    KernelLoadError,
    NonContiguousInputError,
    ShapeMismatchError,
    UnsupportedDeviceError,
    UnsupportedDTypeError,
)
from .kernel_registry import get_cpp_function, get_kernel_name
from .kernels import (
    bitwise_and_bitkit,
    bitwise_and_torch,
    bitwise_bitkit,
    bitwise_or_bitkit,
    bitwise_or_torch,
    bitwise_xor_bitkit,
    bitwise_xor_torch,
    nonzero_bitkit,
    nonzero_torch,
)
from .tensor import BitkitTensor
from .utils import DeviceBuffer, LaunchGeometry, device_synchronize, get_launch_geometry
