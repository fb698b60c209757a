import logging

import torch

from ...constants import (
    BITWISE_BIT_CARRIER_DTYPES,
    BITWISE_KERNEL_BASE_NAMES,
    BITWISE_PYTHON_OPERATORS,
    BITWISE_SUPPORTED_DTYPES,
    LIBRARY_NAME,
)
from ...enums import BitwiseOp, KernelBackend
from ...errors import (
    DTypeMismatchError,
    NonContiguousInputError,
    ShapeMismatchError,
    UnsupportedDeviceError,
    UnsupportedDTypeError,
)
from ...kernel_registry import get_kernel_name
from ...utils import DeviceBuffer, bitkit_op
from .cuda_implementation import bitwise_forward_cuda
from .triton_implementation import bitwise_forward_triton


logger = logging.getLogger(__name__)

_OP_NAME = "bitwise"


def get_kernel_base_name(op: BitwiseOp) -> str:
    return BITWISE_KERNEL_BASE_NAMES[op]


def _check_inputs(x: torch.Tensor, y: torch.Tensor, op: BitwiseOp) -> None:
    op_name = get_kernel_base_name(op)

    if x.size() != y.size():
        raise ShapeMismatchError(x.size(), y.size(), op_name)

    if x.dtype != y.dtype:
        raise DTypeMismatchError(x.dtype, y.dtype, op_name)

    if x.dtype not in BITWISE_SUPPORTED_DTYPES:
        raise UnsupportedDTypeError(x.dtype, op_name)


def _bitwise_forward_cpu(x: torch.Tensor, y: torch.Tensor, op: str, kernel_backend: str) -> torch.Tensor:
    op = BitwiseOp(op)
    _check_inputs(x, y, op)

    # all supported dtypes share one implementation through an equal width dtype that implements &, | and ^
    bit_carrier_dtype = BITWISE_BIT_CARRIER_DTYPES[x.dtype]
    x_flat = x.contiguous().view(-1).view(bit_carrier_dtype)
    y_flat = y.contiguous().view(-1).view(bit_carrier_dtype)

    if x_flat.numel() != y_flat.numel():
        raise ShapeMismatchError(x.size(), y.size(), get_kernel_base_name(op))

    logger.debug(f"running {get_kernel_base_name(op)} on cpu for {x_flat.numel()} elements of {x.dtype}")

    output = BITWISE_PYTHON_OPERATORS[op](x_flat, y_flat)

    return output.view(x.dtype).view(x.size())


def _bitwise_forward_cuda(x: torch.Tensor, y: torch.Tensor, op: str, kernel_backend: str) -> torch.Tensor:
    op = BitwiseOp(op)
    kernel_backend = KernelBackend(kernel_backend)
    _check_inputs(x, y, op)

    for operand, tensor in enumerate((x, y), start=1):
        if not tensor.is_contiguous():
            raise NonContiguousInputError(operand, get_kernel_base_name(op))

    logger.debug(f"running {get_kernel_base_name(op)} on {x.device} with {kernel_backend.value} for {x.dtype}")

    with DeviceBuffer(x.numel(), dtype=x.dtype, device=x.device) as buffer:
        if kernel_backend == KernelBackend.cuda:
            kernel_name = get_kernel_name(get_kernel_base_name(op), x.dtype)
            bitwise_forward_cuda(x=x, y=y, output=buffer.tensor, kernel_name=kernel_name)
        elif kernel_backend == KernelBackend.triton:
            bitwise_forward_triton(x=x, y=y, output=buffer.tensor, op=op)
        else:
            raise ValueError(f"unexpected kernel_backend ({kernel_backend})")

        output = buffer.release()

    return output.view(x.size())


def _fake(x: torch.Tensor, y: torch.Tensor, op: str, kernel_backend: str) -> torch.Tensor:
    return x.new_empty(x.size())


def _bitwise_forward_unsupported_device(x: torch.Tensor, y: torch.Tensor, op: str, kernel_backend: str) -> torch.Tensor:
    raise UnsupportedDeviceError(x.device, f"{LIBRARY_NAME}::{_OP_NAME}")


bitwise_forward = bitkit_op(
    f"{LIBRARY_NAME}::{_OP_NAME}",
    mutates_args=(),
    device_kernels={"cpu": _bitwise_forward_cpu, "cuda": _bitwise_forward_cuda},
    fake_func=_fake,
)(_bitwise_forward_unsupported_device)
