import logging

import torch

from ...constants import BITWISE_BIT_CARRIER_DTYPES, LIBRARY_NAME, NONZERO_SUPPORTED_DTYPES
from ...enums import KernelBackend
from ...errors import NonContiguousInputError, UnsupportedDeviceError, UnsupportedDTypeError
from ...utils import bitkit_op
from .cuda_implementation import nonzero_forward_cuda
from .triton_implementation import nonzero_forward_triton


logger = logging.getLogger(__name__)

_OP_NAME = "nonzero"


def _check_input(x: torch.Tensor) -> None:
    if x.dtype not in NONZERO_SUPPORTED_DTYPES:
        raise UnsupportedDTypeError(x.dtype, _OP_NAME)


def unravel_flat_indices(flat_indices: torch.Tensor, size: torch.Size) -> torch.Tensor:
    """converts row major flat indices into coordinates

    Args:
        flat_indices (torch.Tensor): 1D int64 tensor of flat indices
        size (torch.Size): shape of the indexed tensor

    Returns:
        torch.Tensor: int64 tensor of shape (flat_indices.numel(), len(size))
    """

    num_dims = len(size)
    if num_dims == 0 or flat_indices.numel() == 0:
        return flat_indices.new_empty((flat_indices.numel(), num_dims))

    strides = []
    stride = 1
    for dim_size in reversed(size):
        strides.append(stride)
        stride *= dim_size
    strides.reverse()

    strides = torch.tensor(strides, dtype=torch.long, device=flat_indices.device)
    sizes = torch.tensor(list(size), dtype=torch.long, device=flat_indices.device)

    return torch.div(flat_indices.unsqueeze(1), strides, rounding_mode="floor") % sizes


def _nonzero_forward_cpu(x: torch.Tensor, kernel_backend: str) -> torch.Tensor:
    _check_input(x)

    x_flat = x.contiguous().view(-1)
    if x.dtype in BITWISE_BIT_CARRIER_DTYPES:
        x_flat = x_flat.view(BITWISE_BIT_CARRIER_DTYPES[x.dtype])

    num_elements = x_flat.numel()
    logger.debug(f"running {_OP_NAME} on cpu for {num_elements} elements of {x.dtype}")

    # stream compaction: each nonzero element is written at the number of nonzero elements before it,
    # zeros are written to a spill slot past the end
    flags = (x_flat != 0).to(torch.long)
    num_nonzero = int(flags.sum())
    positions = torch.cumsum(flags, dim=0) - flags
    positions = torch.where(flags.bool(), positions, num_nonzero)

    flat_indices = torch.empty(num_nonzero + 1, dtype=torch.long)
    flat_indices.scatter_(0, positions, torch.arange(num_elements, dtype=torch.long))

    return unravel_flat_indices(flat_indices[:num_nonzero], x.size())


def _nonzero_forward_cuda(x: torch.Tensor, kernel_backend: str) -> torch.Tensor:
    kernel_backend = KernelBackend(kernel_backend)
    _check_input(x)

    if not x.is_contiguous():
        raise NonContiguousInputError(1, _OP_NAME)

    logger.debug(f"running {_OP_NAME} on {x.device} with {kernel_backend.value} for {x.dtype}")

    if kernel_backend == KernelBackend.cuda:
        flat_indices = nonzero_forward_cuda(x)
    elif kernel_backend == KernelBackend.triton:
        flat_indices = nonzero_forward_triton(x)
    else:
        raise ValueError(f"unexpected kernel_backend ({kernel_backend})")

    return unravel_flat_indices(flat_indices, x.size())


def _fake(x: torch.Tensor, kernel_backend: str) -> torch.Tensor:
    ctx = torch.library.get_ctx()
    num_nonzero = ctx.new_dynamic_size()
    return x.new_empty((num_nonzero, x.dim()), dtype=torch.long)


def _nonzero_forward_unsupported_device(x: torch.Tensor, kernel_backend: str) -> torch.Tensor:
    raise UnsupportedDeviceError(x.device, f"{LIBRARY_NAME}::{_OP_NAME}")


nonzero_forward = bitkit_op(
    f"{LIBRARY_NAME}::{_OP_NAME}",
    mutates_args=(),
    device_kernels={"cpu": _nonzero_forward_cpu, "cuda": _nonzero_forward_cuda},
    fake_func=_fake,
)(_nonzero_forward_unsupported_device)
