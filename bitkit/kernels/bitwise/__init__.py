import torch

from ...constants import DEFAULT_KERNEL_BACKEND
from ...enums import BitwiseOp, KernelBackend
from ...utils import apply_op2_no_bwd
from .forward import bitwise_forward, get_kernel_base_name
from .torch_implementation import bitwise_and_torch, bitwise_or_torch, bitwise_xor_torch


def bitwise_bitkit(
    x: torch.Tensor, y: torch.Tensor, op: BitwiseOp, kernel_backend: KernelBackend | None = None
) -> torch.Tensor:
    if kernel_backend is None:
        kernel_backend = DEFAULT_KERNEL_BACKEND

    return apply_op2_no_bwd(x, y, bitwise_forward, op.value, kernel_backend.value, op_name=get_kernel_base_name(op))


def bitwise_and_bitkit(x: torch.Tensor, y: torch.Tensor, kernel_backend: KernelBackend | None = None) -> torch.Tensor:
    return bitwise_bitkit(x, y, BitwiseOp.AND, kernel_backend=kernel_backend)


def bitwise_or_bitkit(x: torch.Tensor, y: torch.Tensor, kernel_backend: KernelBackend | None = None) -> torch.Tensor:
    return bitwise_bitkit(x, y, BitwiseOp.OR, kernel_backend=kernel_backend)


def bitwise_xor_bitkit(x: torch.Tensor, y: torch.Tensor, kernel_backend: KernelBackend | None = None) -> torch.Tensor:
    return bitwise_bitkit(x, y, BitwiseOp.XOR, kernel_backend=kernel_backend)
