import torch

from ...constants import DEFAULT_KERNEL_BACKEND
from ...enums import KernelBackend
from ...utils import apply_op1_no_bwd
from .forward import nonzero_forward
from .torch_implementation import nonzero_torch


def nonzero_bitkit(x: torch.Tensor, kernel_backend: KernelBackend | None = None) -> torch.Tensor:
    if kernel_backend is None:
        kernel_backend = DEFAULT_KERNEL_BACKEND

    return apply_op1_no_bwd(x, nonzero_forward, kernel_backend.value)
