from __future__ import annotations

import torch
from torch.utils._pytree import tree_map

from .enums import KernelBackend
from .kernels import bitwise_and_bitkit, bitwise_or_bitkit, bitwise_xor_bitkit, nonzero_bitkit


def _wrap(x: torch.Tensor) -> BitkitTensor:
    return BitkitTensor(x) if isinstance(x, torch.Tensor) and not isinstance(x, BitkitTensor) else x


def _unwrap(x: BitkitTensor) -> torch.Tensor:
    return x.element if isinstance(x, BitkitTensor) else x


class BitkitTensor(torch.Tensor):
    """tensor wrapper whose bitwise and nonzero methods run the bitkit kernels

    every other torch op is run on the wrapped tensor and its outputs are wrapped again.
    """

    element: torch.Tensor

    @torch._dynamo.disable
    @staticmethod
    def __new__(cls, element: torch.Tensor) -> BitkitTensor:
        tensor = torch.Tensor._make_wrapper_subclass(  # type: ignore[attr-defined]
            cls,
            element.size(),
            strides=element.stride(),
            storage_offset=element.storage_offset(),
            dtype=element.dtype,
            layout=element.layout,
            device=element.device,
            requires_grad=element.requires_grad,
        )
        tensor.element = element
        return tensor

    @classmethod
    def __torch_dispatch__(cls, func, types, args, kwargs=None):
        args = tree_map(_unwrap, args)
        kwargs = tree_map(_unwrap, kwargs)

        output = func(*args, **kwargs)
        output = tree_map(_wrap, output)

        return output

    def bitwise_and(self, other: torch.Tensor, kernel_backend: KernelBackend | None = None) -> BitkitTensor:
        return _wrap(bitwise_and_bitkit(self.element, _unwrap(other), kernel_backend=kernel_backend))

    def bitwise_or(self, other: torch.Tensor, kernel_backend: KernelBackend | None = None) -> BitkitTensor:
        return _wrap(bitwise_or_bitkit(self.element, _unwrap(other), kernel_backend=kernel_backend))

    def bitwise_xor(self, other: torch.Tensor, kernel_backend: KernelBackend | None = None) -> BitkitTensor:
        return _wrap(bitwise_xor_bitkit(self.element, _unwrap(other), kernel_backend=kernel_backend))

    def nonzero(self, kernel_backend: KernelBackend | None = None) -> BitkitTensor:
        return _wrap(nonzero_bitkit(self.element, kernel_backend=kernel_backend))

    def __repr__(self):
        return f"{self.__class__.__name__}({self.element})"
