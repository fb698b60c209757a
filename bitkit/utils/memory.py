from __future__ import annotations

import torch

from ..errors import DeviceAllocationError


class DeviceBuffer:
    """owns a freshly allocated 1D output buffer for the duration of a kernel launch

    the allocation happens on `__enter__`. the buffer is handed over to the caller with `release`; if the guarded
    block exits without releasing (for example because the launch failed) the reference is dropped so that the
    caching allocator reclaims the memory.

    Args:
        num_elements (int): number of elements
        dtype (torch.dtype): element type
        device (torch.device): device on which to allocate
    """

    def __init__(self, num_elements: int, dtype: torch.dtype, device: torch.device) -> None:
        if num_elements < 0:
            raise ValueError(f"num_elements ({num_elements}) should be non-negative")

        self.num_elements = num_elements
        self.dtype = dtype
        self.device = torch.device(device)
        self._tensor = None

    @property
    def is_allocated(self) -> bool:
        return self._tensor is not None

    @property
    def tensor(self) -> torch.Tensor:
        assert self._tensor is not None, "buffer is not allocated"
        return self._tensor

    def release(self) -> torch.Tensor:
        tensor = self.tensor
        self._tensor = None
        return tensor

    def __enter__(self) -> DeviceBuffer:
        try:
            self._tensor = torch.empty(self.num_elements, dtype=self.dtype, device=self.device)
        except torch.cuda.OutOfMemoryError as error:
            raise DeviceAllocationError(
                f"failed to allocate {self.num_elements} elements of {self.dtype} on {self.device}"
            ) from error

        return self

    def __exit__(self, exc_type, exc_value, traceback) -> bool:
        self._tensor = None
        return False
