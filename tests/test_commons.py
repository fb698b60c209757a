from itertools import product
from typing import Any
from unittest import TestCase

import torch


class TestCommons(TestCase):
    @staticmethod
    def get_all_devices() -> list[torch.device]:
        devices = [torch.device("cpu")]
        if torch.cuda.is_available():
            devices.append(torch.device("cuda"))
        return devices

    @staticmethod
    def get_dtypes() -> list[torch.dtype]:
        return [torch.uint8, torch.uint32, torch.int64]

    @staticmethod
    def get_float_dtypes() -> list[torch.dtype]:
        return [torch.float32, torch.float64, torch.float16, torch.bfloat16]

    @staticmethod
    def get_tensor_sizes() -> list[tuple[int]]:
        return [(1,), (4,), (1023,), (1024,), (1025,), (3, 7), (64, 65), (2, 3, 5, 7), (100000,)]

    def make_args_matrix(*args_lists) -> list[Any]:
        return [p for p in product(*args_lists)]

    def make_tensor(self, values: list[int], dtype: torch.dtype, device: torch.device) -> torch.Tensor:
        # unsigned types beyond uint8 only support a small set of ops, so values go through int64
        return torch.tensor(values, dtype=torch.long).to(dtype).to(device)

    def get_random_tensor(self, size: tuple[int], dtype: torch.dtype, device: torch.device) -> torch.Tensor:
        if dtype == torch.int64:
            x = torch.randint(-(2**62), 2**62, size, dtype=torch.long)
        elif dtype == torch.uint8:
            x = torch.randint(0, 2**8, size, dtype=torch.long)
        else:
            x = torch.randint(0, 2**31, size, dtype=torch.long)

        return x.to(dtype).to(device)

    def to_long(self, x: torch.Tensor) -> torch.Tensor:
        return x.to(torch.long).cpu()

    def assert_equal_tensors(self, x: torch.Tensor, y: torch.Tensor) -> None:
        assert x.dtype == y.dtype, f"dtype mismatch ({x.dtype} vs {y.dtype})"
        assert x.size() == y.size(), f"shape mismatch ({x.size()} vs {y.size()})"
        assert self.to_long(x).equal(self.to_long(y))

    def skip_if_no_cuda(self, device: torch.device) -> None:
        if device.type == "cuda" and not torch.cuda.is_available():
            self.skipTest("CUDA is not available")
