import operator

import torch

from .enums import BitwiseOp, KernelBackend
from .utils.env import get_string_env_variable
from .utils.math import MAX_CUDA_BLOCK_SIZE


LIBRARY_NAME = "bitkit"

DEFAULT_KERNEL_BACKEND = KernelBackend(get_string_env_variable("BITKIT_KERNEL_BACKEND", KernelBackend.cuda.value))

BITWISE_KERNEL_BASE_NAMES = {
    BitwiseOp.AND: "bitwise_and",
    BitwiseOp.OR: "bitwise_or",
    BitwiseOp.XOR: "bitwise_xor",
}

BITWISE_PYTHON_OPERATORS = {
    BitwiseOp.AND: operator.and_,
    BitwiseOp.OR: operator.or_,
    BitwiseOp.XOR: operator.xor,
}

# suffix of the dtype specialized CUDA entry points, e.g. bitwise_and_u32
TORCH_DTYPE_TO_KERNEL_SUFFIX = {
    torch.uint8: "u8",
    torch.uint32: "u32",
    torch.int64: "i64",
    torch.float32: "f32",
    torch.float64: "f64",
    torch.float16: "f16",
    torch.bfloat16: "bf16",
}

# equal width dtype on which the host library implements &, | and ^
BITWISE_BIT_CARRIER_DTYPES = {
    torch.uint8: torch.uint8,
    torch.uint32: torch.int32,
    torch.int64: torch.int64,
}

BITWISE_SUPPORTED_DTYPES = tuple(BITWISE_BIT_CARRIER_DTYPES.keys())
NONZERO_SUPPORTED_DTYPES = BITWISE_SUPPORTED_DTYPES + (torch.float32, torch.float64, torch.float16, torch.bfloat16)
