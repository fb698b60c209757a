from enum import Enum


class KernelBackend(Enum):
    cuda = "cuda"
    triton = "triton"


class BitwiseOp(Enum):
    AND = "AND"
    OR = "OR"
    XOR = "XOR"
