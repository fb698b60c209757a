from .bitwise import (
    bitwise_and_bitkit,
    bitwise_and_torch,
    bitwise_bitkit,
    bitwise_or_bitkit,
    bitwise_or_torch,
    bitwise_xor_bitkit,
    bitwise_xor_torch,
)
from .nonzero import nonzero_bitkit, nonzero_torch
