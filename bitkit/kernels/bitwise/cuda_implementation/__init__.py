import torch

from ....constants import MAX_CUDA_BLOCK_SIZE
from ....kernel_registry import launch_cpp_kernel
from ....utils import get_launch_geometry


def bitwise_forward_cuda(
    x: torch.Tensor, y: torch.Tensor, output: torch.Tensor, kernel_name: str, BLOCK_SIZE: int = MAX_CUDA_BLOCK_SIZE
) -> None:
    num_elements = x.numel()
    geometry = get_launch_geometry(num_elements, max_block_size=BLOCK_SIZE)

    launch_cpp_kernel(kernel_name, geometry, x, y, output, num_elements)
