import torch

from ....constants import MAX_CUDA_BLOCK_SIZE
from ....kernel_registry import get_kernel_name, launch_cpp_kernel
from ....utils import DeviceBuffer, get_launch_geometry


def nonzero_forward_cuda(x: torch.Tensor, BLOCK_SIZE: int = MAX_CUDA_BLOCK_SIZE) -> torch.Tensor:
    """flat indices of the nonzero elements of a contiguous tensor, in increasing order

    Args:
        x (torch.Tensor): contiguous input tensor on a CUDA device
        BLOCK_SIZE (int, optional): upper bound on threads per block

    Returns:
        torch.Tensor: 1D int64 tensor of flat indices
    """

    num_elements = x.numel()
    geometry = get_launch_geometry(num_elements, max_block_size=BLOCK_SIZE)

    block_counts = torch.zeros(geometry.grid_size, dtype=torch.long, device=x.device)
    launch_cpp_kernel(get_kernel_name("count_nonzero", x.dtype), geometry, x, block_counts, num_elements)

    block_offsets = torch.cumsum(block_counts, dim=0) - block_counts
    # output size is data dependent, this synchronizes with the device
    num_nonzero = int(block_counts.sum().item())

    with DeviceBuffer(num_nonzero, dtype=torch.long, device=x.device) as buffer:
        if num_nonzero > 0:
            launch_cpp_kernel(
                get_kernel_name("nonzero", x.dtype), geometry, x, block_offsets, buffer.tensor, num_elements
            )

        output = buffer.release()

    return output
