import torch

from ....constants import MAX_CUDA_BLOCK_SIZE
from ....errors import DeviceLaunchError
from ....utils import DeviceBuffer, get_launch_geometry
from .kernels_forward import count_nonzero_triton_kernel, nonzero_triton_kernel


def nonzero_forward_triton(x: torch.Tensor, BLOCK_SIZE: int = MAX_CUDA_BLOCK_SIZE) -> torch.Tensor:
    num_elements = x.numel()
    geometry = get_launch_geometry(num_elements, max_block_size=BLOCK_SIZE)

    if geometry.grid_size == 0:
        return torch.empty(0, dtype=torch.long, device=x.device)

    block_counts = torch.zeros(geometry.grid_size, dtype=torch.long, device=x.device)

    try:
        with torch.device(x.device):
            count_nonzero_triton_kernel[(geometry.grid_size,)](
                x_ptr=x, block_counts_ptr=block_counts, num_elements=num_elements, BLOCK_SIZE=geometry.block_size
            )
    except RuntimeError as error:
        raise DeviceLaunchError(f"launch of count_nonzero_triton_kernel failed: {error}") from error

    block_offsets = torch.cumsum(block_counts, dim=0) - block_counts
    num_nonzero = int(block_counts.sum().item())

    with DeviceBuffer(num_nonzero, dtype=torch.long, device=x.device) as buffer:
        if num_nonzero > 0:
            try:
                with torch.device(x.device):
                    nonzero_triton_kernel[(geometry.grid_size,)](
                        x_ptr=x,
                        block_offsets_ptr=block_offsets,
                        output_ptr=buffer.tensor,
                        num_elements=num_elements,
                        BLOCK_SIZE=geometry.block_size,
                    )
            except RuntimeError as error:
                raise DeviceLaunchError(f"launch of nonzero_triton_kernel failed: {error}") from error

        output = buffer.release()

    return output
