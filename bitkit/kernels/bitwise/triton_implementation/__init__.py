import torch

from ....constants import MAX_CUDA_BLOCK_SIZE
from ....enums import BitwiseOp
from ....errors import DeviceLaunchError
from ....utils import get_launch_geometry
from .kernels_forward import bitwise_forward_triton_kernel


def bitwise_forward_triton(
    x: torch.Tensor, y: torch.Tensor, output: torch.Tensor, op: BitwiseOp, BLOCK_SIZE: int = MAX_CUDA_BLOCK_SIZE
) -> None:
    num_elements = x.numel()
    geometry = get_launch_geometry(num_elements, max_block_size=BLOCK_SIZE)

    if geometry.grid_size == 0:
        return

    try:
        with torch.device(x.device):
            bitwise_forward_triton_kernel[(geometry.grid_size,)](
                x_ptr=x,
                y_ptr=y,
                output_ptr=output,
                num_elements=num_elements,
                OPERATION=op.value,
                BLOCK_SIZE=geometry.block_size,
            )
    except RuntimeError as error:
        raise DeviceLaunchError(f"launch of bitwise_forward_triton_kernel ({op.value}) failed: {error}") from error
