from typing import NamedTuple


MAX_CUDA_BLOCK_SIZE = 1024


def ceil_divide(x: int, y: int) -> int:
    return (x + y - 1) // y


def check_power_of_2(n: int) -> bool:
    return n & (n - 1) == 0 and n != 0


def get_next_power_of_2(x: int) -> int:
    if x <= 1:
        return 1

    return 1 << (x - 1).bit_length()


class LaunchGeometry(NamedTuple):
    block_size: int
    grid_size: int


def get_launch_geometry(num_elements: int, max_block_size: int = MAX_CUDA_BLOCK_SIZE) -> LaunchGeometry:
    """computes a 1D launch geometry covering `num_elements` with one thread per element

    Args:
        num_elements (int): number of elements to process
        max_block_size (int): upper bound on threads per block, must be a power of 2. Defaults to 1024

    Returns:
        LaunchGeometry: block size (power of 2) and number of blocks
    """

    if num_elements < 0:
        raise ValueError(f"num_elements ({num_elements}) should be non-negative")

    assert check_power_of_2(max_block_size), "max_block_size is not a power of 2"

    block_size = min(get_next_power_of_2(num_elements), max_block_size)
    grid_size = ceil_divide(num_elements, block_size)

    return LaunchGeometry(block_size=block_size, grid_size=grid_size)
