import triton
import triton.language as tl


@triton.jit
def count_nonzero_triton_kernel(x_ptr, block_counts_ptr, num_elements, BLOCK_SIZE: tl.constexpr):
    pid = tl.program_id(axis=0)

    indices = pid * BLOCK_SIZE + tl.arange(0, BLOCK_SIZE)
    mask = indices < num_elements

    x = tl.load(x_ptr + indices, mask=mask, other=0)
    count = tl.sum((x != 0).to(tl.int64), axis=0)

    tl.store(block_counts_ptr + pid, count)


@triton.jit
def nonzero_triton_kernel(x_ptr, block_offsets_ptr, output_ptr, num_elements, BLOCK_SIZE: tl.constexpr):
    pid = tl.program_id(axis=0)

    indices = pid * BLOCK_SIZE + tl.arange(0, BLOCK_SIZE)
    mask = indices < num_elements

    x = tl.load(x_ptr + indices, mask=mask, other=0)
    is_nonzero = (x != 0) & mask
    flags = is_nonzero.to(tl.int64)

    block_offset = tl.load(block_offsets_ptr + pid)
    positions = block_offset + tl.cumsum(flags, axis=0) - flags

    tl.store(output_ptr + positions, indices.to(tl.int64), mask=is_nonzero)
