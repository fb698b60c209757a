import triton
import triton.language as tl


@triton.jit
def bitwise_forward_triton_kernel(x_ptr, y_ptr, output_ptr, num_elements, OPERATION: tl.constexpr, BLOCK_SIZE: tl.constexpr):
    pid = tl.program_id(axis=0)

    indices = pid * BLOCK_SIZE + tl.arange(0, BLOCK_SIZE)
    mask = indices < num_elements

    x = tl.load(x_ptr + indices, mask=mask)
    y = tl.load(y_ptr + indices, mask=mask)

    if OPERATION == "AND":
        output = x & y
    elif OPERATION == "OR":
        output = x | y
    else:
        output = x ^ y

    tl.store(output_ptr + indices, output, mask=mask)
