from typing import Callable, Iterable

import torch

from ..errors import DeviceMismatchError


def bitkit_op(
    name: str,
    mutates_args: str | Iterable[str] = (),
    device_kernels: dict[str, Callable] | None = None,
    fake_func: Callable | None = None,
    schema: str | None = None,
) -> Callable:
    """registers `func` as a torch custom op named `name` with one forward per device type

    `func` is the fallback that runs for device types without an entry in `device_kernels`.
    """

    def _inner(func: Callable):
        custom_op = torch.library.custom_op(name, func, mutates_args=mutates_args, schema=schema)

        if device_kernels is not None:
            for device_type, kernel in device_kernels.items():
                custom_op.register_kernel(device_type, kernel)

        if fake_func is not None:
            custom_op.register_fake(fake_func)

        return custom_op

    return _inner


def apply_op1_no_bwd(x: torch.Tensor, op: Callable, *args) -> torch.Tensor:
    with torch.no_grad():
        return op(x, *args)


def apply_op2_no_bwd(x: torch.Tensor, y: torch.Tensor, op: Callable, *args, op_name: str | None = None) -> torch.Tensor:
    # the dispatcher routes on the highest priority device so mixed devices have to be rejected here
    if x.device != y.device:
        raise DeviceMismatchError(x.device, y.device, op_name or getattr(op, "__name__", "op"))

    with torch.no_grad():
        return op(x, y, *args)
