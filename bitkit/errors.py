import torch


class BitkitError(RuntimeError):
    """base class of every error raised by bitkit operators"""


class ShapeMismatchError(BitkitError):
    def __init__(self, lhs: torch.Size, rhs: torch.Size, op: str) -> None:
        self.lhs = lhs
        self.rhs = rhs
        self.op = op

        super().__init__(f"shape mismatch in {op}, lhs: {list(lhs)}, rhs: {list(rhs)}")


class DTypeMismatchError(BitkitError):
    def __init__(self, lhs: torch.dtype, rhs: torch.dtype, op: str) -> None:
        self.lhs = lhs
        self.rhs = rhs
        self.op = op

        super().__init__(f"dtype mismatch in {op}, lhs: {lhs}, rhs: {rhs}")


class UnsupportedDTypeError(BitkitError):
    def __init__(self, dtype: torch.dtype, op: str) -> None:
        self.dtype = dtype
        self.op = op

        super().__init__(f"unsupported dtype {dtype} for op {op}")


class NonContiguousInputError(BitkitError):
    def __init__(self, operand: int, op: str) -> None:
        self.operand = operand
        self.op = op

        super().__init__(f"input {operand} of {op} has to be contiguous")


class UnsupportedDeviceError(BitkitError):
    def __init__(self, device: torch.device, op: str) -> None:
        self.device = device
        self.op = op

        super().__init__(f"{op} has no kernel for device ({device})")


class DeviceMismatchError(BitkitError):
    def __init__(self, lhs: torch.device, rhs: torch.device, op: str) -> None:
        self.lhs = lhs
        self.rhs = rhs
        self.op = op

        super().__init__(f"device mismatch in {op}, lhs: {lhs}, rhs: {rhs}")


class KernelLoadError(BitkitError):
    def __init__(self, name: str, reason: str) -> None:
        self.name = name

        super().__init__(f"unable to load kernel ({name}): {reason}")


class DeviceAllocationError(BitkitError):
    """raised when the output buffer cannot be allocated on the device"""


class DeviceLaunchError(BitkitError):
    """raised when the device runtime rejects a kernel launch, the original error is chained"""
