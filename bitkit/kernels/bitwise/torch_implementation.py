import torch


def bitwise_and_torch(x: torch.Tensor, y: torch.Tensor) -> torch.Tensor:
    """elementwise bitwise AND

    Args:
        x (torch.Tensor): input tensor
        y (torch.Tensor): input tensor

    Returns:
        torch.Tensor: output tensor
    """

    return torch.bitwise_and(x, y)


def bitwise_or_torch(x: torch.Tensor, y: torch.Tensor) -> torch.Tensor:
    return torch.bitwise_or(x, y)


def bitwise_xor_torch(x: torch.Tensor, y: torch.Tensor) -> torch.Tensor:
    return torch.bitwise_xor(x, y)
