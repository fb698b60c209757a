import torch


def nonzero_torch(x: torch.Tensor) -> torch.Tensor:
    """coordinates of the nonzero elements

    Args:
        x (torch.Tensor): input tensor

    Returns:
        torch.Tensor: int64 tensor of shape (num_nonzero, x.dim())
    """

    return torch.nonzero(x)
