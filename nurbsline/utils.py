import torch
from .errors import InsufficientControlPoints


def generate_knot_vector(order, num_control_points, dtype=torch.float64, device=None):
    """
    Generates the knots for a uniform spline with clamped ends: `order + 1` zeros, evenly spaced
    interior knots, then `order + 1` ones.
    """
    order = int(order)
    if num_control_points < order + 1:
        raise InsufficientControlPoints(
            "Too few control points. Order {} requires at least {} control points".format(
                order,
                order + 1))

    return torch.cat((
        torch.zeros(order, dtype=dtype, device=device),
        torch.linspace(0, 1, num_control_points - order + 1, dtype=dtype, device=device),
        torch.ones(order, dtype=dtype, device=device),
    ), 0)


def to_tensor(value, dtype=None, device=None, copy=False):
    """Returns `value` as a torch.Tensor - detaching and copying if instructed"""
    if isinstance(value, torch.Tensor):
        if copy:
            value = value.detach().clone()
        if dtype is not None or device is not None:
            value = value.to(dtype=dtype or value.dtype, device=device or value.device)
        return value
    return torch.tensor(value, dtype=dtype, device=device)
