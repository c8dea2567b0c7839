import logging
from bisect import bisect_right
import torch

logger = logging.getLogger(__name__)


def find_span(order, knot_vector, num_ctrlpts, knot):
    """
    Returns the span index `s` with knot_vector[s] <= knot < knot_vector[s + 1], restricted to
    [order, num_ctrlpts - 1]. The upper end of the domain maps onto the last non-empty span.
    """
    if isinstance(knot_vector, torch.Tensor):
        knot_vector = knot_vector.tolist()
    span = bisect_right(knot_vector, float(knot), order, num_ctrlpts) - 1
    return min(max(span, order), num_ctrlpts - 1)


def find_spans(order, knots, num_ctrlpts, t_vals):
    """Batched `find_span` over a 1-D tensor of parameters"""
    t_vals = t_vals.to(dtype=knots.dtype).contiguous()
    spans = torch.searchsorted(knots.contiguous(), t_vals, right=True) - 1
    return spans.clamp(order, num_ctrlpts - 1)


def clamp_parameters(order, knots, num_ctrlpts, t_vals):
    """Clamps parameters into the curve domain [knots[order], knots[num_ctrlpts]]"""
    low, high = float(knots[order]), float(knots[num_ctrlpts])
    outside = (t_vals < low) | (t_vals > high)
    if outside.any():
        logger.debug("Clamping %d parameter(s) into the domain [%g, %g]",
                     int(outside.sum()), low, high)
    return t_vals.clamp(low, high)


def select_points_using_spans(control_points, spans, order):
    """Gathers the `order + 1` control points active over each span"""
    indices = spans[:, None] - order + torch.arange(order + 1, device=spans.device)
    return control_points[indices]
