import torch

from nurbsline.spans import clamp_parameters, find_span, find_spans, select_points_using_spans

KNOTS = torch.tensor([0, 0, 0, 0.5, 1, 1, 1], dtype=torch.float64)


def test_find_span_interior():
    assert find_span(2, KNOTS, 4, 0.0) == 2
    assert find_span(2, KNOTS, 4, 0.25) == 2
    assert find_span(2, KNOTS, 4, 0.5) == 3
    assert find_span(2, KNOTS, 4, 0.75) == 3


def test_find_span_upper_boundary_is_last_span():
    assert find_span(2, KNOTS, 4, 1.0) == 3


def test_find_span_repeated_interior_knot():
    knots = [0, 0, 0, 1, 1, 2, 3, 3, 3]
    assert find_span(2, knots, 6, 0.5) == 2
    assert find_span(2, knots, 6, 1.0) == 4
    assert find_span(2, knots, 6, 2.5) == 5
    assert find_span(2, knots, 6, 3.0) == 5


def test_find_spans_matches_scalar_search():
    knots = torch.tensor([0, 0, 0, 0, 0.2, 0.3, 0.3, 0.7, 1, 1, 1, 1], dtype=torch.float64)
    t_vals = torch.linspace(0, 1, 41, dtype=torch.float64)
    spans = find_spans(3, knots, 8, t_vals)
    assert spans.tolist() == [find_span(3, knots, 8, t) for t in t_vals]


def test_find_spans_batch():
    t_vals = torch.tensor([0.0, 0.25, 0.5, 0.75, 1.0], dtype=torch.float64)
    assert find_spans(2, KNOTS, 4, t_vals).tolist() == [2, 2, 3, 3, 3]


def test_clamp_parameters():
    t_vals = torch.tensor([-1.0, 0.5, 3.0], dtype=torch.float64)
    knots = torch.tensor([0, 0, 1, 2, 2], dtype=torch.float64)
    assert clamp_parameters(1, knots, 3, t_vals).tolist() == [0.0, 0.5, 2.0]


def test_select_points_using_spans():
    control_points = torch.arange(12, dtype=torch.float64).reshape(4, 3)
    selected = select_points_using_spans(control_points, torch.tensor([2, 3]), 2)
    assert selected.shape == (2, 3, 3)
    assert torch.equal(selected[0], control_points[0:3])
    assert torch.equal(selected[1], control_points[1:4])


def test_find_span_skips_empty_first_span():
    knots = torch.tensor([0, 0, 0, 1, 1], dtype=torch.float64)
    assert find_span(1, knots, 3, 0.0) == 2
    assert find_spans(1, knots, 3, torch.tensor([0.0], dtype=torch.float64)).tolist() == [2]
    assert find_span(1, knots, 3, 1.0) == 2


def test_find_span_below_domain_is_first_span():
    assert find_span(2, KNOTS, 4, -3.0) == 2
