def evaluate(R, points):
    """
    Combines the active control points with their rational basis values.

    R: (num_params, order + 1), points: (num_params, order + 1, ndim) -> (num_params, ndim)
    """
    points = R[..., None] * points
    return points.sum(-2)


def evaluate_dense(N, points):
    """N: (num_params, num_control_points), points: (num_control_points, ndim)"""
    N = N[..., None]
    points = N * points
    return points.sum(1)
