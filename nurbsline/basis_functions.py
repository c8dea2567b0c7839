import torch


def make_basis_matrix(R, spans, order, num_control_points):
    """Scatters the per-span basis values `R` into a dense (num_params, num_control_points) matrix"""
    out_shape = (R.shape[0], num_control_points)
    spans = spans - order + torch.arange(0, order + 1, device=R.device)[:, None]
    spans = spans.T.reshape(-1)
    first_index = torch.arange(R.shape[0], device=R.device)
    first_index = first_index.repeat_interleave(R.shape[1])
    indices = torch.stack((first_index, spans), 0)
    values = R.reshape(-1)
    sparse = torch.sparse_coo_tensor(indices, values, out_shape, dtype=R.dtype, device=R.device)
    return sparse.to_dense()


def _recurse_basis_function(order, knot_vector, span, knot):
    """
    Computes the `order + 1` non-vanishing B-spline basis values N_{span-order}..N_{span} at `knot`
    using the triangular Cox-de Boor scheme.
    """
    left = torch.zeros(order + 1, dtype=knot_vector.dtype, device=knot_vector.device)
    right = torch.zeros(order + 1, dtype=knot_vector.dtype, device=knot_vector.device)
    N = torch.ones(order + 1, dtype=knot_vector.dtype, device=knot_vector.device)

    for j in range(1, order + 1):
        left[j] = knot - knot_vector[span + 1 - j]
        right[j] = knot_vector[span + j] - knot
        saved = 0.0
        for r in range(0, j):
            temp = N[r] / (right[r + 1] + left[j - r])
            N[r] = saved + right[r + 1] * temp
            saved = left[j - r] * temp
        N[j] = saved

    return N


def _basis_function_batch(order, knot_vector, spans, eval_parameters):
    """Same recursion as `_recurse_basis_function`, vectorised over a batch of parameters"""
    num = eval_parameters.shape[0]
    left = eval_parameters.new_zeros((num, order + 1))
    right = eval_parameters.new_zeros((num, order + 1))
    N = eval_parameters.new_ones((num, order + 1))

    for j in range(1, order + 1):
        left[:, j] = eval_parameters - knot_vector[spans + 1 - j]
        right[:, j] = knot_vector[spans + j] - eval_parameters
        saved = eval_parameters.new_zeros(num)
        for r in range(0, j):
            temp = N[:, r] / (right[:, r + 1] + left[:, j - r])
            N[:, r] = saved + right[:, r + 1] * temp
            saved = left[:, j - r] * temp
        N[:, j] = saved

    return N


def generate_basis_functions(order, knots, spans, eval_parameters):
    """
    Returns the ordinary B-spline basis values for each parameter. A 0-d `spans` / `eval_parameters`
    pair gives a (order + 1,) tensor, 1-D tensors give (num_params, order + 1).
    """
    if eval_parameters.ndim == 0:
        return _recurse_basis_function(order, knots, int(spans), eval_parameters)
    return _basis_function_batch(order, knots, spans, eval_parameters)


def generate_rational_basis_functions(order, knots, weights, spans, eval_parameters):
    """
    Weights the B-spline basis values by the active control point weights and renormalises them,
    so each row sums to one. Weights are expected to be strictly positive.
    """
    N = generate_basis_functions(order, knots, spans, eval_parameters)
    offsets = torch.arange(order + 1, device=knots.device)
    if eval_parameters.ndim == 0:
        active_weights = weights[int(spans) - order + offsets]
    else:
        active_weights = weights[spans[:, None] - order + offsets]

    numerator = N * active_weights
    denominator = numerator.sum(-1, keepdim=True)
    return numerator / denominator
