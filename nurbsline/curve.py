import logging
from abc import ABCMeta, abstractmethod
from collections import namedtuple
from torch import nn
from methodtools import lru_cache
import torch
from .basis_functions import generate_rational_basis_functions, make_basis_matrix
from .errors import (InsufficientControlPoints, InvalidOrder, MalformedKnotVector,
                     MalformedWeightVector, NurbsSetupError)
from .evaluate import evaluate, evaluate_dense
from .registry import register_curve
from .spans import clamp_parameters, find_span, find_spans, select_points_using_spans
from .utils import generate_knot_vector, to_tensor

logger = logging.getLogger(__name__)

SetupResult = namedtuple("SetupResult", ["curve", "error"])


class AbstractCurve(nn.Module, metaclass=ABCMeta):
    _DEFAULT_EVAL_DELTA = 0.05

    _dtype = torch.float64
    _device = torch.device('cpu')

    type_tag = None

    @abstractmethod
    def evaluate(self, u, v=None, w=None):
        """Returns the point(s) on the curve at parameter(s) `u`"""

    @abstractmethod
    def param_dimensions(self):
        pass

    def forward(self):
        return self.evaluate(self.eval_parameters)


@register_curve("nurbs")
class NurbsCurve(AbstractCurve):
    """
    A rational B-spline curve of order `order` (1 = linear, 2 = quadratic, ...).

    The knot vector defaults to a clamped uniform one over [0, 1] and the weights default to 1,
    which reduces the curve to an ordinary B-spline. All inputs are copied; the curve only changes
    through `rebuild`. Without arguments it is the linear segment from (-1, 0, 0) to (1, 0, 0).
    """

    def __init__(self,
                 order=1,
                 control_points=((-1.0, 0.0, 0.0), (1.0, 0.0, 0.0)),
                 knot_vector=None,
                 weights=None,
                 eval_delta=None,
                 dtype=None,
                 device=None):
        super().__init__()
        if dtype is not None:
            self._dtype = dtype
        if device is not None:
            self._device = torch.device(device) if isinstance(device, str) else device
        self.eval_delta = None
        self.rebuild(order, control_points, knot_vector, weights)
        self.set_eval_delta(self._DEFAULT_EVAL_DELTA if eval_delta is None else eval_delta)

    def param_dimensions(self):
        return 1

    def rebuild(self, order, control_points, knot_vector=None, weights=None):
        """Validates the inputs and replaces the whole state of the curve"""
        order = self._validate_order(order)
        control_points = to_tensor(control_points, dtype=self._dtype, device=self._device, copy=True)
        num_ctrlpts = control_points.shape[0] if control_points.ndim else 0

        if num_ctrlpts < order + 1:
            raise InsufficientControlPoints(
                f"Order {order} requires at least {order + 1} control points, got {num_ctrlpts}")
        if control_points.ndim != 2:
            raise ValueError("Control points must have shape (num_control_points, ndim)")

        num_knots = num_ctrlpts + order + 1
        if knot_vector is None:
            knot_vector = generate_knot_vector(order, num_ctrlpts, dtype=self._dtype, device=self._device)
            logger.debug("Generated a clamped uniform knot vector of length %d", num_knots)
        else:
            knot_vector = to_tensor(knot_vector, dtype=self._dtype, device=self._device, copy=True)
            if knot_vector.ndim != 1 or knot_vector.shape[0] != num_knots:
                raise MalformedKnotVector(
                    f"Knot vector must have num_control_points + order + 1 = {num_knots} values, "
                    f"got shape {tuple(knot_vector.shape)}")

        if weights is None:
            weights = torch.ones(num_ctrlpts, dtype=self._dtype, device=self._device)
        else:
            weights = to_tensor(weights, dtype=self._dtype, device=self._device, copy=True)
            if weights.ndim != 1 or weights.shape[0] != num_ctrlpts:
                raise MalformedWeightVector(
                    f"Weight vector must have one value per control point ({num_ctrlpts}), "
                    f"got shape {tuple(weights.shape)}")
            if not torch.all(torch.isfinite(weights) & (weights > 0)):
                raise MalformedWeightVector("Weights must be finite and strictly positive")

        self.order = order
        self.ndim = control_points.shape[-1]
        self.register_buffer("control_points", control_points)
        self.register_buffer("knot_vector", knot_vector)
        self.register_buffer("weights", weights)
        self._get_sample_basis.cache_clear()
        if self.eval_delta is not None:
            self.set_eval_delta(self.eval_delta)

        logger.debug("Set up NURBS curve: order=%d, control points=%d, ndim=%d",
                     order, num_ctrlpts, self.ndim)

    @staticmethod
    def _validate_order(order):
        if isinstance(order, torch.Tensor):
            order = order.item()
        if isinstance(order, bool) or order % 1 != 0 or order < 1:
            raise InvalidOrder(f"Order must be a natural number, got {order}")
        return int(order)

    @property
    def num_control_points(self):
        return self.control_points.shape[0]

    @property
    def domain(self):
        return float(self.knot_vector[self.order]), float(self.knot_vector[self.num_control_points])

    def evaluate(self, u, v=None, w=None):
        """
        Evaluates the curve at `u`, a number or a 1-D sequence of parameters. `v` and `w` are
        accepted for compatibility with multi-parameter shapes and ignored. Parameters outside the
        domain are clamped onto it.
        """
        t_vals = to_tensor(u, dtype=self._dtype, device=self._device)
        scalar = t_vals.ndim == 0
        t_vals = clamp_parameters(self.order, self.knot_vector, self.num_control_points,
                                  t_vals.reshape(-1))

        spans = find_spans(self.order, self.knot_vector, self.num_control_points, t_vals)
        R = generate_rational_basis_functions(self.order, self.knot_vector, self.weights, spans, t_vals)
        points = evaluate(R, select_points_using_spans(self.control_points, spans, self.order))
        return points[0] if scalar else points

    def find_span(self, u):
        u = clamp_parameters(self.order, self.knot_vector, self.num_control_points,
                             to_tensor(u, dtype=self._dtype, device=self._device))
        return find_span(self.order, self.knot_vector, self.num_control_points, u)

    def basis(self, u):
        """Returns the span at `u` and the `order + 1` rational basis values active over it"""
        u = clamp_parameters(self.order, self.knot_vector, self.num_control_points,
                             to_tensor(u, dtype=self._dtype, device=self._device))
        span = find_span(self.order, self.knot_vector, self.num_control_points, u)
        return span, generate_rational_basis_functions(
            self.order, self.knot_vector, self.weights, span, u)

    def forward(self):
        return evaluate_dense(self._get_sample_basis(self.eval_parameters), self.control_points)

    @lru_cache(maxsize=2)
    def _get_sample_basis(self, eval_parameters):
        t_vals = clamp_parameters(self.order, self.knot_vector, self.num_control_points, eval_parameters)
        spans = find_spans(self.order, self.knot_vector, self.num_control_points, t_vals)
        R = generate_rational_basis_functions(self.order, self.knot_vector, self.weights, spans, t_vals)
        return make_basis_matrix(R, spans, self.order, self.num_control_points)

    def set_eval_delta(self, eval_delta):
        if not 0 < eval_delta < 1:
            raise ValueError("Evaluation delta must be between 0.0 and 1.0")
        self.eval_delta = eval_delta

        # Evenly spaced samples over the curve domain
        low, high = self.domain
        self.set_eval_parameters(torch.linspace(low, high, int(1 / eval_delta) + 1,
                                                dtype=self._dtype, device=self._device))

    def set_eval_parameters(self, eval_parameters):
        eval_parameters = to_tensor(eval_parameters, dtype=self._dtype, device=self._device, copy=True)
        self.register_buffer("eval_parameters", eval_parameters.reshape(-1), persistent=False)

    def to(self, *args, **kwargs):
        super().to(*args, **kwargs)
        # Accepts a device, a dtype or both, so read the result back from the buffers
        self._device = self.control_points.device
        self._dtype = self.control_points.dtype
        self._get_sample_basis.cache_clear()
        return self

    def to_dict(self):
        return {
            "type": self.type_tag,
            "order": self.order,
            "control_points": self.control_points.detach().cpu().numpy().tolist(),
            "knot_vector": self.knot_vector.detach().cpu().numpy().tolist(),
            "weights": self.weights.detach().cpu().numpy().tolist(),
            "eval_delta": self.eval_delta
        }

    @classmethod
    def from_dict(cls, data, device=None):
        return cls(
            order=data["order"],
            control_points=data["control_points"],
            knot_vector=data.get("knot_vector"),
            weights=data.get("weights"),
            eval_delta=data.get("eval_delta"),
            device=device
        )

    def copy(self):
        """Returns an independent curve with its own copies of every tensor"""
        other = type(self)(self.order,
                           self.control_points,
                           self.knot_vector,
                           self.weights,
                           eval_delta=self.eval_delta,
                           dtype=self._dtype,
                           device=self._device)
        other.set_eval_parameters(self.eval_parameters)
        return other

    def __copy__(self):
        return self.copy()

    def __deepcopy__(self, memo):
        return self.copy()

    def extra_repr(self):
        return f"order={self.order}, num_control_points={self.num_control_points}, ndim={self.ndim}"


def construct(order, control_points, knot_vector=None, weights=None, **kwargs):
    """
    Builds a NurbsCurve without raising on invalid input: returns SetupResult(curve, None) on
    success and SetupResult(None, kind) with a SetupErrorKind otherwise.
    """
    try:
        curve = NurbsCurve(order, control_points, knot_vector, weights, **kwargs)
    except NurbsSetupError as err:
        logger.debug("Curve setup failed (%s): %s", err.kind.value, err)
        return SetupResult(None, err.kind)
    return SetupResult(curve, None)
