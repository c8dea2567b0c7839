from enum import Enum


class SetupErrorKind(Enum):
    INVALID_ORDER = "invalid_order"
    INSUFFICIENT_CONTROL_POINTS = "insufficient_control_points"
    MALFORMED_KNOT_VECTOR = "malformed_knot_vector"
    MALFORMED_WEIGHT_VECTOR = "malformed_weight_vector"


class NurbsSetupError(ValueError):
    """Base class for the errors raised while setting up a curve"""
    kind = None


class InvalidOrder(NurbsSetupError):
    kind = SetupErrorKind.INVALID_ORDER


class InsufficientControlPoints(NurbsSetupError):
    kind = SetupErrorKind.INSUFFICIENT_CONTROL_POINTS


class MalformedKnotVector(NurbsSetupError):
    kind = SetupErrorKind.MALFORMED_KNOT_VECTOR


class MalformedWeightVector(NurbsSetupError):
    kind = SetupErrorKind.MALFORMED_WEIGHT_VECTOR
