from . import io, utils
from .curve import AbstractCurve, NurbsCurve, SetupResult, construct
from .errors import (InsufficientControlPoints, InvalidOrder, MalformedKnotVector,
                     MalformedWeightVector, NurbsSetupError, SetupErrorKind)
from .registry import create_curve, curve_from_dict, register_curve, registered_types

Curve = NurbsCurve
