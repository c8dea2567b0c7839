import json
import logging
import numpy as np

from .registry import curve_from_dict

logger = logging.getLogger(__name__)


def load_json_file(path, device=None):
    """Load parametric curves from a JSON file written by `save_json_file`"""
    def _parse_dict(obj, obj_type):
        if obj_type == "curve":
            obj = dict(obj)
            obj["control_points"] = np.array(obj["control_points"], dtype=np.float64)
            for key in ("knot_vector", "weights"):
                if obj.get(key) is not None:
                    obj[key] = np.array(obj[key], dtype=np.float64)
            return curve_from_dict(obj, device=device)
        raise ValueError(f"Unsupported object type: {obj_type}")

    with open(path, "r") as f_handle:
        data = json.load(f_handle)

    data = data["shape"]
    obj_type = data["type"]
    loaded = [_parse_dict(entry, obj_type) for entry in data["data"]]
    logger.info("Loaded %d %s(s) from %s", len(loaded), obj_type, path)
    return loaded


def save_json_file(path, curves):
    data = {
        "shape": {
            "type": "curve",
            "data": [curve.to_dict() for curve in curves]
        }
    }
    with open(path, "w") as f_handle:
        json.dump(data, f_handle, indent=2)
    logger.info("Saved %d curve(s) to %s", len(data["shape"]["data"]), path)
