import json

import pytest
import torch

from nurbsline import NurbsCurve
from nurbsline.io import load_json_file, save_json_file


def test_save_and_load(tmp_path):
    curves = [
        NurbsCurve(1, [[0, 0, 0], [1, 1, 1]]),
        NurbsCurve(2, [[1, 0, 0], [1, 1, 0], [0, 1, 0]], knot_vector=[0, 0, 0, 1, 1, 1],
                   weights=[1, 0.7071067811865476, 1], eval_delta=0.1),
    ]
    path = tmp_path / "curves.json"
    save_json_file(path, curves)
    loaded = load_json_file(path)

    assert len(loaded) == 2
    t_vals = torch.linspace(0, 1, 11)
    for original, restored in zip(curves, loaded):
        assert restored.order == original.order
        assert torch.allclose(restored.evaluate(t_vals), original.evaluate(t_vals))


def test_load_unsupported_type(tmp_path):
    path = tmp_path / "surface.json"
    path.write_text(json.dumps({"shape": {"type": "surface", "data": [{}]}}))
    with pytest.raises(ValueError):
        load_json_file(path)
