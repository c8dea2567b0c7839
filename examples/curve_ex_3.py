import nurbsline as nl
import torch

"""Demonstrates a nurbs curve with a custom knot vector, saved to and loaded from JSON"""

control_points = torch.tensor([
    [1, 1, 0],
    [3, 7, 0],
    [5, 3, 0],
    [6, 7, 0],
    [8, 10, 0]
], dtype=torch.float64)
order = 2
print(nl.utils.generate_knot_vector(order, len(control_points)))
knot_vector = torch.tensor([0.0000, 0.0000, 0.0000, 0.1, 0.3333, 1.0000, 1.0000, 1.0000])
c = nl.NurbsCurve(
    order=order,
    control_points=control_points,
    knot_vector=knot_vector,
    eval_delta=0.03
)
print('Eval params:', c.eval_parameters.shape)

nl.io.save_json_file("curve_ex_3.json", [c])
loaded, = nl.io.load_json_file("curve_ex_3.json")
points = loaded().T.detach().cpu().numpy()

import matplotlib.pyplot as plt

plt.plot(*control_points[:, :2].T, 'g*')
plt.plot(*points[:2], label='custom knots')
plt.legend()
plt.show()
