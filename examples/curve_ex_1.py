import time
import nurbsline as nl
import torch

"""Demonstrates a nurbs curve in 2D space"""

control_points = torch.tensor([
    [1, 1],
    [3, 7],
    [5, 3],
    [6, 7],
    [8, 10],
    [10, 8]
], dtype=torch.float64)
order = 2
c = nl.NurbsCurve(
    order=order,
    control_points=control_points,
    weights=[1, 1, 4, 1, 1, 1],
    eval_delta=0.01
)
print(control_points.shape, c.knot_vector.shape)
print('Eval params:', c.eval_parameters.shape)
start = time.time()
points = c()
print("Evaluated {} points in {:.4f}s".format(len(points), time.time() - start))

points = points.T.detach().cpu().numpy()

try:
    import matplotlib.pyplot as plt
except ImportError:
    print('matplotlib not installed')
    exit(0)

plt.plot(*control_points.T, 'g*')
plt.plot(*points, label='order {}'.format(order))
plt.legend()
plt.show()
