import math
import nurbsline as nl

"""Demonstrates an exact quarter circle in 3D space, built through the type registry"""

result = nl.construct(
    order=2,
    control_points=[[1, 0, 0], [1, 1, 0], [0, 1, 0]],
    knot_vector=[0, 0, 0, 1, 1, 1],
    weights=[1, math.sqrt(2) / 2, 1],
)
if result.error is not None:
    raise SystemExit("Could not build the curve: {}".format(result.error.value))
c = result.curve

for u in (0.0, 0.25, 0.5, 0.75, 1.0):
    point = c.evaluate(u)
    print("u={:.2f} point={} radius={:.6f}".format(u, point.tolist(), float(point.norm())))

same = nl.create_curve("nurbs", **{k: v for k, v in c.to_dict().items() if k != "type"})
print("Rebuilt from dict:", same)

points = c().T.detach().cpu().numpy()
import matplotlib.pyplot as plt
fig = plt.figure()
ax = fig.add_subplot(111, projection='3d')

ax.plot(*c.control_points.T.numpy(), 'g*')
ax.plot(*points, label='quarter circle')
plt.legend()
plt.show()
