# lietransforms

Lie groups and their Lie algebras for 2D and 3D transformations, built on
numpy. Each group lives in its own module:

| Module                   | Class        | What it is                                          |
|--------------------------|--------------|-----------------------------------------------------|
| `lietransforms.so2`      | `SO2`        | rotation in the plane, stored as a unit complex     |
| `lietransforms.se2`      | `SE2`        | rotation and translation in the plane               |
| `lietransforms.so3`      | `SO3`        | rotation in space, stored as a unit `Quaternion`    |
| `lietransforms.se3`      | `SE3`        | rotation and translation in space                   |
| `lietransforms.scso3`    | `ScSO3`      | rotation with a positive scale (quaternion norm)    |
| `lietransforms.sim3`     | `Sim3`       | similarity transform: scale, rotation, translation  |

Every group offers composition with `*` (with another element of the group,
or applied to a vector), `inverse()`, `matrix()`, the adjoint `adj()`, and the
maps between group and algebra: `exp`, `log`, `hat`, `vee`, `lie_bracket`
and (except `SO2`) `d_lie_bracket_ab_by_d_a`. `SO3` and `ScSO3` also have
`exp_and_theta` and `log_and_theta`, which return the rotation angle alongside
the result as a tuple, and `generator(i)`. Each class carries its number of
degrees of freedom as `DOF`.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Examples

```python
import numpy as np
from lietransforms.so3 import SO3
from lietransforms.se3 import SE3

rotation = SO3.exp(np.array([0.2, 0.5, -1.0]))
pose = SE3(rotation, np.array([10.0, 0.0, 0.0]))

point = np.array([1.0, 2.0, 4.0])
moved = pose * point              # rotate, then translate
back = pose.inverse() * moved     # equals point

twist = pose.log()                # 6-vector: translation part, then rotation part
same_pose = SE3.exp(twist)        # same_pose.matrix() matches pose.matrix()
```

Similarity transforms carry the log of the scale as the last algebra
coordinate:

```python
import numpy as np
from lietransforms.scso3 import ScSO3
from lietransforms.sim3 import Sim3

scaled_rotation = ScSO3.exp(np.array([0.2, 0.5, 0.0, 1.0]))  # scale e**1.0
sim = Sim3(scaled_rotation, np.array([0.0, 100.0, 5.0]))
print(sim.scale, sim.log())
rigid = sim.to_se3()              # same rotation and translation, scale dropped
```

Planar transforms:

```python
import numpy as np
from lietransforms.so2 import SO2
from lietransforms.se2 import SE2

pose = SE2(SO2.exp(0.3), np.array([2.0, 0.0]))
print(pose * np.array([1.0, 2.0]))
print(SE2.exp(pose.log()).matrix())
```

## Constructing elements

- `SO2(unit_complex)` normalises the complex number; `SO2.from_matrix` and
  `SO2.exp(theta)` are alternatives.
- `SE2(rotation, translation)` takes an `SO2`, an angle in radians or a 2x2
  rotation matrix.
- `SO3(quaternion)` normalises a `Quaternion`; `SO3.from_matrix` and
  `SO3.from_euler(rot_x, rot_y, rot_z)` are alternatives.
- `SE3(rotation, translation)` takes an `SO3`, a `Quaternion` or a 3x3
  rotation matrix.
- `ScSO3(quaternion)` keeps the quaternion as given, its norm being the
  scale; `ScSO3.from_matrix` takes scale times a rotation matrix and
  `ScSO3.from_scale_and_rotation` a scale and an `SO3` or rotation matrix.
- `Sim3(scso3, translation)` takes a `ScSO3` or a `Quaternion`;
  `Sim3.from_se3` builds one with scale 1.

Read-only properties give access to the parts: `unit_complex`, `so2`,
`unit_quaternion`, `so3`, `quaternion`, `scale` and `translation` (a copy).

## Conventions

- Tangent vectors of `SE2`, `SE3` and `Sim3` put the translational part first,
  then rotation, then (for `Sim3`) the log of the scale.
- `ScSO3` tangent vectors are `(omega_x, omega_y, omega_z, sigma)` with
  scale `exp(sigma)`.
- Inputs of the wrong shape raise `ValueError`, as do zero quaternions or
  complex numbers and non-positive scales.
- `vee` raises `ValueError` when the rotational block of the matrix is not
  of the algebra's form (not skew-symmetric, or for `ScSO3` and `Sim3` with
  unequal diagonal entries).

## Scope

This is a library only: it has no command-line tool.