"""Voxel ray traversal for picking the block under the crosshair."""

from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import dataclass

from .chunk import Block
from .chunk import is_solid as _block_is_solid
from .math_utils import int_floor

BlockQuery = Callable[[int, int, int], int]
IVec3 = tuple[int, int, int]
Vec3 = tuple[float, float, float]


@dataclass(frozen=True)
class RaycastResult:
    """Outcome of a ray cast; ``face_normal`` points out of the face entered."""

    hit: bool = False
    block_position: IVec3 = (0, 0, 0)
    face_normal: IVec3 = (0, 0, 0)
    distance: float = 0.0


def _axis_setup(origin: float, direction: float, cell: int) -> tuple[int, float, float]:
    step = 1 if direction >= 0.0 else -1
    if direction == 0.0:
        return step, math.inf, math.inf
    boundary = cell + 1.0 if step > 0 else float(cell)
    return step, (boundary - origin) / direction, abs(1.0 / direction)


def cast_ray(origin: Vec3, direction: Vec3, max_distance: float,
             block_query: BlockQuery,
             is_solid: Callable[[int], bool] = _block_is_solid) -> RaycastResult:
    """Walk the voxel grid from ``origin`` and return the first solid block."""
    length = math.hypot(*direction)
    if length < 1e-9:
        return RaycastResult()
    dx, dy, dz = (c / length for c in direction)
    ox, oy, oz = origin

    x, y, z = int_floor(ox), int_floor(oy), int_floor(oz)
    step_x, t_max_x, t_delta_x = _axis_setup(ox, dx, x)
    step_y, t_max_y, t_delta_y = _axis_setup(oy, dy, y)
    step_z, t_max_z, t_delta_z = _axis_setup(oz, dz, z)

    face_normal: IVec3 = (0, 0, 0)
    distance = 0.0

    while distance <= max_distance:
        block = block_query(x, y, z)
        if block != Block.AIR and is_solid(block):
            return RaycastResult(True, (x, y, z), face_normal, distance)

        if t_max_x < t_max_y and t_max_x < t_max_z:
            distance = t_max_x
            if distance > max_distance:
                break
            x += step_x
            t_max_x += t_delta_x
            face_normal = (-step_x, 0, 0)
        elif t_max_x >= t_max_y and t_max_y < t_max_z:
            distance = t_max_y
            if distance > max_distance:
                break
            y += step_y
            t_max_y += t_delta_y
            face_normal = (0, -step_y, 0)
        else:
            distance = t_max_z
            if distance > max_distance:
                break
            z += step_z
            t_max_z += t_delta_z
            face_normal = (0, 0, -step_z)

    return RaycastResult()