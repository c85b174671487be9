"""Player body: gravity, jumping and axis-by-axis collision with blocks."""

from __future__ import annotations

import itertools
import math
from collections.abc import Callable
from dataclasses import dataclass

from .chunk import is_solid as _block_is_solid
from .game_loop import DEFAULT_TICK_DURATION
from .math_utils import int_floor

Vec3 = tuple[float, float, float]
BlockQuery = Callable[[int, int, int], int]

GRAVITY = 32.0
TERMINAL_VELOCITY = 78.4
JUMP_VELOCITY = 9.0
EYE_HEIGHT = 1.62
PLAYER_WIDTH = 0.6
PLAYER_HEIGHT = 1.8
TICK_DT = DEFAULT_TICK_DURATION

_COLLISION_NUDGE = 1e-4
_GROUND_PROBE = 0.01
_EDGE_EPSILON = 1e-6


@dataclass(frozen=True)
class SweptResult:
    """Fraction of a move completed before contact (1.0 = no contact)."""

    t: float = 1.0
    normal: Vec3 = (0.0, 0.0, 0.0)


@dataclass(frozen=True)
class AABB:
    """Axis-aligned box given by its minimum and maximum corners."""

    min: Vec3
    max: Vec3

    def sweep(self, velocity: Vec3, other: AABB) -> SweptResult:
        """Sweep this box by ``velocity`` against the static box ``other``."""
        t_enter = -math.inf
        t_exit = math.inf
        hit_axis = -1
        for axis in range(3):
            v = velocity[axis]
            if v == 0.0:
                if (self.max[axis] <= other.min[axis]
                        or self.min[axis] >= other.max[axis]):
                    return SweptResult()
                continue
            if v > 0.0:
                near = (other.min[axis] - self.max[axis]) / v
                far = (other.max[axis] - self.min[axis]) / v
            else:
                near = (other.max[axis] - self.min[axis]) / v
                far = (other.min[axis] - self.max[axis]) / v
            if near > t_enter:
                t_enter = near
                hit_axis = axis
            t_exit = min(t_exit, far)

        if hit_axis < 0 or t_enter > t_exit or t_enter < -1e-7 or t_enter > 1.0:
            return SweptResult()
        normal = [0.0, 0.0, 0.0]
        normal[hit_axis] = -1.0 if velocity[hit_axis] > 0.0 else 1.0
        return SweptResult(max(t_enter, 0.0), tuple(normal))


class Player:
    """A box-shaped player whose ``position`` is the centre of its feet."""

    def __init__(self, position: Vec3) -> None:
        self.position: Vec3 = tuple(position)
        self.velocity: Vec3 = (0.0, 0.0, 0.0)
        self._grounded = False

    def update(self, block_query: BlockQuery,
               is_solid: Callable[[int], bool] = _block_is_solid) -> None:
        """Advance one fixed tick: gravity, collision response, ground check."""
        vx, vy, vz = self.velocity
        vy = max(vy - GRAVITY * TICK_DT, -TERMINAL_VELOCITY)
        self.velocity = (vx, vy, vz)

        displacement = (vx * TICK_DT, vy * TICK_DT, vz * TICK_DT)
        for axis in (1, 0, 2):
            self._resolve_axis(axis, displacement, block_query, is_solid)
        self._update_grounded(block_query, is_solid)

    def jump(self) -> None:
        """Launch upward if standing on the ground."""
        if self._grounded:
            vx, _, vz = self.velocity
            self.velocity = (vx, JUMP_VELOCITY, vz)
            self._grounded = False

    @property
    def eye_position(self) -> Vec3:
        x, y, z = self.position
        return (x, y + EYE_HEIGHT, z)

    def is_grounded(self) -> bool:
        return self._grounded

    @property
    def aabb(self) -> AABB:
        return self.make_aabb(self.position)

    @staticmethod
    def make_aabb(feet_position: Vec3) -> AABB:
        """Bounding box of a player standing at ``feet_position``."""
        x, y, z = feet_position
        half = PLAYER_WIDTH * 0.5
        return AABB((x - half, y, z - half), (x + half, y + PLAYER_HEIGHT, z + half))

    def _resolve_axis(self, axis: int, displacement: Vec3,
                      block_query: BlockQuery,
                      is_solid: Callable[[int], bool]) -> None:
        d = displacement[axis]
        if abs(d) < 1e-8:
            return

        box = self.aabb
        axis_velocity = [0.0, 0.0, 0.0]
        axis_velocity[axis] = d
        axis_velocity = tuple(axis_velocity)

        lo = list(box.min)
        hi = list(box.max)
        if d > 0.0:
            hi[axis] += d
        else:
            lo[axis] += d
        ranges = [range(int_floor(lo[i]), int_floor(hi[i] - _EDGE_EPSILON) + 1)
                  for i in range(3)]

        min_t = 1.0
        hit_normal: Vec3 = (0.0, 0.0, 0.0)
        for bx, by, bz in itertools.product(*ranges):
            if not is_solid(block_query(bx, by, bz)):
                continue
            block_box = AABB((bx, by, bz), (bx + 1, by + 1, bz + 1))
            result = box.sweep(axis_velocity, block_box)
            if result.t < min_t:
                min_t = result.t
                hit_normal = result.normal

        move = d * min_t
        if min_t < 1.0:
            move += hit_normal[axis] * _COLLISION_NUDGE

        position = list(self.position)
        position[axis] += move
        self.position = tuple(position)

        if min_t < 1.0:
            velocity = list(self.velocity)
            velocity[axis] = 0.0
            self.velocity = tuple(velocity)

    def _update_grounded(self, block_query: BlockQuery,
                         is_solid: Callable[[int], bool]) -> None:
        box = self.aabb
        by = int_floor(box.min[1] - _GROUND_PROBE)
        block_top = float(by + 1)
        xs = range(int_floor(box.min[0]), int_floor(box.max[0] - _EDGE_EPSILON) + 1)
        zs = range(int_floor(box.min[2]), int_floor(box.max[2] - _EDGE_EPSILON) + 1)
        self._grounded = any(
            is_solid(block_query(bx, by, bz))
            and abs(box.min[1] - block_top) < _GROUND_PROBE + 1e-4
            for bx, bz in itertools.product(xs, zs)
        )