"""Fixed-size pool of simple physics particles."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .chunk import Block

Vec3 = tuple[float, float, float]

_DEFAULT_COLOR: Vec3 = (0.7, 0.7, 0.7)

_BLOCK_COLORS: dict[int, Vec3] = {
    Block.STONE: (0.5, 0.5, 0.5),
    Block.GRASS: (0.3, 0.7, 0.2),
    Block.DIRT: (0.6, 0.4, 0.2),
    Block.COBBLESTONE: (0.4, 0.4, 0.4),
    Block.OAK_PLANKS: (0.7, 0.5, 0.3),
    Block.BEDROCK: (0.2, 0.2, 0.2),
    Block.SAND: (0.9, 0.85, 0.6),
    Block.GRAVEL: (0.55, 0.5, 0.5),
    Block.GOLD_ORE: (0.8, 0.7, 0.2),
    Block.IRON_ORE: (0.7, 0.6, 0.55),
    Block.COAL_ORE: (0.15, 0.15, 0.15),
    Block.DIAMOND_ORE: (0.4, 0.9, 0.9),
    Block.OAK_LOG: (0.5, 0.35, 0.15),
    Block.OAK_LEAVES: (0.2, 0.6, 0.1),
    Block.GLASS: (0.8, 0.9, 1.0),
    Block.SNOW: (0.95, 0.95, 0.98),
    Block.OBSIDIAN: (0.1, 0.05, 0.15),
}


@dataclass
class Particle:
    """One particle slot; dead slots are reused by later emissions."""

    position: Vec3 = (0.0, 0.0, 0.0)
    velocity: Vec3 = (0.0, 0.0, 0.0)
    color: Vec3 = (1.0, 1.0, 1.0)
    lifetime: float = 1.0
    age: float = 0.0
    alive: bool = False


class ParticleEmitter:
    """Pool of at most ``max_particles`` particles; emissions beyond that are dropped."""

    def __init__(self, max_particles: int) -> None:
        if max_particles < 0:
            raise ValueError("max_particles must not be negative")
        self._max_particles = max_particles
        self._particles = [Particle() for _ in range(max_particles)]

    def emit(self, position: Vec3, velocity: Vec3, color: Vec3,
             lifetime: float) -> None:
        """Bring a dead slot to life; does nothing when the pool is full."""
        slot = next((p for p in self._particles if not p.alive), None)
        if slot is None:
            return
        slot.position = tuple(position)
        slot.velocity = tuple(velocity)
        slot.color = tuple(color)
        slot.lifetime = lifetime
        slot.age = 0.0
        slot.alive = True

    def emit_block_break(self, position: Vec3, block_id: int, count: int) -> None:
        """Emit ``count`` particles fanning upward in the colour of ``block_id``."""
        color = self.block_color(block_id)
        for i in range(count):
            angle = i * 2.0 * math.pi / count
            speed = 2.0 + (i % 3) * 0.5
            velocity = (math.cos(angle) * speed,
                        3.0 + (i % 4) * 0.5,
                        math.sin(angle) * speed)
            self.emit(position, velocity, color, 1.0 + (i % 3) * 0.3)

    def update(self, dt: float, gravity: float) -> None:
        """Advance live particles by ``dt`` seconds under downward ``gravity``."""
        for p in self._particles:
            if not p.alive:
                continue
            vx, vy, vz = p.velocity
            vy -= gravity * dt
            p.velocity = (vx, vy, vz)
            px, py, pz = p.position
            p.position = (px + vx * dt, py + vy * dt, pz + vz * dt)
            p.age += dt
            if p.age >= p.lifetime:
                p.alive = False

    @property
    def particles(self) -> tuple[Particle, ...]:
        """Every slot in the pool, alive or not."""
        return tuple(self._particles)

    @property
    def alive_count(self) -> int:
        return sum(1 for p in self._particles if p.alive)

    @property
    def max_particles(self) -> int:
        return self._max_particles

    @staticmethod
    def block_color(block_id: int) -> Vec3:
        """Representative colour for debris of ``block_id``."""
        return _BLOCK_COLORS.get(block_id, _DEFAULT_COLOR)