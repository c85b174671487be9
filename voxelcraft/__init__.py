"""Voxel world pieces: noise, chunks and region files, ore veins, particles, raycasting and player physics."""

__version__ = "0.1.0"