import logging
import strax
from typing import Protocol, runtime_checkable

import numpy as np
from scipy.interpolate import RegularGridInterpolator

from .common import distorted_efield_magnitude

export, __all__ = strax.exporter()

logging.basicConfig(handlers=[logging.StreamHandler()])
log = logging.getLogger("isquanta.field")


@export
@runtime_checkable
class FieldSampler(Protocol):
    """Anything that can tell the fractional electric field offset at a
    position.

    efield_offsets is only queried when enabled is True.
    """

    enabled: bool

    def efield_offsets(self, position) -> np.ndarray: ...


@export
class NoFieldDistortion:
    """Uniform field, spatial corrections switched off."""

    enabled = False

    def efield_offsets(self, position):
        return np.zeros(3)

    def efield_offsets_vectorized(self, positions):
        return np.zeros((len(positions), 3))


@export
class ConstantFieldOffset:
    """Same fractional offset everywhere in the detector."""

    enabled = True

    def __init__(self, offset):
        offset = np.asarray(offset, dtype=np.float64)
        if offset.shape != (3,):
            raise ValueError(f"Field offset must have 3 components, got shape {offset.shape}")
        self.offset = offset

    def efield_offsets(self, position):
        return self.offset.copy()

    def efield_offsets_vectorized(self, positions):
        return np.tile(self.offset, (len(positions), 1))


@export
class GridFieldSampler:
    """Field offsets interpolated linearly from a regular x, y, z grid.

    Args:
        x, y, z: grid points along each axis [cm], strictly ascending.
        offsets: array of shape (len(x), len(y), len(z), 3).
        enabled: switch for the spatial correction.

    Positions outside of the grid are moved onto its boundary.
    """

    def __init__(self, x, y, z, offsets, enabled=True):
        self.axes = tuple(np.asarray(axis, dtype=np.float64) for axis in (x, y, z))
        offsets = np.asarray(offsets, dtype=np.float64)

        expected_shape = tuple(len(axis) for axis in self.axes) + (3,)
        if offsets.shape != expected_shape:
            raise ValueError(
                f"Offset grid has shape {offsets.shape}, expected {expected_shape}"
            )

        self.enabled = enabled
        self._lower = np.array([axis[0] for axis in self.axes])
        self._upper = np.array([axis[-1] for axis in self.axes])
        self._interpolator = RegularGridInterpolator(self.axes, offsets, method="linear")

    def efield_offsets(self, position):
        return self.efield_offsets_vectorized(np.atleast_2d(position))[0]

    def efield_offsets_vectorized(self, positions):
        positions = np.clip(np.asarray(positions, dtype=np.float64), self._lower, self._upper)
        return self._interpolator(positions)


@export
class MapFieldSampler:
    """Wraps a callable map taking positions of shape (n, 3) and returning
    offsets of shape (n, 3), for example a straxen interpolating map."""

    enabled = True

    def __init__(self, offset_map):
        self.offset_map = offset_map

    def efield_offsets(self, position):
        return self.efield_offsets_vectorized(np.atleast_2d(position))[0]

    def efield_offsets_vectorized(self, positions):
        offsets = np.asarray(self.offset_map(np.asarray(positions)), dtype=np.float64)
        return offsets.reshape(-1, 3)


@export
def as_field_sampler(obj):
    """Turn a config value into a FieldSampler.

    None means no distortion, samplers are used as they are and any other
    callable is treated as an offset map.
    """
    if obj is None:
        return NoFieldDistortion()
    if isinstance(obj, FieldSampler):
        return obj
    if callable(obj):
        return MapFieldSampler(obj)
    raise TypeError(f"Can not use {obj!r} as electric field sampler")


@export
def corrected_field(nominal_field, position, field_sampler):
    """Electric field magnitude at position [same unit as nominal_field]."""

    if not field_sampler.enabled:
        return nominal_field

    offsets = field_sampler.efield_offsets(position)
    return float(
        distorted_efield_magnitude(
            float(nominal_field), float(offsets[0]), float(offsets[1]), float(offsets[2])
        )
    )


@export
def corrected_field_vectorized(nominal_field, positions, field_sampler):
    """Electric field magnitudes for positions of shape (n, 3)."""

    positions = np.asarray(positions, dtype=np.float64).reshape(-1, 3)
    if not field_sampler.enabled:
        return np.full(len(positions), nominal_field, dtype=np.float64)

    if hasattr(field_sampler, "efield_offsets_vectorized"):
        offsets = field_sampler.efield_offsets_vectorized(positions)
    else:
        offsets = np.array([field_sampler.efield_offsets(position) for position in positions])
    offsets = np.asarray(offsets, dtype=np.float64).reshape(-1, 3)

    return distorted_efield_magnitude(
        float(nominal_field), offsets[:, 0], offsets[:, 1], offsets[:, 2]
    )
