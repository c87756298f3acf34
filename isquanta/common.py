import numba
import numpy as np

# Guard against spurious values of dE/dx [MeV/cm]
DEDX_FLOOR = 1.0

# Conversion of the deposited energy from MeV to GeV
MEV_TO_GEV = 1.0e-3


@numba.njit(error_model="numpy")
def clamped_dedx(energy, step_length):
    """Energy loss per unit length, clamped to DEDX_FLOOR.

    A zero step length has no defined dE/dx and takes the floor value.
    """
    if step_length != 0:
        dedx = energy / step_length
    else:
        dedx = DEDX_FLOOR

    if dedx < DEDX_FLOOR:
        dedx = DEDX_FLOOR
    return dedx


@numba.njit(error_model="numpy")
def modified_box_survival(dedx, efield, modbox_a, modbox_b):
    """Fraction of ionization electrons escaping recombination in the
    modified box model."""
    xi = modbox_b * dedx / efield
    # Complete recombination in the limit of a vanishing field
    if np.isinf(xi):
        return 0.0
    return np.log(modbox_a + xi) / xi


@numba.njit(error_model="numpy")
def birks_survival(dedx, efield, recomb_a, recomb_k):
    """Fraction of ionization electrons escaping recombination in the
    Birks model. recomb_k must already be divided by the medium density."""
    return recomb_a / (1.0 + dedx * recomb_k / efield)


@numba.njit(error_model="numpy")
def distorted_efield_magnitude(efield, offset_x, offset_y, offset_z):
    # y and z terms are added to themselves, not to the nominal field
    return np.sqrt(
        (efield + efield * offset_x) ** 2
        + (efield * offset_y + efield * offset_y) ** 2
        + (efield * offset_z + efield * offset_z) ** 2
    )


@numba.njit(error_model="numpy")
def electrons_from_energy(energy, survival, gev_to_electrons):
    return gev_to_electrons * MEV_TO_GEV * energy * survival
