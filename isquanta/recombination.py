import logging
import strax
from dataclasses import dataclass

from .common import (
    clamped_dedx,
    modified_box_survival,
    birks_survival,
    electrons_from_energy,
)
from .field import corrected_field
from .medium import density_at

export, __all__ = strax.exporter()

logging.basicConfig(handlers=[logging.StreamHandler()])
log = logging.getLogger("isquanta.recombination")


@export
@dataclass(frozen=True)
class RecombinationConstants:
    """Recombination constants ready to be used per energy deposit.

    recomb_k is divided by the density of the medium, so dE/dx can be
    given in MeV/cm.
    """

    recomb_a: float
    recomb_k: float
    modbox_a: float
    modbox_b: float
    use_modbox_recomb: bool
    gev_to_electrons: float
    electric_field: float

    @classmethod
    def from_parameters(cls, parameters, medium):
        density = density_at(medium, parameters.temperature)
        return cls(
            recomb_a=float(parameters.recomb_a),
            recomb_k=float(parameters.recomb_k) / density,
            modbox_a=float(parameters.modbox_a),
            modbox_b=float(parameters.modbox_b),
            use_modbox_recomb=bool(parameters.use_modbox_recomb),
            gev_to_electrons=float(parameters.gev_to_electrons),
            electric_field=float(parameters.electric_field),
        )


@export
class RecombinationModel:
    """Number of ionization electrons surviving recombination.

    The returned numbers are not corrected for the electron lifetime.
    """

    def __init__(self, constants, field_sampler):
        self.constants = constants
        self.field_sampler = field_sampler

    def survival_fraction(self, dedx, efield, step_length):
        c = self.constants
        if c.use_modbox_recomb:
            if step_length == 0:
                return 0.0
            return float(modified_box_survival(dedx, efield, c.modbox_a, c.modbox_b))
        return float(birks_survival(dedx, efield, c.recomb_a, c.recomb_k))

    def efield_at(self, position):
        return corrected_field(self.constants.electric_field, position, self.field_sampler)

    def compute_ionization(self, energy, step_length, position, efield=None):
        """Electrons for one deposit. efield [kV/cm] overrides the field
        looked up at position, e.g. one calculated upstream."""
        dedx = float(clamped_dedx(float(energy), float(step_length)))
        if efield is None:
            efield = self.efield_at(position)
        efield = float(efield)

        recomb = self.survival_fraction(dedx, efield, step_length)
        electrons = float(
            electrons_from_energy(float(energy), recomb, self.constants.gev_to_electrons)
        )

        log.debug(
            f"Electrons produced for {energy} MeV deposited with {recomb} "
            f"recombination: {electrons}"
        )
        return electrons

    def compute_ionization_for_step(self, step, efield=None):
        return self.compute_ionization(step.energy, step.step_length, step.position, efield)
