import strax
import numpy as np

from ..calculator import EnergyDepositStep
from ..dtypes import quanta_fields
from ..plugin import IsquantaModelPlugin

export, __all__ = strax.exporter()


@export
class IonizationScintillation(IsquantaModelPlugin):
    """Plugin that calculates the number of ionization electrons surviving
    recombination and the number of scintillation photons for each energy
    deposit, at the electric field provided by electric_field_values.

    Every deposit is processed independently by a single Calculator. The
    electron numbers are not corrected for the electron lifetime.
    """

    __version__ = "0.1.0"

    depends_on = ("energy_deposits", "electric_field_values")
    provides = "quanta"
    data_kind = "energy_deposits"

    dtype = quanta_fields + strax.time_fields

    save_when = strax.SaveWhen.TARGET

    def setup(self):
        super().setup()

        self.calculator = self.build_calculator()
        self.vectorized_get_quanta = np.vectorize(self.get_quanta, otypes=[np.float64] * 3)

        self.log.debug(f"Using model parameters: {self.calculator.parameters}")

    def compute(self, energy_deposits):
        if len(energy_deposits) == 0:
            return np.zeros(0, dtype=self.dtype)

        result = np.zeros(len(energy_deposits), dtype=self.dtype)
        result["time"] = energy_deposits["time"]
        result["endtime"] = energy_deposits["endtime"]

        energy, electrons, photons = self.vectorized_get_quanta(
            energy_deposits["ed"],
            energy_deposits["step_length"],
            energy_deposits["x"],
            energy_deposits["y"],
            energy_deposits["z"],
            energy_deposits["pdg"],
            energy_deposits["e_field"],
        )
        result["energy_deposit"] = energy
        result["electrons"] = electrons
        result["photons"] = photons

        self.calculator.reset()

        return result

    def get_quanta(self, ed, step_length, x, y, z, pdg, e_field):
        """Function to get the quanta of a single energy deposit."""

        step = EnergyDepositStep(
            energy=float(ed),
            step_length=float(step_length),
            position=(float(x), float(y), float(z)),
            pdg=int(pdg),
        )
        self.calculator.process(step, efield=float(e_field))
        result = self.calculator.result()

        return result.energy_deposit, result.num_ion_electrons, result.num_scint_photons
