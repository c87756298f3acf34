import strax
import numpy as np

from ..field import as_field_sampler, corrected_field_vectorized
from ..dtypes import electric_fields
from ..plugin import IsquantaModelPlugin

export, __all__ = strax.exporter()


@export
class CorrectedElectricField(IsquantaModelPlugin):
    """Plugin that calculates the electric field at the midpoint of each
    energy deposit, including the spatial field distortion if an offset map
    is configured."""

    __version__ = "0.1.0"

    depends_on = "energy_deposits"
    provides = "electric_field_values"
    data_kind = "energy_deposits"

    save_when = strax.SaveWhen.TARGET

    dtype = electric_fields + strax.time_fields

    def setup(self):
        super().setup()
        self.field_sampler = as_field_sampler(self.efield_offset_map)

    def compute(self, energy_deposits):
        if len(energy_deposits) == 0:
            return np.zeros(0, dtype=self.dtype)

        electric_field_array = np.zeros(len(energy_deposits), dtype=self.dtype)
        electric_field_array["time"] = energy_deposits["time"]
        electric_field_array["endtime"] = energy_deposits["endtime"]

        positions = np.stack(
            (energy_deposits["x"], energy_deposits["y"], energy_deposits["z"]), axis=1
        )
        electric_field_array["e_field"] = corrected_field_vectorized(
            self.electric_field, positions, self.field_sampler
        )

        # Clip negative values to 0
        n_negative_values = np.sum(electric_field_array["e_field"] < 0)
        if n_negative_values > 0:
            self.log.warning(
                f"Found {n_negative_values} negative electric field values. Clipping to 0."
            )
        electric_field_array["e_field"] = np.clip(electric_field_array["e_field"], 0, None)

        # Clip NaN values to 0
        n_nan_values = np.sum(np.isnan(electric_field_array["e_field"]))
        if n_nan_values > 0:
            self.log.warning(f"Found {n_nan_values} NaN electric field values. Clipping to 0.")
        electric_field_array["e_field"] = np.nan_to_num(electric_field_array["e_field"])

        return electric_field_array
