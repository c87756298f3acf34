import math
import numbers
import strax
from dataclasses import dataclass, field, fields, replace

export, __all__ = strax.exporter()


@export
class ConfigurationError(ValueError):
    """Raised when the model can not be set up from the given configuration."""


@export
@dataclass(frozen=True)
class ScintillationYields:
    """Scintillation yields per particle species [photons/MeV]."""

    proton: float = 19200.0
    muon: float = 24000.0
    pion: float = 24000.0
    kaon: float = 24000.0
    alpha: float = 16800.0
    electron: float = 20000.0


@export
@dataclass(frozen=True)
class ModelParameters:
    """Configuration of the ionization and scintillation calculation.

    Energies are in MeV, lengths in cm, electric fields in kV/cm and
    the temperature in K. recomb_k is given in (g/(MeV cm^2))(kV/cm) and
    is normalised by the medium density when the calculator is
    initialized.
    """

    recomb_a: float = 0.800
    recomb_k: float = 0.0486
    modbox_a: float = 0.930
    modbox_b: float = 0.212
    use_modbox_recomb: bool = True
    gev_to_electrons: float = 4.237e7
    electric_field: float = 0.5
    temperature: float = 87.0
    scint_yield: float = 24000.0
    scint_yield_factor: float = 1.0
    scint_pre_scale: float = 1.0
    scint_by_particle_type: bool = False
    species_yields: ScintillationYields = field(default_factory=ScintillationYields)

    required = (
        "recomb_a",
        "recomb_k",
        "modbox_a",
        "modbox_b",
        "gev_to_electrons",
        "scint_yield",
    )

    def validate(self):
        """Check that all constants needed by the models are usable numbers."""
        numeric = self.required + (
            "electric_field",
            "temperature",
            "scint_yield_factor",
            "scint_pre_scale",
        )
        for name in numeric:
            _check_number(name, getattr(self, name))

        if not isinstance(self.species_yields, ScintillationYields):
            raise ConfigurationError(
                f"species_yields must be a ScintillationYields, got {self.species_yields!r}"
            )
        for species_field in fields(ScintillationYields):
            _check_number(
                f"species_yields.{species_field.name}",
                getattr(self.species_yields, species_field.name),
            )
        return self

    def updated(self, **changes):
        """Return a copy with some parameters replaced."""
        return replace(self, **changes)

    @classmethod
    def from_config(cls, config):
        """Build parameters from a flat mapping.

        Keys of ScintillationYields may be given either as a nested
        "species_yields" mapping or flat as e.g. "proton_scint_yield".
        """
        missing = [key for key in cls.required if key not in config]
        if missing:
            raise ConfigurationError(f"Missing required model constants: {', '.join(missing)}")

        known = {f.name for f in fields(cls)}
        kwargs = {}
        species = dict(config.get("species_yields", {}))
        for key, value in config.items():
            if key == "species_yields":
                continue
            if key.endswith("_scint_yield") and key != "scint_yield":
                species[key[: -len("_scint_yield")]] = value
            elif key in known:
                kwargs[key] = value
            else:
                raise ConfigurationError(
                    f"Unknown model parameter {key}. Available parameters: {sorted(known)}"
                )

        species_names = {f.name for f in fields(ScintillationYields)}
        unknown_species = set(species) - species_names
        if unknown_species:
            raise ConfigurationError(
                f"Unknown particle species for scintillation yields: {sorted(unknown_species)}. "
                f"Available species: {sorted(species_names)}"
            )
        kwargs["species_yields"] = ScintillationYields(**species)

        return cls(**kwargs).validate()


def _check_number(name, value):
    if value is None:
        raise ConfigurationError(f"Model constant {name} is not set")
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ConfigurationError(f"Model constant {name} must be a number, got {value!r}")
    if not math.isfinite(value):
        raise ConfigurationError(f"Model constant {name} must be finite, got {value}")
