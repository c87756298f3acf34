import logging
import strax

from immutabledict import immutabledict

export, __all__ = strax.exporter()

logging.basicConfig(handlers=[logging.StreamHandler()])
log = logging.getLogger("isquanta.scintillation")

ALPHA_PDG = 1000020040

# PDG code -> ScintillationYields attribute
SPECIES_YIELD_TABLE = immutabledict(
    {
        2212: "proton",
        13: "muon",
        -13: "muon",
        211: "pion",
        -211: "pion",
        321: "kaon",
        -321: "kaon",
        ALPHA_PDG: "alpha",
        11: "electron",
        -11: "electron",
        22: "electron",
    }
)

DEFAULT_SPECIES = "electron"

__all__ += ["ALPHA_PDG", "SPECIES_YIELD_TABLE", "DEFAULT_SPECIES"]


@export
class ScintillationYieldModel:
    """Number of scintillation photons for an energy deposit [MeV]."""

    def __init__(self, parameters):
        self.by_particle_type = bool(parameters.scint_by_particle_type)
        self.yield_factor = float(parameters.scint_yield_factor)
        self.pre_scale = float(parameters.scint_pre_scale)
        self.base_yield = float(parameters.scint_yield) * self.pre_scale
        self.species_yields = parameters.species_yields

    def yield_for_species(self, pdg):
        """Prescaled yield [photons/MeV] of a particle species.

        Species missing in SPECIES_YIELD_TABLE scintillate like electrons.
        """
        if pdg is None:
            species = DEFAULT_SPECIES
        else:
            species = SPECIES_YIELD_TABLE.get(int(pdg), DEFAULT_SPECIES)
        return float(getattr(self.species_yields, species)) * self.pre_scale

    def compute_photons(self, energy, pdg=None):
        if self.by_particle_type:
            log.debug("Scintillating by particle type")
            return self.yield_for_species(pdg) * energy
        return self.yield_factor * self.base_yield * energy

    def compute_photons_for_step(self, step):
        return self.compute_photons(step.energy, step.pdg)
