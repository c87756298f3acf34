import strax
import straxen
import logging

from .calculator import Calculator
from .field import as_field_sampler
from .medium import LiquidArgon, ConstantDensity
from .parameters import ConfigurationError, ModelParameters, ScintillationYields

logging.basicConfig(handlers=[logging.StreamHandler()])


class IsquantaBasePlugin(strax.Plugin):
    """Base plugin for isquanta plugins."""

    # Forbid rechunking
    rechunk_on_save = False

    # Config options
    debug = straxen.URLConfig(
        default=False,
        type=bool,
        track=False,
        help="Show debug informations",
    )

    def setup(self):
        super().setup()

        log = logging.getLogger(f"{self.__class__.__name__}")

        if self.debug:
            log.setLevel("DEBUG")
            log.debug(f"Running {self.__class__.__name__} version {self.__version__} in debug mode")
        else:
            log.setLevel("INFO")


class IsquantaModelPlugin(IsquantaBasePlugin):
    """Base plugin carrying the config options of the ionization and
    scintillation model."""

    use_modbox_recomb = straxen.URLConfig(
        default=True,
        type=bool,
        help="Use the modified box recombination model instead of the Birks model",
    )

    recomb_a = straxen.URLConfig(
        default=0.800,
        type=(int, float),
        help="Birks recombination constant A",
    )

    recomb_k = straxen.URLConfig(
        default=0.0486,
        type=(int, float),
        help="Birks recombination constant k [(g/(MeV cm^2))(kV/cm)]",
    )

    modbox_a = straxen.URLConfig(
        default=0.930,
        type=(int, float),
        help="Modified box recombination constant A",
    )

    modbox_b = straxen.URLConfig(
        default=0.212,
        type=(int, float),
        help="Modified box recombination constant B [(MeV/cm)^-1 (kV/cm)]",
    )

    gev_to_electrons = straxen.URLConfig(
        default=4.237e7,
        type=(int, float),
        help="Number of ionization electrons per GeV deposited before recombination",
    )

    electric_field = straxen.URLConfig(
        default=0.5,
        type=(int, float),
        help="Nominal drift electric field [kV/cm]",
    )

    medium_temperature = straxen.URLConfig(
        default=87.0,
        type=(int, float),
        help="Temperature at which the medium density is evaluated [K]",
    )

    medium_density = straxen.URLConfig(
        default=None,
        help="Constant medium density [g/cm^3]. "
        "If None the liquid argon density at medium_temperature is used",
    )

    efield_offset_map = straxen.URLConfig(
        default=None,
        help="Map of the fractional electric field offsets. None disables the correction",
    )

    scint_yield = straxen.URLConfig(
        default=24000.0,
        type=(int, float),
        help="Scintillation yield [photons/MeV]",
    )

    scint_yield_factor = straxen.URLConfig(
        default=1.0,
        type=(int, float),
        help="Global factor applied to scint_yield",
    )

    scint_pre_scale = straxen.URLConfig(
        default=1.0,
        type=(int, float),
        help="Prescale applied to all scintillation yields",
    )

    scint_by_particle_type = straxen.URLConfig(
        default=False,
        type=bool,
        help="Use the scintillation yield of the depositing particle species",
    )

    species_scint_yields = straxen.URLConfig(
        default={
            "proton": 19200.0,
            "muon": 24000.0,
            "pion": 24000.0,
            "kaon": 24000.0,
            "alpha": 16800.0,
            "electron": 20000.0,
        },
        type=dict,
        help="Scintillation yields per particle species [photons/MeV]. "
        "Species not given here keep their default value",
    )

    def model_parameters(self):
        return ModelParameters(
            recomb_a=self.recomb_a,
            recomb_k=self.recomb_k,
            modbox_a=self.modbox_a,
            modbox_b=self.modbox_b,
            use_modbox_recomb=self.use_modbox_recomb,
            gev_to_electrons=self.gev_to_electrons,
            electric_field=self.electric_field,
            temperature=self.medium_temperature,
            scint_yield=self.scint_yield,
            scint_yield_factor=self.scint_yield_factor,
            scint_pre_scale=self.scint_pre_scale,
            scint_by_particle_type=self.scint_by_particle_type,
            species_yields=self.species_yields(),
        )

    def medium(self):
        if self.medium_density is None:
            return LiquidArgon()
        return ConstantDensity(self.medium_density)

    def species_yields(self):
        try:
            return ScintillationYields(**self.species_scint_yields)
        except TypeError as e:
            raise ConfigurationError(
                f"Invalid species_scint_yields {self.species_scint_yields}: {e}"
            ) from e

    def build_calculator(self):
        """Initialized Calculator for the current plugin config."""
        calculator = Calculator()
        calculator.initialize(
            self.model_parameters(),
            as_field_sampler(self.efield_offset_map),
            medium=self.medium(),
        )
        return calculator
