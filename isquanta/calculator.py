import enum
import logging
import strax
from dataclasses import dataclass, replace
from typing import NamedTuple, Tuple

from .field import as_field_sampler
from .medium import LiquidArgon
from .parameters import ConfigurationError, ModelParameters
from .recombination import RecombinationConstants, RecombinationModel
from .scintillation import ScintillationYieldModel

export, __all__ = strax.exporter()

logging.basicConfig(handlers=[logging.StreamHandler()])
log = logging.getLogger("isquanta.calculator")


@export
class CalculatorStateError(RuntimeError):
    """Raised when the calculator is used outside of its lifecycle."""


@export
class CalculatorState(enum.Enum):
    UNINITIALIZED = "uninitialized"
    READY = "ready"
    COMPUTED = "computed"


@export
class EnergyDepositStep(NamedTuple):
    """Energy deposited by a particle along one transport step."""

    energy: float  # MeV
    step_length: float  # cm
    position: Tuple[float, float, float]  # step midpoint, cm
    pdg: int = 0

    @classmethod
    def from_record(cls, record):
        """Build a step from one row of an energy_deposits array."""
        return cls(
            energy=float(record["ed"]),
            step_length=float(record["step_length"]),
            position=(float(record["x"]), float(record["y"]), float(record["z"])),
            pdg=int(record["pdg"]),
        )


@export
@dataclass(frozen=True)
class CalculationResult:
    energy_deposit: float = 0.0
    num_ion_electrons: float = 0.0
    num_scint_photons: float = 0.0


@export
class Calculator:
    """Ionization electrons and scintillation photons for single energy
    deposits.

    Each call to process() handles one independent deposit: the stored
    result is replaced, never summed. Use one instance per worker, the
    field sampler and the medium may be shared.

    Usage:
        calculator = Calculator()
        calculator.initialize(ModelParameters(), NoFieldDistortion())
        calculator.process(EnergyDepositStep(2.0, 0.3, (0, 0, 0), 13))
        calculator.result().num_ion_electrons
    """

    def __init__(self):
        self.state = CalculatorState.UNINITIALIZED
        self.parameters = None
        self.field_sampler = None
        self.medium = None
        self.recombination = None
        self.scintillation = None
        self._result = CalculationResult()
        self._has_result = False

    def initialize(self, parameters, field_sampler=None, medium=None):
        """Set up the models. Derived constants are computed here once.

        medium defaults to liquid argon. Raises ConfigurationError if a
        constant is missing or the density provider is unusable. The
        calculator is then uninitialized and holds no result.
        """
        self.state = CalculatorState.UNINITIALIZED
        self.recombination = None
        self.scintillation = None
        self._result = CalculationResult()
        self._has_result = False

        if medium is None:
            medium = LiquidArgon()

        if parameters is None:
            raise ConfigurationError("No model parameters given")
        if not isinstance(parameters, ModelParameters):
            parameters = ModelParameters.from_config(parameters)
        parameters.validate()

        field_sampler = as_field_sampler(field_sampler)
        constants = RecombinationConstants.from_parameters(parameters, medium)

        self.parameters = parameters
        self.field_sampler = field_sampler
        self.medium = medium
        self.recombination = RecombinationModel(constants, field_sampler)
        self.scintillation = ScintillationYieldModel(parameters)

        log.debug(
            f"Initialized with {'modified box' if constants.use_modbox_recomb else 'Birks'} "
            f"recombination, density normalised recomb_k {constants.recomb_k}"
        )

        self.state = CalculatorState.READY
        self.reset()
        return self

    def reconfigure(self, parameters):
        """Replace the model parameters, keeping field sampler and medium."""
        if self.state is CalculatorState.UNINITIALIZED:
            raise CalculatorStateError("Calculator has to be initialized before reconfiguring")
        return self.initialize(parameters, self.field_sampler, self.medium)

    def reset(self):
        self._require_initialized("reset")
        self._result = CalculationResult()
        self.state = CalculatorState.READY

    def process(self, step, efield=None):
        """Calculate ionization and scintillation for one deposit.

        efield [kV/cm] replaces the field at the step midpoint if given.
        """
        self._require_initialized("process")

        self._result = CalculationResult(
            energy_deposit=step.energy,
            num_ion_electrons=self.recombination.compute_ionization_for_step(step, efield),
            num_scint_photons=self.scintillation.compute_photons_for_step(step),
        )
        self._has_result = True
        self.state = CalculatorState.COMPUTED
        return self._result

    def calculate_ionization(self, step, efield=None):
        """Only update the number of ionization electrons."""
        self._require_initialized("calculate_ionization")
        electrons = self.recombination.compute_ionization_for_step(step, efield)
        self._store(num_ion_electrons=electrons)
        return electrons

    def calculate_scintillation(self, step):
        """Only update the number of scintillation photons."""
        self._require_initialized("calculate_scintillation")
        photons = self.scintillation.compute_photons_for_step(step)
        self._store(num_scint_photons=photons)
        return photons

    def efield_at_step(self, step):
        self._require_initialized("efield_at_step")
        return self.recombination.efield_at(step.position)

    def result(self):
        if not self._has_result:
            raise CalculatorStateError("No energy deposit has been processed yet")
        return self._result

    @property
    def energy_deposit(self):
        return self.result().energy_deposit

    @property
    def num_ion_electrons(self):
        return self.result().num_ion_electrons

    @property
    def num_scint_photons(self):
        return self.result().num_scint_photons

    def _store(self, **values):
        self._result = replace(self._result, **values)
        self._has_result = True
        self.state = CalculatorState.COMPUTED

    def _require_initialized(self, action):
        if self.state is CalculatorState.UNINITIALIZED:
            raise CalculatorStateError(f"Calculator has to be initialized before calling {action}")
