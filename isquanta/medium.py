import logging
import strax

from .parameters import ConfigurationError

export, __all__ = strax.exporter()

logging.basicConfig(handlers=[logging.StreamHandler()])
log = logging.getLogger("isquanta.medium")


@export
class LiquidArgon:
    """Density of liquid argon from a linear fit in temperature.

    density [g/cm^3] = slope * T [K] + intercept
    """

    def __init__(self, slope=-0.00615, intercept=1.928):
        self.slope = slope
        self.intercept = intercept

    def density(self, temperature):
        return self.slope * temperature + self.intercept

    def __repr__(self):
        return f"{self.__class__.__name__}(slope={self.slope}, intercept={self.intercept})"


@export
class ConstantDensity:
    """Medium with a temperature independent density [g/cm^3]."""

    def __init__(self, value):
        self.value = value

    def density(self, temperature):
        return self.value

    def __repr__(self):
        return f"{self.__class__.__name__}({self.value})"


@export
def density_at(medium, temperature):
    """Query the density once and make sure it can be used as a
    normalisation."""

    if medium is None:
        raise ConfigurationError("No density provider available for the detector medium")

    try:
        density = float(medium.density(temperature))
    except (AttributeError, TypeError) as e:
        raise ConfigurationError(f"Can not get the density from {medium!r}") from e

    if not density > 0:
        raise ConfigurationError(
            f"Density of {medium!r} at {temperature} K is {density} g/cm^3, must be positive"
        )

    log.debug(f"Density of {medium!r} at {temperature} K: {density} g/cm^3")
    return density
