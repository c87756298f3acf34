import logging
import strax
import isquanta

logging.basicConfig(handlers=[logging.StreamHandler()])
log = logging.getLogger("isquanta.context")

# Plugins turning energy deposits into quanta
quanta_plugins = [
    isquanta.plugins.CorrectedElectricField,
    isquanta.plugins.IonizationScintillation,
]


def isquanta_context(output_folder=None, extra_plugins=(), config=None):
    """Context for the ionization and scintillation calculation.

    The energy_deposits data kind has to be provided by a plugin passed
    via extra_plugins (or registered later), for example the output of
    a particle transport stage.

    Args:
        output_folder: Directory to store the results. Nothing is stored if None.
        extra_plugins: Additional plugins to register.
        config: Config options passed to the context.
    """

    storage = [strax.DataDirectory(output_folder)] if output_folder is not None else []

    st = strax.Context(storage=storage, config=dict(config or {}))

    for plugin in quanta_plugins + list(extra_plugins):
        st.register(plugin)

    log.debug(f"Registered plugins {[p.__name__ for p in quanta_plugins + list(extra_plugins)]}")

    return st
