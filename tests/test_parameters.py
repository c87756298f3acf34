import unittest

import numpy as np

from isquanta import (
    ConfigurationError,
    ConstantDensity,
    LiquidArgon,
    ModelParameters,
    ScintillationYields,
    density_at,
)

required_config = {
    "recomb_a": 0.8,
    "recomb_k": 0.0486,
    "modbox_a": 0.93,
    "modbox_b": 0.212,
    "gev_to_electrons": 4.237e7,
    "scint_yield": 24000.0,
}


class TestModelParameters(unittest.TestCase):
    def test_defaults_are_valid(self):
        ModelParameters().validate()

    def test_frozen(self):
        parameters = ModelParameters()
        with self.assertRaises(AttributeError):
            parameters.recomb_a = 1.0

    def test_none_constant(self):
        for name in ModelParameters.required:
            with self.subTest(name=name):
                with self.assertRaises(ConfigurationError):
                    ModelParameters().updated(**{name: None}).validate()

    def test_not_finite(self):
        with self.assertRaises(ConfigurationError):
            ModelParameters(recomb_k=np.nan).validate()
        with self.assertRaises(ConfigurationError):
            ModelParameters(scint_yield="many").validate()

    def test_numpy_numbers(self):
        ModelParameters(recomb_a=np.float32(0.8), scint_yield=np.int64(24000)).validate()

    def test_from_config(self):
        config = dict(required_config)
        config["use_modbox_recomb"] = False
        config["proton_scint_yield"] = 100.0
        config["species_yields"] = {"alpha": 50.0}

        parameters = ModelParameters.from_config(config)
        self.assertFalse(parameters.use_modbox_recomb)
        self.assertEqual(parameters.species_yields.proton, 100.0)
        self.assertEqual(parameters.species_yields.alpha, 50.0)
        self.assertEqual(parameters.species_yields.electron, ScintillationYields().electron)

    def test_from_config_missing(self):
        for name in required_config:
            config = {k: v for k, v in required_config.items() if k != name}
            with self.subTest(missing=name):
                with self.assertRaises(ConfigurationError):
                    ModelParameters.from_config(config)

    def test_from_config_unknown_key(self):
        config = dict(required_config, use_modbox_recom=False)
        with self.assertRaises(ConfigurationError):
            ModelParameters.from_config(config)

    def test_from_config_unknown_species(self):
        config = dict(required_config, neutron_scint_yield=10.0)
        with self.assertRaises(ConfigurationError):
            ModelParameters.from_config(config)


class TestMedium(unittest.TestCase):
    def test_liquid_argon(self):
        self.assertAlmostEqual(LiquidArgon().density(87.0), 1.39295)

    def test_constant(self):
        self.assertEqual(density_at(ConstantDensity(2.953), 165.0), 2.953)

    def test_missing_provider(self):
        with self.assertRaises(ConfigurationError):
            density_at(None, 87.0)

    def test_invalid_provider(self):
        with self.assertRaises(ConfigurationError):
            density_at(object(), 87.0)

    def test_non_positive_density(self):
        with self.assertRaises(ConfigurationError):
            density_at(ConstantDensity(0.0), 87.0)
        with self.assertRaises(ConfigurationError):
            density_at(LiquidArgon(), 400.0)


if __name__ == "__main__":
    unittest.main()
