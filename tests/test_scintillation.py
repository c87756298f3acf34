import unittest

from isquanta import (
    ModelParameters,
    ScintillationYields,
    ScintillationYieldModel,
    SPECIES_YIELD_TABLE,
)

species_yields = ScintillationYields(
    proton=1000.0,
    muon=2000.0,
    pion=3000.0,
    kaon=4000.0,
    alpha=5000.0,
    electron=6000.0,
)


class TestGlobalYield(unittest.TestCase):
    def test_photons(self):
        model = ScintillationYieldModel(
            ModelParameters(scint_yield=24000.0, scint_yield_factor=0.5)
        )
        self.assertEqual(model.compute_photons(2.0, 2212), 24000.0)

    def test_species_is_ignored(self):
        model = ScintillationYieldModel(ModelParameters(species_yields=species_yields))
        self.assertEqual(model.compute_photons(1.0, 2212), model.compute_photons(1.0, 11))
        self.assertEqual(model.compute_photons(1.0, None), model.compute_photons(1.0, 11))

    def test_pre_scale(self):
        model = ScintillationYieldModel(ModelParameters(scint_yield=24000.0, scint_pre_scale=0.03))
        self.assertAlmostEqual(model.compute_photons(1.0), 720.0)

    def test_linear_in_energy(self):
        model = ScintillationYieldModel(ModelParameters())
        self.assertAlmostEqual(model.compute_photons(3.0, 13), 3 * model.compute_photons(1.0, 13))


class TestYieldByParticleType(unittest.TestCase):
    def setUp(self):
        self.model = ScintillationYieldModel(
            ModelParameters(scint_by_particle_type=True, species_yields=species_yields)
        )

    def test_table(self):
        expected = {
            2212: 1000.0,
            13: 2000.0,
            -13: 2000.0,
            211: 3000.0,
            -211: 3000.0,
            321: 4000.0,
            -321: 4000.0,
            1000020040: 5000.0,
            11: 6000.0,
            -11: 6000.0,
            22: 6000.0,
        }
        self.assertEqual(set(SPECIES_YIELD_TABLE), set(expected))
        for pdg, photons_per_mev in expected.items():
            with self.subTest(pdg=pdg):
                self.assertEqual(self.model.compute_photons(2.0, pdg), 2.0 * photons_per_mev)

    def test_unknown_species_use_electron_yield(self):
        electron = self.model.compute_photons(1.5, 11)
        for pdg in (2112, -2212, 111, 0, 1000010020, -999999):
            with self.subTest(pdg=pdg):
                self.assertEqual(self.model.compute_photons(1.5, pdg), electron)

    def test_missing_species_uses_electron_yield(self):
        self.assertEqual(self.model.compute_photons(1.0, None), 6000.0)

    def test_global_factor_not_applied(self):
        model = ScintillationYieldModel(
            ModelParameters(
                scint_by_particle_type=True,
                scint_yield_factor=0.5,
                species_yields=species_yields,
            )
        )
        self.assertEqual(model.compute_photons(1.0, 2212), 1000.0)

    def test_linear_in_energy(self):
        for pdg in (2212, 13, 1000020040, 2112):
            with self.subTest(pdg=pdg):
                self.assertAlmostEqual(
                    self.model.compute_photons(0.7, pdg) * 3,
                    self.model.compute_photons(2.1, pdg),
                )


if __name__ == "__main__":
    unittest.main()
