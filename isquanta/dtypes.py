import numpy as np


energy_deposit_fields = [
    (("Energy deposit [MeV]", "ed"), np.float64),
    (("Length of the transport step [cm]", "step_length"), np.float64),
    (("x position of the step midpoint [cm]", "x"), np.float32),
    (("y position of the step midpoint [cm]", "y"), np.float32),
    (("z position of the step midpoint [cm]", "z"), np.float32),
    (("PDG code of the depositing particle", "pdg"), np.int32),
    (("Transport event ID", "eventid"), np.int32),
]


quanta_fields = [
    (("Energy deposit [MeV]", "energy_deposit"), np.float64),
    (("Number of ionization electrons surviving recombination", "electrons"), np.float64),
    (("Number of scintillation photons", "photons"), np.float64),
]


electric_fields = [
    (("Electric field value at the step midpoint [kV/cm]", "e_field"), np.float32),
]
