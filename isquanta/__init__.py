__version__ = "0.1.0"

from . import common
from . import dtypes

from . import parameters
from .parameters import *

from . import medium
from .medium import *

from . import field
from .field import *

from . import recombination
from .recombination import *

from . import scintillation
from .scintillation import *

from . import calculator
from .calculator import *

from . import plugin
from . import plugins
from .plugins import *

from . import context
