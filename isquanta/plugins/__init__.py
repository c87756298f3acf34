from . import electric_field
from .electric_field import *

from . import quanta
from .quanta import *
