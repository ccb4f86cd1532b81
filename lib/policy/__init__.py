from .WorkerInfo import *
from .LocationPolicy import *
from .LocalFirstPolicy import *
from .MostAvailableFirstPolicy import *
from .RoundRobinPolicy import *
from .SpecificHostPolicy import *
