from .Constants import *
from .Errors import *
from .Utils import *
from .Registry import *
from .WriteType import *
from .Configuration import *
from .RedisConfiguration import *
from .policy import *
from .security import *
from .WriteOptions import *
