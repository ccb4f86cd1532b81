from .Mode import *
from .AuthType import *
from .LoginUser import *
from .Permission import *
