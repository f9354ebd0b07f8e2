from lazyreach.contset import *
from lazyreach.approximations import decompose

import lazyreach.internal as internal
from lazyreach.properties import __version__, __logo__
