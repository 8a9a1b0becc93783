from .test_color import *
from .test_conversion import *
from .test_device import *
from .test_gamut import *
from .test_plot import *
from .test_polar import *
from .test_profile import *
