#!/usr/bin/env python3

import glob
import os

# Every <name>_com.py module registers its commands with command_index when imported.
__all__ = []
directory = os.path.dirname(os.path.realpath(__file__)) + '/'
for name in sorted(glob.glob(directory + '*_com.py')):
    __all__.append(os.path.basename(name)[:-3])
