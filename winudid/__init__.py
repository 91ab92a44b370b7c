import sys

"""
This is a hack to avoid double-imports of a module when using
the -m switch to run a module directly.
"""
if not '-m' in sys.argv:
    from .do_imports import *

__version__ = '1.0.0'
