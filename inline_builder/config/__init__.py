"""
Stores the config for the runtime environment of the package e.g. logging.

All config objects are value builders: a loaded config may be adjusted inline
on a copy without modifying the config as loaded.
"""
from .core import BuilderConfig, Logging
from .loader import MultiFileLoader
