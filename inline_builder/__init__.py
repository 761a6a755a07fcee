"""
Configure objects inline at the point of construction.
"""
from pathlib import Path

PROGRAM_NAME = "Inline Builder"
__version__ = "0.1"

MODULE_ROOT: str = Path(__file__).parent.name
