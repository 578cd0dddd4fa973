from .SelectionReader import read_selection
from .SelectionWriter import write_selection


__all__ = [
    "read_selection",
    "write_selection",
]
