"""
teedata
Data objects with magic accessors
"""

__version__ = "0.1.0"

from .dataobject import DataObject, SortedDataObject, InvalidMethod
from .util import underscore
