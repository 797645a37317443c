"""
Remote Quran text sources.
"""

from mushaf.sources.base import BaseSource
from mushaf.sources.ghazi import GhaziSource

__all__ = ["BaseSource", "GhaziSource"]
