"""
prlabels - pull request label store
"""

__version__ = "1.0.0"
