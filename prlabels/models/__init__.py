"""
Models package

- label.py: Label, a named color scoped to a project/repository pair
- labelitem.py: LabelItem, the assignment of a Label to a pull request
"""

from .label import Label
from .labelitem import LabelItem

__all__ = [
    "Label",
    "LabelItem",
]
