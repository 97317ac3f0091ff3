# -*- encoding: ascii -*-
"""Types shared by several parts of the architecture tree."""

from ..util import Enum

from collections import namedtuple

__all__ = ['PinSide', 'Meta', 'Metadata']

# ----------------------------------------------------------------------------
# -- Pin Side ----------------------------------------------------------------
# ----------------------------------------------------------------------------
class PinSide(Enum):
    """Side of a tile."""
    left = 0
    right = 1
    bottom = 2
    top = 3

# ----------------------------------------------------------------------------
# -- Metadata ----------------------------------------------------------------
# ----------------------------------------------------------------------------
class Meta(namedtuple('Meta', 'name value')):
    """One ``<meta>`` entry.

    Args:
        name (:obj:`str`): Key of the entry
        value (:obj:`str`): Free-form text. Empty string if the element has no text
    """
    pass

class Metadata(namedtuple('Metadata', 'entries')):
    """A ``<metadata>`` block.

    Args:
        entries (:obj:`tuple` [`Meta` ]): Entries in document order. Keys are not required to be unique
    """

    def get(self, name, default = None):
        """Value of the first entry named ``name``."""
        for meta in self.entries:
            if meta.name == name:
                return meta.value
        return default
