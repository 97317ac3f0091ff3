# -*- encoding: ascii -*-
"""Parser for ``<metadata>`` blocks."""

from .base import Attribute, AttributeTable, iter_children, invalid_child, no_attributes, read_text
from ..arch.common import Meta, Metadata
from ..util import uno

__all__ = ['parse_metadata']

_meta_attributes = AttributeTable(Attribute('name', required = True))

def parse_metadata(reader, start):
    """Parse a ``<metadata>`` element and its ``<meta>`` entries."""
    no_attributes(reader, start)
    entries = []
    for event in iter_children(reader, start):
        if event.name != 'meta':
            raise invalid_child(reader, event)
        name = _meta_attributes.parse(reader, event)['name']
        text = read_text(reader, event)
        entries.append(Meta(name, uno(text, '')))
    return Metadata(tuple(entries))
