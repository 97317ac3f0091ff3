# -*- encoding: ascii -*-
"""Parser for the ``<directlist>`` section."""

from .base import Attribute, AttributeTable, iter_children, invalid_child, no_attributes, expect_empty, enum_of
from ..arch.common import PinSide
from ..arch.routing import GlobalDirect
from ..util import parse_int

__all__ = ['parse_direct_list']

_direct_attributes = AttributeTable(
        Attribute('name', required = True),
        Attribute('from_pin', required = True),
        Attribute('to_pin', required = True),
        Attribute('x_offset', parse_int, required = True),
        Attribute('y_offset', parse_int, required = True),
        Attribute('z_offset', parse_int, required = True),
        Attribute('switch_name'),
        Attribute('from_side', enum_of(PinSide)),
        Attribute('to_side', enum_of(PinSide)),
        )

def parse_direct_list(reader, start):
    """Parse the ``<directlist>`` section.

    Returns:
        :obj:`tuple` [`GlobalDirect` ]:
    """
    no_attributes(reader, start)
    directs = []
    for event in iter_children(reader, start):
        if event.name != 'direct':
            raise invalid_child(reader, event)
        values = expect_empty(reader, event, _direct_attributes)
        directs.append(GlobalDirect(values['name'], values['from_pin'], values['to_pin'],
            values['x_offset'], values['y_offset'], values['z_offset'],
            switch_name = values['switch_name'],
            from_side = values['from_side'],
            to_side = values['to_side']))
    return tuple(directs)
