# -*- encoding: ascii -*-
"""Parser for the ``<switchlist>`` section."""

from .base import Attribute, AttributeTable, iter_children, invalid_child, no_attributes, expect_empty, enum_of
from ..arch.routing import SwitchType, SwitchDelay, Switch
from ..util import parse_int, parse_float

__all__ = ['parse_switch_list']

def parse_buf_size(text):
    """Parse ``buf_size``: ``auto`` or a number."""
    return text if text == 'auto' else parse_float(text)

_switch_attributes = AttributeTable(
        Attribute('type', enum_of(SwitchType), required = True),
        Attribute('name', required = True),
        Attribute('R', parse_float, required = True),
        Attribute('Cin', parse_float, required = True),
        Attribute('Cout', parse_float, required = True),
        Attribute('Cinternal', parse_float),
        Attribute('Tdel', parse_float),
        Attribute('buf_size', parse_buf_size, default = 'auto'),
        Attribute('mux_trans_size', parse_float),
        Attribute('power_buf_size', parse_int),
        )

_switch_delay_attributes = AttributeTable(
        Attribute('num_inputs', parse_int, required = True),
        Attribute('delay', parse_float, required = True),
        )

def _parse_switch(reader, start):
    values = _switch_attributes.parse(reader, start)
    delays = []
    for event in iter_children(reader, start):
        if event.name != 'Tdel':
            raise invalid_child(reader, event)
        delay = expect_empty(reader, event, _switch_delay_attributes)
        delays.append(SwitchDelay(delay['num_inputs'], delay['delay']))
    return Switch(values['type'], values['name'], values['R'], values['Cin'], values['Cout'],
            Cinternal = values['Cinternal'],
            Tdel = values['Tdel'],
            buf_size = values['buf_size'],
            mux_trans_size = values['mux_trans_size'],
            power_buf_size = values['power_buf_size'],
            delays = delays)

def parse_switch_list(reader, start):
    """Parse the ``<switchlist>`` section. An empty list is accepted.

    Returns:
        :obj:`tuple` [`Switch` ]:
    """
    no_attributes(reader, start)
    switches = []
    for event in iter_children(reader, start):
        if event.name != 'switch':
            raise invalid_child(reader, event)
        switches.append(_parse_switch(reader, event))
    return tuple(switches)
