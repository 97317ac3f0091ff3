# -*- encoding: ascii -*-
"""Parser for the ``<device>`` section."""

from .base import (Attribute, AttributeTable, iter_children, invalid_child, no_attributes, expect_empty,
        check_unique, require, enum_of)
from ..arch.device import (SwitchBlockType, ChanWidthDistrType, ChanWidthDistr, DeviceSizing, ConnectionBlock,
        DeviceArea, SwitchBlock, ChanWidthDistribution, Device)
from ..exception import ArchParseErrorKind
from ..util import parse_int, parse_float

__all__ = ['parse_device']

_sizing_attributes = AttributeTable(
        Attribute('R_minW_nmos', parse_float, required = True),
        Attribute('R_minW_pmos', parse_float, required = True),
        )

_connection_block_attributes = AttributeTable(Attribute('input_switch_name', required = True))

_area_attributes = AttributeTable(Attribute('grid_logic_tile_area', parse_float, required = True))

_switch_block_attributes = AttributeTable(
        Attribute('type', enum_of(SwitchBlockType), required = True),
        Attribute('fs', parse_int),
        )

_distr_attributes = AttributeTable(
        Attribute('distr', enum_of(ChanWidthDistrType), required = True),
        Attribute('peak', parse_float, required = True),
        Attribute('width', parse_float),
        Attribute('xpeak', parse_float),
        Attribute('dc', parse_float),
        )

def _parse_distr(reader, start):
    values = expect_empty(reader, start, _distr_attributes)
    type_ = values['distr']
    for attr in type_.required:
        if values[attr] is None:
            raise reader.error(ArchParseErrorKind.missing_required_attribute, attr)
    return ChanWidthDistr(type_, values['peak'], **{attr: values[attr] for attr in type_.required})

def _parse_chan_width_distr(reader, start):
    no_attributes(reader, start)
    x, y = None, None
    for event in iter_children(reader, start):
        if event.name == 'x':
            check_unique(reader, event, x)
            x = _parse_distr(reader, event)
        elif event.name == 'y':
            check_unique(reader, event, y)
            y = _parse_distr(reader, event)
        else:
            raise invalid_child(reader, event)
    return ChanWidthDistribution(require(reader, x, 'x'), require(reader, y, 'y'))

def parse_device(reader, start):
    """Parse the ``<device>`` section.

    Returns:
        `Device`:
    """
    no_attributes(reader, start)
    parsed = dict.fromkeys(('sizing', 'connection_block', 'area', 'switch_block', 'chan_width_distr'))
    for event in iter_children(reader, start):
        if event.name not in parsed:
            raise invalid_child(reader, event)
        check_unique(reader, event, parsed[event.name])
        if event.name == 'sizing':
            values = expect_empty(reader, event, _sizing_attributes)
            parsed['sizing'] = DeviceSizing(values['R_minW_nmos'], values['R_minW_pmos'])
        elif event.name == 'connection_block':
            values = expect_empty(reader, event, _connection_block_attributes)
            parsed['connection_block'] = ConnectionBlock(values['input_switch_name'])
        elif event.name == 'area':
            values = expect_empty(reader, event, _area_attributes)
            parsed['area'] = DeviceArea(values['grid_logic_tile_area'])
        elif event.name == 'switch_block':
            values = expect_empty(reader, event, _switch_block_attributes)
            parsed['switch_block'] = SwitchBlock(values['type'], values['fs'])
        else:
            parsed['chan_width_distr'] = _parse_chan_width_distr(reader, event)
    for tag in ('sizing', 'area', 'connection_block', 'switch_block', 'chan_width_distr'):
        require(reader, parsed[tag], tag)
    return Device(**parsed)
