# -*- encoding: ascii -*-
"""Parser for the ``<switchblocklist>`` section of custom switch blocks."""

from .base import (Attribute, AttributeTable, iter_children, invalid_child, no_attributes, expect_empty,
        check_unique, require, enum_of, parse_comma_list, parse_int_list)
from ..arch.routing import (CustomSwitchBlockType, SwitchBlockLocationType, CustomSwitchBlockLocation,
        SwitchFuncType, SwitchFunc, WireOrder, WireConnPoint, WireConn, CustomSwitchBlock)
from ..exception import ArchParseErrorKind
from ..util import parse_int

__all__ = ['parse_switch_block_list']

# ----------------------------------------------------------------------------
# -- Location & Functions ----------------------------------------------------
# ----------------------------------------------------------------------------
_location_attributes = AttributeTable(
        Attribute('type', enum_of(SwitchBlockLocationType), required = True),
        Attribute('x', parse_int),
        Attribute('y', parse_int),
        )

def _parse_location(reader, start):
    values = expect_empty(reader, start, _location_attributes)
    type_ = values['type']
    for attr in ('x', 'y'):
        if type_.is_XY_SPECIFIED and values[attr] is None:
            raise reader.error(ArchParseErrorKind.missing_required_attribute, attr, start.position)
        elif not type_.is_XY_SPECIFIED and values[attr] is not None:
            raise reader.error(ArchParseErrorKind.unknown_attribute, attr, start.position)
    return CustomSwitchBlockLocation(type_, values['x'], values['y'])

_func_attributes = AttributeTable(
        Attribute('type', enum_of(SwitchFuncType), required = True),
        Attribute('formula', required = True),
        )

def _parse_switchfuncs(reader, start):
    no_attributes(reader, start)
    funcs = []
    for event in iter_children(reader, start):
        if event.name != 'func':
            raise invalid_child(reader, event)
        values = expect_empty(reader, event, _func_attributes)
        funcs.append(SwitchFunc(values['type'], values['formula']))
    return tuple(funcs)

# ----------------------------------------------------------------------------
# -- Wire Connections --------------------------------------------------------
# ----------------------------------------------------------------------------
_conn_point_attributes = AttributeTable(
        Attribute('type', required = True),
        Attribute('switchpoint', parse_int_list, required = True),
        )

_wireconn_attributes = AttributeTable(
        Attribute('num_conns', required = True),
        Attribute('from_type', parse_comma_list),
        Attribute('to_type', parse_comma_list),
        Attribute('from_switchpoint', parse_int_list),
        Attribute('to_switchpoint', parse_int_list),
        Attribute('from_order', enum_of(WireOrder), default = WireOrder.shuffled),
        Attribute('to_order', enum_of(WireOrder), default = WireOrder.shuffled),
        Attribute('switch_override'),
        )

def _points_from_attributes(reader, values, side):
    """Expand ``<side>_type``/``<side>_switchpoint``: every listed type shares the switch points."""
    types, switchpoints = values[side + '_type'], values[side + '_switchpoint']
    if types is None and switchpoints is None:
        return []
    elif switchpoints is None:
        raise reader.error(ArchParseErrorKind.missing_required_attribute, side + '_switchpoint')
    elif types is None:
        raise reader.error(ArchParseErrorKind.missing_required_attribute, side + '_type')
    return [WireConnPoint(type_, switchpoints) for type_ in types]

def _parse_wireconn(reader, start):
    values = _wireconn_attributes.parse(reader, start)
    points = {'from': _points_from_attributes(reader, values, 'from'),
            'to': _points_from_attributes(reader, values, 'to')}
    for event in iter_children(reader, start):
        if event.name not in points:
            raise invalid_child(reader, event)
        point = expect_empty(reader, event, _conn_point_attributes)
        points[event.name].append(WireConnPoint(point['type'], point['switchpoint']))
    for side in ('from', 'to'):
        if not points[side]:
            raise reader.error(ArchParseErrorKind.invalid_tag, "{}_points is empty".format(side))
    return WireConn(values['num_conns'], points['from'], points['to'],
            from_order = values['from_order'],
            to_order = values['to_order'],
            switch_override = values['switch_override'])

# ----------------------------------------------------------------------------
# -- Switch Block ------------------------------------------------------------
# ----------------------------------------------------------------------------
_switchblock_attributes = AttributeTable(
        Attribute('name', required = True),
        Attribute('type', enum_of(CustomSwitchBlockType), required = True),
        )

def _parse_switchblock(reader, start):
    values = _switchblock_attributes.parse(reader, start)
    location, switchfuncs, wireconns = None, None, []
    for event in iter_children(reader, start):
        if event.name == 'switchblock_location':
            check_unique(reader, event, location)
            location = _parse_location(reader, event)
        elif event.name == 'switchfuncs':
            check_unique(reader, event, switchfuncs)
            switchfuncs = _parse_switchfuncs(reader, event)
        elif event.name == 'wireconn':
            wireconns.append(_parse_wireconn(reader, event))
        else:
            raise invalid_child(reader, event)
    return CustomSwitchBlock(values['name'], values['type'],
            require(reader, location, 'switchblock_location'),
            require(reader, switchfuncs, 'switchfuncs'),
            tuple(wireconns))

def parse_switch_block_list(reader, start):
    """Parse the ``<switchblocklist>`` section.

    Returns:
        :obj:`tuple` [`CustomSwitchBlock` ]:
    """
    no_attributes(reader, start)
    switchblocks = []
    for event in iter_children(reader, start):
        if event.name != 'switchblock':
            raise invalid_child(reader, event)
        switchblocks.append(_parse_switchblock(reader, event))
    return tuple(switchblocks)
