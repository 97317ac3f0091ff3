# -*- encoding: ascii -*-
"""Parser for the ``<complexblocklist>`` section: the recursive logic-block hierarchy."""

from .base import (Attribute, AttributeTable, iter_children, invalid_child, no_attributes, expect_empty,
        skip_element, check_unique, enum_of)
from .port import PORT_TAGS, parse_port
from .metadata import parse_metadata
from .timing import DELAY_TAGS, TIMING_TAGS, parse_delay, parse_timing_constraint
from ..arch.pbtype import PackPattern, InterconnectType, Interconnect, PBTypeClass, Mode, PBType
from ..util import uno, parse_int

import logging
_logger = logging.getLogger(__name__)

__all__ = ['parse_interconnects', 'parse_mode', 'parse_pb_type', 'parse_complex_block_list']

# ----------------------------------------------------------------------------
# -- Interconnect ------------------------------------------------------------
# ----------------------------------------------------------------------------
_pack_pattern_attributes = AttributeTable(
        Attribute('name', required = True),
        Attribute('in_port', required = True),
        Attribute('out_port', required = True),
        )

_interconnect_attributes = AttributeTable(
        Attribute('name', required = True),
        Attribute('input', required = True),
        Attribute('output', required = True),
        )

def _parse_interconnect(reader, start):
    values = _interconnect_attributes.parse(reader, start)
    pack_patterns, delays, metadata = [], [], None
    for event in iter_children(reader, start):
        if event.name == 'pack_pattern':
            pattern = expect_empty(reader, event, _pack_pattern_attributes)
            pack_patterns.append(PackPattern(pattern['name'], pattern['in_port'], pattern['out_port']))
        elif event.name in DELAY_TAGS:
            delays.append(parse_delay(reader, event))
        elif event.name == 'metadata':
            check_unique(reader, event, metadata)
            metadata = parse_metadata(reader, event)
        else:
            raise invalid_child(reader, event)
    return Interconnect(InterconnectType.from_text(start.name), values['name'], values['input'], values['output'],
            pack_patterns = pack_patterns,
            delays = delays,
            metadata = metadata)

def parse_interconnects(reader, start):
    """Parse an ``<interconnect>`` group.

    Returns:
        :obj:`tuple` [`Interconnect` ]:
    """
    no_attributes(reader, start)
    interconnects = []
    for event in iter_children(reader, start):
        if event.name not in ('direct', 'mux', 'complete'):
            raise invalid_child(reader, event)
        interconnects.append(_parse_interconnect(reader, event))
    return tuple(interconnects)

# ----------------------------------------------------------------------------
# -- Mode --------------------------------------------------------------------
# ----------------------------------------------------------------------------
_mode_attributes = AttributeTable(Attribute('name', required = True))

def parse_mode(reader, start):
    """Parse a ``<mode>`` element, recursing into its ``<pb_type>`` children.

    Returns:
        `Mode`:
    """
    name = _mode_attributes.parse(reader, start)['name']
    pb_types, interconnects, metadata = [], None, None
    for event in iter_children(reader, start):
        if event.name == 'pb_type':
            pb_types.append(parse_pb_type(reader, event))
        elif event.name == 'interconnect':
            check_unique(reader, event, interconnects)
            interconnects = parse_interconnects(reader, event)
        elif event.name == 'metadata':
            check_unique(reader, event, metadata)
            metadata = parse_metadata(reader, event)
        else:
            raise invalid_child(reader, event)
    return Mode(name, pb_types = pb_types, interconnects = uno(interconnects, tuple()), metadata = metadata)

# ----------------------------------------------------------------------------
# -- PB Type -----------------------------------------------------------------
# ----------------------------------------------------------------------------
_pb_type_attributes = AttributeTable(
        Attribute('name', required = True),
        Attribute('num_pb', parse_int, default = 1),
        Attribute('blif_model'),
        Attribute('class', enum_of(PBTypeClass), default = PBTypeClass.none),
        )

def parse_pb_type(reader, start):
    """Parse a ``<pb_type>`` element and everything below it.

    Args:
        reader (`XMLEventReader`):
        start (`XMLEvent`): The ``<pb_type>`` start tag

    Returns:
        `PBType`:

    Notes:
        ``<fc>`` and ``<pinlocations>`` inside a ``<pb_type>`` belong to the tile description. Some existing
        architecture files misplace them here, so they are skipped with a warning instead of rejected.
    """
    values = _pb_type_attributes.parse(reader, start)
    name = values['name']
    ports, pb_types, modes, interconnects = [], [], [], None
    delays, timing, metadata = [], [], None
    for event in iter_children(reader, start):
        if event.name in PORT_TAGS:
            ports.append(parse_port(reader, event))
        elif event.name == 'pb_type':
            pb_types.append(parse_pb_type(reader, event))
        elif event.name == 'mode':
            modes.append(parse_mode(reader, event))
        elif event.name == 'interconnect':
            check_unique(reader, event, interconnects)
            interconnects = parse_interconnects(reader, event)
        elif event.name in DELAY_TAGS:
            delays.append(parse_delay(reader, event))
        elif event.name in TIMING_TAGS:
            timing.append(parse_timing_constraint(reader, event))
        elif event.name == 'metadata':
            check_unique(reader, event, metadata)
            metadata = parse_metadata(reader, event)
        elif event.name == 'power':
            skip_element(reader, event)
        elif event.name in ('fc', 'pinlocations'):
            _logger.warning("Ignoring <{}> misplaced inside pb_type '{}' at {}".format(
                event.name, name, event.position))
            skip_element(reader, event)
        else:
            raise invalid_child(reader, event)
    interconnects = uno(interconnects, tuple())
    if modes and (pb_types or interconnects):
        _logger.warning("pb_type '{}' has modes; {} direct child pb_type(s) and {} interconnect(s) are unreachable"
                .format(name, len(pb_types), len(interconnects)))
        return PBType(name, num_pb = values['num_pb'], blif_model = values['blif_model'],
                class_ = values['class'], ports = ports, modes = modes, delays = delays, timing = timing,
                metadata = metadata, unreachable_pb_types = pb_types, unreachable_interconnects = interconnects)
    return PBType(name, num_pb = values['num_pb'], blif_model = values['blif_model'], class_ = values['class'],
            ports = ports, modes = modes, pb_types = pb_types, interconnects = interconnects, delays = delays,
            timing = timing, metadata = metadata)

def parse_complex_block_list(reader, start):
    """Parse the ``<complexblocklist>`` section.

    Returns:
        :obj:`tuple` [`PBType` ]: Root logic-block types
    """
    no_attributes(reader, start)
    pb_types = []
    for event in iter_children(reader, start):
        if event.name != 'pb_type':
            raise invalid_child(reader, event)
        pb_types.append(parse_pb_type(reader, event))
    return tuple(pb_types)
