# -*- encoding: ascii -*-
"""Parser for the ``<segmentlist>`` section."""

from .base import (Attribute, AttributeTable, iter_children, invalid_child, no_attributes, expect_empty,
        read_text, check_unique, require, enum_of)
from ..arch.routing import SegmentAxis, SegmentType, SegmentResourceType, Segment
from ..exception import ArchParseErrorKind
from ..util import parse_int, parse_float

__all__ = ['parse_pattern', 'parse_segment_list']

_SWITCH_TAGS = ('mux', 'mux_inc', 'mux_dec', 'wire_switch', 'opin_switch')

_UNIDIR_SWITCH_ERROR = ("For unidirectional segments, either <mux> tag or both <mux_inc> and <mux_dec> should be "
        "defined in the architecture file.")

def parse_pattern(text):
    """Parse a whitespace separated list of 0s and 1s.

    Returns:
        :obj:`tuple` [:obj:`bool` ]:

    Raises:
        `ValueError`: If an entry is not 0 or 1
    """
    pattern = []
    for entry in text.split():
        try:
            value = parse_int(entry)
        except ValueError as e:
            raise ValueError("Pattern int list parse error: {}".format(e))
        if value not in (0, 1):
            raise ValueError("Pattern int list expected to only have 0s and 1s. Found: {}".format(value))
        pattern.append(value == 1)
    return tuple(pattern)

# ----------------------------------------------------------------------------
# -- Segment Children --------------------------------------------------------
# ----------------------------------------------------------------------------
_pattern_attributes = AttributeTable(Attribute('type', required = True))

_switch_attributes = AttributeTable(Attribute('name', required = True))

def _parse_block_pattern(reader, start):
    if _pattern_attributes.parse(reader, start)['type'] != 'pattern':
        raise reader.error(ArchParseErrorKind.attribute_parse, "{} type must be pattern".format(start.name))
    if (text := read_text(reader, start)) is None:
        raise reader.error(ArchParseErrorKind.invalid_tag, "Missing pattern int list")
    try:
        return parse_pattern(text)
    except ValueError as e:
        raise reader.error(ArchParseErrorKind.invalid_tag, str(e))

# ----------------------------------------------------------------------------
# -- Segment -----------------------------------------------------------------
# ----------------------------------------------------------------------------
_segment_attributes = AttributeTable(
        Attribute('axis', enum_of(SegmentAxis), default = SegmentAxis.xy),
        Attribute('name', default = 'UnnamedSegment'),
        Attribute('length', parse_int, required = True),
        Attribute('type', enum_of(SegmentType), required = True),
        Attribute('res_type', enum_of(SegmentResourceType), default = SegmentResourceType.GENERAL),
        Attribute('freq', parse_float, required = True),
        Attribute('Rmetal', parse_float, required = True),
        Attribute('Cmetal', parse_float, required = True),
        )

def _parse_segment(reader, start):
    values = _segment_attributes.parse(reader, start)
    length, type_ = values['length'], values['type']
    sb, cb = None, None
    switches = dict.fromkeys(_SWITCH_TAGS)
    for event in iter_children(reader, start):
        if event.name == 'sb':
            check_unique(reader, event, sb)
            sb = _parse_block_pattern(reader, event)
        elif event.name == 'cb':
            check_unique(reader, event, cb)
            cb = _parse_block_pattern(reader, event)
        elif event.name in switches:
            check_unique(reader, event, switches[event.name])
            switches[event.name] = expect_empty(reader, event, _switch_attributes)['name']
        else:
            raise invalid_child(reader, event)
    if len(require(reader, sb, 'sb')) != length + 1:
        raise reader.error(ArchParseErrorKind.invalid_tag,
                "For a length L wire there must be L+1 entries separated by spaces for <sb>")
    if len(require(reader, cb, 'cb')) != length:
        raise reader.error(ArchParseErrorKind.invalid_tag,
                "For a length L wire there must be L entries separated by spaces for <cb>")
    kwargs = {}
    if type_.is_unidir:
        if switches['mux'] is not None:
            if switches['mux_inc'] is not None or switches['mux_dec'] is not None:
                raise reader.error(ArchParseErrorKind.invalid_tag, _UNIDIR_SWITCH_ERROR)
            kwargs.update(mux_inc = switches['mux'], mux_dec = switches['mux'])
        elif switches['mux_inc'] is None or switches['mux_dec'] is None:
            raise reader.error(ArchParseErrorKind.invalid_tag, _UNIDIR_SWITCH_ERROR)
        else:
            kwargs.update(mux_inc = switches['mux_inc'], mux_dec = switches['mux_dec'])
    else:
        kwargs.update(wire_switch = require(reader, switches['wire_switch'], 'wire_switch'),
                opin_switch = require(reader, switches['opin_switch'], 'opin_switch'))
    return Segment(values['name'], length, type_, values['freq'], values['Rmetal'], values['Cmetal'], sb, cb,
            axis = values['axis'], res_type = values['res_type'], **kwargs)

def parse_segment_list(reader, start):
    """Parse the ``<segmentlist>`` section.

    Returns:
        :obj:`tuple` [`Segment` ]:
    """
    no_attributes(reader, start)
    segments = []
    for event in iter_children(reader, start):
        if event.name != 'segment':
            raise invalid_child(reader, event)
        segments.append(_parse_segment(reader, event))
    return tuple(segments)
