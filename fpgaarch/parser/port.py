# -*- encoding: ascii -*-
"""Parser for ``<input>``, ``<output>`` and ``<clock>`` ports."""

from .base import Attribute, AttributeTable, expect_empty, enum_of, parse_bool
from ..arch.port import PortType, PortEquivalence, PortClass, Port
from ..util import parse_int

__all__ = ['PORT_TAGS', 'parse_port']

PORT_TAGS = ('input', 'output', 'clock')

def _input_only(text):
    raise ValueError("only valid on <input> ports")

def _port_attributes(is_input):
    return AttributeTable(
            Attribute('name', required = True),
            Attribute('num_pins', parse_int, required = True),
            Attribute('equivalent', enum_of(PortEquivalence), default = PortEquivalence.none),
            Attribute('is_non_clock_global', parse_bool if is_input else _input_only, default = False),
            Attribute('port_class', PortClass.parse, default = PortClass.none),
            )

_port_attributes_by_tag = {tag: _port_attributes(tag == 'input') for tag in PORT_TAGS}

def parse_port(reader, start):
    """Parse a port element.

    Args:
        reader (`XMLEventReader`):
        start (`XMLEvent`): The start tag, one of `PORT_TAGS`

    Returns:
        `Port`:
    """
    values = expect_empty(reader, start, _port_attributes_by_tag[start.name])
    return Port(PortType.from_text(start.name), values['name'], values['num_pins'],
            equivalent = values['equivalent'],
            port_class = values['port_class'],
            is_non_clock_global = values['is_non_clock_global'])
