# -*- encoding: ascii -*-
"""Ports of tiles, sub-tiles and logic-block types."""

from ..util import Enum, parse_int

from collections import namedtuple

__all__ = ['PortType', 'PortEquivalence', 'PortClassKind', 'PortClass', 'Port']

# ----------------------------------------------------------------------------
# -- Enums -------------------------------------------------------------------
# ----------------------------------------------------------------------------
class PortType(Enum):
    """Direction of a port, named after its XML tag."""
    input_ = 0
    output = 1
    clock = 2

class PortEquivalence(Enum):
    """Logical equivalence of the pins of a port."""
    none = 0        #: pins are not swappable
    full = 1        #: all pins are logically equivalent
    instance = 2    #: pins are equivalent across instances only

class PortClassKind(Enum):
    """Kinds of port classes."""
    none = 0
    lut_in = 1
    lut_out = 2
    D = 3
    Q = 4
    clock = 5
    address = 6
    data_in = 7
    write_en = 8
    data_out = 9
    read_en = 10

    @property
    def is_memory(self):
        """:obj:`bool`: If this is a memory port class, which carries a port index."""
        return self >= PortClassKind.address

# ----------------------------------------------------------------------------
# -- Port Class --------------------------------------------------------------
# ----------------------------------------------------------------------------
class PortClass(namedtuple('PortClass', 'kind index')):
    """Classification of a port.

    Args:
        kind (`PortClassKind`): Kind of the class
        index (:obj:`int`): Index of the memory port, e.g. 2 for ``data_in2``. ``None`` for non-memory classes
    """

    def __new__(cls, kind, index = None):
        if kind.is_memory and index is None:
            index = 1
        return super(PortClass, cls).__new__(cls, kind, index)

    @classmethod
    def parse(cls, text):
        """Parse the value of a ``port_class`` attribute.

        Memory classes take an optional integer suffix, e.g. ``address``, ``address1``, ``data_out2``.

        Raises:
            `ValueError`: If ``text`` is not a known port class
        """
        for kind in PortClassKind:
            if kind.is_memory and text.startswith(kind.name):
                suffix = text[len(kind.name):]
                try:
                    return cls(kind, parse_int(suffix) if suffix else 1)
                except ValueError:
                    raise ValueError("Unknown port class: {}".format(text))
            elif not kind.is_memory and not kind.is_none and text == kind.name:
                return cls(kind)
        raise ValueError("Unknown port class: {}".format(text))

    def __str__(self):
        if self.kind.is_memory:
            return '{}{}'.format(self.kind.name, self.index)
        return self.kind.name

PortClass.none = PortClass(PortClassKind.none)

# ----------------------------------------------------------------------------
# -- Port --------------------------------------------------------------------
# ----------------------------------------------------------------------------
class Port(namedtuple('Port', 'type_ name num_pins equivalent port_class is_non_clock_global')):
    """A port declared with ``<input>``, ``<output>`` or ``<clock>``.

    Args:
        type_ (`PortType`): Type of the port
        name (:obj:`str`): Name of the port
        num_pins (:obj:`int`): Number of pins

    Keyword Args:
        equivalent (`PortEquivalence`):
        port_class (`PortClass`):
        is_non_clock_global (:obj:`bool`): Only meaningful for input ports
    """

    def __new__(cls, type_, name, num_pins, *, equivalent = PortEquivalence.none, port_class = PortClass.none,
            is_non_clock_global = False):
        return super(Port, cls).__new__(cls, type_, name, num_pins, equivalent, port_class, is_non_clock_global)
