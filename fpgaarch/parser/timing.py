# -*- encoding: ascii -*-
"""Parsers for delay records and sequential timing constraints."""

from .base import Attribute, AttributeTable, close_element, read_text, enum_of
from ..arch.timing import DelayType, DelayConstant, DelayMatrix, TimingConstraintType, TimingConstraint
from ..exception import ArchParseErrorKind
from ..util import parse_float

__all__ = ['DELAY_TAGS', 'TIMING_TAGS', 'parse_matrix', 'parse_delay', 'parse_timing_constraint']

DELAY_TAGS = ('delay_constant', 'delay_matrix')
TIMING_TAGS = ('T_setup', 'T_hold', 'T_clock_to_Q')

# ----------------------------------------------------------------------------
# -- Helpers -----------------------------------------------------------------
# ----------------------------------------------------------------------------
def parse_matrix(text):
    """Parse the text of a ``<delay_matrix>``.

    Lines are rows and whitespace separates cells. Blank lines are ignored.

    Returns:
        :obj:`tuple` [:obj:`tuple` [:obj:`float` ]]:

    Raises:
        `ValueError`: If a cell is not a number
    """
    rows = []
    for line in text.split('\n'):
        if cells := line.split():
            rows.append(tuple(parse_float(cell) for cell in cells))
    return tuple(rows)

def _resolve_min_max(reader, values):
    """Fill in ``min``/``max`` from each other. At least one must be given."""
    min_, max_ = values['min'], values['max']
    if min_ is None and max_ is None:
        raise reader.error(ArchParseErrorKind.missing_required_attribute,
                "At least one of the max or min attributes must be specified")
    elif min_ is None:
        min_ = max_
    elif max_ is None:
        max_ = min_
    return min_, max_

# ----------------------------------------------------------------------------
# -- Delay Records -----------------------------------------------------------
# ----------------------------------------------------------------------------
_delay_constant_attributes = AttributeTable(
        Attribute('min', parse_float),
        Attribute('max', parse_float),
        Attribute('in_port', required = True),
        Attribute('out_port', required = True),
        )

_delay_matrix_attributes = AttributeTable(
        Attribute('type', enum_of(DelayType), required = True),
        Attribute('in_port', required = True),
        Attribute('out_port', required = True),
        )

def parse_delay(reader, start):
    """Parse a ``<delay_constant>`` or ``<delay_matrix>`` element.

    Returns:
        `DelayConstant` or `DelayMatrix`:
    """
    if start.name == 'delay_constant':
        values = _delay_constant_attributes.parse(reader, start)
        min_, max_ = _resolve_min_max(reader, values)
        close_element(reader, start)
        return DelayConstant(min_, max_, values['in_port'], values['out_port'])
    values = _delay_matrix_attributes.parse(reader, start)
    if (text := read_text(reader, start)) is None:
        raise reader.error(ArchParseErrorKind.invalid_tag, "Expected a delay matrix within delay_matrix.")
    try:
        matrix = parse_matrix(text)
    except ValueError as e:
        raise reader.error(ArchParseErrorKind.invalid_tag, "Matrix text parse error: {}".format(e))
    return DelayMatrix(values['type'], matrix, values['in_port'], values['out_port'])

# ----------------------------------------------------------------------------
# -- Timing Constraints ------------------------------------------------------
# ----------------------------------------------------------------------------
_single_value_attributes = AttributeTable(
        Attribute('value', parse_float, required = True),
        Attribute('port', required = True),
        Attribute('clock', required = True),
        )

_clock_to_q_attributes = AttributeTable(
        Attribute('min', parse_float),
        Attribute('max', parse_float),
        Attribute('port', required = True),
        Attribute('clock', required = True),
        )

def parse_timing_constraint(reader, start):
    """Parse a ``<T_setup>``, ``<T_hold>`` or ``<T_clock_to_Q>`` element.

    Returns:
        `TimingConstraint`:
    """
    type_ = TimingConstraintType.from_text(start.name)
    if type_.is_T_clock_to_Q:
        values = _clock_to_q_attributes.parse(reader, start)
        min_, max_ = _resolve_min_max(reader, values)
    else:
        values = _single_value_attributes.parse(reader, start)
        min_ = max_ = values['value']
    close_element(reader, start)
    return TimingConstraint(type_, values['port'], values['clock'], min_, max_)
