# -*- encoding: ascii -*-
"""Delay and timing-constraint records of logic-block types and interconnects."""

from ..util import Enum

from collections import namedtuple

__all__ = ['DelayType', 'DelayConstant', 'DelayMatrix', 'TimingConstraintType', 'TimingConstraint']

class DelayType(Enum):
    """Which bound a delay matrix specifies."""
    max = 0
    min = 1

class DelayConstant(namedtuple('DelayConstant', 'min max in_port out_port')):
    """A ``<delay_constant>`` record.

    Args:
        min (:obj:`float`): Minimum delay
        max (:obj:`float`): Maximum delay
        in_port (:obj:`str`): Source port expression
        out_port (:obj:`str`): Sink port expression
    """
    pass

class DelayMatrix(namedtuple('DelayMatrix', 'type_ matrix in_port out_port')):
    """A ``<delay_matrix>`` record.

    Args:
        type_ (`DelayType`):
        matrix (:obj:`tuple` [:obj:`tuple` [:obj:`float` ]]): Rows of delay values
        in_port (:obj:`str`): Source port expression
        out_port (:obj:`str`): Sink port expression
    """
    pass

class TimingConstraintType(Enum):
    """Sequential timing constraints, named after their XML tags."""
    T_setup = 0
    T_hold = 1
    T_clock_to_Q = 2

class TimingConstraint(namedtuple('TimingConstraint', 'type_ port clock min max')):
    """A ``<T_setup>``, ``<T_hold>`` or ``<T_clock_to_Q>`` record.

    Setup and hold constraints carry one value, stored as both ``min`` and ``max``.
    """
    pass
