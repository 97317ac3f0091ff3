# -*- encoding: ascii -*-
"""Routing resources: switches, segments, custom switch blocks and global directs."""

from ..util import Enum

from collections import namedtuple

__all__ = ['SwitchType', 'SwitchDelay', 'Switch',
        'SegmentAxis', 'SegmentType', 'SegmentResourceType', 'Segment',
        'CustomSwitchBlockType', 'SwitchBlockLocationType', 'CustomSwitchBlockLocation', 'SwitchFuncType',
        'SwitchFunc', 'WireOrder', 'WireConnPoint', 'WireConn', 'CustomSwitchBlock',
        'GlobalDirect']

# ----------------------------------------------------------------------------
# -- Switches ----------------------------------------------------------------
# ----------------------------------------------------------------------------
class SwitchType(Enum):
    """Electrical kinds of routing switches."""
    mux = 0
    tristate = 1
    pass_gate = 2
    short = 3
    buffer = 4

class SwitchDelay(namedtuple('SwitchDelay', 'num_inputs delay')):
    """A ``<Tdel>`` entry: delay of a switch driven by ``num_inputs`` inputs."""
    pass

class Switch(namedtuple('Switch', 'type_ name R Cin Cout Cinternal Tdel buf_size mux_trans_size power_buf_size '
    'delays')):
    """A routing switch.

    Args:
        type_ (`SwitchType`):
        name (:obj:`str`):
        R (:obj:`float`): Output resistance
        Cin (:obj:`float`): Input capacitance
        Cout (:obj:`float`): Output capacitance

    Keyword Args:
        Cinternal (:obj:`float`):
        Tdel (:obj:`float`): Intrinsic delay, ``None`` if given by ``delays`` only
        buf_size (:obj:`float` or :obj:`str`): Buffer size, or ``"auto"``
        mux_trans_size (:obj:`float`):
        power_buf_size (:obj:`int`):
        delays (:obj:`tuple` [`SwitchDelay` ]): Fan-in dependent delays
    """

    def __new__(cls, type_, name, R, Cin, Cout, *, Cinternal = None, Tdel = None, buf_size = "auto",
            mux_trans_size = None, power_buf_size = None, delays = tuple()):
        return super(Switch, cls).__new__(cls, type_, name, R, Cin, Cout, Cinternal, Tdel, buf_size,
                mux_trans_size, power_buf_size, tuple(delays))

# ----------------------------------------------------------------------------
# -- Segments ----------------------------------------------------------------
# ----------------------------------------------------------------------------
class SegmentAxis(Enum):
    x = 0
    y = 1
    xy = 2
    z = 3

class SegmentType(Enum):
    """Driving direction of a wire segment."""
    bidir = 0
    unidir = 1

class SegmentResourceType(Enum):
    GCLK = 0
    GENERAL = 1

class Segment(namedtuple('Segment', 'axis name length type_ res_type freq Rmetal Cmetal sb_pattern cb_pattern '
    'mux_inc mux_dec wire_switch opin_switch')):
    """A routing wire type.

    Unidirectional segments carry ``mux_inc``/``mux_dec`` (identical when a single ``<mux>`` is given);
    bidirectional segments carry ``wire_switch``/``opin_switch``. The switches that do not apply are ``None``.

    Args:
        sb_pattern (:obj:`tuple` [:obj:`bool` ]): Switch-block population, ``length + 1`` entries
        cb_pattern (:obj:`tuple` [:obj:`bool` ]): Connection-block population, ``length`` entries
    """

    def __new__(cls, name, length, type_, freq, Rmetal, Cmetal, sb_pattern, cb_pattern, *,
            axis = SegmentAxis.xy, res_type = SegmentResourceType.GENERAL,
            mux_inc = None, mux_dec = None, wire_switch = None, opin_switch = None):
        return super(Segment, cls).__new__(cls, axis, name, length, type_, res_type, freq, Rmetal, Cmetal,
                tuple(sb_pattern), tuple(cb_pattern), mux_inc, mux_dec, wire_switch, opin_switch)

# ----------------------------------------------------------------------------
# -- Custom Switch Blocks ----------------------------------------------------
# ----------------------------------------------------------------------------
class CustomSwitchBlockType(Enum):
    unidir = 0
    bidir = 1

class SwitchBlockLocationType(Enum):
    """Where in the grid a custom switch block applies."""
    EVERYWHERE = 0
    PERIMETER = 1
    CORNER = 2
    FRINGE = 3
    CORE = 4
    XY_SPECIFIED = 5

class CustomSwitchBlockLocation(namedtuple('CustomSwitchBlockLocation', 'type_ x y')):
    """``x`` and ``y`` are given for `SwitchBlockLocationType.XY_SPECIFIED` only."""

    def __new__(cls, type_, x = None, y = None):
        return super(CustomSwitchBlockLocation, cls).__new__(cls, type_, x, y)

class SwitchFuncType(Enum):
    """Side pairs of a switch function: first letter is the source side, second letter the sink side."""
    lt = 0
    lr = 1
    lb = 2
    tr = 3
    tb = 4
    tl = 5
    rb = 6
    rl = 7
    rt = 8
    bl = 9
    bt = 10
    br = 11

class SwitchFunc(namedtuple('SwitchFunc', 'type_ formula')):
    """A permutation function. ``formula`` is kept as opaque text, e.g. ``(W + t - 1) % W``."""
    pass

class WireOrder(Enum):
    shuffled = 0
    fixed = 1

class WireConnPoint(namedtuple('WireConnPoint', 'type_ switchpoints')):
    """A wire type and the switch points on it that a wire connection uses.

    Args:
        type_ (:obj:`str`): Segment name
        switchpoints (:obj:`tuple` [:obj:`int` ]):
    """
    pass

class WireConn(namedtuple('WireConn', 'num_conns from_points to_points from_order to_order switch_override')):
    """A ``<wireconn>`` of a custom switch block.

    Args:
        num_conns (:obj:`str`): Number of connections, an opaque expression
        from_points (:obj:`tuple` [`WireConnPoint` ]): Never empty
        to_points (:obj:`tuple` [`WireConnPoint` ]): Never empty

    Keyword Args:
        from_order (`WireOrder`):
        to_order (`WireOrder`):
        switch_override (:obj:`str`):
    """

    def __new__(cls, num_conns, from_points, to_points, *, from_order = WireOrder.shuffled,
            to_order = WireOrder.shuffled, switch_override = None):
        return super(WireConn, cls).__new__(cls, num_conns, tuple(from_points), tuple(to_points), from_order,
                to_order, switch_override)

class CustomSwitchBlock(namedtuple('CustomSwitchBlock', 'name type_ location switchfuncs wireconns')):
    """A ``<switchblock>``.

    Args:
        name (:obj:`str`):
        type_ (`CustomSwitchBlockType`):
        location (`CustomSwitchBlockLocation`):
        switchfuncs (:obj:`tuple` [`SwitchFunc` ]):
        wireconns (:obj:`tuple` [`WireConn` ]):
    """
    pass

# ----------------------------------------------------------------------------
# -- Global Directs ----------------------------------------------------------
# ----------------------------------------------------------------------------
class GlobalDirect(namedtuple('GlobalDirect', 'name from_pin to_pin x_offset y_offset z_offset switch_name '
    'from_side to_side')):
    """A dedicated inter-tile connection from ``<directlist>``."""

    def __new__(cls, name, from_pin, to_pin, x_offset, y_offset, z_offset, *, switch_name = None,
            from_side = None, to_side = None):
        return super(GlobalDirect, cls).__new__(cls, name, from_pin, to_pin, x_offset, y_offset, z_offset,
                switch_name, from_side, to_side)
