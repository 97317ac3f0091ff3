# -*- encoding: ascii -*-
"""Device-wide parameters from the ``<device>`` section."""

from ..util import Enum

from collections import namedtuple

__all__ = ['SwitchBlockType', 'ChanWidthDistrType', 'ChanWidthDistr', 'DeviceSizing', 'ConnectionBlock',
        'DeviceArea', 'SwitchBlock', 'ChanWidthDistribution', 'Device']

class SwitchBlockType(Enum):
    """Switch-block topologies."""
    wilton = 0
    subset = 1
    universal = 2
    custom = 3

class ChanWidthDistrType(Enum):
    """Channel-width distributions."""
    gaussian = 0
    uniform = 1
    pulse = 2
    delta = 3

    @property
    def required(self):
        """:obj:`tuple` [:obj:`str` ]: Attributes required besides ``peak``."""
        return self.case(
                ('width', 'xpeak', 'dc'),
                tuple(),
                ('width', 'xpeak', 'dc'),
                ('xpeak', 'dc'),
                )

class ChanWidthDistr(namedtuple('ChanWidthDistr', 'type_ peak width xpeak dc')):
    """Channel-width distribution along one axis. Parameters not used by ``type_`` are ``None``."""

    def __new__(cls, type_, peak, *, width = None, xpeak = None, dc = None):
        return super(ChanWidthDistr, cls).__new__(cls, type_, peak, width, xpeak, dc)

class DeviceSizing(namedtuple('DeviceSizing', 'R_minW_nmos R_minW_pmos')):
    pass

class ConnectionBlock(namedtuple('ConnectionBlock', 'input_switch_name')):
    pass

class DeviceArea(namedtuple('DeviceArea', 'grid_logic_tile_area')):
    pass

class SwitchBlock(namedtuple('SwitchBlock', 'type_ fs')):
    """Switch-block topology and flexibility. ``fs`` is ``None`` if not given."""
    pass

class ChanWidthDistribution(namedtuple('ChanWidthDistribution', 'x y')):
    pass

class Device(namedtuple('Device', 'sizing connection_block area switch_block chan_width_distr')):
    """The ``<device>`` section.

    Args:
        sizing (`DeviceSizing`):
        connection_block (`ConnectionBlock`):
        area (`DeviceArea`):
        switch_block (`SwitchBlock`):
        chan_width_distr (`ChanWidthDistribution`):
    """
    pass
