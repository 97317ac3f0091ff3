# -*- encoding: ascii -*-
"""Tiles and sub-tiles."""

from ..util import Enum, parse_int, parse_float

from collections import namedtuple

__all__ = ['PinMapping', 'EquivalentSite', 'FCType', 'FCValue', 'FCOverride', 'SubTileFC',
        'PinLocationsPattern', 'PinLoc', 'PinLocations', 'SubTile', 'SwitchBlockLocationsPattern', 'SBLocType',
        'SBLoc', 'SwitchBlockLocations', 'Tile']

# ----------------------------------------------------------------------------
# -- Equivalent Sites --------------------------------------------------------
# ----------------------------------------------------------------------------
class PinMapping(Enum):
    """How the pins of a sub-tile map onto the pins of a site."""
    direct = 0
    custom = 1

class EquivalentSite(namedtuple('EquivalentSite', 'pb_type pin_mapping')):
    """A logic-block type that may be placed in a sub-tile.

    Args:
        pb_type (:obj:`str`): Name of the root logic-block type
        pin_mapping (`PinMapping`):
    """
    pass

# ----------------------------------------------------------------------------
# -- Connection Block Flexibility --------------------------------------------
# ----------------------------------------------------------------------------
class FCType(Enum):
    """Fc given as a fraction of the channel width or an absolute number of tracks."""
    frac = 0
    abs = 1

class FCValue(namedtuple('FCValue', 'type_ value')):
    """An Fc value: :obj:`float` for `FCType.frac`, :obj:`int` for `FCType.abs`."""

    @classmethod
    def parse(cls, type_text, value_text):
        """Convert a pair of ``*_type``/``*_val`` attribute values.

        Raises:
            `ValueError`: If either text is malformed
        """
        if type_text == 'frac':
            return cls(FCType.frac, parse_float(value_text))
        elif type_text == 'abs':
            return cls(FCType.abs, parse_int(value_text))
        raise ValueError("Unknown fc_type: {}".format(type_text))

class FCOverride(namedtuple('FCOverride', 'fc port_name segment_name')):
    """A per-port and/or per-segment Fc override.

    Args:
        fc (`FCValue`):
        port_name (:obj:`str`): ``None`` if the override applies to all ports
        segment_name (:obj:`str`): ``None`` if the override applies to all segments
    """
    pass

class SubTileFC(namedtuple('SubTileFC', 'in_fc out_fc overrides')):
    """The ``<fc>`` settings of a sub-tile."""

    def __new__(cls, in_fc, out_fc, overrides = tuple()):
        return super(SubTileFC, cls).__new__(cls, in_fc, out_fc, tuple(overrides))

# ----------------------------------------------------------------------------
# -- Pin Locations -----------------------------------------------------------
# ----------------------------------------------------------------------------
class PinLocationsPattern(Enum):
    """Policies for distributing pins around a tile."""
    spread = 0
    perimeter = 1
    spread_inputs_perimeter_outputs = 2
    custom = 3

class PinLoc(namedtuple('PinLoc', 'side xoffset yoffset pin_strings')):
    """One ``<loc>`` of a custom pin-location list.

    Args:
        side (`PinSide`):
        xoffset (:obj:`int`):
        yoffset (:obj:`int`):
        pin_strings (:obj:`tuple` [:obj:`str` ]): Pin expressions, e.g. ``clb.I[3:0]``
    """
    pass

class PinLocations(namedtuple('PinLocations', 'pattern locations')):
    """Pin-location policy of a sub-tile. ``locations`` is non-empty only for the custom pattern."""

    def __new__(cls, pattern, locations = tuple()):
        return super(PinLocations, cls).__new__(cls, pattern, tuple(locations))

# ----------------------------------------------------------------------------
# -- Sub-tile ----------------------------------------------------------------
# ----------------------------------------------------------------------------
class SubTile(namedtuple('SubTile', 'name capacity equivalent_sites ports fc pin_locations')):
    """A capacity slot within a tile.

    Args:
        name (:obj:`str`):
        capacity (:obj:`int`): Number of instances
        equivalent_sites (:obj:`tuple` [`EquivalentSite` ]):
        ports (:obj:`tuple` [`Port` ]):
        fc (`SubTileFC`):
        pin_locations (`PinLocations`):
    """
    pass

# ----------------------------------------------------------------------------
# -- Switch Block Locations --------------------------------------------------
# ----------------------------------------------------------------------------
class SwitchBlockLocationsPattern(Enum):
    """Where switch blocks are placed inside a multi-grid tile."""
    external_full_internal_straight = 0
    all = 1
    external = 2
    internal = 3
    none = 4
    custom = 5

class SBLocType(Enum):
    """Type of switch block at a custom location."""
    full = 0
    straight = 1
    turns = 2
    none = 3

class SBLoc(namedtuple('SBLoc', 'type_ xoffset yoffset switch_override')):
    """One ``<sb_loc>`` of a custom switch-block location list."""
    pass

class SwitchBlockLocations(namedtuple('SwitchBlockLocations', 'pattern internal_switch locations')):
    """The ``<switchblock_locations>`` override of a tile."""

    def __new__(cls, pattern, internal_switch = None, locations = tuple()):
        return super(SwitchBlockLocations, cls).__new__(cls, pattern, internal_switch, tuple(locations))

# ----------------------------------------------------------------------------
# -- Tile --------------------------------------------------------------------
# ----------------------------------------------------------------------------
class Tile(namedtuple('Tile', 'name width height area ports sub_tiles switchblock_locations')):
    """A placeable grid cell type.

    Args:
        name (:obj:`str`):

    Keyword Args:
        width (:obj:`int`): Width in grid units
        height (:obj:`int`): Height in grid units
        area (:obj:`float`): ``None`` if not given
        ports (:obj:`tuple` [`Port` ]):
        sub_tiles (:obj:`tuple` [`SubTile` ]):
        switchblock_locations (`SwitchBlockLocations`): ``None`` if not given
    """

    def __new__(cls, name, *, width = 1, height = 1, area = None, ports = tuple(), sub_tiles = tuple(),
            switchblock_locations = None):
        return super(Tile, cls).__new__(cls, name, width, height, area, tuple(ports), tuple(sub_tiles),
                switchblock_locations)

    @property
    def capacity(self):
        """:obj:`int`: Total capacity of all sub-tiles."""
        return sum(sub_tile.capacity for sub_tile in self.sub_tiles)
