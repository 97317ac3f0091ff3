# -*- encoding: ascii -*-
"""Grid layouts. Coordinate expressions are kept as opaque text."""

from ..util import Enum

from collections import namedtuple

__all__ = ['GridLocationType', 'GridLocation', 'AutoLayout', 'FixedLayout', 'TileableLayoutConfig']

# ----------------------------------------------------------------------------
# -- Grid Location -----------------------------------------------------------
# ----------------------------------------------------------------------------
class GridLocationType(Enum):
    """Placement rules, named after their XML tags."""
    fill = 0
    perimeter = 1
    corners = 2
    single = 3
    col = 4
    row = 5
    region = 6

    @property
    def fields(self):
        """:obj:`tuple` [:obj:`str` ]: Coordinate expressions meaningful for this kind of rule."""
        return self.case(
                tuple(), tuple(), tuple(),
                ('x', 'y'),
                ('startx', 'repeatx', 'starty', 'incry'),
                ('startx', 'incrx', 'starty', 'repeaty'),
                ('startx', 'endx', 'repeatx', 'incrx', 'starty', 'endy', 'repeaty', 'incry'),
                )

class GridLocation(namedtuple('GridLocation', 'type_ pb_type priority x y startx endx repeatx incrx '
    'starty endy repeaty incry metadata')):
    """One placement rule of a layout.

    Coordinate expressions that do not apply to ``type_`` are ``None``; see `GridLocationType.fields`.

    Args:
        type_ (`GridLocationType`):
        pb_type (:obj:`str`): Name of the tile placed
        priority (:obj:`int`): Higher priority rules override lower ones where they overlap
    """

    def __new__(cls, type_, pb_type, priority, *, x = None, y = None, startx = None, endx = None, repeatx = None,
            incrx = None, starty = None, endy = None, repeaty = None, incry = None, metadata = None):
        return super(GridLocation, cls).__new__(cls, type_, pb_type, priority, x, y, startx, endx, repeatx,
                incrx, starty, endy, repeaty, incry, metadata)

# ----------------------------------------------------------------------------
# -- Layouts -----------------------------------------------------------------
# ----------------------------------------------------------------------------
class AutoLayout(namedtuple('AutoLayout', 'aspect_ratio grid_locations')):
    """A layout whose size is determined by the placer."""

    @property
    def name(self):
        return 'auto'

class FixedLayout(namedtuple('FixedLayout', 'name width height grid_locations')):
    """A named layout of a fixed size."""
    pass

class TileableLayoutConfig(namedtuple('TileableLayoutConfig', 'tileable through_channel shrink_boundary '
    'perimeter_cb opin2all_sides concat_wire concat_pass_wire')):
    """Tileable-routing options given on the ``<layout>`` element. Options not given are ``False``."""

    def __new__(cls, tileable = False, through_channel = False, shrink_boundary = False, perimeter_cb = False,
            opin2all_sides = False, concat_wire = False, concat_pass_wire = False):
        return super(TileableLayoutConfig, cls).__new__(cls, tileable, through_channel, shrink_boundary,
                perimeter_cb, opin2all_sides, concat_wire, concat_pass_wire)
