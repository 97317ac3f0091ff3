# -*- encoding: ascii -*-
"""Parser for the ``<layout>`` section."""

from .base import Attribute, AttributeTable, iter_children, invalid_child, check_unique
from .metadata import parse_metadata
from ..arch.layout import GridLocationType, GridLocation, AutoLayout, FixedLayout, TileableLayoutConfig
from ..exception import ArchParseErrorKind
from ..util import parse_int, parse_float

__all__ = ['parse_layouts']

def parse_flag(text):
    """Parse a permissive boolean: ``true``/``on``/``1``/``yes`` or ``false``/``off``/``0``/``no``."""
    lowered = text.lower()
    if lowered in ('true', 'on', '1', 'yes'):
        return True
    elif lowered in ('false', 'off', '0', 'no'):
        return False
    raise ValueError("Invalid boolean value: {}".format(text))

# ----------------------------------------------------------------------------
# -- Grid Locations ----------------------------------------------------------
# ----------------------------------------------------------------------------
_grid_location_attributes = AttributeTable(
        Attribute('type', required = True),
        Attribute('priority', parse_int, required = True),
        Attribute('x'),
        Attribute('y'),
        Attribute('startx', default = '0'),
        Attribute('endx', default = 'W - 1'),
        Attribute('repeatx'),
        Attribute('incrx', default = 'w'),
        Attribute('starty', default = '0'),
        Attribute('endy', default = 'H - 1'),
        Attribute('repeaty'),
        Attribute('incry', default = 'h'),
        )

def _parse_grid_location(reader, start):
    try:
        type_ = GridLocationType.from_text(start.name)
    except ValueError:
        raise reader.error(ArchParseErrorKind.invalid_tag, "Unknown grid location: {}".format(start.name))
    values = _grid_location_attributes.parse(reader, start)
    metadata = None
    for event in iter_children(reader, start):
        if event.name != 'metadata':
            raise invalid_child(reader, event)
        check_unique(reader, event, metadata)
        metadata = parse_metadata(reader, event)
    # x/y of <single> are checked once the element is closed
    if type_.is_single:
        for attr in ('x', 'y'):
            if values[attr] is None:
                raise reader.error(ArchParseErrorKind.missing_required_attribute, attr)
    return GridLocation(type_, values['type'], values['priority'], metadata = metadata,
            **{field: values[field] for field in type_.fields})

def _parse_grid_locations(reader, start):
    return tuple(_parse_grid_location(reader, event) for event in iter_children(reader, start))

# ----------------------------------------------------------------------------
# -- Layouts -----------------------------------------------------------------
# ----------------------------------------------------------------------------
_auto_layout_attributes = AttributeTable(Attribute('aspect_ratio', parse_float, default = 1.0))

_fixed_layout_attributes = AttributeTable(
        Attribute('name', required = True),
        Attribute('width', parse_int, required = True),
        Attribute('height', parse_int, required = True),
        )

_tileable_options = TileableLayoutConfig._fields

_layout_attributes = AttributeTable(*(Attribute(option, parse_flag) for option in _tileable_options))

def parse_layouts(reader, start):
    """Parse the ``<layout>`` section.

    Returns:
        :obj:`tuple` [`AutoLayout` or `FixedLayout` ]: Layouts in document order
        `TileableLayoutConfig`: Tileable options, or ``None`` if none is given
    """
    options = _layout_attributes.parse(reader, start)
    config = None
    if any(options[option] is not None for option in _tileable_options):
        config = TileableLayoutConfig(**{option: bool(options[option]) for option in _tileable_options})
    layouts = []
    for event in iter_children(reader, start):
        if event.name == 'auto_layout':
            values = _auto_layout_attributes.parse(reader, event)
            layouts.append(AutoLayout(values['aspect_ratio'], _parse_grid_locations(reader, event)))
        elif event.name == 'fixed_layout':
            values = _fixed_layout_attributes.parse(reader, event)
            layouts.append(FixedLayout(values['name'], values['width'], values['height'],
                _parse_grid_locations(reader, event)))
        else:
            raise invalid_child(reader, event)
    return tuple(layouts), config
