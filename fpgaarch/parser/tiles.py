# -*- encoding: ascii -*-
"""Parser for the ``<tiles>`` section."""

from .base import (Attribute, AttributeTable, iter_children, invalid_child, no_attributes, close_element,
        expect_empty, read_text, check_unique, require, enum_of, parse_word_list)
from .port import PORT_TAGS, parse_port
from ..arch.common import PinSide
from ..arch.tile import (PinMapping, EquivalentSite, FCValue, FCOverride, SubTileFC, PinLocationsPattern, PinLoc,
        PinLocations, SubTile, SwitchBlockLocationsPattern, SBLocType, SBLoc, SwitchBlockLocations, Tile)
from ..exception import ArchParseErrorKind
from ..util import parse_int, parse_float

__all__ = ['parse_tiles']

# ----------------------------------------------------------------------------
# -- Switch Block Locations --------------------------------------------------
# ----------------------------------------------------------------------------
_sb_loc_attributes = AttributeTable(
        Attribute('type', enum_of(SBLocType), default = SBLocType.full),
        Attribute('xoffset', parse_int, default = 0),
        Attribute('yoffset', parse_int, default = 0),
        Attribute('switch_override'),
        )

_switchblock_locations_attributes = AttributeTable(
        Attribute('pattern', enum_of(SwitchBlockLocationsPattern),
            default = SwitchBlockLocationsPattern.external_full_internal_straight),
        Attribute('internal_switch'),
        )

def _parse_switchblock_locations(reader, start):
    values = _switchblock_locations_attributes.parse(reader, start)
    locations = []
    for event in iter_children(reader, start):
        if event.name != 'sb_loc' or not values['pattern'].is_custom:
            raise invalid_child(reader, event)
        sb_loc = expect_empty(reader, event, _sb_loc_attributes)
        locations.append(SBLoc(sb_loc['type'], sb_loc['xoffset'], sb_loc['yoffset'], sb_loc['switch_override']))
    return SwitchBlockLocations(values['pattern'], values['internal_switch'], locations)

# ----------------------------------------------------------------------------
# -- Equivalent Sites --------------------------------------------------------
# ----------------------------------------------------------------------------
_site_attributes = AttributeTable(
        Attribute('pb_type', required = True),
        Attribute('pin_mapping', enum_of(PinMapping), default = PinMapping.direct),
        )

def _parse_equivalent_sites(reader, start):
    no_attributes(reader, start)
    sites = []
    for event in iter_children(reader, start):
        if event.name != 'site':
            raise invalid_child(reader, event)
        values = expect_empty(reader, event, _site_attributes)
        sites.append(EquivalentSite(values['pb_type'], values['pin_mapping']))
    return tuple(sites)

# ----------------------------------------------------------------------------
# -- Fc ----------------------------------------------------------------------
# ----------------------------------------------------------------------------
_fc_attributes = AttributeTable(
        Attribute('in_type', required = True),
        Attribute('in_val', required = True),
        Attribute('out_type', required = True),
        Attribute('out_val', required = True),
        )

_fc_override_attributes = AttributeTable(
        Attribute('fc_type', required = True),
        Attribute('fc_val', required = True),
        Attribute('port_name'),
        Attribute('segment_name'),
        )

def _fc_value(reader, values, type_key, val_key):
    try:
        return FCValue.parse(values[type_key], values[val_key])
    except ValueError as e:
        raise reader.error(ArchParseErrorKind.attribute_parse, '{}: {}'.format(val_key, e))

def _parse_fc(reader, start):
    values = _fc_attributes.parse(reader, start)
    in_fc = _fc_value(reader, values, 'in_type', 'in_val')
    out_fc = _fc_value(reader, values, 'out_type', 'out_val')
    overrides = []
    for event in iter_children(reader, start):
        if event.name != 'fc_override':
            raise invalid_child(reader, event)
        override = _fc_override_attributes.parse(reader, event)
        if override['port_name'] is None and override['segment_name'] is None:
            raise reader.error(ArchParseErrorKind.missing_required_attribute, "port_name or segment_name")
        fc = _fc_value(reader, override, 'fc_type', 'fc_val')
        close_element(reader, event)
        overrides.append(FCOverride(fc, override['port_name'], override['segment_name']))
    return SubTileFC(in_fc, out_fc, overrides)

# ----------------------------------------------------------------------------
# -- Pin Locations -----------------------------------------------------------
# ----------------------------------------------------------------------------
_pinlocations_attributes = AttributeTable(
        Attribute('pattern', enum_of(PinLocationsPattern), required = True),
        )

_loc_attributes = AttributeTable(
        Attribute('side', enum_of(PinSide), required = True),
        Attribute('xoffset', parse_int, default = 0),
        Attribute('yoffset', parse_int, default = 0),
        )

def _parse_pinlocations(reader, start):
    pattern = _pinlocations_attributes.parse(reader, start)['pattern']
    locations = []
    for event in iter_children(reader, start):
        if event.name != 'loc':
            raise invalid_child(reader, event)
        elif not pattern.is_custom:
            raise reader.error(ArchParseErrorKind.invalid_tag, "Pin locations can only be given for custom pattern")
        values = _loc_attributes.parse(reader, event)
        text = read_text(reader, event)
        locations.append(PinLoc(values['side'], values['xoffset'], values['yoffset'],
            tuple() if text is None else parse_word_list(text)))
    return PinLocations(pattern, locations)

# ----------------------------------------------------------------------------
# -- Sub-tile ----------------------------------------------------------------
# ----------------------------------------------------------------------------
_sub_tile_attributes = AttributeTable(
        Attribute('name', required = True),
        Attribute('capacity', parse_int, default = 1),
        )

def _parse_sub_tile(reader, start):
    values = _sub_tile_attributes.parse(reader, start)
    sites, fc, pin_locations, ports = None, None, None, []
    for event in iter_children(reader, start):
        if event.name in PORT_TAGS:
            ports.append(parse_port(reader, event))
        elif event.name == 'equivalent_sites':
            check_unique(reader, event, sites)
            sites = _parse_equivalent_sites(reader, event)
        elif event.name == 'fc':
            check_unique(reader, event, fc)
            fc = _parse_fc(reader, event)
        elif event.name == 'pinlocations':
            check_unique(reader, event, pin_locations)
            pin_locations = _parse_pinlocations(reader, event)
        else:
            raise invalid_child(reader, event)
    return SubTile(values['name'], values['capacity'],
            require(reader, sites, 'equivalent_sites'),
            tuple(ports),
            require(reader, fc, 'fc'),
            require(reader, pin_locations, 'pinlocations'))

# ----------------------------------------------------------------------------
# -- Tile --------------------------------------------------------------------
# ----------------------------------------------------------------------------
_tile_attributes = AttributeTable(
        Attribute('name', required = True),
        Attribute('width', parse_int, default = 1),
        Attribute('height', parse_int, default = 1),
        Attribute('area', parse_float),
        )

def _parse_tile(reader, start):
    values = _tile_attributes.parse(reader, start)
    ports, sub_tiles, sb_locations = [], [], None
    for event in iter_children(reader, start):
        if event.name in PORT_TAGS:
            ports.append(parse_port(reader, event))
        elif event.name == 'sub_tile':
            sub_tiles.append(_parse_sub_tile(reader, event))
        elif event.name == 'switchblock_locations':
            check_unique(reader, event, sb_locations)
            sb_locations = _parse_switchblock_locations(reader, event)
        else:
            raise invalid_child(reader, event)
    return Tile(values['name'],
            width = values['width'],
            height = values['height'],
            area = values['area'],
            ports = ports,
            sub_tiles = sub_tiles,
            switchblock_locations = sb_locations)

def parse_tiles(reader, start):
    """Parse the ``<tiles>`` section.

    Returns:
        :obj:`tuple` [`Tile` ]:
    """
    no_attributes(reader, start)
    tiles = []
    for event in iter_children(reader, start):
        if event.name != 'tile':
            raise invalid_child(reader, event)
        tiles.append(_parse_tile(reader, event))
    return tuple(tiles)
