# -*- encoding: ascii -*-

from fpgaarch.parser.tiles import parse_tiles
from fpgaarch.arch import (PinSide, PinMapping, EquivalentSite, FCType, FCValue, FCOverride, PinLocationsPattern,
        PinLoc, SwitchBlockLocationsPattern, SBLocType, SBLoc)
from fpgaarch.exception import ArchParseErrorKind, ArchParseError

import pytest

_clb = '''
<tiles>
    <tile name="clb" width="1" height="2" area="53894">
        <switchblock_locations pattern="custom" internal_switch="0">
            <sb_loc type="straight" yoffset="1"/>
            <sb_loc xoffset="0" yoffset="0" switch_override="1"/>
        </switchblock_locations>
        <sub_tile name="clb" capacity="2">
            <equivalent_sites>
                <site pb_type="clb"/>
                <site pb_type="clb_alt" pin_mapping="custom"/>
            </equivalent_sites>
            <input name="I" num_pins="40" equivalent="full"/>
            <output name="O" num_pins="20" equivalent="instance"/>
            <clock name="clk" num_pins="1"/>
            <fc in_type="frac" in_val="0.15" out_type="abs" out_val="10">
                <fc_override port_name="clk" fc_type="frac" fc_val="0"/>
                <fc_override segment_name="l4" fc_type="abs" fc_val="2"/>
            </fc>
            <pinlocations pattern="spread"/>
        </sub_tile>
    </tile>
</tiles>'''.strip()

_sub_tile = '''
<tiles><tile name="t"><sub_tile name="t">
    <equivalent_sites><site pb_type="t"/></equivalent_sites>
    <input name="i" num_pins="1"/>
    {}
</sub_tile></tile></tiles>'''.strip()

_fc = '<fc in_type="frac" in_val="1" out_type="frac" out_val="1"/>'

def test_tile(element):
    reader, start = element(_clb)
    tile, = parse_tiles(reader, start)

    assert tile.name == 'clb'
    assert (tile.width, tile.height, tile.area) == (1, 2, 53894.0)
    assert tile.ports == tuple()
    assert tile.capacity == 2

    sb = tile.switchblock_locations
    assert sb.pattern is SwitchBlockLocationsPattern.custom
    assert sb.internal_switch == '0'
    assert sb.locations == (SBLoc(SBLocType.straight, 0, 1, None), SBLoc(SBLocType.full, 0, 0, '1'))

    sub_tile, = tile.sub_tiles
    assert sub_tile.capacity == 2
    assert sub_tile.equivalent_sites == (EquivalentSite('clb', PinMapping.direct),
            EquivalentSite('clb_alt', PinMapping.custom))
    assert [(p.type_.text, p.name, p.num_pins) for p in sub_tile.ports] == [
            ('input', 'I', 40), ('output', 'O', 20), ('clock', 'clk', 1)]
    assert sub_tile.fc.in_fc == FCValue(FCType.frac, 0.15)
    assert sub_tile.fc.out_fc == FCValue(FCType.abs, 10)
    assert sub_tile.fc.overrides == (
            FCOverride(FCValue(FCType.frac, 0.0), 'clk', None),
            FCOverride(FCValue(FCType.abs, 2), None, 'l4'))
    assert sub_tile.pin_locations.pattern is PinLocationsPattern.spread
    assert sub_tile.pin_locations.locations == tuple()

def test_custom_pin_locations(element):
    reader, start = element(_sub_tile.format(_fc + '''
    <pinlocations pattern="custom">
        <loc side="left">t.i[0:0]</loc>
        <loc side="top" yoffset="1"/>
    </pinlocations>'''))
    tile, = parse_tiles(reader, start)
    assert (tile.width, tile.height, tile.area) == (1, 1, None)
    assert tile.sub_tiles[0].capacity == 1
    assert tile.sub_tiles[0].pin_locations.locations == (
            PinLoc(PinSide.left, 0, 0, ('t.i[0:0]', )),
            PinLoc(PinSide.top, 0, 1, tuple()))

def test_sub_tile_errors(element):
    # 1. missing sections
    reader, start = element(_sub_tile.format('<pinlocations pattern="spread"/>'))
    with pytest.raises(ArchParseError) as excinfo:
        parse_tiles(reader, start)
    assert excinfo.value.kind is ArchParseErrorKind.missing_required_tag
    assert excinfo.value.message == '<fc>'

    reader, start = element(_sub_tile.format(_fc))
    with pytest.raises(ArchParseError) as excinfo:
        parse_tiles(reader, start)
    assert excinfo.value.kind is ArchParseErrorKind.missing_required_tag
    assert excinfo.value.message == '<pinlocations>'

    # 2. locations under a non-custom pattern
    reader, start = element(_sub_tile.format(_fc +
        '<pinlocations pattern="perimeter"><loc side="left">t.i</loc></pinlocations>'))
    with pytest.raises(ArchParseError) as excinfo:
        parse_tiles(reader, start)
    assert excinfo.value.kind is ArchParseErrorKind.invalid_tag
    assert excinfo.value.message == "Pin locations can only be given for custom pattern"

    # 3. repeated fc
    reader, start = element(_sub_tile.format(_fc + _fc))
    with pytest.raises(ArchParseError) as excinfo:
        parse_tiles(reader, start)
    assert excinfo.value.kind is ArchParseErrorKind.duplicate_tag
    assert excinfo.value.message == '<fc>'

    # 4. malformed fc values
    reader, start = element(_sub_tile.format('<fc in_type="frac" in_val="x" out_type="frac" out_val="1"/>'))
    with pytest.raises(ArchParseError) as excinfo:
        parse_tiles(reader, start)
    assert excinfo.value.kind is ArchParseErrorKind.attribute_parse
    assert excinfo.value.message.startswith('in_val: ')

    reader, start = element(_sub_tile.format('<fc in_type="frac" in_val="1" out_type="abs" out_val="1_0"/>'))
    with pytest.raises(ArchParseError) as excinfo:
        parse_tiles(reader, start)
    assert excinfo.value.kind is ArchParseErrorKind.attribute_parse
    assert excinfo.value.message.startswith('out_val: ')

    reader, start = element(_sub_tile.format(
        '<fc in_type="frac" in_val="1" out_type="frac" out_val="1"><fc_override fc_type="abs" fc_val="1"/></fc>'))
    with pytest.raises(ArchParseError) as excinfo:
        parse_tiles(reader, start)
    assert excinfo.value.kind is ArchParseErrorKind.missing_required_attribute

def test_sb_loc_requires_custom_pattern(element):
    reader, start = element('<tiles><tile name="t"><switchblock_locations pattern="all"><sb_loc/>'
            '</switchblock_locations></tile></tiles>')
    with pytest.raises(ArchParseError) as excinfo:
        parse_tiles(reader, start)
    assert excinfo.value.kind is ArchParseErrorKind.invalid_tag
    assert excinfo.value.message == 'sb_loc'
