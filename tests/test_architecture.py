# -*- encoding: ascii -*-

from fpgaarch import (parse, parse_string, parse_stream, ArchParseErrorKind, ArchParseError, AutoLayout,
        SegmentType)

import io
import logging
import pytest

def test_parse_string(build_arch):
    arch = parse_string(build_arch())

    assert [m.name for m in arch.models] == ['adder']
    assert [t.name for t in arch.tiles] == ['io']
    assert arch.get_tile('io').capacity == 8
    assert arch.get_tile('clb') is None
    assert len(arch.layouts) == 1 and isinstance(arch.layouts[0], AutoLayout)
    assert arch.tileable_config is None
    assert arch.device.switch_block.fs == 3
    assert [s.name for s in arch.switches] == ['0', 'ipin_cblock']
    assert arch.get_switch('ipin_cblock').Tdel == 7.247e-11
    assert arch.get_segment('UnnamedSegment').type_ is SegmentType.unidir
    assert arch.custom_switch_blocks == tuple()
    assert arch.directs == tuple()
    assert [m.name for m in arch.get_complex_block('io').modes] == ['inpad', 'outpad']

def test_deterministic(build_arch):
    text = build_arch()
    assert parse_string(text) == parse_string(text.encode('ascii'))

def test_optional_sections(build_arch):
    arch = parse_string(build_arch(extra = '''
    <directlist>
        <direct name="d" from_pin="io.inpad" to_pin="io.outpad" x_offset="1" y_offset="0" z_offset="0"/>
    </directlist>
    <switchblocklist>
        <switchblock name="sb" type="unidir">
            <switchblock_location type="EVERYWHERE"/>
            <switchfuncs/>
        </switchblock>
    </switchblocklist>'''))
    assert [d.name for d in arch.directs] == ['d']
    assert [sb.name for sb in arch.custom_switch_blocks] == ['sb']

def test_skipped_sections(build_arch, caplog):
    with caplog.at_level(logging.WARNING):
        arch = parse_string(build_arch(extra = '''
    <power><local_interconnect C_wire="2.5e-10"/></power>
    <clocks><clock name="clk" buffer_size="auto" C_wire="2.5e-10"/></clocks>'''))
    assert [t.name for t in arch.tiles] == ['io']
    assert '<power>' in caplog.text
    assert '<clocks>' in caplog.text

def test_missing_section(build_arch):
    with pytest.raises(ArchParseError) as excinfo:
        parse_string(build_arch(segmentlist = None))
    assert excinfo.value.kind is ArchParseErrorKind.missing_required_tag
    assert excinfo.value.message == '<segmentlist>'

def test_missing_switch_block(build_arch):
    device = '''
    <device>
        <sizing R_minW_nmos="8926" R_minW_pmos="16067"/>
        <area grid_logic_tile_area="0"/>
        <chan_width_distr>
            <x distr="uniform" peak="1.000000"/>
            <y distr="uniform" peak="1.000000"/>
        </chan_width_distr>
        <connection_block input_switch_name="ipin_cblock"/>
    </device>'''
    with pytest.raises(ArchParseError) as excinfo:
        parse_string(build_arch(device = device))
    assert excinfo.value.kind is ArchParseErrorKind.missing_required_tag
    assert excinfo.value.message == '<switch_block>'

def test_duplicate_section(build_arch):
    with pytest.raises(ArchParseError) as excinfo:
        parse_string(build_arch(extra = '<switchlist/>'))
    assert excinfo.value.kind is ArchParseErrorKind.duplicate_tag
    assert excinfo.value.message == '<switchlist>'

def test_unknown_section(build_arch):
    text = build_arch(extra = '\n    <routing/>')
    with pytest.raises(ArchParseError) as excinfo:
        parse_string(text, 'arch.xml')
    assert excinfo.value.kind is ArchParseErrorKind.invalid_tag
    assert excinfo.value.message == 'routing'
    assert excinfo.value.filename == 'arch.xml'
    lines = text.split('\n')
    assert lines[excinfo.value.line - 1].strip() == '<routing/>'
    assert excinfo.value.column == 5

def test_wrong_root():
    with pytest.raises(ArchParseError) as excinfo:
        parse_string('<fpga><models/></fpga>')
    assert excinfo.value.kind is ArchParseErrorKind.invalid_tag
    assert excinfo.value.message == 'fpga'

def test_empty_document():
    with pytest.raises(ArchParseError) as excinfo:
        parse_stream(io.BytesIO(b''))
    assert excinfo.value.kind is ArchParseErrorKind.missing_required_tag
    assert excinfo.value.message == '<architecture>'

def test_malformed_document(build_arch):
    with pytest.raises(ArchParseError) as excinfo:
        parse_string(build_arch()[:-20])
    assert excinfo.value.kind is ArchParseErrorKind.xml_parse

def test_parse_file(build_arch, tmpdir):
    path = tmpdir.join('arch.xml')
    path.write(build_arch())
    arch = parse(str(path))
    assert arch == parse_string(build_arch())

def test_parse_file_errors(build_arch, tmpdir):
    missing = str(tmpdir.join('missing.xml'))
    with pytest.raises(ArchParseError) as excinfo:
        parse(missing)
    assert excinfo.value.kind is ArchParseErrorKind.file_open
    assert excinfo.value.filename == missing

    path = tmpdir.join('bad.xml')
    path.write(build_arch(layout = None))
    with pytest.raises(ArchParseError) as excinfo:
        parse(str(path))
    assert excinfo.value.kind is ArchParseErrorKind.missing_required_tag
    assert excinfo.value.message == '<layout>'
    assert str(excinfo.value).startswith(str(path) + ':')
