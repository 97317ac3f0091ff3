# -*- encoding: ascii -*-

from fpgaarch.parser.port import parse_port
from fpgaarch.parser.timing import parse_matrix, parse_delay, parse_timing_constraint
from fpgaarch.parser.metadata import parse_metadata
from fpgaarch.arch import (PortType, PortEquivalence, PortClassKind, PortClass, Port, DelayType, DelayConstant,
        DelayMatrix, TimingConstraintType, TimingConstraint)
from fpgaarch.exception import ArchParseErrorKind, ArchParseError

import pytest

def test_port(element):
    reader, start = element('<input name="in" num_pins="4" equivalent="full" port_class="lut_in"'
            ' is_non_clock_global="true"/>')
    port = parse_port(reader, start)
    assert port == Port(PortType.input_, 'in', 4,
            equivalent = PortEquivalence.full,
            port_class = PortClass(PortClassKind.lut_in),
            is_non_clock_global = True)

    reader, start = element('<clock name="clk" num_pins="1"/>')
    port = parse_port(reader, start)
    assert port.type_.is_clock
    assert port.equivalent.is_none
    assert port.port_class is PortClass.none
    assert not port.is_non_clock_global

def test_port_errors(element):
    reader, start = element('<output name="o" num_pins="1" is_non_clock_global="true"/>')
    with pytest.raises(ArchParseError) as excinfo:
        parse_port(reader, start)
    assert excinfo.value.kind is ArchParseErrorKind.attribute_parse
    assert excinfo.value.message == 'is_non_clock_global: only valid on <input> ports'

    # attributes are checked in document order
    reader, start = element('<output bogus="1" is_non_clock_global="true"/>')
    with pytest.raises(ArchParseError) as excinfo:
        parse_port(reader, start)
    assert excinfo.value.kind is ArchParseErrorKind.unknown_attribute
    assert excinfo.value.message == 'bogus'

    for num_pins in ('1_0', ' 4', '&#x664;'):
        reader, start = element('<input name="i" num_pins="{}"/>'.format(num_pins))
        with pytest.raises(ArchParseError) as excinfo:
            parse_port(reader, start)
        assert excinfo.value.kind is ArchParseErrorKind.attribute_parse
        assert excinfo.value.message.startswith('num_pins: ')

    reader, start = element('<input name="i"/>')
    with pytest.raises(ArchParseError) as excinfo:
        parse_port(reader, start)
    assert excinfo.value.kind is ArchParseErrorKind.missing_required_attribute
    assert excinfo.value.message == 'num_pins'

    reader, start = element('<input name="i" num_pins="1" port_class="carry"/>')
    with pytest.raises(ArchParseError) as excinfo:
        parse_port(reader, start)
    assert excinfo.value.kind is ArchParseErrorKind.attribute_parse
    assert 'Unknown port class: carry' in excinfo.value.message

def test_port_class():
    assert PortClass.parse('D') == PortClass(PortClassKind.D)
    assert PortClass.parse('address') == (PortClassKind.address, 1)
    assert PortClass.parse('data_in2') == (PortClassKind.data_in, 2)
    assert PortClass.parse('data_out') == (PortClassKind.data_out, 1)
    assert str(PortClass.parse('write_en3')) == 'write_en3'
    for text in ('none', 'lut', 'addressx', '', 'address 1', 'data_in1_0'):
        with pytest.raises(ValueError):
            PortClass.parse(text)

def test_matrix():
    assert parse_matrix('1.0 2.0\n3.0 4.0') == ((1.0, 2.0), (3.0, 4.0))
    assert parse_matrix('\n    1e-10 2e-10\n\n    3e-10\t4e-10\n  ') == ((1e-10, 2e-10), (3e-10, 4e-10))
    with pytest.raises(ValueError):
        parse_matrix('1 x')
    with pytest.raises(ValueError):
        parse_matrix('1_0 2')

def test_delay(element):
    # 1. only one bound given
    reader, start = element('<delay_constant max="1e-10" in_port="a.in" out_port="a.out"/>')
    assert parse_delay(reader, start) == DelayConstant(1e-10, 1e-10, 'a.in', 'a.out')

    reader, start = element('<delay_constant min="5e-11" in_port="a.in" out_port="a.out"/>')
    assert parse_delay(reader, start) == DelayConstant(5e-11, 5e-11, 'a.in', 'a.out')

    reader, start = element('<delay_constant min="2e-11" max="3e-11" in_port="a.in" out_port="a.out"/>')
    assert parse_delay(reader, start) == DelayConstant(2e-11, 3e-11, 'a.in', 'a.out')

    # 2. no bound given
    reader, start = element('<delay_constant in_port="a.in" out_port="a.out"/>')
    with pytest.raises(ArchParseError) as excinfo:
        parse_delay(reader, start)
    assert excinfo.value.kind is ArchParseErrorKind.missing_required_attribute
    assert excinfo.value.message == "At least one of the max or min attributes must be specified"

    # 3. matrices
    reader, start = element('<delay_matrix type="max" in_port="lut.in" out_port="lut.out">\n'
            '    2.5e-10\n    2.5e-10\n</delay_matrix>')
    assert parse_delay(reader, start) == DelayMatrix(DelayType.max, ((2.5e-10, ), (2.5e-10, )),
            'lut.in', 'lut.out')

    reader, start = element('<delay_matrix type="min" in_port="a" out_port="b">1 two</delay_matrix>')
    with pytest.raises(ArchParseError) as excinfo:
        parse_delay(reader, start)
    assert excinfo.value.kind is ArchParseErrorKind.invalid_tag
    assert excinfo.value.message.startswith("Matrix text parse error")

    reader, start = element('<delay_matrix type="min" in_port="a" out_port="b"/>')
    with pytest.raises(ArchParseError) as excinfo:
        parse_delay(reader, start)
    assert excinfo.value.kind is ArchParseErrorKind.invalid_tag

    reader, start = element('<delay_matrix type="typical" in_port="a" out_port="b">1</delay_matrix>')
    with pytest.raises(ArchParseError) as excinfo:
        parse_delay(reader, start)
    assert excinfo.value.kind is ArchParseErrorKind.attribute_parse

def test_timing_constraint(element):
    reader, start = element('<T_setup value="6.6e-11" port="ff.D" clock="clk"/>')
    assert parse_timing_constraint(reader, start) == TimingConstraint(TimingConstraintType.T_setup,
            'ff.D', 'clk', 6.6e-11, 6.6e-11)

    reader, start = element('<T_clock_to_Q max="1.2e-10" min="1e-10" port="ff.Q" clock="clk"/>')
    assert parse_timing_constraint(reader, start) == TimingConstraint(TimingConstraintType.T_clock_to_Q,
            'ff.Q', 'clk', 1e-10, 1.2e-10)

    reader, start = element('<T_hold max="1e-10" port="ff.D" clock="clk"/>')
    with pytest.raises(ArchParseError) as excinfo:
        parse_timing_constraint(reader, start)
    assert excinfo.value.kind is ArchParseErrorKind.unknown_attribute

def test_metadata(element):
    reader, start = element('<metadata>\n  <meta name="fasm_prefix">CLB</meta>\n  <meta name="empty"/>\n'
            '  <meta name="fasm_prefix">other</meta>\n</metadata>')
    metadata = parse_metadata(reader, start)
    assert len(metadata.entries) == 3
    assert metadata.get('fasm_prefix') == 'CLB'
    assert metadata.get('empty') == ''
    assert metadata.get('missing', 'x') == 'x'

    reader, start = element('<metadata><data/></metadata>')
    with pytest.raises(ArchParseError) as excinfo:
        parse_metadata(reader, start)
    assert excinfo.value.kind is ArchParseErrorKind.invalid_tag
    assert excinfo.value.message == 'data'
