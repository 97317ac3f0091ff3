# -*- encoding: ascii -*-

from fpgaarch.xml import XMLEventReader

import io
import pytest

_SECTIONS = {
        "models": """
    <models>
        <model name="adder">
            <input_ports>
                <port name="a" combinational_sink_ports="sumout cout"/>
                <port name="b" combinational_sink_ports="sumout cout"/>
                <port name="cin" combinational_sink_ports="sumout cout"/>
            </input_ports>
            <output_ports>
                <port name="cout"/>
                <port name="sumout"/>
            </output_ports>
        </model>
    </models>""",
        "tiles": """
    <tiles>
        <tile name="io">
            <sub_tile name="io" capacity="8">
                <equivalent_sites>
                    <site pb_type="io" pin_mapping="direct"/>
                </equivalent_sites>
                <input name="outpad" num_pins="1"/>
                <output name="inpad" num_pins="1"/>
                <fc in_type="frac" in_val="0.15" out_type="frac" out_val="0.10"/>
                <pinlocations pattern="custom">
                    <loc side="left">io.outpad io.inpad</loc>
                    <loc side="top">io.outpad io.inpad</loc>
                </pinlocations>
            </sub_tile>
        </tile>
    </tiles>""",
        "layout": """
    <layout>
        <auto_layout aspect_ratio="1.0">
            <perimeter type="io" priority="100"/>
            <corners type="EMPTY" priority="101"/>
            <fill type="clb" priority="10"/>
        </auto_layout>
    </layout>""",
        "device": """
    <device>
        <sizing R_minW_nmos="8926" R_minW_pmos="16067"/>
        <area grid_logic_tile_area="0"/>
        <chan_width_distr>
            <x distr="uniform" peak="1.000000"/>
            <y distr="uniform" peak="1.000000"/>
        </chan_width_distr>
        <switch_block type="wilton" fs="3"/>
        <connection_block input_switch_name="ipin_cblock"/>
    </device>""",
        "switchlist": """
    <switchlist>
        <switch type="mux" name="0" R="551" Cin=".77e-15" Cout="4e-15" Tdel="58e-12" mux_trans_size="2.630740"
            buf_size="27.645901"/>
        <switch type="mux" name="ipin_cblock" R="2231.5" Cout="0." Cin="1.47e-15" Tdel="7.247000e-11"/>
    </switchlist>""",
        "segmentlist": """
    <segmentlist>
        <segment freq="1.000000" length="4" type="unidir" Rmetal="101" Cmetal="22.5e-15">
            <mux name="0"/>
            <sb type="pattern">1 1 1 1 1</sb>
            <cb type="pattern">1 1 1 1</cb>
        </segment>
    </segmentlist>""",
        "complexblocklist": """
    <complexblocklist>
        <pb_type name="io">
            <input name="outpad" num_pins="1"/>
            <output name="inpad" num_pins="1"/>
            <mode name="inpad">
                <pb_type name="inpad" blif_model=".input" num_pb="1">
                    <output name="inpad" num_pins="1"/>
                </pb_type>
                <interconnect>
                    <direct name="inpad" input="inpad.inpad" output="io.inpad"/>
                </interconnect>
            </mode>
            <mode name="outpad">
                <pb_type name="outpad" blif_model=".output" num_pb="1">
                    <input name="outpad" num_pins="1"/>
                </pb_type>
                <interconnect>
                    <direct name="outpad" input="io.outpad" output="outpad.outpad"/>
                </interconnect>
            </mode>
        </pb_type>
    </complexblocklist>""",
        }

@pytest.fixture
def element():
    """Open ``snippet`` and return the reader positioned right after the start tag of its root element."""
    def open_element(snippet):
        reader = XMLEventReader(io.BytesIO(snippet.encode('ascii')), 'snippet.xml')
        start = reader.next()
        assert start.type_.is_start_element
        return reader, start
    return open_element

@pytest.fixture
def build_arch():
    """Assemble an architecture document from default sections.

    Keyword arguments replace a section with the given text, or drop it if the value is ``None``. ``extra`` is
    inserted right before the closing tag.
    """
    def build(extra = '', **overrides):
        sections = dict(_SECTIONS)
        sections.update(overrides)
        body = ''.join(text for text in sections.values() if text is not None)
        return '<?xml version="1.0"?>\n<architecture>{}{}\n</architecture>\n'.format(body, extra)
    return build
