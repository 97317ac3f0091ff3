# -*- encoding: ascii -*-
"""Parser for the ``<models>`` section."""

from .base import (Attribute, AttributeTable, iter_children, invalid_child, no_attributes, expect_empty,
        check_unique, require, parse_bool, parse_binary_bool, parse_word_list)
from ..arch.model import ModelPort, Model

__all__ = ['parse_models']

_model_attributes = AttributeTable(
        Attribute('name', required = True),
        Attribute('never_prune', parse_bool, default = False),
        )

_model_port_attributes = AttributeTable(
        Attribute('name', required = True),
        Attribute('is_clock', parse_binary_bool, default = False),
        Attribute('clock'),
        Attribute('combinational_sink_ports', parse_word_list, default = tuple()),
        )

def _parse_model_ports(reader, start):
    no_attributes(reader, start)
    ports = []
    for event in iter_children(reader, start):
        if event.name != 'port':
            raise invalid_child(reader, event)
        values = expect_empty(reader, event, _model_port_attributes)
        ports.append(ModelPort(values['name'], values['is_clock'],
            clock = values['clock'],
            combinational_sink_ports = values['combinational_sink_ports']))
    return tuple(ports)

def _parse_model(reader, start):
    values = _model_attributes.parse(reader, start)
    input_ports, output_ports = None, None
    for event in iter_children(reader, start):
        if event.name == 'input_ports':
            check_unique(reader, event, input_ports)
            input_ports = _parse_model_ports(reader, event)
        elif event.name == 'output_ports':
            check_unique(reader, event, output_ports)
            output_ports = _parse_model_ports(reader, event)
        else:
            raise invalid_child(reader, event)
    return Model(values['name'], values['never_prune'],
            require(reader, input_ports, 'input_ports'),
            require(reader, output_ports, 'output_ports'))

def parse_models(reader, start):
    """Parse the ``<models>`` section.

    Returns:
        :obj:`tuple` [`Model` ]:
    """
    no_attributes(reader, start)
    models = []
    for event in iter_children(reader, start):
        if event.name != 'model':
            raise invalid_child(reader, event)
        models.append(_parse_model(reader, event))
    return tuple(models)
