# -*- encoding: ascii -*-
"""Primitive models referenced by ``blif_model``."""

from collections import namedtuple

__all__ = ['ModelPort', 'Model']

class ModelPort(namedtuple('ModelPort', 'name is_clock clock combinational_sink_ports')):
    """A port of a primitive model.

    Args:
        name (:obj:`str`): Name of the port
        is_clock (:obj:`bool`): If this port is a clock

    Keyword Args:
        clock (:obj:`str`): Name of the clock this port is sequential to, or ``None``
        combinational_sink_ports (:obj:`tuple` [:obj:`str` ]): Output ports combinationally driven by this port
    """

    def __new__(cls, name, is_clock = False, *, clock = None, combinational_sink_ports = tuple()):
        return super(ModelPort, cls).__new__(cls, name, is_clock, clock, tuple(combinational_sink_ports))

class Model(namedtuple('Model', 'name never_prune input_ports output_ports')):
    """A primitive model.

    Args:
        name (:obj:`str`): Name of the model, as referenced by ``blif_model=".subckt <name>"``
        never_prune (:obj:`bool`): If instances of this model are kept even when their outputs are unused
        input_ports (:obj:`tuple` [`ModelPort` ]):
        output_ports (:obj:`tuple` [`ModelPort` ]):
    """

    @property
    def ports(self):
        """:obj:`tuple` [`ModelPort` ]: All ports, inputs first."""
        return self.input_ports + self.output_ports
