# -*- encoding: ascii -*-
"""The logic-block hierarchy: ``pb_type``, ``mode`` and ``interconnect``."""

from ..util import Enum

from collections import namedtuple

__all__ = ['PackPattern', 'InterconnectType', 'Interconnect', 'PBTypeClass', 'Mode', 'PBType']

# ----------------------------------------------------------------------------
# -- Interconnect ------------------------------------------------------------
# ----------------------------------------------------------------------------
class PackPattern(namedtuple('PackPattern', 'name in_port out_port')):
    """A packing hint attached to an interconnect."""
    pass

class InterconnectType(Enum):
    """Kinds of interconnects inside a logic block."""
    direct = 0
    mux = 1
    complete = 2

class Interconnect(namedtuple('Interconnect', 'type_ name input output pack_patterns delays metadata')):
    """A ``<direct>``, ``<mux>`` or ``<complete>`` interconnect.

    Args:
        type_ (`InterconnectType`):
        name (:obj:`str`):
        input (:obj:`str`): Input port expression
        output (:obj:`str`): Output port expression

    Keyword Args:
        pack_patterns (:obj:`tuple` [`PackPattern` ]):
        delays (:obj:`tuple` [`DelayConstant` or `DelayMatrix` ]): Delay records in document order
        metadata (`Metadata`):
    """

    def __new__(cls, type_, name, input, output, *, pack_patterns = tuple(), delays = tuple(), metadata = None):
        return super(Interconnect, cls).__new__(cls, type_, name, input, output, tuple(pack_patterns),
                tuple(delays), metadata)

# ----------------------------------------------------------------------------
# -- PB Type & Mode ----------------------------------------------------------
# ----------------------------------------------------------------------------
class PBTypeClass(Enum):
    """Classification of primitive logic-block types."""
    none = 0
    lut = 1
    flipflop = 2
    memory = 3

class Mode(namedtuple('Mode', 'name pb_types interconnects metadata')):
    """One of the mutually exclusive configurations of a `PBType`.

    Args:
        name (:obj:`str`):

    Keyword Args:
        pb_types (:obj:`tuple` [`PBType` ]): Children of this mode
        interconnects (:obj:`tuple` [`Interconnect` ]):
        metadata (`Metadata`):
    """

    def __new__(cls, name, *, pb_types = tuple(), interconnects = tuple(), metadata = None):
        return super(Mode, cls).__new__(cls, name, tuple(pb_types), tuple(interconnects), metadata)

class PBType(namedtuple('PBType', 'name num_pb blif_model class_ ports modes pb_types interconnects delays '
    'timing metadata unreachable_pb_types unreachable_interconnects')):
    """A logic-block type.

    A logic-block type either has modes, each owning its children and interconnects, or owns its children and
    interconnects directly. When both are written in the document, the modes take precedence and the directly
    written children and interconnects are kept in ``unreachable_pb_types`` and ``unreachable_interconnects``.

    Args:
        name (:obj:`str`):

    Keyword Args:
        num_pb (:obj:`int`): Number of instances
        blif_model (:obj:`str`): Primitive model reference, e.g. ``.names`` or ``.subckt adder``
        class_ (`PBTypeClass`):
        ports (:obj:`tuple` [`Port` ]):
        modes (:obj:`tuple` [`Mode` ]):
        pb_types (:obj:`tuple` [`PBType` ]): Direct children. Empty if ``modes`` is not
        interconnects (:obj:`tuple` [`Interconnect` ]): Direct interconnects. Empty if ``modes`` is not
        delays (:obj:`tuple` [`DelayConstant` or `DelayMatrix` ]):
        timing (:obj:`tuple` [`TimingConstraint` ]):
        metadata (`Metadata`):
        unreachable_pb_types (:obj:`tuple` [`PBType` ]):
        unreachable_interconnects (:obj:`tuple` [`Interconnect` ]):
    """

    def __new__(cls, name, *, num_pb = 1, blif_model = None, class_ = PBTypeClass.none, ports = tuple(),
            modes = tuple(), pb_types = tuple(), interconnects = tuple(), delays = tuple(), timing = tuple(),
            metadata = None, unreachable_pb_types = tuple(), unreachable_interconnects = tuple()):
        if modes and (pb_types or interconnects):
            raise ValueError("PBType '{}' cannot own children or interconnects besides its modes".format(name))
        return super(PBType, cls).__new__(cls, name, num_pb, blif_model, class_, tuple(ports), tuple(modes),
                tuple(pb_types), tuple(interconnects), tuple(delays), tuple(timing), metadata,
                tuple(unreachable_pb_types), tuple(unreachable_interconnects))

    @property
    def is_primitive(self):
        """:obj:`bool`: If this logic-block type has no children in any mode."""
        return not self.modes and not self.pb_types

    @property
    def child_pb_types(self):
        """Iterate over the children in all modes, or the direct children if there are no modes."""
        if self.modes:
            for mode in self.modes:
                for pb_type in mode.pb_types:
                    yield pb_type
        else:
            for pb_type in self.pb_types:
                yield pb_type
