# -*- encoding: ascii -*-
"""Root of the architecture tree."""

from collections import namedtuple

__all__ = ['Architecture']

class Architecture(namedtuple('Architecture', 'models tiles layouts tileable_config device switches segments '
    'custom_switch_blocks directs complex_blocks')):
    """A parsed architecture description.

    All sequences are tuples in document order. Names referencing other entities (switches, segments, sites) are
    plain strings and are not resolved.

    Args:
        models (:obj:`tuple` [`Model` ]):
        tiles (:obj:`tuple` [`Tile` ]):
        layouts (:obj:`tuple` [`AutoLayout` or `FixedLayout` ]):
        tileable_config (`TileableLayoutConfig`): ``None`` if no tileable options are given
        device (`Device`):
        switches (:obj:`tuple` [`Switch` ]):
        segments (:obj:`tuple` [`Segment` ]):
        custom_switch_blocks (:obj:`tuple` [`CustomSwitchBlock` ]):
        directs (:obj:`tuple` [`GlobalDirect` ]):
        complex_blocks (:obj:`tuple` [`PBType` ]): Root logic-block types
    """

    def get_tile(self, name):
        """Look up a tile by name. Returns ``None`` if not found."""
        return next((t for t in self.tiles if t.name == name), None)

    def get_complex_block(self, name):
        """Look up a root logic-block type by name. Returns ``None`` if not found."""
        return next((pb for pb in self.complex_blocks if pb.name == name), None)

    def get_switch(self, name):
        """Look up a switch by name. Returns ``None`` if not found."""
        return next((s for s in self.switches if s.name == name), None)

    def get_segment(self, name):
        """Look up a segment by name. Returns ``None`` if not found."""
        return next((s for s in self.segments if s.name == name), None)
