# -*- encoding: ascii -*-
"""Graph view of the logic-block hierarchy."""

import networkx as nx

__all__ = ['pb_type_hierarchy', 'hierarchy_depth', 'primitives']

def _unique_names(items):
    """Yield ``(item, name)``, suffixing repeated names within ``items`` with ``#1``, ``#2``, ..."""
    seen = {}
    for item in items:
        count = seen.get(item.name, 0)
        seen[item.name] = count + 1
        yield item, item.name if count == 0 else '{}#{}'.format(item.name, count)

def _add_pb_type(g, pb_type, path, parent = None):
    g.add_node(path, kind = "pb_type", name = pb_type.name, num_pb = pb_type.num_pb,
            blif_model = pb_type.blif_model, class_ = pb_type.class_)
    if parent is not None:
        g.add_edge(parent, path)
    for mode, mode_name in _unique_names(pb_type.modes):
        mode_path = '{}[{}]'.format(path, mode_name)
        g.add_node(mode_path, kind = "mode", name = mode.name, num_interconnects = len(mode.interconnects))
        g.add_edge(path, mode_path)
        for child, child_name in _unique_names(mode.pb_types):
            _add_pb_type(g, child, '{}/{}'.format(mode_path, child_name), mode_path)
    for child, child_name in _unique_names(pb_type.pb_types):
        _add_pb_type(g, child, '{}/{}'.format(path, child_name), path)

def pb_type_hierarchy(pb_type):
    """Build the hierarchy rooted at ``pb_type`` as a directed tree.

    Nodes are hierarchical names: ``clb/fle[n1_lut6]/ble6`` is the ``ble6`` child in mode ``n1_lut6`` of the
    ``fle`` child of ``clb``. A repeated name among siblings is suffixed with ``#1``, ``#2``, ... so each definition
    keeps its own node. Every node has a ``kind`` attribute, either ``"pb_type"`` or ``"mode"``; pb_type
    nodes also carry ``name``, ``num_pb``, ``blif_model`` and ``class_``. Unreachable children are not included.

    Args:
        pb_type (`PBType`): The root

    Returns:
        ``networkx.DiGraph``
    """
    g = nx.DiGraph()
    _add_pb_type(g, pb_type, pb_type.name)
    return g

def hierarchy_depth(pb_type):
    """:obj:`int`: Number of pb_type levels on the deepest path below ``pb_type``, itself included."""
    g = pb_type_hierarchy(pb_type)
    return max(sum(1 for node in nx.shortest_path(g, pb_type.name, leaf) if g.nodes[node]["kind"] == "pb_type")
            for leaf in g if g.out_degree(leaf) == 0)

def primitives(pb_type):
    """Hierarchical names and attributes of the primitive (leaf) pb_types below ``pb_type``.

    Modes without children are not primitives.

    Returns:
        :obj:`list` [:obj:`tuple` [:obj:`str`, :obj:`dict` ]]:
    """
    g = pb_type_hierarchy(pb_type)
    return [(node, data) for node, data in g.nodes(data = True)
            if data["kind"] == "pb_type" and g.out_degree(node) == 0]
