# -*- encoding: ascii -*-
"""Statistics of a parsed architecture and a command line front-end to check architecture files."""

from .hierarchy import pb_type_hierarchy, hierarchy_depth
from ..parser import parse
from ..exception import ArchParseError
from ..util import enable_stdout_logging

from collections import namedtuple, Counter
import os
import sys
import logging
import jinja2 as jj

_logger = logging.getLogger(__name__)

__all__ = ['ArchSummary', 'summarize', 'render_summary', 'format_error_excerpt']

# ----------------------------------------------------------------------------
# -- Summary -----------------------------------------------------------------
# ----------------------------------------------------------------------------
class ArchSummary(namedtuple('ArchSummary', 'num_models num_tiles num_sub_tiles num_layouts num_switches '
    'num_segments num_custom_switch_blocks num_directs num_root_pb_types num_pb_types num_primitives num_modes '
    'max_depth primitives_by_model tiles layouts')):
    """Counts of the entities in an `Architecture`.

    ``num_pb_types``, ``num_primitives`` and ``num_modes`` count distinct definitions in the hierarchy, not
    instances (``num_pb`` is not multiplied in). ``primitives_by_model`` is a tuple of ``(blif_model, count)`` pairs
    sorted by model. ``tiles`` is a tuple of ``(name, width, height, capacity)`` and ``layouts`` a tuple of layout
    names.
    """
    pass

def summarize(arch):
    """Compute the `ArchSummary` of ``arch``."""
    num_pb_types, num_modes, max_depth = 0, 0, 0
    primitives = Counter()
    for root in arch.complex_blocks:
        g = pb_type_hierarchy(root)
        for node, data in g.nodes(data = True):
            if data["kind"] == "mode":
                num_modes += 1
                continue
            num_pb_types += 1
            if g.out_degree(node) == 0:
                primitives[data["blif_model"] or "(none)"] += 1
        max_depth = max(max_depth, hierarchy_depth(root))
    return ArchSummary(
            num_models = len(arch.models),
            num_tiles = len(arch.tiles),
            num_sub_tiles = sum(len(tile.sub_tiles) for tile in arch.tiles),
            num_layouts = len(arch.layouts),
            num_switches = len(arch.switches),
            num_segments = len(arch.segments),
            num_custom_switch_blocks = len(arch.custom_switch_blocks),
            num_directs = len(arch.directs),
            num_root_pb_types = len(arch.complex_blocks),
            num_pb_types = num_pb_types,
            num_primitives = sum(primitives.values()),
            num_modes = num_modes,
            max_depth = max_depth,
            primitives_by_model = tuple(sorted(primitives.items())),
            tiles = tuple((tile.name, tile.width, tile.height, tile.capacity) for tile in arch.tiles),
            layouts = tuple(layout.name for layout in arch.layouts))

# ----------------------------------------------------------------------------
# -- Rendering ---------------------------------------------------------------
# ----------------------------------------------------------------------------
def _environment():
    return jj.Environment(loader = jj.FileSystemLoader(
        os.path.join(os.path.dirname(os.path.abspath(__file__)), 'templates')),
        keep_trailing_newline = True)

def render_summary(summary, name = None, template = "summary.tmpl.txt"):
    """Render ``summary`` as text.

    Args:
        summary (`ArchSummary`):
        name (:obj:`str`): Name of the architecture, e.g. its file name
        template (:obj:`str`): Template to use

    Returns:
        :obj:`str`:
    """
    return _environment().get_template(template).render(summary = summary, name = name)

def format_error_excerpt(error, lines, context = 0):
    """Show the source line of ``error`` with a caret under the reported column.

    Args:
        error (`ArchParseError`):
        lines (:obj:`Sequence` [:obj:`str` ]): Lines of the source, without line terminators
        context (:obj:`int`): Number of lines to show before the offending line

    Returns:
        :obj:`str`: The error message, followed by the excerpt if ``error`` has a position inside ``lines``
    """
    out = [str(error)]
    if error.position is None or not 1 <= error.line <= len(lines):
        return out[0]
    width = len(str(error.line))
    for lineno in range(max(1, error.line - context), error.line + 1):
        out.append('{:>{}} | {}'.format(lineno, width, lines[lineno - 1].expandtabs(1)))
    out.append('{} | {}^'.format(' ' * width, ' ' * (error.column - 1)))
    return '\n'.join(out)

if __name__ == '__main__':
    import argparse
    parser = argparse.ArgumentParser(
            description="Check an FPGA architecture description and print its summary")

    parser.add_argument('architecture', type=str,
            help="Architecture description (VPR-style arch.xml)")
    parser.add_argument('--hierarchy', action='store_true',
            help="Also print the logic-block hierarchy")
    parser.add_argument('--context', type=int, default=0,
            help="Number of source lines to show before the offending line on error")
    parser.add_argument('-v', '--verbose', action='store_true',
            help="Verbose logging")

    args = parser.parse_args()
    enable_stdout_logging('fpgaarch', logging.DEBUG if args.verbose else logging.INFO, args.verbose)
    try:
        arch = parse(args.architecture)
    except ArchParseError as e:
        lines = []
        if e.position is not None:
            with open(args.architecture, 'r', errors = 'replace') as f:
                lines = f.read().splitlines()
        print(format_error_excerpt(e, lines, args.context), file = sys.stderr)
        sys.exit(1)
    _logger.info("Architecture parsed")
    print(render_summary(summarize(arch), os.path.basename(args.architecture)), end = '')
    if args.hierarchy:
        for root in arch.complex_blocks:
            for node, data in pb_type_hierarchy(root).nodes(data = True):
                indent = '  ' * node.count('/')
                print(indent + (data["name"] if data["kind"] == "pb_type" else '  mode ' + data["name"]))
