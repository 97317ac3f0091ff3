# -*- encoding: ascii -*-
"""Document driver: opens the file and dispatches the sections of ``<architecture>``."""

from .base import iter_children, invalid_child, no_attributes, skip_element, check_unique, require
from .models import parse_models
from .tiles import parse_tiles
from .layouts import parse_layouts
from .device import parse_device
from .switches import parse_switch_list
from .segments import parse_segment_list
from .switchblocks import parse_switch_block_list
from .directs import parse_direct_list
from .complexblocks import parse_complex_block_list
from ..arch.architecture import Architecture
from ..exception import ArchParseErrorKind, ArchParseError
from ..xml import XMLEventReader

import io
import logging
_logger = logging.getLogger(__name__)

__all__ = ['parse', 'parse_string', 'parse_stream']

_SECTION_PARSERS = {
        'models': parse_models,
        'tiles': parse_tiles,
        'layout': parse_layouts,
        'device': parse_device,
        'switchlist': parse_switch_list,
        'segmentlist': parse_segment_list,
        'switchblocklist': parse_switch_block_list,
        'directlist': parse_direct_list,
        'complexblocklist': parse_complex_block_list,
        }

_REQUIRED_SECTIONS = ('models', 'tiles', 'layout', 'device', 'switchlist', 'segmentlist', 'complexblocklist')

_SKIPPED_SECTIONS = ('power', 'clocks')

def _parse_architecture(reader, start):
    no_attributes(reader, start)
    sections = dict.fromkeys(_SECTION_PARSERS)
    for event in iter_children(reader, start):
        if event.name in _SKIPPED_SECTIONS:
            _logger.warning("Skipping unsupported section <{}> at {}".format(event.name, event.position))
            skip_element(reader, event)
            continue
        elif event.name not in sections:
            raise invalid_child(reader, event)
        check_unique(reader, event, sections[event.name])
        _logger.debug("Parsing section <{}> at {}".format(event.name, event.position))
        sections[event.name] = _SECTION_PARSERS[event.name](reader, event)
    for tag in _REQUIRED_SECTIONS:
        require(reader, sections[tag], tag)
    layouts, tileable_config = sections['layout']
    return Architecture(
            models = sections['models'],
            tiles = sections['tiles'],
            layouts = layouts,
            tileable_config = tileable_config,
            device = sections['device'],
            switches = sections['switchlist'],
            segments = sections['segmentlist'],
            custom_switch_blocks = sections['switchblocklist'] or tuple(),
            directs = sections['directlist'] or tuple(),
            complex_blocks = sections['complexblocklist'])

def parse_stream(stream, filename = None):
    """Parse an architecture description from a binary stream.

    Args:
        stream (file-like object): The input, opened in binary mode
        filename (:obj:`str`): Name of the input, used in error messages

    Returns:
        `Architecture`:

    Raises:
        `ArchParseError`: The first violation found in the document
    """
    reader = XMLEventReader(stream, filename)
    architecture = None
    while True:
        event = reader.next()
        if event.type_.is_end_document:
            break
        elif event.type_.is_characters:
            raise reader.error(ArchParseErrorKind.invalid_tag, "Unexpected characters outside <architecture>")
        elif event.name != 'architecture':
            raise invalid_child(reader, event)
        architecture = _parse_architecture(reader, event)
    return require(reader, architecture, 'architecture')

def parse_string(text, filename = None):
    """Parse an architecture description held in ``text`` (:obj:`str` or :obj:`bytes`)."""
    if isinstance(text, str):
        text = text.encode('utf-8')
    return parse_stream(io.BytesIO(text), filename)

def parse(path):
    """Parse the architecture description file at ``path``.

    Args:
        path (:obj:`str`): Path to the XML file

    Returns:
        `Architecture`:

    Raises:
        `ArchParseError`: Of kind `ArchParseErrorKind.file_open` if the file cannot be opened, or the first
            violation found in the document
    """
    try:
        stream = open(path, 'rb')
    except OSError as e:
        raise ArchParseError(ArchParseErrorKind.file_open, "{}: {}".format(path, e.strerror), filename = path)
    _logger.debug("Parsing architecture file {}".format(path))
    with stream:
        return parse_stream(stream, path)
