# -*- encoding: ascii -*-
"""Shared machinery used by every element parser: attribute tables, child iteration and error helpers."""

from ..exception import ArchParseErrorKind
from ..util import parse_int

from collections import namedtuple

__all__ = ['Attribute', 'AttributeTable', 'iter_children', 'invalid_child', 'no_attributes', 'close_element',
        'expect_empty', 'read_text', 'skip_element',
        'check_unique', 'require', 'enum_of', 'parse_bool', 'parse_binary_bool', 'parse_word_list',
        'parse_comma_list', 'parse_int_list']

# ----------------------------------------------------------------------------
# -- Attribute Value Converters ----------------------------------------------
# ----------------------------------------------------------------------------
def enum_of(enum_cls):
    """Create a converter that maps the XML spelling of a member of ``enum_cls`` to the member."""
    def convert(text):
        try:
            return enum_cls.from_text(text)
        except ValueError:
            raise ValueError("Unknown value '{}', expecting one of: {}".format(text,
                ', '.join(m.text for m in enum_cls)))
    return convert

def parse_bool(text):
    """Parse ``true`` or ``false``."""
    if text == 'true':
        return True
    elif text == 'false':
        return False
    raise ValueError("Invalid boolean '{}'".format(text))

def parse_binary_bool(text):
    """Parse ``1`` or ``0``."""
    if text == '1':
        return True
    elif text == '0':
        return False
    raise ValueError("Invalid boolean '{}', expecting 0 or 1".format(text))

def parse_word_list(text):
    """Split ``text`` on whitespace."""
    return tuple(text.split())

def parse_comma_list(text):
    """Split ``text`` on commas and trim each item."""
    return tuple(s.strip() for s in text.split(','))

def parse_int_list(text):
    """Parse a comma-separated list of signed integers, e.g. ``"0,-1,2"``."""
    try:
        return tuple(parse_int(s) for s in text.split(','))
    except ValueError:
        raise ValueError("switchpoint parse error")

# ----------------------------------------------------------------------------
# -- Attribute Table ---------------------------------------------------------
# ----------------------------------------------------------------------------
class Attribute(namedtuple('Attribute', 'name convert required default')):
    """Description of one attribute an element accepts.

    Args:
        name (:obj:`str`): Attribute name
        convert (``lambda (str) -> value``): Converter from attribute text. Raises :obj:`ValueError` on failure

    Keyword Args:
        required (:obj:`bool`): If the attribute must be present
        default: Value used when the attribute is absent
    """

    def __new__(cls, name, convert = str, *, required = False, default = None):
        return super(Attribute, cls).__new__(cls, name, convert, required, default)

class AttributeTable(object):
    """Per-element attribute validator.

    Args:
        *attributes (`Attribute`): Accepted attributes. Missing required attributes are reported in the order given
            here
    """

    __slots__ = ['attributes', '_by_name']
    def __init__(self, *attributes):
        self.attributes = attributes
        self._by_name = {a.name: a for a in attributes}

    def parse(self, reader, event, exclude = tuple()):
        """Validate and convert the attributes of start tag ``event``.

        Args:
            reader (`XMLEventReader`): The event source, used for error positions
            event (`XMLEvent`): The start tag
            exclude (:obj:`Container` [:obj:`str` ]): Attributes in the table that are not accepted this time,
                e.g. attributes only valid on some tags

        Returns:
            :obj:`dict` [:obj:`str`, value]: Mapping from attribute names to converted values, defaults included

        Raises:
            `ArchParseError`: Unknown, duplicate, malformed or missing attributes
        """
        values = {}
        for name, text in event.attrs:
            if (attr := self._by_name.get(name)) is None or name in exclude:
                raise reader.error(ArchParseErrorKind.unknown_attribute, name)
            elif name in values:
                raise reader.error(ArchParseErrorKind.duplicate_attribute, name)
            try:
                values[name] = attr.convert(text)
            except ValueError as e:
                raise reader.error(ArchParseErrorKind.attribute_parse, '{}: {}'.format(name, e))
        for attr in self.attributes:
            if attr.name in values or attr.name in exclude:
                continue
            elif attr.required:
                raise reader.error(ArchParseErrorKind.missing_required_attribute, attr.name)
            values[attr.name] = attr.default
        return values

_empty_table = AttributeTable()

# ----------------------------------------------------------------------------
# -- Child Content -----------------------------------------------------------
# ----------------------------------------------------------------------------
def iter_children(reader, start, allow_text = False):
    """Iterate over the content of the element opened by ``start``.

    Start tags of children are yielded. The consumer must either parse each child completely (including its end
    tag) or raise before asking for the next one. The iteration stops after the matching end tag is consumed.

    Args:
        reader (`XMLEventReader`):
        start (`XMLEvent`): Start tag of the element
        allow_text (:obj:`bool`): If set, character data events are yielded as well. Otherwise character data is
            rejected

    Raises:
        `ArchParseError`: An unexpected end tag, character data, or the end of the document
    """
    while True:
        event = reader.next()
        if event.type_.is_start_element:
            yield event
        elif event.type_.is_end_element:
            if event.name != start.name:
                raise reader.error(ArchParseErrorKind.unexpected_end_tag, event.name)
            return
        elif event.type_.is_characters:
            if not allow_text:
                raise reader.error(ArchParseErrorKind.invalid_tag,
                        "Unexpected characters within <{}>".format(start.name))
            yield event
        else:
            raise reader.error(ArchParseErrorKind.unexpected_end_of_document, start.name)

def invalid_child(reader, event):
    """Create the error for a child tag that is not allowed in its context."""
    return reader.error(ArchParseErrorKind.invalid_tag, event.name)

def no_attributes(reader, start):
    """Reject any attribute on ``start``."""
    _empty_table.parse(reader, start)

def close_element(reader, start):
    """Consume the end tag of an element that has no content."""
    for event in iter_children(reader, start):
        raise invalid_child(reader, event)

def expect_empty(reader, start, table = None):
    """Parse an element that has only attributes.

    Returns:
        :obj:`dict`: Attribute values, see `AttributeTable.parse`
    """
    values = (table or _empty_table).parse(reader, start)
    close_element(reader, start)
    return values

def read_text(reader, start):
    """Read the single block of character data of an element that has no children.

    Returns:
        :obj:`str`: The text, or ``None`` if the element is empty
    """
    text = None
    for event in iter_children(reader, start, allow_text = True):
        if event.type_.is_start_element:
            raise invalid_child(reader, event)
        elif text is not None:
            raise reader.error(ArchParseErrorKind.invalid_tag, "Duplicate characters within {}.".format(start.name))
        text = event.text
    return text

def skip_element(reader, start):
    """Consume everything up to and including the end tag matching ``start``."""
    depth = 0
    while True:
        event = reader.next()
        if event.type_.is_start_element:
            depth += 1
        elif event.type_.is_end_element:
            if depth == 0:
                if event.name != start.name:
                    raise reader.error(ArchParseErrorKind.unexpected_end_tag, event.name)
                return
            depth -= 1
        elif event.type_.is_end_document:
            raise reader.error(ArchParseErrorKind.unexpected_end_of_document, start.name)

def check_unique(reader, event, current):
    """Reject a second occurrence of a child that may appear at most once.

    Args:
        current: The value parsed from an earlier occurrence, ``None`` if there was none
    """
    if current is not None:
        raise reader.error(ArchParseErrorKind.duplicate_tag, '<{}>'.format(event.name))

def require(reader, value, tag):
    """Return ``value``, or raise a missing-required-tag error for ``tag`` if it is ``None``."""
    if value is None:
        raise reader.error(ArchParseErrorKind.missing_required_tag, '<{}>'.format(tag))
    return value
