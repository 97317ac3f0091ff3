# -*- encoding: ascii -*-
"""Error types raised while reading an architecture description."""

from .util import Enum

__all__ = ["ArchParseErrorKind", "ArchParseError"]

# ----------------------------------------------------------------------------
# -- Error Kind --------------------------------------------------------------
# ----------------------------------------------------------------------------
class ArchParseErrorKind(Enum):
    """Kinds of failures the parser may report."""
    file_open = 0                       #: the architecture file cannot be opened
    missing_required_tag = 1            #: a mandatory child element is absent
    missing_required_attribute = 2      #: a mandatory attribute is absent
    invalid_tag = 3                     #: an element (or text) appears where it is not allowed
    xml_parse = 4                       #: the document is not well-formed XML
    unknown_attribute = 5               #: an attribute is not recognized by its element
    duplicate_tag = 6                   #: a child allowed at most once appears again
    duplicate_attribute = 7             #: an attribute appears twice in the same element
    unexpected_end_tag = 8              #: an end tag that does not close the current element
    attribute_parse = 9                 #: an attribute value cannot be converted
    unexpected_end_of_document = 10     #: the document ends before the current element is closed

    @property
    def description(self):
        """:obj:`str`: Human-readable description of this kind."""
        return self.case(
                "Failed to open file",
                "Missing required tag",
                "Missing required attribute",
                "Invalid tag",
                "XML parse error",
                "Unknown attribute",
                "Duplicate tag",
                "Duplicate attribute",
                "Unexpected end tag",
                "Attribute parse error",
                "Unexpected end of document",
                )

# ----------------------------------------------------------------------------
# -- Parse Error -------------------------------------------------------------
# ----------------------------------------------------------------------------
class ArchParseError(Exception):
    """The one error type raised by the architecture parser.

    Args:
        kind (`ArchParseErrorKind`): Kind of the failure
        message (:obj:`str`): Offending name or text
        position (`TextPosition`): 1-based line/column where the failure was detected. ``None`` for failures that
            are not tied to a location, e.g. `ArchParseErrorKind.file_open`
        filename (:obj:`str`): Path of the file being parsed, if known
    """

    def __init__(self, kind, message, position = None, filename = None):
        super(ArchParseError, self).__init__(kind, message, position)
        self.kind = kind
        self.message = message
        self.position = position
        self.filename = filename

    @property
    def line(self):
        """:obj:`int`: Line of the failure, or ``None``."""
        return None if self.position is None else self.position.line

    @property
    def column(self):
        """:obj:`int`: Column of the failure, or ``None``."""
        return None if self.position is None else self.position.column

    def __str__(self):
        location = ''
        if self.filename is not None:
            location = self.filename
        if self.position is not None:
            location += ('{}:{}' if not location else ':{}:{}').format(self.position.line, self.position.column)
        return "{}{}: {}".format(location + ': ' if location else '', self.kind.description, self.message)
