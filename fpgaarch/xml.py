# -*- encoding: ascii -*-
"""Pull-style XML event source built on top of ``lxml.etree.iterparse``."""

from .util import Enum
from .exception import ArchParseErrorKind, ArchParseError

from collections import namedtuple, deque
import codecs
import lxml.etree as et

__all__ = ['TextPosition', 'XMLEventType', 'XMLEvent', 'XMLEventReader']

# ----------------------------------------------------------------------------
# -- Text Position -----------------------------------------------------------
# ----------------------------------------------------------------------------
class TextPosition(namedtuple('TextPosition', 'line column')):
    """A 1-based position in the source text.

    Args:
        line (:obj:`int`): Line number
        column (:obj:`int`): Column number
    """

    def __str__(self):
        return '{}:{}'.format(self.line, self.column)

# ----------------------------------------------------------------------------
# -- XML Events --------------------------------------------------------------
# ----------------------------------------------------------------------------
class XMLEventType(Enum):
    """Types of events produced by `XMLEventReader`."""
    start_element = 0   #: start tag, with attributes
    end_element = 1     #: end tag (also produced for self-closing tags)
    characters = 2      #: a run of non-whitespace character data
    end_document = 3    #: no more events

class XMLEvent(namedtuple('XMLEvent', 'type_ position name attrs text')):
    """One event pulled from the document.

    Args:
        type_ (`XMLEventType`): Type of this event
        position (`TextPosition`): Where the event starts in the source
        name (:obj:`str`): Tag name. ``None`` for character data and end of document
        attrs (:obj:`tuple` [:obj:`tuple` [:obj:`str`, :obj:`str` ]]): Attributes of a start tag as ``(name,
            value)`` pairs in document order
        text (:obj:`str`): Character data
    """

    def __new__(cls, type_, position, name = None, *, attrs = tuple(), text = None):
        return super(XMLEvent, cls).__new__(cls, type_, position, name, attrs, text)

# ----------------------------------------------------------------------------
# -- Source Recording --------------------------------------------------------
# ----------------------------------------------------------------------------
class _RecordingStream(object):
    """Forwards ``read`` calls to ``stream`` and keeps the decoded text for the locator."""

    __slots__ = ['stream', 'locator', 'decoder']
    def __init__(self, stream, locator):
        self.stream = stream
        self.locator = locator
        self.decoder = codecs.getincrementaldecoder('utf-8-sig')(errors = 'replace')

    def read(self, size = -1):
        data = self.stream.read(size)
        if isinstance(data, str):
            self.locator.feed(data)
            data = data.encode('utf-8')
        else:
            self.locator.feed(self.decoder.decode(data, final = not data))
        return data

class _Locator(object):
    """Recovers line/column positions of tags by scanning the text consumed by lxml.

    lxml reports line numbers only, so markup is walked in the same order as the events are produced. Comments,
    CDATA sections, processing instructions and document type declarations are skipped.
    """

    __slots__ = ['buf', 'offset', 'line', 'column']
    def __init__(self):
        self.buf = ''
        self.offset = 0
        self.line = 1
        self.column = 1

    @property
    def position(self):
        return TextPosition(self.line, self.column)

    def feed(self, text):
        if self.offset > 4096:
            self.buf = self.buf[self.offset:]
            self.offset = 0
        self.buf += text

    def _advance(self, to):
        consumed = self.buf[self.offset:to]
        lines = consumed.count('\n')
        if lines:
            self.line += lines
            self.column = len(consumed) - consumed.rfind('\n')
        else:
            self.column += len(consumed)
        self.offset = to

    def _skip_until(self, token, start):
        end = self.buf.find(token, start)
        return len(self.buf) if end < 0 else end + len(token)

    def _skip_doctype(self, idx):
        depth = 0
        for i in range(idx + 2, len(self.buf)):
            c = self.buf[i]
            if c == '[':
                depth += 1
            elif c == ']':
                depth -= 1
            elif c == '>' and depth <= 0:
                return i + 1
        return len(self.buf)

    def _tag_end(self, idx):
        """Index of the ``>`` closing the tag opened at ``idx``, ignoring quoted attribute values."""
        quote = None
        for i in range(idx + 1, len(self.buf)):
            c = self.buf[i]
            if quote is not None:
                if c == quote:
                    quote = None
            elif c in '"\'':
                quote = c
            elif c == '>':
                return i
        return len(self.buf) - 1

    def next_tag(self):
        """Find the next start or end tag.

        Returns:
            :obj:`int`: Index of the ``<`` of the tag, or ``None`` if no more tags are available
        """
        idx = self.offset
        while (idx := self.buf.find('<', idx)) >= 0:
            if self.buf.startswith('<!--', idx):
                idx = self._skip_until('-->', idx + 4)
            elif self.buf.startswith('<![CDATA[', idx):
                idx = self._skip_until(']]>', idx + 9)
            elif self.buf.startswith('<?', idx):
                idx = self._skip_until('?>', idx + 2)
            elif self.buf.startswith('<!', idx):
                idx = self._skip_doctype(idx)
            else:
                return idx
        return None

    def locate_tag(self):
        """Move past the next tag.

        Returns:
            `TextPosition`: Position of the tag
            :obj:`bool`: If the tag is self-closing
        """
        if (idx := self.next_tag()) is None:
            return self.position, False
        self._advance(idx)
        position = self.position
        end = self._tag_end(idx)
        self._advance(end + 1)
        return position, self.buf[end - 1] == '/'

# ----------------------------------------------------------------------------
# -- Event Reader ------------------------------------------------------------
# ----------------------------------------------------------------------------
class XMLEventReader(object):
    """Pull events one by one out of an XML document.

    Args:
        stream (file-like object): The input stream, opened in binary mode
        filename (:obj:`str`): Name of the input, used in error messages

    Whitespace-only character data is dropped. After the last event, `XMLEventType.end_document` is returned
    indefinitely.
    """

    def __init__(self, stream, filename = None):
        self.filename = filename
        self._locator = _Locator()
        self._events = et.iterparse(_RecordingStream(stream, self._locator), events = ('start', 'end'),
                remove_comments = True, remove_pis = True)
        self._queue = deque()
        self._stack = []            # (position, self-closing) of open elements
        self._pending = None        # (element, 'text' or 'tail', position) not yet reported
        self._started = False
        self._finished = False
        self._position = TextPosition(1, 1)

    @property
    def position(self):
        """`TextPosition`: Position of the most recently returned event."""
        return self._position

    def error(self, kind, message, position = None):
        """Create an `ArchParseError` located at ``position``, or at the most recent event by default."""
        return ArchParseError(kind, message, position or self._position, self.filename)

    def _flush_pending(self):
        if self._pending is None:
            return
        elem, which, position = self._pending
        self._pending = None
        text = getattr(elem, which)
        if which == 'tail':
            elem.clear()
        if text is not None and text.strip():
            self._queue.append(XMLEvent(XMLEventType.characters, position, text = text))

    def _pull(self):
        try:
            action, elem = next(self._events)
        except StopIteration:
            self._flush_pending()
            self._finished = True
            self._queue.append(XMLEvent(XMLEventType.end_document, self._locator.position))
            return
        except et.XMLSyntaxError as e:
            if not self._started and self._locator.next_tag() is None:
                # no element at all: report as an empty document
                self._finished = True
                self._queue.append(XMLEvent(XMLEventType.end_document, self._locator.position))
                return
            line, column = e.position
            raise ArchParseError(ArchParseErrorKind.xml_parse, e.msg, TextPosition(line, max(column, 1)),
                    self.filename)
        self._flush_pending()
        if action == 'start':
            self._started = True
            position, self_closing = self._locator.locate_tag()
            self._stack.append( (position, self_closing) )
            self._queue.append(XMLEvent(XMLEventType.start_element, position, elem.tag,
                attrs = tuple(elem.attrib.items())))
            self._pending = elem, 'text', self._locator.position
        else:
            position, self_closing = self._stack.pop()
            if not self_closing:
                position, _ = self._locator.locate_tag()
            self._queue.append(XMLEvent(XMLEventType.end_element, position, elem.tag))
            self._pending = elem, 'tail', self._locator.position

    def next(self):
        """Pull the next event.

        Returns:
            `XMLEvent`:

        Raises:
            `ArchParseError`: Of kind `ArchParseErrorKind.xml_parse` if the document is not well-formed
        """
        while not self._queue:
            if self._finished:
                return XMLEvent(XMLEventType.end_document, self._position)
            self._pull()
        event = self._queue.popleft()
        self._position = event.position
        return event
