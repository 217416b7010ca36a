# Licensed to the Apache Software Foundation (ASF) under one or more
# contributor license agreements.  See the NOTICE file distributed with
# this work for additional information regarding copyright ownership.
# The ASF licenses this file to You under the Apache License, Version 2.0
# (the "License"); you may not use this file except in compliance with
# the License.  You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Positional XML reader.

ElementTree throws away where in the input an element came from. The edge
gateway payloads need the exact inner markup of some elements, so this module
builds a small node tree on top of expat which keeps the byte offsets of every
element and can slice the untouched inner markup out of the original input.
"""

import re
import codecs

from xml.parsers import expat
from xml.sax.saxutils import escape, quoteattr

from libvcd.common.types import MalformedInputError

__all__ = [
    "XmlNode",
    "parse_document",
    "findtext",
    "is_xml_text",
    "escape_text",
    "quote_attr",
    "start_tag",
]

# Matches a complete start tag (or empty-element tag) at a given offset.
# Attribute values may contain '>' so they are matched as whole quoted
# strings.
_START_TAG_RE = re.compile(
    br'<[^\s/>]+'
    br'(?:\s+[^\s=/>]+\s*=\s*(?:"[^"]*"|\'[^\']*\'))*'
    br'\s*(/?)>'
)
_END_TAG_RE = re.compile(br'</[^\s>]+\s*>')

_DECLARED_ENCODING_RE = re.compile(
    br'^\s*<\?xml[^>]*?\sencoding\s*=\s*["\']([A-Za-z][A-Za-z0-9._-]*)["\']')

# Byte order marks and BOM-less first characters of encodings which are not
# ASCII compatible. UTF-32 has to be checked before UTF-16.
_WIDE_ENCODINGS = [
    (codecs.BOM_UTF32_LE, 'utf-32'),
    (codecs.BOM_UTF32_BE, 'utf-32'),
    (codecs.BOM_UTF16_LE, 'utf-16'),
    (codecs.BOM_UTF16_BE, 'utf-16'),
    (b'<\x00\x00\x00', 'utf-32-le'),
    (b'\x00\x00\x00<', 'utf-32-be'),
    (b'<\x00', 'utf-16-le'),
    (b'\x00<', 'utf-16-be'),
]

# Characters allowed by the Char production of XML 1.0.
_INVALID_CHARS_RE = re.compile(
    '[^\t\n\r\x20-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]')


class XmlNode(object):
    """
    A parsed element which remembers its position in the source document.

    ``attributes`` is a list of ``(name, value)`` tuples in document order,
    ``text`` holds the character data directly inside the element (text of
    nested elements is not included).
    """

    def __init__(self, tag, attributes, raw, encoding, start):
        self.tag = tag
        self.attributes = attributes
        self.children = []
        self.text = ''
        self.start = start
        self.inner_start = None
        self.inner_end = None
        self.end = None
        self.empty_element = False
        self._raw = raw
        self._encoding = encoding

    @property
    def attrib(self):
        return dict(self.attributes)

    def get(self, name, default=None):
        for key, value in self.attributes:
            if key == name:
                return value
        return default

    def find(self, xpath):
        result = self.findall(xpath)
        return result[0] if result else None

    def findall(self, xpath):
        nodes = [self]
        for tag in xpath.split('/'):
            nodes = [child for node in nodes for child in node.children
                     if child.tag == tag]
        return nodes

    def findtext(self, xpath, default=None):
        node = self.find(xpath)
        if node is None:
            return default
        return node.text

    def inner_xml(self):
        """
        Return the markup between the start and the end tag exactly as it
        appeared in the source document.

        :rtype: ``str``
        """
        if self.empty_element:
            return ''
        return self._slice(self.inner_start, self.inner_end)

    def start_markup(self):
        """
        Return the start tag (or the empty-element tag) exactly as it
        appeared in the source document.
        """
        return self._slice(self.start, self.inner_start)

    def end_markup(self):
        """
        Return the end tag exactly as it appeared in the source document, an
        empty string for an empty-element tag.
        """
        if self.empty_element:
            return ''
        return self._slice(self.inner_end, self.end)

    def _slice(self, start, end):
        try:
            return self._raw[start:end].decode(self._encoding)
        except (UnicodeDecodeError, LookupError) as e:
            raise MalformedInputError('Unable to decode the content of <%s> '
                                      'as %s: %s'
                                      % (self.tag, self._encoding, e))

    def __iter__(self):
        return iter(self.children)

    def __len__(self):
        return len(self.children)

    def __repr__(self):
        return ('<XmlNode: tag=%s, children=%d, offset=%s>'
                % (self.tag, len(self.children), self.start))


class _TreeBuilder(object):

    def __init__(self, raw, encoding):
        self.raw = raw
        self.encoding = encoding
        self.root = None
        self.stack = []
        self.parser = None

    def xml_decl(self, version, encoding, standalone):
        if encoding and self.encoding is None:
            self.encoding = encoding

    def start(self, tag, attrs):
        offset = self.parser.CurrentByteIndex
        attributes = list(zip(attrs[0::2], attrs[1::2]))
        node = XmlNode(tag, attributes, self.raw, self.encoding or 'utf-8',
                       offset)

        match = _START_TAG_RE.match(self.raw, offset)
        if match is None:
            raise MalformedInputError('Unable to locate start tag of <%s> '
                                      'at offset %d' % (tag, offset))
        node.inner_start = match.end()
        node.empty_element = bool(match.group(1))

        if self.stack:
            self.stack[-1].children.append(node)
        else:
            self.root = node
        self.stack.append(node)

    def end(self, tag):
        node = self.stack.pop()
        if node.empty_element:
            node.inner_end = node.inner_start
            node.end = node.inner_start
            return

        offset = self.parser.CurrentByteIndex
        match = _END_TAG_RE.match(self.raw, offset)
        if match is None:
            raise MalformedInputError('Unable to locate end tag of <%s> '
                                      'at offset %d' % (tag, offset))
        node.inner_end = offset
        node.end = match.end()

    def data(self, text):
        if self.stack:
            self.stack[-1].text += text


def parse_document(data):
    """
    Parse a document into a tree of :class:`XmlNode` objects.

    :param data: Document to parse.
    :type data: ``bytes`` or ``str``

    :rtype: :class:`XmlNode`

    :raises: :class:`MalformedInputError` when the document is not well
             formed or can't be decoded.
    """
    if not isinstance(data, str):
        raw = bytes(data)
        encoding = _wide_encoding(raw)
        if encoding is None:
            return _parse(raw, None, data)
        try:
            text = raw.decode(encoding)
        except UnicodeDecodeError as e:
            raise MalformedInputError('Failed to decode document as %s: %s'
                                      % (encoding, e), body=data)
    else:
        text = data

    try:
        raw = text.encode('utf-8')
    except UnicodeEncodeError as e:
        raise MalformedInputError('Failed to encode document: %s' % (e),
                                  body=data)
    # The declaration of a decoded document no longer describes the bytes
    # handed to expat.
    return _parse(raw, 'UTF-8', data)


def _wide_encoding(raw):
    """
    Return the codec of a document whose encoding isn't ASCII compatible,
    ``None`` for all other documents.

    Offsets reported by expat can only be used with the start tag patterns
    when markup characters are single bytes, such documents are transcoded
    to UTF-8 first.
    """
    for prefix, encoding in _WIDE_ENCODINGS:
        if raw.startswith(prefix):
            return encoding

    match = _DECLARED_ENCODING_RE.match(raw)
    if match is None:
        return None

    declared = match.group(1).decode('ascii')
    try:
        marker = '<?xml'.encode(codecs.lookup(declared).name)
    except LookupError:
        # expat reports unknown encodings itself
        return None
    except UnicodeError:
        marker = None

    if marker != b'<?xml':
        raise MalformedInputError('Unsupported document encoding %s for a '
                                  'document without byte order mark'
                                  % (declared), body=raw)
    return None


def _parse(raw, override, data):
    if not raw.strip():
        raise MalformedInputError('Empty document', body=data)

    builder = _TreeBuilder(raw, override)
    parser = expat.ParserCreate(override)
    parser.ordered_attributes = True
    parser.XmlDeclHandler = builder.xml_decl
    parser.StartElementHandler = builder.start
    parser.EndElementHandler = builder.end
    parser.CharacterDataHandler = builder.data
    builder.parser = parser

    try:
        parser.Parse(raw, True)
    except expat.ExpatError as e:
        raise MalformedInputError('Failed to parse XML: %s' % (e), body=data)

    return builder.root


def findtext(element, xpath, no_text_value=''):
    """
    :param no_text_value: Value to return if the provided element has no text
                          value.
    :type no_text_value: ``object``
    """
    value = element.findtext(xpath)

    if value is None or value == '':
        return no_text_value
    return value


def is_xml_text(value):
    """
    Return ``True`` if every character of ``value`` can be written to an
    XML 1.0 document.
    """
    return _INVALID_CHARS_RE.search(value) is None


def escape_text(value):
    return escape(value)


def quote_attr(value):
    return quoteattr(value)


def start_tag(tag, attributes=None):
    parts = [tag]
    for name, value in attributes or []:
        parts.append('%s=%s' % (name, quote_attr(value)))
    return '<%s>' % (' '.join(parts))
