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
Encoder and decoder for the edge gateway payload records.

Every record class carries two class attributes: ``tag``, the name of its
root element, and ``fields``, the list of schema descriptors from
:mod:`libvcd.edge.fields` in schema order.

Modeled fields are read and written according to their descriptor. Opaque
fields are never parsed: on decode the inner markup of the element is sliced
out of the input, on encode it is written back byte for byte. This is what
makes it safe to read a whole configuration, change the part the client
understands and send everything back.
"""

import re
import logging

from libvcd.common.types import MalformedInputError, ValidationError
from libvcd.edge.fields import STR, INT, BOOL, ZERO_VALUES
from libvcd.edge.fields import Attribute, Element, ElementList
from libvcd.edge.fields import Nested, NestedList, Opaque, OpaqueList
from libvcd.edge.fields import OpaqueFragment
from libvcd.utils.xml import parse_document, escape_text, start_tag
from libvcd.utils.xml import is_xml_text

__all__ = [
    'decode',
    'encode',
    'as_dict'
]

LOG = logging.getLogger(__name__)

TRUE_VALUES = ['1', 't', 'T', 'TRUE', 'true', 'True']
FALSE_VALUES = ['0', 'f', 'F', 'FALSE', 'false', 'False']

_INT_RE = re.compile(r'^[+-]?[0-9]+$')


def decode(cls, data):
    """
    Decode a payload into a new instance of ``cls``.

    :param cls: Record class, e.g. :class:`LbGeneralParams`.
    :type cls: ``type``

    :param data: Response body.
    :type data: ``bytes`` or ``str``

    :raises: :class:`MalformedInputError` when the markup is broken, the root
             element isn't ``cls.tag`` or a boolean / integer element can't
             be parsed.
    """
    root = parse_document(data)

    if root.tag != cls.tag:
        raise MalformedInputError('Expected element <%s> but got <%s>'
                                  % (cls.tag, root.tag), body=data)

    try:
        record = _decode_node(cls, root)
    except MalformedInputError as e:
        e.body = data
        raise

    LOG.debug('Decoded <%s> into %s', root.tag, cls.__name__)
    return record


def encode(record):
    """
    Encode a record into a request body.

    The output is UTF-8 without an XML declaration or indentation. Elements
    are written in schema order.

    :rtype: ``bytes``

    :raises: :class:`ValidationError` when a text value contains characters
             which XML 1.0 can't represent.
    """
    out = []
    _encode_record(record, record.tag, out)
    data = ''.join(out).encode('utf-8')

    LOG.debug('Encoded %s into %d bytes', record.__class__.__name__,
              len(data))
    return data


def as_dict(record):
    """
    Return the field values of a record as a plain nested ``dict``.

    Opaque fragments are returned as dictionaries with ``tag``, ``text``
    and ``attributes`` keys.
    """
    result = {}
    for field in record.fields:
        result[field.name] = _value_as_dict(getattr(record, field.name))
    return result


def _value_as_dict(value):
    if isinstance(value, OpaqueFragment):
        return {'tag': value.tag, 'text': value.text,
                'attributes': list(value.attributes)}
    if isinstance(value, list):
        return [_value_as_dict(item) for item in value]
    if hasattr(value, 'fields'):
        return as_dict(value)
    return value


def _decode_node(cls, node):
    record = cls()
    by_tag = {}

    for field in cls.fields:
        if isinstance(field, Attribute):
            value = node.get(field.tag)
            if value is not None:
                setattr(record, field.name,
                        _parse_value(field.kind, value, field.tag))
        else:
            by_tag[field.tag] = field

    for child in node.children:
        field = by_tag.get(child.tag)

        if field is None:
            LOG.debug('Skipping unknown element <%s> in <%s>', child.tag,
                      node.tag)
            continue

        if isinstance(field, OpaqueList):
            getattr(record, field.name).append(_capture(child))
        elif isinstance(field, Opaque):
            setattr(record, field.name, _capture(child))
        elif isinstance(field, NestedList):
            getattr(record, field.name).append(
                _decode_node(field.record, child))
        elif isinstance(field, Nested):
            setattr(record, field.name, _decode_node(field.record, child))
        elif isinstance(field, ElementList):
            getattr(record, field.name).append(
                _parse_value(field.kind, child.text, child.tag))
        else:
            setattr(record, field.name,
                    _parse_value(field.kind, child.text, child.tag))

    return record


def _capture(node):
    return OpaqueFragment(node.tag, node.inner_xml(), node.attributes,
                          start_markup=node.start_markup(),
                          end_markup=node.end_markup())


def _parse_value(kind, text, tag):
    if kind == STR:
        return text

    value = text.strip()

    if kind == BOOL:
        if value == '' or value in FALSE_VALUES:
            return False
        if value in TRUE_VALUES:
            return True
        raise MalformedInputError('Invalid boolean value %r in <%s>'
                                  % (text, tag))

    if kind == INT:
        if value == '':
            return 0
        if not _INT_RE.match(value):
            raise MalformedInputError('Invalid integer value %r in <%s>'
                                      % (text, tag))
        return int(value)

    raise ValueError('Unsupported field kind: %s' % (kind))


def _format_value(kind, value, tag):
    if kind == BOOL:
        return 'true' if value else 'false'
    if kind == INT:
        return str(int(value))

    value = str(value)
    if not is_xml_text(value):
        raise ValidationError('Value of <%s> contains characters which can\'t '
                              'be written to XML: %r' % (tag, value))
    return value


def _omit(field, value):
    if field.optional:
        return value is None
    if value is None:
        return field.omitempty
    return field.omitempty and value == ZERO_VALUES[field.kind]


def _encode_record(record, tag, out):
    attributes = []
    for field in record.fields:
        if not isinstance(field, Attribute):
            continue
        value = getattr(record, field.name)
        if _omit(field, value):
            continue
        if value is None:
            value = ZERO_VALUES[field.kind]
        attributes.append((field.tag, _format_value(field.kind, value,
                                                       field.tag)))

    out.append(start_tag(tag, attributes))

    for field in record.fields:
        value = getattr(record, field.name)

        if isinstance(field, Attribute):
            continue
        elif isinstance(field, OpaqueList):
            for fragment in value or []:
                _encode_fragment(fragment, out)
        elif isinstance(field, Opaque):
            if value is not None:
                _encode_fragment(value, out)
        elif isinstance(field, NestedList):
            for item in value or []:
                _encode_record(item, field.tag, out)
        elif isinstance(field, Nested):
            if value is None:
                if field.optional:
                    continue
                value = field.record()
            _encode_record(value, field.tag, out)
        elif isinstance(field, ElementList):
            for item in value or []:
                _encode_element(field.tag, field.kind, item, out)
        elif isinstance(field, Element):
            if _omit(field, value):
                continue
            if value is None:
                value = ZERO_VALUES[field.kind]
            _encode_element(field.tag, field.kind, value, out)

    out.append('</%s>' % (tag))


def _encode_element(tag, kind, value, out):
    text = escape_text(_format_value(kind, value, tag))
    out.append('<%s>%s</%s>' % (tag, text, tag))


def _encode_fragment(fragment, out):
    out.append(fragment.markup())
