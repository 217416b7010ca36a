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
Schema descriptors used by the payload records.

A record class lists its fields in ``fields`` in the order the API schema
defines them. The descriptors only hold metadata, all the work is done by
:mod:`libvcd.edge.codec`.

Omission rules:

* ``omitempty`` - the element is left out when the value equals the zero
  value of its kind (``''``, ``0`` or ``False``).
* ``optional`` - the value has a presence marker. ``None`` means absent and
  the element is left out, any other value (``False`` and ``0`` included) is
  always written.
"""

from libvcd.utils.xml import start_tag

__all__ = [
    'STR',
    'INT',
    'BOOL',
    'Attribute',
    'Element',
    'ElementList',
    'Nested',
    'NestedList',
    'Opaque',
    'OpaqueList',
    'OpaqueFragment'
]

STR = 'str'
INT = 'int'
BOOL = 'bool'

ZERO_VALUES = {
    STR: '',
    INT: 0,
    BOOL: False,
}


class Element(object):
    """
    A scalar value stored as the text of a child element.
    """

    def __init__(self, name, tag, kind=STR, omitempty=False, optional=False):
        """
        :param name: Attribute name on the record.
        :type name: ``str``

        :param tag: Element name in the payload.
        :type tag: ``str``

        :param kind: One of ``STR``, ``INT`` or ``BOOL``.
        :type kind: ``str``

        :param omitempty: Leave the element out when it holds the zero value.
        :type omitempty: ``bool``

        :param optional: ``None`` marks the value as absent.
        :type optional: ``bool``
        """
        if kind not in ZERO_VALUES:
            raise ValueError('Unsupported field kind: %s' % (kind))
        self.name = name
        self.tag = tag
        self.kind = kind
        self.omitempty = omitempty
        self.optional = optional

    def default(self):
        if self.optional:
            return None
        return ZERO_VALUES[self.kind]

    def __repr__(self):
        return ('<%s: name=%s, tag=%s, kind=%s>'
                % (self.__class__.__name__, self.name, self.tag, self.kind))


class Attribute(Element):
    """
    A scalar value stored as an attribute of the record's element.
    """


class ElementList(object):
    """
    A repeated scalar element, e.g. ``<ipAddress>`` inside a firewall rule
    endpoint. An empty list writes nothing.
    """

    def __init__(self, name, tag, kind=STR):
        self.name = name
        self.tag = tag
        self.kind = kind

    def default(self):
        return []

    def __repr__(self):
        return '<ElementList: name=%s, tag=%s>' % (self.name, self.tag)


class Nested(object):
    """
    A child element described by another record class.

    A nested record which isn't ``optional`` is always written, an empty
    instance of ``record`` is used when the value is missing.
    """

    def __init__(self, name, tag, record, optional=False):
        self.name = name
        self.tag = tag
        self.record = record
        self.optional = optional

    def default(self):
        if self.optional:
            return None
        return self.record()

    def __repr__(self):
        return ('<Nested: name=%s, tag=%s, record=%s>'
                % (self.name, self.tag, self.record.__name__))


class NestedList(Nested):
    """
    A repeated child element described by another record class.
    """

    def __init__(self, name, tag, record):
        super(NestedList, self).__init__(name, tag, record)

    def default(self):
        return []


class Opaque(object):
    """
    A child element which is never interpreted. Its inner markup is stored
    in an :class:`OpaqueFragment` and written back untouched. ``None`` means
    the element is absent.
    """

    def __init__(self, name, tag):
        self.name = name
        self.tag = tag

    def default(self):
        return None

    def __repr__(self):
        return ('<%s: name=%s, tag=%s>'
                % (self.__class__.__name__, self.name, self.tag))


class OpaqueList(Opaque):
    """
    A repeated child element which is never interpreted.
    """

    def default(self):
        return []


class OpaqueFragment(object):
    """
    Markup carried verbatim between a read and the following update.

    The tag name travels with the text so the fragment can be written back
    without looking at the schema. A fragment read from a document also
    keeps the start and end tag as they were received, they are reused as
    long as ``tag`` and ``attributes`` are left alone.
    """

    def __init__(self, tag, text='', attributes=None, start_markup=None,
                 end_markup=None):
        """
        :param tag: Name of the element wrapping the markup.
        :type tag: ``str``

        :param text: Inner markup of the element, exactly as received.
        :type text: ``str``

        :param attributes: Attributes of the wrapping element in document
                           order.
        :type attributes: ``list`` of ``tuple``

        :param start_markup: Start tag (or empty-element tag) as received.
        :type start_markup: ``str``

        :param end_markup: End tag as received, ``''`` for an empty-element
                           tag.
        :type end_markup: ``str``
        """
        self.tag = tag
        self.text = text
        self.attributes = list(attributes or [])
        self.start_markup = start_markup
        self.end_markup = end_markup
        self._received = (tag, list(self.attributes))

    def markup(self):
        """
        Return the complete element.

        :rtype: ``str``
        """
        received = (self.start_markup is not None and
                    (self.tag, self.attributes) == self._received)

        if received and self.end_markup:
            return self.start_markup + self.text + self.end_markup
        if received and not self.text:
            return self.start_markup

        return '%s%s</%s>' % (start_tag(self.tag, self.attributes), self.text,
                              self.tag)

    def __eq__(self, other):
        if not isinstance(other, OpaqueFragment):
            return NotImplemented
        return (self.tag == other.tag and self.text == other.text and
                self.attributes == other.attributes)

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None

    def __repr__(self):
        text = self.text
        if len(text) > 40:
            text = text[:37] + '...'
        return '<OpaqueFragment: tag=%s, text=%r>' % (self.tag, text)
