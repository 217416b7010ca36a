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

import unittest

import requests
import requests_mock

from libvcd.edge.codec import encode
from libvcd.edge.types import CONTENT_TYPE_XML

__all__ = [
    'unittest',
    'XML_HEADERS',
    'LibvcdTestCase',
    'make_response'
]

XML_HEADERS = {'content-type': CONTENT_TYPE_XML}

MOCK_URL = 'mock://vcd.local/network/edges/edge-1'


class LibvcdTestCase(unittest.TestCase):
    """
    Base test case with assertions on encoded payloads.
    """

    def assertHasElement(self, record, tag, value=None):
        data = encode(record).decode('utf-8')
        if value is None:
            self.assertTrue('<%s>' % (tag) in data,
                            '<%s> missing from %s' % (tag, data))
        else:
            element = '<%s>%s</%s>' % (tag, value, tag)
            self.assertTrue(element in data,
                            '%s missing from %s' % (element, data))

    def assertNotHasElement(self, record, tag):
        data = encode(record).decode('utf-8')
        self.assertFalse('<%s>' % (tag) in data,
                         '<%s> unexpected in %s' % (tag, data))


def make_response(status=200, body='', headers=None, reason=None,
                  method='GET'):
    """
    Build a :class:`requests.Response` the way the transport would return
    it.
    """
    with requests_mock.mock() as m:
        m.register_uri(method, MOCK_URL, text=body, status_code=status,
                       headers=headers or XML_HEADERS, reason=reason)
        return requests.request(method, MOCK_URL)
