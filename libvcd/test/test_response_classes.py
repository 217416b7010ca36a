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

import sys
import unittest

from libvcd.common.base import Response, XmlResponse, EdgeDocumentResponse
from libvcd.common.types import MalformedInputError, ProviderError
from libvcd.common.types import InvalidCredsError
from libvcd.edge.firewall import FirewallConfig
from libvcd.edge.ipset import EdgeIpSetList
from libvcd.test import make_response
from libvcd.test.file_fixtures import EdgeFileFixtures


class ResponseClassesTests(unittest.TestCase):
    fixtures = EdgeFileFixtures('nsxv')

    def test_Response_class(self):
        response = Response(make_response(body=' hello ',
                                          headers={'X-Foo': 'bar'}))

        self.assertEqual(response.object, 'hello')
        self.assertEqual(response.status, 200)
        self.assertEqual(response.headers['x-foo'], 'bar')

    def test_XmlResponse_class(self):
        response = XmlResponse(make_response(body='<foo>bar</foo>'))

        parsed = response.parse_body()
        self.assertEqual(parsed.tag, 'foo')
        self.assertEqual(parsed.text, 'bar')

    def test_XmlResponse_class_malformed_response(self):
        try:
            XmlResponse(make_response(body='<foo>'))
        except MalformedInputError:
            pass
        else:
            self.fail('Exception was not thrown')

    def test_XmlResponse_class_zero_length_body_strip(self):
        response = XmlResponse(make_response(body=' ', status=204))

        self.assertEqual(response.body, '')
        self.assertTrue(response.object is None)

    def test_nsx_error_body(self):
        body = self.fixtures.load('error_nsx.xml')

        try:
            XmlResponse(make_response(status=400, body=body))
        except ProviderError as e:
            self.assertEqual(e.http_code, 400)
            self.assertTrue(e.value.startswith('The object ipset-27 used'))
        else:
            self.fail('Exception was not thrown')

    def test_vcd_error_body(self):
        body = self.fixtures.load('error_vcd.xml')

        try:
            XmlResponse(make_response(status=403, body=body))
        except ProviderError as e:
            self.assertEqual(e.http_code, 403)
            self.assertEqual(e.value, 'This operation is denied.')
        else:
            self.fail('Exception was not thrown')

    def test_error_without_xml_body(self):
        try:
            XmlResponse(make_response(status=500, body='Internal error'))
        except ProviderError as e:
            self.assertEqual(e.http_code, 500)
            self.assertEqual(e.value, 'Internal error')
        else:
            self.fail('Exception was not thrown')

    def test_error_without_body_uses_reason(self):
        try:
            XmlResponse(make_response(status=503, body='',
                                      reason='Service Unavailable'))
        except ProviderError as e:
            self.assertEqual(e.value, 'Service Unavailable')
        else:
            self.fail('Exception was not thrown')

    def test_unauthorized(self):
        self.assertRaises(InvalidCredsError, XmlResponse,
                          make_response(status=401, body='',
                                        reason='Unauthorized'))

    def test_EdgeDocumentResponse_class(self):
        body = self.fixtures.load('firewall_config.xml')
        response = EdgeDocumentResponse(make_response(body=body),
                                        FirewallConfig)

        config = response.object
        self.assertTrue(isinstance(config, FirewallConfig))
        self.assertTrue(config.enabled)
        self.assertEqual(config.version, '12')

    def test_EdgeDocumentResponse_class_list(self):
        body = self.fixtures.load('ipset_list.xml')
        response = EdgeDocumentResponse(make_response(body=body),
                                        EdgeIpSetList)

        self.assertEqual(len(response.object), 2)

    def test_EdgeDocumentResponse_class_wrong_document(self):
        body = self.fixtures.load('ipset.xml')

        self.assertRaises(MalformedInputError, EdgeDocumentResponse,
                          make_response(body=body), FirewallConfig)


if __name__ == '__main__':
    sys.exit(unittest.main())
