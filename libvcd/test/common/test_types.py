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

from libvcd.common.types import LibvcdError, MalformedInputError
from libvcd.common.types import ValidationError, ProviderError
from libvcd.common.types import InvalidCredsError


class ErrorTypesTests(unittest.TestCase):

    def test_hierarchy(self):
        for cls in [MalformedInputError, ValidationError, ProviderError,
                    InvalidCredsError]:
            self.assertTrue(issubclass(cls, LibvcdError))
        self.assertTrue(issubclass(InvalidCredsError, ProviderError))

    def test_libvcd_error(self):
        error = LibvcdError('boom')

        self.assertEqual(error.value, 'boom')
        self.assertEqual(str(error), "<LibvcdError 'boom'>")

    def test_malformed_input_error(self):
        error = MalformedInputError('Failed to parse XML', body='<a>')

        self.assertEqual(error.body, '<a>')
        self.assertEqual(str(error),
                         "<MalformedInputError 'Failed to parse XML'>: '<a>'")

    def test_validation_error(self):
        error = ValidationError('LbPool.name cannot be empty', record='pool')

        self.assertEqual(error.record, 'pool')
        self.assertTrue('LbPool.name cannot be empty' in str(error))

    def test_provider_errors(self):
        error = ProviderError('denied', 403)
        self.assertEqual(error.http_code, 403)
        self.assertEqual(str(error), "'denied'")

        error = InvalidCredsError()
        self.assertEqual(error.http_code, 401)
        self.assertEqual(error.value, 'Invalid credentials with the provider')


if __name__ == '__main__':
    sys.exit(unittest.main())
