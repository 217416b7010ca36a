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

import os
import sys
import logging
import tempfile

from io import StringIO

from mock import patch

import libvcd
from libvcd import _init_once
from libvcd.edge.codec import encode
from libvcd.edge.ipset import EdgeIpSet
from libvcd.test import unittest


class TestInit(unittest.TestCase):
    def setUp(self):
        self.logger = logging.getLogger('libvcd')
        self.handlers = list(self.logger.handlers)
        self.level = self.logger.level

    def tearDown(self):
        for handler in self.logger.handlers:
            if handler not in self.handlers:
                self.logger.removeHandler(handler)
        self.logger.setLevel(self.level)

    def test_init_once_without_debug(self):
        with patch.dict(os.environ, clear=True):
            _init_once()

        self.assertEqual(self.handlers, self.logger.handlers)

    def test_init_once_and_debug_mode(self):
        fd, tmp_path = tempfile.mkstemp()
        os.close(fd)
        self.addCleanup(os.remove, tmp_path)

        with patch.dict(os.environ, {'LIBVCD_DEBUG': tmp_path}):
            _init_once()

        self.assertEqual(len(self.logger.handlers), len(self.handlers) + 1)
        self.assertEqual(self.logger.level, logging.DEBUG)

        encode(EdgeIpSet(name='test-ipset', ip_addresses='10.0.0.1'))
        for handler in self.logger.handlers:
            handler.flush()

        with open(tmp_path) as fp:
            content = fp.read()
        self.assertTrue('Encoded EdgeIpSet into' in content)

    def test_enable_debug(self):
        fo = StringIO()
        handler = libvcd.enable_debug(fo)

        self.assertTrue(handler in self.logger.handlers)
        encode(EdgeIpSet(name='test-ipset', ip_addresses='10.0.0.1'))
        self.assertTrue('libvcd.edge.codec DEBUG Encoded EdgeIpSet' in
                        fo.getvalue())


if __name__ == '__main__':
    sys.exit(unittest.main())
