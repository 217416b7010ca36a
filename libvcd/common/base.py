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
Adapters between the HTTP transport and the payload records.

The transport (session handling, retries, timeouts) lives outside of this
library. It hands the :class:`requests.Response` it received to one of the
classes below which checks the status and decodes the body.
"""

import logging

import requests

from libvcd.common.types import ProviderError, InvalidCredsError
from libvcd.common.types import MalformedInputError
from libvcd.edge import codec
from libvcd.utils.xml import parse_document, findtext

__all__ = [
    'Response',
    'XmlResponse',
    'EdgeDocumentResponse'
]

LOG = logging.getLogger(__name__)


def lowercase_keys(dictionary):
    return dict(((k.lower(), v) for k, v in dictionary.items()))


class Response(object):
    """
    A Base Response class to derive from.
    """

    object = None
    body = None
    status = requests.codes.ok
    headers = {}
    error = None
    parse_zero_length_body = False

    def __init__(self, response):
        """
        :param response: Response returned by the transport.
        :type response: :class:`requests.Response`
        """
        self.body = response.text.strip() if response.text else ''
        self.status = response.status_code
        self.headers = lowercase_keys(response.headers)
        self.error = response.reason

        if not self.success():
            message = self.parse_error()
            LOG.debug('Request failed with status %s: %s', self.status,
                      message)

            if self.status == requests.codes.unauthorized:
                raise InvalidCredsError(message or self.error)
            raise ProviderError(message or self.error, self.status)

        self.object = self.parse_body()

    def parse_body(self):
        """
        Parse response body.

        Override in a subclass.

        :return: Parsed body.
        """
        return self.body

    def parse_error(self):
        """
        Parse the error messages.

        Override in a subclass.

        :return: Parsed error.
        :rtype: ``str``
        """
        return self.body

    def success(self):
        """
        Determine if our request was successful.

        :rtype: ``bool``
        :return: ``True`` or ``False``
        """
        return 200 <= self.status < 300


class XmlResponse(Response):
    """
    A Base XML Response class to derive from.
    """

    def parse_body(self):
        if len(self.body) == 0 and not self.parse_zero_length_body:
            return None

        return parse_document(self.body)

    def parse_error(self):
        """
        Extract the message of an error document.

        The NSX API answers with ``<error><details>...</details></error>``,
        vCloud Director itself with ``<Error message="..."/>``. Anything else
        is returned as is.
        """
        if not self.body:
            return None

        try:
            root = parse_document(self.body)
        except MalformedInputError:
            return self.body

        if root.tag == 'error':
            return findtext(root, 'details', no_text_value=self.body)
        if root.tag == 'Error':
            return root.get('message', self.body)
        return self.body


class EdgeDocumentResponse(XmlResponse):
    """
    Response whose body is decoded into an edge gateway record.
    """

    def __init__(self, response, document_cls):
        """
        :param document_cls: Record class the body is decoded into, e.g.
                             :class:`libvcd.edge.firewall.FirewallConfig`.
        :type document_cls: ``type``
        """
        self.document_cls = document_cls
        super(EdgeDocumentResponse, self).__init__(response)

    def parse_body(self):
        if len(self.body) == 0 and not self.parse_zero_length_body:
            return None

        return codec.decode(self.document_cls, self.body)
