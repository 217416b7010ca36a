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

from typing import Optional

__all__ = [
    "LibvcdError",
    "MalformedInputError",
    "ValidationError",
    "ProviderError",
    "InvalidCredsError"
]


class LibvcdError(Exception):
    """The base class for other libvcd exceptions"""

    def __init__(self, value):
        # type: (str) -> None
        super(LibvcdError, self).__init__(value)
        self.value = value

    def __str__(self):
        return self.__repr__()

    def __repr__(self):
        return "<LibvcdError " + repr(self.value) + ">"


class MalformedInputError(LibvcdError):
    """Exception for the cases when a payload can't be decoded, e.g. the
    markup is broken, the root element is not the expected one or a
    boolean / integer element holds something else."""

    def __init__(self, value, body=None):
        # type: (str, Optional[str]) -> None
        super(MalformedInputError, self).__init__(value)
        self.body = body

    def __repr__(self):
        return ("<MalformedInputError " +
                repr(self.value) +
                ">: " +
                repr(self.body))


class ValidationError(LibvcdError):
    """Exception raised before a request is sent when a record misses a
    field which the API requires or holds a value it doesn't accept."""

    def __init__(self, value, record=None):
        # type: (str, Optional[object]) -> None
        super(ValidationError, self).__init__(value)
        self.record = record

    def __repr__(self):
        return ("<ValidationError in " +
                repr(self.record) +
                " " +
                repr(self.value) +
                ">")


class ProviderError(LibvcdError):
    """
    Exception used when the API gives back an error response (HTTP 4xx,
    5xx) for a request.
    """

    def __init__(self, value, http_code):
        # type: (str, int) -> None
        super(ProviderError, self).__init__(value)
        self.http_code = http_code

    def __repr__(self):
        return repr(self.value)


class InvalidCredsError(ProviderError):
    """Exception used when the session is not authorized."""

    def __init__(self, value='Invalid credentials with the provider'):
        # type: (str) -> None
        super(InvalidCredsError, self).__init__(value, http_code=401)
