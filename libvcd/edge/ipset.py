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
IP set payloads of the NSX-V edge gateway API.

IP sets are only supported by advanced edge gateways.
"""

from libvcd.edge.fields import INT, BOOL
from libvcd.edge.fields import Element, NestedList

__all__ = [
    'EdgeIpSet',
    'EdgeIpSetList'
]


class EdgeIpSet(object):
    """
    A group of IP addresses which can be used as the source or destination
    of a firewall rule.

    The API returns more fields than the ones below, they are used by NSX
    internally and are not needed to manage the set.
    """

    tag = 'ipset'
    fields = [
        Element('id', 'objectId', omitempty=True),
        Element('name', 'name'),
        Element('description', 'description', omitempty=True),
        Element('ip_addresses', 'value'),
        Element('inheritance_allowed', 'inheritanceAllowed', BOOL,
                optional=True),
        Element('revision', 'revision', INT, optional=True),
    ]

    def __init__(self, id='', name='', description='', ip_addresses='',
                 inheritance_allowed=None, revision=None):
        """
        :param id: Composite id, ``<vdc id>:<ip set id>``, e.g.
                   ``f9daf2da-b4f9-4921-a2f4-d77a943a381c:ipset-4``.
        :type id: ``str``

        :param name: Name, must be unique.
        :type name: ``str``

        :param ip_addresses: Comma separated addresses, networks and ranges,
                             e.g. ``192.168.200.1,192.168.200.1/24``. The API
                             may reorder the components.
        :type ip_addresses: ``str``

        :param inheritance_allowed: Visibility at underlying scopes, ``None``
                                    leaves it out of the payload.
        :type inheritance_allowed: ``bool``

        :param revision: Revision returned by the last read. An update with an
                         older revision is rejected by the API.
        :type revision: ``int``
        """
        self.id = id
        self.name = name
        self.description = description
        self.ip_addresses = ip_addresses
        self.inheritance_allowed = inheritance_allowed
        self.revision = revision

    @property
    def object_id(self):
        """
        IP set id without the vDC prefix, e.g. ``ipset-4``.
        """
        return self.id.split(':')[-1]

    def __repr__(self):
        return ('<EdgeIpSet: id=%s, name=%s, ip_addresses=%s>'
                % (self.id, self.name, self.ip_addresses))


class EdgeIpSetList(object):
    """
    List of IP sets as returned by the API.
    """

    tag = 'list'
    fields = [
        NestedList('ipsets', 'ipset', EdgeIpSet),
    ]

    def __init__(self, ipsets=None):
        self.ipsets = ipsets or []

    def get_by_name(self, name):
        for ipset in self.ipsets:
            if ipset.name == name:
                return ipset
        return None

    def __iter__(self):
        return iter(self.ipsets)

    def __len__(self):
        return len(self.ipsets)

    def __repr__(self):
        return '<EdgeIpSetList: ipsets=%d>' % (len(self.ipsets))
