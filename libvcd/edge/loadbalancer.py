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
Load balancer payloads of the NSX-V edge gateway API.
"""

from libvcd.edge.fields import INT, BOOL
from libvcd.edge.fields import Element, ElementList, Nested, NestedList
from libvcd.edge.fields import OpaqueList

__all__ = [
    'LbGeneralParams',
    'LbLogging',
    'LbMonitor',
    'LbPool',
    'LbPoolMember',
    'LbAppProfile',
    'LbAppProfileHttpRedirect',
    'LbAppProfilePersistence',
    'LbAppRule',
    'LbVirtualServer'
]


class LbLogging(object):

    tag = 'logging'
    fields = [
        Element('enable', 'enable', BOOL),
        Element('log_level', 'logLevel'),
    ]

    def __init__(self, enable=False, log_level=''):
        self.enable = enable
        self.log_level = log_level

    def __repr__(self):
        return ('<LbLogging: enable=%s, log_level=%s>'
                % (self.enable, self.log_level))


class LbGeneralParams(object):
    """
    Load balancer configuration of an edge gateway, used to enable or
    disable load balancing and to change its logging.

    The API replaces the whole configuration on update, so virtual servers,
    pools, application profiles, monitors and application rules which are
    not sent get wiped. They are kept as opaque fragments and sent back
    exactly as they were read.
    """

    tag = 'loadBalancer'
    fields = [
        Element('enabled', 'enabled', BOOL),
        Element('acceleration_enabled', 'accelerationEnabled', BOOL),
        Nested('logging', 'logging', LbLogging, optional=True),
        Element('enable_service_insertion', 'enableServiceInsertion', BOOL),
        Element('version', 'version', omitempty=True),
        OpaqueList('virtual_servers', 'virtualServer'),
        OpaqueList('pools', 'pool'),
        OpaqueList('app_profiles', 'applicationProfile'),
        OpaqueList('monitors', 'monitor'),
        OpaqueList('app_rules', 'applicationRule'),
    ]

    def __init__(self, enabled=False, acceleration_enabled=False,
                 logging=None, enable_service_insertion=False, version='',
                 virtual_servers=None, pools=None, app_profiles=None,
                 monitors=None, app_rules=None):
        """
        :param enabled: Whether load balancing is enabled.
        :type enabled: ``bool``

        :param acceleration_enabled: Use the faster L4 engine.
        :type acceleration_enabled: ``bool``

        :param logging: Logging settings, ``None`` leaves them out.
        :type logging: :class:`LbLogging`

        :param enable_service_insertion: Not interpreted by anything, it is
                                         only carried from read to update.
        :type enable_service_insertion: ``bool``

        :param version: Configuration version returned by the last read.
        :type version: ``str``
        """
        self.enabled = enabled
        self.acceleration_enabled = acceleration_enabled
        self.logging = logging
        self.enable_service_insertion = enable_service_insertion
        self.version = version
        self.virtual_servers = virtual_servers or []
        self.pools = pools or []
        self.app_profiles = app_profiles or []
        self.monitors = monitors or []
        self.app_rules = app_rules or []

    def __repr__(self):
        return ('<LbGeneralParams: enabled=%s, version=%s, pools=%d, '
                'virtual_servers=%d>' % (self.enabled, self.version,
                                         len(self.pools),
                                         len(self.virtual_servers)))


class LbMonitor(object):
    """
    Health check parameters for a particular type of network traffic.
    """

    tag = 'monitor'
    fields = [
        Element('id', 'monitorId', omitempty=True),
        Element('type', 'type'),
        Element('interval', 'interval', INT, omitempty=True),
        Element('timeout', 'timeout', INT, omitempty=True),
        Element('max_retries', 'maxRetries', INT, omitempty=True),
        Element('method', 'method', omitempty=True),
        Element('url', 'url', omitempty=True),
        Element('expected', 'expected', omitempty=True),
        Element('name', 'name', omitempty=True),
        Element('send', 'send', omitempty=True),
        Element('receive', 'receive', omitempty=True),
        Element('extension', 'extension', omitempty=True),
    ]

    def __init__(self, id='', type='', interval=0, timeout=0, max_retries=0,
                 method='', url='', expected='', name='', send='',
                 receive='', extension=''):
        """
        :param type: ``http``, ``https``, ``tcp``, ``icmp`` or ``udp``.
        :type type: ``str``

        :param interval: Seconds between two checks.
        :type interval: ``int``

        :param timeout: Seconds to wait for a response.
        :type timeout: ``int``

        :param max_retries: Failed checks before a member is marked down.
        :type max_retries: ``int``
        """
        self.id = id
        self.type = type
        self.interval = interval
        self.timeout = timeout
        self.max_retries = max_retries
        self.method = method
        self.url = url
        self.expected = expected
        self.name = name
        self.send = send
        self.receive = receive
        self.extension = extension

    def __repr__(self):
        return ('<LbMonitor: id=%s, name=%s, type=%s>'
                % (self.id, self.name, self.type))


class LbPoolMember(object):

    tag = 'member'
    fields = [
        Element('id', 'memberId', omitempty=True),
        Element('name', 'name'),
        Element('ip_address', 'ipAddress'),
        Element('weight', 'weight', INT, omitempty=True),
        Element('monitor_port', 'monitorPort', INT, omitempty=True),
        Element('port', 'port', INT),
        Element('max_conn', 'maxConn', INT, omitempty=True),
        Element('min_conn', 'minConn', INT, omitempty=True),
        Element('condition', 'condition', omitempty=True),
    ]

    def __init__(self, id='', name='', ip_address='', weight=0,
                 monitor_port=0, port=0, max_conn=0, min_conn=0,
                 condition=''):
        self.id = id
        self.name = name
        self.ip_address = ip_address
        self.weight = weight
        self.monitor_port = monitor_port
        self.port = port
        self.max_conn = max_conn
        self.min_conn = min_conn
        self.condition = condition

    def __repr__(self):
        return ('<LbPoolMember: id=%s, address=%s:%s>'
                % (self.id, self.ip_address, self.port))


class LbPool(object):
    """
    A load balancer server pool.
    """

    tag = 'pool'
    fields = [
        Element('id', 'poolId', omitempty=True),
        Element('name', 'name'),
        Element('description', 'description', omitempty=True),
        Element('algorithm', 'algorithm'),
        Element('algorithm_parameters', 'algorithmParameters',
                omitempty=True),
        Element('transparent', 'transparent', BOOL),
        Element('monitor_id', 'monitorId', omitempty=True),
        NestedList('members', 'member', LbPoolMember),
    ]

    def __init__(self, id='', name='', description='', algorithm='',
                 algorithm_parameters='', transparent=False, monitor_id='',
                 members=None):
        """
        :param algorithm: One of the :class:`LbAlgorithm` values.
        :type algorithm: ``str``

        :param transparent: Make client addresses visible to the members.
        :type transparent: ``bool``

        :param members: Pool members.
        :type members: ``list`` of :class:`LbPoolMember`
        """
        self.id = id
        self.name = name
        self.description = description
        self.algorithm = algorithm
        self.algorithm_parameters = algorithm_parameters
        self.transparent = transparent
        self.monitor_id = monitor_id
        self.members = members or []

    def __repr__(self):
        return ('<LbPool: id=%s, name=%s, algorithm=%s, members=%d>'
                % (self.id, self.name, self.algorithm, len(self.members)))


class LbAppProfilePersistence(object):

    tag = 'persistence'
    fields = [
        Element('method', 'method', omitempty=True),
        Element('cookie_name', 'cookieName', omitempty=True),
        Element('cookie_mode', 'cookieMode', omitempty=True),
        Element('expire', 'expire', INT, omitempty=True),
    ]

    def __init__(self, method='', cookie_name='', cookie_mode='', expire=0):
        self.method = method
        self.cookie_name = cookie_name
        self.cookie_mode = cookie_mode
        self.expire = expire

    def __repr__(self):
        return ('<LbAppProfilePersistence: method=%s, cookie_name=%s>'
                % (self.method, self.cookie_name))


class LbAppProfileHttpRedirect(object):

    tag = 'httpRedirect'
    fields = [
        Element('to', 'to', omitempty=True),
    ]

    def __init__(self, to=''):
        self.to = to

    def __repr__(self):
        return '<LbAppProfileHttpRedirect: to=%s>' % (self.to)


class LbAppProfile(object):
    """
    A load balancer application profile.
    """

    tag = 'applicationProfile'
    fields = [
        Element('id', 'applicationProfileId', omitempty=True),
        Element('name', 'name', omitempty=True),
        Element('ssl_passthrough', 'sslPassthrough', BOOL),
        Element('template', 'template', omitempty=True),
        Nested('http_redirect', 'httpRedirect', LbAppProfileHttpRedirect,
               optional=True),
        Nested('persistence', 'persistence', LbAppProfilePersistence,
               optional=True),
        Element('insert_x_forwarded_for', 'insertXForwardedFor', BOOL),
        Element('server_ssl_enabled', 'serverSslEnabled', BOOL),
    ]

    def __init__(self, id='', name='', ssl_passthrough=False, template='',
                 http_redirect=None, persistence=None,
                 insert_x_forwarded_for=False, server_ssl_enabled=False):
        self.id = id
        self.name = name
        self.ssl_passthrough = ssl_passthrough
        self.template = template
        self.http_redirect = http_redirect
        self.persistence = persistence
        self.insert_x_forwarded_for = insert_x_forwarded_for
        self.server_ssl_enabled = server_ssl_enabled

    def __repr__(self):
        return ('<LbAppProfile: id=%s, name=%s, template=%s>'
                % (self.id, self.name, self.template))


class LbAppRule(object):
    """
    A load balancer application rule, an HAProxy script fragment.
    """

    tag = 'applicationRule'
    fields = [
        Element('id', 'applicationRuleId', omitempty=True),
        Element('name', 'name', omitempty=True),
        Element('script', 'script', omitempty=True),
    ]

    def __init__(self, id='', name='', script=''):
        self.id = id
        self.name = name
        self.script = script

    def __repr__(self):
        return '<LbAppRule: id=%s, name=%s>' % (self.id, self.name)


class LbVirtualServer(object):
    """
    A load balancer virtual server.
    """

    tag = 'virtualServer'
    fields = [
        Element('id', 'virtualServerId', omitempty=True),
        Element('name', 'name', omitempty=True),
        Element('description', 'description', omitempty=True),
        Element('enabled', 'enabled', BOOL),
        Element('ip_address', 'ipAddress'),
        Element('protocol', 'protocol'),
        Element('port', 'port', INT),
        Element('acceleration_enabled', 'accelerationEnabled', BOOL),
        Element('connection_limit', 'connectionLimit', INT, omitempty=True),
        Element('connection_rate_limit', 'connectionRateLimit', INT,
                omitempty=True),
        Element('application_profile_id', 'applicationProfileId',
                omitempty=True),
        Element('default_pool_id', 'defaultPoolId', omitempty=True),
        ElementList('application_rule_ids', 'applicationRuleId'),
    ]

    def __init__(self, id='', name='', description='', enabled=False,
                 ip_address='', protocol='', port=0,
                 acceleration_enabled=False, connection_limit=0,
                 connection_rate_limit=0, application_profile_id='',
                 default_pool_id='', application_rule_ids=None):
        """
        :param ip_address: Address the virtual server listens on, it must be
                           one of the edge gateway addresses.
        :type ip_address: ``str``

        :param application_rule_ids: Ids of the attached application rules.
        :type application_rule_ids: ``list`` of ``str``
        """
        self.id = id
        self.name = name
        self.description = description
        self.enabled = enabled
        self.ip_address = ip_address
        self.protocol = protocol
        self.port = port
        self.acceleration_enabled = acceleration_enabled
        self.connection_limit = connection_limit
        self.connection_rate_limit = connection_rate_limit
        self.application_profile_id = application_profile_id
        self.default_pool_id = default_pool_id
        self.application_rule_ids = application_rule_ids or []

    def __repr__(self):
        return ('<LbVirtualServer: id=%s, name=%s, address=%s:%s>'
                % (self.id, self.name, self.ip_address, self.port))
