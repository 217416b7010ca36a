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

__all__ = [
    'CONTENT_TYPE_XML',
    'FirewallAction',
    'RuleType',
    'NatAction',
    'LbAlgorithm',
    'LbProtocol',
    'LbMonitorType',
    'LbLogLevel'
]

CONTENT_TYPE_XML = 'application/xml'


class FirewallAction(object):
    """
    Action taken by a firewall rule or the default policy.
    """
    ACCEPT = 'accept'
    DENY = 'deny'

    ALL = [ACCEPT, DENY]


class RuleType(object):
    """
    Origin of a firewall or NAT rule. Only ``USER`` rules are created by
    clients, the others are managed by the edge gateway itself.
    """
    USER = 'user'
    INTERNAL_HIGH = 'internal_high'
    DEFAULT_POLICY = 'default_policy'


class NatAction(object):
    SNAT = 'snat'
    DNAT = 'dnat'

    ALL = [SNAT, DNAT]


class LbAlgorithm(object):
    """
    Balancing algorithm of a server pool.
    """
    ROUND_ROBIN = 'round-robin'
    IP_HASH = 'ip-hash'
    URI = 'uri'
    LEAST_CONN = 'leastconn'
    URL = 'url'
    HTTP_HEADER = 'httpheader'


class LbProtocol(object):
    HTTP = 'http'
    HTTPS = 'https'
    TCP = 'tcp'
    UDP = 'udp'


class LbMonitorType(object):
    HTTP = 'http'
    HTTPS = 'https'
    TCP = 'tcp'
    ICMP = 'icmp'
    UDP = 'udp'


class LbLogLevel(object):
    EMERGENCY = 'emergency'
    ALERT = 'alert'
    CRITICAL = 'critical'
    ERROR = 'error'
    WARNING = 'warning'
    NOTICE = 'notice'
    INFO = 'info'
    DEBUG = 'debug'
