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
Firewall payloads of the NSX-V edge gateway API.
"""

from libvcd.edge.fields import BOOL
from libvcd.edge.fields import Element, ElementList, Nested, NestedList
from libvcd.edge.fields import Opaque

__all__ = [
    'FirewallConfig',
    'FirewallDefaultPolicy',
    'EdgeFirewallRule',
    'EdgeFirewallRules',
    'EdgeFirewallEndpoint',
    'EdgeFirewallApplication',
    'EdgeFirewallApplicationService'
]


class FirewallDefaultPolicy(object):
    """
    Rule applied to traffic which no other firewall rule matches.
    """

    tag = 'defaultPolicy'
    fields = [
        Element('logging_enabled', 'loggingEnabled', BOOL),
        Element('action', 'action'),
    ]

    def __init__(self, action='', logging_enabled=False):
        self.action = action
        self.logging_enabled = logging_enabled

    def __repr__(self):
        return ('<FirewallDefaultPolicy: action=%s, logging_enabled=%s>'
                % (self.action, self.logging_enabled))


class FirewallConfig(object):
    """
    Firewall configuration of an edge gateway, used to enable or disable the
    firewall.

    The API replaces the whole configuration on update, so rules and global
    settings which are not sent get wiped. They are kept as opaque fragments
    and sent back exactly as they were read.
    """

    tag = 'firewall'
    fields = [
        Element('enabled', 'enabled', BOOL),
        Nested('default_policy', 'defaultPolicy', FirewallDefaultPolicy),
        Element('version', 'version', omitempty=True),
        Opaque('firewall_rules', 'firewallRules'),
        Opaque('global_config', 'globalConfig'),
    ]

    def __init__(self, enabled=False, default_policy=None, version='',
                 firewall_rules=None, global_config=None):
        """
        :param enabled: Whether the firewall is enabled.
        :type enabled: ``bool``

        :param default_policy: Default rule.
        :type default_policy: :class:`FirewallDefaultPolicy`

        :param version: Configuration version returned by the last read.
                        Each configuration change increments it.
        :type version: ``str``

        :param firewall_rules: Rules, passed through untouched.
        :type firewall_rules: :class:`OpaqueFragment`

        :param global_config: Global settings, passed through untouched.
        :type global_config: :class:`OpaqueFragment`
        """
        self.enabled = enabled
        self.default_policy = default_policy or FirewallDefaultPolicy()
        self.version = version
        self.firewall_rules = firewall_rules
        self.global_config = global_config

    def __repr__(self):
        return ('<FirewallConfig: enabled=%s, version=%s, default_policy=%s>'
                % (self.enabled, self.version, self.default_policy.action))


class EdgeFirewallEndpoint(object):
    """
    Source or destination of a firewall rule.
    """

    tag = None
    fields = [
        Element('exclude', 'exclude', BOOL),
        ElementList('vnic_group_ids', 'vnicGroupId'),
        ElementList('grouping_object_ids', 'groupingObjectId'),
        ElementList('ip_addresses', 'ipAddress'),
    ]

    def __init__(self, exclude=False, vnic_group_ids=None,
                 grouping_object_ids=None, ip_addresses=None):
        """
        :param exclude: Match everything except the listed objects.
        :type exclude: ``bool``

        :param vnic_group_ids: Interface groups, e.g. ``vse`` or
                               ``internal``.
        :type vnic_group_ids: ``list`` of ``str``

        :param grouping_object_ids: IP set or other grouping object ids.
        :type grouping_object_ids: ``list`` of ``str``

        :param ip_addresses: Addresses, ranges or networks.
        :type ip_addresses: ``list`` of ``str``
        """
        self.exclude = exclude
        self.vnic_group_ids = vnic_group_ids or []
        self.grouping_object_ids = grouping_object_ids or []
        self.ip_addresses = ip_addresses or []

    def __repr__(self):
        return ('<EdgeFirewallEndpoint: exclude=%s, ip_addresses=%s>'
                % (self.exclude, self.ip_addresses))


class EdgeFirewallApplicationService(object):
    """
    Port and protocol of one service matched by a firewall rule.
    """

    tag = 'service'
    fields = [
        Element('protocol', 'protocol', omitempty=True),
        Element('port', 'port', omitempty=True),
        Element('source_port', 'sourcePort', omitempty=True),
    ]

    def __init__(self, protocol='', port='', source_port=''):
        self.protocol = protocol
        self.port = port
        self.source_port = source_port

    def __repr__(self):
        return ('<EdgeFirewallApplicationService: protocol=%s, port=%s, '
                'source_port=%s>' % (self.protocol, self.port,
                                     self.source_port))


class EdgeFirewallApplication(object):

    tag = 'application'
    fields = [
        Element('id', 'applicationId', omitempty=True),
        NestedList('services', 'service', EdgeFirewallApplicationService),
    ]

    def __init__(self, id='', services=None):
        self.id = id
        self.services = services or []

    def __repr__(self):
        return ('<EdgeFirewallApplication: id=%s, services=%d>'
                % (self.id, len(self.services)))


class EdgeFirewallRule(object):
    """
    A single firewall rule managed through the proxied NSX-V API.
    """

    tag = 'firewallRule'
    fields = [
        Element('id', 'id', omitempty=True),
        Element('name', 'name', omitempty=True),
        Element('rule_type', 'ruleType', omitempty=True),
        Element('rule_tag', 'ruleTag', omitempty=True),
        Nested('source', 'source', EdgeFirewallEndpoint),
        Nested('destination', 'destination', EdgeFirewallEndpoint),
        Nested('application', 'application', EdgeFirewallApplication),
        Element('match_translated', 'matchTranslated', BOOL, optional=True),
        Element('direction', 'direction', omitempty=True),
        Element('action', 'action', omitempty=True),
        Element('enabled', 'enabled', BOOL),
        Element('logging_enabled', 'loggingEnabled', BOOL),
    ]

    def __init__(self, id='', name='', rule_type='', rule_tag='',
                 source=None, destination=None, application=None,
                 match_translated=None, direction='', action='',
                 enabled=False, logging_enabled=False):
        """
        :param id: Rule id assigned by the server, empty on create.
        :type id: ``str``

        :param name: Rule name.
        :type name: ``str``

        :param rule_tag: Position hint, the new rule is placed above the rule
                         with this tag.
        :type rule_tag: ``str``

        :param match_translated: Match the translated addresses of NAT rules
                                 instead of the original ones. ``None`` leaves
                                 the setting out of the payload.
        :type match_translated: ``bool``

        :param action: ``accept`` or ``deny``.
        :type action: ``str``
        """
        self.id = id
        self.name = name
        self.rule_type = rule_type
        self.rule_tag = rule_tag
        self.source = source or EdgeFirewallEndpoint()
        self.destination = destination or EdgeFirewallEndpoint()
        self.application = application or EdgeFirewallApplication()
        self.match_translated = match_translated
        self.direction = direction
        self.action = action
        self.enabled = enabled
        self.logging_enabled = logging_enabled

    def __repr__(self):
        return ('<EdgeFirewallRule: id=%s, name=%s, action=%s, enabled=%s>'
                % (self.id, self.name, self.action, self.enabled))


class EdgeFirewallRules(object):
    """
    Wrapper used to create several firewall rules with one request.
    """

    tag = 'firewallRules'
    fields = [
        NestedList('rules', 'firewallRule', EdgeFirewallRule),
    ]

    def __init__(self, rules=None):
        self.rules = rules or []

    def __iter__(self):
        return iter(self.rules)

    def __len__(self):
        return len(self.rules)

    def __repr__(self):
        return '<EdgeFirewallRules: rules=%d>' % (len(self.rules))
