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
NAT payloads of the NSX-V edge gateway API.
"""

from libvcd.edge.fields import INT, BOOL
from libvcd.edge.fields import Element, NestedList

__all__ = [
    'EdgeNatRule',
    'EdgeNatRules'
]


class EdgeNatRule(object):
    """
    A SNAT or DNAT rule managed through the proxied NSX-V API.
    """

    tag = 'natRule'
    fields = [
        Element('id', 'ruleId', omitempty=True),
        Element('rule_type', 'ruleType', omitempty=True),
        Element('rule_tag', 'ruleTag', omitempty=True),
        Element('action', 'action'),
        Element('vnic', 'vnic', INT, optional=True),
        Element('original_address', 'originalAddress'),
        Element('translated_address', 'translatedAddress'),
        Element('logging_enabled', 'loggingEnabled', BOOL),
        Element('enabled', 'enabled', BOOL),
        Element('description', 'description', omitempty=True),
        Element('protocol', 'protocol', omitempty=True),
        Element('original_port', 'originalPort', omitempty=True),
        Element('translated_port', 'translatedPort', omitempty=True),
        Element('icmp_type', 'icmpType', omitempty=True),
    ]

    def __init__(self, id='', rule_type='', rule_tag='', action='',
                 vnic=None, original_address='', translated_address='',
                 logging_enabled=False, enabled=False, description='',
                 protocol='', original_port='', translated_port='',
                 icmp_type=''):
        """
        :param action: ``snat`` or ``dnat``.
        :type action: ``str``

        :param vnic: Index of the interface the rule is applied on. ``0`` is
                     a valid interface, ``None`` leaves it out of the payload.
        :type vnic: ``int``

        :param original_port: Port or port range, e.g. ``any`` or
                              ``1000-2000``.
        :type original_port: ``str``
        """
        self.id = id
        self.rule_type = rule_type
        self.rule_tag = rule_tag
        self.action = action
        self.vnic = vnic
        self.original_address = original_address
        self.translated_address = translated_address
        self.logging_enabled = logging_enabled
        self.enabled = enabled
        self.description = description
        self.protocol = protocol
        self.original_port = original_port
        self.translated_port = translated_port
        self.icmp_type = icmp_type

    def __repr__(self):
        return ('<EdgeNatRule: id=%s, action=%s, original=%s, translated=%s>'
                % (self.id, self.action, self.original_address,
                   self.translated_address))


class EdgeNatRules(object):
    """
    Wrapper used to create several NAT rules with one request.
    """

    tag = 'natRules'
    fields = [
        NestedList('rules', 'natRule', EdgeNatRule),
    ]

    def __init__(self, rules=None):
        self.rules = rules or []

    def __iter__(self):
        return iter(self.rules)

    def __len__(self):
        return len(self.rules)

    def __repr__(self):
        return '<EdgeNatRules: rules=%d>' % (len(self.rules))
