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
Checks run by callers before a record is sent in a create or update request.

The codec never validates anything, it writes whatever the record holds. The
API answers an incomplete request with an error which is hard to relate to
the field that caused it, so the obvious mistakes are caught here.
"""

from libvcd.common.types import ValidationError
from libvcd.edge.types import FirewallAction, NatAction
from libvcd.edge.firewall import EdgeFirewallRule
from libvcd.edge.loadbalancer import LbMonitor, LbPool, LbAppProfile
from libvcd.edge.loadbalancer import LbAppRule, LbVirtualServer
from libvcd.edge.nat import EdgeNatRule
from libvcd.edge.ipset import EdgeIpSet

__all__ = [
    'validate_create',
    'validate_update'
]

# Fields which must hold a non zero value in a create request
REQUIRED_FIELDS = {
    LbPool: ['name', 'algorithm'],
    LbMonitor: ['type', 'interval', 'timeout', 'max_retries'],
    LbAppProfile: ['name', 'template'],
    LbAppRule: ['name', 'script'],
    LbVirtualServer: ['name', 'ip_address', 'protocol', 'port'],
    EdgeNatRule: ['action', 'original_address', 'translated_address'],
    EdgeFirewallRule: ['action'],
    EdgeIpSet: ['name', 'ip_addresses'],
}

ALLOWED_VALUES = {
    EdgeNatRule: {'action': NatAction.ALL},
    EdgeFirewallRule: {'action': FirewallAction.ALL},
}


def validate_create(record):
    """
    Validate a record before it's sent in a create request.

    :raises: :class:`ValidationError` naming the first offending field.
    """
    name = record.__class__.__name__

    for field in REQUIRED_FIELDS.get(record.__class__, []):
        if not getattr(record, field):
            raise ValidationError('%s.%s cannot be empty' % (name, field),
                                  record=record)

    allowed = ALLOWED_VALUES.get(record.__class__, {})
    for field, values in allowed.items():
        value = getattr(record, field)
        if value not in values:
            raise ValidationError('%s.%s must be one of %s, got %r'
                                  % (name, field, ', '.join(values), value),
                                  record=record)

    return True


def validate_update(record):
    """
    Validate a record before it's sent in an update request. The id assigned
    by the server is required on top of the create checks, whole
    configuration records have no id and only get the create checks.
    """
    if hasattr(record, 'id') and not record.id:
        raise ValidationError('%s.id is required for an update'
                              % (record.__class__.__name__), record=record)

    return validate_create(record)
