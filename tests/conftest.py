"""Shared pytest fixtures: in-memory stand-ins for the WMI namespaces."""

import logging
from types import SimpleNamespace

import pytest


class FakeWmi(object):
    """Answer ``conn.SomeClass(Prop=value)`` queries from a dict of records.

    Keyword arguments filter on attribute equality, like a WQL where clause.
    """

    def __init__(self, classes=None):
        self.classes = classes or {}
        self.queries = []

    def __getattr__(self, name):
        if name.startswith('_') or name in ('classes', 'queries'):
            raise AttributeError(name)

        def _query(**where):
            self.queries.append((name, where))
            return [record for record in self.classes.get(name, [])
                    if all(getattr(record, key, None) == value
                           for key, value in where.items())]
        return _query


def adapter(index, name='Ethernet', status=1):
    return SimpleNamespace(InterfaceIndex=index, Name=name,
                           InterfaceOperationalStatus=status)


def route(index, next_hop, prefix='0.0.0.0/0'):
    return SimpleNamespace(InterfaceIndex=index, DestinationPrefix=prefix,
                           NextHop=next_hop)


def ip_address(index, address, prefix_length, family=2):
    return SimpleNamespace(InterfaceIndex=index, IPAddress=address,
                           PrefixLength=prefix_length, AddressFamily=family)


def dns(index, servers, family=2):
    return SimpleNamespace(InterfaceIndex=index, ServerAddresses=servers,
                           AddressFamily=family)


def adapter_config(index, dhcp_enabled=True, dhcp_server=None):
    return SimpleNamespace(InterfaceIndex=index, DHCPEnabled=dhcp_enabled,
                           DHCPServer=dhcp_server)


def operating_system(caption):
    return SimpleNamespace(Caption=caption)


@pytest.fixture
def home_network():
    """A single wired adapter on 192.168.1.0/24 with one DNS server."""
    cim = FakeWmi({
        'MSFT_NetAdapter': [adapter(7)],
        'MSFT_NetRoute': [route(7, '192.168.1.1')],
        'MSFT_NetIPAddress': [ip_address(7, '192.168.1.50', 24)],
        'MSFT_DNSClientServerAddress': [dns(7, ('8.8.8.8',))],
    })
    cimv2 = FakeWmi({
        'Win32_NetworkAdapterConfiguration': [
            adapter_config(7, True, '192.168.1.1')],
        'Win32_OperatingSystem': [
            operating_system('Microsoft Windows 11 Pro')],
    })
    return cim, cimv2


@pytest.fixture
def office_environ():
    return {
        'COMPUTERNAME': 'PC1',
        'USERNAME': 'alice',
        'USERDOMAIN': 'WORKGROUP',
    }


@pytest.fixture(autouse=True)
def _restore_logging():
    """Restore root logger state after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
