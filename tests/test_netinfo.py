"""Tests for the network information collector."""

import pytest

from conftest import (FakeWmi, adapter, route, ip_address, dns,
                      adapter_config)
from netbg.errcode import InvalidPrefixLength
from netbg.netinfo import (NetworkInfo, collect_network_info,
                           find_active_adapters)


def _network(adapters, routes=(), addresses=(), dns_entries=(), configs=()):
    cim = FakeWmi({
        'MSFT_NetAdapter': list(adapters),
        'MSFT_NetRoute': list(routes),
        'MSFT_NetIPAddress': list(addresses),
        'MSFT_DNSClientServerAddress': list(dns_entries),
    })
    cimv2 = FakeWmi({
        'Win32_NetworkAdapterConfiguration': list(configs),
    })
    return cim, cimv2


class TestCollectNetworkInfo:
    def test_home_network(self, home_network):
        cim, cimv2 = home_network
        assert collect_network_info(cim, cimv2) == NetworkInfo(
            gateway='192.168.1.1', ip='192.168.1.50', mask='255.255.255.0',
            dns1='8.8.8.8', dns2='None', dhcp='192.168.1.1')

    def test_no_adapters(self):
        assert collect_network_info(*_network([])) is None

    def test_adapter_down_is_ignored(self):
        cim, cimv2 = _network([adapter(3, status=2)],
                              routes=[route(3, '10.0.0.1')])
        assert collect_network_info(cim, cimv2) is None

    def test_adapter_without_gateway_is_ignored(self):
        cim, cimv2 = _network([adapter(3)],
                              routes=[route(3, '0.0.0.0'),
                                      route(3, '10.0.0.5', '10.0.0.0/8')])
        assert collect_network_info(cim, cimv2) is None

    def test_first_qualifying_adapter_wins(self):
        cim, cimv2 = _network(
            [adapter(1, 'Wi-Fi', status=2), adapter(2, 'VPN'),
             adapter(3, 'Ethernet')],
            routes=[route(1, '172.16.0.1'), route(2, '10.8.0.1'),
                    route(3, '192.168.0.1')],
            addresses=[ip_address(2, '10.8.0.6', 30),
                       ip_address(3, '192.168.0.20', 24)])
        info = collect_network_info(cim, cimv2)
        assert info.gateway == '10.8.0.1'
        assert info.ip == '10.8.0.6'
        assert info.mask == '255.255.255.252'

    def test_queries_are_scoped_to_the_selected_interface(self):
        cim, cimv2 = _network(
            [adapter(4)], routes=[route(4, '10.1.1.1')],
            addresses=[ip_address(9, '10.9.9.9', 8),
                       ip_address(4, 'fe80::1', 64, family=23),
                       ip_address(4, '10.1.1.7', 16)],
            dns_entries=[dns(9, ('9.9.9.9',)), dns(4, ('10.1.1.2',))])
        info = collect_network_info(cim, cimv2)
        assert info.ip == '10.1.1.7'
        assert info.mask == '255.255.0.0'
        assert info.dns1 == '10.1.1.2'
        assert ('MSFT_NetIPAddress',
                {'InterfaceIndex': 4, 'AddressFamily': 2}) in cim.queries

    @pytest.mark.parametrize("servers, expected", [
        (None, ('None', 'None')),
        ((), ('None', 'None')),
        (('',), ('None', 'None')),
        ((None, '1.1.1.1'), ('None', '1.1.1.1')),
        (('8.8.8.8', '8.8.4.4'), ('8.8.8.8', '8.8.4.4')),
        (('8.8.8.8', '8.8.4.4', '1.1.1.1'), ('8.8.8.8', '8.8.4.4')),
    ])
    def test_dns_sentinels(self, servers, expected):
        cim, cimv2 = _network([adapter(1)], routes=[route(1, '10.0.0.1')],
                              addresses=[ip_address(1, '10.0.0.2', 24)],
                              dns_entries=[dns(1, servers)])
        info = collect_network_info(cim, cimv2)
        assert (info.dns1, info.dns2) == expected

    def test_dns_missing_entirely(self):
        cim, cimv2 = _network([adapter(1)], routes=[route(1, '10.0.0.1')],
                              addresses=[ip_address(1, '10.0.0.2', 24)])
        info = collect_network_info(cim, cimv2)
        assert (info.dns1, info.dns2) == ('None', 'None')

    @pytest.mark.parametrize("configs", [
        [],
        [adapter_config(1, dhcp_enabled=False, dhcp_server='10.0.0.1')],
        [adapter_config(1, dhcp_enabled=True, dhcp_server=None)],
        [adapter_config(1, dhcp_enabled=True, dhcp_server='')],
    ])
    def test_dhcp_sentinel(self, configs):
        cim, cimv2 = _network([adapter(1)], routes=[route(1, '10.0.0.1')],
                              addresses=[ip_address(1, '10.0.0.2', 24)],
                              configs=configs)
        assert collect_network_info(cim, cimv2).dhcp == 'None'

    def test_no_field_is_empty_or_null(self):
        cim, cimv2 = _network([adapter(1)], routes=[route(1, '10.0.0.1')],
                              addresses=[ip_address(1, '10.0.0.2', 0)])
        info = collect_network_info(cim, cimv2)
        assert info.mask == '0.0.0.0'
        for value in info:
            assert isinstance(value, str) and value

    def test_adapter_without_ipv4_address(self):
        cim, cimv2 = _network([adapter(1)], routes=[route(1, '10.0.0.1')],
                              addresses=[ip_address(1, 'fe80::1', 64,
                                                    family=23)])
        info = collect_network_info(cim, cimv2)
        assert info.gateway == '10.0.0.1'
        assert (info.ip, info.mask) == ('None', 'None')

    def test_invalid_prefix_propagates(self):
        cim, cimv2 = _network([adapter(1)], routes=[route(1, '10.0.0.1')],
                              addresses=[ip_address(1, '10.0.0.2', 40)])
        with pytest.raises(InvalidPrefixLength):
            collect_network_info(cim, cimv2)

    def test_query_failure_propagates(self):
        class BrokenWmi(object):
            def MSFT_NetAdapter(self):
                raise RuntimeError('RPC server is unavailable')

        with pytest.raises(RuntimeError):
            collect_network_info(BrokenWmi(), FakeWmi())


class TestFindActiveAdapters:
    def test_lists_every_qualifying_adapter_in_order(self):
        cim, _ = _network([adapter(5, 'A'), adapter(6, 'B'), adapter(7, 'C')],
                          routes=[route(5, '10.0.5.1'), route(7, '10.0.7.1')])
        active = find_active_adapters(cim)
        assert [(a.Name, gw) for a, gw in active] == [('A', '10.0.5.1'),
                                                      ('C', '10.0.7.1')]
