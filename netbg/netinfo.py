"""
This module collects the IPv4 configuration of the active network adapter.

Adapters, routes, addresses and DNS servers are read from the
``root/StandardCimv2`` namespace, the DHCP server from
``Win32_NetworkAdapterConfiguration`` in ``root/cimv2``.
"""
import logging
from collections import namedtuple

import netbg.globalvar as gv
from netbg.mask import prefix_to_mask

__all__ = [
    "NetworkInfo",
    "collect_network_info",
    "find_active_adapters",
]

LOGGER = logging.getLogger(__name__)

# MSFT_NetAdapter.InterfaceOperationalStatus
_STATUS_UP = 1
# MSFT_NetIPAddress.AddressFamily / MSFT_DNSClientServerAddress.AddressFamily
_AF_INET = 2
_DEFAULT_ROUTE = '0.0.0.0/0'

NetworkInfo = namedtuple('NetworkInfo', 'gateway ip mask dns1 dns2 dhcp')
NetworkInfo.__doc__ = """IPv4 configuration of one adapter.

Every field is a string, values the OS does not report are ``'None'``.
``ip`` and ``mask`` are ``'None'`` only when the adapter has no IPv4
address; otherwise ``mask`` is always dotted-decimal.
"""


def _value_or_none(values, index=0):
    """Return ``values[index]``, or the ``'None'`` sentinel when it is
    missing or empty.
    """
    if not values or len(values) <= index:
        return gv.g_none
    value = values[index]
    if not value:
        return gv.g_none
    return str(value)


def _default_gateway(cim, if_index):
    for route in cim.MSFT_NetRoute(InterfaceIndex=if_index,
                                   DestinationPrefix=_DEFAULT_ROUTE):
        if route.NextHop and route.NextHop != '0.0.0.0':
            return route.NextHop
    return None


def find_active_adapters(cim):
    """
    Get every adapter which is up and has an IPv4 default gateway.

    :param cim:
        A WMI connection on ``root/StandardCimv2``.
    :returns:
        A list of ``(adapter, gateway)`` in enumeration order.
    """
    active = []
    for adapter in cim.MSFT_NetAdapter():
        if adapter.InterfaceOperationalStatus != _STATUS_UP:
            continue
        gateway = _default_gateway(cim, adapter.InterfaceIndex)
        if gateway:
            active.append((adapter, gateway))
    return active


def _ipv4_address(cim, if_index):
    addresses = cim.MSFT_NetIPAddress(InterfaceIndex=if_index,
                                      AddressFamily=_AF_INET)
    if not addresses:
        return gv.g_none, gv.g_none
    address = addresses[0]
    return address.IPAddress, prefix_to_mask(int(address.PrefixLength))


def _dns_servers(cim, if_index):
    servers = []
    for entry in cim.MSFT_DNSClientServerAddress(InterfaceIndex=if_index,
                                                 AddressFamily=_AF_INET):
        servers = list(entry.ServerAddresses or [])
        break
    return _value_or_none(servers, 0), _value_or_none(servers, 1)


def _dhcp_server(cimv2, if_index):
    for config in cimv2.Win32_NetworkAdapterConfiguration(
            InterfaceIndex=if_index):
        if config.DHCPEnabled:
            return _value_or_none([config.DHCPServer])
    return gv.g_none


def collect_network_info(cim, cimv2):
    """
    Collect the network configuration of the first active adapter.

    :param cim:
        A WMI connection on ``root/StandardCimv2``.
    :param cimv2:
        A WMI connection on ``root/cimv2``.
    :returns:
        * a :class:`NetworkInfo` for the first adapter which is up and has
          a default gateway
        * ``None`` if there is no such adapter

    .. note::
        When several adapters qualify, the first one in enumeration order is
        used; the others are only logged.
    """
    active = find_active_adapters(cim)
    if not active:
        LOGGER.debug("No adapter is up with a default gateway")
        return None

    adapter, gateway = active[0]
    for other, other_gateway in active[1:]:
        LOGGER.debug("Ignore adapter %s (gateway %s), using %s"
                     % (other.Name, other_gateway, adapter.Name))

    if_index = adapter.InterfaceIndex
    ip, mask = _ipv4_address(cim, if_index)
    dns1, dns2 = _dns_servers(cim, if_index)
    dhcp = _dhcp_server(cimv2, if_index)
    info = NetworkInfo(gateway=gateway, ip=ip, mask=mask,
                       dns1=dns1, dns2=dns2, dhcp=dhcp)
    LOGGER.debug("Adapter %s: %s" % (adapter.Name, info))
    return info
