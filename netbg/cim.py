"""This module opens the WMI namespaces the collectors query
"""
import logging

LOGGER = logging.getLogger(__name__)

__all__ = [
    "STANDARD_CIMV2", "CIMV2",
    "connect"
]

STANDARD_CIMV2 = 'root/StandardCimv2'
"""
Namespace of the MSFT_Net* classes (adapters, routes, addresses, DNS).
"""

CIMV2 = 'root/cimv2'
"""
Namespace of the Win32_* classes (OS caption, DHCP configuration).
"""


def connect(namespace=CIMV2):
    """
    Open a WMI connection on the local machine.

    The `wmi` package is only importable on Windows, so it is imported when
    a connection is actually requested.
    """
    import wmi
    LOGGER.debug("Connect to WMI namespace %s" % namespace)
    return wmi.WMI(namespace=namespace)
