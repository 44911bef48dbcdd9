"""This module collects the identity of the machine and of the logged on user
"""
import re
import logging
from collections import namedtuple

import netbg.globalvar as gv

__all__ = [
    "SystemInfo",
    "collect_system_info",
    "strip_vendor",
]

LOGGER = logging.getLogger(__name__)

_VENDOR_PATTERN = re.compile(r'\s*microsoft\s*', re.IGNORECASE)

SystemInfo = namedtuple('SystemInfo', 'hostname user domain os')


def strip_vendor(caption):
    """Remove the vendor name from an OS caption,
    e.g. ``'Microsoft Windows 11 Pro'`` becomes ``'Windows 11 Pro'``.
    """
    return _VENDOR_PATTERN.sub('', caption or '').strip()


def _os_caption(cimv2):
    for os_info in cimv2.Win32_OperatingSystem():
        return os_info.Caption
    return ''


def collect_system_info(environ, cimv2):
    """
    Collect hostname, user, domain and OS name.

    :param environ:
        The process environment, read once at startup.
    :param cimv2:
        A WMI connection on ``root/cimv2``.
    :returns:
        A :class:`SystemInfo`.
    """
    os_name = strip_vendor(_os_caption(cimv2)) or gv.g_none
    info = SystemInfo(hostname=environ.get('COMPUTERNAME') or gv.g_none,
                      user=environ.get('USERNAME') or gv.g_none,
                      domain=environ.get('USERDOMAIN') or gv.g_none,
                      os=os_name)
    LOGGER.debug("System: %s" % (info,))
    return info
