'''
This module show all the error code used by netbg.
'''
import os

__all__ = [
    'strerror',
    'NetbgError',
    'InvalidPrefixLength',
]

# dict providing a mapping from a numberic error code to an error string name
errcode = {}

# dict providing a mapping from a numberic error code to an error message
errstr = {}


def strerror(errno):
    """To translate a numeric error code to an error message"""
    s = errstr.get(errno, None)
    if s is None:
        s = os.strerror(errno)
    return s


def _err(errno, name, message):
    """add an error code.

    Args:
          errno (int): the numeric error code
          name (str): the string name for this error
          message (str): the detailed error message for this error

    """
    errcode[name] = errno
    globals()[name] = errno
    __all__.append(name)
    errstr[errno] = message

#
# common errors start with ER_, module specific ones with ER_[MODULE_NAME]_
#
# 0-99 common error
_err(0, 'ER_SUCCESS', 'Function or command execute success')
_err(2, 'ER_EXCEPTION', 'Exception happened during calling a command or \
function')
_err(4, 'ER_INVALID_PARAMETER', 'Invalid parameters')

# 100-199 collector error
_err(100, 'ER_NET_INVALID_PREFIX', 'The IPv4 prefix length is not in the \
range 0-32')
_err(101, 'ER_NET_NO_ACTIVE_NETWORK', 'No network adapter is up with a \
default gateway')

# 200-299 wallpaper error
_err(200, 'ER_WALLPAPER_API_FAILED', 'SystemParametersInfo refused to set \
the desktop wallpaper')
_err(201, 'ER_WALLPAPER_FALLBACK_FAILED', 'The registry fallback failed to \
set the desktop wallpaper')


class NetbgError(Exception):
    """Base exception carrying one of the error codes above."""

    errno = errcode['ER_EXCEPTION']

    def __init__(self, message=None, errno=None):
        if errno is not None:
            self.errno = errno
        if message is None:
            message = strerror(self.errno)
        Exception.__init__(self, message)


class InvalidPrefixLength(NetbgError, ValueError):
    """Raised when a prefix length can not be turned into a subnet mask."""

    errno = errcode['ER_NET_INVALID_PREFIX']
