"""This module converts IPv4 prefix lengths into dotted-decimal subnet masks
"""
from netbg.errcode import InvalidPrefixLength

__all__ = [
    "prefix_to_mask"
]


def prefix_to_mask(length):
    """
    Convert a CIDR prefix length into a dotted-decimal subnet mask.

    :param length:
        The prefix length, an integer in the range 0-32.
    :returns:
        The mask, e.g. ``'255.255.255.0'`` for 24.
    :raises InvalidPrefixLength:
        If `length` is not an integer in 0-32.
    """
    if isinstance(length, bool) or not isinstance(length, int):
        raise InvalidPrefixLength('Prefix length must be an integer, got %r'
                                  % (length,))
    if not 0 <= length <= 32:
        raise InvalidPrefixLength('Prefix length %d is not in the range 0-32'
                                  % length)
    bits = '1' * length + '0' * (32 - length)
    octets = [str(int(bits[i:i + 8], 2)) for i in range(0, 32, 8)]
    return '.'.join(octets)
