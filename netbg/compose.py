"""This module formats the collected information into the wallpaper text
"""
import netbg.globalvar as gv

__all__ = [
    "compose_lines", "compose_text"
]


def compose_lines(network, system, hints=gv.g_dns_hints,
                  label_width=gv.g_label_width):
    """
    Build the 10 labeled lines shown on the wallpaper.

    The order is fixed: Gateway, IP, Mask, DNS 1, DNS 2, DHCP, Hostname,
    User, Domain, OS. The two DNS lines carry a static hint.
    """
    preferred, alternate = hints
    fields = [
        ('Gateway', network.gateway),
        ('IP', network.ip),
        ('Mask', network.mask),
        ('DNS 1', '%s   %s' % (network.dns1, preferred)),
        ('DNS 2', '%s   %s' % (network.dns2, alternate)),
        ('DHCP', network.dhcp),
        ('Hostname', system.hostname),
        ('User', system.user),
        ('Domain', system.domain),
        ('OS', system.os),
    ]
    return ['%s: %s' % (label.ljust(label_width), value)
            for label, value in fields]


def compose_text(network, system, hints=gv.g_dns_hints,
                 label_width=gv.g_label_width):
    """Join :func:`compose_lines` into one multi-line string."""
    return '\n'.join(compose_lines(network, system, hints, label_width))
