"""
This module builds the run configuration.

Everything the run needs from the environment (identity variables, temp
directory) and from the command line is read once here and passed down as
a :class:`Settings` record.
"""
import os
import tempfile
from collections import namedtuple
from types import MappingProxyType

import netbg.globalvar as gv

__all__ = [
    "Settings",
    "get_temp_dir",
    "load_settings",
]

Settings = namedtuple('Settings', [
    'output',
    'width', 'height',
    'margin_right', 'margin_bottom',
    'apply',
    'environ',
])


def get_temp_dir(environ):
    """Return the user's temp directory: ``TEMP``, ``TMP``, or the platform
    default when neither is set.
    """
    for name in ('TEMP', 'TMP'):
        temp_dir = environ.get(name)
        if temp_dir:
            return temp_dir
    return tempfile.gettempdir()


def load_settings(options=None, environ=None):
    """
    Create the :class:`Settings` of one run.

    :param options:
        The parsed command line, any attribute left to ``None`` takes the
        default from :mod:`netbg.globalvar`.
    :param environ:
        The process environment, :data:`os.environ` by default. A read-only
        copy is kept so later changes do not leak into the run.
    """
    environ = MappingProxyType(
        dict(os.environ if environ is None else environ))

    def _opt(name, default):
        value = getattr(options, name, None)
        return default if value is None else value

    output = _opt('output', None)
    if not output:
        output = os.path.join(get_temp_dir(environ), gv.g_output_file)
    return Settings(output=os.path.abspath(output),
                    width=_opt('width', gv.g_canvas_width),
                    height=_opt('height', gv.g_canvas_height),
                    margin_right=_opt('margin_right', gv.g_margin_right),
                    margin_bottom=_opt('margin_bottom', gv.g_margin_bottom),
                    apply=not _opt('no_apply', False),
                    environ=environ)
