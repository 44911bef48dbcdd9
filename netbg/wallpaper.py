"""
This module applies a bitmap as the desktop wallpaper.

The wallpaper is set with ``SystemParametersInfo``. If Windows refuses it,
the path is written to ``HKCU\\Control Panel\\Desktop`` and the desktop is
asked to reload its per-user parameters.
"""
import time
import logging
import subprocess
from collections import namedtuple

import netbg.globalvar as gv
import netbg.errcode as errcode
from netbg.errcode import NetbgError

__all__ = [
    "WallpaperResult",
    "Win32DesktopApi",
    "set_wallpaper",
]

LOGGER = logging.getLogger(__name__)

_DESKTOP_KEY = 'Control Panel\\Desktop'
_RELOAD_COMMAND = ['RUNDLL32.EXE', 'user32.dll,UpdatePerUserSystemParameters',
                   '1,', 'True']

WallpaperResult = namedtuple('WallpaperResult', 'success fallback_reason')
WallpaperResult.__doc__ = """Outcome of :func:`set_wallpaper`.

`fallback_reason` is the reason the primary call failed, ``None`` when the
fallback was not needed.
"""


class Win32DesktopApi(object):
    """
    The Windows calls used to change the wallpaper.

    pywin32 is imported on first use so this module can be loaded on any
    platform. Every failure is raised as :class:`NetbgError`.
    """

    def set_desktop_wallpaper(self, path):
        import pywintypes
        import win32con
        import win32gui
        try:
            win32gui.SystemParametersInfo(
                win32con.SPI_SETDESKWALLPAPER, path,
                win32con.SPIF_UPDATEINIFILE | win32con.SPIF_SENDWININICHANGE)
        except pywintypes.error as err:
            raise NetbgError('SystemParametersInfo failed: %s' % err.strerror,
                             errcode.ER_WALLPAPER_API_FAILED)

    def write_wallpaper_setting(self, path):
        import pywintypes
        import win32api
        import win32con
        try:
            reg_key = win32api.RegOpenKeyEx(win32con.HKEY_CURRENT_USER,
                                            _DESKTOP_KEY, 0,
                                            win32con.KEY_SET_VALUE)
            try:
                win32api.RegSetValueEx(reg_key, 'Wallpaper', 0,
                                       win32con.REG_SZ, path)
            finally:
                win32api.RegCloseKey(reg_key)
        except pywintypes.error as err:
            raise NetbgError('Can not write %s: %s'
                             % (_DESKTOP_KEY, err.strerror),
                             errcode.ER_WALLPAPER_FALLBACK_FAILED)

    def reload_user_parameters(self):
        try:
            ret = subprocess.call(_RELOAD_COMMAND)
        except OSError as err:
            raise NetbgError('Can not run %s: %s' % (_RELOAD_COMMAND[0], err),
                             errcode.ER_WALLPAPER_FALLBACK_FAILED)
        if ret != 0:
            raise NetbgError('%s returned %d' % (' '.join(_RELOAD_COMMAND),
                                                 ret),
                             errcode.ER_WALLPAPER_FALLBACK_FAILED)


def _apply_fallback(api, path, settle, sleep):
    api.write_wallpaper_setting(path)
    # let the registry write settle before the desktop reads it back
    sleep(settle)
    api.reload_user_parameters()


def set_wallpaper(path, api=None, settle=gv.g_settle_delay, sleep=None):
    """
    Set `path` as the desktop wallpaper.

    :param path:
        Absolute path of an already written image.
    :param api:
        The desktop calls, :class:`Win32DesktopApi` by default.
    :returns:
        A :class:`WallpaperResult`. A failing fallback is not raised, it is
        only reported through ``success=False``.
    """
    api = api or Win32DesktopApi()
    sleep = sleep or time.sleep
    try:
        api.set_desktop_wallpaper(path)
        return WallpaperResult(success=True, fallback_reason=None)
    except NetbgError as err:
        reason = str(err)

    LOGGER.info("wallpaper API failed, trying alternate method")
    LOGGER.debug(reason)
    try:
        _apply_fallback(api, path, settle, sleep)
    except NetbgError as err:
        LOGGER.debug("Fallback failed: %s" % err)
        return WallpaperResult(success=False, fallback_reason=reason)
    return WallpaperResult(success=True, fallback_reason=reason)
