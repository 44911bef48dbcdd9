"""
Description :   Write the network and system information of this machine onto
                a bitmap and set it as the desktop wallpaper. Meant to run
                once per logon, e.g. from a scheduled task.

Flow:
    collect network -> (abort if no active network) -> collect system
    -> compose text -> render bitmap -> set wallpaper
"""
import sys
import logging
import logging.handlers
import argparse

import netbg.cim as cim
import netbg.globalvar as gv
import netbg.errcode as errcode
from netbg.config import load_settings
from netbg.netinfo import collect_network_info
from netbg.sysinfo import collect_system_info
from netbg.compose import compose_text
from netbg.render import render_text_image
from netbg.wallpaper import set_wallpaper

__all__ = [
    "initialize_command_line",
    "init_logger",
    "run",
    "main",
]

LOGGER = logging.getLogger(__name__)


def _positive_int(value):
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError('%r is not an integer' % value)
    if number < 0:
        raise argparse.ArgumentTypeError('%r is negative' % value)
    return number


def initialize_command_line(argv):
    '''
    Parse the arguments that user provided
    '''
    parser = argparse.ArgumentParser(
        prog='netinfo-wallpaper',
        description='''Render the IP configuration, hostname, user, domain and OS of this machine
onto the desktop wallpaper.''',
        formatter_class=argparse.RawDescriptionHelpFormatter)
    optional_opts = parser.add_argument_group(
        title='OPTIONAL', description='These parameters are optional')
    optional_opts.add_argument('--width', type=_positive_int,
                               help='canvas width in pixels (default %d)'
                               % gv.g_canvas_width)
    optional_opts.add_argument('--height', type=_positive_int,
                               help='canvas height in pixels (default %d)'
                               % gv.g_canvas_height)
    optional_opts.add_argument('--margin-right', type=_positive_int,
                               help='right margin of the text block '
                               '(default %d)' % gv.g_margin_right)
    optional_opts.add_argument('--margin-bottom', type=_positive_int,
                               help='bottom margin of the text block '
                               '(default %d)' % gv.g_margin_bottom)
    optional_opts.add_argument('-o', '--output',
                               help='bitmap path (default %%TEMP%%\\%s)'
                               % gv.g_output_file)
    optional_opts.add_argument('--no-apply', action='store_true',
                               help='only write the bitmap, keep the '
                               'current wallpaper')
    optional_opts.add_argument('--log-file',
                               help='also log into this file, rotated '
                               'every %d days' % gv.g_log_rotate_interval)
    optional_opts.add_argument('-v', '--verbose', action='store_true',
                               help='print debug messages')
    return parser.parse_args(argv)


def init_logger(log_file=None, verbose=False):
    '''
    Initialize the logger setting
    '''
    logger = logging.getLogger()
    logging.raiseExceptions = False
    logger.setLevel(logging.DEBUG)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.DEBUG if verbose else logging.INFO)
    console_handler.setFormatter(logging.Formatter('%(message)s'))
    logger.addHandler(console_handler)

    if log_file:
        # Rotate the log file every three days and keep 10 files at most
        log_file_handler = logging.handlers.TimedRotatingFileHandler(
            log_file, when='D', interval=gv.g_log_rotate_interval,
            backupCount=gv.g_log_backup_count)
        log_file_handler.setLevel(logging.DEBUG)
        log_file_handler.setFormatter(logging.Formatter(gv.g_log_format))
        logger.addHandler(log_file_handler)
    return logger


def _check_layout(settings):
    if settings.margin_right >= settings.width:
        return 'margin-right %d does not fit into width %d' % (
            settings.margin_right, settings.width)
    if settings.margin_bottom >= settings.height:
        return 'margin-bottom %d does not fit into height %d' % (
            settings.margin_bottom, settings.height)
    return None


def run(settings, cim_conn=None, cimv2_conn=None, api=None):
    """
    Execute one pass of the pipeline.

    :param settings:
        The :class:`netbg.config.Settings` of this run.
    :param cim_conn:
        WMI connection on ``root/StandardCimv2``, opened when omitted.
    :param cimv2_conn:
        WMI connection on ``root/cimv2``, opened when omitted.
    :param api:
        The desktop calls passed to :func:`netbg.wallpaper.set_wallpaper`.
    :returns:
        An error code from :mod:`netbg.errcode`.
    """
    problem = _check_layout(settings)
    if problem:
        LOGGER.error(problem)
        return errcode.ER_INVALID_PARAMETER

    if cim_conn is None:
        cim_conn = cim.connect(cim.STANDARD_CIMV2)
    if cimv2_conn is None:
        cimv2_conn = cim.connect(cim.CIMV2)

    network = collect_network_info(cim_conn, cimv2_conn)
    if network is None:
        LOGGER.info("no active network found")
        LOGGER.debug(errcode.strerror(errcode.ER_NET_NO_ACTIVE_NETWORK))
        return errcode.ER_SUCCESS

    system = collect_system_info(settings.environ, cimv2_conn)
    text = compose_text(network, system)
    path = render_text_image(text, settings.output,
                             width=settings.width, height=settings.height,
                             margin_right=settings.margin_right,
                             margin_bottom=settings.margin_bottom)
    if not settings.apply:
        LOGGER.info("wallpaper written: %s" % path)
        return errcode.ER_SUCCESS

    result = set_wallpaper(path, api=api)
    if not result.success:
        LOGGER.debug(errcode.strerror(errcode.ER_WALLPAPER_FALLBACK_FAILED))
    LOGGER.info("wallpaper set: %s" % path)
    return errcode.ER_SUCCESS


def main(argv=None):
    options = initialize_command_line(
        sys.argv[1:] if argv is None else argv)
    init_logger(options.log_file, options.verbose)
    LOGGER.debug(str(options))
    return run(load_settings(options))


if __name__ == '__main__':
    sys.exit(main())
