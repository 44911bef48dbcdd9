"""
netbg writes the network configuration of this machine onto the desktop
wallpaper.

Usually, scripts call the pipeline as follows:
    from netbg.main import main
"""

__version__ = '1.0.0'
