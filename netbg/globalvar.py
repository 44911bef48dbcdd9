"""
Default values shared by all netbg modules.

**Naming Notations:**
    * all global variables start with **g_**
    * File name: ends with **_file**.
    * Directory: ends with **_dir**.
    * Colors are ``(R, G, B)`` tuples.
"""

#--------------- Canvas configuration -----------------------

g_canvas_width = 1920
"""
Width of the generated wallpaper in pixels.
"""

g_canvas_height = 1080
"""
Height of the generated wallpaper in pixels.
"""

g_margin_right = 560
"""
Distance between the right edge of the text block and the right edge of
the canvas.
"""

g_margin_bottom = 260
"""
Distance between the bottom edge of the text block and the bottom edge of
the canvas.
"""

g_background_color = (200, 200, 200)
"""
Flat fill of the canvas.
"""

g_text_color = (0, 0, 0)
"""
Fill of the rendered text.
"""

#--------------- Font configuration -----------------------

g_font_faces = [
    'consola.ttf',
    'cour.ttf',
    'DejaVuSansMono.ttf',
    'LiberationMono-Regular.ttf',
]
"""
Fixed-width TrueType faces, tried in order. Bare names are resolved by
FreeType against the system font directories.
"""

g_font_dirs = [
    r'C:\Windows\Fonts',
    '/usr/share/fonts/truetype/dejavu',
    '/usr/share/fonts/truetype/liberation',
]
"""
Extra directories searched for :const:`g_font_faces`.
"""

g_font_size = 16
"""
Point size of the text.
"""

#--------------- Text configuration -----------------------

g_label_width = 10
"""
Labels are padded to this width before the ``": "`` separator.
"""

g_dns_hints = ('(bevorzugt)', '(alternativ)')
"""
Static hints appended to the preferred and the alternate DNS server lines.
"""

g_none = 'None'
"""
Sentinel shown for every value the OS does not report.
"""

#--------------- Output configuration -----------------------

g_output_file = 'netinfo_wallpaper.bmp'
"""
Name of the bitmap written into the temp directory, overwritten each run.
"""

g_settle_delay = 1.0
"""
Seconds to wait after writing the registry before asking the desktop to
reload its per-user parameters.
"""

#--------------- Logging configuration -----------------------

g_log_format = '%(asctime)s %(name)s %(levelname)s: %(message)s'
"""
Format of the rotating log file, only used when a log file is requested.
"""

g_log_rotate_interval = 3
"""
Rotate the log file every three days.
"""

g_log_backup_count = 10
"""
Keep 10 rotated log files at most.
"""
