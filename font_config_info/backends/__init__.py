"""Backends for the subsystems the report queries.

Each backend opens one external subsystem:
- GTK settings, widget styles and GSettings (PyGObject)
- the X11 display and its resource database (python-xlib)
- XSETTINGS through the dump_xsettings helper
- Fontconfig through fc-match
"""
