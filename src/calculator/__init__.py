"""
Command-line layer: argument dispatch, interactive prompt, batch test mode.

This package is the outermost layer. It may import from ``core``, but
``core`` never imports from ``calculator``.
"""
