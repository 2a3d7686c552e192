"""Rendering subpackage.

Turns immutable :class:`~visiprint.grid.Grid` snapshots into something a
human can compare at a glance:

* :mod:`visiprint.renderer.image` maps cell values to colours (a NumPy pixel
  buffer, plus Pillow adapters for images and caller supplied surfaces).
* :mod:`visiprint.renderer.text` maps cell values to characters.

Renderers never mutate the grid or the palette they are given, so any number
of them may read the same grid concurrently.
"""
