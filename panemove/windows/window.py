# Copyright (c) 2017 Christoph Landgraf. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

from panemove.coordinates import clamp_to_range
from panemove.util import deep_get, deep_put


class WindowBase(object):
    def __init__(self, dimensions):
        self._init_dimensions(dimensions)

    def _init_dimensions(self, dimensions):
        self._internal_dimensions = dimensions
        self.dimensions = self.get_content_dimensions(dimensions)

    def _update_dimensions(self, dimensions):
        self._init_dimensions(dimensions)
        return self

    def get_content_dimensions(self, dim):
        return (dim[0], dim[1], dim[2], dim[3])

    def edges(self):
        """Return the outer edges ``(x0, y0, x1, y1)``, without dividers."""
        rows, columns, y, x = self._internal_dimensions
        return (x, y, x + columns, y + rows)

    def inside_edges(self):
        rows, columns, y, x = self.dimensions
        return (x, y, x + columns, y + rows)


class MiniBufferWindow(WindowBase):
    def __init__(self, rows, columns, height=1):
        super(MiniBufferWindow, self).__init__((height, columns, rows - height, 0))
        self.active = False

    def get_content_dimensions(self, dim):
        # Reserve last column for the cursor
        return (dim[0], dim[1] - 1, dim[2], dim[3])

    def cursor(self):
        return (0, 0)

    def __str__(self):
        return ("#<minibuffer-window %s dimensions=%s>"
                % ('active' if self.active else 'inactive',
                   str(self._internal_dimensions)))


class Window(WindowBase):
    def __init__(self, dimensions, displayed_buffer):
        super(Window, self).__init__(dimensions)
        self._buffer = None
        self._state = {}
        self.set_buffer(displayed_buffer)

    def get_content_dimensions(self, dim):
        # Last row is taken by the mode line
        return (dim[0] - 1, dim[1], dim[2], dim[3])

    def _update_dimensions(self, dimensions):
        super(Window, self)._update_dimensions(dimensions)
        # Keep the cursor inside the new text area
        self.set_cursor(*self.cursor())
        return self

    def update_state(self, path, value):
        deep_put(self._state, path, value)

    def get_state(self, path):
        return deep_get(self._state, path)

    def set_buffer(self, displayed_buffer):
        if displayed_buffer == self._buffer:
            return

        self._buffer = displayed_buffer
        self._state = {'cursor': (0, 0)}

    def buffer(self):
        return self._buffer

    def set_cursor(self, col, row):
        """
        Move the cursor to ``(col, row)`` relative to the text area. The
        position is clamped to the text area of the window.
        """
        rows, columns, _, _ = self.dimensions
        self.update_state(['cursor'], (clamp_to_range(col, 0, columns - 1),
                                       clamp_to_range(row, 0, rows - 1)))

    def cursor(self):
        """Return ``(col, row)`` of the cursor relative to the text area."""
        return self.get_state(['cursor'])

    def swap_state(self, other):
        self._buffer, other._buffer = other._buffer, self._buffer
        self._state, other._state = other._state, self._state
        self.set_cursor(*self.cursor())
        other.set_cursor(*other.cursor())

    def __str__(self):
        return ("#<window \"%s\" dimensions=%s>"
                % (self._buffer, str(self._internal_dimensions)))
