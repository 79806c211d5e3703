# Copyright (c) 2017 Christoph Landgraf. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

"""
The interface between the directional commands and the layout engine.

The functions in panemove.locate and the commands in panemove.driver
never inspect panes or canvases themselves. Whatever the layout engine
uses to represent them is passed back to the methods of LayoutEngine,
which must be implemented by the host. panemove.windows.WindowSet is
an implementation for split-tree layouts.

Edges are tuples ``(x0, y0, x1, y1)`` where ``x1`` and ``y1`` are
exclusive. The outer edges of a pane include its mode line and its
right divider, if it has one.
"""

import enum


class Direction(enum.Enum):
    LEFT = 'left'
    UP = 'up'
    RIGHT = 'right'
    DOWN = 'down'

    # Only valid for displaying content
    SAME_WINDOW = 'same-window'

    def __str__(self):
        return self.value

    @property
    def is_horizontal(self):
        return self in (Direction.LEFT, Direction.RIGHT)


DIRECTIONS = (Direction.LEFT, Direction.UP, Direction.RIGHT, Direction.DOWN)


class ReferenceMode(enum.Enum):
    POINT = 'point'
    LEADING_CORNER = 'leading-corner'
    TRAILING_CORNER = 'trailing-corner'

    @classmethod
    def from_argument(cls, argument):
        """
        Derive the reference mode from a signed command argument.

        Zero refers to the cursor, a positive argument to the top-left
        and a negative argument to the bottom-right corner of a pane.
        """
        if not argument:
            return cls.POINT
        return cls.LEADING_CORNER if argument > 0 else cls.TRAILING_CORNER


class LayoutEngine(object):
    def pane_at(self, canvas, x, y):
        """Return the pane covering ``(x, y)`` or None."""
        raise NotImplementedError()

    def canvas_of(self, pane):
        raise NotImplementedError()

    def bounds_of(self, canvas):
        """Return ``(rows, columns)`` of the canvas, reserved region included."""
        raise NotImplementedError()

    def top_left_pane(self, canvas):
        raise NotImplementedError()

    def reserved_region(self, canvas):
        """Return the reserved region of canvas or None if there is none."""
        raise NotImplementedError()

    def edges_of(self, pane):
        raise NotImplementedError()

    def inside_edges_of(self, pane):
        raise NotImplementedError()

    def is_reserved_region(self, pane):
        raise NotImplementedError()

    def is_reserved_region_active(self, region):
        raise NotImplementedError()

    def cursor_offset_within(self, pane):
        """Return the cursor position ``(col, row)`` relative to the inside edges."""
        raise NotImplementedError()

    def split_pane(self, pane, direction):
        raise NotImplementedError()

    def destroy_pane(self, pane):
        raise NotImplementedError()

    def select_pane(self, pane):
        raise NotImplementedError()

    def selected_pane(self):
        raise NotImplementedError()

    def content_of(self, pane):
        raise NotImplementedError()

    def show_content(self, pane, content):
        raise NotImplementedError()

    def kill_content(self, content):
        raise NotImplementedError()

    def swap_states(self, pane, other_pane):
        raise NotImplementedError()

    def is_live_pane(self, pane):
        """Return True if pane has not been destroyed."""
        raise NotImplementedError()
