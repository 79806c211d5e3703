# Copyright (c) 2017 Christoph Landgraf. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

import math

from panemove.errors import LayoutError
from panemove.layout import Direction, LayoutEngine

from panemove.windows.window import MiniBufferWindow, Window

MIN_WINDOW_HEIGHT = 4
MIN_WINDOW_WIDTH  = 20

SPLIT_TYPES = {
    Direction.LEFT:  ('rsplit', True),
    Direction.RIGHT: ('rsplit', False),
    Direction.UP:    ('bsplit', True),
    Direction.DOWN:  ('bsplit', False),
}


class WindowSet(LayoutEngine):
    """
    A set of windows tiling one screen, with a minibuffer window in its
    last row.

    Dimensions are tuples ``(rows, columns, y, x)``. Windows created
    by a horizontal split are separated by a one column divider, which
    is considered part of the left window.
    """

    def __init__(self, rows, columns, initial_buffer, minibuffer_height=1,
                 default_buffer='*scratch*'):
        self._rows = rows
        self._columns = columns
        self._minibuffer_height = minibuffer_height
        self._default_buffer = default_buffer
        self.buffers = [initial_buffer]
        self._windows = {}
        self._root = self._init_root(initial_buffer)
        self._minibuffer = self._init_minibuffer()
        self._minibuffer_origin = None
        self.select_window(self._root['content'])

    def _root_dimensions(self):
        return (self._rows - self._minibuffer_height, self._columns, 0, 0)

    def _init_root(self, initial_buffer):
        dim = self._root_dimensions()
        w = Window(dim, initial_buffer)
        self._windows[id(w)] = {
            'wm_type':    'window',
            'dimensions': dim,
            'content':    w,
            'parent':     None
        }
        return self._windows[id(w)]

    def _init_minibuffer(self):
        w = MiniBufferWindow(self._rows, self._columns, self._minibuffer_height)
        self._windows[id(w)] = {
            'wm_type':    'minibuffer',
            'dimensions': w._internal_dimensions,
            'content':    w,
            'parent':     None
        }
        return self._windows[id(w)]

    def replace_buffer(self, old_buffer_object, new_buffer_object):
        for w in self.windows():
            if w.buffer() == old_buffer_object:
                w.set_buffer(new_buffer_object)

    def _iterate_windows(self):
        win_stack = [self._root]
        while win_stack:
            w = win_stack.pop(0)
            if w['wm_type'] == 'window':
                yield w
            else:
                win_stack[0:0] = w['content'] # extend at front

    def windows(self):
        """Return all windows except the minibuffer window, top-left first."""
        return [w['content'] for w in self._iterate_windows()]

    @property
    def minibuffer_window(self):
        return self._minibuffer['content']

    def select_window(self, window):
        """Return window or None if not part of this WindowSet."""
        _window = self._windows.get(id(window))
        if _window is None:
            return None
        if _window is self._minibuffer and not window.active:
            raise LayoutError('Minibuffer is inactive')
        self._selected_window = _window
        return window

    def selected_window(self):
        return self._selected_window['content']

    def activate_minibuffer(self):
        self._minibuffer_origin = self.selected_window()
        self._minibuffer['content'].active = True
        self.select_window(self._minibuffer['content'])

    def deactivate_minibuffer(self):
        self._minibuffer['content'].active = False
        if self._selected_window is self._minibuffer:
            origin = self._minibuffer_origin
            self._selected_window = self._windows.get(id(origin), self._first_leaf(self._root))
        self._minibuffer_origin = None

    # Dimensions

    def _get_vertical_dimensions(self, parent_dimension, first_size):
        return (
            (first_size,
             parent_dimension[1],
             parent_dimension[2],
             parent_dimension[3]),
            (parent_dimension[0] - first_size,
             parent_dimension[1],
             parent_dimension[2] + first_size,
             parent_dimension[3])
        )

    def _get_vertical_dimensions_by_ratio(self, parent_dimension, ratio=.5):
        return self._get_vertical_dimensions(parent_dimension,
                                             int(math.ceil(parent_dimension[0] * ratio)))

    def _get_horizontal_dimensions(self, parent_dimension, first_size):
        return (
            (parent_dimension[0],
             first_size,
             parent_dimension[2],
             parent_dimension[3]),
            (parent_dimension[0],
             parent_dimension[1] - first_size - 1,
             parent_dimension[2],
             parent_dimension[3] + first_size + 1)
        )

    def _get_horizontal_dimensions_by_ratio(self, parent_dimension, ratio=.5):
        return self._get_horizontal_dimensions(parent_dimension,
                                               int(math.floor(parent_dimension[1] * ratio)))

    def _get_dimensions(self, split_type, parent_dimension, ratio=.5):
        return (self._get_vertical_dimensions_by_ratio
                if split_type == 'bsplit' else
                self._get_horizontal_dimensions_by_ratio)(parent_dimension, ratio)

    def _check_dimension(self, d):
        return d[0] < MIN_WINDOW_HEIGHT or d[1] < MIN_WINDOW_WIDTH

    def _resize_window_tree(self, window):
        if window['wm_type'] == 'window':
            window['content']._update_dimensions(window['dimensions'])
        else:
            d1, d2 = self._get_dimensions(window['wm_type'], window['dimensions'])
            window['content'][0]['dimensions'] = d1
            self._resize_window_tree(window['content'][0])
            window['content'][1]['dimensions'] = d2
            self._resize_window_tree(window['content'][1])

    def _first_leaf(self, window):
        while window['wm_type'] != 'window':
            window = window['content'][0]
        return window

    def _leaf(self, window):
        _window = self._windows.get(id(window))
        if _window is None:
            raise LayoutError('Window %s is not part of this window set.' % window)
        return _window

    # Splitting and deleting

    def _split_window(self, split_type, window, new_first=False):
        _window = self._leaf(window)
        if _window is self._minibuffer:
            raise LayoutError('Can not split minibuffer window.')

        d1, d2 = self._get_dimensions(split_type, _window['dimensions'])
        if self._check_dimension(d1) or self._check_dimension(d2):
            raise LayoutError('Can not split. Dimensions too small.')

        old_dim, new_dim = (d2, d1) if new_first else (d1, d2)
        new_win = Window(new_dim, window.buffer())
        new_win.set_cursor(*window.cursor())
        w1 = {
            'wm_type':    'window',
            'dimensions': old_dim,
            'content':    window._update_dimensions(old_dim),
            'parent':     _window
        }
        w2 = {
            'wm_type':    'window',
            'dimensions': new_dim,
            'content':    new_win,
            'parent':     _window
        }
        self._windows[id(window)] = w1
        self._windows[id(new_win)] = w2

        _window['wm_type'] = split_type
        _window['content'] = [w2, w1] if new_first else [w1, w2]
        if self._selected_window is _window:
            self._selected_window = w1
        return new_win

    def split_window_below(self, window=None):
        """
        Split window and create a new one below it.
        """
        return self._split_window('bsplit', window or self.selected_window())

    def split_window_right(self, window=None):
        """
        Split window and create a new one to the right of it.
        """
        return self._split_window('rsplit', window or self.selected_window())

    def delete_window(self, window):
        _window = self._leaf(window)
        if _window is self._minibuffer:
            raise LayoutError('Can not delete minibuffer window.')
        if _window is self._root:
            raise LayoutError('Can not delete last window.')

        was_selected = _window is self._selected_window
        del self._windows[id(window)]

        parent = _window['parent']
        sibling = parent['content'][1] \
                  if parent['content'][0] is _window else \
                  parent['content'][0]

        parent['wm_type'] = sibling['wm_type']
        parent['content'] = sibling['content']
        if parent['wm_type'] != 'window':
            parent['content'][0]['parent'] = parent
            parent['content'][1]['parent'] = parent
        else:
            self._windows[id(parent['content'])] = parent
            if self._selected_window is sibling:
                self._selected_window = parent
        self._resize_window_tree(parent)

        if was_selected:
            self._selected_window = self._first_leaf(parent)

    # LayoutEngine

    def pane_at(self, canvas, x, y):
        for w in self.windows() + [self.minibuffer_window]:
            x0, y0, x1, y1 = self.edges_of(w)
            if x0 <= x < x1 and y0 <= y < y1:
                return w
        return None

    def canvas_of(self, pane):
        return self

    def bounds_of(self, canvas):
        return (self._rows, self._columns)

    def top_left_pane(self, canvas):
        return self._first_leaf(self._root)['content']

    def reserved_region(self, canvas):
        return self.minibuffer_window

    def edges_of(self, pane):
        x0, y0, x1, y1 = pane.edges()
        if x1 < self._columns:
            # Divider
            x1 += 1
        return (x0, y0, x1, y1)

    def inside_edges_of(self, pane):
        return pane.inside_edges()

    def is_reserved_region(self, pane):
        return pane is self.minibuffer_window

    def is_reserved_region_active(self, region):
        return region.active

    def cursor_offset_within(self, pane):
        return pane.cursor()

    def split_pane(self, pane, direction):
        split_type, new_first = SPLIT_TYPES[direction]
        return self._split_window(split_type, pane, new_first)

    def destroy_pane(self, pane):
        self.delete_window(pane)

    def select_pane(self, pane):
        if self.select_window(pane) is None:
            raise LayoutError('Window %s is not part of this window set.' % pane)
        return pane

    def selected_pane(self):
        return self.selected_window()

    def content_of(self, pane):
        if self.is_reserved_region(pane):
            return None
        return pane.buffer()

    def show_content(self, pane, content):
        if self.is_reserved_region(pane):
            raise LayoutError('Can not display buffer in minibuffer window.')
        if content in self.buffers:
            self.buffers.remove(content)
        self.buffers.insert(0, content)
        pane.set_buffer(content)

    def kill_content(self, content):
        if content not in self.buffers:
            return
        self.buffers.remove(content)
        if len(self.buffers) == 0:  # Ensure we always have a buffer available
            self.buffers.append(self._default_buffer)
        self.replace_buffer(content, self.buffers[0])

    def swap_states(self, pane, other_pane):
        if self.is_reserved_region(pane) or self.is_reserved_region(other_pane):
            raise LayoutError('Can not swap states with minibuffer window.')
        pane.swap_state(other_pane)

    def is_live_pane(self, pane):
        _window = self._windows.get(id(pane))
        return _window is not None and _window['content'] is pane
