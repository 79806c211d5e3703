# Copyright (c) 2017 Christoph Landgraf. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

"""
Commands that act on the window in a direction of the selected window.

All commands find their target using panemove.locate.resolve_neighbor,
so select, delete, swap and display agree on the neighbour of a window
for a given layout and argument.

Deferred Display
================

display_in_direction does not display anything itself. It stores a
pending display in the driver, which is consumed by the next call to
display_content, i.e., the next time a command wants to show some
content. Only one display may be pending, scheduling another one
replaces it.

A pending display belongs to the input depth at which it was scheduled.
Content displayed from a nested input interaction, e.g., while the user
completes a file name in the minibuffer, is not routed by it. A pending
display that has not been consumed is dropped once another command
finishes at the depth it was scheduled at. Starting a nested input
interaction therefore does not drop it, so a command that reads input
first and displays its result afterwards is still routed.
"""

import collections
import contextlib

from panemove.config import Config
from panemove.errors import \
    UserError, NoNeighborError, ReservedRegionInactiveError, InvalidDirectionError
from panemove.layout import Direction, DIRECTIONS, LayoutEngine
from panemove.locate import resolve_neighbor
from panemove.logger import Logger
from panemove.util import forward


PendingDisplay = collections.namedtuple(
    'PendingDisplay',
    ['direction', 'argument', 'previous', 'no_select', 'depth', 'command'])


@forward(lambda self: self._layout,
         ['selected_pane', 'select_pane'],
         LayoutEngine)
class Driver(object):
    def __init__(self, layout, config=None, logger=None):
        self._layout = layout
        self.config = config or Config()
        self.logger = logger or Logger()
        self._last_message = ''
        self._pending_display = None
        self._input_depth = 0
        self._this_command = None

    @property
    def layout(self):
        return self._layout

    @property
    def last_message(self):
        return self._last_message

    @property
    def pending_display(self):
        return self._pending_display

    @property
    def input_depth(self):
        return self._input_depth

    def message(self, msg, show_log=True, log_message=None):
        """
        Display a message in the echo area and log it.

        :param msg: The message to be displayed
        :param show_log: Set to False, to avoid appending the message to the log
        :param log_message: Provide an alternative text for appending to the log
        """
        self._last_message = msg
        if log_message:
            self.logger.log(log_message)
        elif show_log:
            self.logger.log(msg)

    # Command loop

    def call_interactively(self, fn, *args, **kwargs):
        """
        Run command ``fn`` as if invoked by the user.

        A UserError raised by the command is reported in the echo area,
        all other exceptions are propagated. After the command has run,
        a pending display that is not consumed by it may be dropped.
        """
        outer_command = self._this_command
        self._this_command = fn
        try:
            return fn(*args, **kwargs)
        except UserError as e:
            self.message(str(e))
        finally:
            self._post_command()
            self._this_command = outer_command

    @contextlib.contextmanager
    def input_interaction(self):
        """
        Context manager for reading input from the user, e.g., in the
        minibuffer. Interactions may be nested.
        """
        self._input_depth += 1
        try:
            yield self._input_depth
        finally:
            self._input_depth -= 1

    def _post_command(self):
        pending = self._pending_display
        if pending is None:
            return
        if self._input_depth > pending.depth or self._this_command == pending.command:
            return

        self._pending_display = None
        self.message('display-%s cancelled' % pending.direction, show_log=False,
                     log_message='Dropped pending display-%s.' % pending.direction)

    # Commands

    def _is_inactive_reserved_region(self, pane):
        return self._layout.is_reserved_region(pane) and \
            not self._layout.is_reserved_region_active(pane)

    def find_other_window(self, direction, argument=0, window=None):
        """
        Return the window in ``direction`` of ``window`` or None.

        ``window`` defaults to the selected window.
        """
        return resolve_neighbor(self._layout, direction,
                                window or self._layout.selected_pane(),
                                argument,
                                wrap_around=self.config.wrap_around,
                                edge_delta=self.config.edge_delta)

    def select_in_direction(self, direction, argument=0):
        """
        Select the window in ``direction`` of the selected window.

        If there is none and create-window is enabled, the selected
        window is split, and the new window is selected.
        """
        origin = self._layout.selected_pane()
        other = self.find_other_window(direction, argument, origin)
        if self.config.create_window and \
           (other is None or self._is_inactive_reserved_region(other)):
            other = self._layout.split_pane(origin, direction)

        if other is None:
            raise NoNeighborError(direction)
        if self._is_inactive_reserved_region(other):
            raise ReservedRegionInactiveError()
        return self._layout.select_pane(other)

    def delete_in_direction(self, direction, argument=0, kill_content=False):
        """
        Delete the window in ``direction`` of the selected window.

        If ``argument`` is not zero, delete the selected window instead
        and select the window in ``direction``. If ``kill_content`` is
        True, the content of the window in ``direction`` is killed.
        """
        origin = self._layout.selected_pane()
        other = self.find_other_window(direction, argument, origin)
        if other is None:
            raise NoNeighborError(direction)

        content = self._layout.content_of(other) if kill_content else None
        if not argument:
            self._layout.destroy_pane(other)
        else:
            self._layout.destroy_pane(origin)
            self._layout.select_pane(other)

        # Only after the layout has accepted the deletion
        if content is not None:
            self._layout.kill_content(content)

    def swap_states_in_direction(self, direction, argument=0):
        """
        Exchange content and cursor of the selected window and the window
        in ``direction``, then select the other window.
        """
        origin = self._layout.selected_pane()
        other = self.find_other_window(direction, argument, origin)
        if other is None or self._layout.is_reserved_region(other):
            raise NoNeighborError(direction)

        self._layout.swap_states(origin, other)
        return self._layout.select_pane(other)

    def display_in_direction(self, direction, argument=0):
        """
        Display the content of the next command in ``direction``.

        Direction.SAME_WINDOW displays it in the selected window. The
        window showing the content is selected afterwards, unless
        display-no-select is configured. A positive ``argument`` inverts
        this choice.
        """
        if direction not in DIRECTIONS and direction != Direction.SAME_WINDOW:
            raise InvalidDirectionError(direction)

        self._pending_display = PendingDisplay(
            direction=direction,
            argument=argument,
            previous=self._layout.selected_pane(),
            no_select=self.config.display_no_select != (argument > 0),
            depth=self._input_depth,
            command=self._this_command)
        self.message('[display-%s]' % direction, show_log=False)

    def display_content(self, content):
        """
        Display ``content`` in the window chosen by a pending display.

        Returns the window, or None if no display is pending, in which
        case the caller displays the content as it normally would.
        """
        pending = self._pending_display
        if pending is None or self._input_depth > pending.depth:
            return None
        self._pending_display = None

        origin = self._layout.selected_pane()
        if pending.direction == Direction.SAME_WINDOW:
            target = origin
        else:
            target = self.find_other_window(pending.direction, pending.argument, origin)
            if target is None or self._layout.is_reserved_region(target):
                target = self._layout.split_pane(origin, pending.direction)

        self._layout.show_content(target, content)
        self.logger.log('Displayed %s via display-%s.' % (content, pending.direction))

        select = pending.previous if pending.no_select else target
        if self._layout.is_live_pane(select):
            self._layout.select_pane(select)
        return target
