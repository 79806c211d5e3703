# Copyright (c) 2017-2018 Christoph Landgraf. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

"""
This module provides a layout engine for the directional commands.

A WindowSet contains a set of windows that tile one screen, and a
minibuffer window, that occupies the last row of the screen and is
only active while the user is entering input.

Each WindowSet has at least one window. New windows may be created by
splitting an existing window vertically or horizontally, on either
side, and windows are deleted by merging two neighbouring windows
together. WindowSet stores the layout of its windows in a tree
structure, where each leaf node represents a window and the inner nodes
represent either horizontal or vertical splits.

WindowSet implements panemove.layout.LayoutEngine, so that the
functions in panemove.locate can find the window at any point of the
screen.
"""

from panemove.windows.window import Window, MiniBufferWindow
from panemove.windows.window_set import WindowSet, MIN_WINDOW_HEIGHT, MIN_WINDOW_WIDTH
