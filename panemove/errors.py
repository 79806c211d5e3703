# Copyright (c) 2017 Christoph Landgraf. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

"""
Exceptions raised by directional commands.

Instances of UserError describe a situation the user can fix, e.g. by
choosing another direction, and are reported in the echo area by
Driver.call_interactively. InvalidDirectionError indicates a bug in the
caller and is never caught.
"""


class UserError(Exception):
    pass


class NoNeighborError(UserError):
    def __init__(self, direction):
        super(NoNeighborError, self).__init__(
            'No window %s from selected window' % direction)
        self.direction = direction


class ReservedRegionInactiveError(UserError):
    def __init__(self):
        super(ReservedRegionInactiveError, self).__init__('Minibuffer is inactive')


class LayoutError(UserError):
    pass


class InvalidDirectionError(Exception):
    def __init__(self, direction):
        super(InvalidDirectionError, self).__init__(
            'Invalid direction: %r' % (direction,))
        self.direction = direction
