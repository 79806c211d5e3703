# Copyright (c) 2017 Christoph Landgraf. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

from panemove.api import *
from panemove.config import Config, Variables
from panemove.coordinates import Coordinate
from panemove.driver import Driver
from panemove.errors import \
    UserError, NoNeighborError, ReservedRegionInactiveError, \
    InvalidDirectionError, LayoutError
from panemove.layout import Direction, ReferenceMode, LayoutEngine
from panemove.locate import resolve_neighbor
from panemove.windows import WindowSet

__all__ = [
    'Config',
    'Variables',
    'Coordinate',
    'Direction',
    'ReferenceMode',
    'LayoutEngine',
    'WindowSet',
    'Driver',

    'UserError',
    'NoNeighborError',
    'ReservedRegionInactiveError',
    'InvalidDirectionError',
    'LayoutError',

    'resolve_neighbor',

    'install_driver',
    'current_driver',
    'message',
    'call_interactively',
    'input_interaction',
    'find_other_window',

    'select_in_direction',
    'select_left',
    'select_up',
    'select_right',
    'select_down',

    'delete_in_direction',
    'delete_left',
    'delete_up',
    'delete_right',
    'delete_down',

    'swap_states_in_direction',
    'swap_states_left',
    'swap_states_up',
    'swap_states_right',
    'swap_states_down',

    'display_in_direction',
    'display_left',
    'display_up',
    'display_right',
    'display_down',
    'display_same_window',
    'display_content',
]
