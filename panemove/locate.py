# Copyright (c) 2017 Christoph Landgraf. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

"""
Find the pane in a given direction of another pane.

The neighbour is found by computing a probe point just outside the edge
of the origin pane and asking the layout engine which pane covers it.
Only the coordinate along the axis of movement is taken from the edge,
the other one is taken from a reference point inside the origin pane,
which is either the cursor or one of its corners. Therefore, if several
panes border the origin on that side, the reference point decides which
one is found.

The probe is then constrained to the canvas, and optionally wrapped to
the opposite edge. The reserved region at the bottom of the canvas is
never skipped: moving down always hits it, while wrapping only lands on
it if it is active.

Edge deltas larger than the smallest pane dimension may skip a pane
and are not supported.
"""

from panemove.coordinates import Coordinate, add, clamp_to_range, wrap_to_range
from panemove.errors import InvalidDirectionError
from panemove.geometry import canvas_bounds, reserved_region_geometry
from panemove.layout import Direction, DIRECTIONS, ReferenceMode


def reference_point(layout, pane, mode):
    x0, y0, x1, y1 = layout.inside_edges_of(pane)
    if mode == ReferenceMode.LEADING_CORNER:
        return Coordinate(x0, y0)
    elif mode == ReferenceMode.TRAILING_CORNER:
        return Coordinate(x1 - 1, y1 - 1)

    col, row = layout.cursor_offset_within(pane)
    return add(Coordinate(x0, y0), Coordinate(col, row))


def probe_point(direction, edges, ref, delta=1):
    x0, y0, x1, y1 = edges
    if direction == Direction.LEFT:
        return Coordinate(x0 - delta, ref.y)
    elif direction == Direction.UP:
        return Coordinate(ref.x, y0 - delta)
    elif direction == Direction.RIGHT:
        return Coordinate(x1 - 1 + delta, ref.y)
    elif direction == Direction.DOWN:
        return Coordinate(ref.x, y1 - 1 + delta)
    raise InvalidDirectionError(direction)


def constrain(probe, bounds, direction, in_reserved_region):
    # Leave y unconstrained when moving up, or down out of the
    # reserved region, so that wrap can pick it up
    x = probe.x if direction.is_horizontal else \
        clamp_to_range(probe.x, bounds.x_min, bounds.x_max)
    y = clamp_to_range(probe.y, bounds.y_min, bounds.y_max) \
        if direction.is_horizontal or \
        (direction == Direction.DOWN and not in_reserved_region) else \
        probe.y
    return Coordinate(x, y)


def wrap(probe, bounds, reserved_height=0, reserved_active=False):
    y_max = bounds.y_max if reserved_active else bounds.y_max - reserved_height
    return Coordinate(wrap_to_range(probe.x, bounds.x_min, bounds.x_max),
                      wrap_to_range(probe.y, bounds.y_min, y_max))


def neighbor_location(layout, direction, pane, mode, wrap_around=False, edge_delta=1):
    """
    Return the canvas coordinate at which the neighbour of ``pane``
    in ``direction`` is looked up.
    """
    if direction not in DIRECTIONS:
        raise InvalidDirectionError(direction)

    bounds = canvas_bounds(layout, pane)
    ref = reference_point(layout, pane, mode)
    probe = probe_point(direction, layout.edges_of(pane), ref, edge_delta)
    probe = constrain(probe, bounds, direction, layout.is_reserved_region(pane))
    if wrap_around:
        reserved_height, reserved_active = \
            reserved_region_geometry(layout, layout.canvas_of(pane))
        probe = wrap(probe, bounds, reserved_height, reserved_active)
    return probe


def resolve_neighbor(layout, direction, pane, argument=0, wrap_around=False, edge_delta=1):
    """
    Return the pane in ``direction`` of ``pane`` or None.

    ``argument`` selects the reference point: zero uses the cursor,
    a positive value the top-left and a negative value the bottom-right
    corner of ``pane``. The result may be the reserved region, whether
    it is active or not.
    """
    probe = neighbor_location(layout, direction, pane,
                              ReferenceMode.from_argument(argument),
                              wrap_around, edge_delta)
    other = layout.pane_at(layout.canvas_of(pane), probe.x, probe.y)
    # Moving down from the bottom of a canvas without reserved region
    # is clamped back into the origin
    if other is pane and not wrap_around:
        return None
    return other
