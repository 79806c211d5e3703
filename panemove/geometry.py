# Copyright (c) 2017 Christoph Landgraf. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

import collections


Bounds = collections.namedtuple('Bounds', ['x_min', 'y_min', 'x_max', 'y_max'])


def canvas_bounds(layout, pane):
    """
    Return the inclusive bounds of the canvas containing ``pane``.

    The minimum is taken from the top-left pane of the canvas, the
    maximum from the dimensions of the canvas, which include the
    reserved region.
    """
    canvas = layout.canvas_of(pane)
    x_min, y_min, _, _ = layout.edges_of(layout.top_left_pane(canvas))
    rows, columns = layout.bounds_of(canvas)
    return Bounds(x_min, y_min, columns - 1, rows - 1)


def reserved_region_geometry(layout, canvas):
    region = layout.reserved_region(canvas)
    if region is None:
        return (0, False)

    _, y0, _, y1 = layout.edges_of(region)
    return (y1 - y0, layout.is_reserved_region_active(region))
