# Copyright (c) 2017 Christoph Landgraf. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

"""
Integer arithmetic on canvas coordinates.

Coordinates are zero-based and canvas relative, x grows to the right
and y grows downwards.
"""

import collections


Coordinate = collections.namedtuple('Coordinate', ['x', 'y'])


def add(a, b):
    return Coordinate(a.x + b.x, a.y + b.y)


def clamp_to_range(n, lo, hi):
    return max(lo, min(n, hi))


def wrap_to_range(n, lo, hi):
    """
    Wrap ``n`` to the opposite end of ``[lo, hi]`` if it lies outside.

    Unlike a modulo operation, values are never wrapped by more than
    one step: anything below ``lo`` becomes ``hi`` and anything above
    ``hi`` becomes ``lo``.
    """
    if n < lo:
        return hi
    elif n > hi:
        return lo
    return n
