# Copyright (c) 2017 Christoph Landgraf. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

"""
Configuration of directional commands.

Options live in a tree of variables, addressed by key paths, which
may be changed at any time, e.g. from an init file:

.. code-block:: python

   variables.set_variable(['windmove', 'wrap-around'], True)

The driver never reads the variables directly. It is constructed with
a Config, an immutable snapshot created by Config.from_variables.
"""

import collections

from panemove.util import deep_get, deep_put


class Variables(object):
    def __init__(self):
        self._state = {}
        self.def_variable(['windmove', 'wrap-around'], False)
        self.def_variable(['windmove', 'create-window'], False)
        self.def_variable(['windmove', 'edge-delta'], 1)
        self.def_variable(['windmove', 'display-no-select'], False)

    def get_variable(self, path):
        return deep_get(self._state, path, return_none=False)

    def def_variable(self, path, value=None):
        deep_put(self._state, path, value, create_path=True)

    def set_variable(self, path, value=None):
        deep_put(self._state, path, value, create_path=False)


_Config = collections.namedtuple(
    '_Config', ['wrap_around', 'create_window', 'edge_delta', 'display_no_select'])


class Config(_Config):
    """
    :param wrap_around: Moving off an edge of the canvas continues at
                        the opposite edge.
    :param create_window: Selecting a direction without a neighbour
                          splits the selected window.
    :param edge_delta: Distance from the edge of a window at which its
                       neighbour is looked up.
    :param display_no_select: Keep the previously selected window
                              selected after a deferred display.
    """
    __slots__ = ()

    def __new__(cls, wrap_around=False, create_window=False,
                edge_delta=1, display_no_select=False):
        if edge_delta < 1:
            raise ValueError('edge-delta must be at least 1, got %s' % edge_delta)
        return super(Config, cls).__new__(cls, wrap_around, create_window,
                                          edge_delta, display_no_select)

    @classmethod
    def from_variables(cls, variables):
        return cls(wrap_around=variables.get_variable(['windmove', 'wrap-around']),
                   create_window=variables.get_variable(['windmove', 'create-window']),
                   edge_delta=variables.get_variable(['windmove', 'edge-delta']),
                   display_no_select=variables.get_variable(['windmove', 'display-no-select']))

    def replace(self, **kwargs):
        return self._replace(**kwargs)
