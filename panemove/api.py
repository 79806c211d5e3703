# Copyright (c) 2017 Christoph Landgraf. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

"""
Module level commands, operating on the installed Driver.

A host creates its layout engine and a Driver once, and installs it:

.. code-block:: python

   panemove.install_driver(panemove.Driver(window_set, config))
   panemove.select_left()
"""

import contextlib
import functools

from panemove.driver import Driver
from panemove.layout import Direction

_driver = None


def install_driver(driver):
    global _driver
    _driver = driver
    return driver


def current_driver():
    if _driver is None:
        raise RuntimeError('No driver installed.')
    return _driver


def driver_api(_globals, fn_name):
    wrapped_fn = functools.wraps(getattr(Driver, fn_name))(
        (lambda *args, **kwargs: getattr(current_driver(), fn_name)(*args, **kwargs)))
    _globals[fn_name] = wrapped_fn
    return wrapped_fn


def directional_api(_globals, fn_name, command_name, direction):
    def _directional_fn(argument=0, **kwargs):
        return getattr(current_driver(), command_name)(direction, argument, **kwargs)
    _directional_fn.__name__ = fn_name
    _directional_fn.__doc__ = ('Call %s with direction %s.'
                               % (command_name, direction))
    _globals[fn_name] = _directional_fn
    return _directional_fn


@contextlib.contextmanager
def driver_api_ns(_globals):
    def _driver_api(*args, **kwargs):
        driver_api(_globals, *args, **kwargs)
    yield _driver_api


with driver_api_ns(globals()) as _api:
    _api('message')
    _api('call_interactively')
    _api('input_interaction')
    _api('find_other_window')
    _api('select_in_direction')
    _api('delete_in_direction')
    _api('swap_states_in_direction')
    _api('display_in_direction')
    _api('display_content')

for _direction in (Direction.LEFT, Direction.UP, Direction.RIGHT, Direction.DOWN):
    directional_api(globals(), 'select_%s' % _direction, 'select_in_direction', _direction)
    directional_api(globals(), 'delete_%s' % _direction, 'delete_in_direction', _direction)
    directional_api(globals(), 'swap_states_%s' % _direction, 'swap_states_in_direction', _direction)
    directional_api(globals(), 'display_%s' % _direction, 'display_in_direction', _direction)

directional_api(globals(), 'display_same_window', 'display_in_direction', Direction.SAME_WINDOW)
