# Copyright (c) 2017 Christoph Landgraf. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

"""
Keymaps for the directional commands.

Keychords are written as strings of space separated keys, each of which
may be prefixed by modifiers, e.g., ``'C-x S-<left>'``. The functions
ending in ``_default_keybindings`` return keymaps that bind the arrow
keys with the given modifiers to the commands of a Driver. Commands are
run through Driver.call_interactively, so errors are reported in the
echo area.
"""

from panemove.layout import Direction
from panemove.util import deep_put, deep_get

skey_map = set(['<f1>', '<f2>', '<f3>', '<f4>', '<f5>', '<f6>', '<f7>', '<f8>',
                '<f9>', '<f10>', '<f11>', '<f12>',
                '<tab>', '<del>', '<enter>', '<down>', '<up>', '<left>', '<right>',
                '<pgup>', '<pgdown>', '<home>', '<end>'])
modifiers = ['C', 'M', 'S']

DIRECTION_KEYS = [
    ('<left>',  Direction.LEFT),
    ('<up>',    Direction.UP),
    ('<right>', Direction.RIGHT),
    ('<down>',  Direction.DOWN),
]


def parse_keychord_list(ks):
    return ['-'.join(normalize_modifiers(chord[:-1]) + [parse_key(chord[-1])])
            for chord in [chord.split('-')
                          for chord in ks]]


def parse_keychord_string(s):
    return parse_keychord_list(filter(lambda seq: len(seq) != 0, s.split(' ')))


def parse_key(k):
    if len(k) > 1 and k not in skey_map:
        raise KeyError('Unknown special key: %s' % k)

    return k


def normalize_modifiers(ms):
    unknown_modifiers = list(filter(lambda m: m not in modifiers, ms))
    if unknown_modifiers:
        raise KeyError('Encountered unknown modifiers: %s' % unknown_modifiers)

    return sorted(ms, key=modifiers.index)


def keychord(key, modifiers=(), prefix=None):
    chord = '-'.join(list(modifiers) + [key])
    return '%s %s' % (prefix, chord) if prefix else chord


class Keymap(object):
    def __init__(self, keymap=None):
        self._keymap = {}
        for key in keymap or {}:
            self.__setitem__(parse_keychord_string(key),
                             keymap[key])

    def flattened(self):
        flat = {}
        kstack = [{'keymap': self._keymap, 'keys': list(self._keymap.keys())}]
        prefix = []
        while kstack:
            while kstack[0]['keys']:
                current_key = kstack[0]['keys'].pop(0)
                prefix.append(current_key)
                keymap_or_fn = kstack[0]['keymap'][current_key]
                if isinstance(keymap_or_fn, dict):
                    kstack.insert(0, {'keymap': keymap_or_fn, 'keys': list(keymap_or_fn.keys())})
                    break
                else:
                    flat[' '.join(prefix)] = keymap_or_fn
                    prefix.pop(-1)
            else:
                kstack.pop(0)
                if len(kstack):
                    prefix.pop(-1)
        return flat

    def __getitem__(self, keychords):
        if isinstance(keychords, str):
            keychords = parse_keychord_string(keychords)
        return deep_get(self._keymap, keychords)

    def __setitem__(self, keychords, fn):
        if isinstance(keychords, str):
            keychords = parse_keychord_string(keychords)
        deep_put(self._keymap, keychords, fn)

    def handle_input(self, keychords):
        """
        A return value of None means the received keychord prefix has no
        match in this keymap. If this method returns False, a prefix match
        is found, but the keychord is not yet complete. If this method
        returns True, the associated function has been executed.
        """
        key_fn = self[keychords]
        if key_fn is None:
            return None
        elif isinstance(key_fn, dict):
            # Incomplete keychord
            return False
        else:
            key_fn()
            return True


def _command(driver, fn, *args):
    def _run_command():
        return driver.call_interactively(fn, *args)
    return _run_command


def default_keybindings(driver, modifiers=('S',), keymap=None):
    """Bind the arrow keys with ``modifiers`` to select_in_direction."""
    keymap = keymap or Keymap()
    for key, direction in DIRECTION_KEYS:
        keymap[keychord(key, modifiers)] = \
            _command(driver, driver.select_in_direction, direction)
    return keymap


def display_default_keybindings(driver, modifiers=('S', 'M'), keymap=None):
    """
    Bind the arrow keys with ``modifiers`` to display_in_direction,
    and ``0`` with ``modifiers`` to displaying in the selected window.
    """
    keymap = keymap or Keymap()
    for key, direction in DIRECTION_KEYS + [('0', Direction.SAME_WINDOW)]:
        keymap[keychord(key, modifiers)] = \
            _command(driver, driver.display_in_direction, direction)
    return keymap


def delete_default_keybindings(driver, prefix='C-x', modifiers=('S',), keymap=None):
    """Bind ``prefix`` followed by the arrow keys to delete_in_direction."""
    keymap = keymap or Keymap()
    for key, direction in DIRECTION_KEYS:
        keymap[keychord(key, modifiers, prefix)] = \
            _command(driver, driver.delete_in_direction, direction)
    return keymap


def swap_states_default_keybindings(driver, modifiers=('S', 'C'), keymap=None):
    keymap = keymap or Keymap()
    for key, direction in DIRECTION_KEYS:
        keymap[keychord(key, modifiers)] = \
            _command(driver, driver.swap_states_in_direction, direction)
    return keymap
