#!/usr/bin/env python
# -*- coding: utf-8 -*-
#
# This file is part of the PyBurstPhase project, which aims at providing tools
# to study the phase relationships of bursting neuronal activity.
# Copyright (C) 2017 SENeC Initiative
# 
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
# 
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
# 
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

""" Default drawing arguments and shared plotting tools """

import logging
from numbers import Number

from ..lib import nonstring_container


logger = logging.getLogger(__name__)


# -------- #
# Defaults #
# -------- #

_markers = ('+', 'o', '*', '.', 'x', 's', 'd', '^', 'v', '>', '<', 'p', 'h')

_colors = ('r', 'g', 'b', 'c', 'm', 'y', 'k')

# shift (in periods) of the duplicated data
_duplicate_shifts = {
    'centered': 0.5,
    'leftshift': -1,
    'rightshift': 1,
    'none': 0,
}

actogram_defaults = {
    'step_height': -1,
    'marker': _markers,
    'marker_face': _colors,
    'marker_edge': _colors,
    'marker_size': 10,
    'duplicate': 'centered',
    'show_legend': True,
}

phase_plot_defaults = {
    'bar_height': 1.,
    'gap_height': 0.5,
    'bar_color': (1., 1., 0.),
    'phase_color': (0.9, 0., 0.),
    'std_color': (0., 0., 0.),
    'std_bar': (0, 1),
    'std_bar_endcap': 0.3,
    'chan_offset': 0,
}


# ----- #
# Tools #
# ----- #

def _merge_args(defaults, args=None):
    '''
    Return a copy of `defaults` updated with the entries of `args`.

    Entries of `args` which are None or empty containers are replaced by the
    default value.
    '''
    merged = defaults.copy()
    if args is None:
        return merged
    for key, value in args.items():
        if key not in defaults:
            raise ValueError("Invalid drawing argument '{}', valid entries "
                             "are {}.".format(key, sorted(defaults)))
        if value is None or (nonstring_container(value) and len(value) == 0):
            continue
        merged[key] = value
    return merged


def _as_cycle(value):
    ''' Make a list of styles from a single style or a list of styles '''
    if not nonstring_container(value):
        return [value]
    if all(isinstance(v, Number) for v in value):
        # single RGB(A) color
        return [tuple(value)]
    return list(value)


def _duplicate_shift(duplicate):
    ''' Shift (in periods) associated to a `duplicate` name '''
    try:
        return _duplicate_shifts[str(duplicate).lower()]
    except KeyError:
        raise ValueError("Invalid `duplicate` value '{}', expected one of "
                         "{}.".format(duplicate, list(_duplicate_shifts)))


def _actogram_args(actargs, default_duplicate):
    '''
    Merge `actargs` with the actogram defaults and normalize the entries.
    '''
    defaults = actogram_defaults.copy()
    defaults['duplicate'] = default_duplicate
    args = _merge_args(defaults, actargs)
    if args['step_height'] == 0:
        logger.warning("`step_height` cannot be 0, changing to -1.")
        args['step_height'] = -1
    for key in ('marker', 'marker_face', 'marker_edge'):
        args[key] = _as_cycle(args[key])
    args['duplicate'] = _duplicate_shift(args['duplicate'])
    return args


def _channel_style(args, i):
    ''' Marker-only line style of the ith channel '''
    marker = args['marker']
    face = args['marker_face']
    edge = args['marker_edge']
    return {
        'linestyle': 'none',
        'marker': marker[i % len(marker)],
        'markerfacecolor': face[i % len(face)],
        'markeredgecolor': edge[i % len(edge)],
        'markersize': args['marker_size'],
    }


def _default_names(num_channels, source):
    ''' Generate "Ch 1", ..., "Ch N" channel names '''
    logger.info("No channel names specified, using 'Ch 1' to 'Ch {}' for "
                "the channels in `{}`.".format(num_channels, source))
    return ["Ch {}".format(i + 1) for i in range(num_channels)]
