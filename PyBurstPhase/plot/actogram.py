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

""" Actograms of periodic events """

import numpy as np

from .plot_tools import _actogram_args, _channel_style, _default_names


__all__ = ["actogram_plot", "actogram_period_plot"]


def actogram_plot(event_times, period, channel_names=None, actargs=None,
                  axis=None, show=False):
    '''
    Draw an actogram for multiple channels of event times: each event is
    placed at its time modulo `period` (x axis) on the row of its cycle
    (y axis).

    Parameters
    ----------
    event_times : list of 1D arrays
        Event times for each channel (row or column vectors).
    period : float
        Length of the period used to split the event data (e.g. 24 hours for
        circadian rhythm data).
    channel_names : list of str, optional (default: "Ch 1", ..., "Ch N")
        Names of the channels, used in the legend.
    actargs : dict, optional (default: see below)
        Drawing parameters; missing, None or empty entries take their default
        value:

        - "step_height" (default: -1): distance between each cycle (can be
          negative for a descending actogram, cannot be 0).
        - "marker" (default: + o * . x s d ^ v > < p h): marker for each
          channel, cycled over the channels.
        - "marker_face", "marker_edge" (default: r g b c m y k): face and
          edge colors, cycled over the channels; any matplotlib color is
          valid, including 'none' for the edges (only the face of filled
          symbols will be drawn).
        - "marker_size" (default: 10): size of the markers in points.
        - "duplicate" (default: 'centered'): plot the data a second time,
          shifted by one period either to the left ('leftshift'), to the
          right ('rightshift'), on both sides ('centered'), or not at all
          ('none').
        - "show_legend" (default: True): whether to draw the legend.
    axis : :class:`matplotlib.axes.Axes`, optional (default: current axis)
        Existing axis on which the actogram should be drawn.
    show : bool, optional (default: False)
        Whether to show the plot right away or to wait for the next
        ``plt.show()``.

    Example
    -------
    >> args = {'step_height': -1, 'marker': ['+', 'o', 'd'],
    ..         'marker_face': ['r', (0, .5, .1), (.4, .2, .1)],
    ..         'marker_edge': ['k', 'none', 'none'], 'marker_size': 10,
    ..         'duplicate': 'rightshift', 'show_legend': True}
    >> actogram_plot(data, 5.1, headers, args)

    Returns
    -------
    axis : :class:`matplotlib.axes.Axes`
    '''
    import matplotlib.pyplot as plt
    event_times = [_as_train(times) for times in event_times]
    num_channels = len(event_times)
    if channel_names is None or len(channel_names) == 0:
        channel_names = _default_names(num_channels, "event_times")
    if len(channel_names) != num_channels:
        raise ValueError("Number of channels in `event_times` does not match "
                         "`channel_names`.")

    args = _actogram_args(actargs, 'centered')
    step = args['step_height']

    if axis is None:
        axis = plt.gca()

    ylimits = []
    for i, (times, name) in enumerate(zip(event_times, channel_names)):
        x = np.mod(times, period)
        y = np.floor(times / period) * step
        x, y, ylim = _duplicate_events(x, y, args['duplicate'], period, step)
        if ylim is not None:
            ylimits.extend(ylim)
        axis.plot(x, y, label=name, **_channel_style(args, i))

    _finalize(axis, ylimits, args['show_legend'], show)
    return axis


def actogram_period_plot(event_phases, channel_names=None, actargs=None,
                         axis=None, show=False):
    '''
    Draw an actogram for multiple channels of event phases (events times
    already expressed in period units, e.g. as returned by
    :func:`~PyBurstPhase.analysis.phase_stats`).

    Parameters
    ----------
    event_phases : 2D array of shape (num_cycles, num_channels)
        Phase of the event of each cycle (rows) for each channel (columns).
    channel_names : list of str, optional (default: "Ch 1", ..., "Ch N")
        Names of the channels, used in the legend.
    actargs : dict, optional
        Drawing parameters, see :func:`actogram_plot`. The default value of
        "duplicate" is 'rightshift'.
    axis : :class:`matplotlib.axes.Axes`, optional (default: current axis)
        Existing axis on which the actogram should be drawn.
    show : bool, optional (default: False)
        Whether to show the plot right away.

    Returns
    -------
    axis : :class:`matplotlib.axes.Axes`
    '''
    import matplotlib.pyplot as plt
    event_phases = np.asarray(event_phases, dtype=float)
    if event_phases.ndim == 1:
        event_phases = event_phases[:, None]
    elif event_phases.ndim != 2:
        raise ValueError("`event_phases` must be a 2D array with one column "
                         "per channel.")
    num_cycles, num_channels = event_phases.shape
    if channel_names is None or len(channel_names) == 0:
        channel_names = _default_names(num_channels, "event_phases")
    if len(channel_names) != num_channels:
        raise ValueError("Number of channels in `event_phases` does not "
                         "match `channel_names`.")

    args = _actogram_args(actargs, 'rightshift')
    step = args['step_height']

    if axis is None:
        axis = plt.gca()

    # first cycle on top for descending actograms
    cycles = 1. + np.arange(num_cycles) * abs(step)
    if step < 0:
        cycles = cycles[::-1]

    ylimits = []
    for i, name in enumerate(channel_names):
        x, y, ylim = _duplicate_events(
            event_phases[:, i], cycles, args['duplicate'], 1., step)
        if ylim is not None:
            ylimits.extend(ylim)
        axis.plot(x, y, label=name, **_channel_style(args, i))

    _finalize(axis, ylimits, args['show_legend'], show)
    return axis


# ------ #
# Tools  #
# ------ #

def _as_train(times):
    ''' Check the orientation of a channel and return it as a 1D array '''
    times = np.asarray(times, dtype=float)
    if times.ndim > 2 or (times.ndim == 2 and min(times.shape) > 1):
        raise ValueError("`event_times` does not appear to be correctly "
                         "structured: it should be a list of 1D arrays.")
    return np.ravel(times)


def _duplicate_events(x, y, shift, period, step):
    '''
    Duplicate the events shifted by `shift` periods (both ways if `shift` is
    0.5), then discard the points outside the original range of cycles.

    Returns
    -------
    x, y, (ymin, ymax) -- the range is None if there are no events.
    '''
    if len(y) == 0:
        return x, y, None
    ylim = (np.min(y), np.max(y))
    if shift in (-1, 1):
        x = np.concatenate((x, x + shift*period))
        y = np.concatenate((y, y - shift*step))
    elif shift == 0.5:
        x = np.concatenate((x, x + period, x - period))
        y = np.concatenate((y, y - step, y + step))
    keep = (y >= ylim[0]) & (y <= ylim[1])
    return x[keep], y[keep], ylim


def _finalize(axis, ylimits, show_legend, show):
    import matplotlib.pyplot as plt
    if ylimits:
        axis.set_ylim(min(ylimits) - 1, max(ylimits) + 1)
    if show_legend:
        axis.legend()
    if show:
        plt.show()
