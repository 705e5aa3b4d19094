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

""" Cartesian phase diagrams """

import logging

import numpy as np

from .plot_tools import _merge_args, phase_plot_defaults


__all__ = ["phase_plot"]


logger = logging.getLogger(__name__)


def phase_plot(stats, channel_names=None, drawing_args=None, axis=None,
               show=False):
    '''
    Plot a cartesian phase diagram (mean +/- std) from phase statistics.

    Each channel is drawn as a bar going from the mean first spike to the mean
    last spike of its bursts, with a vertical line at the mean phase and
    standard deviation bars for the phase, first and last spikes. The diagram
    is repeated on [-1, 0] and [1, 2] to show the wrapping of the phases.

    Parameters
    ----------
    stats : :class:`~PyBurstPhase.analysis.PhaseStats`
        Statistics returned by :func:`~PyBurstPhase.analysis.phase_stats`.
    channel_names : list of str, optional (default: ``stats.channel_names``)
        Labels of the channels, from top to bottom.
    drawing_args : dict, optional (default: see below)
        Drawing parameters; missing entries take their default value:

        - "bar_height" (default: 1.): height of the bars.
        - "gap_height" (default: 0.5): gap between two bars.
        - "bar_color" (default: yellow, (1, 1, 0)): color of the bars.
        - "phase_color" (default: (0.9, 0, 0)): color of the phase marks.
        - "std_color" (default: black): color of the std bars.
        - "std_bar" (default: (0, 1)): direction of the std bars; (1, 0) or
          (0, 1) is right facing, except for the first spike where they face
          out, (-1, 0) is left facing (first spike bars facing in), (1, -1)
          draws both sides.
        - "std_bar_endcap" (default: 0.3): height of the end caps of the std
          bars, in units of "bar_height".
        - "chan_offset" (default: 0): shift the channels by this number of
          channels (e.g. after plotting 6 channels, another set can be added
          with `chan_offset` = 7.2, leaving a 1.2*(bar_height + gap_height)
          space between the two sets).
    axis : :class:`matplotlib.axes.Axes`, optional (default: current axis)
        Existing axis on which the diagram should be drawn. If the axis
        already contains a phase diagram, the new channels are added to its
        existing labels; ticks set by other means are replaced.
    show : bool, optional (default: False)
        Whether to show the plot right away.

    Note
    ----
    Sets of channels can be interleaved by using `chan_offset`, but a
    ``ValueError`` is raised if the new labels overlap existing ones.

    Returns
    -------
    axis : :class:`matplotlib.axes.Axes`
    '''
    import matplotlib.pyplot as plt

    num_channels = stats.num_channels
    if channel_names is None:
        logger.info("No channel names specified, using the names stored in "
                    "`stats`.")
        channel_names = stats.channel_names
    if len(channel_names) != num_channels:
        raise ValueError("Number of channels in `stats` does not match "
                         "`channel_names`.")

    args = _merge_args(phase_plot_defaults, drawing_args)
    bar_height = args['bar_height']
    gap_height = args['gap_height']
    endcap = 0.5 * args['std_bar_endcap']  # drawn up and down from center
    chan_offset = args['chan_offset']
    std_dir = np.asarray(args['std_bar'], dtype=float)
    ystep = bar_height + gap_height

    # labels are drawn from bottom to top, channels from top to bottom
    ystart = -(num_channels + chan_offset)*ystep - bar_height
    yend = -(chan_offset + 1)*ystep
    yticks = ystart + ystep*np.arange(num_channels) + 0.5*bar_height
    ylabels = list(channel_names)[::-1]
    ylims = (ystart - gap_height, yend + gap_height)

    if axis is None:
        axis = plt.gca()

    # preserve the ticks and labels of a previous phase diagram
    previous = getattr(axis, "_phase_plot_labels", None)
    if previous is not None:
        old_ticks, old_labels = previous
        if _overlaps(yticks, old_ticks, 0.5*bar_height):
            raise ValueError("Labels overlap, unable to continue drawing.")
        old_ylims = axis.get_ylim()
        yticks = np.concatenate((old_ticks, yticks))
        ylabels = list(old_labels) + ylabels
        order = np.argsort(yticks, kind='stable')
        yticks = yticks[order]
        ylabels = [ylabels[i] for i in order]
        ylims = (min(old_ylims[0], ylims[0]), max(old_ylims[1], ylims[1]))

    mean, std = stats.mean, stats.std

    for xoffset in (-1, 0, 1):
        for c in range(num_channels):
            ytop = -(c + 1 + chan_offset)*ystep
            ymid = ytop - 0.5*bar_height
            first, last = mean['first'].iloc[c], mean['last'].iloc[c]
            phase = mean['phase'].iloc[c]
            # main box
            axis.fill(np.array([first, last, last, first]) + xoffset,
                      [ytop - bar_height, ytop - bar_height, ytop, ytop],
                      color=args['bar_color'])
            # phase line
            axis.plot([phase + xoffset]*2, [ytop - bar_height, ytop],
                      color=args['phase_color'])
            # +/- std lines, flipped for the first spike
            for k, prop in enumerate(('phase', 'first', 'last')):
                direction = (-1)**k * std_dir
                m, s = mean[prop].iloc[c], std[prop].iloc[c]
                axis.plot(direction*s + m + xoffset, [ymid, ymid],
                          color=args['std_color'])
                for d in direction:
                    axis.plot([d*s + m + xoffset]*2,
                              [ytop - bar_height*(0.5 - endcap),
                               ytop - bar_height*(0.5 + endcap)],
                              color=args['std_color'])

    axis.set_xlim(-1, 1)
    axis.set_xticks(np.linspace(-1., 1., 9))
    axis.set_ylim(ylims)
    axis.set_yticks(yticks)
    axis.set_yticklabels(ylabels)
    axis._phase_plot_labels = (yticks, ylabels)

    if show:
        plt.show()
    return axis


def _overlaps(ticks1, ticks2, min_gap):
    ''' Check whether two lists of ticks are closer than `min_gap` '''
    if len(ticks1) == 0 or len(ticks2) == 0:
        return False
    return bool(np.any(
        np.abs(np.subtract.outer(ticks1, ticks2)) <= min_gap))
