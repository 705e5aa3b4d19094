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

""" Detection of bursts in spike trains """

import logging

import numpy as np


__all__ = [
    "burst_spike_times",
    "channel_bursts",
    "find_bursts",
]


logger = logging.getLogger(__name__)


# --------------- #
# Burst detection #
# --------------- #

def find_bursts(spike_times, max_isi, min_spb, min_ibi, start_time=None,
                end_time=None):
    '''
    Identify the bursts of a spike train.

    A burst is a run of spikes whose consecutive interspike intervals (ISIs)
    are all smaller than `max_isi`, bounded on each side by a gap
    (interburst interval, IBI) of at least `min_ibi`.

    Warning
    -------
    This function expects the spike times to be sorted!

    Parameters
    ----------
    spike_times : array-like
        Times of the spikes (row or column vector).
    max_isi : float
        Maximum interspike interval inside a burst.
    min_spb : int
        Minimum number of spikes within each burst.
    min_ibi : float
        Minimum gap tolerated before and after a burst.
    start_time : float, optional (default: ``spike_times[0] - 2*max_isi``)
        Beginning of the recording; earlier spikes are ignored.
    end_time : float, optional (default: ``spike_times[-1] + 2*max_isi``)
        End of the recording; later spikes are ignored.

    Note
    ----
    If a burst begins within `max_isi` of `start_time` (or ends within
    `max_isi` of `end_time`), it is removed, as we do not have the full
    burst to work with. With the default `start_time` and `end_time`, all
    bursts are identified, including those at the edges of the data.
    NaN entries (e.g. padding of trains with different lengths) are ignored.

    Returns
    -------
    first_last_idx : array of shape (num_bursts, 2)
        Indices (in the full `spike_times`) of the first and last spikes of
        each burst. Empty if no burst was found.
    '''
    spike_times = np.ravel(np.asarray(spike_times, dtype=float))
    no_burst = np.zeros((0, 2), dtype=int)

    finite = spike_times[~np.isnan(spike_times)]

    # short circuit if there are too few spikes
    if len(finite) == 0 or len(finite) < min_spb:
        return no_burst

    if start_time is None:
        start_time = finite[0] - 2*max_isi
    if end_time is None:
        end_time = finite[-1] + 2*max_isi

    # trim the train, keeping the positions to index the full train
    kept = np.where((spike_times >= start_time)
                    & (spike_times <= end_time))[0]
    if len(kept) < 2:
        return no_burst
    times = spike_times[kept]
    num_spikes = len(times)

    # runs of short ISIs
    isis = np.diff(times)
    short = np.concatenate(([0], isis <= max_isi, [0])).astype(int)
    transitions = np.diff(short)
    bursts = np.array([np.where(transitions == 1)[0],
                       np.where(transitions == -1)[0]], dtype=int).T

    if len(bursts) == 0:
        return no_burst

    # incomplete bursts at the edges
    if bursts[0, 0] == 0 and times[0] - max_isi <= start_time:
        bursts = bursts[1:]
    if (len(bursts) and bursts[-1, 1] == num_spikes - 1
            and times[-1] + max_isi >= end_time):
        bursts = bursts[:-1]

    if len(bursts) == 0:
        return no_burst

    # IBI on each side (infinite if the burst touches the edge)
    ibi_before = np.full(len(bursts), np.inf)
    ibi_after = np.full(len(bursts), np.inf)
    has_prev = bursts[:, 0] > 0
    has_next = bursts[:, 1] < num_spikes - 1
    ibi_before[has_prev] = isis[bursts[has_prev, 0] - 1]
    ibi_after[has_next] = isis[bursts[has_next, 1]]

    spikes_per_burst = bursts[:, 1] - bursts[:, 0] + 1

    valid = ((ibi_before >= min_ibi) & (ibi_after >= min_ibi)
             & (spikes_per_burst >= min_spb))

    return kept[bursts[valid]]


def burst_spike_times(spike_times, bursts):
    '''
    Return the times of the first, last, and median spikes of each burst.

    Parameters
    ----------
    spike_times : array-like
        Spike train on which the bursts were detected.
    bursts : array of shape (num_bursts, 2)
        Indices of the first and last spike of each burst, as returned by
        :func:`find_bursts`.

    Returns
    -------
    first_last : array of shape (num_bursts, 2)
        Times of the first and last spikes.
    median : array of shape (num_bursts,)
        Median spike time of each burst.
    '''
    spike_times = np.ravel(np.asarray(spike_times, dtype=float))
    bursts = np.asarray(bursts, dtype=int).reshape(-1, 2)
    first_last = np.array(
        [spike_times[bursts[:, 0]], spike_times[bursts[:, 1]]]).T
    median = np.array(
        [np.nanmedian(spike_times[first:last + 1]) for first, last in bursts],
        dtype=float)
    return first_last, median


def channel_bursts(spike_trains, max_isi, min_spb, min_ibi, start_time=None,
                   end_time=None):
    '''
    Detect the bursts on several channels and return the burst times in the
    format expected by :func:`~PyBurstPhase.analysis.phase_stats`.

    Parameters
    ----------
    spike_trains : list of arrays
        One sorted spike train per channel.

    All the other parameters are those of :func:`find_bursts`.

    Returns
    -------
    first_last : list of (num_bursts, 2) arrays
    median : list of (num_bursts,) arrays
    '''
    first_last, median = [], []
    for i, spikes in enumerate(spike_trains):
        bursts = find_bursts(spikes, max_isi, min_spb, min_ibi,
                             start_time=start_time, end_time=end_time)
        logger.debug("Channel {}: {} bursts detected.".format(i, len(bursts)))
        fl, med = burst_spike_times(spikes, bursts)
        first_last.append(fl)
        median.append(med)
    return first_last, median
