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

""" Phase relationships between bursting channels """

import numpy as np
import pandas as pd


__all__ = [
    "PhaseStats",
    "phase_stats",
]


# -------------------------- #
# Record class for the stats #
# ------------------------- #

class PhaseStats:

    '''
    Average and standard deviation of the phase properties of each channel.

    Attributes
    ----------
    mean : :class:`pandas.DataFrame`
        One row per channel and one column per property ("phase", "first",
        "last", "duty" and "period").
    std : :class:`pandas.DataFrame`
        Standard deviations, with the same layout as `mean`.
    ref_channel : int
        Index of the channel used as phase reference.
    num_channels : int
        Number of channels.
    channel_names : list of str
        Names of the channels (index of `mean` and `std`).
    '''

    _res_names = ("phase", "first", "last", "duty", "period")

    def __init__(self, means, stds, ref_channel, channel_names):
        self.channel_names = list(channel_names)
        self.mean = pd.DataFrame(means, index=self.channel_names,
                                 columns=self._res_names)
        self.std = pd.DataFrame(stds, index=self.channel_names,
                                columns=self._res_names)
        self.ref_channel = ref_channel

    def __repr__(self):
        return "<PhaseStats: {} channels, reference '{}'>".format(
            self.num_channels, self.channel_names[self.ref_channel])

    @property
    def num_channels(self):
        return len(self.channel_names)

    @property
    def result_names(self):
        ''' Names of the properties '''
        return self._res_names


# ------------------ #
# Compute the phases #
# ------------------ #

def phase_stats(first_last, median_spike, ref_channel, channel_names=None):
    '''
    Compute the phase, first/last spike phases, duty cycle and period of each
    channel relative to a reference channel.

    Parameters
    ----------
    first_last : list of N arrays of shape (M_i, 2)
        Times of the first and last spikes of each burst, for each channel.
    median_spike : list of N arrays of shape (M_i,)
        Time of the median spike of each burst, for each channel.
    ref_channel : int
        Index of the channel used as phase reference.
    channel_names : list of str, optional (default: "Ch 1", ..., "Ch N")
        Names of the channels.

    Note
    ----
    For the mth burst of channel n:

    - period : (m+1)th median spike - mth median spike
    - phase : (mth median spike of n - mth median spike of the reference)
      / period of the mth reference burst
    - first : (mth first spike of n - mth median spike of the reference)
      / period of the mth reference burst
    - last : (mth last spike of n - mth median spike of the reference)
      / period of the mth reference burst
    - duty : last - first

    The reference channel may have one more burst than the others, allowing
    for use of all available bursts; otherwise the number of bursts analyzed
    is one fewer than the minimum number of bursts across channels.

    Returns
    -------
    stats : :class:`PhaseStats`
        Mean and standard deviation of the properties for each channel.
    intermediate : dict
        Per-burst values for "phase", "first", "last", "period" and "duty",
        as 2D arrays with one row per burst and one column per channel.
    '''
    num_channels = len(first_last)
    if num_channels != len(median_spike):
        raise ValueError("Channel counts do not match between `first_last` "
                         "and `median_spike`.")
    if not -num_channels <= ref_channel < num_channels:
        raise ValueError("Invalid `ref_channel` {} for {} channels.".format(
                         ref_channel, num_channels))
    ref_channel = ref_channel % num_channels

    if channel_names is None:
        channel_names = ["Ch {}".format(i + 1) for i in range(num_channels)]
    elif len(channel_names) != num_channels:
        raise ValueError("Number of channels does not match "
                         "`channel_names`.")

    first_last = [_check_first_last(fl) for fl in first_last]
    median_spike = [_check_median(ms) for ms in median_spike]

    num_bursts = np.array([len(ms) for ms in median_spike], dtype=int)
    if np.any(num_bursts != [len(fl) for fl in first_last]):
        raise ValueError("Different number of bursts between `first_last` "
                         "and `median_spike`.")

    # number of bursts to work with
    nbursts = np.min(num_bursts)
    nbursts_period = nbursts
    if num_bursts[ref_channel] >= nbursts + 1:
        nbursts_ref = nbursts + 1
    else:
        nbursts_ref = nbursts
        nbursts -= 1

    if nbursts < 1:
        raise ValueError("Not enough bursts to compute the phases: the "
                         "reference channel needs at least two bursts.")

    ref_median = median_spike[ref_channel]
    ref_period = np.diff(ref_median[:nbursts_ref])

    period = np.zeros((nbursts_period - 1, num_channels))
    phase = np.zeros((nbursts, num_channels))
    first = np.zeros(phase.shape)
    last = np.zeros(phase.shape)

    for i in range(num_channels):
        period[:, i] = np.diff(median_spike[i][:nbursts_period])
        phase[:, i] = (median_spike[i][:nbursts]
                       - ref_median[:nbursts]) / ref_period
        first[:, i] = (first_last[i][:nbursts, 0]
                       - ref_median[:nbursts]) / ref_period
        last[:, i] = (first_last[i][:nbursts, 1]
                      - ref_median[:nbursts]) / ref_period

    duty = last - first

    intermediate = {
        "phase": phase,
        "first": first,
        "last": last,
        "period": period,
        "duty": duty,
    }

    means = {k: _mean(v) for k, v in intermediate.items()}
    stds = {k: _std(v) for k, v in intermediate.items()}

    return PhaseStats(means, stds, ref_channel, channel_names), intermediate


# ------ #
# Tools  #
# ------ #

def _check_first_last(first_last):
    first_last = np.asarray(first_last, dtype=float)
    if first_last.size == 0:
        return first_last.reshape(0, 2)
    if first_last.ndim != 2 or first_last.shape[1] != 2:
        raise ValueError("Each entry of `first_last` must be an (M, 2) "
                         "array of first and last spike times.")
    return first_last


def _check_median(median):
    median = np.asarray(median, dtype=float)
    if median.ndim == 2 and median.shape[1] == 1:
        median = median[:, 0]
    if median.ndim != 1:
        raise ValueError("Each entry of `median_spike` must be a single "
                         "column of median spike times.")
    return median


def _mean(values):
    ''' Column-wise average (NaN for empty columns) '''
    if values.shape[0] == 0:
        return np.full(values.shape[1], np.nan)
    return np.mean(values, axis=0)


def _std(values):
    ''' Column-wise standard deviation normalized by N-1 (0 for N = 1) '''
    if values.shape[0] == 0:
        return np.full(values.shape[1], np.nan)
    if values.shape[0] == 1:
        return np.zeros(values.shape[1])
    return np.std(values, axis=0, ddof=1)
