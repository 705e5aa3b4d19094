#!/usr/bin/env python
#-*- coding:utf-8 -*-

""" Burst detection and phase analysis of a three-channel rhythm """

from pprint import pprint

import numpy as np

import PyBurstPhase as pbp

import matplotlib.pyplot as plt


''' Generate a noisy triphasic rhythm '''

rng = np.random.default_rng(0)

period = 2.
num_cycles = 40
delays = (0., 0.6, 1.3)
spikes_per_burst = (6, 4, 8)

spike_trains = []
for delay, nspikes in zip(delays, spikes_per_burst):
    onsets = delay + period*np.arange(num_cycles) \
             + rng.normal(0., 0.02, num_cycles)
    train = np.concatenate(
        [onset + 0.05*np.arange(nspikes) for onset in onsets])
    spike_trains.append(np.sort(train))

names = ['PD', 'LP', 'PY']


''' Detect the bursts and compute the phases relative to PD '''

first_last, median = pbp.channel_bursts(
    spike_trains, max_isi=0.1, min_spb=3, min_ibi=0.3)

stats, per_burst = pbp.phase_stats(first_last, median, 0, names)

pprint(stats.mean)
pprint(stats.std)


''' Plot the results '''

fig, (ax1, ax2, ax3) = plt.subplots(1, 3, figsize=(15, 5))

pbp.plot.actogram_plot([fl[:, 0] for fl in first_last], period, names,
                       axis=ax1)
pbp.plot.actogram_period_plot(per_burst['phase'], names, axis=ax2)
pbp.plot.phase_plot(stats, axis=ax3)

plt.show()
