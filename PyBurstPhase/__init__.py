#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
================================
Bursting phase package (SENeC-I)
================================

PyBurstPhase package to study the phase relationships of periodic bursting
activity recorded on several channels.
This package is part of the broader SENeC initiative for the study of neuronal
cultures and devices.


Content
=======

`analysis`
    Tools to detect bursts in spike trains and compute the phase, duty cycle
    and period of each channel relative to a reference channel.
`data_io`
    Input functions to load spike trains and labelled event tables.
`lib`
    Generic tools used throughout the modules.
`plot`
    Actograms and phase diagrams, based on [matplotlib][mpl].
"""

import logging as _logging
import sys as _sys


# ----------------------- #
# Requirements and config #
# ----------------------- #

# Python >= 3.6
assert _sys.hexversion >= 0x03060000, "PyBurstPhase requires Python >= 3.6"

__version__ = "0.1.0"

# logging
_log = _logging.getLogger(__name__)

if not _log.handlers:
    logConsoleFormatter = _logging.Formatter(
        '[%(levelname)s @ %(name)s]: %(message)s')
    consoleHandler = _logging.StreamHandler()
    consoleHandler.setFormatter(logConsoleFormatter)
    consoleHandler.setLevel(_logging.INFO)
    _log.addHandler(consoleHandler)


# ------- #
# Modules #
# ------- #

from . import analysis
from . import data_io
from . import lib
from . import plot

from .analysis import (PhaseStats, burst_spike_times, channel_bursts,
                       find_bursts, phase_stats)
from .lib import or_within


__all__ = [
    "analysis",
    "data_io",
    "lib",
    "plot",
    "PhaseStats",
    "burst_spike_times",
    "channel_bursts",
    "find_bursts",
    "or_within",
    "phase_stats",
]
