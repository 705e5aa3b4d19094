#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
===========
Plot module
===========

Actograms and phase diagrams of bursting activity.

Content
=======
"""

from . import actogram as _act
from . import phase_diagram as _pd

from .actogram import *
from .phase_diagram import *
from .plot_tools import actogram_defaults, phase_plot_defaults


__all__ = _act.__all__ + _pd.__all__ + [
    "actogram_defaults",
    "phase_plot_defaults",
]
