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

"""
===============
Analysis module
===============

Tools to detect bursts in spike trains and to compute the phase relationships
between bursting channels.

Content
=======
"""

from . import burst_detection as _bd
from . import phase_statistics as _ps

from .burst_detection import *
from .phase_statistics import *


__all__ = _bd.__all__ + _ps.__all__
