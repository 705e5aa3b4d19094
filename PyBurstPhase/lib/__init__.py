#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
==========
Lib module
==========

Various tools used in `analysis`, `data_io` and `plot` modules.

Content
=======
"""

from .selection import *
