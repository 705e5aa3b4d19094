#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
===================
Input/output module
===================

Module to load recorded spike trains and labelled event tables.

Content
=======
"""

from .load_data import *
