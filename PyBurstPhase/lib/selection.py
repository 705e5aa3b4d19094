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

""" Selection of labelled columns """

import numpy as np


__all__ = ["nonstring_container", "or_within"]


def nonstring_container(obj):
    '''
    Returns true for any iterable which is not a string or byte sequence.
    '''
    if not hasattr(obj, "__iter__"):
        return False
    if isinstance(obj, (str, bytes)):
        return False
    if isinstance(obj, np.ndarray) and obj.ndim == 0:
        return False
    return True


def or_within(header, category_list):
    '''
    Return a boolean array selecting the columns of `header` which contain
    at least one entry of `category_list`.

    Parameters
    ----------
    header : list of str
        Names of the columns.
    category_list : str or list of str
        Substrings to look for. An empty list or 'all' in the first position
        selects every column.

    Example
    -------
    >> or_within(['a', 'ba', 'c'], ['b', 'c'])
    array([False,  True,  True])

    >> or_within(['a', 'ba', 'c'], ['a'])
    array([ True,  True, False])

    Returns
    -------
    colselect : 1D boolean array of length ``len(header)``
    '''
    if not nonstring_container(category_list):
        category_list = [category_list]
    num_cols = len(header)
    if len(category_list) == 0 or category_list[0] == 'all':
        return np.ones(num_cols, dtype=bool)
    colselect = np.zeros(num_cols, dtype=bool)
    for category in category_list:
        colselect |= np.array([category in str(name) for name in header],
                              dtype=bool)
    return colselect
