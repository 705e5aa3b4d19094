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

""" Loading data """

import logging

import numpy as np
import pandas as pd
from scipy.io import loadmat

from ..lib import or_within


__all__ = ['load_channel_table', 'load_mat_spikes']


logger = logging.getLogger(__name__)


def load_channel_table(filename, categories=None, sep=None):
    '''
    Use :func:`pandas.read_csv` to load a delimited text file whose header
    contains the channel names (one column per channel).

    Parameters
    ----------
    filename : str
        Path to the file.
    categories : str or list of str, optional (default: all columns)
        Keep only the columns whose name contains one of these substrings
        (see :func:`~PyBurstPhase.lib.or_within`).
    sep : str, optional (default: guessed from the file)
        Column delimiter.

    Returns
    -------
    data : 2D array of shape (num_rows, num_channels)
        Values of the selected columns (NaN for missing entries).
    headers : list of str
        Names of the selected columns.
    '''
    df = pd.read_csv(filename, sep=sep, engine='python')
    headers = [str(col).strip() for col in df.columns]
    select = or_within(headers, [] if categories is None else categories)
    if not np.any(select):
        logger.warning("No column of '{}' matches {}.".format(
                       filename, categories))
    data = df.loc[:, select].to_numpy(dtype=float)
    return data, [h for h, keep in zip(headers, select) if keep]


def load_mat_spikes(filename, varname):
    '''
    Use :func:`scipy.io.loadmat` to load spike trains from a Matlab .mat
    file.

    Parameters
    ----------
    filename : str
        Path to the .mat file.
    varname : str
        Name of the variable containing the spike trains, either a cell array
        of vectors (one per channel) or a matrix (one column per channel).

    Returns
    -------
    spike_trains : list of 1D arrays
    '''
    d = loadmat(filename, squeeze_me=True, struct_as_record=False)
    if varname not in d:
        raise KeyError("No variable '{}' in '{}'.".format(varname, filename))
    value = np.asarray(d[varname])
    if value.dtype == object:
        return [np.ravel(np.asarray(train, dtype=float)) for train in value]
    value = value.astype(float)
    if value.ndim < 2:
        value = np.atleast_1d(value)
        return [value[~np.isnan(value)]]
    # columns of different lengths are padded with NaN
    return [col[~np.isnan(col)] for col in value.T]
