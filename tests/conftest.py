# -*- coding: utf-8 -*-

import matplotlib
matplotlib.use('Agg')

import matplotlib.pyplot as plt
import numpy as np
import pytest


@pytest.fixture
def axis():
    fig, ax = plt.subplots()
    yield ax
    plt.close(fig)


@pytest.fixture
def bursting_train():
    ''' Three bursts of 4, 3 and 5 spikes, separated by ~1.7 s '''
    return np.array([0., 0.1, 0.2, 0.3,
                     2.0, 2.1, 2.2,
                     4.0, 4.1, 4.2, 4.3, 4.4])
