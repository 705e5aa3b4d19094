# -*- coding: utf-8 -*-

""" Test the actograms and phase diagrams """

import numpy as np
import pytest

from PyBurstPhase.analysis import phase_stats
from PyBurstPhase.plot import (actogram_period_plot, actogram_plot,
                               phase_plot)


# --------- #
# Actograms #
# --------- #

def _points(line):
    return sorted(zip(line.get_xdata(), line.get_ydata()))


def _tick_labels(axis):
    ''' Text of the y tick labels, as set by a fixed formatter '''
    ticks = axis.get_yticks()
    formatter = axis.yaxis.get_major_formatter()
    formatter.set_locs(ticks)
    return [formatter(t, i) for i, t in enumerate(ticks)]


def test_actogram_no_duplicate(axis):
    actogram_plot([np.array([1., 6., 11.])], 5., ["A"],
                  {'duplicate': 'none'}, axis=axis)
    assert len(axis.lines) == 1
    np.testing.assert_allclose(axis.lines[0].get_xdata(), [1., 1., 1.])
    np.testing.assert_allclose(axis.lines[0].get_ydata(), [0., -1., -2.])
    np.testing.assert_allclose(axis.get_ylim(), (-3., 1.))
    assert axis.lines[0].get_linestyle() == 'None'


def test_actogram_rightshift(axis):
    actogram_plot([[1., 6., 11.]], 5., ["A"],
                  {'duplicate': 'RightShift'}, axis=axis)
    assert _points(axis.lines[0]) == sorted(
        [(1., 0.), (1., -1.), (1., -2.), (6., 0.), (6., -1.)])


def test_actogram_leftshift(axis):
    actogram_plot([[1., 6., 11.]], 5., ["A"],
                  {'duplicate': 'leftshift'}, axis=axis)
    # copies one period earlier and one cycle lower
    assert _points(axis.lines[0]) == sorted(
        [(1., 0.), (1., -1.), (1., -2.), (-4., -1.), (-4., -2.)])


def test_actogram_centered_default(axis):
    actogram_plot([np.array([[1.], [6.], [11.]])], 5., ["A"], axis=axis)
    assert _points(axis.lines[0]) == sorted(
        [(1., 0.), (1., -1.), (1., -2.), (6., 0.), (6., -1.),
         (-4., -1.), (-4., -2.)])


def test_actogram_ylim_all_channels(axis):
    actogram_plot([[1., 6.], [11., 16.]], 5., ["A", "B"],
                  {'duplicate': 'none'}, axis=axis)
    np.testing.assert_allclose(axis.lines[0].get_ydata(), [0., -1.])
    np.testing.assert_allclose(axis.lines[1].get_ydata(), [-2., -3.])
    # cycles 0 to 3 span both channels
    np.testing.assert_allclose(axis.get_ylim(), (-4., 1.))


def test_actogram_styles(axis):
    times = [np.array([1., 6.])]*3
    actogram_plot(times, 5., ['a', 'b', 'c'],
                  {'marker': ['+', 'o'], 'marker_size': 4, 'marker_face': [],
                   'show_legend': True}, axis=axis)
    assert [l.get_marker() for l in axis.lines] == ['+', 'o', '+']
    assert all(l.get_markersize() == 4 for l in axis.lines)
    legend = axis.get_legend()
    assert [t.get_text() for t in legend.get_texts()] == ['a', 'b', 'c']


def test_actogram_default_names(axis):
    actogram_plot([[1., 2.], [3., 4.]], 5., axis=axis)
    legend = axis.get_legend()
    assert [t.get_text() for t in legend.get_texts()] == ['Ch 1', 'Ch 2']


def test_actogram_zero_step(axis):
    actogram_plot([[1., 6.]], 5., ['a'],
                  {'step_height': 0, 'duplicate': 'none'}, axis=axis)
    np.testing.assert_allclose(axis.lines[0].get_ydata(), [0., -1.])


def test_actogram_errors(axis):
    with pytest.raises(ValueError):
        actogram_plot([[1.], [2.]], 5., ['a'], axis=axis)
    with pytest.raises(ValueError):
        actogram_plot([[1.]], 5., ['a'], {'duplicate': 'up'}, axis=axis)
    with pytest.raises(ValueError):
        actogram_plot([[1.]], 5., ['a'], {'colour': 'r'}, axis=axis)
    with pytest.raises(ValueError):
        actogram_plot([np.ones((2, 2))], 5., ['a'], axis=axis)


def test_actogram_period_descending(axis):
    phases = np.array([[0.1, 0.5], [0.2, 0.6], [0.3, 0.7]])
    actogram_period_plot(phases, ['a', 'b'], {'duplicate': 'none'},
                         axis=axis)
    assert len(axis.lines) == 2
    np.testing.assert_allclose(axis.lines[0].get_xdata(), [0.1, 0.2, 0.3])
    np.testing.assert_allclose(axis.lines[0].get_ydata(), [3., 2., 1.])
    np.testing.assert_allclose(axis.get_ylim(), (0., 4.))


def test_actogram_period_rightshift_default(axis):
    phases = np.array([[0.1], [0.2], [0.3]])
    actogram_period_plot(phases, ['a'], axis=axis)
    points = _points(axis.lines[0])
    expected = sorted([(0.1, 3.), (0.2, 2.), (0.3, 1.), (1.2, 3.),
                       (1.3, 2.)])
    np.testing.assert_allclose(points, expected)


def test_actogram_period_ascending(axis):
    phases = np.array([0.1, 0.2, 0.3])
    actogram_period_plot(phases, ['a'],
                         {'step_height': 2, 'duplicate': 'none'}, axis=axis)
    np.testing.assert_allclose(axis.lines[0].get_ydata(), [1., 3., 5.])


# ------------- #
# Phase diagram #
# ------------- #

@pytest.fixture
def stats():
    median = [np.array([0., 10., 20., 30.]), np.array([2.5, 12.5, 22.5])]
    first_last = [np.array([m - 1., m + 1.]).T for m in median]
    return phase_stats(first_last, median, 0, ["ref", "ch"])[0]


def test_phase_plot(axis, stats):
    phase_plot(stats, axis=axis)
    # one bar per channel and per x offset
    assert len(axis.patches) == 6
    # 1 phase line, 3 std lines and 6 end caps per channel and per x offset
    assert len(axis.lines) == 60
    np.testing.assert_allclose(axis.get_xlim(), (-1., 1.))
    np.testing.assert_allclose(axis.get_xticks(), np.arange(-1., 1.1, 0.25))
    np.testing.assert_allclose(axis.get_yticks(), [-3.5, -2.])
    assert _tick_labels(axis) == ["ch", "ref"]
    np.testing.assert_allclose(axis.get_ylim(), (-4.5, -1.))


def test_phase_plot_offset(axis, stats):
    phase_plot(stats, axis=axis)
    phase_plot(stats, ['c', 'd'], {'chan_offset': 3}, axis=axis)
    np.testing.assert_allclose(axis.get_yticks(), [-8., -6.5, -3.5, -2.])
    assert _tick_labels(axis) == [
        'd', 'c', 'ch', 'ref']
    np.testing.assert_allclose(axis.get_ylim(), (-9., -1.))


def test_phase_plot_overlap(axis, stats):
    phase_plot(stats, axis=axis)
    with pytest.raises(ValueError):
        phase_plot(stats, axis=axis)


def test_phase_plot_names_mismatch(axis, stats):
    with pytest.raises(ValueError):
        phase_plot(stats, ['a'], axis=axis)


def test_phase_plot_geometry(axis):
    median = [np.array([0., 10., 20., 30.]), np.array([2., 12., 23.])]
    first_last = [np.array([m - 1., m + 1.]).T for m in median]
    stats = phase_stats(first_last, median, 0, ["ref", "ch"])[0]

    phase = np.array([0.2, 0.2, 0.3])
    np.testing.assert_allclose(stats.mean['phase'].iloc[1], phase.mean())
    np.testing.assert_allclose(stats.std['phase'].iloc[1],
                               np.std(phase, ddof=1))

    phase_plot(stats, axis=axis)

    # lines of the second channel at x offset 0: phase line, then for phase,
    # first and last spike a whisker followed by its two end caps
    lines = axis.lines[30:40]
    m, s = stats.mean.iloc[1], stats.std.iloc[1]
    assert s['phase'] > 0 and s['first'] > 0 and s['last'] > 0

    np.testing.assert_allclose(lines[0].get_xdata(), [m['phase']]*2)
    np.testing.assert_allclose(lines[0].get_ydata(), [-4., -3.])
    np.testing.assert_allclose(lines[1].get_xdata(),
                               [m['phase'], m['phase'] + s['phase']])
    np.testing.assert_allclose(lines[1].get_ydata(), [-3.5, -3.5])
    # whisker of the first spike points the other way
    np.testing.assert_allclose(lines[4].get_xdata(),
                               [m['first'], m['first'] - s['first']])
    np.testing.assert_allclose(lines[7].get_xdata(),
                               [m['last'], m['last'] + s['last']])

    # end caps are centered on the whisker
    np.testing.assert_allclose(lines[2].get_xdata(), [m['phase']]*2)
    np.testing.assert_allclose(lines[2].get_ydata(), [-3.35, -3.65])
    np.testing.assert_allclose(lines[3].get_xdata(),
                               [m['phase'] + s['phase']]*2)


def test_phase_plot_ignores_foreign_ticks(axis, stats):
    axis.plot([0., 1.], [0., 1.])
    axis.set_yticks([0., 1.])
    phase_plot(stats, axis=axis)
    np.testing.assert_allclose(axis.get_yticks(), [-3.5, -2.])
    assert _tick_labels(axis) == ["ch", "ref"]
    np.testing.assert_allclose(axis.get_ylim(), (-4.5, -1.))
