import pytest

pytest.importorskip("matplotlib")

import matplotlib.pyplot as plt  # noqa: E402

from models.autocorr import TimeSeries, generate_white_noise, moving_average  # noqa: E402
from reporting.plots import plot_series  # noqa: E402


def test_plot_series_draws_first_points_of_each_series():
    noise = generate_white_noise("2018-01-01", "2018-01-01 05:00", "1min", seed=8092)
    smoothed = moving_average(noise)

    fig = plot_series(noise, smoothed, limit=100, title="Noise")
    ax = fig.axes[0]

    assert [line.get_label() for line in ax.get_lines()] == ["White noise", "Moving average"]
    assert all(len(line.get_xdata()) == 100 for line in ax.get_lines())
    assert ax.get_title() == "Noise"
    plt.close(fig)


def test_plot_series_handles_short_series():
    fig = plot_series(TimeSeries.from_values([1.0, 2.0]), limit=None)

    assert len(fig.axes[0].get_lines()[0].get_xdata()) == 2
    plt.close(fig)


def test_plot_series_requires_input():
    with pytest.raises(ValueError):
        plot_series()
