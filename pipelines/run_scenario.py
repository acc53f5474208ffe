from __future__ import annotations

import argparse
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple, Union

import numpy as np
import pandas as pd

from evaluation.moving_average_theory import compare_with_theory, white_noise_band
from models.autocorr import (
    AutocorrError,
    TimeSeries,
    acf,
    generate_white_noise,
    make_rng,
    mean,
    moving_average,
    variance,
)
from pipelines.config import ScenarioConfig, load_config
from reporting.logging_utils import get_logger, setup_logging


@dataclass
class ScenarioResult:
    config: ScenarioConfig
    white_noise: TimeSeries
    smoothed: TimeSeries
    comparison: pd.DataFrame
    acf: Optional[pd.DataFrame]
    noise_band: Tuple[float, float]


def run_scenario(
    config: Union[ScenarioConfig, Mapping[str, Any]],
    rng: Optional[np.random.Generator] = None,
) -> ScenarioResult:
    """
    Generate white noise, smooth it, and compare its sample ACF with theory.

    ``rng`` defaults to a generator seeded from ``config.run.seed``; pass one
    explicitly to share a random stream between scenarios.
    """
    if not isinstance(config, ScenarioConfig):
        config = ScenarioConfig.from_dict(config)
    logger = get_logger("run_scenario", context={"scenario": config.run.name})
    rng = rng if rng is not None else make_rng(config.run.seed)

    s = config.series
    a = config.analysis
    white_noise = generate_white_noise(s.start, s.end, s.step, rng, scale=s.scale)
    logger.info(
        "White noise: n=%d mean=%.6f variance=%.6f",
        len(white_noise), mean(white_noise), variance(white_noise),
    )

    smoothed = moving_average(white_noise, window=a.window, align=a.align)
    logger.info("Moving average: window=%d align=%s n=%d", a.window, a.align, len(smoothed))

    sigma2 = s.scale ** 2
    comparison = compare_with_theory(smoothed, window=a.window, sigma2=sigma2, lags=a.lags)
    for lag, row in comparison.iterrows():
        logger.info(
            "lag=%d gamma=%.6f (true %.6f) rho=%.6f (true %.6f)",
            lag,
            row['autocovariance'], row['true_autocovariance'],
            row['autocorrelation'], row['true_autocorrelation'],
            context={"lag": lag},
        )

    acf_table = None
    if a.max_lag is not None:
        acf_table = acf(smoothed, a.max_lag, show_progress=a.show_progress)

    band = white_noise_band(len(smoothed))
    logger.info("White-noise 95%% band: [%.6f, %.6f]", band[0], band[1])

    return ScenarioResult(
        config=config,
        white_noise=white_noise,
        smoothed=smoothed,
        comparison=comparison,
        acf=acf_table,
        noise_band=band,
    )


def _cli_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    overrides: Dict[str, Any] = {}
    if args.seed is not None:
        overrides.setdefault('run', {})['seed'] = args.seed
    if args.log_level is not None:
        overrides.setdefault('logging', {})['level'] = args.log_level
    if args.plot is not None:
        overrides['plot'] = {'enabled': True, 'path': str(args.plot)}
    return overrides


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Sample ACF of a moving average of white noise")
    ap.add_argument('--config', type=Path, required=True, help='Path to scenario YAML')
    ap.add_argument('--seed', type=int, default=None, help='Override run.seed')
    ap.add_argument('--log-level', type=str, default=None, help='Override logging.level')
    ap.add_argument('--plot', type=Path, default=None, help='Save a plot of both series to this path')
    args = ap.parse_args(argv)

    config = load_config(args.config, _cli_overrides(args))
    setup_logging(
        level=config.logging.level,
        log_path=Path(config.logging.log_path) if config.logging.log_path else None,
        config_path=Path(config.logging.config_path) if config.logging.config_path else None,
        context={"run": config.run.name},
    )
    logger = logging.getLogger("run_scenario")

    try:
        result = run_scenario(config)
    except AutocorrError as exc:
        logger.error("Scenario %s rejected: %s", config.run.name, exc)
        return 2

    print(result.comparison.to_string())
    if config.plot.enabled and config.plot.path:
        # matplotlib only loads when a plot is requested
        from reporting.plots import plot_series
        import matplotlib.pyplot as plt

        fig = plot_series(result.white_noise, result.smoothed, limit=config.plot.limit)
        plot_path = Path(config.plot.path)
        plot_path.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(plot_path, dpi=150)
        plt.close(fig)
        logger.info("Saved plot to %s", plot_path)
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
