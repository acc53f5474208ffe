"""Scenario configuration: YAML loading with ``extends`` and typed sections."""

from __future__ import annotations

import copy
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

import yaml


@dataclass
class RunConfig:
    name: str = 'walkthrough'
    seed: int = 8092


@dataclass
class SeriesConfig:
    # One year of minutes.
    start: str = '2018-01-01 01:00'
    end: str = '2019-01-01 00:00'
    step: str = '1min'
    scale: float = 1.0


@dataclass
class AnalysisConfig:
    window: int = 3
    align: str = 'center'
    lags: List[int] = field(default_factory=lambda: [0, 1, 2, 3])
    max_lag: Optional[int] = None
    show_progress: bool = False


@dataclass
class LoggingConfig:
    level: str = 'INFO'
    log_path: Optional[str] = None
    config_path: Optional[str] = None


@dataclass
class PlotConfig:
    enabled: bool = False
    path: Optional[str] = None
    limit: int = 100


def _section(cls, data: Optional[Mapping[str, Any]]):
    data = dict(data or {})
    known = {f.name for f in fields(cls)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"Unknown keys for {cls.__name__}: {unknown}")
    return cls(**data)


@dataclass
class ScenarioConfig:
    run: RunConfig = field(default_factory=RunConfig)
    series: SeriesConfig = field(default_factory=SeriesConfig)
    analysis: AnalysisConfig = field(default_factory=AnalysisConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    plot: PlotConfig = field(default_factory=PlotConfig)

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> 'ScenarioConfig':
        """Build a config from nested mappings; missing sections take defaults."""
        unknown = sorted(set(config_dict) - {'run', 'series', 'analysis', 'logging', 'plot'})
        if unknown:
            raise ValueError(f"Unknown config sections: {unknown}")
        return cls(
            run=_section(RunConfig, config_dict.get('run')),
            series=_section(SeriesConfig, config_dict.get('series')),
            analysis=_section(AnalysisConfig, config_dict.get('analysis')),
            logging=_section(LoggingConfig, config_dict.get('logging')),
            plot=_section(PlotConfig, config_dict.get('plot')),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def deep_update(base: Dict[str, Any], overrides: Mapping[str, Any]) -> Dict[str, Any]:
    """Recursively merge ``overrides`` into ``base`` (in place); override values win."""
    for key, value in overrides.items():
        if isinstance(value, Mapping) and isinstance(base.get(key), dict):
            base[key] = deep_update(base[key], value)
        else:
            base[key] = copy.deepcopy(value)
    return base


def _load_yaml(path: Path) -> Dict[str, Any]:
    with open(path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f)
    return data or {}


def load_config_dict(cfg_path: Union[str, Path]) -> Dict[str, Any]:
    """Read a YAML scenario, resolving a chain of ``extends`` parents relative to each file."""
    cfg_path = Path(cfg_path)
    cfg = _load_yaml(cfg_path)
    parent = cfg.pop('extends', None)
    if not parent:
        return cfg
    base = load_config_dict((cfg_path.parent / parent).resolve())
    return deep_update(base, cfg)


def load_config(
    cfg_path: Union[str, Path],
    overrides: Optional[Mapping[str, Any]] = None,
) -> ScenarioConfig:
    cfg = load_config_dict(cfg_path)
    if overrides:
        cfg = deep_update(cfg, overrides)
    return ScenarioConfig.from_dict(cfg)
