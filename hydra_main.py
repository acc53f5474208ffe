from __future__ import annotations

import copy
from pathlib import Path
from typing import Any, Dict, List, Mapping

import hydra
from omegaconf import DictConfig, OmegaConf

from pipelines.config import ScenarioConfig, deep_update, load_config_dict
from pipelines.run_scenario import ScenarioResult, run_scenario
from reporting.logging_utils import get_logger, setup_logging


CONFIG_DIR = Path(__file__).resolve().parent / "configs"
SCENARIO_DIR = CONFIG_DIR / "scenario"

BASE_CONFIG: Dict[str, Any] = ScenarioConfig().to_dict()

SCENARIO_PRESETS: Dict[str, Dict[str, Any]] = {
    'walkthrough': {
        'name': 'walkthrough',
        'raw_config': deep_update(copy.deepcopy(BASE_CONFIG), {'analysis': {'max_lag': 10}}),
    },
    'fast_smoke': {
        'name': 'fast_smoke',
        'raw_config': deep_update(
            copy.deepcopy(BASE_CONFIG),
            {
                'run': {'name': 'fast_smoke', 'seed': 1},
                'series': {'end': '2018-01-01 03:00'},
                'analysis': {'lags': [0, 1, 3]},
            },
        ),
    },
    'wide_window': {
        'name': 'wide_window',
        'raw_config': deep_update(
            copy.deepcopy(BASE_CONFIG),
            {
                'run': {'name': 'wide_window'},
                'analysis': {'window': 5, 'lags': [0, 1, 2, 3, 4, 5]},
            },
        ),
    },
}


def get_available_scenarios() -> List[str]:
    names = set(SCENARIO_PRESETS)
    if SCENARIO_DIR.is_dir():
        names.update(p.stem for p in SCENARIO_DIR.glob("*.yaml"))
    return sorted(names)


def _load_scenario_cfg(entry) -> Dict[str, Any]:
    """Resolve a scenario name (YAML file first, then preset) or pass a dict through."""
    if isinstance(entry, Mapping):
        return dict(entry)
    if isinstance(entry, str):
        path = SCENARIO_DIR / f"{entry}.yaml"
        if path.exists():
            return {'name': entry, 'path': str(path), 'raw_config': load_config_dict(path)}
        preset = SCENARIO_PRESETS.get(entry)
        if preset:
            return copy.deepcopy(preset)
        raise ValueError(f"Unknown scenario '{entry}'. Available: {get_available_scenarios()}")
    raise TypeError("Scenario entry must be string or dict")


def validate_scenario_cfg(scenario_cfg: Mapping[str, Any]) -> ScenarioConfig:
    if 'raw_config' not in scenario_cfg:
        raise ValueError(f"Scenario '{scenario_cfg.get('name')}' has no raw_config")
    return ScenarioConfig.from_dict(scenario_cfg['raw_config'])


def _run_workflow(cfg_dict: Mapping[str, Any]) -> List[ScenarioResult]:
    scenarios = cfg_dict.get('scenarios') or [cfg_dict['scenario']]
    overrides = cfg_dict.get('overrides') or {}
    logger = get_logger("hydra_main")

    results: List[ScenarioResult] = []
    for entry in scenarios:
        scenario_cfg = _load_scenario_cfg(entry)
        raw = deep_update(copy.deepcopy(scenario_cfg['raw_config']), overrides)
        config = validate_scenario_cfg({**scenario_cfg, 'raw_config': raw})
        logger.info("Running scenario %s", scenario_cfg.get('name'))
        results.append(run_scenario(config))
    return results


@hydra.main(config_path="configs", config_name="config", version_base=None)
def hydra_entry(cfg: DictConfig) -> None:  # pragma: no cover
    cfg_dict = OmegaConf.to_container(cfg, resolve=True)
    setup_logging(level="INFO")
    for result in _run_workflow(cfg_dict):
        print(result.config.run.name)
        print(result.comparison.to_string())


if __name__ == "__main__":
    hydra_entry()
