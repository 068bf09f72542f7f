"""
Run configuration.

The RunConfig loads a YAML experiment definition: grid size, number of
trials, seeding, worker count and where to write the per-trial samples.
"""

import yaml
from pathlib import Path
from typing import Any, Dict, Optional


class RunConfig:
    """
    Loads and validates a run configuration YAML.

    Example:
        config = RunConfig.from_yaml('config/example_run.yaml')
        print(config.run_name)
        print(config.grid_size, config.trials)
    """

    def __init__(self, data: Dict[str, Any], base_dir: Optional[Path] = None):
        self._data = data
        # Relative output paths resolve against the config file's directory
        self._base_dir = Path(base_dir) if base_dir is not None else Path.cwd()
        self._validate()

    @classmethod
    def from_yaml(cls, path: str) -> 'RunConfig':
        """Load run config from YAML file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Run config not found: {path}")

        with open(path, 'r') as f:
            data = yaml.safe_load(f)

        return cls(data or {}, base_dir=path.parent)

    def _validate(self):
        """Validate required config sections and keys."""
        if not isinstance(self._data, dict):
            raise ValueError("Run config must be a mapping of sections")

        required_sections = ['run_name', 'experiment']
        for section in required_sections:
            if section not in self._data:
                raise ValueError(f"Missing required config section: '{section}'")

        experiment = self._data['experiment']
        if not isinstance(experiment, dict):
            raise ValueError("Config section 'experiment' must be a mapping")

        for key in ['grid_size', 'trials']:
            if key not in experiment:
                raise ValueError(f"Missing required experiment key: '{key}'")

        for key in ['grid_size', 'trials', 'workers', 'seed']:
            value = experiment.get(key)
            if value is None:
                continue
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"Experiment key '{key}' must be an integer, got {value!r}")
        if experiment.get('seed') is not None and experiment['seed'] < 0:
            raise ValueError(f"Experiment key 'seed' must be >= 0, got {experiment['seed']}")

        output = self._data.get('output')
        if output is not None and not isinstance(output, dict):
            raise ValueError("Config section 'output' must be a mapping")

    # --- Properties ---

    @property
    def run_name(self) -> str:
        return self._data['run_name']

    @property
    def description(self) -> str:
        return self._data.get('description', '')

    # --- Experiment ---

    @property
    def grid_size(self) -> int:
        return self._data['experiment']['grid_size']

    @property
    def trials(self) -> int:
        return self._data['experiment']['trials']

    @property
    def seed(self) -> Optional[int]:
        return self._data['experiment'].get('seed')

    @property
    def workers(self) -> int:
        workers = self._data['experiment'].get('workers')
        return 1 if workers is None else workers

    # --- Output ---

    @property
    def samples_csv(self) -> Optional[Path]:
        """Where to write per-trial samples, or None to skip writing them."""
        samples_csv = (self._data.get('output') or {}).get('samples_csv')
        if samples_csv is None:
            return None
        return self._base_dir / samples_csv

    def __repr__(self) -> str:
        return (f"RunConfig(run_name={self.run_name!r}, grid_size={self.grid_size}, "
                f"trials={self.trials})")
