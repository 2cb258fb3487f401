from copy import deepcopy
import yaml
from munch import Munch, munchify
from paths import DEFAULT_CONICS_CONFIG
from common.utils.typings import *


class ConicsConfig(Munch):

    _KEYS = {'tolerance': ('epsilon', 'legacy_bounds'),
             'logging': ('level',)}

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._validate()

    @classmethod
    def from_dict(cls, cfg: dict):
        return cls(munchify(deepcopy(cfg)))

    @classmethod
    def from_file(cls, path: PathLike):
        with open(path, 'r') as f:
            return cls.from_dict(yaml.safe_load(f))

    @classmethod
    def from_default(cls):
        return cls.from_file(DEFAULT_CONICS_CONFIG)

    def copy(self, **overrides):
        """
        copy with overridden leaf values, given as section__key=value.
        e.g. cfg.copy(tolerance__epsilon=1e-6)
        """
        cfg = deepcopy(self.toDict())
        for name, value in overrides.items():
            section, key = name.split('__')
            cfg.setdefault(section, {})[key] = value
        return ConicsConfig.from_dict(cfg)

    @property
    def epsilon(self) -> float:
        return self.tolerance.epsilon

    @property
    def legacy_bounds(self) -> bool:
        return self.tolerance.legacy_bounds

    def _validate(self):
        unknown_sections = set(self.keys()).difference(self._KEYS)
        if unknown_sections:
            raise ValueError(f"Unknown config sections: {unknown_sections}")
        for section, keys in self._KEYS.items():
            if section not in self:
                raise ValueError(f"Missing config section: {section}")
            missing = set(keys).difference(self[section].keys())
            unknown = set(self[section].keys()).difference(keys)
            if missing or unknown:
                raise ValueError(f"Bad keys in config section '{section}': missing={missing}, unknown={unknown}")
        eps = self.tolerance.epsilon
        if isinstance(eps, bool) or not isinstance(eps, (int, float)) or not eps > 0:
            raise ValueError(f"tolerance.epsilon must be a positive number, got {eps!r}")
        self.tolerance.epsilon = float(eps)
        if not isinstance(self.tolerance.legacy_bounds, bool):
            raise ValueError(f"tolerance.legacy_bounds must be a bool, got {self.tolerance.legacy_bounds!r}")
