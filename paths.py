from pathlib import Path

_project_root = Path(__file__).parent

COMMON_DIR = _project_root / "common"
CONICS_DIR = COMMON_DIR / "utils" / "conics"
DEFAULT_CONICS_CONFIG = CONICS_DIR / "conics_config.yml"
