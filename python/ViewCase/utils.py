import os
from pathlib import Path


def create_path(apath: Path):
    os.makedirs(apath, exist_ok=True)


viewcase_dir = Path(__file__).resolve().parent
data_dir = Path(Path.home(), "ViewCase_data")
default_config_file = viewcase_dir / "default_config.json"
default_logconf_file = viewcase_dir / "viewcase_logconf.json"
