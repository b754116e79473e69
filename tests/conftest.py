from pathlib import Path

import matplotlib
import pytest

matplotlib.use("Agg")

REPO_ROOT = Path(__file__).resolve().parents[1]


@pytest.fixture
def default_config_path():
    return str(REPO_ROOT / "configs" / "default.yaml")


@pytest.fixture
def out_dir_override(tmp_path):
    return f"logging.out_dir={tmp_path}"
