from pathlib import Path

import pytest

from pathoverlap.config import OverlapConfig
from pathoverlap.domain.errors import ConfigError
from pathoverlap.domain.models import MethodScope, ParamRule


def test_defaults():
    cfg = OverlapConfig()
    assert cfg.output_dir == "output"
    assert cfg.download_dir == "download"
    assert cfg.single_rule == ParamRule.EXISTING
    assert cfg.scan_rule == ParamRule.SYMMETRIC
    assert cfg.fold_method_case is False
    assert cfg.method_scope == MethodScope.ANY


def test_load_missing_file_returns_defaults(tmp_path: Path):
    assert OverlapConfig.load(str(tmp_path / "absent.yaml")) == OverlapConfig()
    assert OverlapConfig.load(None) == OverlapConfig()


def test_load_yaml(tmp_path: Path):
    f = tmp_path / "pathoverlap.yaml"
    f.write_text(
        "output_dir: build/out\nmethod_scope: shared\nfold_method_case: true\ntimeout: 5\n",
        encoding="utf-8",
    )
    cfg = OverlapConfig.load(str(f))
    assert cfg.output_dir == "build/out"
    assert cfg.method_scope == MethodScope.SHARED
    assert cfg.fold_method_case is True
    assert cfg.timeout == 5.0


def test_load_rejects_bad_values(tmp_path: Path):
    f = tmp_path / "bad.yaml"
    f.write_text("scan_rule: sideways\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        OverlapConfig.load(str(f))

    f.write_text("- just\n- a list\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        OverlapConfig.load(str(f))


def test_with_overrides_ignores_none():
    cfg = OverlapConfig().with_overrides(single_rule=ParamRule.SYMMETRIC, method_scope=None)
    assert cfg.single_rule == ParamRule.SYMMETRIC
    assert cfg.method_scope == MethodScope.ANY
