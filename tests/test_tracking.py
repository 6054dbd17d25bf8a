import json

import pytest
import yaml

from softmax_lab import Gaussian, InvalidArgumentError, Uniform
from softmax_lab.tracking import ConfigManager, DemoConfig, RunLogger


def test_defaults():
    config = DemoConfig()
    assert config.count == 5
    assert config.build_distribution() == Uniform(-5.0, 10.0)


def test_build_gaussian():
    config = DemoConfig(distribution="gaussian", mean=1.0, std_dev=0.5)
    assert config.build_distribution() == Gaussian(1.0, 0.5)


def test_build_unknown_distribution_fails():
    with pytest.raises(InvalidArgumentError):
        DemoConfig(distribution="cauchy").build_distribution()


@pytest.mark.parametrize("suffix", [".json", ".yaml", ".yml"])
def test_save_load_preserves_config(tmp_path, suffix):
    config = DemoConfig(experiment_name="sweep", distribution="gaussian", count=12, temperatures=[0.1, 10.0])
    path = tmp_path / f"config{suffix}"
    ConfigManager.save_config(config, str(path))
    assert ConfigManager.load_config(str(path)) == config


def test_load_partial_yaml_keeps_defaults(tmp_path):
    path = tmp_path / "demo.yaml"
    path.write_text(yaml.dump({"count": 3, "seed": 7}))
    config = ConfigManager.load_config(str(path))
    assert config.count == 3
    assert config.seed == 7
    assert config.temperatures == [0.5, 1.0, 2.0]


def test_load_empty_yaml_is_default(tmp_path):
    path = tmp_path / "empty.yml"
    path.write_text("")
    assert ConfigManager.load_config(str(path)) == DemoConfig()


def test_unknown_keys_rejected(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"count": 3, "bogus": 1}))
    with pytest.raises(InvalidArgumentError):
        ConfigManager.load_config(str(path))


def test_unsupported_suffix(tmp_path):
    with pytest.raises(InvalidArgumentError):
        ConfigManager.load_config(str(tmp_path / "config.toml"))
    with pytest.raises(InvalidArgumentError):
        ConfigManager.save_config(DemoConfig(), str(tmp_path / "config.ini"))


def test_missing_file_propagates(tmp_path):
    with pytest.raises(FileNotFoundError):
        ConfigManager.load_config(str(tmp_path / "missing.json"))


def test_merge_ignores_none_overrides():
    base = DemoConfig(count=9)
    merged = ConfigManager.merge_configs(base, {"count": None, "seed": 1, "temperatures": [3.0]})
    assert merged.count == 9
    assert merged.seed == 1
    assert merged.temperatures == [3.0]
    assert base.seed == 42


def test_run_logger_appends_records(tmp_path):
    logger = RunLogger(tmp_path / "logs", run_id="abc")
    logger.log_samples([1.0, 2.0], extra={"seed": 3})
    logger.log_softmax(0.5, [0.1, 0.9], 0.32, 1)
    assert logger.run_file.name == "runs_abc.jsonl"
    records = logger.read_records()
    assert [r["kind"] for r in records] == ["samples", "softmax"]
    assert records[0]["seed"] == 3
    assert records[1]["argmax"] == 1
    assert all(r["run_id"] == "abc" for r in records)


def test_run_logger_generates_run_id(tmp_path):
    logger = RunLogger(tmp_path)
    assert len(logger.run_id) == 8
    assert logger.read_records() == []
