import pytest

from linetfidf.config import RunConfig, config_from_cfg, load_config


def test_defaults():
    cfg = RunConfig()
    assert (cfg.lines_per_document, cfg.top_k, cfg.precision) == (1000, 10, 4)
    assert config_from_cfg(None) == cfg
    assert load_config(None) == cfg


def test_load_yaml(tmp_path):
    path = tmp_path / "run.yaml"
    path.write_text("lines_per_document: 250\ntop_k: 3\n", encoding="utf-8")
    cfg = load_config(path)
    assert cfg == RunConfig(lines_per_document=250, top_k=3, precision=4)


def test_empty_yaml_file_uses_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert load_config(path) == RunConfig()


def test_non_mapping_yaml_rejected(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- 1\n- 2\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(path)


@pytest.mark.parametrize(
    "raw",
    [{"lines_per_document": 0}, {"top_k": -1}, {"precision": -2}],
)
def test_invalid_values_rejected(raw):
    with pytest.raises(ValueError):
        config_from_cfg(raw)


def test_config_is_frozen():
    cfg = RunConfig()
    with pytest.raises(AttributeError):
        cfg.lines_per_document = 5


@pytest.mark.parametrize(
    "raw",
    [{"lines_per_document": 2.7}, {"top_k": True}, {"precision": "4"}, {"lines_per_document": None}],
)
def test_non_integer_values_rejected(raw):
    with pytest.raises(ValueError):
        config_from_cfg(raw)


def test_yaml_bool_rejected(tmp_path):
    path = tmp_path / "run.yaml"
    path.write_text("top_k: true\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(path)
