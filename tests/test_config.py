from __future__ import annotations

import pytest

from anglecore.config import Config, check_decimals, config_from_mapping, load_config


def _write(tmp_path, text: str) -> str:
    path = tmp_path / "anglecore.yaml"
    path.write_text(text, encoding="utf-8")
    return str(path)


def test_load_config_defaults_without_path():
    for p in (None, ""):
        cfg = load_config(p)
        assert cfg.format.style == "rad"
        assert cfg.format.decimals is None
        assert cfg.wrap.signed is True
        assert cfg.random.seed is None


def test_load_config_reads_all_sections(tmp_path):
    cfg_text = """
format:
  style: DMS
  decimals: 3
wrap:
  signed: false
random:
  seed: 1234
"""
    cfg = load_config(_write(tmp_path, cfg_text))
    assert isinstance(cfg, Config)
    assert cfg.format.style == "dms"
    assert cfg.format.decimals == 3
    assert cfg.wrap.signed is False
    assert cfg.random.seed == 1234


def test_empty_file_gives_defaults(tmp_path):
    cfg = load_config(_write(tmp_path, ""))
    assert cfg == Config()


def test_partial_sections_keep_defaults(tmp_path):
    cfg = load_config(_write(tmp_path, "format:\n  decimals: 2\n"))
    assert cfg.format.style == "rad"
    assert cfg.format.decimals == 2
    assert cfg.wrap.signed is True


def test_bad_style_is_rejected(tmp_path):
    with pytest.raises(ValueError, match="format.style"):
        load_config(_write(tmp_path, "format:\n  style: furlongs\n"))


def test_unknown_key_in_section_is_rejected(tmp_path):
    with pytest.raises(ValueError, match="unsupported keys"):
        load_config(_write(tmp_path, "wrap:\n  signed: true\n  period: 7\n"))


def test_unknown_section_warns(tmp_path):
    with pytest.warns(RuntimeWarning, match="unknown config sections"):
        cfg = load_config(_write(tmp_path, "plot:\n  dpi: 100\nwrap:\n  signed: false\n"))
    assert cfg.wrap.signed is False


def test_section_must_be_mapping():
    with pytest.raises(ValueError, match="format must be a mapping"):
        config_from_mapping({"format": ["rad"]})
    with pytest.raises(ValueError, match="root must be a mapping"):
        config_from_mapping(["format"])  # type: ignore[arg-type]


def test_wrap_signed_must_be_bool():
    with pytest.raises(ValueError, match="wrap.signed"):
        config_from_mapping({"wrap": {"signed": "yes"}})


def test_random_seed_must_be_int():
    with pytest.raises(ValueError, match="random.seed"):
        config_from_mapping({"random": {"seed": 1.5}})
    with pytest.raises(ValueError, match="random.seed"):
        config_from_mapping({"random": {"seed": True}})


def test_check_decimals():
    assert check_decimals(None) is None
    assert check_decimals(0) == 0
    assert check_decimals(17) == 17
    with pytest.raises(ValueError, match="must be >= 0"):
        check_decimals(-1)
    with pytest.raises(ValueError, match="integer"):
        check_decimals(2.5)
    with pytest.raises(ValueError, match="integer"):
        check_decimals(True)


def test_large_decimals_warn_but_pass():
    with pytest.warns(RuntimeWarning, match="exceeds float64 resolution"):
        cfg = config_from_mapping({"format": {"decimals": 20}})
    assert cfg.format.decimals == 20
