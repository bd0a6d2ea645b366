from pathlib import Path

import pytest

from wirecodec.config import DEFAULT_LIMITS, CodecLimits, LimitsLoader, load_limits
from wirecodec.config.loader import DEFAULT_CONFIG_PATH
from wirecodec.core.errors import ConfigError


def _write(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


def test_packaged_config_matches_defaults():
    assert DEFAULT_CONFIG_PATH.exists()
    assert load_limits() == DEFAULT_LIMITS


def test_load_populates_limits_and_hash(tmp_path: Path) -> None:
    path = _write(tmp_path / "codec.yml", "limits:\n  max_length: 1024\n  max_set_size: 16\n")

    loader = LimitsLoader(path)
    limits = loader.load()

    assert limits == CodecLimits(max_length=1024, max_set_size=16)
    assert loader.limits == {"max_length": 1024, "max_set_size": 16}
    assert isinstance(loader.file_hash, str) and len(loader.file_hash) == 64


def test_missing_keys_fall_back_to_defaults(tmp_path: Path) -> None:
    path = _write(tmp_path / "codec.yml", "limits:\n  max_length: 10\n")
    limits = load_limits(path)
    assert limits.max_length == 10
    assert limits.max_set_size == DEFAULT_LIMITS.max_set_size


def test_empty_file_gives_defaults(tmp_path: Path) -> None:
    path = _write(tmp_path / "codec.yml", "")
    assert load_limits(path) == DEFAULT_LIMITS


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        LimitsLoader(tmp_path / "nope.yml").load()


def test_rejects_non_mapping_document(tmp_path: Path) -> None:
    path = _write(tmp_path / "codec.yml", "- 1\n- 2\n")
    with pytest.raises(ConfigError):
        load_limits(path)


def test_rejects_non_mapping_limits(tmp_path: Path) -> None:
    path = _write(tmp_path / "codec.yml", "limits: 5\n")
    with pytest.raises(ConfigError):
        load_limits(path)


def test_rejects_unknown_keys(tmp_path: Path) -> None:
    path = _write(tmp_path / "codec.yml", "limits:\n  max_depth: 3\n")
    with pytest.raises(ConfigError) as exc:
        load_limits(path)
    assert "max_depth" in str(exc.value)
    assert exc.value.hint is not None


@pytest.mark.parametrize("value", ["0", "-1", "4294967296", "bad", "true"])
def test_rejects_bad_values(tmp_path: Path, value: str) -> None:
    path = _write(tmp_path / "codec.yml", f"limits:\n  max_length: {value}\n")
    with pytest.raises(ConfigError):
        load_limits(path)


def test_codec_limits_validates_directly():
    with pytest.raises(ConfigError):
        CodecLimits(max_set_size=0)
    assert CodecLimits(max_length=0xFFFFFFFF).max_length == 0xFFFFFFFF


@pytest.mark.parametrize("body", ["limits:\n  1: 5\n", "limits:\n  1: 5\n  other: 2\n"])
def test_rejects_non_string_keys(tmp_path: Path, body: str) -> None:
    path = _write(tmp_path / "codec.yml", body)
    with pytest.raises(ConfigError) as exc:
        load_limits(path)
    assert "1" in str(exc.value)


def test_loaded_limits_carry_file_hash(tmp_path: Path) -> None:
    path = _write(tmp_path / "codec.yml", "limits:\n  max_length: 64\n")
    loader = LimitsLoader(path)
    limits = loader.load()

    assert limits.source_sha256 == loader.file_hash
    assert DEFAULT_LIMITS.source_sha256 is None
    # the fingerprint does not take part in equality
    assert limits == CodecLimits(max_length=64)
