import pytest

import core.models as models_mod
from core.errors import ConfigurationError
from core.models import CacheConfig, CacheStats


def test_config_requires_a_limit():
    with pytest.raises(ConfigurationError):
        CacheConfig()


def test_config_max_entry_size_defaults_to_max_bytes():
    cfg = CacheConfig(max_bytes=100)
    assert cfg.max_entry_size == 100
    assert cfg.max_count is None
    assert cfg.write_sync is True


def test_config_count_only_has_no_entry_cap():
    cfg = CacheConfig(max_count=3)
    assert cfg.max_entry_size is None


@pytest.mark.parametrize(
    "kwargs",
    [
        {"max_count": 0},
        {"max_count": -1},
        {"max_bytes": "10"},
        {"max_count": True},
        {"max_count": 2, "max_entry_size": 0},
        {"max_count": 2, "debug": 3},
    ],
)
def test_config_rejects_bad_values(kwargs):
    with pytest.raises(ConfigurationError):
        CacheConfig(**kwargs)


def test_from_options_maps_option_names():
    cfg = CacheConfig.from_options({"MaxCount": 5, "MaxBytes": 1000, "WriteSync": 0, "Debug": 1})
    assert cfg == CacheConfig(max_count=5, max_bytes=1000, max_entry_size=1000, write_sync=False, debug=1)


def test_from_options_positional_count_and_max_size_alias():
    cfg = CacheConfig.from_options({"MaxSize": 50}, max_count=100)
    assert cfg.max_count == 100
    assert cfg.max_entry_size == 50


def test_from_options_prefers_max_entry_size_over_alias():
    cfg = CacheConfig.from_options({"MaxCount": 1, "MaxEntrySize": 7, "MaxSize": 9})
    assert cfg.max_entry_size == 7


def test_from_options_without_limits_fails():
    with pytest.raises(ConfigurationError):
        CacheConfig.from_options({"Debug": 1})


def test_from_env(monkeypatch):
    monkeypatch.setattr(models_mod.config, "CACHE_MAX_COUNT", None)
    monkeypatch.setattr(models_mod.config, "CACHE_MAX_BYTES", 4096)
    monkeypatch.setattr(models_mod.config, "CACHE_MAX_ENTRY_SIZE", 512)
    monkeypatch.setattr(models_mod.config, "CACHE_WRITE_SYNC", False)
    monkeypatch.setattr(models_mod.config, "CACHE_DEBUG", 2)

    cfg = CacheConfig.from_env()
    assert cfg == CacheConfig(max_bytes=4096, max_entry_size=512, write_sync=False, debug=2)


def test_stats_hit_ratio():
    assert CacheStats(hits=0, misses=0, count=0, bytes=0).hit_ratio is None
    assert CacheStats(hits=3, misses=1, count=0, bytes=0).hit_ratio == pytest.approx(0.75)


def test_from_options_zero_limit_means_unset():
    cfg = CacheConfig.from_options({"MaxCount": 0, "MaxBytes": 1000, "MaxSize": 0})
    assert cfg.max_count is None
    assert cfg.max_bytes == 1000
    assert cfg.max_entry_size == 1000

    with pytest.raises(ConfigurationError):
        CacheConfig.from_options({"MaxCount": 0, "MaxBytes": 0})


def test_direct_construction_still_rejects_zero():
    with pytest.raises(ConfigurationError):
        CacheConfig(max_count=0, max_bytes=1000)
