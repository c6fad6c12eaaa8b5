"""
Tests for the driving profile catalog and configuration presets.
"""

import pytest

from smartdrive_routing.config import (
    DEFAULT_PROFILE_ID,
    ProfileId,
    RoutingConfig,
    get_available_profiles,
    get_profile,
    get_profile_from_string,
    list_profiles
)
from smartdrive_routing.data import ProfileWeights
from smartdrive_routing.exceptions import UnknownProfileError


def test_catalog_contents():
    fast = get_profile(ProfileId.FAST)
    safe = get_profile(ProfileId.SAFE)
    scenic = get_profile(ProfileId.SCENIC)

    assert (fast.name, fast.weights) == ("Speed_Demon", ProfileWeights(10, 0, 1))
    assert (safe.name, safe.weights) == ("Safety_First", ProfileWeights(2, 5, 10))
    assert (scenic.name, scenic.weights) == ("Explorer", ProfileWeights(1, 10, 5))
    assert DEFAULT_PROFILE_ID is ProfileId.SAFE


def test_lookup_is_case_insensitive():
    assert get_profile_from_string(" Fast ").id == "fast"


def test_unknown_profile_lists_available():
    with pytest.raises(UnknownProfileError) as excinfo:
        get_profile_from_string("reckless")
    assert "fast" in str(excinfo.value)
    assert isinstance(excinfo.value, ValueError)


def test_available_profiles():
    assert list(get_available_profiles()) == ["fast", "safe", "scenic"]
    assert len(list_profiles()) == 3


def test_weights_must_be_non_negative():
    with pytest.raises(ValueError):
        ProfileWeights(eta=-1, activity=0, lighting=0)


def test_default_config_is_valid():
    RoutingConfig.create_default_config().validate()
    RoutingConfig.create_offline_test_config().validate()


def test_invalid_config_is_rejected():
    with pytest.raises(ValueError):
        RoutingConfig(lighting_no_data_score=5).validate()
    with pytest.raises(ValueError):
        RoutingConfig(daytime_start_hour=20, daytime_end_hour=19).validate()


def test_config_from_env(monkeypatch):
    monkeypatch.setenv("SMARTDRIVE_OSRM_URL", "http://localhost:5000")
    monkeypatch.setenv("SMARTDRIVE_HTTP_TIMEOUT", "3.5")

    config = RoutingConfig.from_env()

    assert config.osrm_base_url == "http://localhost:5000"
    assert config.http_timeout_s == 3.5
