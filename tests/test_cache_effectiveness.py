"""Verify configuration loading returns consistent, cached results.

Tests that ``get_config()`` and ``get_default_config_path()`` return the
bundled greeter defaults and behave under repeated and concurrent calls.
"""

from __future__ import annotations

from concurrent.futures import Future, ThreadPoolExecutor

import pytest

from greeter.adapters.config.loader import get_config, get_default_config_path, validate_profile


@pytest.mark.os_agnostic
class TestGetDefaultConfigPath:
    """Verify get_default_config_path() behavior."""

    def test_points_at_bundled_file(self) -> None:
        """The bundled defaultconfig.toml ships next to the loader."""
        result = get_default_config_path()

        assert result.name == "defaultconfig.toml"
        assert result.is_file()

    def test_repeated_calls_return_same_object(self) -> None:
        """The path is computed once."""
        assert get_default_config_path() is get_default_config_path()


@pytest.mark.os_agnostic
class TestGetConfig:
    """Verify get_config() behavior."""

    def test_bundled_defaults_supply_greeter_section(self, clear_config_cache: None) -> None:
        """The default layer carries greeting and name."""
        section = get_config().get("greeter", default={})

        assert section.get("greeting") == "Hello"
        assert section.get("name") == "World"

    def test_repeated_calls_hit_the_cache(self, clear_config_cache: None) -> None:
        """The same Config instance is returned until the cache is cleared."""
        first = get_config()

        assert get_config() is first

    def test_cache_clear_forces_reload(self, clear_config_cache: None) -> None:
        """cache_clear() drops the cached instance but not the data."""
        first = get_config()

        get_config.cache_clear()
        second = get_config()

        assert second is not first
        assert second.as_dict() == first.as_dict()

    def test_invalid_profile_is_rejected_before_loading(self) -> None:
        """Path traversal in a profile name raises ValueError."""
        with pytest.raises(ValueError):
            get_config(profile="../etc")

    def test_valid_profile_name_passes_validation(self) -> None:
        """Alphanumerics and hyphens are fine."""
        validate_profile("staging-eu")


@pytest.mark.os_agnostic
class TestConcurrentAccess:
    """Verify consistent results under concurrent access."""

    def test_concurrent_get_config_returns_equivalent_results(self, clear_config_cache: None) -> None:
        """All threads receive equivalent Config data."""
        with ThreadPoolExecutor(max_workers=4) as pool:
            results = [f.result() for f in [pool.submit(get_config) for _ in range(10)]]

        first_dict = results[0].as_dict()
        assert all(r.as_dict() == first_dict for r in results)

    def test_concurrent_access_with_cache_clear(self, clear_config_cache: None) -> None:
        """Cache clears while other threads read do not raise or corrupt data."""
        errors: list[Exception] = []

        def fetch_config() -> None:
            try:
                assert get_config().get("greeter", default={}).get("greeting") == "Hello"
            except Exception as exc:
                errors.append(exc)

        def clear_cache() -> None:
            try:
                get_config.cache_clear()
            except Exception as exc:
                errors.append(exc)

        with ThreadPoolExecutor(max_workers=8) as pool:
            futures: list[Future[None]] = [
                pool.submit(clear_cache if i % 5 == 0 else fetch_config) for i in range(20)
            ]
            for future in futures:
                future.result()

        assert errors == [], f"Concurrent access errors: {errors}"
