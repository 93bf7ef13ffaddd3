"""Tests for the lazily imported top-level ``wren`` namespace."""

import pytest

import wren


class TestRegistry:
    @pytest.mark.parametrize("name", wren.__all__)
    def test_public_name_resolves(self, name: str) -> None:
        assert getattr(wren, name) is not None

    def test_registry_matches_all(self) -> None:
        assert set(wren._LAZY_IMPORTS) == set(wren.__all__)

    def test_unknown_name(self) -> None:
        with pytest.raises(AttributeError, match="no attribute 'ThisDoesNotExist'"):
            wren.__getattr__("ThisDoesNotExist")


class TestResolvedObjects:
    def test_signals_are_shared_with_app(self) -> None:
        assert wren.END is wren.App.END
        assert wren.SKIP is wren.App.SKIP

    def test_location_is_middleware_factory(self) -> None:
        from wren.middleware.accessors import LocationMiddleware

        assert isinstance(wren.location(), LocationMiddleware)

    def test_default_buffer_satisfies_protocol(self) -> None:
        assert isinstance(wren.MemoryBuffer(), wren.Buffer)
