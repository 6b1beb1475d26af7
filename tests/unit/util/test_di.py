"""Unit tests for provider selection and the test container."""

import pytest
from dishka import make_async_container

from threadline.adapter.revalidation import RecordingPathRevalidator
from threadline.config import Settings
from threadline.domain.service import PathRevalidator
from threadline.util.di import (
    PersistenceProvider,
    ProdConfigProvider,
    ProdPersistenceProvider,
    ProdRevalidationProvider,
    RevalidationProvider,
    get_provider,
)
from threadline.util.di.base import ProviderBase
from threadline.util.error import ConfigurationError, DependencyInjectionError
from tests.di import (
    MockPersistenceProvider,
    MockRevalidationProvider,
    build_test_container,
)


class OrphanProvider(ProviderBase):
    __mock_component__ = "persistence"


class OnlyMockOrphan(OrphanProvider):
    __is_mock__ = True


class TestGetProvider:
    """Tests for get_provider()."""

    def test_concrete_provider_is_returned_as_is(self):
        assert get_provider(ProdConfigProvider) is ProdConfigProvider

    def test_selects_by_mock_flag(self):
        assert get_provider(PersistenceProvider) is ProdPersistenceProvider
        assert get_provider(PersistenceProvider, use_mock=True) is MockPersistenceProvider
        assert get_provider(RevalidationProvider) is ProdRevalidationProvider
        assert (
            get_provider(RevalidationProvider, use_mock=True)
            is MockRevalidationProvider
        )

    def test_missing_implementation_raises(self):
        with pytest.raises(DependencyInjectionError, match="No production"):
            get_provider(OrphanProvider, use_mock=False)


class TestBuildTestContainer:
    """Tests for build_test_container()."""

    def test_unknown_component_is_rejected(self):
        with pytest.raises(ValueError, match="Unknown components"):
            build_test_container(unmock={"search"})

    @pytest.mark.asyncio
    async def test_mocks_are_wired_by_default(self):
        container = build_test_container()
        try:
            async with container() as request_container:
                revalidator = await request_container.get(PathRevalidator)
                assert isinstance(revalidator, RecordingPathRevalidator)
        finally:
            await container.close()


class TestRevalidationProvider:
    """Tests for the production revalidation provider."""

    @pytest.mark.asyncio
    async def test_non_http_webhook_url_is_a_configuration_error(self, monkeypatch):
        monkeypatch.setenv("REVALIDATION__WEBHOOK_URL", "ftp://example.com/hook")
        container = make_async_container(ProdConfigProvider(), ProdRevalidationProvider())
        try:
            with pytest.raises(ConfigurationError):
                await container.get(PathRevalidator)
        finally:
            await container.close()

    def test_settings_default_profile_edit_path(self):
        assert Settings().revalidation.profile_edit_path == "/profile/edit"
