"""Tests for external integration connectivity helpers."""

from __future__ import annotations

import pytest
import pytest_mock

from shopassist.config.settings import get_settings
from shopassist.integrations.checks import check_catalog, run_all_checks


@pytest.fixture(autouse=True)
def _setup_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CATALOG_BASE_URL", "https://catalog.test")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.mark.asyncio
async def test_check_catalog_success(mocker: pytest_mock.MockerFixture) -> None:
    client_mock = mocker.patch("shopassist.integrations.checks.CatalogClient", autospec=True)
    instance = client_mock.return_value
    instance.ping = mocker.AsyncMock(return_value=True)
    instance.close = mocker.AsyncMock(return_value=None)

    result = await check_catalog()

    assert result.success
    instance.ping.assert_awaited_once()
    instance.close.assert_awaited_once()


@pytest.mark.asyncio
async def test_check_catalog_failure(mocker: pytest_mock.MockerFixture) -> None:
    client_mock = mocker.patch("shopassist.integrations.checks.CatalogClient", autospec=True)
    instance = client_mock.return_value
    instance.ping = mocker.AsyncMock(return_value=False)
    instance.close = mocker.AsyncMock(return_value=None)

    results = await run_all_checks()

    assert [result.name for result in results] == ["Catalog"]
    assert not results[0].success
    assert "non-success" in results[0].message.lower()
