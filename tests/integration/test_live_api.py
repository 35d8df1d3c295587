"""Smoke tests against the real API. Enabled with GW2_LIVE_TESTS=1."""

import os

import pytest

from gw2api import NoAccessTokenError
from gw2api.core.config import get_settings
from gw2api.infrastructure.api import ClientBuilder
from gw2api.domain.account.models import Account, TokenInfo
from gw2api.domain.content.models import Build, Color, Quaggan, World

pytestmark = [
    pytest.mark.live,
    pytest.mark.skipif(
        os.environ.get("GW2_LIVE_TESTS") != "1",
        reason="set GW2_LIVE_TESTS=1 to run against api.guildwars2.com"
    ),
]


@pytest.fixture(scope="module")
def settings():
    return get_settings()


@pytest.fixture(scope="module")
def live_client(settings):
    client = ClientBuilder.from_settings(settings).build_blocking()
    yield client
    client.close()


class TestLiveApi:
    def test_build(self, live_client):
        assert Build.get(live_client).id > 0

    def test_colors(self, live_client):
        colors = Color.get_many(live_client, [1, 2])
        assert {color.id for color in colors} == {1, 2}

    def test_worlds(self, live_client):
        assert len(World.get_all(live_client)) > 0

    def test_quaggan_ids(self, live_client):
        assert "box" in Quaggan.ids(live_client)

    def test_token_info(self, live_client, settings):
        if not settings.access_token:
            with pytest.raises(NoAccessTokenError):
                TokenInfo.get(live_client)
            return
        assert TokenInfo.get(live_client).id

    def test_account(self, live_client, settings):
        if not settings.access_token:
            pytest.skip("GW2_ACCESS_TOKEN not set")
        assert Account.get(live_client).name
