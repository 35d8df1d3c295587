import pytest

from gw2api import ApiError, BlockingClient, Client, NoAccessTokenError
from gw2api.domain.account.models import Account, TokenInfo
from gw2api.domain.content.models import Build, Color


class TestBlockingClient:
    def test_returns_value(self, blocking_client, mock_api):
        build = Build.get(blocking_client)
        assert isinstance(build, Build)
        assert build.id == 115267
        assert mock_api.calls == 1

    def test_raises_api_error(self, blocking_client):
        with pytest.raises(ApiError) as exc_info:
            Color.get(blocking_client, 9999)
        assert exc_info.value.text == "not found"

    def test_no_access_token_without_network(self, mock_api):
        with Client.builder().transport(mock_api.transport).build_blocking() as client:
            with pytest.raises(NoAccessTokenError):
                Account.get(client)
        assert mock_api.calls == 0

    def test_token_info(self, blocking_client, mock_api):
        mock_api.add("/v2/tokeninfo", {
            "id": "ABCDE02B-8888-FEBA-1234-DE98765C7DEF",
            "name": "My API Key",
            "permissions": ["account", "characters", "guilds"],
            "type": "APIKey",
        })
        info = TokenInfo.get(blocking_client)
        assert info.name == "My API Key"
        assert mock_api.last.headers["Authorization"].startswith("Bearer ")

    def test_clone_shares_runtime(self, blocking_client, mock_api):
        clone = blocking_client.clone()
        assert isinstance(clone, BlockingClient)
        assert clone.runtime is blocking_client.runtime

        Build.get(clone)
        Build.get(blocking_client)
        assert mock_api.calls == 2

    def test_closed_runtime_refuses_work(self, mock_api):
        client = Client.builder().transport(mock_api.transport).build_blocking()
        client.close()
        client.close()

        assert client.runtime.closed
        with pytest.raises(RuntimeError):
            Build.get(client)

    def test_closing_clone_keeps_original_working(self, blocking_client, mock_api):
        clone = blocking_client.clone()
        assert blocking_client.runtime.owners == 2

        clone.close()

        assert clone.closed
        assert not blocking_client.runtime.closed
        assert Build.get(blocking_client).id == 115267
        assert mock_api.calls == 1

    def test_closed_clone_refuses_work(self, blocking_client):
        clone = blocking_client.clone()
        clone.close()
        with pytest.raises(RuntimeError):
            Build.get(clone)

    def test_last_close_releases_runtime(self, mock_api):
        client = Client.builder().transport(mock_api.transport).build_blocking()
        clone = client.clone()

        client.close()
        assert not clone.runtime.closed
        Build.get(clone)

        clone.close()
        assert clone.runtime.closed
        assert clone.runtime.owners == 0

    @pytest.mark.asyncio
    async def test_refuses_running_event_loop(self, blocking_client, mock_api):
        with pytest.raises(RuntimeError, match="running event loop"):
            Build.get(blocking_client)
        assert mock_api.calls == 0
