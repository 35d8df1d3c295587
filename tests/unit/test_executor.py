import pytest

from gw2api import BlockingClient, Client, ClientExecutor


class TestSealedExecutor:
    def test_clients_are_executors(self):
        assert issubclass(Client, ClientExecutor)
        assert issubclass(BlockingClient, ClientExecutor)

    def test_foreign_subclass_is_refused(self):
        with pytest.raises(TypeError):
            class CustomExecutor(ClientExecutor):
                def send(self, request, target):
                    return None

    def test_foreign_subclass_of_client_is_refused(self):
        with pytest.raises(TypeError):
            class CustomClient(Client):
                pass
