"""
End-to-end tests: bootstrap, writes and HTTP reads over one moto-backed
DynamoDB, wired together the same way main() wires the real process.
"""

import pytest
from fastapi.testclient import TestClient

from fortune_api import (
    Fortune,
    FortuneReadApi,
    FortuneWriteApi,
    create_app,
)
from fortune_api.main import ensure_table

NOT_FOUND = {"message": "fortune not found"}


@pytest.fixture
def service(table_gateway, server_config):
    """Bootstrapped service: table ensured, app built on the shared gateway."""
    ensure_table(table_gateway)
    write_api = FortuneWriteApi(table_gateway)
    app = create_app(FortuneReadApi(table_gateway), server_config)
    with TestClient(app) as client:
        yield client, write_api


class TestFortuneService:

    def test_table_exists_before_first_request(self, table_gateway, server_config):
        assert table_gateway.table_exists() is False

        ensure_table(table_gateway)

        assert table_gateway.table_exists() is True
        with TestClient(create_app(FortuneReadApi(table_gateway), server_config)) as client:
            assert client.get("/fortunes").json() == []

    def test_inserted_fortune_is_served(self, service):
        client, write_api = service
        write_api.put(Fortune(id=7, name="lucky"))

        response = client.get("/fortunes/7")

        assert response.status_code == 200
        assert response.json() == {"id": 7, "name": "lucky"}

    @pytest.mark.parametrize("fortune_id", [0, 1, 8, 123456789])
    def test_absent_ids_are_404(self, service, fortune_id):
        client, write_api = service
        write_api.put(Fortune(id=7, name="lucky"))

        response = client.get(f"/fortunes/{fortune_id}")

        assert response.status_code == 404
        assert response.json() == NOT_FOUND

    def test_stored_empty_name_is_served(self, service):
        client, write_api = service
        write_api.put(Fortune(id=3, name=""))

        response = client.get("/fortunes/3")

        assert response.status_code == 200
        assert response.json() == {"id": 3, "name": ""}

    def test_list_reflects_inserts_and_deletes(self, service):
        client, write_api = service
        for i, text in enumerate(["alpha", "beta", "gamma"], start=1):
            write_api.put(Fortune(id=i, name=text))
        write_api.delete(Fortune(id=2))
        write_api.delete(Fortune(id=99))

        response = client.get("/fortunes")

        assert response.status_code == 200
        assert sorted(response.json(), key=lambda f: f["id"]) == [
            {"id": 1, "name": "alpha"},
            {"id": 3, "name": "gamma"},
        ]

    def test_list_exposes_only_id_and_name(self, service, mock_dynamodb_resource):
        client, _ = service
        mock_dynamodb_resource.Table('fortune-of-the-day').put_item(
            Item={'id': 5, 'name': 'five', 'internal_note': 'hidden'}
        )

        response = client.get("/fortunes")

        assert response.json() == [{"id": 5, "name": "five"}]

    def test_bootstrap_twice_keeps_data(self, table_gateway, service):
        client, write_api = service
        write_api.put(Fortune(id=1, name="survivor"))

        assert ensure_table(table_gateway) is False
        assert client.get("/fortunes/1").json() == {"id": 1, "name": "survivor"}
