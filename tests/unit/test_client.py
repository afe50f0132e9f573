# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

import json
import logging
import unittest
from unittest.mock import MagicMock

import pytest
import requests

from cosmosdb_sdk.client import ClientProtocol, CosmosClient
from cosmosdb_sdk.core.config import CosmosConfig
from cosmosdb_sdk.core.errors import AuthError, SerializationError, StatusMismatchError, TransportError
from cosmosdb_sdk.models.resource import AsyncCall, Document
from tests.unit.test_helpers import DummyHTTPClient, FakeCosmosService, FakeResponse

BASE = "https://account.example.com"
KEY = "dGVzdC1tYXN0ZXIta2V5"


def _client(transport, config=None):
    client = CosmosClient(BASE, KEY, config)
    client._get_rest()._http = transport
    return client


class TestCosmosClient(unittest.TestCase):
    def setUp(self):
        """Set up test fixtures before each test method."""
        self.client = CosmosClient(BASE + "/", KEY)
        # Replace the pipeline so facade wiring is verified without HTTP calls
        self.client._rest = MagicMock()

    def test_base_url_required(self):
        with self.assertRaises(ValueError):
            CosmosClient("", KEY)

    def test_credential_type_checked(self):
        with self.assertRaises(TypeError):
            CosmosClient(BASE, object())

    def test_get_uri_strips_trailing_slash(self):
        self.assertEqual(self.client.get_uri(), BASE)

    def test_satisfies_protocol(self):
        self.assertIsInstance(self.client, ClientProtocol)

    def test_read(self):
        self.client._rest._execute.return_value = {"id": "d1"}
        self.assertEqual(self.client.read("dbs/d1"), {"id": "d1"})
        self.client._rest._execute.assert_called_once_with("GET", "dbs/d1", 200, into=None)

    def test_delete(self):
        self.assertIsNone(self.client.delete("dbs/d1"))
        self.client._rest._execute.assert_called_once_with("DELETE", "dbs/d1", 204, discard=True)

    def test_create(self):
        self.client.create("dbs/d1/colls/c1/docs", {"id": "x"}, into=Document)
        self.client._rest._execute.assert_called_once_with("POST", "dbs/d1/colls/c1/docs", 201, {"id": "x"}, into=Document)

    def test_replace(self):
        self.client.replace("dbs/d1/colls/c1/docs/x", {"id": "x"})
        self.client._rest._execute.assert_called_once_with("PUT", "dbs/d1/colls/c1/docs/x", 200, {"id": "x"}, into=None)

    def test_execute(self):
        self.client.execute("dbs/d1/colls/c1/sprocs/sp", [1, 2])
        self.client._rest._execute.assert_called_once_with("POST", "dbs/d1/colls/c1/sprocs/sp", 200, [1, 2], into=None)

    def test_query(self):
        self.client.query("dbs/d1/colls/c1/docs", "SELECT * FROM c")
        args, kwargs = self.client._rest._execute.call_args
        self.assertEqual(args[:3], ("POST", "dbs/d1/colls/c1/docs", 200))
        self.assertEqual(args[3].to_dict(), {"query": "SELECT * FROM c"})
        self.assertTrue(kwargs["is_query"])

    def test_replace_async_threads_model_etag(self):
        doc = Document(id="x", etag="etag123")
        self.client.replace_async("dbs/d1/colls/c1/docs/x", doc)
        kwargs = self.client._rest._execute.call_args.kwargs
        self.assertEqual(kwargs["async_call"], AsyncCall(etag="etag123"))

    def test_replace_async_threads_mapping_etag(self):
        self.client.replace_async("dbs/d1/colls/c1/docs/x", {"id": "x", "_etag": "etag123"})
        kwargs = self.client._rest._execute.call_args.kwargs
        self.assertEqual(kwargs["async_call"], AsyncCall(etag="etag123"))

    def test_replace_async_without_etag(self):
        self.client.replace_async("dbs/d1/colls/c1/docs/x", {"id": "x"})
        kwargs = self.client._rest._execute.call_args.kwargs
        self.assertEqual(kwargs["async_call"], AsyncCall(etag=""))

    def test_debug_toggle(self):
        self.assertFalse(self.client.get_config().debug)
        self.client.enable_debug()
        self.client.enable_debug()
        self.assertTrue(self.client.get_config().debug)
        self.client.disable_debug()
        self.client.disable_debug()
        self.assertFalse(self.client.get_config().debug)

    def test_debug_toggle_updates_pipeline(self):
        self.client.enable_debug()
        self.assertIs(self.client._rest.config, self.client.get_config())

    def test_config_snapshot_is_stable(self):
        snapshot = self.client.get_config()
        self.client.enable_debug()
        self.assertFalse(snapshot.debug)

    def test_clients_do_not_share_debug_state(self):
        other = CosmosClient(BASE, KEY)
        self.client.enable_debug()
        self.assertFalse(other.get_config().debug)


# --- Scenarios against a scripted transport ---


def test_create_decodes_created_resource():
    transport = DummyHTTPClient([(201, {"id": "x", "v": 1, "_etag": "abc"})])
    out = _client(transport).create("dbs/d1/colls/c1/docs", {"id": "x", "v": 1})
    assert out == {"id": "x", "v": 1, "_etag": "abc"}
    sent = transport.sent[0]
    assert sent.method == "POST"
    assert json.loads(sent.body) == {"id": "x", "v": 1}
    assert transport.returned[0].closed


def test_delete_no_content():
    transport = DummyHTTPClient([FakeResponse(204)])
    assert _client(transport).delete("dbs/d1/colls/c1/docs/x") is None
    assert transport.returned[0].closed


def test_query_request_body_and_length():
    transport = DummyHTTPClient([(200, {"_rid": "r", "Documents": [{"id": "x"}], "_count": 1})])
    out = _client(transport).query("dbs/d1/colls/c1/docs", "SELECT * FROM c")
    sent = transport.sent[0]
    assert sent.body == b'{"query": "SELECT * FROM c"}'
    assert sent.headers["Content-Length"] == str(len(b'{"query": "SELECT * FROM c"}'))
    assert sent.headers["Content-Type"] == "application/query+json"
    assert out["Documents"] == [{"id": "x"}]


def test_query_with_parameters():
    transport = DummyHTTPClient([(200, {"Documents": []})])
    _client(transport).query("dbs/d1/colls/c1/docs", "SELECT * FROM c WHERE c.v = @v", parameters={"@v": 2})
    assert json.loads(transport.sent[0].body)["parameters"] == [{"name": "@v", "value": 2}]


def test_replace_async_headers_on_the_wire():
    transport = DummyHTTPClient([(200, {"id": "x"}), (200, {"id": "x"})])
    client = _client(transport)
    client.replace_async("dbs/d1/colls/c1/docs/x", Document(id="x", etag="etag123"))
    client.replace_async("dbs/d1/colls/c1/docs/x", {"id": "x"})
    first, second = transport.sent
    assert first.headers["If-Match"] == "etag123"
    assert first.headers["Prefer"] == "respond-async"
    assert "If-Match" not in second.headers
    assert second.headers["Prefer"] == "respond-async"


@pytest.mark.parametrize(
    "call, status",
    [
        (lambda c: c.read("dbs/d1/colls/c1/docs/x"), 404),
        (lambda c: c.delete("dbs/d1/colls/c1/docs/x"), 404),
        (lambda c: c.query("dbs/d1/colls/c1/docs", "SELECT * FROM c"), 400),
        (lambda c: c.create("dbs/d1/colls/c1/docs", {"id": "x"}), 409),
        (lambda c: c.replace("dbs/d1/colls/c1/docs/x", {"id": "x"}), 412),
        (lambda c: c.replace_async("dbs/d1/colls/c1/docs/x", {"id": "x"}), 412),
        (lambda c: c.execute("dbs/d1/colls/c1/sprocs/sp", []), 400),
    ],
)
def test_every_verb_raises_on_unexpected_status(call, status):
    transport = DummyHTTPClient([(status, {"code": "Failed", "message": "nope"})])
    with pytest.raises(StatusMismatchError) as ei:
        call(_client(transport))
    assert ei.value.status_code == status
    assert ei.value.service_error.code == "Failed"
    assert ei.value.request is not None
    assert transport.returned[0].closed


def test_transport_failure_surfaces():
    transport = DummyHTTPClient([requests.exceptions.Timeout("timed out")])
    with pytest.raises(TransportError):
        _client(transport).read("dbs/d1")


def test_unserializable_body_sends_nothing():
    transport = DummyHTTPClient([])
    with pytest.raises(SerializationError):
        _client(transport).create("dbs/d1/colls/c1/docs", {"bad": {1, 2}})
    assert transport.sent == []


def test_malformed_key_sends_nothing():
    client = CosmosClient(BASE, "%%% not base64 %%%")
    transport = DummyHTTPClient([])
    client._get_rest()._http = transport
    with pytest.raises(AuthError):
        client.read("dbs/d1")
    assert transport.sent == []


def test_collection_create_provisions_throughput():
    transport = DummyHTTPClient([(201, {"id": "c1"})])
    _client(transport, CosmosConfig(offer_throughput=800)).create("dbs/d1/colls", {"id": "c1"})
    assert transport.sent[0].headers["x-ms-offer-throughput"] == "800"


def test_enable_then_disable_debug_leaves_no_logging(caplog):
    caplog.set_level(logging.DEBUG, logger="cosmosdb_sdk")
    transport = DummyHTTPClient([(200, {"id": "d1"})])
    client = _client(transport, CosmosConfig(verbose=True))
    client.enable_debug()
    client.disable_debug()
    client.read("dbs/d1")
    assert client.get_config().debug is False
    assert [r for r in caplog.records if r.name == "cosmosdb_sdk"] == []
    assert "x-ms-documentdb-populatequerymetrics" not in transport.sent[0].headers


def test_enable_debug_adds_query_metrics():
    transport = DummyHTTPClient([(200, {"id": "d1"})])
    client = _client(transport)
    client.enable_debug()
    client.read("dbs/d1")
    assert transport.sent[0].headers["x-ms-documentdb-populatequerymetrics"] == "True"


# --- Properties against the in-memory service ---


@pytest.mark.parametrize(
    "body",
    [
        {"id": "a", "v": 1},
        {"id": "b", "nested": {"list": [1, 2.5, None, True], "text": "héllo"}},
        {"id": "c", "empty": {}, "items": []},
    ],
)
def test_create_then_read_round_trip(body):
    service = FakeCosmosService(BASE)
    client = _client(service)
    created = client.create("dbs/d1/colls/c1/docs", body)
    read = client.read(f"dbs/d1/colls/c1/docs/{body['id']}")
    assert read == created
    assert {k: v for k, v in read.items() if not k.startswith("_")} == body


def test_delete_twice_is_a_recognizable_error():
    service = FakeCosmosService(BASE)
    client = _client(service)
    client.create("dbs/d1/colls/c1/docs", {"id": "x"})
    client.delete("dbs/d1/colls/c1/docs/x")
    for _ in range(2):
        with pytest.raises(StatusMismatchError) as ei:
            client.delete("dbs/d1/colls/c1/docs/x")
        assert ei.value.status_code == 404
        assert ei.value.service_error.code == "NotFound"


def test_replace_async_detects_lost_update():
    service = FakeCosmosService(BASE)
    client = _client(service)
    doc = client.create("dbs/d1/colls/c1/docs", {"id": "x", "v": 1}, into=Document)
    client.replace("dbs/d1/colls/c1/docs/x", {"id": "x", "v": 2})
    doc["v"] = 3
    with pytest.raises(StatusMismatchError) as ei:
        client.replace_async("dbs/d1/colls/c1/docs/x", doc)
    assert ei.value.status_code == 412


def test_document_replace_keeps_underscore_properties():
    service = FakeCosmosService(BASE)
    client = _client(service)
    client.create("dbs/d1/colls/c1/docs", {"id": "x", "_meta": {"owner": "a"}, "v": 1})

    doc = client.documents.get("d1", "c1", "x")
    doc["v"] = 2
    client.documents.replace("d1", "c1", doc)

    stored = client.read("dbs/d1/colls/c1/docs/x")
    assert stored["_meta"] == {"owner": "a"}
    assert stored["v"] == 2


@pytest.mark.parametrize(
    "query, parameters",
    [(None, None), (42, None), ("SELECT * FROM c", [1])],
)
def test_malformed_query_raises_serialization_error(query, parameters):
    transport = DummyHTTPClient([])
    client = _client(transport)
    with pytest.raises(SerializationError) as ei:
        client.query("dbs/d1/colls/c1/docs", query, parameters=parameters)
    assert ei.value.resource_type == "docs"
    assert ei.value.resource_id == "dbs/d1/colls/c1"
    assert transport.sent == []
