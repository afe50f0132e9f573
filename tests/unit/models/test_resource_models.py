# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

import pytest

from cosmosdb_sdk.models.query import SqlQuery
from cosmosdb_sdk.models.resource import AsyncCall, Collection, Database, Document, StoredProcedure

PAYLOAD = {
    "id": "o-1",
    "total": 10,
    "_rid": "abc==",
    "_self": "dbs/abc==/colls/def==/docs/ghi==/",
    "_etag": '"0000-1"',
    "_ts": 1700000000,
    "_attachments": "attachments/",
}


class TestDocument:
    def test_from_dict_splits_system_properties(self):
        doc = Document.from_dict(PAYLOAD)
        assert doc.id == "o-1"
        assert doc.rid == "abc=="
        assert doc.self_link == "dbs/abc==/colls/def==/docs/ghi==/"
        assert doc.etag == '"0000-1"'
        assert doc.ts == 1700000000
        assert dict(doc.data) == {"total": 10, "_attachments": "attachments/"}

    def test_underscore_user_properties_survive_round_trip(self):
        payload = {"id": "x", "_etag": '"e"', "_meta": {"owner": "a"}, "v": 1}
        doc = Document.from_dict(payload)
        assert doc["_meta"] == {"owner": "a"}
        assert doc.to_dict() == payload

    def test_dict_access(self):
        doc = Document(id="o-1", data={"total": 10})
        assert doc["total"] == 10
        doc["status"] = "open"
        assert "status" in doc
        assert len(doc) == 2
        assert sorted(doc) == ["status", "total"]
        del doc["status"]
        assert doc.get("status", "none") == "none"
        with pytest.raises(KeyError):
            doc["missing"]

    def test_to_dict(self):
        doc = Document(id="o-1", etag='"e"', data={"total": 10})
        assert doc.to_dict() == {"id": "o-1", "_etag": '"e"', "total": 10}

    def test_rejects_non_object(self):
        with pytest.raises(TypeError):
            Document.from_dict(["not", "an", "object"])


def test_database_links():
    db = Database.from_dict({"id": "d1", "_rid": "r", "_colls": "colls/", "_users": "users/"})
    assert (db.id, db.rid, db.colls, db.users) == ("d1", "r", "colls/", "users/")
    assert db.to_dict() == {"id": "d1", "_rid": "r"}


def test_collection_indexing_policy():
    policy = {"indexingMode": "consistent"}
    coll = Collection.from_dict({"id": "c1", "indexingPolicy": policy, "_docs": "docs/"})
    assert coll.indexing_policy == policy
    assert coll.docs == "docs/"
    assert Collection(id="c1", indexing_policy=policy).to_dict() == {"id": "c1", "indexingPolicy": policy}
    assert Collection(id="c1").to_dict() == {"id": "c1"}


def test_stored_procedure_body():
    sproc = StoredProcedure.from_dict({"id": "sp", "body": "function () {}"})
    assert sproc.body == "function () {}"
    assert sproc.to_dict() == {"id": "sp", "body": "function () {}"}


def test_async_call_defaults_to_empty_token():
    assert AsyncCall().etag == ""
    assert AsyncCall("e1") == AsyncCall(etag="e1")


class TestSqlQuery:
    def test_plain(self):
        assert SqlQuery.build("SELECT * FROM c").to_dict() == {"query": "SELECT * FROM c"}

    def test_mapping_parameters_get_at_prefix(self):
        q = SqlQuery.build("SELECT * FROM c WHERE c.a = @a AND c.b = @b", {"@a": 1, "b": "x"})
        assert q.parameters == [{"name": "@a", "value": 1}, {"name": "@b", "value": "x"}]

    def test_list_parameters_kept(self):
        params = [{"name": "@a", "value": 1}]
        assert SqlQuery.build("q", params).parameters == params

    def test_rejects_non_string(self):
        with pytest.raises(TypeError):
            SqlQuery.build(42)
