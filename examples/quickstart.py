# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Walk through database, collection and document operations against a Cosmos DB account.

Usage::

    COSMOS_ENDPOINT=https://myaccount.documents.azure.com COSMOS_KEY=... python examples/quickstart.py
"""

import logging
import os
import sys
from pathlib import Path

# Add src to PYTHONPATH for local runs
sys.path.append(str(Path(__file__).resolve().parents[1] / "src"))

from cosmosdb_sdk import CosmosClient, CosmosConfig, StatusMismatchError
from cosmosdb_sdk.models.resource import Document

endpoint = os.environ.get("COSMOS_ENDPOINT") or input("Cosmos DB endpoint: ").strip()
key = os.environ.get("COSMOS_KEY") or input("Master key: ").strip()
if not endpoint or not key:
	print("Endpoint and key are required; exiting.")
	sys.exit(1)

debug = (os.environ.get("COSMOS_DEBUG", "n").lower() in ("y", "yes", "true", "1"))
logging.basicConfig(level=logging.INFO)

def log_call(call: str) -> None:
	print({"call": call})

with CosmosClient(endpoint, key, CosmosConfig(debug=debug)) as client:
	log_call("client.databases.create('quickstart')")
	db = client.databases.create("quickstart")
	try:
		log_call("client.collections.create('quickstart', 'items')")
		client.collections.create("quickstart", "items")

		log_call("client.documents.create(...)")
		doc = client.documents.create("quickstart", "items", {"id": "item-1", "qty": 3})
		print({"id": doc.id, "etag": doc.etag, "qty": doc["qty"]})

		doc["qty"] = 4
		log_call("client.documents.replace_async(...)")
		client.documents.replace_async("quickstart", "items", doc)

		log_call("client.query(...)")
		body = client.query(
			"dbs/quickstart/colls/items/docs",
			"SELECT * FROM c WHERE c.qty > @min",
			parameters={"@min": 1},
		)
		for row in body.get("Documents", []):
			print(Document.from_dict(row).to_dict())

		log_call("client.delete('dbs/quickstart/colls/items/docs/item-1')")
		client.delete("dbs/quickstart/colls/items/docs/item-1")
		try:
			client.delete("dbs/quickstart/colls/items/docs/item-1")
		except StatusMismatchError as ex:
			print({"second_delete": ex.subcode, "service_error": str(ex.service_error)})
	finally:
		log_call(f"client.databases.delete({db.id!r})")
		client.databases.delete(db.id)
