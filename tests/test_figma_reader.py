"""
Figma REST API 讀取測試（不連網，以 mock session 與假檔案 JSON 測試）
"""
from unittest.mock import MagicMock, patch

import pytest
import requests

from devibe_docs.figma_reader import FigmaAPIClient, FigmaComponentCollector, fetch_raw_components


def make_file():
    return {
        "name": "Acme UI",
        "document": {
            "children": [
                {
                    "name": "Components",
                    "children": [
                        {
                            "id": "1:0",
                            "type": "COMPONENT_SET",
                            "name": "Button",
                            "children": [
                                {"id": "1:1", "type": "COMPONENT", "name": "default"},
                                {"id": "1:2", "type": "COMPONENT", "name": "hover"},
                            ],
                        },
                        {"id": "2:0", "type": "COMPONENT", "name": "Icon/Star"},
                    ],
                },
                {
                    "name": "Checkout",
                    "children": [
                        {
                            "id": "3:0",
                            "type": "FRAME",
                            "name": "Checkout Form",
                            "children": [
                                {
                                    "id": "3:1",
                                    "type": "FRAME",
                                    "name": "Footer",
                                    "children": [
                                        {"id": "3:2", "type": "INSTANCE", "name": "Button", "componentId": "1:2"},
                                    ],
                                },
                                {"id": "3:3", "type": "INSTANCE", "name": "Button", "componentId": "1:1"},
                                {"id": "3:4", "type": "INSTANCE", "name": "Ghost", "componentId": "9:9"},
                            ],
                        },
                    ],
                },
                {
                    "name": "Home",
                    "children": [
                        {"id": "4:0", "type": "INSTANCE", "name": "Star", "componentId": "2:0"},
                    ],
                },
            ],
        },
    }


# ─── FigmaComponentCollector ─────────────────────────────────────────────────

class TestCollector:

    def setup_method(self):
        self.records = {r["name"]: r for r in FigmaComponentCollector().collect(make_file())}

    def test_component_set_and_standalone_registered(self):
        assert set(self.records) == {"Button", "Icon/Star"}

    def test_variants_from_component_set(self):
        assert self.records["Button"]["variants"] == ["default", "hover"]
        assert self.records["Icon/Star"]["variants"] == []

    def test_instances_counted_against_set(self):
        assert self.records["Button"]["instanceCount"] == 2
        assert self.records["Icon/Star"]["instanceCount"] == 1

    def test_pages_recorded(self):
        assert self.records["Button"]["pages"] == ["Checkout"]
        assert self.records["Icon/Star"]["pages"] == ["Home"]

    def test_contexts_nearest_ancestor_first(self):
        assert self.records["Button"]["usageContexts"] == ["layout", "forms"]
        assert self.records["Icon/Star"]["usageContexts"] == []


def test_collect_empty_document():
    assert FigmaComponentCollector().collect({}) == []


def test_collector_reuse_does_not_accumulate():
    collector = FigmaComponentCollector()
    collector.collect(make_file())
    records = {r["name"]: r for r in collector.collect(make_file())}
    assert records["Button"]["instanceCount"] == 2
    assert collector.collect({}) == []


# ─── FigmaAPIClient ──────────────────────────────────────────────────────────

def test_client_sets_token_header():
    client = FigmaAPIClient("secret-token")
    assert client.session.headers["X-Figma-Token"] == "secret-token"


def test_get_file_requests_file_endpoint():
    client = FigmaAPIClient("t", timeout=5)
    response = MagicMock()
    response.json.return_value = {"name": "Acme UI"}
    with patch.object(client.session, "get", return_value=response) as mock_get:
        assert client.get_file("ABC", node_ids=["1:0", "2:0"]) == {"name": "Acme UI"}
    mock_get.assert_called_once_with(
        "https://api.figma.com/v1/files/ABC", params={"ids": "1:0,2:0"}, timeout=5
    )
    response.raise_for_status.assert_called_once()


def test_get_file_propagates_http_error():
    client = FigmaAPIClient("t")
    response = MagicMock()
    response.raise_for_status.side_effect = requests.HTTPError("403")
    with patch.object(client.session, "get", return_value=response):
        with pytest.raises(requests.HTTPError):
            client.get_file("ABC")


def test_fetch_raw_components():
    with patch.object(FigmaAPIClient, "get_file", return_value=make_file()):
        file_name, records = fetch_raw_components("t", "ABC")
    assert file_name == "Acme UI"
    assert len(records) == 2
