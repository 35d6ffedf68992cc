"""
Figma REST API 讀取

讀取 Figma 檔案，走訪文件樹並整理成組件原始紀錄（名稱、實例數、使用情境、變體）。
"""

from typing import Optional

import requests


class FigmaAPIClient:
    """Figma REST API 唯讀封裝."""

    BASE_URL = "https://api.figma.com/v1"

    def __init__(self, token: str, timeout: float = 30):
        self.token = token
        self.timeout = timeout
        self.session = requests.Session()
        self.session.headers.update({
            "X-Figma-Token": token,
            "Content-Type": "application/json",
        })

    def get_file(self, file_key: str, node_ids: Optional[list] = None) -> dict:
        url = f"{self.BASE_URL}/files/{file_key}"
        params = {}
        if node_ids:
            params["ids"] = ",".join(node_ids)
        resp = self.session.get(url, params=params, timeout=self.timeout)
        resp.raise_for_status()
        return resp.json()


# 祖先節點名稱關鍵字 → 使用情境
_CONTEXT_KEYWORDS = [
    (("form",), "forms"),
    (("nav", "menu"), "navigation"),
    (("modal", "dialog"), "modals"),
    (("card", "list"), "content-display"),
    (("header", "footer"), "layout"),
]


class FigmaComponentCollector:
    """將 Figma 檔案 JSON 轉成組件原始紀錄清單."""

    def __init__(self):
        self._reset()

    def _reset(self) -> None:
        self._records: dict = {}
        self._owner: dict = {}
        self._contexts: dict = {}
        self._pages: dict = {}
        self._counts: dict = {}

    def collect(self, file_json: dict) -> list:
        """每次呼叫都重新累計，同一個 collector 可重複使用."""
        self._reset()
        document = file_json.get("document", {})
        instances: list = []

        for page in document.get("children", []):
            page_name = page.get("name", "Page")
            for node in page.get("children", []):
                self._walk(node, page_name, [], instances)

        for component_id, page_name, ancestors in instances:
            owner = self._owner.get(component_id)
            if owner is None:
                continue
            self._counts[owner] += 1
            if page_name not in self._pages[owner]:
                self._pages[owner].append(page_name)
            for ctx in self._contexts_from(ancestors):
                if ctx not in self._contexts[owner]:
                    self._contexts[owner].append(ctx)

        return [
            {
                "name": record["name"],
                "instanceCount": self._counts[owner_id],
                "usageContexts": self._contexts[owner_id],
                "variants": record["variants"],
                "pages": self._pages[owner_id],
            }
            for owner_id, record in self._records.items()
        ]

    def _walk(self, node: dict, page_name: str, ancestors: list, instances: list) -> None:
        node_type = node.get("type")
        node_id = node.get("id", "")

        if node_type == "COMPONENT_SET":
            self._register(node_id, node.get("name", "Unnamed"))
            for child in node.get("children", []):
                if child.get("type") == "COMPONENT":
                    self._records[node_id]["variants"].append(child.get("name", "default"))
                    self._owner[child.get("id", "")] = node_id
        elif node_type == "COMPONENT" and node_id not in self._owner:
            self._register(node_id, node.get("name", "Unnamed"))
        elif node_type == "INSTANCE" and node.get("componentId"):
            instances.append((node["componentId"], page_name, list(ancestors)))

        child_ancestors = ancestors + [node.get("name", "")]
        for child in node.get("children", []):
            self._walk(child, page_name, child_ancestors, instances)

    def _register(self, node_id: str, name: str) -> None:
        self._records[node_id] = {"name": name, "variants": []}
        self._owner[node_id] = node_id
        self._contexts[node_id] = []
        self._pages[node_id] = []
        self._counts[node_id] = 0

    def _contexts_from(self, ancestors: list) -> list:
        found = []
        # 由近到遠
        for name in reversed(ancestors):
            lower = (name or "").lower()
            for keywords, context in _CONTEXT_KEYWORDS:
                if any(k in lower for k in keywords) and context not in found:
                    found.append(context)
        return found


def fetch_raw_components(token: str, file_key: str) -> tuple:
    """回傳 (檔名, 原始組件紀錄)."""
    client = FigmaAPIClient(token)
    file_json = client.get_file(file_key)
    return file_json.get("name", file_key), FigmaComponentCollector().collect(file_json)
