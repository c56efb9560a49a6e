"""
Product Store clients

Products are JSON documents keyed by product id. ``HttpProductStore`` talks
to a KV namespace over its REST API; ``InMemoryProductStore`` serves a
catalogue held in memory (optionally loaded from a JSON file).
"""
import json
from urllib.parse import quote
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

import httpx


class ProductStoreError(Exception):
    """Unexpected answer from the Product Store"""
    pass


class ProductStore(ABC):
    """Key -> JSON document lookup"""
    
    @abstractmethod
    async def list_keys(self) -> List[str]:
        """Return every product key in store order"""
    
    @abstractmethod
    async def get(self, key: str) -> Optional[Any]:
        """Return the document stored under ``key``, or None if there is none"""


class HttpProductStore(ProductStore):
    """
    Client for a KV namespace REST API
    
    Endpoints used, relative to ``base_url``:
    - ``GET /keys`` -> ``{"result": [{"name": ...}], "result_info": {"cursor": ...}}``
    - ``GET /values/{key}`` -> raw JSON document, 404 when absent
    """
    
    def __init__(
        self,
        base_url: str,
        token: Optional[str] = None,
        timeout: float = 5.0,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.headers = {"Accept": "application/json"}
        if token:
            self.headers["Authorization"] = f"Bearer {token}"
        self.transport = transport
    
    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url,
            headers=self.headers,
            timeout=self.timeout,
            transport=self.transport
        )
    
    async def list_keys(self) -> List[str]:
        """
        List all keys in the namespace, following result cursors
        
        Raises:
            ProductStoreError: If the namespace answers with a non-200 status
        """
        keys: List[str] = []
        params: Dict[str, str] = {}
        
        async with self._client() as client:
            while True:
                response = await client.get("/keys", params=params)
                if response.status_code != 200:
                    raise ProductStoreError(
                        f"Listing product keys failed with status {response.status_code}"
                    )
                
                data = response.json()
                keys.extend(entry["name"] for entry in data.get("result", []))
                
                cursor = (data.get("result_info") or {}).get("cursor")
                if not cursor:
                    break
                params = {"cursor": cursor}
        
        return keys
    
    async def get(self, key: str) -> Optional[Any]:
        """
        Fetch a product document
        
        Raises:
            ProductStoreError: If the namespace answers with an unexpected status
        """
        async with self._client() as client:
            response = await client.get(f"/values/{quote(key, safe='')}")
        
        if response.status_code == 404:
            return None
        if response.status_code != 200:
            raise ProductStoreError(
                f"Fetching product {key} failed with status {response.status_code}"
            )
        return response.json()


class InMemoryProductStore(ProductStore):
    """Product catalogue held in a dict, in insertion order"""
    
    def __init__(self, products: Optional[Dict[str, Any]] = None):
        self.products = dict(products or {})
    
    @classmethod
    def from_file(cls, path: str) -> "InMemoryProductStore":
        """Load a catalogue from a JSON object mapping key -> document"""
        with open(path, encoding="utf-8") as fh:
            products = json.load(fh)
        if not isinstance(products, dict):
            raise ProductStoreError(f"{path} must contain a JSON object of products")
        return cls(products)
    
    async def list_keys(self) -> List[str]:
        return list(self.products)
    
    async def get(self, key: str) -> Optional[Any]:
        return self.products.get(key)
