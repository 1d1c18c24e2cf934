"""API client for the user manager backend"""
import os
import httpx
from typing import Any, Dict, List, Optional


class APIError(Exception):
    """Raised when the API answers with an error status"""

    def __init__(self, status_code: int, detail: Any):
        super().__init__(f"{status_code}: {detail}")
        self.status_code = status_code
        self.detail = detail


class APIClient:
    """Client for communicating with the FastAPI backend"""

    def __init__(
        self,
        base_url: str = "http://localhost:5000",
        api_prefix: str = "",
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.base_url = base_url.rstrip("/")
        self.api_prefix = api_prefix
        self.transport = transport

    def _url(self, path: str) -> str:
        return f"{self.base_url}{self.api_prefix}{path}"

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=self.transport)

    @staticmethod
    def _handle(response: httpx.Response) -> Any:
        """Return the JSON body or raise APIError with the server's detail"""
        if response.is_error:
            try:
                body = response.json()
            except ValueError:
                body = None
            if isinstance(body, dict) and "detail" in body:
                detail = body["detail"]
            else:
                detail = response.text
            raise APIError(response.status_code, detail)
        return response.json()

    async def list_users(self) -> List[Dict[str, Any]]:
        async with self._client() as client:
            response = await client.get(self._url("/users"))
            return self._handle(response)

    async def create_user(self, name: str, email: str, role: str) -> Dict[str, Any]:
        async with self._client() as client:
            response = await client.post(
                self._url("/users"),
                json={"name": name, "email": email, "role": role}
            )
            return self._handle(response)

    async def update_user(self, user_id: int, name: str, email: str, role: str) -> Dict[str, Any]:
        async with self._client() as client:
            response = await client.put(
                self._url(f"/users/{user_id}"),
                json={"name": name, "email": email, "role": role}
            )
            return self._handle(response)

    async def delete_user(self, user_id: int) -> Dict[str, Any]:
        async with self._client() as client:
            response = await client.delete(self._url(f"/users/{user_id}"))
            return self._handle(response)


# Global API client instance
api_client = APIClient(
    base_url=os.getenv("USER_MANAGER_API_URL", "http://localhost:5000"),
    api_prefix=os.getenv("USER_MANAGER_API_PREFIX", "")
)
