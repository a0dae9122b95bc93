from httpx import AsyncClient


async def register(client: AsyncClient, payload: dict) -> str:
    """Register an account and return its bearer token"""
    response = await client.post("/auth/register", json=payload)
    assert response.status_code == 200, response.text
    return response.json()["token"]


def bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}
