"""Helpers shared by the end-to-end tests."""


def register(client, username: str = "pixel_pusher", password: str = "Invoice42"):
    """Register an account; the client keeps the auth cookie."""
    response = client.post(
        "/api/auth/register",
        json={
            "email": f"{username}@example.com",
            "username": username,
            "password": password,
            "confirmPassword": password,
        },
    )
    assert response.status_code == 201, response.text
    return response.json()
