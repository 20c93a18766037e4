# authclient/services/api.py

import os
import requests
from dotenv import load_dotenv

load_dotenv()

# Base URL of the FastAPI backend
FASTAPI_URL = os.getenv("AUTH_SERVER_URL", "http://localhost:8000")

REQUEST_TIMEOUT = 10


# -------------------------------
# Authentication-related functions
# -------------------------------

def _post_credentials(path, username, password, base_url=None):
    url = f"{(base_url or FASTAPI_URL).rstrip('/')}{path}"
    try:
        response = requests.post(
            url,
            json={"username": username, "password": password},
            timeout=REQUEST_TIMEOUT,
        )
    except requests.RequestException as e:
        return {"ok": False, "message": f"Server unreachable: {e}"}

    try:
        data = response.json()
    except ValueError:
        return {"ok": False, "message": f"Unexpected response ({response.status_code})"}

    if response.status_code == 200:
        return {"ok": True, "message": data.get("message", "")}

    detail = data.get("detail", data.get("message", "Request failed"))
    if not isinstance(detail, str):
        # FastAPI validation errors arrive as a list of problems.
        detail = "Username and password are required."
    return {"ok": False, "message": detail}


def register_user(username, password, base_url=None):
    """
    Registers a new user. Returns {"ok": bool, "message": str}.
    """
    return _post_credentials("/api/auth/register", username, password, base_url)


def login_user(username, password, base_url=None):
    """
    Checks a username/password pair. Returns {"ok": bool, "message": str}.
    """
    return _post_credentials("/api/auth/login", username, password, base_url)
