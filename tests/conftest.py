import json

import httpx
import pytest

BASE_URL = "https://validator.test/validate-name"


def remote_validator(request: httpx.Request) -> httpx.Response:
    """Stand-in for the remote service, keyed on the normalized name."""
    name = request.url.params.get("name", "")
    if name == "Jason Smith":
        return httpx.Response(200, json={"message": "Name is valid."})
    if name == "Unreachable":
        raise httpx.ConnectError("connection refused", request=request)
    if name == "Timeout":
        raise httpx.ReadTimeout("timed out", request=request)
    if name == "Maria Lopez" or name == "Luc O'Connor":
        return httpx.Response(200, json={"message": f"{name} is valid."})
    return httpx.Response(400, text="<html>bad request</html>")


@pytest.fixture
def users_file(tmp_path):
    def write(names):
        path = tmp_path / "users.json"
        path.write_text(json.dumps(names, ensure_ascii=False), encoding="utf-8")
        return path

    return write
