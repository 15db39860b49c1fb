from pathlib import Path

from app.config import UPLOAD_DIR
from app.upload_router import random_filename


def test_random_filename_keeps_extension():
    name = random_filename("Logo Société.PNG")
    assert name.endswith(".png")
    assert " " not in name
    assert random_filename("noext").count(".") == 0


def test_upload_stores_and_serves_file(client):
    resp = client.post("/api/upload", files={"file": ("logo.txt", b"hello", "text/plain")})
    assert resp.status_code == 200, resp.text
    url = resp.json()["publicUrl"]
    assert url.startswith("http://testserver/uploads/")

    name = url.rsplit("/", 1)[-1]
    assert (Path(UPLOAD_DIR) / name).read_bytes() == b"hello"
    assert client.get(f"/uploads/{name}").content == b"hello"


def test_upload_without_file(client):
    resp = client.post("/api/upload")
    assert resp.status_code == 400
    assert resp.json() == {"error": "No file uploaded"}
