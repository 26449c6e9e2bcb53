"""
檔案上傳測試
"""

from pathlib import Path

from app.config import get_settings

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 32


class TestUpload:
    """/api/upload"""

    def test_requires_login(self, client):
        response = client.post("/api/upload", files={"file": ("a.png", PNG_BYTES, "image/png")})
        assert response.status_code == 401

    def test_upload_image(self, admin_client):
        response = admin_client.post("/api/upload", files={"file": ("star.PNG", PNG_BYTES, "image/png")})
        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["fileType"] == "image"
        assert body["originalName"] == "star.PNG"
        assert body["size"] == len(PNG_BYTES)
        assert body["fileUrl"].startswith("http://testserver/uploads/images/image-")
        assert body["fileUrl"].endswith(".png")

        filename = body["fileUrl"].rsplit("/", 1)[1]
        assert (Path(get_settings().upload_dir) / "images" / filename).read_bytes() == PNG_BYTES

        # 上傳後的網址可直接作為圖片內容使用，且可以下載
        served = admin_client.get(body["fileUrl"])
        assert served.status_code == 200
        assert served.content == PNG_BYTES
        response = admin_client.put(
            "/api/content/2",
            json={"type": "image", "content": {"imageUrl": body["fileUrl"]}},
        )
        assert response.status_code == 200

    def test_upload_video(self, admin_client):
        response = admin_client.post("/api/upload", files={"file": ("clip.mp4", b"video-bytes", "video/mp4")})
        assert response.status_code == 200
        assert response.json()["fileType"] == "video"
        assert "/uploads/videos/" in response.json()["fileUrl"]
        assert response.json()["fileUrl"].endswith(".mp4")

    def test_extension_comes_from_content_type(self, admin_client):
        """檔名是 .html 的 PNG 仍以 .png 存放與提供"""
        response = admin_client.post("/api/upload", files={"file": ("x.html", PNG_BYTES, "image/png")})
        assert response.status_code == 200
        assert response.json()["originalName"] == "x.html"
        file_url = response.json()["fileUrl"]
        assert file_url.endswith(".png")

        served = admin_client.get(file_url)
        assert served.headers["content-type"] == "image/png"

    def test_svg_is_rejected(self, admin_client):
        svg = b"<svg xmlns=\"http://www.w3.org/2000/svg\"><script>alert(1)</script></svg>"
        response = admin_client.post("/api/upload", files={"file": ("a.svg", svg, "image/svg+xml")})
        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "file"

    def test_unsupported_type(self, admin_client):
        response = admin_client.post("/api/upload", files={"file": ("notes.txt", b"hello", "text/plain")})
        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "file"

    def test_file_too_large(self, admin_client, monkeypatch):
        monkeypatch.setattr(get_settings(), "max_upload_size", 16)
        response = admin_client.post("/api/upload", files={"file": ("a.png", PNG_BYTES, "image/png")})
        assert response.status_code == 400
        assert response.json()["message"] == "File too large"

    def test_missing_file(self, admin_client):
        response = admin_client.post("/api/upload")
        assert response.status_code == 400
