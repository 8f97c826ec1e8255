"""
Shared endpoints for client integration tests.

Real-world endpoints with varying status codes, content types and redirects.
"""

BASE_URL = "https://httpbin.org"

# ---- (path, content-type prefix) pairs expected to return 200 ----
JSON_PATHS = [
    ("/get", "application/json"),
    ("/headers", "application/json"),
    ("/anything/users/1", "application/json"),
]

OTHER_CONTENT_PATHS = [
    ("/xml", "application/xml"),
    ("/html", "text/html"),
    ("/robots.txt", "text/plain"),
    ("/image/jpeg", "image/jpeg"),
]

# ---- Expected to return non-2xx ----
ERROR_STATUS_PATHS = [
    ("/status/404", 404),
    ("/status/500", 500),
]

REDIRECT_PATH = "/redirect/2"
