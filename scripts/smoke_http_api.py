"""
Manual smoke runner for the authz Django adapter endpoints.

Start a dev server first:
    django-admin runserver --settings=config.settings --pythonpath=.

Usage:
    python scripts/smoke_http_api.py
    python scripts/smoke_http_api.py --base-url http://127.0.0.1:8000
"""

from __future__ import annotations

import argparse
import json
from urllib import error, request


DEV_SUPER_ADMIN_TOKEN = "dev-super-admin-token"
DEV_ADMIN_TOKEN = "dev-admin-token"
DEV_EDITOR_TOKEN = "dev-editor-token"
DEV_VIEWER_TOKEN = "dev-viewer-token"
DEV_BARE_VIEWER_TOKEN = "dev-bare-viewer-token"


def _call(
    *,
    method: str,
    url: str,
    token: str | None = None,
    body: dict | None = None,
) -> tuple[int, dict]:
    encoded = None
    req_headers: dict[str, str] = {}
    if token is not None:
        req_headers["Authorization"] = f"Bearer {token}"
    if body is not None:
        encoded = json.dumps(body).encode("utf-8")
        req_headers["Content-Type"] = "application/json"

    req = request.Request(url=url, method=method, headers=req_headers, data=encoded)
    try:
        with request.urlopen(req) as response:
            status = response.status
            payload = json.loads(response.read().decode("utf-8"))
            return status, payload
    except error.HTTPError as exc:
        payload = json.loads(exc.read().decode("utf-8"))
        return exc.code, payload


def _print_case(label: str, status: int, payload: dict) -> None:
    print(f"\n[{label}] status={status}")
    print(json.dumps(payload, indent=2, sort_keys=True))


CASES = (
    # label, method, path, token, body
    ("preview-anonymous", "GET", "articles/welcome", None, None),
    ("full-viewer", "GET", "articles/welcome", DEV_VIEWER_TOKEN, None),
    ("unknown-token", "GET", "me", "invalid-token", None),
    ("me-bare-viewer", "GET", "me", DEV_BARE_VIEWER_TOKEN, None),
    (
        "create-viewer-denied",
        "POST",
        "articles",
        DEV_VIEWER_TOKEN,
        {"slug": "draft", "title": "Draft"},
    ),
    (
        "create-editor",
        "POST",
        "articles",
        DEV_EDITOR_TOKEN,
        {"slug": "draft", "title": "Draft"},
    ),
    ("publish-viewer-role-denied", "POST", "articles/welcome/publish", DEV_VIEWER_TOKEN, None),
    ("publish-admin-hierarchy", "POST", "articles/welcome/publish", DEV_ADMIN_TOKEN, None),
    ("onboarding-admin-strict-denied", "GET", "onboarding/checklist", DEV_ADMIN_TOKEN, None),
    ("analytics-bare-viewer-denied", "GET", "analytics/summary", DEV_BARE_VIEWER_TOKEN, None),
    ("audit-editor-denied", "GET", "admin/audit", DEV_EDITOR_TOKEN, None),
    ("health-super-admin", "GET", "admin/health", DEV_SUPER_ADMIN_TOKEN, None),
)


def run(base_url: str) -> None:
    api = base_url.rstrip("/") + "/v1"

    for label, method, path, token, body in CASES:
        status, payload = _call(
            method=method,
            url=f"{api}/{path}",
            token=token,
            body=body,
        )
        _print_case(label, status, payload)


def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument(
        "--base-url",
        default="http://127.0.0.1:8000",
        help="Server base URL.",
    )
    args = parser.parse_args()
    run(args.base_url)


if __name__ == "__main__":
    main()
