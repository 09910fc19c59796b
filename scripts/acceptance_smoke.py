"""
Acceptance smoke checks for the health education portal.

Usage:
  DATABASE_URL=sqlite:///./data/acceptance_edu_portal.db PYTHONPATH=src python scripts/acceptance_smoke.py
"""

from __future__ import annotations

import json
import os
import sys
from dataclasses import dataclass
from typing import Callable

from fastapi.testclient import TestClient


@dataclass
class CheckResult:
    name: str
    passed: bool
    detail: str


def _ok(name: str, detail: str) -> CheckResult:
    return CheckResult(name=name, passed=True, detail=detail)


def _fail(name: str, detail: str) -> CheckResult:
    return CheckResult(name=name, passed=False, detail=detail)


def run_check(name: str, fn: Callable[[], CheckResult]) -> CheckResult:
    try:
        return fn()
    except Exception as exc:  # pragma: no cover - smoke tool
        return _fail(name, f"exception: {exc}")


def main() -> int:
    database_url = os.getenv("DATABASE_URL", "sqlite:///./data/acceptance_edu_portal.db")
    os.environ["DATABASE_URL"] = database_url

    from edu_portal.main import app

    results: list[CheckResult] = []

    # 进入 with 块才会触发 lifespan（建表 + 写入分类）
    with TestClient(app) as client:
        created: dict = {}

        def check_health() -> CheckResult:
            resp = client.get("/health")
            if resp.status_code != 200:
                return _fail("GET /health", f"status={resp.status_code}, body={resp.text[:200]}")
            return _ok("GET /health", "healthy")

        def check_categories() -> CheckResult:
            resp = client.get("/api/categories")
            data = resp.json()
            if resp.status_code != 200 or not data.get("success") or not data.get("data"):
                return _fail("GET /api/categories", f"status={resp.status_code}, body={resp.text[:300]}")
            created["category_id"] = data["data"][0]["id"]
            return _ok("GET /api/categories", f"count={len(data['data'])}")

        def check_create() -> CheckResult:
            payload = {
                "title": "smoke slides",
                "description": "acceptance smoke material",
                "category_id": created.get("category_id", 1),
                "type": "url",
                "file_url": "https://docs.google.com/presentation/d/smoke",
                "tags": ["smoke", "slides"],
            }
            resp = client.post("/api/materials", json=payload)
            if resp.status_code != 200:
                return _fail("POST /api/materials", f"status={resp.status_code}, body={resp.text[:300]}")
            data = resp.json()["data"]
            if data.get("file_url") != payload["file_url"]:
                return _fail("POST /api/materials", f"unexpected response: {json.dumps(data)[:300]}")
            created["material_id"] = data["id"]
            return _ok("POST /api/materials", f"id={data['id']}")

        def check_detail() -> CheckResult:
            resp = client.get(f"/api/materials/{created['material_id']}")
            if resp.status_code != 200:
                return _fail("GET /api/materials/{id}", f"status={resp.status_code}")
            data = resp.json()["data"]
            if data.get("file_type") != "Google Slides" or data.get("tags") != ["smoke", "slides"]:
                return _fail("GET /api/materials/{id}", f"unexpected response: {json.dumps(data)[:300]}")
            return _ok("GET /api/materials/{id}", f"file_type={data['file_type']}")

        def check_delete() -> CheckResult:
            resp = client.delete(f"/api/materials/{created['material_id']}")
            if resp.status_code != 200:
                return _fail("DELETE /api/materials/{id}", f"status={resp.status_code}")
            again = client.delete(f"/api/materials/{created['material_id']}")
            if again.status_code != 404:
                return _fail("DELETE /api/materials/{id}", f"second delete status={again.status_code}")
            return _ok("DELETE /api/materials/{id}", "deleted, then 404")

        results.append(run_check("GET /health", check_health))
        results.append(run_check("GET /api/categories", check_categories))
        results.append(run_check("POST /api/materials", check_create))
        if "material_id" in created:
            results.append(run_check("GET /api/materials/{id}", check_detail))
            results.append(run_check("DELETE /api/materials/{id}", check_delete))

    passed = sum(1 for item in results if item.passed)
    failed = len(results) - passed

    print("\nAcceptance Smoke Report")
    print("=" * 24)
    for item in results:
        status = "PASS" if item.passed else "FAIL"
        print(f"[{status}] {item.name}: {item.detail}")

    print("-" * 24)
    print(f"passed={passed}, failed={failed}, total={len(results)}")
    return 0 if failed == 0 else 1


if __name__ == "__main__":
    sys.exit(main())
