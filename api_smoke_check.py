#!/usr/bin/env python3
"""
Smoke check for a running hospital record backend.

Runs a create / read / update / list / delete cycle against every
entity resource and reports the calls that did not answer as expected.

    python api_smoke_check.py            # against http://127.0.0.1:8000
    BASE_URL=http://host:8000 python api_smoke_check.py
"""
import os
import sys
import time
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import requests

BASE_URL = os.getenv("BASE_URL", "http://127.0.0.1:8000").rstrip("/")

# resource path -> (payload for create, field changed on update, updated value)
RESOURCES = {
    "countries": ({"country": "Smokeland"}, "country", "Smokeland II"),
    "states": ({"state": "Smoke State"}, "state", "Smoke State II"),
    "districts": ({"district": "AAAAAAAAAA"}, "district", "BBBBBBBBBB"),
    "patients": ({"name": "Smoke Patient", "age": 42, "gender": "OTHER"}, "phone", "9000000000"),
    "appointments": ({"date": "2030-01-01T09:00:00Z", "reason": "Smoke test"}, "reason", "Smoke test II"),
}


@dataclass
class CheckResult:
    success: bool
    endpoint: str
    method: str
    status_code: int
    response_time: float
    error_message: str = ""
    description: str = ""


class SmokeChecker:
    def __init__(self, base_url: str = BASE_URL):
        self.base_url = base_url
        self.session = requests.Session()
        self.session.headers.update({"Content-Type": "application/json"})
        self.results: List[CheckResult] = []

    @property
    def errors(self) -> List[CheckResult]:
        return [r for r in self.results if not r.success]

    def call(self, method: str, endpoint: str, data: Optional[Dict[str, Any]] = None,
             expected_status: int = 200, description: str = "") -> Optional[requests.Response]:
        url = f"{self.base_url}{endpoint}"
        start_time = time.time()
        try:
            response = self.session.request(method, url, json=data, timeout=10)
        except requests.RequestException as e:
            self._record(False, endpoint, method, 0, time.time() - start_time, str(e), description)
            print(f"❌ {method} {endpoint} - error: {e}")
            return None
        elapsed = time.time() - start_time
        ok = response.status_code == expected_status
        self._record(ok, endpoint, method, response.status_code, elapsed,
                     "" if ok else response.text[:200], description)
        mark = "✅" if ok else "❌"
        print(f"{mark} {method} {endpoint} - {response.status_code} ({elapsed:.2f}s)")
        return response

    def _record(self, success, endpoint, method, status_code, response_time, error_message, description):
        self.results.append(CheckResult(
            success=success,
            endpoint=endpoint,
            method=method,
            status_code=status_code,
            response_time=response_time,
            error_message=error_message,
            description=description,
        ))

    def check_resource(self, plural: str, payload: Dict[str, Any], field: str, new_value: Any) -> None:
        base = f"/api/{plural}"
        print(f"\n🧪 {base}")
        self.call("POST", base, {**payload, "id": 1}, 400, "create with id is rejected")
        created = self.call("POST", base, payload, 201, "create")
        if created is None or created.status_code != 201:
            return
        entity = created.json()
        entity_id = entity["id"]
        self.call("GET", f"{base}/{entity_id}", expected_status=200, description="get")
        self.call("PUT", base, {**entity, field: new_value}, 200, "update")
        listing = self.call("GET", f"{base}?page=0&size=5&sort=id,desc", expected_status=200, description="list")
        if listing is not None and "X-Total-Count" not in listing.headers:
            self._record(False, base, "GET", listing.status_code, 0, "missing X-Total-Count", "list headers")
        self.call("DELETE", f"{base}/{entity_id}", expected_status=200, description="delete")
        self.call("GET", f"{base}/{entity_id}", expected_status=404, description="get after delete")

    def run(self) -> bool:
        self.call("GET", "/healthz", expected_status=200, description="health")
        for plural, (payload, field, new_value) in RESOURCES.items():
            self.check_resource(plural, payload, field, new_value)
        self.print_summary()
        return not self.errors

    def print_summary(self) -> None:
        total = len(self.results)
        passed = total - len(self.errors)
        rate = (passed / total * 100) if total else 0.0
        print(f"\n📊 {passed}/{total} checks passed ({rate:.1f}%)")
        for r in self.errors:
            print(f"  - {r.method} {r.endpoint} [{r.status_code}] {r.description}: {r.error_message}")


def main():
    checker = SmokeChecker()
    sys.exit(0 if checker.run() else 1)


if __name__ == "__main__":
    main()
