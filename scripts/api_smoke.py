from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass

import httpx


@dataclass
class SmokeResult:
    name: str
    ok: bool
    details: str


def _request(client: httpx.Client, method: str, url: str, **kwargs) -> httpx.Response:
    response = client.request(method, url, **kwargs)
    return response


def _check_health(client: httpx.Client, base_url: str) -> SmokeResult:
    response = _request(client, "GET", f"{base_url}/health")
    if response.status_code != 200:
        return SmokeResult("health", False, f"status={response.status_code}")
    return SmokeResult("health", True, "ok")


def _check_duty_breakdown(client: httpx.Client, base_url: str) -> SmokeResult:
    response = _request(
        client,
        "POST",
        f"{base_url}/v1/duty/breakdown",
        json={
            "assessable_value": 10000,
            "rates": {"bcd_rate": 10, "sws_rate": 10, "igst_rate": 18},
        },
    )
    if response.status_code != 200:
        return SmokeResult("duty_breakdown", False, f"status={response.status_code}")
    total = response.json().get("total")
    if total is None or abs(total - 3098) > 0.005:
        return SmokeResult("duty_breakdown", False, f"total={total}")
    return SmokeResult("duty_breakdown", True, "ok")


def _check_boe_calculate(client: httpx.Client, base_url: str) -> SmokeResult:
    response = _request(
        client,
        "POST",
        f"{base_url}/v1/boe/calculate",
        json={
            "shipment": {
                "id": "SMOKE-1",
                "supplier_name": "Smoke Supplier",
                "invoice_number": "SMOKE-INV",
                "invoice_date": "2024-01-01",
                "invoice_value": 1000,
                "items": [{"part_no": "S-1", "line_total": 1000, "actual_bcd_rate": 10}],
            },
            "form_values": {"exchange_rate": 80, "freight_cost": 100, "insurance_rate": 1},
            "item_inputs": [
                {"part_no": "S-1", "boe_bcd_rate": 10, "boe_sws_rate": 10, "boe_igst_rate": 18}
            ],
        },
    )
    if response.status_code != 200:
        return SmokeResult("boe_calculate", False, f"status={response.status_code}")
    payload = response.json()
    if payload.get("customs_duty_total") != 25063:
        return SmokeResult("boe_calculate", False, f"total={payload.get('customs_duty_total')}")
    return SmokeResult("boe_calculate", True, "ok")


def _check_report_csv(client: httpx.Client, base_url: str) -> SmokeResult:
    response = _request(client, "POST", f"{base_url}/v1/reports/csv", json={"rows": []})
    if response.status_code != 200:
        return SmokeResult("report_csv", False, f"status={response.status_code}")
    if not response.text.startswith("Supplier,"):
        return SmokeResult("report_csv", False, "unexpected header")
    return SmokeResult("report_csv", True, "ok")


def run_smoke(base_url: str) -> int:
    results: list[SmokeResult] = []
    with httpx.Client(timeout=30.0) as client:
        checks = [
            ("health", lambda: _check_health(client, base_url)),
            ("duty_breakdown", lambda: _check_duty_breakdown(client, base_url)),
            ("boe_calculate", lambda: _check_boe_calculate(client, base_url)),
            ("report_csv", lambda: _check_report_csv(client, base_url)),
        ]
        for name, check in checks:
            try:
                results.append(check())
            except httpx.RequestError as exc:
                results.append(SmokeResult(name, False, f"request error: {exc}"))

    ok = True
    print("Smoke report:")
    for result in results:
        status = "PASS" if result.ok else "FAIL"
        print(f"- {result.name}: {status} ({result.details})")
        if not result.ok:
            ok = False
    return 0 if ok else 1


def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("--base-url", default="http://localhost:8000")
    args = parser.parse_args()
    sys.exit(run_smoke(args.base_url.rstrip("/")))


if __name__ == "__main__":
    main()
