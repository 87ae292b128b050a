"""Liveness and readiness checks for the gateway.

Readiness asks every registered storage adaptor whether it can serve
requests; liveness only reports that the process is up.

Example:
    >>> service = HealthService({"hsapiens": lambda: success("reachable")}, version="0.1.0")
    >>> service.readiness()["status"]
    'ok'
"""

# ============================================================================
# IMPORTS
# ============================================================================

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from datetime import UTC, datetime

from eva_ws.adapters.base import StorageAdaptor

# ============================================================================
# DATA MODELS
# ============================================================================


@dataclass(slots=True)
class CheckResult:
    """Result of a health check operation."""

    status: str
    detail: str = ""


HealthCheck = Callable[[], CheckResult]


# ============================================================================
# SERVICE IMPLEMENTATION
# ============================================================================


@dataclass
class HealthService:
    """Kubernetes-compatible liveness and readiness reporting."""

    checks: Mapping[str, HealthCheck]
    version: str
    started_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def uptime_seconds(self) -> float:
        delta = datetime.now(UTC) - self.started_at
        return round(delta.total_seconds(), 3)

    def liveness(self) -> dict[str, object]:
        return {
            "status": "ok",
            "version": self.version,
            "uptime_seconds": self.uptime_seconds(),
            "timestamp": datetime.now(UTC).isoformat(),
        }

    def readiness(self) -> dict[str, object]:
        """Run every check; any error wins over degraded, degraded over ok."""
        results: dict[str, dict[str, object]] = {}
        overall_status = "ok"

        for name, check in self.checks.items():
            try:
                result = check()
            except Exception as exc:
                results[name] = {"status": "error", "detail": str(exc)}
                overall_status = "error"
                continue
            results[name] = {"status": result.status, "detail": result.detail}
            if result.status != "ok" and overall_status != "error":
                overall_status = "degraded"

        payload = self.liveness()
        payload.update({"status": overall_status, "checks": results})
        return payload


# ============================================================================
# HELPER FUNCTIONS
# ============================================================================


def success(detail: str = "") -> CheckResult:
    return CheckResult(status="ok", detail=detail)


def failure(detail: str) -> CheckResult:
    return CheckResult(status="error", detail=detail)


def adaptor_check(adaptor: StorageAdaptor) -> HealthCheck:
    """Wrap :meth:`StorageAdaptor.health` as a readiness check."""

    def check() -> CheckResult:
        if adaptor.health():
            return success(f"{adaptor.name} reachable")
        return failure(f"{adaptor.name} unavailable")

    return check


__all__ = ["CheckResult", "HealthCheck", "HealthService", "adaptor_check", "failure", "success"]
