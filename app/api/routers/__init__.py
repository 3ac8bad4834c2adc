"""Router modules exposed for convenient imports."""

from . import check_ins, gyms, healthz, readyz

__all__ = [
    "check_ins",
    "gyms",
    "healthz",
    "readyz",
]
