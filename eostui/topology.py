"""MGM/QDB topology records, version bookkeeping and cluster health."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, replace

HEALTH_UNKNOWN = "-"
HEALTH_OK = "OK"
HEALTH_WARN = "WARN"


@dataclass(frozen=True)
class MgmRecord:
    """One MGM of the cluster together with the QuarkDB node beside it."""

    host: str = ""
    port: int = 0
    role: str = ""
    status: str = ""
    eos_version: str = ""
    qdb_host: str = ""
    qdb_version: str = ""


def mgm_version_probe_targets(records: Iterable[MgmRecord]) -> list[MgmRecord]:
    """Records naming only the hosts whose MGM or QDB version is still unknown."""
    targets: list[MgmRecord] = []
    for record in records:
        host = record.host if record.host and not record.eos_version else ""
        qdb_host = record.qdb_host if record.qdb_host and not record.qdb_version else ""
        if host or qdb_host:
            targets.append(MgmRecord(host=host, qdb_host=qdb_host))
    return targets


def has_missing_mgm_versions(records: Iterable[MgmRecord]) -> bool:
    """True when some MGM or QDB host has no known version."""
    return bool(mgm_version_probe_targets(records))


def existing_mgm_versions(records: Iterable[MgmRecord]) -> dict[str, str]:
    """Known MGM versions keyed by host."""
    return {
        record.host: record.eos_version
        for record in records
        if record.host and record.eos_version
    }


def existing_qdb_versions(records: Iterable[MgmRecord]) -> dict[str, str]:
    """Known QDB versions keyed by host."""
    return {
        record.qdb_host: record.qdb_version
        for record in records
        if record.qdb_host and record.qdb_version
    }


def apply_mgm_versions(
    records: Sequence[MgmRecord],
    mgm_versions: Mapping[str, str],
    qdb_versions: Mapping[str, str],
) -> list[MgmRecord]:
    """Copies of the records with the given versions filled in.

    Empty versions in the mappings never overwrite what a record holds.
    """
    out: list[MgmRecord] = []
    for record in records:
        mgm_version = mgm_versions.get(record.host, "")
        if mgm_version:
            record = replace(record, eos_version=mgm_version)
        qdb_version = qdb_versions.get(record.qdb_host, "")
        if qdb_version:
            record = replace(record, qdb_version=qdb_version)
        out.append(record)
    return out


def merge_mgm_version_data(
    next_records: Sequence[MgmRecord],
    current: Sequence[MgmRecord],
) -> list[MgmRecord]:
    """New records, keeping the versions already known from the current ones."""
    if not next_records or not current:
        return list(next_records)
    return apply_mgm_versions(
        next_records,
        existing_mgm_versions(current),
        existing_qdb_versions(current),
    )


def compute_cluster_health(node_statuses: Iterable[str], fs_boots: Iterable[str]) -> str:
    """Overall state: "-" without data, "WARN" if any node is offline or
    any filesystem is not booted, "OK" otherwise."""
    statuses = list(node_statuses)
    boots = list(fs_boots)
    if not statuses and not boots:
        return HEALTH_UNKNOWN
    if any(status.lower() != "online" for status in statuses):
        return HEALTH_WARN
    if any(boot.lower() != "booted" for boot in boots):
        return HEALTH_WARN
    return HEALTH_OK