from eostui.topology import (
    MgmRecord,
    apply_mgm_versions,
    compute_cluster_health,
    existing_mgm_versions,
    existing_qdb_versions,
    has_missing_mgm_versions,
    merge_mgm_version_data,
    mgm_version_probe_targets,
)


def test_probe_targets_only_name_missing_hosts():
    records = [
        MgmRecord(host="mgm1", eos_version="5.2.0", qdb_host="qdb1"),
        MgmRecord(host="mgm2", qdb_host="qdb2", qdb_version="0.4.3"),
        MgmRecord(host="mgm3", eos_version="5.2.0", qdb_host="qdb3", qdb_version="0.4.3"),
    ]
    assert mgm_version_probe_targets(records) == [
        MgmRecord(qdb_host="qdb1"),
        MgmRecord(host="mgm2"),
    ]


def test_has_missing_versions():
    complete = [MgmRecord(host="mgm1", eos_version="5.2.0")]
    assert has_missing_mgm_versions(complete) is False
    assert has_missing_mgm_versions([MgmRecord(host="mgm1")]) is True
    assert has_missing_mgm_versions([]) is False


def test_existing_versions_skip_empty():
    records = [
        MgmRecord(host="mgm1", eos_version="5.2.0", qdb_host="qdb1"),
        MgmRecord(host="mgm2", qdb_host="qdb2", qdb_version="0.4.3"),
    ]
    assert existing_mgm_versions(records) == {"mgm1": "5.2.0"}
    assert existing_qdb_versions(records) == {"qdb2": "0.4.3"}


def test_apply_versions_does_not_modify_input():
    records = [MgmRecord(host="mgm1", qdb_host="qdb1")]
    out = apply_mgm_versions(records, {"mgm1": "5.2.0"}, {"qdb1": "0.4.3"})
    assert out == [MgmRecord(host="mgm1", eos_version="5.2.0", qdb_host="qdb1", qdb_version="0.4.3")]
    assert records[0].eos_version == ""


def test_apply_versions_ignores_empty_values():
    records = [MgmRecord(host="mgm1", eos_version="5.1.0")]
    out = apply_mgm_versions(records, {"mgm1": ""}, {})
    assert out == records


def test_merge_keeps_known_versions():
    current = [MgmRecord(host="mgm1", eos_version="5.2.0", qdb_host="qdb1", qdb_version="0.4.3")]
    fresh = [MgmRecord(host="mgm1", role="master", qdb_host="qdb1")]
    merged = merge_mgm_version_data(fresh, current)
    assert merged[0].eos_version == "5.2.0"
    assert merged[0].qdb_version == "0.4.3"
    assert merged[0].role == "master"
    assert not has_missing_mgm_versions(merged)


def test_merge_with_empty_sides_returns_next():
    fresh = [MgmRecord(host="mgm1")]
    assert merge_mgm_version_data(fresh, []) == fresh
    assert merge_mgm_version_data([], fresh) == []


def test_cluster_health_values():
    assert compute_cluster_health([], []) == "-"
    assert compute_cluster_health(["online", "ONLINE"], ["booted", "Booted"]) == "OK"
    assert compute_cluster_health(["online", "offline"], ["booted"]) == "WARN"
    assert compute_cluster_health(["online"], ["booting"]) == "WARN"
    assert compute_cluster_health([], ["booted"]) == "OK"