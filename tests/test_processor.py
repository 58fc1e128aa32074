import logging
import pytest
from namever.core import processor
from namever.core.parser import VersionOverflowError

@pytest.mark.parametrize("existing, incoming, expected", [
    (["Report"], ["Report"], ["Report (v1)"]),
    (["Report", "Report (v1)"], ["Report"], ["Report (v2)"]),
    ([], ["Draft", "Draft", "Draft"], ["Draft", "Draft (v1)", "Draft (v2)"]),
    (["Notes (v5)"], ["Notes (v2)"], ["Notes (v2)"]),
    (["Notes (v5)", "Notes (v2)"], ["Notes (v2)"], ["Notes (v6)"]),
])
def test_scenarios(existing, incoming, expected):
    results = processor.process_names(existing, incoming)
    assert [r.final_name for r in results] == expected
    assert all(r.ok for r in results)
    assert processor.resolve_names(existing, incoming) == expected

def test_order_is_preserved_and_sources_kept():
    results = processor.process_names(["b"], ["b", "a", "B"])
    assert [r.source for r in results] == ["b", "a", "B"]
    assert [r.final_name for r in results] == ["b (v1)", "a", "B (v2)"]

def test_versions_grow_monotonically_with_external_gaps():
    out = processor.resolve_names(["Log", "Log (v2)"], ["Log"] * 3)
    assert out == ["Log (v3)", "Log (v4)", "Log (v5)"]

def test_running_set_is_not_the_input_list():
    existing = ["x"]
    processor.process_names(existing, ["x"])
    assert existing == ["x"]

def test_overflow_is_reported_and_batch_continues():
    bad = "Big (v99999999999)"
    results = processor.process_names([], ["a", bad, "a"])
    assert [r.ok for r in results] == [True, False, True]
    err = results[1]
    assert err.source == bad
    assert err.final_name is None
    assert err.error == "VersionOverflow"
    assert bad in err.detail
    # nazwa z błędem nie trafia do zbioru zajętych
    assert results[2].final_name == "a (v1)"

def test_overflow_is_logged(caplog):
    with caplog.at_level(logging.WARNING, logger="namever"):
        processor.process_names([], ["Big (v99999999999)"])
    assert any(rec.error == "VersionOverflow" for rec in caplog.records)

def test_custom_logger_receives_debug_records():
    records = []

    class _Collect(logging.Handler):
        def emit(self, record):
            records.append(record)

    logger = logging.getLogger("test.processor")
    logger.setLevel(logging.DEBUG)
    h = _Collect()
    logger.addHandler(h)
    try:
        processor.process_names(["x"], ["x"], logger=logger)
    finally:
        logger.removeHandler(h)
    assert records[0].source == "x"
    assert records[0].final == "x (v1)"

def test_resolve_names_raises_on_overflow():
    with pytest.raises(VersionOverflowError):
        processor.resolve_names([], ["ok", "Big (v99999999999)"])

def test_resolve_names_error_names_the_failing_input():
    bad = "Big (v99999999999)"
    with pytest.raises(VersionOverflowError) as exc:
        processor.resolve_names(["ok"], ["ok", bad, "ok"])
    assert exc.value.raw == bad

def test_resolve_names_matches_process_names():
    existing, incoming = ["Log", "log (v3)"], ["LOG", "Log (v1)", "Other", "log"]
    finals = [r.final_name for r in processor.process_names(existing, incoming)]
    assert processor.resolve_names(existing, incoming) == finals
