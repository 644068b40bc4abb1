"""Tests for the benchmark phases and run loop, against instant fake backends."""

import json

import pytest

from edgebench.config import Settings
from edgebench.exceptions import ConfigError
from edgebench.results import BenchmarkResults
from edgebench.runner import (
    run_benchmarks,
    run_cold_start_test,
    run_read_test,
    run_write_test,
    setup_databases,
)
from edgebench.sample_data import generate_sample_data

from conftest import FakeBackend


def result_files(directory):
    return sorted(directory.glob("benchmark-results-*.json"))


@pytest.mark.asyncio
async def test_setup_drops_then_creates(fake_backends):
    await setup_databases(fake_backends)
    for backend in fake_backends:
        assert backend.calls == ["drop_table", "create_table"]


@pytest.mark.asyncio
async def test_setup_continues_when_drop_fails(capsys):
    neon = FakeBackend("neon", fail_on={"drop_table": RuntimeError("no table")})
    turso = FakeBackend("turso")

    await setup_databases([neon, turso])

    assert neon.calls == ["drop_table", "create_table"]
    assert turso.calls == ["drop_table", "create_table"]
    assert "proceeding with creation" in capsys.readouterr().out


@pytest.mark.asyncio
async def test_setup_create_failure_propagates():
    neon = FakeBackend("neon", fail_on={"create_table": RuntimeError("denied")})
    with pytest.raises(RuntimeError, match="denied"):
        await setup_databases([neon])


@pytest.mark.asyncio
async def test_cold_start_uses_fresh_clients(fake_backends):
    results = BenchmarkResults(record_count=0)

    await run_cold_start_test(fake_backends, results)

    assert set(results.cold_start) == {"neon", "turso"}
    for backend in fake_backends:
        assert "ping" not in backend.calls
        [fresh] = backend.fresh_instances
        assert fresh.calls == ["ping"]
        assert fresh.closed
        assert results.cold_start[backend.name] >= 0


@pytest.mark.asyncio
async def test_cold_start_closes_fresh_client_on_failure():
    neon = FakeBackend("neon", fail_on={"ping": ConnectionError("refused")})
    results = BenchmarkResults(record_count=0)

    with pytest.raises(ConnectionError):
        await run_cold_start_test([neon], results)

    assert neon.fresh_instances[0].closed
    assert results.cold_start == {}


@pytest.mark.asyncio
async def test_cold_start_keeps_timing_when_close_fails(caplog):
    neon = FakeBackend("neon", fail_on={"close": OSError("socket already closed")})
    results = BenchmarkResults(record_count=0)

    await run_cold_start_test([neon, FakeBackend("turso")], results)

    assert set(results.cold_start) == {"neon", "turso"}
    assert results.cold_start["neon"] >= 0
    assert "Closing fresh neon client failed" in caplog.text


@pytest.mark.asyncio
async def test_cold_start_ping_error_not_masked_by_close_error():
    neon = FakeBackend(
        "neon",
        fail_on={"ping": ConnectionError("refused"), "close": OSError("socket already closed")},
    )
    results = BenchmarkResults(record_count=0)

    with pytest.raises(ConnectionError, match="refused"):
        await run_cold_start_test([neon], results)


@pytest.mark.asyncio
async def test_write_test_inserts_every_row_sequentially(fake_backends):
    data = generate_sample_data(25)
    results = BenchmarkResults(record_count=25)

    await run_write_test(fake_backends, data, results)

    for backend in fake_backends:
        assert backend.rows == data
    write_test = results.write_test
    assert write_test["rowCount"] == 25
    assert write_test["neon"] >= 0
    assert write_test["turso"] >= 0
    assert write_test["neonAvgPerRow"] == pytest.approx(write_test["neon"] / 25)
    assert write_test["tursoAvgPerRow"] == pytest.approx(write_test["turso"] / 25)


@pytest.mark.asyncio
async def test_write_test_key_order(fake_backends):
    results = BenchmarkResults(record_count=2)
    await run_write_test(fake_backends, generate_sample_data(2), results)
    assert list(results.write_test) == ["neon", "turso", "rowCount", "neonAvgPerRow", "tursoAvgPerRow"]


@pytest.mark.asyncio
async def test_write_test_zero_rows(fake_backends, capsys):
    results = BenchmarkResults(record_count=0)

    await run_write_test(fake_backends, [], results)

    for backend in fake_backends:
        assert "insert_row" not in backend.calls
    assert results.write_test["rowCount"] == 0
    assert results.write_test["neonAvgPerRow"] is None
    assert results.write_test["tursoAvgPerRow"] is None
    assert "per-row averages recorded as null" in capsys.readouterr().out


@pytest.mark.asyncio
async def test_read_test_runs_both_queries(fake_backends):
    results = BenchmarkResults(record_count=0)

    await run_read_test(fake_backends, results)

    for backend in fake_backends:
        assert backend.calls == ["select_all", "select_filtered"]
    assert set(results.read_test) == {"simpleQuery", "filterQuery"}
    for query in results.read_test.values():
        assert set(query) == {"neon", "turso"}
        assert all(isinstance(v, float) and v >= 0 for v in query.values())


@pytest.mark.asyncio
async def test_run_benchmarks_success(settings, fake_backends, tmp_path, capsys):
    outcome = await run_benchmarks(settings, 10, output_dir=tmp_path, backends=fake_backends)

    assert outcome.succeeded
    assert result_files(tmp_path) == [outcome.path]
    data = json.loads(outcome.path.read_text())
    assert data["configuration"] == {"recordCount": 10}
    assert set(data["coldStart"]) == {"neon", "turso"}
    assert data["writeTest"]["rowCount"] == 10
    assert set(data["readTest"]["filterQuery"]) == {"neon", "turso"}
    assert all(backend.closed for backend in fake_backends)
    assert "Benchmark completed successfully" in capsys.readouterr().out


@pytest.mark.asyncio
async def test_phase_order(settings, tmp_path):
    neon = FakeBackend("neon")
    await run_benchmarks(settings, 2, output_dir=tmp_path, backends=[neon])
    assert neon.calls == [
        "drop_table",
        "create_table",
        "insert_row",
        "insert_row",
        "select_all",
        "select_filtered",
    ]
    assert neon.fresh_instances[0].calls == ["ping"]


@pytest.mark.asyncio
async def test_setup_failure_still_saves_once(settings, tmp_path, capsys):
    neon = FakeBackend("neon", fail_on={"create_table": RuntimeError("boom")})
    turso = FakeBackend("turso")

    outcome = await run_benchmarks(settings, 10, output_dir=tmp_path, backends=[neon, turso])

    assert not outcome.succeeded
    assert isinstance(outcome.error, RuntimeError)
    assert result_files(tmp_path) == [outcome.path]
    data = json.loads(outcome.path.read_text())
    assert data["coldStart"] == {}
    assert data["writeTest"] == {}
    assert data["readTest"] == {"simpleQuery": {}, "filterQuery": {}}
    assert neon.closed and turso.closed
    out = capsys.readouterr().out
    assert "Error during benchmark" in out
    assert "completed successfully" not in out


@pytest.mark.asyncio
async def test_read_failure_keeps_earlier_phases(settings, tmp_path):
    turso = FakeBackend("turso", fail_on={"select_filtered": RuntimeError("timeout")})

    outcome = await run_benchmarks(settings, 3, output_dir=tmp_path, backends=[FakeBackend("neon"), turso])

    data = json.loads(outcome.path.read_text())
    assert set(data["coldStart"]) == {"neon", "turso"}
    assert data["writeTest"]["rowCount"] == 3
    assert data["readTest"] == {"simpleQuery": {}, "filterQuery": {}}


@pytest.mark.asyncio
async def test_missing_config_is_a_setup_failure(tmp_path):
    outcome = await run_benchmarks(Settings(), 5, output_dir=tmp_path)

    assert isinstance(outcome.error, ConfigError)
    assert result_files(tmp_path) == [outcome.path]
    assert json.loads(outcome.path.read_text())["writeTest"] == {}
