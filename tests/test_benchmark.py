import importlib

import pytest

from euclid_gcd import STRATEGIES, InvalidInput
from euclid_gcd import benchmark


def test_run_benchmark_reports_every_strategy():
    results = benchmark.run_benchmark(2166, 6099, rounds=10)

    assert list(results) == ["compute_gcd"] + list(STRATEGIES)
    for name, secs in results.items():
        assert secs >= 0, f"FAILED: {name} reported {secs}"


def test_run_benchmark_accepts_unordered_pair():
    results = benchmark.run_benchmark(6099, 2166, rounds=1)
    assert "alternating_single_exit" in results


def test_run_benchmark_rejects_invalid_pair():
    with pytest.raises(InvalidInput):
        benchmark.run_benchmark(0, 5, rounds=1)


def test_run_benchmark_rejects_zero_rounds():
    with pytest.raises(ValueError, match="rounds"):
        benchmark.run_benchmark(rounds=0)


def test_main_logs_results(monkeypatch, capsys):
    monkeypatch.setattr(benchmark, "BENCHMARK_ROUNDS", 5)
    benchmark.main()

    out = capsys.readouterr().out
    assert "Benchmarking gcd(2166, 6099) over 5 rounds" in out
    for name in STRATEGIES:
        assert f"{name}:" in out
    assert "compute_gcd:" in out
    assert out.startswith("[")


def test_solution_self_check(capsys):
    from euclid_gcd import solution

    solution.run_tests()
    assert "All tests passed" in capsys.readouterr().out


def test_run_benchmark_rejects_disagreeing_strategy(monkeypatch):
    monkeypatch.setitem(benchmark.STRATEGIES, "bad", lambda m, n: 1)

    with pytest.raises(RuntimeError, match="bad returned 1 but expected 57"):
        benchmark.run_benchmark(2166, 6099, rounds=1)


def test_rounds_read_from_environment(monkeypatch):
    monkeypatch.setenv("GCD_BENCHMARK_ROUNDS", "250")
    try:
        importlib.reload(benchmark)
        assert benchmark.BENCHMARK_ROUNDS == "250"
        assert benchmark.parse_rounds(benchmark.BENCHMARK_ROUNDS) == 250
    finally:
        monkeypatch.delenv("GCD_BENCHMARK_ROUNDS")
        importlib.reload(benchmark)

    assert benchmark.BENCHMARK_ROUNDS == "100000"


def test_parse_rounds():
    test_cases = [
        ("1", 1),
        ("100000", 100000),
        (5, 5),
    ]

    for value, expected in test_cases:
        result = benchmark.parse_rounds(value)
        assert result == expected, (
            f"FAILED: parse_rounds({value!r})\n"
            f"Expected: {expected}\n"
            f"Got: {result}"
        )


@pytest.mark.parametrize("value", ["0", "-3", "many", "", None])
def test_main_logs_bad_rounds(monkeypatch, capsys, value):
    monkeypatch.setattr(benchmark, "BENCHMARK_ROUNDS", value)

    with pytest.raises(ValueError, match="rounds must be"):
        benchmark.main()

    out = capsys.readouterr().out
    assert "⚠️ Invalid GCD_BENCHMARK_ROUNDS" in out
    assert "Benchmarking" not in out
