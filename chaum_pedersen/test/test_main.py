import asyncio
import csv

import pytest

from chaum_pedersen import config, main as main_module
from chaum_pedersen.evaluation.evaluate_proofs import run_proof_test


def test_main_honest_sessions(capsys):
    assert asyncio.run(main_module.main(["--group", "toy", "--secret", "6", "--sessions", "3"]))
    assert "Accepted" in capsys.readouterr().out


def test_main_forged_sessions_with_interactive_challenge(monkeypatch):
    answers = iter(["abc", "42", "4"])

    async def fake_ainput(prompt=""):
        return next(answers)

    monkeypatch.setattr(main_module, "ainput", fake_ainput)
    assert not asyncio.run(main_module.main(["--group", "toy", "--secret", "6", "--interactive", "--forge"]))


def test_main_rejects_unknown_group():
    with pytest.raises(SystemExit):
        main_module.parse_args(["--group", "nope"])


def test_evaluation_appends_csv_rows(tmp_path):
    output = tmp_path / "results" / "proofs.csv"

    first = run_proof_test(config.TOY_GROUP, iterations=10, output_file=str(output))
    run_proof_test(config.TOY_GROUP, iterations=5, output_file=str(output))

    assert first["accepted"] == 10
    assert first["rejected"] == 0

    with open(output, newline='') as f:
        rows = list(csv.DictReader(f))
    assert [row["iterations"] for row in rows] == ["10", "5"]
    assert all(row["group"] == config.TOY_GROUP for row in rows)
