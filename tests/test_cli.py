import json

import pytest

from matchcast.cli import main


def test_cli_prints_prediction(capsys, no_provider_env, sample_history_path):
    main(
        [
            "--home", "Arsenal",
            "--away", "Chelsea",
            "--history", str(sample_history_path),
            "--seed", "11",
        ]
    )
    body = json.loads(capsys.readouterr().out)
    assert body["homeWin"] + body["draw"] + body["awayWin"] == 100
    assert body["confidence"] == 55
    assert len(body["keyFactors"]) == 4


def test_cli_seed_is_reproducible(capsys):
    args = ["--home", "Arsenal", "--away", "Chelsea", "--no-ai", "--seed", "5"]
    main(args)
    first = capsys.readouterr().out
    main(args)
    second = capsys.readouterr().out
    assert first == second


def test_cli_rejects_blank_team(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--home", " ", "--away", "Chelsea", "--no-ai"])
    assert excinfo.value.code == 2


def test_cli_reports_missing_history_file(capsys, tmp_path):
    with pytest.raises(SystemExit) as excinfo:
        main(
            [
                "--home", "Arsenal",
                "--away", "Chelsea",
                "--history", str(tmp_path / "missing.csv"),
                "--no-ai",
            ]
        )
    assert excinfo.value.code == 2
    assert "--history" in capsys.readouterr().err


def test_cli_reports_history_with_wrong_columns(tmp_path):
    bad = tmp_path / "bad.csv"
    bad.write_text("date,team\n2024-01-01,Arsenal\n")
    with pytest.raises(SystemExit) as excinfo:
        main(["--home", "Arsenal", "--away", "Chelsea", "--history", str(bad), "--no-ai"])
    assert excinfo.value.code == 2
