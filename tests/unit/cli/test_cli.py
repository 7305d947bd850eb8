import json
import logging

import numpy as np
import pandas as pd
import pytest

pytest.importorskip("typer")
from typer.testing import CliRunner

from mix_uncertainty.cli.main import app
from mix_uncertainty.exceptions import InsufficientDataError

runner = CliRunner()


def test_prepare_writes_conditioned_matrix(tmp_path):
    src = tmp_path / "shares.csv"
    out = tmp_path / "out" / "prepared.csv"
    pd.DataFrame(
        [[0.2, 0.2, 0.2, 0.2, 0.2, 0.0], [0.5, 0.5, 0.0, 0.0, 0.0, 0.0]],
        index=pd.Index([2020, 2021], name="year"),
        columns=list("abcdef"),
    ).to_csv(src)

    result = runner.invoke(app, ["prepare", str(src), str(out)])
    assert result.exit_code == 0, result.output
    prepared = pd.read_csv(out, index_col=0)
    assert np.isnan(prepared.loc[2020, "f"])
    assert prepared.loc[2021].sum() == pytest.approx(1.0, abs=1e-9)
    assert (prepared.loc[2021] > 0).all()


def test_prepare_respects_cli_override(tmp_path):
    src = tmp_path / "shares.csv"
    out = tmp_path / "prepared.csv"
    pd.DataFrame([[0.5, 0.5, 0.0]], index=[2020], columns=["a", "b", "c"]).to_csv(src)

    result = runner.invoke(app, ["prepare", str(src), str(out), "--floor", "0.01"])
    assert result.exit_code == 0, result.output
    assert pd.read_csv(out, index_col=0).loc[2020, "c"] == pytest.approx(0.01)


def test_check_catchability_reports_success(tmp_path):
    src = tmp_path / "logq.csv"
    pd.DataFrame({"cod": [0.1, 0.2, 0.3, 0.4]}, index=[2001, 2002, 2003, 2004]).to_csv(src)

    result = runner.invoke(app, ["check-catchability", str(src)])
    assert result.exit_code == 0, result.output
    assert json.loads(result.output) == {"reasons": None, "run": True}


def test_check_catchability_flags_insufficient_data(tmp_path):
    src = tmp_path / "logq.csv"
    pd.DataFrame({"cod": [0.4, 0.0, 0.0, 0.0]}, index=[2001, 2002, 2003, 2004]).to_csv(src)

    result = runner.invoke(app, ["check-catchability", str(src), "--years", "2001,2002,2003,2004"])
    assert result.exit_code != 0
    assert isinstance(result.exception, InsufficientDataError)
    assert "no data in last 3 years" in result.output


def test_diagnose_prints_decision_status_and_aic(tmp_path):
    path = tmp_path / "fit.json"
    path.write_text(
        json.dumps(
            {
                "code": "C",
                "opt": {"par": [0.1, 0.2, 0.3, 0.4], "objective": 10.0, "convergence": 0},
                "sdr": {"pd_hess": True, "std_errors": {"rw": [0.1, 0.2]}},
            }
        )
    )
    result = runner.invoke(app, ["diagnose", str(path)])
    assert result.exit_code == 0, result.output
    summary = json.loads(result.output)
    assert summary["decision"] == {"rerun": False, "fail": False, "pd_hess": True, "nans": False, "conv": True}
    assert summary["status"] == "MVN_RW_Dir - success"
    assert summary["aic"] == 28.0


def test_diagnose_hard_failure(tmp_path):
    path = tmp_path / "fit.json"
    path.write_text(json.dumps({"code": "A", "opt": None}))
    result = runner.invoke(app, ["diagnose", str(path)])
    assert result.exit_code == 0, result.output
    summary = json.loads(result.output)
    assert summary["decision"]["fail"] is True
    assert summary["aic"] is None


def test_check_catchability_logs_each_skipped_stock(tmp_path, caplog):
    caplog.set_level(logging.WARNING, logger="mix_uncertainty.cli.commands.catchability")
    src = tmp_path / "logq.csv"
    pd.DataFrame({"cod": [0.4, 0.0, 0.0, 0.0], "had": [0.2, 0.0, 0.0, 0.0]}, index=[2001, 2002, 2003, 2004]).to_csv(src)

    runner.invoke(app, ["check-catchability", str(src)])
    stocks = {record.stock for record in caplog.records if hasattr(record, "stock")}
    assert stocks == {"cod", "had"}


def test_prepare_logs_metiers_with_false_zeros(tmp_path, caplog):
    caplog.set_level(logging.INFO, logger="mix_uncertainty.cli.commands.prepare")
    src = tmp_path / "shares.csv"
    out = tmp_path / "prepared.csv"
    pd.DataFrame(
        [[0.2, 0.2, 0.2, 0.2, 0.2, 0.0], [0.5, 0.5, 0.0, 0.0, 0.0, 0.0]],
        index=[2020, 2021],
        columns=list("abcdef"),
    ).to_csv(src)

    result = runner.invoke(app, ["prepare", str(src), str(out)])
    assert result.exit_code == 0, result.output
    metiers = [record.metier for record in caplog.records if hasattr(record, "metier")]
    assert metiers == ["f"]
