import json
import logging
from pathlib import Path

import pytest
from click.testing import CliRunner

from secret_finder.cli import main
from secret_finder.ingest import dump_document, share_for
from secret_finder.interpolate import evaluate_polynomial
from secret_finder.models import ThresholdSpec
from secret_finder.utils import logging as sf_logging


@pytest.fixture(autouse=True)
def _reset_cli_logging():
    root = logging.getLogger(sf_logging.ROOT_LOGGER)
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    sf_logging._cli_handler = None


def _write(path, coeffs, xs, base=16):
    shares = [share_for(x, evaluate_polynomial(coeffs, x), base) for x in xs]
    spec = ThresholdSpec(n=len(xs), k=len(coeffs))
    path.write_text(json.dumps(dump_document(spec, shares)), encoding="utf-8")
    return path


def test_cli_prints_secret_per_file(tmp_path):
    first = _write(tmp_path / "a.json", [2, 1, 1], [1, 2, 4, 5])
    second = _write(tmp_path / "b.json", [2**200 + 1, 7, 3, 11], [3, 1, 9, 4, 2], base=36)
    result = CliRunner().invoke(main, [str(first), str(second)])
    assert result.exit_code == 0, result.output
    assert result.output == f"Secret 1: 2\nSecret 2: {2**200 + 1}\n"


def test_cli_defaults_to_testcase_files(tmp_path):
    runner = CliRunner()
    with runner.isolated_filesystem(temp_dir=tmp_path) as cwd:
        _write(Path(cwd) / "testcase1.json", [42, 5], [1, 2, 3])
        _write(Path(cwd) / "testcase2.json", [7, 0, 1], [2, 3, 5])
        result = runner.invoke(main, [])
    assert result.exit_code == 0, result.output
    assert "Secret 1: 42" in result.output
    assert "Secret 2: 7" in result.output


def test_cli_yaml_format(tmp_path):
    path = tmp_path / "shares.yml"
    path.write_text("keys: {n: 2, k: 2}\n'1': {base: '10', value: '9'}\n'2': {base: '10', value: '11'}\n")
    result = CliRunner().invoke(main, [str(path)])
    assert result.exit_code == 0, result.output
    assert result.output.strip() == "Secret 1: 7"


def test_cli_reports_errors(tmp_path):
    result = CliRunner().invoke(main, [str(tmp_path / "missing.json")])
    assert result.exit_code == 1
    assert "cannot read" in result.output


def test_cli_strict_and_rounding(tmp_path):
    path = tmp_path / "frac.json"
    path.write_text(
        json.dumps(
            {
                "keys": {"n": 3, "k": 3},
                "1": {"base": "10", "value": "1"},
                "2": {"base": "10", "value": "0"},
                "4": {"base": "10", "value": "0"},
            }
        )
    )
    strict = CliRunner().invoke(main, ["--strict", str(path)])
    assert strict.exit_code == 1
    assert "8/3" in strict.output

    rounded = CliRunner().invoke(main, ["--allow-rounding", str(path)])
    assert rounded.exit_code == 0, rounded.output
    assert "Secret 1: 3" in rounded.output
