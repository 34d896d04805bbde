from __future__ import annotations

from pathlib import Path

import orjson
import pytest

from cli import main
from config.loader import SAMPLE_CONFIG


def _write_config(root: Path, payload: dict[str, object]) -> Path:
    path = root / "poet.json"
    path.write_bytes(orjson.dumps(payload))
    return path


def _linear_config(root: Path) -> Path:
    return _write_config(
        root,
        {
            "numModules": 5,
            "javaClassCount": 10,
            "topologies": [{"type": "linear"}],
        },
    )


def test_cli_generate_prints_dependency_graph(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    exit_code = main(["generate", str(_linear_config(tmp_path))])

    assert exit_code == 0
    out = capsys.readouterr().out
    assert "Finished in " in out
    assert "Dependency graph:\n" in out
    assert "module0 -> (none)\n" in out
    assert "module4 -> module3\n" in out
    assert "WARNING: there are circular dependencies" not in out


def test_cli_generate_out_writes_blueprint(tmp_path: Path) -> None:
    out_path = tmp_path / "out" / "blueprint.json"

    exit_code = main(
        ["generate", str(_linear_config(tmp_path)), "--out", str(out_path)]
    )

    assert exit_code == 0
    payload = orjson.loads(out_path.read_bytes())
    assert len(payload["modules"]) == 5
    assert payload["graph"]["edges"] == [[0, 1], [1, 2], [2, 3], [3, 4]]
    assert payload["config"]["numModules"] == 5


def test_cli_generate_warns_about_cycles(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    config_path = _write_config(
        tmp_path,
        {
            "numModules": 3,
            "topologies": [{"type": "linear"}],
            "dependencies": [{"from": 2, "to": 0}],
        },
    )

    exit_code = main(["generate", str(config_path)])

    assert exit_code == 0
    assert "WARNING: there are circular dependencies" in capsys.readouterr().out


def test_cli_generate_reports_configuration_error(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    config_path = _write_config(
        tmp_path,
        {"numModules": 3, "topologies": [{"type": "rectangle", "width": "-1"}]},
    )

    exit_code = main(["generate", str(config_path)])

    assert exit_code == 2
    err = capsys.readouterr().err
    assert "error: Invalid config" in err
    assert "width must be greater than 0" in err


def test_cli_generate_reports_out_of_range_dependency(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    config_path = _write_config(
        tmp_path, {"numModules": 2, "dependencies": [{"from": 0, "to": 7}]}
    )

    exit_code = main(["generate", str(config_path)])

    assert exit_code == 2
    assert "references module 7" in capsys.readouterr().err


def test_cli_sample_prints_sample_config(capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main(["sample"])

    assert exit_code == 0
    assert capsys.readouterr().out == SAMPLE_CONFIG


def test_cli_sample_output_generates(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    config_path = tmp_path / "sample.json"
    config_path.write_text(SAMPLE_CONFIG, encoding="utf-8")

    assert main(["generate", str(config_path)]) == 0
    assert "module2 -> " in capsys.readouterr().out


def test_cli_verify_accepts_regenerated_blueprint(tmp_path: Path) -> None:
    config_path = _write_config(
        tmp_path,
        {"numModules": 8, "topologies": [{"type": "random", "seed": "13"}]},
    )
    blueprint_path = tmp_path / "blueprint.json"
    assert main(["generate", str(config_path), "--out", str(blueprint_path)]) == 0

    exit_code = main(["verify", str(config_path), "--blueprint", str(blueprint_path)])

    assert exit_code == 0


def test_cli_verify_reports_mismatch(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    config_path = _linear_config(tmp_path)
    blueprint_path = tmp_path / "blueprint.json"
    blueprint_path.write_text("{}", encoding="utf-8")

    exit_code = main(["verify", str(config_path), "--blueprint", str(blueprint_path)])

    assert exit_code == 1
    assert f"mismatch: {blueprint_path}" in capsys.readouterr().err


def test_cli_verify_missing_blueprint_reports_error(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    config_path = _linear_config(tmp_path)
    blueprint_path = tmp_path / "missing.json"

    exit_code = main(["verify", str(config_path), "--blueprint", str(blueprint_path)])

    assert exit_code == 2
    captured = capsys.readouterr()
    assert f"blueprint: {blueprint_path}" in captured.err
    assert "Blueprint file does not exist" in captured.err
