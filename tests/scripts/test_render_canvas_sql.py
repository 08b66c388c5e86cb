from __future__ import annotations

from pathlib import Path

from scripts.render_canvas_sql import main


def _write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def _config(tmp_path: Path) -> Path:
    return _write(
        tmp_path / "config.yaml",
        """
dataLake:
  canvasData:
    externalDatabase: canvas_ext
    s3Location: s3://bucket/canvas
    iamRole: role
bCourses:
  enrollmentTerms:
    2020D: 1234
""".lstrip(),
    )


def test_bootstrap_renders_both_scripts(tmp_path: Path, capsys) -> None:
    templates = tmp_path / "templates"
    _write(templates / "dbCreation.template", "CREATE :externalDatabase ':s3Location'")
    _write(templates / "dbRepoint.template", "REPOINT ':s3Location'")
    out_dir = tmp_path / "out"

    code = main(
        [
            "--config",
            str(_config(tmp_path)),
            "bootstrap",
            "--template-dir",
            str(templates),
            "--output-dir",
            str(out_dir),
            "--hash",
            "abc",
        ]
    )

    assert code == 0
    assert (out_dir / "dbCreation.sql").read_text(encoding="utf-8") == "CREATE canvas_ext 's3://bucket/canvas/abc'"
    assert (out_dir / "dbRepoint.sql").read_text(encoding="utf-8") == "REPOINT 's3://bucket/canvas/abc'"
    printed = capsys.readouterr().out
    assert "dbCreation.sql" in printed and "dbRepoint.sql" in printed


def test_bootstrap_missing_template_returns_error(tmp_path: Path) -> None:
    out_dir = tmp_path / "out"

    code = main(
        [
            "--config",
            str(_config(tmp_path)),
            "bootstrap",
            "--template-dir",
            str(tmp_path / "nowhere"),
            "--output-dir",
            str(out_dir),
        ]
    )

    assert code == 1
    assert not (out_dir / "dbRepoint.sql").exists()


def test_enrollments_prints_sql(tmp_path: Path, capsys) -> None:
    code = main(
        [
            "--config",
            str(_config(tmp_path)),
            "enrollments",
            "--year",
            "2020",
            "--semester",
            "fall",
            "--uids",
            "abc,def",
        ]
    )

    assert code == 0
    out = capsys.readouterr().out
    assert "e.enrollment_term_id = 1234" in out
    assert "p.unique_name IN ('abc', 'def')" in out


def test_enrollments_unknown_term_returns_error(tmp_path: Path) -> None:
    code = main(
        [
            "--config",
            str(_config(tmp_path)),
            "enrollments",
            "--year",
            "1999",
            "--semester",
            "B",
            "--uids",
            "abc",
        ]
    )

    assert code == 1


def test_bootstrap_unknown_timezone_returns_error(tmp_path: Path) -> None:
    config = _config(tmp_path)
    config.write_text(
        config.read_text(encoding="utf-8").replace("iamRole: role", "iamRole: role\n    hashTimezone: Mars/Olympus"),
        encoding="utf-8",
    )
    out_dir = tmp_path / "out"

    code = main(["--config", str(config), "bootstrap", "--output-dir", str(out_dir)])

    assert code == 1
    assert not out_dir.exists()
