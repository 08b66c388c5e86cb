from __future__ import annotations

from pathlib import Path

import pytest

prefect_testing = pytest.importorskip("prefect.testing.utilities")

from canvas_data_sql.errors import TemplateReadError  # noqa: E402
from flows.canvas_bootstrap_flow import canvas_bootstrap_flow  # noqa: E402


@pytest.fixture(scope="module", autouse=True)
def prefect_harness():
    with prefect_testing.prefect_test_harness():
        yield


def _write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def _config(tmp_path: Path, *, share: bool = False) -> Path:
    return _write(
        tmp_path / "config.yaml",
        f"""
dataLake:
  canvasData:
    externalDatabase: canvas_ext
    s3Location: s3://bucket/canvas
    iamRole: role
    shareDailyHash: {str(share).lower()}
""".lstrip(),
    )


def test_flow_renders_both_scripts(tmp_path: Path) -> None:
    templates = tmp_path / "templates"
    _write(templates / "dbCreation.template", "CREATE :externalDatabase ':s3Location'")
    _write(templates / "dbRepoint.template", "REPOINT ':s3Location'")
    out_dir = tmp_path / "out"

    outputs = canvas_bootstrap_flow(
        config_path=str(_config(tmp_path)),
        template_dir=str(templates),
        output_dir=str(out_dir),
        daily_hash="abc",
    )

    assert outputs == [str(out_dir / "dbCreation.sql"), str(out_dir / "dbRepoint.sql")]
    assert (out_dir / "dbCreation.sql").read_text(encoding="utf-8") == "CREATE canvas_ext 's3://bucket/canvas/abc'"
    assert (out_dir / "dbRepoint.sql").read_text(encoding="utf-8") == "REPOINT 's3://bucket/canvas/abc'"


def test_flow_shared_daily_hash_points_both_scripts_at_one_location(tmp_path: Path) -> None:
    templates = tmp_path / "templates"
    _write(templates / "dbCreation.template", ":s3Location")
    _write(templates / "dbRepoint.template", ":s3Location")
    out_dir = tmp_path / "out"

    canvas_bootstrap_flow(
        config_path=str(_config(tmp_path, share=True)),
        template_dir=str(templates),
        output_dir=str(out_dir),
    )

    creation = (out_dir / "dbCreation.sql").read_text(encoding="utf-8")
    assert creation.startswith("s3://bucket/canvas/")
    assert (out_dir / "dbRepoint.sql").read_text(encoding="utf-8") == creation


def test_flow_missing_creation_template_skips_repoint(tmp_path: Path) -> None:
    templates = tmp_path / "templates"
    _write(templates / "dbRepoint.template", "REPOINT ':s3Location'")
    out_dir = tmp_path / "out"

    with pytest.raises(TemplateReadError):
        canvas_bootstrap_flow(
            config_path=str(_config(tmp_path)),
            template_dir=str(templates),
            output_dir=str(out_dir),
            daily_hash="abc",
        )

    assert not (out_dir / "dbCreation.sql").exists()
    assert not (out_dir / "dbRepoint.sql").exists()
