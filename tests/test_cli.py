from __future__ import annotations

import json

from typer.testing import CliRunner

from cli.main import app

runner = CliRunner()


def _write_post(path):
    path.write_text(
        json.dumps({"id": 3, "slug": "launch", "title": "Launch", "tags": ["release"], "status": "draft"}),
        encoding="utf-8",
    )
    return path


def test_fields_lists_form_names():
    result = runner.invoke(app, ["--no-banner", "fields", "Post"])
    assert result.exit_code == 0, result.output
    assert "publish_date" in result.output
    assert "category" in result.output


def test_fields_with_data(tmp_path):
    data = _write_post(tmp_path / "post.json")
    result = runner.invoke(app, ["--no-banner", "fields", "Post", "--data", str(data)])
    assert result.exit_code == 0, result.output
    assert "Launch" in result.output


def test_unknown_type_is_a_usage_error():
    result = runner.invoke(app, ["--no-banner", "fields", "Page"])
    assert result.exit_code != 0


def test_preview_writes_html_and_json(tmp_path):
    data = _write_post(tmp_path / "post.json")
    out = tmp_path / "previews" / "launch.html"
    result = runner.invoke(
        app, ["--no-banner", "preview", "Post", "--data", str(data), "--out", str(out), "--json"]
    )
    assert result.exit_code == 0, result.output

    html = out.read_text(encoding="utf-8")
    assert 'name="title"' in html
    assert 'value="Launch"' in html

    dumped = json.loads(out.with_suffix(".json").read_text(encoding="utf-8"))
    assert dumped["slug"] == "launch"
    assert dumped["tags"] == ["release"]


def test_preview_default_output_dir(tmp_path):
    result = runner.invoke(app, ["--no-banner", "preview", "Post"])
    assert result.exit_code == 0, result.output
    assert (tmp_path / "previews" / "new-post.html").exists()


def test_doctor_run_passes():
    result = runner.invoke(app, ["--no-banner", "doctor", "run"])
    assert result.exit_code == 0, result.output


def test_doctor_setup_writes_user_env(tmp_path):
    result = runner.invoke(app, ["--no-banner", "doctor", "setup"], input="/up\n/edit\nes\n")
    assert result.exit_code == 0, result.output
    env = (tmp_path / "config" / "admin-editor" / ".env").read_text(encoding="utf-8")
    assert "ADMIN_EDITOR_DEFAULT_LANGUAGE=es" in env
    assert "ADMIN_EDITOR_UPLOAD_URL=/up" in env


def test_fields_shows_bracketed_values_literally(tmp_path):
    data = tmp_path / "post.json"
    data.write_text(
        json.dumps({"title": "Use [/b] to close bold", "author": "[bold]x[/bold] and [red]"}),
        encoding="utf-8",
    )
    result = runner.invoke(app, ["--no-banner", "fields", "Post", "--data", str(data)])
    assert result.exit_code == 0, result.output
    assert "Use [/b] to close bold" in result.output
    assert "[bold]x[/bold] and [red]" in result.output
