import importlib.util
import json
import sys
from dataclasses import asdict
from pathlib import Path

import pytest

from threadwalk.ingest import load_thread
from threadwalk.settings import get_settings

ROOT = Path(__file__).resolve().parents[1]
SAMPLE = ROOT / "samples" / "launch_thread.yaml"


def _load_cli():
    location = importlib.util.spec_from_file_location("render_thread_cli", ROOT / "scripts" / "render_thread.py")
    module = importlib.util.module_from_spec(location)
    location.loader.exec_module(module)
    return module


@pytest.fixture
def run_cli(monkeypatch, tmp_path, capsys):
    cli = _load_cli()
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("THREAD_MAX_DEPTH", "1")
    monkeypatch.setenv("LOG_LEVEL", "WARNING")

    def run(*argv):
        get_settings.cache_clear()
        monkeypatch.setattr(sys, "argv", ["render_thread.py", *map(str, argv)])
        cli.main()
        return capsys.readouterr().out

    yield run
    get_settings.cache_clear()


def _depths(output):
    return [(item["comment"]["comment_id"], item["depth"]) for item in json.loads(output)]


def test_cli_flag_overrides_file_and_environment(run_cli):
    output = run_cli(SAMPLE, "--max-depth", 0, "--format", "json")

    assert _depths(output) == [("1", 0), ("3", 1), ("5", 2), ("6", 3), ("2", 0), ("4", 1)]


def test_cli_uses_file_depth_before_environment(run_cli):
    output = run_cli(SAMPLE, "--format", "json")

    assert _depths(output) == [("1", 0), ("3", 1), ("5", 1), ("6", 1), ("2", 0), ("4", 1)]


def test_cli_falls_back_to_environment_depth(run_cli, tmp_path):
    path = tmp_path / "thread.json"
    path.write_text(
        json.dumps({"comments": [{"comment_id": "a"}, {"comment_id": "b", "parent_id": "a"}]}),
        encoding="utf-8",
    )

    output = run_cli(path, "--format", "json")

    assert _depths(output) == [("a", 0), ("b", 0)]


def test_cli_json_carries_full_comment_payload(run_cli):
    output = run_cli(SAMPLE, "--format", "json")

    by_id = {comment.comment_id: comment for comment in load_thread(SAMPLE).to_comments()}
    items = json.loads(output)
    assert [item["comment"] for item in items] == [asdict(by_id[item["comment"]["comment_id"]]) for item in items]
    assert items[0]["has_children"] is True


def test_cli_outline_prints_title_then_indented_thread(run_cli):
    output = run_cli(SAMPLE)

    assert output.splitlines() == [
        "Launch day",
        "ann: Congratulations on shipping!",
        "  bo: Thanks, it was a long road.",
        "  cy: How long did the migration take?",
        "  bo: About three weeks.",
        "dee: Is there a changelog?",
        "  ann: Linked in the footer.",
    ]
