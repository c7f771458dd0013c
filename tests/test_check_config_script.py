import json
import sys

import pytest

from scripts import check_config


def test_prints_template_for_valid_file(tmp_path, monkeypatch, capsys, document):
    path = tmp_path / "config.json"
    path.write_text(json.dumps(document), encoding="utf-8")
    monkeypatch.setattr(sys, "argv", ["check_config.py", str(path)])

    check_config.main()

    assert capsys.readouterr().out.strip() == "Url,Country,State,Campaign"


def test_exits_for_incomplete_configuration(tmp_path, monkeypatch, make_document):
    path = tmp_path / "config.json"
    path.write_text(json.dumps(make_document({"version": 0})), encoding="utf-8")
    monkeypatch.setattr(sys, "argv", ["check_config.py", str(path)])

    with pytest.raises(SystemExit, match="Invalid configuration"):
        check_config.main()


def test_exits_for_malformed_json(tmp_path, monkeypatch):
    path = tmp_path / "config.json"
    path.write_text("{not json", encoding="utf-8")
    monkeypatch.setattr(sys, "argv", ["check_config.py", str(path)])

    with pytest.raises(SystemExit, match="Invalid configuration"):
        check_config.main()


def test_exits_for_missing_file(tmp_path, monkeypatch):
    monkeypatch.setattr(sys, "argv", ["check_config.py", str(tmp_path / "missing.json")])

    with pytest.raises(SystemExit, match="Could not read"):
        check_config.main()
