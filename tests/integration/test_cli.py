#!/usr/bin/env python3
"""
Integration tests for the command-line driver (main.py).

Runs the full load -> bulk_match -> JSON output path on temporary input files.
"""

import json

import pytest

import main
from tests.fixtures.matching_fixtures import backend_requirement_json, strong_candidate_json


@pytest.fixture
def input_files(tmp_path):
    weak = {
        "_id": "cand-weak",
        "skills": ["Python"],
        "experience": {"years": 0, "months": 6},
        "currentLocation": "Chennai",
    }
    requirement_path = tmp_path / "requirement.json"
    candidates_path = tmp_path / "candidates.json"
    requirement_path.write_text(json.dumps(backend_requirement_json()))
    candidates_path.write_text(json.dumps({"candidates": [weak, strong_candidate_json()]}))
    return str(requirement_path), str(candidates_path)


@pytest.mark.scenario
def test_cli_ranks_candidates(input_files, capsys):
    requirement_path, candidates_path = input_files

    exit_code = main.main(["--requirement", requirement_path, "--candidates", candidates_path, "--stats"])

    assert exit_code == 0
    output = json.loads(capsys.readouterr().out)
    assert len(output) == 1
    entry = output[0]
    assert entry["requirement_id"] == "req-backend-1"
    assert [m["candidate_id"] for m in entry["matches"]] == ["cand-strong", "cand-weak"]
    assert entry["matches"][0]["overall_fit"] == "excellent"
    assert entry["statistics"]["total_candidates"] == 2


def test_cli_min_score_override(input_files, capsys):
    requirement_path, candidates_path = input_files

    exit_code = main.main(["--requirement", requirement_path, "--candidates", candidates_path,
                           "--min-score", "90"])

    assert exit_code == 0
    output = json.loads(capsys.readouterr().out)
    assert [m["candidate_id"] for m in output[0]["matches"]] == ["cand-strong"]
    assert "statistics" not in output[0]


def test_cli_bad_requirement_exit_code(tmp_path, capsys):
    bad = backend_requirement_json()
    bad["experienceRequired"] = {"minYears": 9, "maxYears": 2}
    requirement_path = tmp_path / "requirement.json"
    candidates_path = tmp_path / "candidates.json"
    requirement_path.write_text(json.dumps([bad]))
    candidates_path.write_text(json.dumps([strong_candidate_json()]))

    exit_code = main.main(["--requirement", str(requirement_path), "--candidates", str(candidates_path)])

    assert exit_code == 2
    output = json.loads(capsys.readouterr().out)
    assert output[0]["error"]


def test_cli_missing_input_file(tmp_path):
    exit_code = main.main(["--requirement", str(tmp_path / "nope.json"),
                           "--candidates", str(tmp_path / "nope.json")])
    assert exit_code == 1


def test_cli_skips_malformed_candidate(tmp_path, capsys, caplog):
    bad = {"_id": "cand-bad", "skills": ["Java"], "expectedCTC": "12 LPA"}
    requirement_path = tmp_path / "requirement.json"
    candidates_path = tmp_path / "candidates.json"
    requirement_path.write_text(json.dumps(backend_requirement_json()))
    candidates_path.write_text(json.dumps([bad, strong_candidate_json()]))

    exit_code = main.main(["--requirement", str(requirement_path), "--candidates", str(candidates_path)])

    assert exit_code == 0
    entry = json.loads(capsys.readouterr().out)[0]
    assert [m["candidate_id"] for m in entry["matches"]] == ["cand-strong"]
    assert entry["skipped_candidates"] == ["cand-bad"]
    assert any(r.levelname == "WARNING" and "cand-bad" in r.getMessage() for r in caplog.records)


def test_cli_malformed_requirement_reported(tmp_path, capsys):
    bad = {"_id": "req-bad", "experienceRequired": "3-5 years"}
    requirement_path = tmp_path / "requirement.json"
    candidates_path = tmp_path / "candidates.json"
    requirement_path.write_text(json.dumps([backend_requirement_json(), bad]))
    candidates_path.write_text(json.dumps([strong_candidate_json()]))

    exit_code = main.main(["--requirement", str(requirement_path), "--candidates", str(candidates_path)])

    assert exit_code == 2
    output = json.loads(capsys.readouterr().out)
    assert [e["requirement_id"] for e in output] == ["req-backend-1", "req-bad"]
    assert output[0]["total_matches"] == 1
    assert "experienceRequired" in output[1]["error"]
