import json

from click.testing import CliRunner

from seedshard import policy as policy_module
from seedshard.cli import main

PLEDGE = (
    "pledge ridge neutral civil discover series over crowd digital panda draft devote "
    "silly tide era weekend spin bleak follow basic twice marriage trophy toast"
)


def run(*args, input=None):
    return CliRunner().invoke(main, list(args), input=input)


def test_generate_default_and_word_count():
    result = run("generate")
    assert result.exit_code == 0
    assert len(result.output.split()) == 24

    result = run("generate", "--words", "15")
    assert result.exit_code == 0
    assert len(result.output.split()) == 15


def test_generate_rejects_word_count():
    result = run("generate", "-w", "13")
    assert result.exit_code == 2


def test_split_then_recover_from_arguments():
    result = run("split", PLEDGE, "-n", "5", "-t", "3")
    assert result.exit_code == 0, result.output
    lines = result.output.splitlines()
    assert [line.split()[0] for line in lines] == ["1", "2", "3", "4", "5"]

    recovered = run("recover", lines[1], lines[2], lines[4])
    assert recovered.exit_code == 0, recovered.output
    assert recovered.output.strip() == PLEDGE


def test_split_and_recover_through_stdin():
    result = run("split", "-n", "3", "-t", "2", input=PLEDGE + "\n")
    assert result.exit_code == 0, result.output
    lines = result.output.splitlines()

    recovered = run("recover", input="\n".join(["", lines[2], "", lines[0], ""]))
    assert recovered.exit_code == 0, recovered.output
    assert recovered.output.strip() == PLEDGE


def test_split_rejects_threshold_above_count():
    result = run("split", PLEDGE, "-n", "2", "-t", "3")
    assert result.exit_code == 2
    assert "Threshold cannot be greater" in result.output


def test_split_rejects_zero_shards():
    result = run("split", PLEDGE, "-n", "0", "-t", "1")
    assert result.exit_code == 2


def test_split_reports_invalid_phrase():
    result = run("split", " ".join(["abandon"] * 12), "-n", "3", "-t", "2")
    assert result.exit_code == 1
    assert "checksum" in result.output


def test_recover_reports_offending_line():
    lines = run("split", PLEDGE, "-n", "3", "-t", "2").output.splitlines()
    bad = "999 " + lines[1].split(" ", 1)[1]
    result = run("recover", lines[0], bad)
    assert result.exit_code == 1
    assert "Invalid shard index" in result.output
    assert "in line: 999" in result.output


def test_recover_rejects_duplicates():
    lines = run("split", PLEDGE, "-n", "3", "-t", "2").output.splitlines()
    result = run("recover", lines[0], lines[0])
    assert result.exit_code == 1
    assert "more than once" in result.output


def test_audit_trail_records_metadata_only(tmp_path, monkeypatch):
    monkeypatch.setattr(policy_module, "policy", policy_module.SharePolicy(audit_dir=tmp_path))

    lines = run("split", PLEDGE, "-n", "3", "-t", "2").output.splitlines()
    assert run("recover", lines[0], lines[1]).exit_code == 0

    entries = [json.loads(p.read_text()) for p in sorted(tmp_path.glob("audit_*.json"))]
    events = sorted(entry["payload"]["event"] for entry in entries)
    assert events == ["phrase.recovered", "phrase.split"]
    for entry in entries:
        text = json.dumps(entry)
        assert "pledge" not in text
        assert lines[0].split(" ", 1)[1] not in text


def test_generate_default_follows_policy(monkeypatch):
    monkeypatch.setattr(policy_module, "policy", policy_module.SharePolicy(default_words=12))
    result = run("generate")
    assert result.exit_code == 0
    assert len(result.output.split()) == 12


def test_recover_reads_label_prefixed_stdin():
    lines = run("split", PLEDGE, "-n", "3", "-t", "2").output.splitlines()
    stdin = f"Shard 1: {lines[0]}\nShard 3: {lines[2]}\n"
    result = run("recover", input=stdin)
    assert result.exit_code == 0, result.output
    assert result.output.strip() == PLEDGE
