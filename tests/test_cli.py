import json

from typer.testing import CliRunner

from fquery.cli.main import app
from fquery.cli.scan import expand_paths

runner = CliRunner()

SUBTITLE = "\n".join(
    [
        "Style: Default,Arial,20",
        "Dialogue: 0,0:00:01.00,0:00:02.00,Default,,0,0,0,,{\\fnImpact}hi",
    ]
)


def _write_index(tmp_path):
    path = tmp_path / "fonts.json"
    path.write_text(
        json.dumps(
            {
                "fonts": [{"path": "Sans/arial.ttf", "size": 2 * 1024 * 1024}],
                "name_to_idxes": {"arial": [0]},
            }
        ),
        encoding="utf-8",
    )
    return path


def test_expand_paths(tmp_path):
    subs = tmp_path / "subs"
    (subs / "season").mkdir(parents=True)
    (subs / "b.ass").write_text("")
    (subs / "season" / "a.SSA").write_text("")
    (subs / "notes.txt").write_text("")
    single = tmp_path / "single.txt"
    single.write_text("")

    files = expand_paths([single, subs])

    assert files == [single, subs / "b.ass", subs / "season" / "a.SSA"]


def test_scan_json(tmp_path):
    index = _write_index(tmp_path)
    sub = tmp_path / "episode.ass"
    sub.write_text(SUBTITLE, encoding="utf-8")

    result = runner.invoke(
        app, ["scan", str(sub), "--index", str(index), "--no-detect", "--json"]
    )

    assert result.exit_code == 0, result.output
    output = result.stdout
    views = json.loads(output[output.index("[\n") :])
    assert [view["name"] for view in views] == ["Arial", "Impact"]
    assert views[0]["tooltip"] == "Required by Default"
    assert views[0]["providers"] == [
        {"directory": "Sans/", "filename": "arial.ttf", "size": 2 * 1024 * 1024}
    ]
    assert views[1]["tooltip"] == "Required by override tags"
    assert views[1]["installed"] is False


def test_scan_table(tmp_path):
    index = _write_index(tmp_path)
    sub = tmp_path / "episode.ass"
    sub.write_text(SUBTITLE, encoding="utf-8")

    result = runner.invoke(app, ["scan", str(sub), "--index", str(index), "-D"])

    assert result.exit_code == 0, result.output
    assert "arial.ttf" in result.output
    assert "2.00MB" in result.output
    assert "not in archive" in result.output


def test_scan_missing_index(tmp_path):
    sub = tmp_path / "episode.ass"
    sub.write_text(SUBTITLE, encoding="utf-8")

    result = runner.invoke(app, ["scan", str(sub), "--index", str(tmp_path / "none.json")])

    assert result.exit_code == 1
    assert not isinstance(result.exception, FileNotFoundError)
    assert "Font archive index not found" in result.output


def test_scan_invalid_index(tmp_path):
    index = tmp_path / "fonts.json"
    index.write_text("[]", encoding="utf-8")
    sub = tmp_path / "episode.ass"
    sub.write_text(SUBTITLE, encoding="utf-8")

    result = runner.invoke(app, ["scan", str(sub), "--index", str(index), "-D"])

    assert result.exit_code == 1


def test_scan_directory_without_subtitles(tmp_path):
    index = _write_index(tmp_path)
    empty = tmp_path / "empty"
    empty.mkdir()

    result = runner.invoke(app, ["scan", str(empty), "--index", str(index), "-D"])

    assert result.exit_code == 1
    assert "No ASS/SSA subtitle files found" in result.output
