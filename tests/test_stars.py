from ghstar.models import Repo
from ghstar.stars import basename, matches_tag, select_names, split_existing


def test_tag_matches_topic_and_ignores_null_fields():
    repos = [
        Repo(full_name="a/x", topics=["cli"]),
        Repo(full_name="b/y", description=None, topics=None),
    ]
    assert select_names(repos, "cli") == ["a/x"]


def test_matches_tag_fields():
    assert matches_tag(Repo(full_name="o/r", name="fastcli"), "cli")
    assert matches_tag(Repo(full_name="o/r", description="a cli tool"), "cli")
    assert matches_tag(Repo(full_name="o/r", topics=["go", "tui-cli"]), "cli")
    assert not matches_tag(Repo(full_name="o/r", topics=[]), "cli")
    assert not matches_tag(Repo(full_name="o/cli"), "cli")


def test_matches_tag_is_case_sensitive():
    repo = Repo(full_name="o/r", name="CLI", description="A CLI", topics=["CLI"])
    assert not matches_tag(repo, "cli")
    assert matches_tag(repo, "CLI")


def test_select_names_dedupes_sorts_and_drops_blank():
    repos = [
        Repo(full_name="z/last"),
        Repo(full_name="a/first"),
        Repo(full_name="z/last"),
        Repo(full_name=""),
        Repo(full_name="  "),
    ]
    assert select_names(repos) == ["a/first", "z/last"]
    assert select_names(repos, "") == ["a/first", "z/last"]


def test_select_names_empty():
    assert select_names([]) == []
    assert select_names([Repo(full_name="a/x", name="x")], "nope") == []


def test_basename():
    assert basename("owner/repo") == "repo"
    assert basename("repo") == "repo"


def test_split_existing_is_name_based(tmp_path):
    (tmp_path / "tool").mkdir()
    (tmp_path / "notes").write_text("")

    new, existing = split_existing(
        ["alice/tool", "bob/tool", "carol/notes", "dave/other"], tmp_path
    )

    assert new == ["dave/other"]
    assert existing == ["alice/tool", "bob/tool", "carol/notes"]
