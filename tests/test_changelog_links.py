import re

import pytest

from chartmigrate.changelog_links import link_pr_numbers, main, rewrite_file

BASE = "https://example.com/project/pull"


def test_single_reference_is_linked():
    assert link_pr_numbers("fix crash (#12)", BASE) == f"fix crash [#12]({BASE}/12)"


def test_text_without_references_is_unchanged():
    text = "# Changelog\n\n- plain entry #5 and (5) and (#abc)\n"
    assert link_pr_numbers(text, BASE) == text


def test_every_reference_is_replaced():
    text = "- a (#1)\n- b (#22)\n- c (#333) and (#4444)\n"
    result = link_pr_numbers(text, BASE)
    assert re.search(r"\(#[0-9]+\)", result) is None
    for number in ("1", "22", "333", "4444"):
        assert f"[#{number}]({BASE}/{number})" in result


def test_linking_is_idempotent():
    once = link_pr_numbers("- item (#7)\n", BASE)
    assert link_pr_numbers(once, BASE) == once


def test_rewrite_file_in_place(tmp_path):
    path = tmp_path / "CHANGELOG.md"
    original = "## v1\n- feature (#101)\n- fix (#102)\n"
    path.write_text(original, encoding="utf-8")
    rewrite_file(path, BASE)
    assert path.read_text(encoding="utf-8") == link_pr_numbers(original, BASE)


def test_rewrite_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        rewrite_file(tmp_path / "missing.md", BASE)


def test_main_rewrites_given_path(tmp_path):
    path = tmp_path / "CHANGELOG.md"
    original = "- change (#9)\n"
    path.write_text(original, encoding="utf-8")
    assert main([str(path), "--base-url", BASE]) == 0
    assert path.read_text(encoding="utf-8") == link_pr_numbers(original, BASE)