"""Tests for IncludeParser: arity checks, local files, directories and remote targets."""
from __future__ import annotations

import http.client
import os
from pathlib import Path

import pytest

from archdsl.core.dsl import IncludedDslContext, IncludeParser, Tokens
from archdsl.core.exceptions import ArchDslError, GrammarError, IncludeResolutionError


def _parse(parent_file, *args, fetcher=None) -> IncludedDslContext:
    context = IncludedDslContext(parent_file=parent_file)
    IncludeParser(fetcher=fetcher).parse(context, Tokens(["!include", *args]))
    return context


def _names(context: IncludedDslContext) -> list[str]:
    return [f.file.name for f in context.files]


class TestGrammar:
    """Directive arity."""

    def test_missing_target_is_a_grammar_error(self, tmp_path: Path) -> None:
        context = IncludedDslContext(parent_file=tmp_path / "workspace.dsl")

        with pytest.raises(GrammarError) as exc_info:
            IncludeParser().parse(context, Tokens(["!include"]))

        assert str(exc_info.value) == "Expected: !include <file|directory|url>"
        assert context.files == []

    def test_too_many_tokens_is_a_grammar_error(self, tmp_path: Path) -> None:
        (tmp_path / "a.dsl").write_text("a\n", encoding="utf-8")
        context = IncludedDslContext(parent_file=tmp_path / "workspace.dsl")

        with pytest.raises(GrammarError) as exc_info:
            IncludeParser().parse(context, Tokens(["!include", "a.dsl", "b.dsl"]))

        assert str(exc_info.value) == "Too many tokens, expected: !include <file|directory|url>"
        assert context.files == []

    def test_grammar_error_is_checked_before_remote_fetch(self) -> None:
        calls: list[str] = []

        def fetcher(url: str) -> str:
            calls.append(url)
            return ""

        with pytest.raises(GrammarError):
            _parse(None, "https://example.com/a.dsl", "extra", fetcher=fetcher)
        assert calls == []

    def test_grammar_error_is_an_archdsl_error(self) -> None:
        with pytest.raises(ArchDslError):
            _parse(None)


class TestLocalFiles:

    def test_single_file_lines_and_origin(self, dsl_tree) -> None:
        root = dsl_tree({
            "workspace.dsl": "!include model.dsl\n",
            "model.dsl": "model {\n    user = person \"User\"\n}\n",
        })

        context = _parse(root / "workspace.dsl", "model.dsl")

        assert len(context.files) == 1
        unit = context.files[0]
        assert unit.file == root / "model.dsl"
        assert unit.lines == ["model {", "    user = person \"User\"", "}"]

    def test_file_is_resolved_against_directory_of_current_file(self, dsl_tree) -> None:
        root = dsl_tree({
            "nested/workspace.dsl": "",
            "nested/shared/people.dsl": "person\n",
            "shared/people.dsl": "wrong\n",
        })

        context = _parse(root / "nested" / "workspace.dsl", "shared/people.dsl")

        assert context.files[0].file == root / "nested" / "shared" / "people.dsl"
        assert context.files[0].lines == ["person"]

    def test_parent_directory_reference(self, dsl_tree) -> None:
        root = dsl_tree({"a/workspace.dsl": "", "common.dsl": "x\n"})

        context = _parse(root / "a" / "workspace.dsl", "../common.dsl")

        assert context.files[0].lines == ["x"]

    def test_crlf_and_missing_trailing_newline(self, tmp_path: Path) -> None:
        (tmp_path / "win.dsl").write_bytes(b"one\r\ntwo\r\nthree")

        context = _parse(tmp_path / "workspace.dsl", "win.dsl")

        assert context.files[0].lines == ["one", "two", "three"]

    def test_empty_file_registers_unit_without_lines(self, tmp_path: Path) -> None:
        (tmp_path / "empty.dsl").write_text("", encoding="utf-8")

        context = _parse(tmp_path / "workspace.dsl", "empty.dsl")

        assert len(context.files) == 1
        assert context.files[0].lines == []

    def test_blank_lines_inside_file_are_kept(self, tmp_path: Path) -> None:
        (tmp_path / "gaps.dsl").write_text("a\n\n\nb\n", encoding="utf-8")

        context = _parse(tmp_path / "workspace.dsl", "gaps.dsl")

        assert context.files[0].lines == ["a", "", "", "b"]

    def test_utf8_content(self, tmp_path: Path) -> None:
        (tmp_path / "i18n.dsl").write_text("name \"Zürich ✓\"\n", encoding="utf-8")

        context = _parse(tmp_path / "workspace.dsl", "i18n.dsl")

        assert context.files[0].lines == ["name \"Zürich ✓\""]

    def test_invalid_utf8_raises_include_resolution_error(self, tmp_path: Path) -> None:
        (tmp_path / "latin1.dsl").write_bytes("caf\xe9\n".encode("latin-1"))

        with pytest.raises(IncludeResolutionError) as exc_info:
            _parse(tmp_path / "workspace.dsl", "latin1.dsl")

        assert "utf-8" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)
        assert exc_info.value.context["cause"] == "UnicodeDecodeError"

    def test_missing_target_names_canonical_path(self, tmp_path: Path) -> None:
        context = IncludedDslContext(parent_file=tmp_path / "sub" / "workspace.dsl")

        with pytest.raises(IncludeResolutionError) as exc_info:
            IncludeParser().parse(context, Tokens(["!include", "../missing.dsl"]))

        expected = os.path.realpath(tmp_path / "missing.dsl")
        assert str(exc_info.value) == f"{expected} could not be found"
        assert context.files == []

    def test_absolute_target_is_nested_under_current_directory(self, tmp_path: Path) -> None:
        outside = tmp_path / "outside.dsl"
        outside.write_text("secret\n", encoding="utf-8")
        parent = tmp_path / "ws" / "workspace.dsl"

        context = IncludedDslContext(parent_file=parent)
        with pytest.raises(IncludeResolutionError) as exc_info:
            IncludeParser().parse(context, Tokens(["!include", str(outside)]))

        nested = tmp_path / "ws" / outside.relative_to(outside.anchor)
        assert str(exc_info.value) == f"{os.path.realpath(nested)} could not be found"
        assert context.files == []

    def test_absolute_target_reads_nested_copy(self, tmp_path: Path) -> None:
        nested = tmp_path / "ws" / "abs" / "x.dsl"
        nested.parent.mkdir(parents=True)
        nested.write_text("inner\n", encoding="utf-8")

        context = _parse(tmp_path / "ws" / "workspace.dsl", "/abs/x.dsl")

        assert context.files[0].file == nested
        assert context.files[0].lines == ["inner"]

    def test_local_include_without_current_file_is_a_no_op(self, tmp_path: Path) -> None:
        (tmp_path / "a.dsl").write_text("a\n", encoding="utf-8")

        context = _parse(None, "a.dsl")

        assert context.files == []

    def test_missing_local_target_without_current_file_is_a_no_op(self) -> None:
        context = _parse(None, "does/not/exist.dsl")

        assert context.files == []


class TestDirectories:

    def test_children_are_registered_in_sorted_order(self, dsl_tree) -> None:
        root = dsl_tree({
            "workspace.dsl": "",
            "model/b.dsl": "b\n",
            "model/c.dsl": "c\n",
            "model/a.dsl": "a\n",
        })

        context = _parse(root / "workspace.dsl", "model")

        assert _names(context) == ["a.dsl", "b.dsl", "c.dsl"]
        assert [f.lines for f in context.files] == [["a"], ["b"], ["c"]]

    def test_subdirectory_is_expanded_at_its_sorted_position(self, dsl_tree) -> None:
        root = dsl_tree({
            "workspace.dsl": "",
            "model/z.dsl": "z\n",
            "model/a.dsl": "a\n",
            "model/sub/y.dsl": "y\n",
            "model/sub/x.dsl": "x\n",
        })

        context = _parse(root / "workspace.dsl", "model")

        assert [f.file.relative_to(root / "model").as_posix() for f in context.files] == [
            "a.dsl",
            "sub/x.dsl",
            "sub/y.dsl",
            "z.dsl",
        ]

    def test_deeply_nested_directories_are_depth_first(self, dsl_tree) -> None:
        root = dsl_tree({
            "workspace.dsl": "",
            "m/1/2/3/deep.dsl": "deep\n",
            "m/1/top.dsl": "top\n",
            "m/0.dsl": "zero\n",
        })

        context = _parse(root / "workspace.dsl", "m")

        assert [f.lines[0] for f in context.files] == ["zero", "deep", "top"]

    def test_empty_directory_contributes_nothing(self, tmp_path: Path) -> None:
        (tmp_path / "empty").mkdir()

        context = _parse(tmp_path / "workspace.dsl", "empty")

        assert context.files == []

    @pytest.mark.skipif(
        not hasattr(os, "geteuid") or os.geteuid() == 0,
        reason="directory permissions are not enforced for root",
    )
    def test_unlistable_directory_contributes_nothing(self, dsl_tree) -> None:
        root = dsl_tree({
            "workspace.dsl": "",
            "model/a.dsl": "a\n",
            "model/locked/hidden.dsl": "hidden\n",
            "model/z.dsl": "z\n",
        })
        locked = root / "model" / "locked"
        locked.chmod(0o000)
        try:
            context = _parse(root / "workspace.dsl", "model")
        finally:
            locked.chmod(0o755)

        assert _names(context) == ["a.dsl", "z.dsl"]

    def test_unlistable_directory_is_logged(self, dsl_tree, monkeypatch, caplog) -> None:
        root = dsl_tree({"workspace.dsl": "", "model/a.dsl": "a\n"})
        real_iterdir = Path.iterdir

        def failing_iterdir(self):
            if self.name == "model":
                raise PermissionError(13, "Permission denied", str(self))
            return real_iterdir(self)

        monkeypatch.setattr(Path, "iterdir", failing_iterdir)

        with caplog.at_level("WARNING", logger="archdsl.core.dsl.includes"):
            context = _parse(root / "workspace.dsl", "model")

        assert context.files == []
        assert "Skipping include directory" in caplog.text

    def test_unreadable_file_in_directory_raises(self, dsl_tree, monkeypatch) -> None:
        root = dsl_tree({"workspace.dsl": "", "model/a.dsl": "a\n", "model/b.dsl": "b\n"})
        real_read_text = Path.read_text

        def failing_read_text(self, *args, **kwargs):
            if self.name == "b.dsl":
                raise PermissionError(13, "Permission denied", str(self))
            return real_read_text(self, *args, **kwargs)

        monkeypatch.setattr(Path, "read_text", failing_read_text)
        context = IncludedDslContext(parent_file=root / "workspace.dsl")

        with pytest.raises(IncludeResolutionError) as exc_info:
            IncludeParser().parse(context, Tokens(["!include", "model"]))

        assert "Permission denied" in str(exc_info.value)
        assert not isinstance(exc_info.value, PermissionError)
        # Units resolved before the failure have already been registered.
        assert _names(context) == ["a.dsl"]


class TestRemote:

    def test_remote_lines_are_attributed_to_including_file(self, tmp_path: Path) -> None:
        parent = tmp_path / "workspace.dsl"

        context = _parse(parent, "https://example.com/model.dsl", fetcher=lambda url: "a\nb\nc")

        assert len(context.files) == 1
        assert context.files[0].file == parent
        assert context.files[0].lines == ["a", "b", "c"]

    def test_remote_include_without_current_file(self) -> None:
        context = _parse(None, "https://example.com/model.dsl", fetcher=lambda url: "x")

        assert context.files[0].file is None
        assert context.files[0].lines == ["x"]

    def test_fetcher_receives_the_url_unchanged(self) -> None:
        seen: list[str] = []

        def fetcher(url: str) -> str:
            seen.append(url)
            return "ok"

        _parse(None, "https://example.com/a b.dsl?x=1", fetcher=fetcher)

        assert seen == ["https://example.com/a b.dsl?x=1"]

    def test_trailing_newlines_in_remote_body_are_dropped(self) -> None:
        context = _parse(None, "https://example.com/m.dsl", fetcher=lambda url: "a\n\nb\n\n")

        assert context.files[0].lines == ["a", "", "b"]

    def test_http_prefix_is_treated_as_local_path(self, tmp_path: Path) -> None:
        with pytest.raises(IncludeResolutionError) as exc_info:
            _parse(tmp_path / "workspace.dsl", "http://example.com/model.dsl",
                   fetcher=lambda url: pytest.fail("must not fetch"))

        assert "could not be found" in str(exc_info.value)

    def test_fetch_failure_is_wrapped(self) -> None:
        def fetcher(url: str) -> str:
            raise ConnectionRefusedError(111, "Connection refused")

        context = IncludedDslContext(parent_file=None)
        with pytest.raises(IncludeResolutionError) as exc_info:
            IncludeParser(fetcher=fetcher).parse(context, Tokens(["!include", "https://example.com/x"]))

        assert "Connection refused" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, ConnectionRefusedError)
        assert exc_info.value.context["source"] == "https://example.com/x"
        assert context.files == []

    def test_http_exception_from_fetcher_is_wrapped(self, tmp_path: Path) -> None:
        def fetcher(url: str) -> str:
            raise http.client.IncompleteRead(b"partial")

        context = IncludedDslContext(parent_file=tmp_path / "workspace.dsl")
        with pytest.raises(IncludeResolutionError) as exc_info:
            IncludeParser(fetcher=fetcher).parse(context, Tokens(["!include", "https://example.com/x"]))

        assert isinstance(exc_info.value.__cause__, http.client.IncompleteRead)
        assert exc_info.value.context["cause"] == "IncompleteRead"
        assert context.files == []
