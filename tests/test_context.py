"""
Tests for context.py - immutable context and active-context swapping.
"""

import dataclasses
from concurrent.futures import ThreadPoolExecutor

import pytest

import wakachi
from wakachi import context as context_module
from wakachi.context import (
    SegmenterContext, clear_context, get_context, reload_context, set_context,
)
from wakachi.errors import DictionaryError
from wakachi import settings


class TestSegmenterContext:
    """Tests for SegmenterContext."""

    def test_build(self, example_context):
        assert len(example_context.trie) == 2
        assert example_context.tag_index.tags == ("", "noun", "particle")
        assert example_context.source is None

    def test_frozen(self, example_context):
        with pytest.raises(dataclasses.FrozenInstanceError):
            example_context.trie = None

    def test_build_accepts_generator(self):
        ctx = SegmenterContext.build((m for m in [("a", "x")]))
        assert "a" in ctx.trie
        assert ctx.pos_map.tags_for("a") == ("x",)

    def test_concurrent_calls_agree(self, verb_context):
        texts = ["雨が降っている", "雨 が 降っている", "降っている雨"] * 20
        expected = [verb_context.segment(t) for t in texts]
        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(verb_context.segment, texts))
        assert results == expected


class TestActiveContext:
    """Tests for get/set/reload of the process-wide context."""

    def test_set_and_get(self, example_context, verb_context):
        assert set_context(example_context) is None
        assert get_context() is example_context
        assert set_context(verb_context) is example_context
        assert get_context() is verb_context

    def test_lazy_load_from_settings(self, monkeypatch, dictionary_file):
        path = dictionary_file({"morphs": [{"morph": "x", "pos": "n"}]})
        monkeypatch.setattr("wakachi.settings.DICT_PATH", path)
        ctx = get_context()
        assert ctx.source == str(path)
        assert get_context() is ctx

    def test_default_path_from_settings(self):
        assert get_context().source == str(settings.DICT_PATH)

    def test_reload_swaps(self, example_context, dictionary_file):
        set_context(example_context)
        path = dictionary_file({"morphs": [{"morph": "今日は", "pos": "greeting"}]})
        new = reload_context(path)
        assert get_context() is new
        assert [w.pos for w in new.segment("今日は")] == ["greeting"]
        # The old context is untouched
        assert [w.text for w in example_context.segment("今日は")] == ["今日", "は"]

    def test_failed_reload_keeps_active(self, example_context, tmp_path):
        set_context(example_context)
        with pytest.raises(DictionaryError):
            reload_context(tmp_path / "missing.json")
        assert get_context() is example_context

    def test_clear(self, example_context):
        set_context(example_context)
        clear_context()
        assert context_module._context is None


class TestHighLevelAPI:
    """Tests for wakachi.analyze and wakachi.warm_up."""

    def test_analyze_with_context(self, example_context):
        words = wakachi.analyze("今日は", context=example_context)
        assert [w.text for w in words] == ["今日", "は"]

    def test_analyze_uses_active_context(self, example_context):
        set_context(example_context)
        assert [w.pos for w in wakachi.analyze("今日は")] == ["noun", "particle"]

    def test_warm_up(self, capsys):
        elapsed, timings = wakachi.warm_up(verbose=True)
        assert elapsed >= 0
        assert "dictionary" in timings
        assert "total" in timings
        assert context_module._context is not None
        assert "Warming up" in capsys.readouterr().out
