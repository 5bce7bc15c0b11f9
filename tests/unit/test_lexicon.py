"""Unit tests for canvascmd.lexicon — built-in tables and YAML overrides."""
from __future__ import annotations

import logging
from pathlib import Path

import pytest

from canvascmd.action.nodes import Intent, Target
from canvascmd.lexicon import (
    DEFAULT_LEXICON,
    Lexicon,
    LexiconError,
    lexicon_from_dict,
    load_lexicon,
)
from canvascmd.lexicon.tables import (
    COLORS,
    HEX_COLOR_RE,
    INTENT_GROUPS,
    PARAMETER_CUES,
    TARGET_GROUPS,
)


# ===========================================================================
# Built-in tables
# ===========================================================================


class TestTables:
    def test_parameter_cues_only_imply_enum_members(self) -> None:
        for cue in PARAMETER_CUES:
            assert isinstance(cue.implies, Intent)
            assert cue.implies is Intent.UPDATE_STYLE

    def test_intent_groups_are_executable_intents(self) -> None:
        intents = [group.intent for group in INTENT_GROUPS]
        assert Intent.UNKNOWN not in intents
        assert Intent.UPDATE_STYLE not in intents
        assert len(intents) == len(set(intents))

    def test_target_order(self) -> None:
        assert [g.target for g in TARGET_GROUPS] == [
            Target.TEXT,
            Target.IMAGE,
            Target.ALL,
            Target.SELECTED,
        ]

    def test_colours_are_hex(self) -> None:
        for entry in COLORS:
            assert HEX_COLOR_RE.match(entry.hex), entry

    def test_red_is_first_colour(self) -> None:
        assert COLORS[0].name == "紅色"
        assert COLORS[0].hex == "#FF0000"

    def test_tables_are_tuples(self) -> None:
        lex = DEFAULT_LEXICON
        for table in (lex.parameter_cues, lex.intent_groups, lex.target_groups, lex.colors):
            assert isinstance(table, tuple)


# ===========================================================================
# Lexicon helpers
# ===========================================================================


class TestLexicon:
    def test_default_is_case_sensitive(self) -> None:
        assert DEFAULT_LEXICON.case_sensitive is True
        assert DEFAULT_LEXICON.normalise("RED") == "RED"

    def test_case_insensitive_normalise(self) -> None:
        lex = Lexicon(case_sensitive=False)
        assert lex.normalise("RED") == "red"
        assert lex.contains(lex.normalise("Make it RED"), "red")

    def test_first_hit_respects_order(self) -> None:
        assert DEFAULT_LEXICON.first_hit("刪除所有", ("所有", "刪除")) == "所有"
        assert DEFAULT_LEXICON.first_hit("hello", ("所有",)) is None

    def test_color_name(self) -> None:
        assert DEFAULT_LEXICON.color_name("#ff0000") == "紅色"
        assert DEFAULT_LEXICON.color_name("#123456") == "#123456"


# ===========================================================================
# Overrides
# ===========================================================================


class TestLexiconFromDict:
    def test_none_returns_base(self) -> None:
        assert lexicon_from_dict(None) is DEFAULT_LEXICON

    def test_case_sensitive_flag(self) -> None:
        assert lexicon_from_dict({"case_sensitive": False}).case_sensitive is False

    def test_case_sensitive_must_be_bool(self) -> None:
        with pytest.raises(LexiconError, match="boolean"):
            lexicon_from_dict({"case_sensitive": "no"})

    def test_new_colour_appended(self) -> None:
        lex = lexicon_from_dict({"colors": {"teal": "#008080"}})
        assert lex.colors[-1].name == "teal"
        assert lex.colors[-1].hex == "#008080"
        assert len(lex.colors) == len(COLORS) + 1

    def test_existing_colour_replaced_in_place(self) -> None:
        lex = lexicon_from_dict({"colors": {"紅色": "#ee0000"}})
        assert lex.colors[0].name == "紅色"
        assert lex.colors[0].hex == "#EE0000"
        assert len(lex.colors) == len(COLORS)

    def test_bad_hex(self) -> None:
        with pytest.raises(LexiconError, match="RRGGBB"):
            lexicon_from_dict({"colors": {"teal": "teal"}})

    def test_extra_intent_keywords_appended(self) -> None:
        lex = lexicon_from_dict({"intents": {"delete": ["erase"]}})
        group = next(g for g in lex.intent_groups if g.intent is Intent.DELETE)
        assert group.keywords[-1] == "erase"
        assert [g.intent for g in lex.intent_groups] == [g.intent for g in INTENT_GROUPS]

    def test_single_keyword_string_accepted(self) -> None:
        lex = lexicon_from_dict({"targets": {"image": "picture"}})
        group = next(g for g in lex.target_groups if g.target is Target.IMAGE)
        assert group.keywords[-1] == "picture"

    def test_unknown_intent(self) -> None:
        with pytest.raises(LexiconError, match="unknown intent"):
            lexicon_from_dict({"intents": {"rotate": ["spin"]}})

    def test_intent_without_group(self) -> None:
        with pytest.raises(LexiconError, match="no keyword group"):
            lexicon_from_dict({"intents": {"update_style": ["style"]}})

    def test_unknown_target(self) -> None:
        with pytest.raises(LexiconError, match="unknown target"):
            lexicon_from_dict({"targets": {"shape": ["rect"]}})

    def test_keywords_must_be_strings(self) -> None:
        with pytest.raises(LexiconError, match="non-empty strings"):
            lexicon_from_dict({"intents": {"move": [1, 2]}})

    def test_top_level_must_be_mapping(self) -> None:
        with pytest.raises(LexiconError, match="mapping"):
            lexicon_from_dict(["colors"])  # type: ignore[arg-type]

    def test_unknown_key_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="canvascmd.lexicon.loader"):
            lex = lexicon_from_dict({"shapes": {}})
        assert lex == DEFAULT_LEXICON
        assert "shapes" in caplog.text

    def test_base_not_modified(self) -> None:
        lexicon_from_dict({"colors": {"teal": "#008080"}})
        assert len(DEFAULT_LEXICON.colors) == len(COLORS)


class TestLoadLexicon:
    def test_load(self, tmp_path: Path) -> None:
        path = tmp_path / "lexicon.yaml"
        path.write_text(
            "case_sensitive: false\ncolors:\n  teal: '#008080'\nintents:\n  delete: [erase]\n",
            encoding="utf-8",
        )
        lex = load_lexicon(path)
        assert lex.case_sensitive is False
        assert lex.colors[-1].name == "teal"

    def test_empty_file_returns_base(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        assert load_lexicon(path) == DEFAULT_LEXICON

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(LexiconError, match="cannot read"):
            load_lexicon(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text("colors: [unclosed", encoding="utf-8")
        with pytest.raises(LexiconError, match="invalid YAML"):
            load_lexicon(path)

    def test_error_names_source(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text("intents:\n  rotate: [spin]\n", encoding="utf-8")
        with pytest.raises(LexiconError) as exc_info:
            load_lexicon(path)
        assert exc_info.value.source == str(path)
