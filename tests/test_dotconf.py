"""Tests unitaires pour le module dotconf."""

from pathlib import Path

import pytest

from nickel_conf.dotconf import (
    ANY_VALUE,
    INTEGER_VALUE,
    LOWERCASE_WORD_VALUE,
    KeyBinding,
    LineStore,
    LinuxSectionKeyManager,
    ScanState,
    SectionScanner,
    is_section_header,
    key_value_pattern,
    section_header_pattern,
)
from nickel_conf.logging import FileLogger


# Fixtures


@pytest.fixture
def log_file(tmp_path):
    """Chemin du fichier de log des tests."""
    return tmp_path / "dotconf.log"


@pytest.fixture
def logger(log_file):
    """Crée un logger pour les tests."""
    return FileLogger(str(log_file), {"logging": {"level": "DEBUG"}})


@pytest.fixture
def conf_path(tmp_path):
    """Chemin du fichier de configuration (non créé)."""
    return tmp_path / "Kobo eReader.conf"


@pytest.fixture
def manager(logger, conf_path):
    """Crée un gestionnaire sur le fichier temporaire."""
    return LinuxSectionKeyManager(logger, conf_path)


@pytest.fixture
def level():
    return KeyBinding("FrontLightLevel", INTEGER_VALUE, "PowerOptions")


@pytest.fixture
def color():
    return KeyBinding("ColorSetting", INTEGER_VALUE, "PowerOptions")


@pytest.fixture
def state():
    return KeyBinding(
        "FrontLightState", ANY_VALUE, "PowerOptions",
        create_if_missing=False,
    )


def write(path: Path, content: str) -> None:
    path.write_bytes(content.encode("utf-8"))


def read(path: Path) -> str:
    return path.read_bytes().decode("utf-8")


# Tests des motifs


class TestPatterns:
    """Tests pour les expressions régulières de lignes."""

    def test_any_section_header(self):
        assert is_section_header("[PowerOptions]")
        assert is_section_header("[Other Section]  ")
        assert not is_section_header("FrontLightLevel=40")
        assert not is_section_header(" [Indented]")

    def test_named_section_header(self):
        pattern = section_header_pattern("PowerOptions")
        assert pattern.match("[PowerOptions]")
        assert pattern.match("[PowerOptions] ")
        assert not pattern.match("[PowerOptionsX]")
        assert not pattern.match("[Other]")

    def test_section_name_is_escaped(self):
        pattern = section_header_pattern("a.b")
        assert pattern.match("[a.b]")
        assert not pattern.match("[axb]")

    def test_key_value_tolerates_spaces(self):
        pattern = key_value_pattern("FrontLightLevel", INTEGER_VALUE)
        assert pattern.match("FrontLightLevel = 40  ").group(1) == "40"
        assert pattern.match("FrontLightLevel=40").group(1) == "40"

    def test_integer_grammar_rejects_words(self):
        pattern = key_value_pattern("FrontLightLevel", INTEGER_VALUE)
        assert pattern.match("FrontLightLevel=abc") is None
        assert pattern.match("FrontLightLevel=-1") is None

    def test_any_grammar_strips_trailing_spaces(self):
        pattern = key_value_pattern("FrontLightState", ANY_VALUE)
        assert pattern.match("FrontLightState=true   ").group(1) == "true"

    def test_lowercase_word_grammar(self):
        pattern = key_value_pattern("AutoColorEnabled", LOWERCASE_WORD_VALUE)
        assert pattern.match("AutoColorEnabled=false").group(1) == "false"
        assert pattern.match("AutoColorEnabled=True") is None

    def test_key_is_case_sensitive(self):
        pattern = key_value_pattern("ColorSetting", INTEGER_VALUE)
        assert pattern.match("colorsetting=3000") is None


# Tests KeyBinding


class TestKeyBinding:
    """Tests pour KeyBinding."""

    def test_match_and_format(self, level):
        assert level.match("FrontLightLevel=40") == "40"
        assert level.match("ColorSetting=40") is None
        assert level.format_line("75") == "FrontLightLevel=75"
        assert level.header_line() == "[PowerOptions]"

    def test_defaults_to_create_if_missing(self, level):
        assert level.create_if_missing is True

    def test_immutability(self, level):
        with pytest.raises(AttributeError):
            level.key = "Other"

    def test_empty_key_raises(self):
        with pytest.raises(ValueError, match="clé"):
            KeyBinding("", INTEGER_VALUE, "PowerOptions")

    def test_empty_section_raises(self):
        with pytest.raises(ValueError, match="section"):
            KeyBinding("FrontLightLevel", INTEGER_VALUE, "")

    def test_equality_ignores_compiled_patterns(self):
        a = KeyBinding("ColorSetting", INTEGER_VALUE, "PowerOptions")
        b = KeyBinding("ColorSetting", INTEGER_VALUE, "PowerOptions")
        assert a == b
        assert hash(a) == hash(b)


# Tests SectionScanner


class TestSectionScanner:
    """Tests pour la machine à états du parcours."""

    def test_starts_outside(self):
        scanner = SectionScanner(section_header_pattern("PowerOptions"))
        assert scanner.state is ScanState.OUTSIDE_TARGET
        assert not scanner.entered

    def test_transitions_on_headers_only(self):
        scanner = SectionScanner(section_header_pattern("PowerOptions"))

        assert scanner.feed("[PowerOptions]") is True
        assert scanner.state is ScanState.INSIDE_TARGET

        assert scanner.feed("FrontLightLevel=40") is False
        assert scanner.state is ScanState.INSIDE_TARGET

        assert scanner.feed("[Other]") is True
        assert scanner.state is ScanState.OUTSIDE_TARGET
        assert scanner.entered

    def test_closes_target(self):
        scanner = SectionScanner(section_header_pattern("PowerOptions"))
        assert not scanner.closes_target("[Other]")
        scanner.feed("[PowerOptions]")
        assert scanner.closes_target("[Other]")
        assert scanner.closes_target("[PowerOptions]")
        assert not scanner.closes_target("Foo=bar")


# Tests LineStore


class TestLineStore:
    """Tests pour LineStore."""

    def test_empty_store_renders_nothing(self):
        assert LineStore().render() == ""

    def test_lines_are_newline_terminated(self):
        store = LineStore(["[PowerOptions]", "ColorSetting=2000"])
        assert store.render() == "[PowerOptions]\nColorSetting=2000\n"

    def test_remainder_is_appended_verbatim(self):
        store = LineStore(["a=1"], remainder="[Other]\r\nFoo = bar ")
        assert store.render() == "a=1\n[Other]\r\nFoo = bar "


# Tests LinuxSectionKeyManager.get


class TestSectionKeyManagerGet:
    """Tests de lecture."""

    def test_missing_file_returns_none(self, manager, level, log_file):
        assert manager.get(level) is None
        assert "Lecture impossible" in log_file.read_text()

    def test_reads_value_in_section(self, manager, conf_path, level):
        write(conf_path, "[PowerOptions]\nFrontLightLevel=40\n")
        assert manager.get(level) == "40"

    def test_ignores_other_sections(self, manager, conf_path, level):
        write(
            conf_path,
            "[Other]\nFrontLightLevel=10\n"
            "[PowerOptions]\nFrontLightLevel=40\n",
        )
        assert manager.get(level) == "40"

    def test_ignores_key_before_any_section(self, manager, conf_path, level):
        write(conf_path, "FrontLightLevel=10\n[PowerOptions]\n")
        assert manager.get(level) is None

    def test_ignores_key_after_section_ends(self, manager, conf_path, level):
        write(conf_path, "[PowerOptions]\n[Other]\nFrontLightLevel=10\n")
        assert manager.get(level) is None

    def test_first_match_wins(self, manager, conf_path, level):
        write(
            conf_path,
            "[PowerOptions]\nFrontLightLevel=40\nFrontLightLevel=50\n",
        )
        assert manager.get(level) == "40"

    def test_tolerates_whitespace_and_crlf(self, manager, conf_path, level):
        write(conf_path, "[PowerOptions]  \r\nFrontLightLevel = 40 \r\n")
        assert manager.get(level) == "40"

    def test_value_not_matching_grammar(self, manager, conf_path, level):
        write(conf_path, "[PowerOptions]\nFrontLightLevel=abc\n")
        assert manager.get(level) is None

    def test_section_at_end_of_file(self, manager, conf_path, level):
        write(conf_path, "[Other]\nFoo=bar\n[PowerOptions]\nFrontLightLevel=7")
        assert manager.get(level) == "7"

    def test_get_does_not_modify_file(self, manager, conf_path, level):
        content = "[PowerOptions]\nFrontLightLevel=40\n"
        write(conf_path, content)
        manager.get(level)
        assert read(conf_path) == content

    def test_undecodable_bytes_elsewhere(self, manager, conf_path, color):
        conf_path.write_bytes(
            b"[Reading]\nlastBook=Mis\xe9rables\n"
            b"[PowerOptions]\nColorSetting=3000\n"
        )
        assert manager.get(color) == "3000"

    def test_lone_carriage_return_is_not_a_line_end(
        self, manager, conf_path, level
    ):
        write(conf_path, "[PowerOptions]\nFoo=a\rFrontLightLevel=40\n")
        assert manager.get(level) is None


# Tests LinuxSectionKeyManager.set


class TestSectionKeyManagerSet:
    """Tests de réécriture."""

    def test_replaces_existing_key(self, manager, conf_path, level):
        write(
            conf_path,
            "[PowerOptions]\nFrontLightLevel=40\nColorSetting=3000\n"
            "[Other]\nFoo=bar\n",
        )
        assert manager.set(level, "75") is True
        assert read(conf_path) == (
            "[PowerOptions]\nFrontLightLevel=75\nColorSetting=3000\n"
            "[Other]\nFoo=bar\n"
        )

    def test_missing_file_creates_section(self, manager, conf_path, color):
        assert manager.set(color, "2000") is True
        assert read(conf_path) == "[PowerOptions]\nColorSetting=2000\n"

    def test_empty_file_creates_section(self, manager, conf_path, color):
        write(conf_path, "")
        manager.set(color, "2000")
        assert read(conf_path) == "[PowerOptions]\nColorSetting=2000\n"

    def test_appends_section_after_others(self, manager, conf_path, color):
        write(conf_path, "[Other]\nFoo=bar\n")
        manager.set(color, "2000")
        assert read(conf_path) == (
            "[Other]\nFoo=bar\n[PowerOptions]\nColorSetting=2000\n"
        )

    def test_inserts_before_next_section(self, manager, conf_path, color):
        write(
            conf_path,
            "[PowerOptions]\nFrontLightLevel=40\n"
            "[Other]\nFoo=bar\n[Third]\nBaz=1\n",
        )
        manager.set(color, "3000")
        assert read(conf_path) == (
            "[PowerOptions]\nFrontLightLevel=40\nColorSetting=3000\n"
            "[Other]\nFoo=bar\n[Third]\nBaz=1\n"
        )

    def test_inserts_at_end_of_section_at_eof(self, manager, conf_path, color):
        write(conf_path, "[PowerOptions]\nFrontLightLevel=40")
        manager.set(color, "3000")
        assert read(conf_path) == (
            "[PowerOptions]\nFrontLightLevel=40\nColorSetting=3000\n"
        )

    def test_key_in_other_section_untouched(self, manager, conf_path, level):
        write(
            conf_path,
            "[Other]\nFrontLightLevel=10\n[PowerOptions]\nColorSetting=3000\n",
        )
        manager.set(level, "75")
        assert read(conf_path) == (
            "[Other]\nFrontLightLevel=10\n[PowerOptions]\nColorSetting=3000\n"
            "FrontLightLevel=75\n"
        )

    def test_only_first_duplicate_replaced(self, manager, conf_path, level):
        write(
            conf_path,
            "[PowerOptions]\nFrontLightLevel=40\nFrontLightLevel=50\n",
        )
        manager.set(level, "75")
        assert read(conf_path) == (
            "[PowerOptions]\nFrontLightLevel=75\nFrontLightLevel=50\n"
        )

    def test_value_not_matching_grammar_is_kept(
        self, manager, conf_path, level
    ):
        write(conf_path, "[PowerOptions]\nFrontLightLevel=abc\n")
        manager.set(level, "75")
        assert read(conf_path) == (
            "[PowerOptions]\nFrontLightLevel=abc\nFrontLightLevel=75\n"
        )
        assert manager.get(level) == "75"

    def test_remainder_preserved_byte_for_byte(
        self, manager, conf_path, level
    ):
        tail = "ColorSetting = 3000  \n\n[Other]\r\nFoo=bar\r\n; note"
        write(conf_path, "[PowerOptions]\nFrontLightLevel=40\n" + tail)
        manager.set(level, "75")
        assert read(conf_path) == "[PowerOptions]\nFrontLightLevel=75\n" + tail

    def test_prefix_line_endings_normalized(self, manager, conf_path, level):
        write(
            conf_path,
            "[PowerOptions]\r\nFrontLightLevel=40\r\n[Other]\r\nFoo=bar\r\n",
        )
        manager.set(level, "75")
        assert read(conf_path) == (
            "[PowerOptions]\nFrontLightLevel=75\n[Other]\r\nFoo=bar\r\n"
        )

    def test_non_ascii_content_preserved(self, manager, conf_path, level):
        tail = "[Reading]\nlastBook=Les Misérables, tome 1\n"
        write(conf_path, "[PowerOptions]\nFrontLightLevel=40\n" + tail)
        manager.set(level, "75")
        assert read(conf_path) == "[PowerOptions]\nFrontLightLevel=75\n" + tail

    def test_undecodable_bytes_preserved(self, manager, conf_path, color):
        head = b"[Reading]\nlastBook=Mis\xe9rables\n[PowerOptions]\n"
        tail = b"[Other]\nauthor=Andr\xe9\n"
        conf_path.write_bytes(head + b"ColorSetting=3000\n" + tail)
        assert manager.set(color, "2000") is True
        assert conf_path.read_bytes() == head + b"ColorSetting=2000\n" + tail

    def test_lone_carriage_return_preserved(self, manager, conf_path, color):
        conf_path.write_bytes(
            b"[Other]\nFoo=a\rb\n[PowerOptions]\nColorSetting=3000\n"
        )
        manager.set(color, "2000")
        assert conf_path.read_bytes() == (
            b"[Other]\nFoo=a\rb\n[PowerOptions]\nColorSetting=2000\n"
        )

    def test_idempotent(self, manager, conf_path, color):
        write(conf_path, "[PowerOptions]\nFrontLightLevel=40\n[Other]\nFoo=bar")
        manager.set(color, "3000")
        first = read(conf_path)
        manager.set(color, "3000")
        assert read(conf_path) == first

    def test_no_create_leaves_file_unchanged(
        self, manager, conf_path, state, log_file
    ):
        content = "[PowerOptions]\nFrontLightLevel=40\n[Other]\nFoo=bar\n"
        write(conf_path, content)
        assert manager.set(state, "true") is True
        assert read(conf_path) == content
        assert "aucune création" in log_file.read_text()

    def test_no_create_does_not_create_file(self, manager, conf_path, state):
        assert manager.set(state, "true") is True
        assert not conf_path.exists()

    def test_no_create_still_replaces_existing(
        self, manager, conf_path, state
    ):
        write(conf_path, "[PowerOptions]\nFrontLightState=true\n")
        manager.set(state, "false")
        assert read(conf_path) == "[PowerOptions]\nFrontLightState=false\n"

    def test_round_trip(self, manager, conf_path, color):
        write(conf_path, "[Other]\nFoo=bar\n")
        manager.set(color, "4500")
        assert manager.get(color) == "4500"

    def test_logs_update(self, manager, conf_path, level, log_file):
        write(conf_path, "[PowerOptions]\nFrontLightLevel=40\n")
        manager.set(level, "75")
        assert "FrontLightLevel=75 mis à jour" in log_file.read_text()

    def test_write_error_propagates(self, logger, tmp_path, level):
        manager = LinuxSectionKeyManager(logger, tmp_path / "missing" / "x")
        with pytest.raises(FileNotFoundError):
            manager.set(level, "75")
