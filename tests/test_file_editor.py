"""Tests pour IniFileEditor."""

from unittest.mock import MagicMock

import pytest

from ini_line_editor.config import EditorSettings
from ini_line_editor.editor import IniEditor, IniFileEditor
from ini_line_editor.errors import (
    EntryNotFoundError,
    IniFileMissingError,
    PersistenceError,
)
from ini_line_editor.filesystem import LineFileStore
from ini_line_editor.logging import Logger


SAMPLE = (
    "; Configuration de l'application\n"
    "[network]\n"
    "host = localhost\n"
    "port=8080\n"
    "; timeout = 30\n"
    "\n"
    "[paths]\n"
    "data = /var/lib/app/\n"
    "\n"
    "; [legacy]\n"
    "; mode = old\n"
)


# Fixtures


@pytest.fixture
def logger():
    """Logger factice pour vérifier les messages."""
    return MagicMock(spec=Logger)


@pytest.fixture
def ini_file(tmp_path):
    """Crée un fichier INI d'exemple."""
    path = tmp_path / "app.ini"
    path.write_text(SAMPLE, encoding="utf-8")
    return path


@pytest.fixture
def editor(ini_file, logger):
    """Crée un éditeur sur le fichier d'exemple."""
    return IniFileEditor(ini_file, logger=logger)


class TestReadValue:
    """Tests des lectures."""

    def test_implements_interface(self, editor):
        assert isinstance(editor, IniEditor)

    def test_reads_trimmed_values(self, editor):
        assert editor.get_value("network", "host") == "localhost"
        assert editor.get_value("network", "port") == "8080"
        assert editor.get_value("paths", "data") == "/var/lib/app/"

    def test_commented_key_is_absent(self, editor):
        assert editor.read_value("network", "timeout") is None
        with pytest.raises(EntryNotFoundError) as exc_info:
            editor.get_value("network", "timeout")
        assert exc_info.value.section == "network"
        assert exc_info.value.key == "timeout"
        assert "timeout" in str(exc_info.value)
        assert "network" in str(exc_info.value)

    def test_commented_section_is_absent(self, editor):
        assert editor.read_value("legacy", "mode", "défaut") == "défaut"

    def test_try_get_value(self, editor):
        assert editor.try_get_value("network", "host") == (True, "localhost")
        assert editor.try_get_value("network", "nope") == (False, None)

    def test_missing_file(self, tmp_path, logger):
        editor = IniFileEditor(tmp_path / "absent.ini", logger=logger)

        assert editor.read_value("A", "a") is None
        assert editor.read_value("A", "a", "1") == "1"
        with pytest.raises(IniFileMissingError, match="absent.ini"):
            editor.get_value("A", "a")
        with pytest.raises(FileNotFoundError):
            editor.read_all()
        logger.log_warning.assert_called_once()

    def test_case_policy(self, tmp_path):
        path = tmp_path / "case.ini"
        path.write_text("[A]\nx = 1\n", encoding="utf-8")

        assert IniFileEditor(path).read_value("A", "X") is None
        settings = EditorSettings(comparison="ignore_case")
        assert IniFileEditor(path, settings).read_value("a", "X") == "1"

    def test_read_all(self, editor):
        assert editor.read_all() == {
            "network": {"host": "localhost", "port": "8080"},
            "paths": {"data": "/var/lib/app/"},
        }

    def test_sections(self, editor):
        assert editor.sections() == ["network", "paths"]
        assert editor.sections(include_commented=True) == [
            "network", "paths", "legacy"
        ]
        assert editor.has_section("paths")
        assert not editor.has_section("legacy")
        assert editor.has_section("legacy", include_commented=True)


class TestWriteValue:
    """Tests des écritures."""

    def test_round_trip(self, editor, ini_file):
        editor.write_value("network", "host", "example.org")

        assert editor.get_value("network", "host") == "example.org"
        assert IniFileEditor(ini_file).get_value("network", "host") == "example.org"

    def test_unrelated_lines_preserved(self, editor, ini_file):
        before = ini_file.read_text(encoding="utf-8").splitlines()
        editor.write_value("network", "port", "9090")
        after = ini_file.read_text(encoding="utf-8").splitlines()

        assert len(after) == len(before)
        changed = [i for i, (a, b) in enumerate(zip(before, after)) if a != b]
        assert changed == [3]
        assert after[3] == "port = 9090"

    def test_idempotent(self, editor, ini_file):
        editor.write_value("paths", "cache", "/tmp/cache")
        first = ini_file.read_bytes()
        editor.write_value("paths", "cache", "/tmp/cache")
        assert ini_file.read_bytes() == first

    def test_insertion_keeps_separator(self, editor, ini_file):
        editor.write_value("network", "timeout_ms", "500")
        lines = ini_file.read_text(encoding="utf-8").splitlines()

        assert lines[4:8] == ["; timeout = 30", "timeout_ms = 500", "", "[paths]"]

    def test_activates_commented_key(self, editor):
        editor.write_value("network", "timeout", "60")
        assert editor.lines[4] == "timeout = 60"
        assert editor.get_value("network", "timeout") == "60"

    def test_reactivates_commented_section(self, editor, ini_file):
        editor.write_value("legacy", "mode", "new")
        lines = ini_file.read_text(encoding="utf-8").splitlines()

        assert lines[-2:] == ["[legacy]", "mode = new"]
        assert editor.read_all()["legacy"] == {"mode": "new"}

    def test_creates_missing_file(self, tmp_path):
        path = tmp_path / "new.ini"
        IniFileEditor(path).write_value("A", "a", "1")
        assert path.read_text(encoding="utf-8") == "[A]\na = 1\n"

    def test_crlf_newline(self, tmp_path):
        path = tmp_path / "win.ini"
        settings = EditorSettings(newline="\r\n")
        IniFileEditor(path, settings).write_value("A", "a", "1")
        assert path.read_bytes() == b"[A]\r\na = 1\r\n"

    def test_reads_crlf_file(self, tmp_path):
        path = tmp_path / "win.ini"
        path.write_bytes(b"[A]\r\na=1\r\n")
        assert IniFileEditor(path).lines == ["[A]", "a=1"]

    def test_logs_write(self, editor, logger):
        editor.write_value("network", "host", "h")
        logger.log_info.assert_called_with(
            f"[network] host écrit dans {editor.path}."
        )

    def test_persistence_error(self, tmp_path, logger):
        editor = IniFileEditor(tmp_path / "absent" / "app.ini", logger=logger)

        with pytest.raises(PersistenceError) as exc_info:
            editor.write_value("A", "a", "1")
        assert isinstance(exc_info.value.__cause__, OSError)
        assert editor.lines == []
        assert editor.read_value("A", "a") is None
        logger.log_error.assert_called_once()

    def test_padded_names_and_value(self, editor, ini_file):
        editor.write_value(" paths ", " data ", "  /srv/app/  ")
        editor.write_value(" paths ", " data ", "  /srv/app/  ")
        lines = ini_file.read_text(encoding="utf-8").splitlines()

        assert lines[6:9] == ["[paths]", "data = /srv/app/", ""]
        assert len(lines) == 11
        assert editor.get_value("paths", "data") == "/srv/app/"


class TestFailedSave:
    """Un échec d'écriture ne laisse aucune modification en mémoire."""

    @pytest.fixture
    def failing_editor(self, tmp_path, logger):
        store = MagicMock(spec=LineFileStore)
        store.exists.return_value = True
        store.read_lines.return_value = ["[A]", "x = 1"]
        store.write_lines.side_effect = PersistenceError("disque plein")
        return IniFileEditor(tmp_path / "a.ini", logger=logger, file_store=store)

    def test_write_value_rolled_back(self, failing_editor, logger):
        with pytest.raises(PersistenceError):
            failing_editor.write_value("A", "x", "2")

        assert failing_editor.read_value("A", "x") == "1"
        assert failing_editor.lines == ["[A]", "x = 1"]
        logger.log_warning.assert_called_once()

    def test_insertion_rolled_back(self, failing_editor):
        with pytest.raises(PersistenceError):
            failing_editor.write_value("B", "y", "2")

        assert failing_editor.sections() == ["A"]
        assert failing_editor.read_value("B", "y") is None

    def test_comment_key_rolled_back(self, failing_editor):
        with pytest.raises(PersistenceError):
            failing_editor.comment_key("A", "x")

        assert failing_editor.get_value("A", "x") == "1"
        assert failing_editor.has_section("A")


class TestCommentKey:
    """Tests de la mise en commentaire."""

    def test_cascade(self, tmp_path):
        path = tmp_path / "a.ini"
        path.write_text("[A]\nx=1\n", encoding="utf-8")
        editor = IniFileEditor(path)

        assert editor.comment_key("A", "x") is True
        assert path.read_text(encoding="utf-8") == "; [A]\n; x = 1\n"
        assert editor.read_value("A", "x") is None

    def test_keeps_section_with_active_keys(self, editor, ini_file):
        editor.comment_key("network", "host")
        lines = ini_file.read_text(encoding="utf-8").splitlines()

        assert lines[1:4] == ["[network]", "; host = localhost", "port=8080"]

    def test_noop_does_not_write(self, editor, ini_file, logger):
        before = ini_file.read_bytes()

        assert editor.comment_key("network", "timeout") is False
        assert editor.comment_key("unknown", "x") is False
        assert ini_file.read_bytes() == before
        logger.log_info.assert_called_once()  # chargement uniquement

    def test_missing_file_is_silent(self, tmp_path):
        path = tmp_path / "absent.ini"
        assert IniFileEditor(path).comment_key("A", "x") is False
        assert not path.exists()


class TestUpdateSection:
    """Tests pour update_section."""

    def test_writes_only_changes(self, editor, ini_file):
        before = ini_file.read_text(encoding="utf-8")

        assert editor.update_section(
            "network", {"host": "localhost", "port": "8080"}
        ) is False
        assert ini_file.read_text(encoding="utf-8") == before

    def test_updates_and_creates(self, editor):
        assert editor.update_section(
            "network", {"port": "1", "retries": "3"}
        ) is True
        assert editor.read_all()["network"] == {
            "host": "localhost", "port": "1", "retries": "3"
        }


class TestInjectedStore:
    """L'éditeur délègue la persistance au LineFileStore injecté."""

    def test_uses_file_store(self, tmp_path, logger):
        store = MagicMock()
        store.exists.return_value = True
        store.read_lines.return_value = ["[A]", "a=1"]
        editor = IniFileEditor(tmp_path / "x.ini", logger=logger, file_store=store)

        editor.write_value("A", "b", "2")

        store.write_lines.assert_called_once_with(
            tmp_path / "x.ini", ["[A]", "a=1", "b = 2"]
        )
