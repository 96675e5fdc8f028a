"""Unit tests for BackupRepository: snapshots, retention sweep, catalog."""

import os
import pathlib
from datetime import datetime, timedelta

import pytest

from notes_app.domains.notes.entities import BackupEntry, make_backup_name
from notes_app.domains.notes.exceptions import (
    BackupNotFoundError, BackupSkipped, InvalidBackupNameError
)
from notes_app.storage.repositories import BACKUP_RETENTION, BackupRepository


def _touch(path, content=b"", mtime=None):
    path.write_bytes(content)
    if mtime is not None:
        os.utime(path, (mtime, mtime))
    return path


@pytest.fixture
def backup_dir(tmp_path):
    return tmp_path / "notes_backups"


class TestSnapshot:

    def test_snapshot_creates_directory_and_named_file(self, backup_dir):
        now = datetime(2024, 1, 1, 12, 0, 0)
        repo = BackupRepository(backup_dir, clock=lambda: now)

        backup = repo.snapshot_and_prune(b"previous")

        assert backup.name == "notes_20240101_120000.bak"
        assert (backup_dir / backup.name).read_bytes() == b"previous"

    def test_same_second_overwrites(self, backup_dir):
        now = datetime(2024, 1, 1, 12, 0, 0)
        repo = BackupRepository(backup_dir, clock=lambda: now)

        repo.snapshot_and_prune(b"first")
        repo.snapshot_and_prune(b"second")

        assert repo.list_names() == ["notes_20240101_120000.bak"]
        assert repo.read("notes_20240101_120000.bak").content == b"second"

    def test_unusable_directory_skips_backup(self, backup_dir):
        backup_dir.write_bytes(b"not a directory")
        repo = BackupRepository(backup_dir)

        with pytest.raises(BackupSkipped):
            repo.snapshot_and_prune(b"previous")


class TestPrune:

    def test_retention_window_is_one_hour(self):
        assert BACKUP_RETENTION == timedelta(hours=1)

    def test_removes_only_entries_older_than_window(self, backup_dir):
        backup_dir.mkdir()
        now = datetime.now().replace(microsecond=0)
        cutoff = int((now - BACKUP_RETENTION).timestamp())

        stale = _touch(backup_dir / "notes_stale.bak", mtime=cutoff - 60)
        boundary = _touch(backup_dir / "notes_boundary.bak", mtime=cutoff)
        fresh = _touch(backup_dir / "notes_fresh.bak", mtime=cutoff + 1800)

        removed = BackupRepository(backup_dir).prune(now)

        assert removed == 1
        assert not stale.exists()
        assert boundary.exists()
        assert fresh.exists()

    def test_snapshot_sweeps_old_backups(self, backup_dir):
        backup_dir.mkdir()
        old = _touch(
            backup_dir / "notes_20000101_000000.bak",
            mtime=(datetime.now() - timedelta(hours=2)).timestamp()
        )

        repo = BackupRepository(backup_dir)
        backup = repo.snapshot_and_prune(b"previous")

        assert not old.exists()
        assert repo.list_names() == [backup.name]

    def test_deletion_errors_are_ignored(self, backup_dir, monkeypatch):
        backup_dir.mkdir()
        old = _touch(
            backup_dir / "notes_20000101_000000.bak",
            mtime=(datetime.now() - timedelta(hours=2)).timestamp()
        )

        def refuse(self, *args, **kwargs):
            raise PermissionError("read-only")

        monkeypatch.setattr(pathlib.Path, "unlink", refuse)

        repo = BackupRepository(backup_dir)
        repo.snapshot_and_prune(b"previous")

        assert old.exists()

    def test_prune_missing_directory(self, backup_dir):
        assert BackupRepository(backup_dir).prune(datetime.now()) == 0


class TestCatalog:

    def test_missing_directory_lists_nothing(self, backup_dir):
        repo = BackupRepository(backup_dir)
        assert repo.list_backups() == []

    def test_lists_newest_first_and_filters(self, backup_dir):
        backup_dir.mkdir()
        for name in (
            "notes_20240101_120001.bak",
            "notes_20231231_235959.bak",
            "notes_20240101_120000.bak",
            "readme.txt",
        ):
            _touch(backup_dir / name)
        (backup_dir / "folder.bak").mkdir()

        names = BackupRepository(backup_dir).list_names()

        assert names == [
            "notes_20240101_120001.bak",
            "notes_20240101_120000.bak",
            "notes_20231231_235959.bak",
        ]

    def test_list_labels(self, backup_dir):
        backup_dir.mkdir()
        _touch(backup_dir / "notes_20240101_120000.bak")
        _touch(backup_dir / "broken.bak")

        labels = {b.name: b.label for b in BackupRepository(backup_dir).list_backups()}

        assert labels["notes_20240101_120000.bak"] == "Jan 1, 2024 at 12:00:00"
        assert labels["broken.bak"] == "broken.bak"

    @pytest.mark.parametrize("name", [
        "../notes.bak",
        "..notes.bak",
        "sub/notes_20240101_120000.bak",
        "sub\\notes_20240101_120000.bak",
        "notes.txt",
        "notes_20240101_120000.bak.txt",
        "",
    ])
    def test_validate_rejects(self, backup_dir, name):
        assert BackupRepository(backup_dir).validate(name) is False

    def test_validate_accepts_well_formed(self, backup_dir):
        backup_dir.mkdir()
        _touch(backup_dir / "notes_20240101_120000.bak")
        repo = BackupRepository(backup_dir)

        assert all(repo.validate(name) for name in repo.list_names())
        assert repo.validate("notes_20240101_120000.bak")

    def test_read_returns_content_and_label(self, backup_dir):
        backup_dir.mkdir()
        _touch(backup_dir / "notes_20240101_120000.bak", b"old text")

        backup = BackupRepository(backup_dir).read("notes_20240101_120000.bak")

        assert backup.content == b"old text"
        assert backup.long_label == "January 1, 2024 at 12:00:00"
        assert backup.created_at == datetime(2024, 1, 1, 12, 0, 0)

    def test_read_invalid_name(self, backup_dir):
        repo = BackupRepository(backup_dir)

        with pytest.raises(InvalidBackupNameError, match="Invalid backup filename"):
            repo.read("../notes.txt.bak")
        with pytest.raises(InvalidBackupNameError, match="Invalid backup file type"):
            repo.read("notes.txt")

    def test_read_missing(self, backup_dir):
        backup_dir.mkdir()
        with pytest.raises(BackupNotFoundError):
            BackupRepository(backup_dir).read("notes_20240101_120000.bak")


class TestBackupEntry:

    def test_name_from_timestamp(self):
        assert make_backup_name(datetime(2024, 3, 9, 7, 5, 1)) == "notes_20240309_070501.bak"

    @pytest.mark.parametrize("name", [
        "notes_garbage.bak",
        "notes_20241301_120000.bak",
        "notes_20240101_120000.bak.bak",
        "x_20240101_120000.bak",
    ])
    def test_malformed_names_fall_back_to_raw(self, name):
        entry = BackupEntry(name)
        assert entry.label == name
        assert entry.long_label == name
        assert entry.created_at is None
