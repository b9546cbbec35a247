"""Tests for upload checks and scoped staging."""

from __future__ import annotations

import io

import pytest

from costsplit.core.exceptions import ValidationError
from costsplit.services.uploads import check_csv_upload, staged_upload


class TestCheckCsvUpload:
    def test_csv_content_type_with_any_name(self):
        check_csv_upload("export.txt", "text/csv")

    def test_csv_name_with_any_content_type(self):
        check_csv_upload("export.csv", "application/octet-stream")

    def test_rejects_other_files(self):
        with pytest.raises(ValidationError, match="Only CSV"):
            check_csv_upload("report.pdf", "application/pdf")


class TestStagedUpload:
    def test_copies_and_removes_on_success(self, tmp_path):
        with staged_upload(io.BytesIO(b"a,b\n1,2"), "export.csv", tmp_path) as path:
            assert path.read_bytes() == b"a,b\n1,2"
            assert path.name.endswith("-export.csv")
        assert not path.exists()
        assert list(tmp_path.iterdir()) == []

    def test_removes_on_error(self, tmp_path):
        with pytest.raises(RuntimeError):
            with staged_upload(io.BytesIO(b"x"), "export.csv", tmp_path):
                raise RuntimeError("boom")
        assert list(tmp_path.iterdir()) == []

    def test_strips_directory_from_name(self, tmp_path):
        with staged_upload(io.BytesIO(b"x"), "../../etc/export.csv", tmp_path / "up") as path:
            assert path.parent == tmp_path / "up"

    def test_same_name_in_same_millisecond_gets_distinct_files(self, tmp_path, monkeypatch):
        monkeypatch.setattr("costsplit.services.uploads.time.time", lambda: 1000.0)
        with staged_upload(io.BytesIO(b"outer"), "x.csv", tmp_path) as outer:
            with staged_upload(io.BytesIO(b"inner"), "x.csv", tmp_path) as inner:
                assert inner != outer
                assert inner.read_bytes() == b"inner"
            assert not inner.exists()
            assert outer.read_bytes() == b"outer"
        assert list(tmp_path.iterdir()) == []
