"""
Tests for the FileService.
"""

import base64

import pytest

from webdesk.models.requests import RequestParams
from webdesk.models.tables import MimeEntry
from webdesk.services.file_service import FileService, file_extension

PNG_BYTES = b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR"


class TestFileService:
    """Test cases for FileService."""

    @pytest.fixture
    def file_service(self, tmp_path):
        """Create a FileService rooted at a temporary directory."""
        mime_table = {
            "txt": MimeEntry(extension="txt", content_type="text/plain", is_binary=False),
            "png": MimeEntry(extension="png", content_type="image/png", is_binary=True),
        }
        return FileService(str(tmp_path), mime_table)

    def test_file_extension(self):
        assert file_extension("notes.txt") == "txt"
        assert file_extension("archive.tar.gz") == "gz"

    def test_mime_table_is_read_only(self, file_service):
        with pytest.raises(TypeError):
            file_service.mime_table["js"] = MimeEntry(extension="js", content_type="text/javascript")

    def test_read_text_file(self, file_service, tmp_path):
        (tmp_path / "notes.txt").write_bytes("héllo\r\nworld".encode("utf-8"))
        result = file_service.read_file("notes.txt")
        assert result.status_code == 200
        assert result.body == "héllo\r\nworld"
        assert result.content_type == "text/plain"

    def test_read_binary_file(self, file_service, tmp_path):
        (tmp_path / "logo.png").write_bytes(PNG_BYTES)
        result = file_service.read_file("logo.png")
        assert result.status_code == 200
        assert result.body == PNG_BYTES
        assert result.content_type == "image/png"

    def test_read_unknown_type_even_if_present(self, file_service, tmp_path):
        (tmp_path / "data.xyz").write_text("present")
        result = file_service.read_file("data.xyz")
        assert result.status_code == 404
        assert result.body == "Read Error: File type xyz is not defined."

    def test_read_missing_file(self, file_service):
        result = file_service.read_file("missing.txt")
        assert result.status_code == 404
        assert result.body.startswith("Read Error: ")
        assert result.content_type == "text/plain"

    def test_write_text_file(self, file_service, tmp_path):
        result = file_service.write_file("notes.txt", RequestParams(data="a\nb"))
        assert result.status_code == 200
        assert result.body == "Wrote notes.txt."
        assert (tmp_path / "notes.txt").read_bytes() == b"a\nb"

    def test_write_binary_file_decodes_base64(self, file_service, tmp_path):
        data = base64.b64encode(PNG_BYTES).decode()
        result = file_service.write_file("logo.png", RequestParams(data=data))
        assert result.status_code == 200
        assert (tmp_path / "logo.png").read_bytes() == PNG_BYTES

    def test_write_unknown_type(self, file_service, tmp_path):
        result = file_service.write_file("run.exe", RequestParams(data="x"))
        assert result.status_code == 401
        assert result.body == "Write Error: File type exe is not defined."
        assert not (tmp_path / "run.exe").exists()

    def test_write_without_data(self, file_service, tmp_path):
        result = file_service.write_file("notes.txt", RequestParams())
        assert result.status_code == 401
        assert result.body == "Write Error: Data parameter missing for notes.txt."
        assert not (tmp_path / "notes.txt").exists()

    def test_write_empty_data(self, file_service, tmp_path):
        result = file_service.write_file("notes.txt", RequestParams(data=""))
        assert result.status_code == 404
        assert result.body == "Write Error: Cannot create empty file notes.txt."
        assert not (tmp_path / "notes.txt").exists()

    def test_write_into_missing_folder(self, file_service):
        result = file_service.write_file("nowhere/notes.txt", RequestParams(data="x"))
        assert result.status_code == 404
        assert result.body.startswith("Write Error: ")

    def test_write_invalid_base64(self, file_service, tmp_path):
        result = file_service.write_file("logo.png", RequestParams(data="abc"))
        assert result.status_code == 404
        assert result.body.startswith("Write Error: ")
        assert not (tmp_path / "logo.png").exists()

    def test_create_folder_is_recursive_and_idempotent(self, file_service, tmp_path):
        params = RequestParams(folder="a/b:c")
        first = file_service.create_folder(params)
        second = file_service.create_folder(params)
        assert first.status_code == 200
        assert second.status_code == 200
        assert first.body == "Created folder: a/b/c"
        assert (tmp_path / "a" / "b" / "c").is_dir()

    def test_create_folder_over_file(self, file_service, tmp_path):
        (tmp_path / "taken").write_text("x")
        result = file_service.create_folder(RequestParams(folder="taken"))
        assert result.status_code == 404
        assert result.body.startswith("Folder Error: ")

    def test_query_all_excludes_folders(self, file_service, tmp_path):
        (tmp_path / "a.txt").write_text("a")
        (tmp_path / "b.png").write_bytes(PNG_BYTES)
        (tmp_path / "sub").mkdir()
        result = file_service.query_files(RequestParams(folder="", search="all"))
        assert result.status_code == 200
        assert result.body.split("\n") == ["a.txt", "b.png"]

    def test_query_folders(self, file_service, tmp_path):
        (tmp_path / "a.txt").write_text("a")
        (tmp_path / "sub").mkdir()
        (tmp_path / "other").mkdir()
        result = file_service.query_files(RequestParams(search="folders"))
        assert result.body.split("\n") == ["other", "sub"]

    def test_query_star_extension(self, file_service, tmp_path):
        for name in ["a.txt", "b.png", "note.txt"]:
            (tmp_path / name).write_text("x")
        result = file_service.query_files(RequestParams(search="*txt"))
        assert set(result.body.split("\n")) == {"a.txt", "note.txt"}

    def test_query_subfolder_with_trailing_separator(self, file_service, tmp_path):
        (tmp_path / "docs").mkdir()
        (tmp_path / "docs" / "readme.txt").write_text("x")
        result = file_service.query_files(RequestParams(folder="docs/", search="txt,md"))
        assert result.status_code == 200
        assert result.body == "readme.txt"

    def test_query_no_matches(self, file_service, tmp_path):
        (tmp_path / "a.txt").write_text("a")
        result = file_service.query_files(RequestParams(search="@zzz"))
        assert result.status_code == 200
        assert result.body == ""

    def test_query_missing_folder(self, file_service):
        result = file_service.query_files(RequestParams(folder="missing", search="all"))
        assert result.status_code == 404
        assert result.body.startswith("Could not read files: ")
