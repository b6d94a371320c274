"""Tests for auto_seedr.models."""

from __future__ import annotations

import unittest

from auto_seedr.models import ApiResult, ArchiveLink, DeviceCode, FetchedFile, Folder


class FolderTests(unittest.TestCase):
    """Coverage for the Folder model helpers."""

    def test_from_dict_reads_full_payload(self) -> None:
        """from_dict maps every API field."""
        folder = Folder.from_dict(
            {
                "id": 42,
                "name": "Ubuntu ISO",
                "fullname": "Ubuntu ISO",
                "size": 4_000_000_000,
                "play_audio": False,
                "play_video": True,
                "is_shared": False,
                "last_update": "2024-01-01 00:00:00",
            }
        )

        self.assertEqual(folder.id, 42)
        self.assertEqual(folder.name, "Ubuntu ISO")
        self.assertEqual(folder.size, 4_000_000_000)
        self.assertTrue(folder.play_video)
        self.assertEqual(folder.last_update, "2024-01-01 00:00:00")

    def test_from_dict_defaults_optional_fields(self) -> None:
        """Only id and name are required; fullname falls back to name."""
        folder = Folder.from_dict({"id": "7", "name": "Docs"})

        self.assertEqual(folder.id, 7)
        self.assertEqual(folder.fullname, "Docs")
        self.assertEqual(folder.size, 0)
        self.assertFalse(folder.is_shared)


class PayloadModelTests(unittest.TestCase):
    def test_archive_link_reads_result_flag(self) -> None:
        link = ArchiveLink.from_dict(
            {"result": True, "archive_id": "9", "archive_url": "https://x/a.zip"}
        )
        self.assertEqual(link, ArchiveLink("https://x/a.zip", 9, True))

    def test_archive_link_without_result_is_not_success(self) -> None:
        link = ArchiveLink.from_dict({})
        self.assertFalse(link.success)
        self.assertIsNone(link.archive_url)
        self.assertIsNone(link.archive_id)

    def test_fetched_file_and_device_code(self) -> None:
        self.assertEqual(
            FetchedFile.from_dict({"url": "u", "name": "n", "result": True}),
            FetchedFile("u", "n", True),
        )
        self.assertEqual(
            DeviceCode.from_dict({"device_code": "dev", "user_code": "USR"}),
            DeviceCode("dev", "USR"),
        )


class ApiResultTests(unittest.TestCase):
    def test_ok_tracks_error(self) -> None:
        self.assertTrue(ApiResult([], 200).ok)
        self.assertFalse(ApiResult([], 500, "HTTP 500").ok)


if __name__ == "__main__":
    unittest.main()
