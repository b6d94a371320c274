"""Tests for auto_seedr.client."""

from __future__ import annotations

import json
import unittest

import requests

from auto_seedr.auth import TokenProvider
from auto_seedr.client import SeedrClient
from auto_seedr.config import CONFIG
from auto_seedr.models import ArchiveLink, FetchedFile, Folder

from fakes import AUTHORIZE_URL, FakeResponse, FakeSession, MemoryStore

RESOURCE_URL = CONFIG.resource_url
FOLDER_URL = CONFIG.folder_url


def make_client(session: FakeSession) -> SeedrClient:
    tokens = TokenProvider(MemoryStore("DEV"), session=session)
    return SeedrClient(tokens, session=session)


class ListFoldersTests(unittest.TestCase):
    def test_list_folders_parses_payload(self) -> None:
        """Folders come back in API order with the access token attached."""
        session = FakeSession(
            {
                FOLDER_URL: FakeResponse(
                    {"folders": [{"id": 1, "name": "Ubuntu ISO"}, {"id": 2, "name": "Docs"}]}
                )
            }
        )
        result = make_client(session).list_folders()

        self.assertTrue(result.ok)
        self.assertEqual([f.id for f in result.value], [1, 2])
        self.assertIsInstance(result.value[0], Folder)
        self.assertEqual(session.calls_to(FOLDER_URL)[0][2], {"access_token": "TOKEN"})

    def test_list_folders_non_success_returns_empty(self) -> None:
        """A failed listing yields an empty list instead of raising."""
        session = FakeSession({FOLDER_URL: FakeResponse({"error": "nope"}, status_code=401)})
        result = make_client(session).list_folders()

        self.assertEqual(result.value, [])
        self.assertFalse(result.ok)
        self.assertEqual(result.status_code, 401)

    def test_list_folders_missing_key_is_empty(self) -> None:
        session = FakeSession({FOLDER_URL: FakeResponse({})})
        self.assertEqual(make_client(session).list_folders().value, [])


class ResourceCallTests(unittest.TestCase):
    """Coverage for the resource.php operations."""

    def test_each_operation_fetches_its_own_token(self) -> None:
        session = FakeSession({RESOURCE_URL: FakeResponse({"result": True})})
        client = make_client(session)

        client.add_magnet("magnet:?xt=urn:btih:abc")
        client.delete_folder(1)
        client.create_archive(1)

        self.assertEqual(len(session.calls_to(AUTHORIZE_URL)), 3)

    def test_create_archive_posts_folder_reference(self) -> None:
        session = FakeSession(
            {
                RESOURCE_URL: FakeResponse(
                    {"result": True, "archive_id": 5, "archive_url": "https://dl/5.zip"}
                )
            }
        )
        result = make_client(session).create_archive(12)

        self.assertEqual(result.value, ArchiveLink("https://dl/5.zip", 5, True))
        data = session.calls_to(RESOURCE_URL)[0][2]
        self.assertEqual(data["func"], "create_empty_archive")
        self.assertEqual(data["access_token"], "TOKEN")
        self.assertEqual(json.loads(data["archive_arr"]), [{"type": "folder", "id": 12}])

    def test_create_archive_twice_makes_two_calls(self) -> None:
        """Archive links are not deduplicated."""
        session = FakeSession({RESOURCE_URL: FakeResponse({"result": True, "archive_url": "u"})})
        client = make_client(session)

        client.create_archive(3)
        client.create_archive(3)

        self.assertEqual(len(session.calls_to(RESOURCE_URL)), 2)

    def test_create_archive_failure_is_reported(self) -> None:
        session = FakeSession({RESOURCE_URL: FakeResponse(None, status_code=500)})
        result = make_client(session).create_archive(3)

        self.assertIsNone(result.value)
        self.assertEqual(result.error, "HTTP 500")

    def test_delete_folder(self) -> None:
        session = FakeSession({RESOURCE_URL: FakeResponse({"result": True})})
        result = make_client(session).delete_folder(7)

        self.assertTrue(result.ok)
        self.assertTrue(result.value)
        data = session.calls_to(RESOURCE_URL)[0][2]
        self.assertEqual(data["func"], "delete")
        self.assertEqual(json.loads(data["delete_arr"]), [{"type": "folder", "id": 7}])

    def test_delete_folder_failure(self) -> None:
        session = FakeSession({RESOURCE_URL: FakeResponse({}, status_code=403)})
        result = make_client(session).delete_folder(7)

        self.assertFalse(result.ok)
        self.assertFalse(result.value)

    def test_add_magnet_ignores_body(self) -> None:
        """add_magnet does not need a JSON body."""
        session = FakeSession({RESOURCE_URL: FakeResponse(None)})
        result = make_client(session).add_magnet("magnet:?xt=urn:btih:abc")

        self.assertTrue(result.ok)
        data = session.calls_to(RESOURCE_URL)[0][2]
        self.assertEqual(data["func"], "add_torrent")
        self.assertEqual(data["torrent_magnet"], "magnet:?xt=urn:btih:abc")

    def test_fetch_file(self) -> None:
        session = FakeSession(
            {RESOURCE_URL: FakeResponse({"url": "https://f", "name": "a.mkv", "result": True})}
        )
        result = make_client(session).fetch_file(99)

        self.assertEqual(result.value, FetchedFile("https://f", "a.mkv", True))
        self.assertEqual(session.calls_to(RESOURCE_URL)[0][2]["folder_file_id"], "99")

    def test_missing_token_is_sent_empty(self) -> None:
        session = FakeSession({RESOURCE_URL: FakeResponse({})}, token=None)
        make_client(session).add_magnet("magnet:?")

        self.assertEqual(session.calls_to(RESOURCE_URL)[0][2]["access_token"], "")

    def test_transport_errors_propagate(self) -> None:
        class BrokenSession(FakeSession):
            def post(self, url, data=None, timeout=None):
                raise requests.ConnectionError("offline")

        client = make_client(BrokenSession())
        with self.assertRaises(requests.ConnectionError):
            client.add_magnet("magnet:?")


if __name__ == "__main__":
    unittest.main()
