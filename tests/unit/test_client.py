"""
Unit tests for the APIClient request layer.

Uses a recording backend so every test can check exactly what reached the
transport.
"""
import unittest

from apiwire import APIClient, AuthenticationUnavailableError, ClientConfig, Token, TokenStore
from apiwire.http.requests_client import RequestsHTTPClient

from .fakes import RecordingHTTPClient

PREFIX = "https://api.example.com/v1/"


class TestEndpointUrl(unittest.TestCase):
    """Tests for relative URL resolution."""

    def setUp(self):
        self.client = APIClient(ClientConfig(prefix=PREFIX), http=RecordingHTTPClient())

    def test_relative_url_gets_prefix(self):
        self.assertEqual(self.client.endpoint_url("me"), "https://api.example.com/v1/me")

    def test_absolute_https_url_unchanged(self):
        url = "https://other.example.com/x"
        self.assertEqual(self.client.endpoint_url(url), url)

    def test_absolute_http_url_unchanged(self):
        url = "http://localhost:8001/health"
        self.assertEqual(self.client.endpoint_url(url), url)

    def test_resolved_url_is_not_prefixed_again(self):
        once = self.client.endpoint_url("playlists/abc/tracks")
        self.assertEqual(self.client.endpoint_url(once), once)
        self.assertEqual(once.count(PREFIX), 1)

    def test_empty_path_returns_prefix(self):
        self.assertEqual(self.client.endpoint_url(""), PREFIX)


class TestAuthHeaders(unittest.TestCase):
    """Tests for bearer header construction."""

    def test_auth_headers_with_token(self):
        store = TokenStore(Token(access_token="abc123"))
        client = APIClient(ClientConfig(prefix=PREFIX), http=RecordingHTTPClient(), token_store=store)
        self.assertEqual(client.auth_headers(), {"authorization": "Bearer abc123"})

    def test_auth_headers_without_token_raises(self):
        client = APIClient(ClientConfig(prefix=PREFIX), http=RecordingHTTPClient())
        with self.assertRaises(AuthenticationUnavailableError):
            client.auth_headers()

    def test_auth_headers_follow_token_updates(self):
        store = TokenStore(Token(access_token="first"))
        client = APIClient(ClientConfig(prefix=PREFIX), http=RecordingHTTPClient(), token_store=store)
        store.set_token(Token(access_token="second"))
        self.assertEqual(client.auth_headers()["authorization"], "Bearer second")


class TestBasicVerbs(unittest.IsolatedAsyncioTestCase):
    """Basic verbs only resolve the URL and pass everything else through."""

    async def asyncSetUp(self):
        self.http = RecordingHTTPClient(response='{"ok": true}')
        self.client = APIClient(ClientConfig(prefix=PREFIX), http=self.http)

    async def test_get_resolves_url_and_passes_query(self):
        result = await self.client.get("search", None, {"q": "radiohead", "type": "artist"})

        self.assertEqual(result, '{"ok": true}')
        self.assertEqual(
            self.http.get_call_history(),
            [("get", PREFIX + "search", None, {"q": "radiohead", "type": "artist"})],
        )

    async def test_post_with_empty_object_payload(self):
        await self.client.post("me/following", None, {})

        verb, url, headers, payload = self.http.calls[0]
        self.assertEqual(verb, "post")
        self.assertEqual(url, PREFIX + "me/following")
        self.assertEqual(payload, {})
        self.assertIsNotNone(payload)

    async def test_post_form_uses_absolute_url_unchanged(self):
        form = {"grant_type": "client_credentials"}
        headers = {"authorization": "Basic abc"}
        await self.client.post_form("https://accounts.example.com/api/token", headers, form)

        self.assertEqual(
            self.http.calls,
            [("post_form", "https://accounts.example.com/api/token", headers, form)],
        )

    async def test_put_and_delete_pass_payload(self):
        await self.client.put("me/tracks", None, {"ids": ["a", "b"]})
        await self.client.delete("me/tracks", None, {"ids": ["a"]})

        self.assertEqual(self.http.calls[0], ("put", PREFIX + "me/tracks", None, {"ids": ["a", "b"]}))
        self.assertEqual(self.http.calls[1], ("delete", PREFIX + "me/tracks", None, {"ids": ["a"]}))

    async def test_basic_verbs_work_without_token(self):
        await self.client.get("markets", None, {})
        self.assertEqual(len(self.http.calls), 1)


class TestEndpointVerbs(unittest.IsolatedAsyncioTestCase):
    """Endpoint verbs add the bearer header before delegating."""

    async def asyncSetUp(self):
        self.http = RecordingHTTPClient(response="{}")
        self.store = TokenStore(Token(access_token="tok"))
        self.client = APIClient(ClientConfig(prefix=PREFIX), http=self.http, token_store=self.store)

    async def test_endpoint_get(self):
        await self.client.endpoint_get("me", {})

        self.assertEqual(self.http.calls, [("get", PREFIX + "me", {"authorization": "Bearer tok"}, {})])

    async def test_endpoint_post(self):
        await self.client.endpoint_post("users/u/playlists", {"name": "mix"})

        verb, url, headers, payload = self.http.calls[0]
        self.assertEqual((verb, url), ("post", PREFIX + "users/u/playlists"))
        self.assertEqual(headers, {"authorization": "Bearer tok"})
        self.assertEqual(payload, {"name": "mix"})

    async def test_endpoint_put(self):
        await self.client.endpoint_put("me/player/pause", {})
        self.assertEqual(self.http.calls[0][0], "put")
        self.assertEqual(self.http.calls[0][2], {"authorization": "Bearer tok"})

    async def test_endpoint_delete(self):
        await self.client.endpoint_delete("me/albums", {"ids": ["x"]})
        self.assertEqual(self.http.calls[0], ("delete", PREFIX + "me/albums", {"authorization": "Bearer tok"}, {"ids": ["x"]}))

    async def test_each_endpoint_verb_makes_exactly_one_call(self):
        await self.client.endpoint_get("me", {})
        await self.client.endpoint_post("me", {})
        await self.client.endpoint_put("me", {})
        await self.client.endpoint_delete("me", {})
        self.assertEqual([call[0] for call in self.http.calls], ["get", "post", "put", "delete"])

    async def test_caller_headers_are_added(self):
        await self.client.endpoint_get("me", {}, headers={"Accept-Language": "de"})

        headers = self.http.calls[0][2]
        self.assertEqual(headers, {"authorization": "Bearer tok", "Accept-Language": "de"})

    async def test_caller_authorization_header_wins(self):
        await self.client.endpoint_post("me", {}, headers={"Authorization": "Bearer other"})

        headers = self.http.calls[0][2]
        self.assertEqual(headers, {"Authorization": "Bearer other"})

    async def test_endpoint_verbs_without_token_make_no_call(self):
        self.store.clear()
        calls = [
            self.client.endpoint_get("me", {}),
            self.client.endpoint_post("me", {}),
            self.client.endpoint_put("me", {}),
            self.client.endpoint_delete("me", {}),
        ]
        for call in calls:
            with self.assertRaises(AuthenticationUnavailableError):
                await call
        self.assertEqual(self.http.calls, [])


class TestClientLifecycle(unittest.IsolatedAsyncioTestCase):
    """Tests for construction and closing."""

    async def test_context_manager_closes_backend(self):
        http = RecordingHTTPClient()
        async with APIClient(ClientConfig(prefix=PREFIX), http=http) as client:
            self.assertIs(client.http, http)
        self.assertTrue(http.closed)

    async def test_backend_created_from_config(self):
        client = APIClient(ClientConfig(prefix=PREFIX, backend="requests", timeout=5.0))
        try:
            self.assertIsInstance(client.http, RequestsHTTPClient)
            self.assertEqual(client.http.timeout, 5.0)
            self.assertEqual(client.prefix, PREFIX)
        finally:
            await client.aclose()

    async def test_default_config(self):
        client = APIClient(http=RecordingHTTPClient())
        self.assertEqual(client.prefix, ClientConfig().prefix)
        self.assertFalse(client.token_store.has_token())
