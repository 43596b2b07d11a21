"""Tests for cart slot repositories"""
from urllib.parse import quote

from starlette.responses import Response

from storefront.database.carts import CookieCartRepository, InMemoryCartRepository


class TestInMemoryCartRepository:
    """Tests for the dictionary-backed slot."""

    def test_load_empty(self):
        assert InMemoryCartRepository().load() is None

    def test_save_then_load(self):
        repository = InMemoryCartRepository()
        repository.save("[]")
        assert repository.load() == "[]"

    def test_shared_slots(self):
        slots = {}
        InMemoryCartRepository(slots=slots).save("[1]")
        assert InMemoryCartRepository(slots=slots).load() == "[1]"

    def test_key_isolation(self):
        slots = {}
        InMemoryCartRepository(key="a", slots=slots).save("[1]")
        assert InMemoryCartRepository(key="b", slots=slots).load() is None


class TestCookieCartRepository:
    """Tests for the cookie-backed slot."""

    def test_decodes_incoming_cookie(self):
        payload = '[{"id": "p1"}]'
        repository = CookieCartRepository("fixev_cart", quote(payload, safe=""))
        assert repository.load() == payload

    def test_missing_cookie(self):
        assert CookieCartRepository("fixev_cart", None).load() is None

    def test_reads_own_writes(self):
        repository = CookieCartRepository("fixev_cart", None)
        repository.save("[]")
        assert repository.load() == "[]"
        assert repository.dirty

    def test_write_to_sets_cookie_after_save(self):
        repository = CookieCartRepository("fixev_cart", None)
        repository.save('[{"id": "p1"}]')
        response = Response()

        repository.write_to(response, max_age=60)

        header = response.headers["set-cookie"]
        assert header.startswith("fixev_cart=%5B%7B%22id%22")
        assert "Max-Age=60" in header
        assert "HttpOnly" in header

    def test_write_to_skips_unchanged(self):
        repository = CookieCartRepository("fixev_cart", quote("[]"))
        response = Response()

        repository.write_to(response, max_age=60)

        assert "set-cookie" not in response.headers
