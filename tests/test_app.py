# tests/test_app.py
import pytest

import app as web
from unscrambler.anagram_index import AnagramIndex


@pytest.fixture
def client():
    idx = AnagramIndex()
    idx.build(["cat", "act", "dog", "listen", "silent"])
    web.initialize_index(prebuilt=idx)
    web.app.config["TESTING"] = True
    with web.app.test_client() as c:
        yield c
    web.index = None


def test_unscramble_match(client):
    r = client.post("/unscramble", json={"query": "Enlist"})
    assert r.status_code == 200
    body = r.get_json()
    assert body == {"query": "enlist", "match": "listen", "found": True}


def test_unscramble_no_match(client):
    r = client.post("/unscramble", json={"query": "xyz"})
    assert r.status_code == 200
    assert r.get_json()["found"] is False
    assert r.get_json()["match"] is None


def test_unscramble_empty_query(client):
    r = client.post("/unscramble", json={"query": ""})
    assert r.status_code == 400
    r = client.post("/unscramble", json={})
    assert r.status_code == 400


def test_words(client):
    body = client.get("/words").get_json()
    assert body["total"] == 5
    assert sorted(body["words"]) == sorted(["cat", "act", "dog", "listen", "silent"])


def test_health(client):
    body = client.get("/health").get_json()
    assert body["status"] == "healthy"
    assert body["index_initialized"] is True
    assert body["stats"]["entries"] == 5


def test_uninitialized_index():
    web.index = None
    with web.app.test_client() as c:
        r = c.post("/unscramble", json={"query": "cat"})
        assert r.status_code == 500
        assert c.get("/health").get_json()["index_initialized"] is False
