from unittest.mock import MagicMock

import pytest
from fastapi import status

from conftest import create_document, share_document
from inkwell.services.search_service import MAX_RESULTS, SearchService, build_snippet


def search(client, account, q):
    response = client.get("/api/search", params={"q": q}, headers=account.headers)
    assert response.status_code == status.HTTP_200_OK, response.text
    return response.json()


@pytest.mark.parametrize("query", [None, "", "a"])
def test_short_query_skips_the_database(query):
    service = SearchService(MagicMock())
    service.document_repo = MagicMock()

    assert service.search("user-id", query) == []
    service.document_repo.search_visible.assert_not_called()


def test_short_query_over_http(client, alice):
    create_document(client, alice, title="a", content="a")
    assert search(client, alice, "a") == []
    assert client.get("/api/search", headers=alice.headers).json() == []


def test_search_requires_auth(client):
    response = client.get("/api/search", params={"q": "hello"})
    assert response.status_code == status.HTTP_401_UNAUTHORIZED


def test_build_snippet_window():
    content = "x" * 100 + "needle" + "y" * 100
    assert build_snippet(content, "needle") == "..." + "x" * 50 + "needle" + "y" * 50 + "..."


def test_build_snippet_clamps_at_edges():
    assert build_snippet("needle at start", "NEEDLE") == "...needle at start..."
    assert build_snippet("no match here", "needle") == ""


def test_snippet_over_http(client, alice):
    create_document(client, alice, title="Haystack", content="x" * 100 + "needle" + "y" * 100)

    results = search(client, alice, "needle")
    assert len(results) == 1
    assert results[0]["snippet"] == "..." + "x" * 50 + "needle" + "y" * 50 + "..."
    assert results[0]["content_match"] is True
    assert results[0]["title_match"] is False
    assert results[0]["author"]["id"] == alice.id


def test_title_only_match_has_empty_snippet(client, alice):
    create_document(client, alice, title="Quarterly report", content="numbers")

    results = search(client, alice, "quarterly")
    assert len(results) == 1
    assert results[0]["title_match"] is True
    assert results[0]["content_match"] is False
    assert results[0]["snippet"] == ""


def test_search_is_case_insensitive(client, alice):
    create_document(client, alice, title="Hello", content="Some MiXeD case text")
    assert len(search(client, alice, "mixed")) == 1
    assert len(search(client, alice, "HELLO")) == 1


def test_search_respects_visibility(client, alice, bob, carol):
    own = create_document(client, bob, title="bob topic")
    shared = create_document(client, alice, title="shared topic")
    public = create_document(client, carol, title="public topic", is_public=True)
    create_document(client, alice, title="private topic")
    share_document(client, alice, shared["id"], bob, "view")

    ids = {result["id"] for result in search(client, bob, "topic")}
    assert ids == {own["id"], shared["id"], public["id"]}


def test_search_lists_each_document_once(client, alice, bob):
    """Matching both title and content, and through several access paths, still yields one hit"""
    document = create_document(client, alice, title="alpha", content="alpha alpha", is_public=True)
    share_document(client, alice, document["id"], bob, "view")

    results = search(client, bob, "alpha")
    assert [result["id"] for result in results] == [document["id"]]
    assert results[0]["title_match"] is True
    assert results[0]["content_match"] is True


def test_search_caps_results(client, alice):
    for i in range(MAX_RESULTS + 5):
        create_document(client, alice, title=f"note {i}", content="common")
    assert len(search(client, alice, "common")) == MAX_RESULTS


def test_search_treats_wildcards_literally(client, alice):
    create_document(client, alice, title="Discount", content="save 100% today")
    create_document(client, alice, title="Other", content="save 1000 today")
    create_document(client, alice, title="snake_case", content="")
    create_document(client, alice, title="snakeXcase", content="")

    percent = search(client, alice, "0%")
    underscore = search(client, alice, "e_c")
    assert [result["title"] for result in percent] == ["Discount"]
    assert [result["title"] for result in underscore] == ["snake_case"]


def test_search_folds_non_ascii_case(client, alice):
    document = create_document(client, alice, title="Ärger im Büro", content="Grüße aus MÜNCHEN")

    for query in ("ärger", "BÜRO", "münchen", "GRÜ"):
        results = search(client, alice, query)
        assert [result["id"] for result in results] == [document["id"]], query

    results = search(client, alice, "münchen")
    assert results[0]["content_match"] is True
    assert results[0]["snippet"] == "...Grüße aus MÜNCHEN..."
