from __future__ import annotations

import pytest

from likes_client import endpoints
from likes_client.client import LikesClient
from likes_client.config import ClientCredentials
from likes_client.endpoints import AuthStrategy, Endpoint
from likes_client.exceptions import ApiResponseError, RateLimitExceeded
from likes_client.results import RateLimited, RequestFailed, Success

CREDENTIALS = ClientCredentials("ck", "cs", "at", "ats")


class FakeExecutor:
    def __init__(self, responses: list[object] | None = None) -> None:
        self.responses = list(responses or [])
        self.calls: list[tuple[Endpoint, dict | None, str | None]] = []

    def perform(self, endpoint, *, credentials, bearer_token, body=None):
        self.calls.append((endpoint, body, bearer_token))
        result = self.responses.pop(0) if self.responses else {"data": {}}
        if isinstance(result, Exception):
            raise result
        return result


def test_operations_pass_their_endpoint_per_call() -> None:
    executor = FakeExecutor()
    client = LikesClient(CREDENTIALS, bearer_token="b", executor=executor)  # type: ignore[arg-type]

    client.get_me()
    client.delete_like(1, 2)
    client.get_liked_posts(3, "tok")
    client.get_expanded_posts([4, 5])

    paths = [call[0].path for call in executor.calls]
    assert paths[0] == "users/me"
    assert paths[1] == "users/1/likes/2"
    assert paths[2] == "users/3/liked_tweets?tweet.fields=author_id&pagination_token=tok"
    assert paths[3].startswith("tweets?ids=4,5&")
    assert executor.calls[1][0].method == "DELETE"
    assert executor.calls[1][0].auth is AuthStrategy.OAUTH1


def test_perform_request_with_string_derives_strategy() -> None:
    executor = FakeExecutor()
    client = LikesClient(CREDENTIALS, executor=executor)  # type: ignore[arg-type]

    client.perform_request("users/1/likes", "post", {"tweet_id": "9"})

    endpoint, body, _ = executor.calls[0]
    assert endpoint == Endpoint("users/1/likes", "POST", AuthStrategy.OAUTH1)
    assert body == {"tweet_id": "9"}


def test_set_bearer_token_is_used_by_later_calls() -> None:
    executor = FakeExecutor()
    client = LikesClient(CREDENTIALS, executor=executor)  # type: ignore[arg-type]

    client.get_me()
    client.set_bearer_token("fresh")
    client.get_me()

    assert [call[2] for call in executor.calls] == [None, "fresh"]


def test_get_by_id_appends_resource_id() -> None:
    executor = FakeExecutor()
    client = LikesClient(CREDENTIALS, bearer_token="b", executor=executor)  # type: ignore[arg-type]

    client.get_by_id("tweets", 20)

    assert executor.calls[0][0] == Endpoint("tweets/20", "GET", AuthStrategy.BEARER)


def test_iter_liked_posts_stops_without_next_token() -> None:
    pages = [
        {"data": [{"id": "1"}], "meta": {"next_token": "t2"}},
        {"data": [{"id": "2"}], "meta": {"next_token": "t3"}},
        {"data": [{"id": "3"}], "meta": {"result_count": 1}},
    ]
    executor = FakeExecutor(pages)
    client = LikesClient(CREDENTIALS, bearer_token="b", executor=executor)  # type: ignore[arg-type]

    assert list(client.iter_liked_posts(7)) == pages
    paths = [call[0].path for call in executor.calls]
    assert paths[0].endswith("author_id")
    assert paths[1].endswith("pagination_token=t2")
    assert paths[2].endswith("pagination_token=t3")


def test_iter_liked_posts_surfaces_rate_limit() -> None:
    executor = FakeExecutor(
        [
            {"data": [], "meta": {"next_token": "t2"}},
            RateLimitExceeded(reset_at="1700000000", endpoint="users/7/liked_tweets"),
        ]
    )
    client = LikesClient(CREDENTIALS, bearer_token="b", executor=executor)  # type: ignore[arg-type]
    pages = client.iter_liked_posts(7)

    next(pages)
    with pytest.raises(RateLimitExceeded):
        next(pages)


def test_execute_maps_outcomes() -> None:
    executor = FakeExecutor(
        [
            {"data": {"id": "1"}},
            RateLimitExceeded(reset_at="1700000000", endpoint="users/me"),
            ApiResponseError('"forbidden"', code=403),
        ]
    )
    client = LikesClient(CREDENTIALS, bearer_token="b", executor=executor)  # type: ignore[arg-type]

    assert client.execute("users/me") == Success(payload={"data": {"id": "1"}})
    assert client.execute("users/me") == RateLimited(reset_at="1700000000", endpoint="users/me")
    assert client.execute("users/me") == RequestFailed(detail='"forbidden"', status_code=403)


def test_execute_lets_other_errors_propagate() -> None:
    executor = FakeExecutor([ValueError("bad endpoint")])
    client = LikesClient(CREDENTIALS, bearer_token="b", executor=executor)  # type: ignore[arg-type]

    with pytest.raises(ValueError):
        client.execute("users/me")


def test_perform_request_rejects_method_contradicting_endpoint() -> None:
    executor = FakeExecutor()
    client = LikesClient(CREDENTIALS, bearer_token="b", executor=executor)  # type: ignore[arg-type]

    with pytest.raises(ValueError):
        client.perform_request(endpoints.custom("users/1/likes/2"), "DELETE")
    assert executor.calls == []


def test_perform_request_accepts_matching_method_for_endpoint() -> None:
    executor = FakeExecutor()
    client = LikesClient(CREDENTIALS, bearer_token="b", executor=executor)  # type: ignore[arg-type]

    client.perform_request(endpoints.delete_like(1, 2), "delete")
    client.perform_request(endpoints.delete_like(1, 2))

    assert [call[0].method for call in executor.calls] == ["DELETE", "DELETE"]


def test_perform_request_string_path_defaults_to_get() -> None:
    executor = FakeExecutor()
    client = LikesClient(CREDENTIALS, bearer_token="b", executor=executor)  # type: ignore[arg-type]

    client.perform_request("users/me")

    assert executor.calls[0][0] == Endpoint("users/me", "GET", AuthStrategy.BEARER)


def test_iter_liked_posts_stops_on_repeated_token() -> None:
    pages = [
        {"data": [{"id": "1"}], "meta": {"next_token": "t2"}},
        {"data": [{"id": "2"}], "meta": {"next_token": "t2"}},
        {"data": [{"id": "3"}], "meta": {"next_token": "t4"}},
    ]
    executor = FakeExecutor(pages)
    client = LikesClient(CREDENTIALS, bearer_token="b", executor=executor)  # type: ignore[arg-type]

    assert list(client.iter_liked_posts(7)) == pages[:2]
    assert len(executor.calls) == 2


def test_iter_liked_posts_stops_when_starting_token_comes_back() -> None:
    executor = FakeExecutor([{"data": [], "meta": {"next_token": "start"}}])
    client = LikesClient(CREDENTIALS, bearer_token="b", executor=executor)  # type: ignore[arg-type]

    assert len(list(client.iter_liked_posts(7, "start"))) == 1
    assert executor.calls[0][0].path.endswith("pagination_token=start")
