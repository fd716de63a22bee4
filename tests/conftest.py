from typing import List

import pytest

from codebird_core import (
    ApiBase,
    ConsumerCredentials,
    EndpointTable,
    OAuthSigner,
    SignedRequest,
    TokenCredentials,
    TransportResponse,
    clear_consumer_key,
)

TIMESTAMP = 1318622958
NONCE = "abcdef12"


class FakeTransport:
    """Record requests and answer each with the next canned response."""

    def __init__(self, *responses: TransportResponse):
        self.responses = list(responses)
        self.requests: List[SignedRequest] = []

    def execute(self, request: SignedRequest) -> TransportResponse:
        self.requests.append(request)
        if len(self.responses) > 1:
            return self.responses.pop(0)
        return self.responses[0]


def reply(status: int = 200, body: bytes = b"{}", headers: str = "") -> TransportResponse:
    block = f"HTTP/1.1 {status} OK"
    if headers:
        block += "\r\n" + headers
    return TransportResponse(status=status, header_block=block, body=body)


@pytest.fixture(autouse=True)
def _reset_consumer_key():
    clear_consumer_key()
    yield
    clear_consumer_key()


@pytest.fixture
def consumer():
    return ConsumerCredentials(key="ck", secret="cs")


@pytest.fixture
def signer(consumer):
    return OAuthSigner(
        consumer=consumer,
        token=TokenCredentials(token="tok", secret="ts"),
        clock=lambda: TIMESTAMP,
        nonce_factory=lambda: NONCE,
    )


@pytest.fixture
def base():
    return ApiBase(
        rest="https://api.example.com/1.1/",
        oauth="https://api.example.com/",
        legacy="https://api.example.com/1/",
    )


@pytest.fixture
def table():
    return EndpointTable(
        verbs={
            "GET": frozenset(
                {
                    "statuses/retweets/:id",
                    "account/settings",
                    "users/profile_image/:screen_name",
                    "lists/:owner/members/:slug",
                    "users/recommendations",
                    "oauth/authorize",
                }
            ),
            "POST": frozenset(
                {
                    "statuses/update",
                    "account/update_profile_image",
                    "oauth/request_token",
                }
            ),
        },
        polymorphic={"account/settings": "POST"},
        multipart=frozenset({"account/update_profile_image"}),
        legacy=frozenset({"users/recommendations"}),
        file_params={"account/update_profile_image": ("image",)},
        redirects={"users/profile_image/:screen_name": "profile_image_url_https"},
    )
