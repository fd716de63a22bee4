import pytest
from PIL import Image

from codebird_core import ReplyCache
from codebird_twitter import TWITTER_ENDPOINTS, Codebird

from conftest import NONCE, TIMESTAMP, FakeTransport, reply


class FakeClock:
    def __init__(self):
        self.now = 1000.0

    def __call__(self):
        return self.now


@pytest.fixture
def transport():
    return FakeTransport(reply(200, b'{"ok": true}'))


@pytest.fixture
def cb(consumer, transport):
    client = Codebird(consumer=consumer, transport=transport, clock=lambda: TIMESTAMP, nonce_factory=lambda: NONCE)
    client.set_token("tok", "ts")
    return client


def test_attribute_dispatch(cb, transport):
    result = cb.statuses_update(status="hi")

    request = transport.requests[0]
    assert request.verb == "POST"
    assert request.url == "https://api.twitter.com/1.1/statuses/update.json"
    assert "status=hi" in request.body
    assert result.ok is True


def test_attribute_dispatch_with_mapping(cb, transport):
    cb.statuses_retweets_ID({"id": "42"}, count=3)

    request = transport.requests[0]
    assert request.verb == "GET"
    assert request.url.startswith("https://api.twitter.com/1.1/statuses/retweets/42.json?count=3&")


def test_geo_place_id_is_one_placeholder(cb, transport):
    cb.geo_id_PLACE_ID(place_id="df51dec6f4ee2b2c")
    assert transport.requests[0].url.startswith("https://api.twitter.com/1.1/geo/id/df51dec6f4ee2b2c.json?")


def test_oauth_handshake(consumer):
    transport = FakeTransport(reply(200, b"oauth_token=abc&oauth_token_secret=def&oauth_callback_confirmed=true"))
    cb = Codebird(consumer=consumer, transport=transport)

    result = cb.oauth_requestToken(oauth_callback="oob")

    assert transport.requests[0].url == "https://api.twitter.com/oauth/request_token"
    assert "oauth_callback=oob" in transport.requests[0].body
    assert result.oauth_token == "abc"
    assert result.oauth_token_secret == "def"

    cb.set_token(result.oauth_token, result.oauth_token_secret)
    assert cb.oauth_authorize() == "https://api.twitter.com/oauth/authorize?oauth_token=abc"
    assert cb.oauth_authenticate() == "https://api.twitter.com/oauth/authenticate?oauth_token=abc"


def test_legacy_endpoint(cb, transport):
    cb.users_recommendations()
    assert transport.requests[0].url.startswith("https://api.twitter.com/1/users/recommendations.json?")


def test_profile_image_redirect(consumer):
    transport = FakeTransport(reply(302, b"", "Location: https://pbs.twimg.com/jack_normal.png"))
    cb = Codebird(consumer=consumer, transport=transport)

    result = cb.users_profileImage_SCREEN_NAME(screen_name="jack")

    assert transport.requests[0].url.startswith("https://api.twitter.com/1/users/profile_image/jack.json?")
    assert result.profile_image_url_https == "https://pbs.twimg.com/jack_normal.png"
    assert result.httpstatus == 302


def test_account_settings_verb(cb, transport):
    cb.account_settings()
    cb.account_settings(lang="en")
    assert [request.verb for request in transport.requests] == ["GET", "POST"]


def test_profile_image_upload(cb, transport, tmp_path):
    avatar = tmp_path / "avatar.jpg"
    Image.new("RGB", (4, 4)).save(avatar, "JPEG")

    cb.account_updateProfileImage(image=str(avatar))

    request = transport.requests[0]
    assert request.multipart is True
    assert request.body == {"image": avatar.read_bytes()}
    assert request.headers["Authorization"].startswith('OAuth oauth_consumer_key="ck"')
    assert 'oauth_token="tok"' in request.headers["Authorization"]


def test_public_timeline_is_cached_for_a_minute(consumer):
    clock = FakeClock()
    transport = FakeTransport(reply(200, b"[]"))
    cb = Codebird(
        consumer=consumer,
        transport=transport,
        public_timeline_cache=ReplyCache(ttl=60, clock=clock),
    )

    first = cb.statuses_publicTimeline()
    clock.now += 59
    assert cb.statuses_publicTimeline() is first
    assert len(transport.requests) == 1
    assert transport.requests[0].url.startswith("https://api.twitter.com/1/statuses/public_timeline.json?")

    clock.now += 1
    cb.statuses_publicTimeline()
    assert len(transport.requests) == 2


def test_failed_public_timeline_is_not_cached(consumer):
    transport = FakeTransport(reply(500, b"error=oops"))
    cb = Codebird(consumer=consumer, transport=transport)

    assert cb.statuses_publicTimeline().error == "oops"
    cb.statuses_publicTimeline()
    assert len(transport.requests) == 2


def test_private_attributes_are_not_dispatched(cb):
    with pytest.raises(AttributeError):
        cb._nothing


def test_get_instance_is_shared(monkeypatch):
    monkeypatch.setattr(Codebird, "_instance", None)
    assert Codebird.get_instance() is Codebird.get_instance()


def test_endpoint_table_is_consistent():
    post = TWITTER_ENDPOINTS.verbs["POST"]
    assert TWITTER_ENDPOINTS.multipart <= post
    assert set(TWITTER_ENDPOINTS.file_params) == set(TWITTER_ENDPOINTS.multipart)
    assert TWITTER_ENDPOINTS.legacy <= TWITTER_ENDPOINTS.verbs["GET"]
