from codebird_core import ApiBase, MethodResolver, Resolution, build_request, endpoint_url


def test_endpoint_url_selects_base(base, table):
    oauth = Resolution(verb="POST", path="oauth/request_token", template="oauth/request_token", params={})
    legacy = Resolution(verb="GET", path="users/recommendations", template="users/recommendations", params={})
    rest = Resolution(verb="POST", path="statuses/update", template="statuses/update", params={})

    assert endpoint_url(oauth, base, table) == "https://api.example.com/oauth/request_token"
    assert endpoint_url(legacy, base, table) == "https://api.example.com/1/users/recommendations.json"
    assert endpoint_url(rest, base, table) == "https://api.example.com/1.1/statuses/update.json"


def test_legacy_falls_back_to_rest_base_when_unset(table):
    base = ApiBase(rest="https://rest.example.com/", oauth="https://rest.example.com/")
    legacy = Resolution(verb="GET", path="users/recommendations", template="users/recommendations", params={})
    assert endpoint_url(legacy, base, table) == "https://rest.example.com/users/recommendations.json"


def test_get_request_is_a_signed_url(signer, base, table):
    resolution = MethodResolver(table).resolve("statuses_retweets_ID", {"id": "42", "count": 5})
    request = build_request(resolution, signer=signer, base=base, table=table)

    assert request.verb == "GET"
    assert request.url == signer.sign("GET", "https://api.example.com/1.1/statuses/retweets/42.json", {"count": 5})
    assert "count=5&" in request.url
    assert request.body is None
    assert "Content-Type" not in request.headers


def test_post_request_is_a_signed_form_body(signer, base, table):
    resolution = MethodResolver(table).resolve("statuses_update", {"status": "hi there"})
    request = build_request(resolution, signer=signer, base=base, table=table)

    assert request.url == "https://api.example.com/1.1/statuses/update.json"
    assert request.headers["Content-Type"] == "application/x-www-form-urlencoded"
    assert request.body == signer.sign("POST", request.url, {"status": "hi there"})
    assert "status=hi%20there" in request.body
    assert request.multipart is False


def test_multipart_request_signs_only_oauth_parameters(signer, base, table):
    resolution = MethodResolver(table).resolve(
        "account_updateProfileImage", {"image": b"\x89PNG...", "skip_status": "1"}
    )
    request = build_request(resolution, signer=signer, base=base, table=table)

    assert request.multipart is True
    assert request.url == "https://api.example.com/1.1/account/update_profile_image.json"
    assert request.headers["Authorization"] == signer.sign("POST", request.url, {}, multipart=True)
    assert request.body == {"image": b"\x89PNG...", "skip_status": "1"}
    assert "Content-Type" not in request.headers


def test_extra_headers_are_kept(signer, base, table):
    resolution = MethodResolver(table).resolve("statuses_update", {"status": "hi"})
    request = build_request(resolution, signer=signer, base=base, table=table, headers={"X-Trace": "1"})
    assert request.headers["X-Trace"] == "1"
