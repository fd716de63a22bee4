"""Twitter REST API 1.1 endpoint table."""

from __future__ import annotations

from codebird_core import ApiBase, EndpointTable

TWITTER_BASE = ApiBase(
    rest="https://api.twitter.com/1.1/",
    oauth="https://api.twitter.com/",
    legacy="https://api.twitter.com/1/",
)

GET_METHODS = frozenset(
    {
        # Timelines
        "statuses/mentions_timeline",
        "statuses/user_timeline",
        "statuses/home_timeline",
        "statuses/retweets_of_me",
        # Tweets
        "statuses/retweets/:id",
        "statuses/show/:id",
        "statuses/oembed",
        # Search
        "search/tweets",
        # Direct Messages
        "direct_messages",
        "direct_messages/sent",
        "direct_messages/show",
        # Friends & Followers
        "friends/ids",
        "followers/ids",
        "friendships/lookup",
        "friendships/incoming",
        "friendships/outgoing",
        "friendships/show",
        "friends/list",
        "followers/list",
        # Users
        "account/settings",
        "account/verify_credentials",
        "blocks/list",
        "blocks/ids",
        "users/lookup",
        "users/show",
        "users/search",
        "users/contributees",
        "users/contributors",
        "users/profile_banner",
        # Suggested Users
        "users/suggestions/:slug",
        "users/suggestions",
        "users/suggestions/:slug/members",
        # Favorites
        "favorites/list",
        # Lists
        "lists/list",
        "lists/statuses",
        "lists/memberships",
        "lists/subscribers",
        "lists/subscribers/show",
        "lists/members/show",
        "lists/members",
        "lists/show",
        "lists/subscriptions",
        # Saved searches
        "saved_searches/list",
        "saved_searches/show/:id",
        # Places & Geo
        "geo/id/:place_id",
        "geo/reverse_geocode",
        "geo/search",
        "geo/similar_places",
        # Trends
        "trends/place",
        "trends/available",
        "trends/closest",
        # OAuth
        "oauth/authenticate",
        "oauth/authorize",
        # Help
        "help/configuration",
        "help/languages",
        "help/privacy",
        "help/tos",
        "application/rate_limit_status",
        # Legacy 1.0
        "users/recommendations",
        "users/profile_image/:screen_name",
        "statuses/public_timeline",
    }
)

POST_METHODS = frozenset(
    {
        # Tweets
        "statuses/destroy/:id",
        "statuses/update",
        "statuses/retweet/:id",
        "statuses/update_with_media",
        # Direct Messages
        "direct_messages/destroy",
        "direct_messages/new",
        # Friends & Followers
        "friendships/create",
        "friendships/destroy",
        "friendships/update",
        # Users
        "account/update_delivery_device",
        "account/update_profile",
        "account/update_profile_background_image",
        "account/update_profile_colors",
        "account/update_profile_image",
        "blocks/create",
        "blocks/destroy",
        "account/update_profile_banner",
        "account/remove_profile_banner",
        # Favorites
        "favorites/destroy",
        "favorites/create",
        # Lists
        "lists/members/destroy",
        "lists/subscribers/create",
        "lists/subscribers/destroy",
        "lists/members/create_all",
        "lists/members/create",
        "lists/destroy",
        "lists/update",
        "lists/create",
        "lists/members/destroy_all",
        # Saved Searches
        "saved_searches/create",
        "saved_searches/destroy/:id",
        # Places & Geo
        "geo/place",
        # Spam Reporting
        "users/report_spam",
        # OAuth
        "oauth/access_token",
        "oauth/request_token",
    }
)

TWITTER_ENDPOINTS = EndpointTable(
    verbs={"GET": GET_METHODS, "POST": POST_METHODS},
    polymorphic={"account/settings": "POST"},
    multipart=frozenset(
        {
            "statuses/update_with_media",
            "account/update_profile_background_image",
            "account/update_profile_image",
            "account/update_profile_banner",
        }
    ),
    legacy=frozenset(
        {
            "users/recommendations",
            "users/profile_image/:screen_name",
            "statuses/public_timeline",
        }
    ),
    file_params={
        "statuses/update_with_media": ("media[]",),
        "account/update_profile_background_image": ("image",),
        "account/update_profile_image": ("image",),
        "account/update_profile_banner": ("banner",),
    },
    redirects={"users/profile_image/:screen_name": "profile_image_url_https"},
    underscore_params=("screen_name", "place_id"),
)
