"""Mock responses for X API integration tests."""

from __future__ import annotations

ME_RESPONSE = {
    "data": {
        "id": "2244994945",
        "name": "Test User",
        "username": "testuser",
    }
}

DELETE_LIKE_RESPONSE = {
    "data": {
        "liked": False,
    }
}

LIKED_POSTS_PAGE_1 = {
    "data": [
        {
            "id": "1111111111",
            "text": "First liked post",
            "author_id": "123456",
            "edit_history_tweet_ids": ["1111111111"],
        },
        {
            "id": "2222222222",
            "text": "Second liked post",
            "author_id": "789012",
            "edit_history_tweet_ids": ["2222222222"],
        },
    ],
    "meta": {
        "result_count": 2,
        "next_token": "7140dibdnow9c7btw3w29grvxfcgvpb9n9coehpk7xz5i",
    },
}

LIKED_POSTS_PAGE_2 = {
    "data": [
        {
            "id": "3333333333",
            "text": "Third liked post",
            "author_id": "123456",
            "edit_history_tweet_ids": ["3333333333"],
        },
    ],
    "meta": {
        "result_count": 1,
        "previous_token": "77qp8",
    },
}

EXPANDED_POSTS_RESPONSE = {
    "data": [
        {
            "id": "1212092628029698048",
            "text": "Photo post",
            "author_id": "2244994945",
            "created_at": "2019-12-31T19:26:16.000Z",
            "attachments": {"media_keys": ["16_1211797899316740096"]},
        }
    ],
    "includes": {
        "users": [
            {
                "id": "2244994945",
                "name": "Test User",
                "username": "testuser",
                "profile_image_url": "https://pbs.twimg.com/profile_images/x.jpg",
            }
        ],
        "media": [
            {
                "media_key": "16_1211797899316740096",
                "type": "photo",
                "url": "https://pbs.twimg.com/media/x.jpg",
                "width": 1200,
                "height": 675,
            }
        ],
    },
}

FORBIDDEN_RESPONSE = {
    "title": "Forbidden",
    "type": "about:blank",
    "status": 403,
    "detail": "Forbidden",
}

RATE_LIMIT_RESPONSE = {
    "title": "Too Many Requests",
    "detail": "Too Many Requests",
    "type": "about:blank",
    "status": 429,
}
