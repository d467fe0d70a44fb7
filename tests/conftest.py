"""Shared fixtures for hourlywolves tests."""
from datetime import datetime, timezone

import pytest

WEBHOOK_URL = 'https://discord.com/api/webhooks/123456/secret-token'
HOST = 'https://hourly.photo/u/wolves/'


@pytest.fixture
def webhook_url():
    return WEBHOOK_URL


@pytest.fixture
def host():
    return HOST


@pytest.fixture
def ev_time():
    return datetime(2024, 3, 7, 9, 30, tzinfo=timezone.utc)


@pytest.fixture
def sample_attachment_data():
    return {
        'type': 'Document',
        'mediaType': 'image/jpeg',
        'url': 'https://cdn.hourly.photo/wolves/2403/07/09.jpg',
    }


@pytest.fixture
def sample_asset_data(sample_attachment_data):
    return {
        '@context': 'https://www.w3.org/ns/activitystreams',
        'type': 'Note',
        'actor': 'https://hourly.photo/u/wolves',
        'attributedTo': 'https://hourly.photo/u/wolves',
        'attachment': [sample_attachment_data],
        'to': ['https://www.w3.org/ns/activitystreams#Public'],
        'cc': ['https://hourly.photo/u/wolves/followers'],
        'content': '<p>Wolf of the hour</p>',
        'tag': [{'type': 'Hashtag', 'name': '#wolves'}],
        'published': '2024-03-07T09:00:00Z',
        'id': 'https://hourly.photo/u/wolves/p/2403/07/09',
        'context': 'https://hourly.photo/u/wolves/p/2403/07/09',
        'conversation': 'tag:hourly.photo,2024-03-07:wolves-2403-07-09',
    }
