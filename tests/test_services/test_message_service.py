"""Tests for webhook message construction."""
from datetime import datetime, timezone

import pytest

from hourlywolves.exceptions import UrlResolutionError
from hourlywolves.models.attachment import Attachment
from hourlywolves.services.message_service import FOOTER_TEXT, build_description, build_message


class TestBuildMessage:
    """Tests for build_message."""

    @pytest.fixture
    def new_year(self):
        return datetime(2023, 1, 1, 0, 0, 0, tzinfo=timezone.utc)

    def test_end_to_end_embed(self, new_year):
        """The embed shows the image, the event time and both links."""
        attachment = Attachment(url='https://cdn/img.png')

        message = build_message('https://h/', new_year, attachment)

        assert len(message.embeds) == 1
        embed = message.embeds[0]
        assert embed.image.url == 'https://cdn/img.png'
        assert embed.timestamp == '2023-01-01T00:00:00+00:00'
        assert 'https://h/p/2301/01/00' in embed.description
        assert 'https://cdn/img.png' in embed.description
        assert embed.footer.text == FOOTER_TEXT

    def test_description_links(self, new_year):
        """Description labels the post link and the permalink."""
        message = build_message('https://h/', new_year, Attachment(url='https://cdn/img.png'))

        assert message.embeds[0].description == (
            '[LINK](https://h/p/2301/01/00) · [PERMALINK](https://cdn/img.png)'
        )

    def test_payload_shape(self, new_year):
        """The wire payload carries exactly one embed and no unset fields."""
        payload = build_message('https://h/', new_year, Attachment(url='https://cdn/img.png')).to_payload()

        assert payload == {
            'embeds': [{
                'description': build_description('https://h/p/2301/01/00', 'https://cdn/img.png'),
                'timestamp': '2023-01-01T00:00:00+00:00',
                'image': {'url': 'https://cdn/img.png'},
                'footer': {'text': FOOTER_TEXT},
            }]
        }

    def test_malformed_host(self, new_year):
        """Message construction fails only on URL resolution."""
        with pytest.raises(UrlResolutionError):
            build_message('not a host', new_year, Attachment(url='https://cdn/img.png'))
