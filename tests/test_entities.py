"""
Tests for domain entities built from normalized payloads.
"""

import dataclasses

import pytest

from waifuim.domain.entities.image import Artist, FavoriteStatus, Image, ImageReport, Tag, Tags
from waifuim.domain.entities.query import ImageOrder, SearchQuery
from waifuim.infrastructure.http.key_normalizer import camelize_keys


class TestImage:
    """Tests for the Image entity."""

    def test_from_dict(self, image_payload):
        image = Image.from_dict(camelize_keys(image_payload))

        assert image.image_id == 8108
        assert image.width == 2892
        assert image.height == 4096
        assert image.extension == ".png"
        assert image.is_nsfw is False
        assert image.favorites == 1
        assert image.uploaded_at == "2023-05-03T18:40:04.381354+02:00"
        assert image.source == "https://www.patreon.com/posts/persephone-78224476"
        assert isinstance(image.tags, tuple)
        assert image.tags[0] == Tag(tag_id=12, name="waifu", description="A female anime/manga character.")

    def test_minimal_payload(self):
        image = Image.from_dict({"imageId": 1, "url": "https://cdn.waifu.im/1.gif", "extension": ".gif"})
        assert image.artist is None
        assert image.tags == ()
        assert image.liked_at is None
        assert image.is_gif

    def test_is_frozen(self, image_payload):
        image = Image.from_dict(camelize_keys(image_payload))
        with pytest.raises(dataclasses.FrozenInstanceError):
            image.favorites = 2  # type: ignore[misc]

    def test_to_dict(self, image_payload):
        data = Image.from_dict(camelize_keys(image_payload)).to_dict()
        assert data["image_id"] == 8108
        assert data["artist"]["artist_id"] == 1
        assert data["tags"][0]["name"] == "waifu"


class TestArtist:
    def test_all_links_optional(self):
        artist = Artist.from_dict({"artistId": 3, "name": "anon"})
        assert (artist.patreon, artist.pixiv, artist.twitter, artist.deviant_art) == (None, None, None, None)


class TestTags:
    def test_names(self):
        tags = Tags.names_from_dict({"versatile": ["maid"], "nsfw": ["ero", "hentai"]})
        assert tags == Tags(versatile=("maid",), nsfw=("ero", "hentai"))

    def test_records(self, tag_payload):
        tags = Tags.records_from_dict(camelize_keys({"versatile": [tag_payload], "nsfw": []}))
        assert tags.versatile[0].tag_id == 12
        assert tags.nsfw == ()

    def test_missing_category_is_empty(self):
        assert Tags.names_from_dict({"versatile": ["maid"]}).nsfw == ()

    def test_names_to_dict(self):
        tags = Tags.names_from_dict({"versatile": ["maid"], "nsfw": ["ero"]})
        assert tags.to_dict() == {"versatile": ("maid",), "nsfw": ("ero",)}

    def test_records_to_dict(self, tag_payload):
        tags = Tags.records_from_dict(camelize_keys({"versatile": [tag_payload], "nsfw": []}))
        data = tags.to_dict()
        assert data["nsfw"] == ()
        assert data["versatile"][0] == {
            "tag_id": 12,
            "name": "waifu",
            "description": "A female anime/manga character.",
            "is_nsfw": False,
        }


class TestImageReport:
    def test_large_author_id_exact(self):
        report = ImageReport.from_dict(
            {"authorId": 9223372036854775807, "imageId": 1, "description": "x", "existed": True}
        )
        assert report.author_id == 9223372036854775807
        assert report.existed is True

    def test_string_author_id_accepted(self):
        report = ImageReport.from_dict({"authorId": "510526835344916480", "imageId": 1})
        assert report.author_id == 510526835344916480


class TestEnums:
    def test_favorite_status_values(self):
        assert FavoriteStatus("INSERTED") is FavoriteStatus.INSERTED
        assert FavoriteStatus.DELETED == "DELETED"

    def test_unknown_status_rejected(self):
        with pytest.raises(ValueError):
            FavoriteStatus("UPDATED")

    def test_search_query_defaults(self):
        query = SearchQuery(order_by=ImageOrder.LIKED_AT)
        assert query.is_nsfw is None
        assert query.full is None
        assert query.order_by == "LIKED_AT"
