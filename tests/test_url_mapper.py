import pytest

from adapters.url_mapper import UrlMapper
from config import Settings
from ports.url_mapper import IdUrlMapper


def test_null_prefixes_rejected():
    with pytest.raises(ValueError):
        UrlMapper(None, "")
    with pytest.raises(ValueError):
        UrlMapper("", None)


def test_empty_prefixes():
    um = UrlMapper("", "")
    assert um.entity_id_to_url(3) == "3"
    assert um.url_to_entity_id("3") == 3
    assert um.concept_id_to_url(3) == "3"
    assert um.url_to_concept_id("3") == 3


def test_non_empty_prefixes():
    um = UrlMapper("a", "b")
    assert um.entity_id_to_url(3) == "a3"
    assert um.url_to_entity_id("a3") == 3
    assert um.concept_id_to_url(3) == "b3"
    assert um.url_to_concept_id("b3") == 3


def test_roundtrip_for_many_ids():
    um = UrlMapper("http://mysite.org/entities/", "http://mysite.org/concepts/")
    for i in (0, 1, 42, 10**12):
        assert um.url_to_entity_id(um.entity_id_to_url(i)) == i
        assert um.url_to_concept_id(um.concept_id_to_url(i)) == i


@pytest.mark.parametrize("url", ["b3", "concepts/", "concepts/x1", "concepts/1.5", "concepts/ 1", ""])
def test_bad_urls_rejected(url):
    um = UrlMapper("entities/", "concepts/")
    with pytest.raises(ValueError):
        um.url_to_concept_id(url)


def test_entity_url_is_not_a_concept_url():
    um = UrlMapper("entities/", "concepts/")
    with pytest.raises(ValueError):
        um.url_to_concept_id(um.entity_id_to_url(3))


def test_none_id_rejected():
    um = UrlMapper()
    with pytest.raises(ValueError):
        um.entity_id_to_url(None)
    with pytest.raises(ValueError):
        um.concept_id_to_url(None)
    with pytest.raises(ValueError):
        um.url_to_entity_id(None)


def test_from_settings():
    um = UrlMapper.from_settings(Settings(entity_prefix="e/", concept_prefix="c/"))
    assert um.entity_id_to_url(1) == "e/1"
    assert um.concept_id_to_url(2) == "c/2"


def test_satisfies_port():
    assert isinstance(UrlMapper(), IdUrlMapper)
