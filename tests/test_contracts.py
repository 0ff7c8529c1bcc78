import pytest
from pydantic import ValidationError

from contracts import (
    LocalizedDict,
    Meaning,
    MeaningKind,
    MeaningStatus,
    SemText,
    Sentence,
    Term,
    language_tag,
)


def _term(start, end, probability=0.5):
    return Term(
        start=start,
        end=end,
        meaning_status=MeaningStatus.TO_DISAMBIGUATE,
        meanings=[Meaning(id=f"{start}", kind=MeaningKind.CONCEPT, probability=probability)],
    )


def test_language_tag_normalization():
    assert language_tag(None) == ""
    assert language_tag("it_IT") == "it-IT"
    assert language_tag(" en ") == "en"


def test_empty_meaning():
    m = Meaning()
    assert m.id == ""
    assert m.kind == MeaningKind.UNKNOWN
    assert m.probability == 0.0
    assert m.name.is_empty()
    assert m.description.is_empty()
    assert m.metadata == {}


def test_negative_probability_rejected():
    with pytest.raises(ValidationError):
        Meaning(probability=-0.1)


def test_localized_dict():
    d = LocalizedDict.of("it_IT", "ciao", "salve")
    assert d.strings("it-IT") == ["ciao", "salve"]
    assert d.string("it-IT") == "ciao"
    assert d.string("en") == ""
    assert d.locales() == ["it-IT"]
    assert LocalizedDict.of("en").is_empty()


def test_localized_dict_from_pairs():
    d = LocalizedDict.from_pairs([("it", "a"), ("en", "b"), ("it", "c")])
    assert d.strings("it") == ["a", "c"]
    assert d.strings("en") == ["b"]


def test_term_meanings_sorted_stably():
    a = Meaning(id="a", probability=0.2)
    b = Meaning(id="b", probability=0.9)
    c = Meaning(id="c", probability=0.2)
    term = Term(start=0, end=1, meaning_status=MeaningStatus.TO_DISAMBIGUATE, meanings=[a, b, c])
    assert [m.id for m in term.meanings] == ["b", "a", "c"]


@pytest.mark.parametrize("status", [MeaningStatus.SELECTED, MeaningStatus.REVIEWED])
def test_selected_status_requires_meaning(status):
    with pytest.raises(ValidationError):
        Term(start=0, end=1, meaning_status=status)


@pytest.mark.parametrize("status", [MeaningStatus.TO_DISAMBIGUATE, MeaningStatus.NOT_SURE])
def test_unselected_status_forbids_meaning(status):
    with pytest.raises(ValidationError):
        Term(start=0, end=1, meaning_status=status, selected_meaning=Meaning(id="1"))


def test_term_span_validated():
    with pytest.raises(ValidationError):
        Term(start=3, end=2, meaning_status=MeaningStatus.NOT_SURE)
    with pytest.raises(ValidationError):
        Term(start=-1, end=2, meaning_status=MeaningStatus.NOT_SURE)


def test_sentence_rejects_overlapping_terms():
    with pytest.raises(ValidationError):
        Sentence(start=0, end=10, terms=[_term(0, 5), _term(4, 8)])


def test_sentence_accepts_adjacent_terms():
    s = Sentence(start=0, end=10, terms=[_term(0, 5), _term(5, 8)])
    assert len(s.terms) == 2


def test_models_are_frozen():
    m = Meaning(id="1")
    with pytest.raises(ValidationError):
        m.id = "2"


def test_semtext_helpers():
    st = SemText(
        locale="en_US",
        text="hello dear world",
        sentences=[Sentence(start=0, end=16, terms=[_term(0, 5), _term(6, 10)])],
    )
    assert st.locale == "en-US"
    assert [st.text_of(t) for t in st.terms()] == ["hello", "dear"]


@pytest.mark.parametrize("has_selection, reviewed, expected", [
    (True, True, MeaningStatus.REVIEWED),
    (True, False, MeaningStatus.SELECTED),
    (False, True, MeaningStatus.NOT_SURE),
    (False, False, MeaningStatus.TO_DISAMBIGUATE),
])
def test_status_resolve(has_selection, reviewed, expected):
    assert MeaningStatus.resolve(has_selection, reviewed) == expected


def test_term_metadata_lookup():
    term = _term(0, 1).model_copy(update={"metadata": {"nltext": "x"}})
    assert term.has_metadata("nltext")
    assert not term.has_metadata("other")
    assert term.get_metadata("nltext") == "x"
    with pytest.raises(KeyError):
        term.get_metadata("other")
