from adapters.nltext import (
    NLComplexToken,
    NLEntityMeaning,
    NLSenseMeaning,
    NLSentence,
    NLText,
    NLTextConverter,
    NLToken,
)
from adapters.semantic_string import SemanticStringConverter
from adapters.url_mapper import UrlMapper
from contracts import MeaningKind, MeaningStatus

TEXT = "Mario lives in Trento"

MAPPER = UrlMapper("entities/", "concepts/")


def _annotated():
    mario = NLEntityMeaning(lemma="Mario", object_id=21, probability=0.8)
    live = NLSenseMeaning(lemma="live", concept_id=3, probability=0.6)
    dwell = NLSenseMeaning(lemma="dwell", concept_id=4, probability=0.3)
    trento = NLEntityMeaning(lemma="Trento", object_id=22, probability=0.9)
    tokens = (
        NLToken(text="Mario", start_offset=0, end_offset=5, selected_meaning=mario, meanings=(mario,)),
        NLToken(text="lives", start_offset=6, end_offset=11, selected_meaning=live, meanings=(live, dwell)),
        NLToken(text="in", start_offset=12, end_offset=14),
        NLToken(text="Trento", start_offset=15, end_offset=21, selected_meaning=trento),
    )
    sentence = NLSentence(text=TEXT, start_offset=0, end_offset=len(TEXT), tokens=tokens)
    return NLText(text=TEXT, language="en", sentences=(sentence,))


def _triples(semtext):
    """(start, end, id wybranego znaczenia, rodzaj wybranego znaczenia) dla każdego termu."""
    result = []
    for t in semtext.terms():
        selected = t.selected_meaning
        result.append((
            t.start,
            t.end,
            selected.id if selected else None,
            selected.kind if selected else None,
        ))
    return result


def _roundtrip(semtext):
    bridge = SemanticStringConverter(MAPPER)
    return bridge.semtext(bridge.semantic_string(semtext))


def test_selected_meanings_survive_roundtrip():
    semtext = NLTextConverter(MAPPER).semtext(_annotated())

    back = _roundtrip(semtext)

    assert back.text == semtext.text
    assert _triples(back) == _triples(semtext)
    assert _triples(back) == [
        (0, 5, "entities/21", MeaningKind.ENTITY),
        (6, 11, "concepts/3", MeaningKind.CONCEPT),
        (15, 21, "entities/22", MeaningKind.ENTITY),
    ]
    assert all(t.meaning_status == MeaningStatus.SELECTED for t in back.terms())


def test_unselected_term_with_clear_candidate_comes_back_selected():
    """Stratne: jedyny kandydat zostaje wybrany przez disambiguator po powrocie."""
    text = "ab cd"
    sense = NLSenseMeaning(lemma="ab", concept_id=3, probability=0.9)
    tokens = (
        NLToken(text="ab", start_offset=0, end_offset=2, meanings=(sense,)),
        NLToken(text="cd", start_offset=3, end_offset=5, complex_token_ids=(0,)),
    )
    sentence = NLSentence(
        text=text,
        start_offset=0,
        end_offset=len(text),
        tokens=tokens,
        complex_tokens=(NLComplexToken.multi_word([1]),),
    )
    semtext = NLTextConverter(MAPPER).semtext(NLText(text=text, sentences=(sentence,)))

    assert _triples(semtext) == [(0, 2, None, None), (3, 5, None, None)]
    assert semtext.terms()[1].meanings[0].id == ""

    back = _roundtrip(semtext)

    # placeholder multi-wordu (puste id) znika, kandydat "ab" zostaje wybrany
    assert _triples(back) == [(0, 2, "concepts/3", MeaningKind.CONCEPT)]
    assert back.terms()[0].meaning_status == MeaningStatus.SELECTED


def test_unselected_term_with_close_candidates_stays_unselected():
    text = "ab"
    first = NLSenseMeaning(lemma="ab", concept_id=3, probability=0.5)
    second = NLSenseMeaning(lemma="ab", concept_id=4, probability=0.45)
    token = NLToken(text="ab", start_offset=0, end_offset=2, meanings=(first, second))
    sentence = NLSentence(text=text, start_offset=0, end_offset=2, tokens=(token,))
    semtext = NLTextConverter(MAPPER).semtext(NLText(text=text, sentences=(sentence,)))

    back = _roundtrip(semtext)

    assert _triples(back) == _triples(semtext) == [(0, 2, None, None)]
    assert back.terms()[0].meaning_status == MeaningStatus.TO_DISAMBIGUATE
    assert [m.id for m in back.terms()[0].meanings] == ["concepts/3", "concepts/4"]
