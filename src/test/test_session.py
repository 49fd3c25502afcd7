import pytest
from ..session import ChordSession
from ..recommendations import RecommendationEngine
from .testing_tools import compare

def test_building_a_progression():
    session = ChordSession('C', 'Ionian')
    for symbol in ['C', 'G', 'Am', 'F']:
        session.add(symbol)
    compare(len(session), 4)
    compare(session.degrees(), [1, 5, 6, 4])
    compare(session.engine.current_chord.symbol, 'F')
    compare(str(session), '𝄆 C G Am F 𝄇 in C Ionian')

    analysis = session.analyze()
    compare(analysis.degrees, [1, 5, 6, 4])
    compare([m.label for m in analysis.matches], ['I-V-vi-IV'])

def test_removing_chords():
    session = ChordSession()
    session.add('Dm7')
    session.add('G7')
    removed = session.remove()
    compare(removed.symbol, 'G7')
    compare(session.engine.current_chord.symbol, 'Dm7')

    session.clear()
    compare(len(session), 0)
    compare(session.engine.current_chord, None)
    with pytest.raises(IndexError):
        session.remove()

def test_chords_outside_key():
    session = ChordSession('C', 'Ionian')
    session.add('Dm7')
    session.add('Ab7')
    session.add('Xyz')
    session.add('Cmaj7')
    compare(session.degrees(), [2, None, None, 1])
    compare(session.analyze().degrees, [2, 1])

    only_outside = ChordSession('C', 'Ionian')
    only_outside.add('F#')
    with pytest.raises(ValueError):
        only_outside.analyze()

def test_recommend():
    session = ChordSession('C', 'Ionian')
    session.add('Am')
    recs = session.recommend(5)
    compare([r.symbol for r in recs], ['Dm7', 'Em7', 'Fmaj7', 'A7', 'B7'])

    # changing key moves the analysis with it:
    session.set_key('A', 'Aeolian')
    compare(session.degrees(), [1])

def test_shared_engine():
    engine = RecommendationEngine('G', 'Mixolydian')
    session = ChordSession(engine=engine)
    compare((session.key, session.mode), ('G', 'Mixolydian'))
    session.add('F')
    compare(engine.current_chord.symbol, 'F')
    compare(session.degrees(), [7])

    rekeyed = ChordSession(mode='Dorian', engine=RecommendationEngine('D'))
    compare((rekeyed.key, rekeyed.mode), ('D', 'Dorian'))
