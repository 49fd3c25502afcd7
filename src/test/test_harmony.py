import pytest
from ..harmony import (progression_weight, key_type, secondary_dominant_targets, secondary_dominant,
                       build_double_dominant_chains, modal_interchange_chords,
                       Substitution, substitute, chord_substitutions, relative_substitution,
                       common_borrowed_chords)
from ..chords import build_chord
from ..scales import build_diatonic_chords, UnknownModeError
from ..notes import index_of
from .testing_tools import compare

def test_progression_weight():
    compare(progression_weight(5, 1), 0.95)
    compare(progression_weight(1, 5), 0.95)
    compare(progression_weight(5, 4), 0.3)
    compare(progression_weight(4, 5), 0.9)
    # missing movements get the default weight:
    compare(progression_weight(1, 1), 0.3)
    compare(progression_weight(9, 1), 0.3)

def test_secondary_dominants():
    compare(key_type('Ionian'), 'major')
    compare(key_type('Aeolian'), 'minor')
    compare(key_type('Lydian'), 'minor')
    with pytest.raises(UnknownModeError):
        key_type('Major')

    compare(secondary_dominant_targets('Ionian'), frozenset({2, 4, 7, 9, 10}))
    compare(secondary_dominant_targets('Dorian'), frozenset({0, 2, 5, 7, 10}))

    dm7 = build_diatonic_chords('C', 'Ionian')[1]
    compare(secondary_dominant(dm7).symbol, 'A7')
    compare(secondary_dominant(build_chord('G', 'maj')).symbol, 'D7')

def test_double_dominant_chains():
    chains = build_double_dominant_chains('C', 'Ionian', 3)
    compare(len(chains), 3)
    compare([ch.symbols for ch in chains], [['D7', 'G7'], ['A7', 'D7', 'G7'], ['E7', 'A7', 'D7', 'G7']])
    compare([ch.depth for ch in chains], [1, 2, 3])
    compare(chains[0].target, 'G7')
    compare(chains[1].progression, 'A7 → D7 → G7')

    # harmonic minor has two dominant-function chords (V7 and vii°7):
    hm_chains = build_double_dominant_chains('A', 'HarmonicMinor', 2)
    compare(len(hm_chains), 4)
    compare([ch.target for ch in hm_chains], ['E7', 'E7', 'G#dim7', 'G#dim7'])
    compare([len(ch) for ch in hm_chains], [2, 3, 2, 3])

def test_modal_interchange():
    borrowed = modal_interchange_chords('C', 'Ionian')
    symbols = [b.chord.symbol for b in borrowed]
    current = {ch.symbol for ch in build_diatonic_chords('C', 'Ionian')}
    # no duplicates, and nothing already in the key:
    compare(len(symbols), len(set(symbols)))
    compare(len(current.intersection(symbols)), 0)
    # sorted by root:
    roots = [b.chord.root for b in borrowed]
    compare([index_of(r) for r in roots], sorted([index_of(r) for r in roots]))

    # the first borrowed chord on C is Dorian's i7:
    compare(borrowed[0].chord.symbol, 'Cm7')
    compare(borrowed[0].source_mode, 'Dorian')
    # Fm7 (iv) is attributed to Phrygian, which comes before Aeolian:
    fm7 = [b for b in borrowed if b.chord.symbol == 'Fm7'][0]
    compare(fm7.source_mode, 'Phrygian')
    compare(fm7.explanation, 'Fm7 borrowed from Phrygian')

def test_substitution_rules():
    g7 = build_chord('G', '7')
    compare(substitute(Substitution.TRITONE, g7).symbol, 'C#7')
    compare(substitute(Substitution.HALF_DIMINISHED, g7).symbol, 'G#m7b5')
    compare(substitute(Substitution.DIMINISHED, g7).symbol, 'G#dim7')
    compare(substitute(Substitution.AUGMENTED, g7).symbol, 'Gaug')
    compare(substitute(Substitution.RELATIVE_MINOR, g7), None)

    cmaj7 = build_chord('C', 'maj7')
    compare(substitute(Substitution.RELATIVE_MINOR, cmaj7).symbol, 'Am7')
    compare(substitute(Substitution.TRITONE, cmaj7), None)

    subs = chord_substitutions(g7)
    compare([s.kind for s in subs], [Substitution.HALF_DIMINISHED, Substitution.DIMINISHED,
                                     Substitution.AUGMENTED, Substitution.TRITONE])
    compare(subs[3].explanation(), 'tritone substitute for G7')
    compare(subs[3].explanation('Gdom'), 'tritone substitute for Gdom')

    compare(chord_substitutions(build_chord('A', 'm7')), [])

def test_relative_substitution():
    compare(relative_substitution('A', 'min').symbol, 'Cmaj7')
    compare(relative_substitution('A', 'm7').symbol, 'Cmaj7')
    compare(relative_substitution('C', 'maj').symbol, 'Am7')
    compare(relative_substitution('C', 'sus4'), None)
    compare(relative_substitution('C', None), None)

def test_common_borrowed_chords():
    major = common_borrowed_chords('Ionian')
    compare(list(major.keys()), ['bII', 'bIII', 'iv', 'bVI', 'bVII'])
    compare((major['bVII'].quality, major['bVII'].source), ('7', 'Mixolydian'))
    minor = common_borrowed_chords('Aeolian')
    compare(minor['IV'].source, 'Ionian')
