import pytest
from ..parsing import (parse_chord_symbol, canonical_note_name, note_split, strip_octave,
                       is_valid_note_name, ParsedChord)
from .testing_tools import compare

def test_note_names():
    compare(strip_octave('C#4'), 'C#')
    compare(canonical_note_name('Db'), 'C#')
    compare(canonical_note_name('E#'), 'F')
    compare(canonical_note_name('Cb'), 'B')
    compare(canonical_note_name('F𝄪'), 'G')
    compare(canonical_note_name('B♭'), 'A#')
    compare(canonical_note_name('H'), None)
    compare(is_valid_note_name('Gb3'), True)
    compare(is_valid_note_name('X'), False)
    compare(is_valid_note_name(7), False)

def test_note_split():
    compare(note_split('F#m7'), ('F#', 'm7'))
    compare(note_split('Bbmaj7'), ('Bb', 'maj7'))
    compare(note_split('Am'), ('A', 'm'))
    compare(note_split('G'), ('G', ''))
    # only the second character can be an accidental:
    compare(note_split('Gm#5'), ('G', 'm#5'))

def test_parse_chord_symbol():
    am = parse_chord_symbol('Am')
    compare(am, ParsedChord('Am', root='A', quality='m'))
    compare(am.is_parsed, True)

    # bare roots default to major:
    compare(parse_chord_symbol('C').quality, 'maj')

    # flats are canonicalised to sharps, but the original symbol is kept:
    db = parse_chord_symbol('Db7')
    compare(db.root, 'C#')
    compare(db.quality, '7')
    compare(db.symbol, 'Db7')

    # slash bass:
    ce = parse_chord_symbol('C/E')
    compare((ce.root, ce.quality, ce.bass), ('C', 'maj', 'E'))
    compare(parse_chord_symbol('Am7/Gb').bass, 'F#')

    # unregistered qualities are passed through unvalidated:
    compare(parse_chord_symbol('Cwhatever').quality, 'whatever')

    # unparseable roots give an unparsed result rather than raising:
    bad = parse_chord_symbol('Xm7')
    compare(bad.is_parsed, False)
    compare(bad.quality, None)
    compare(parse_chord_symbol('').is_parsed, False)
    compare(str(bad), '?Xm7?')

    with pytest.raises(TypeError):
        parse_chord_symbol(None)
