import pytest
from ..chords import (build_chord, invert, color_tags, analyze_tension_progression,
                      get_chord_type, resolve_chord_type, UnknownChordTypeError)
from ..util import MusicError
from .testing_tools import compare

def test_build_chord():
    am7 = build_chord('A', 'm7')
    compare(am7.symbol, 'Am7')
    compare(am7.notes, ('A', 'C', 'E', 'G'))
    compare(am7.function, 'subdominant')
    compare(am7.tension, 'mild')
    compare(am7.tension_level, 1)
    compare(am7.degree_names, ('1', 'b3', '5', 'b7'))

    c = build_chord('C', 'maj')
    compare(c.symbol, 'C')
    compare(c.notes, ('C', 'E', 'G'))

    compare(build_chord('G', '7').notes, ('G', 'B', 'D', 'F'))
    compare(build_chord('D', '9').notes, ('D', 'F#', 'A', 'C', 'E'))
    compare(build_chord('B', 'alt').tension_level, 5)

def test_chord_type_errors():
    with pytest.raises(UnknownChordTypeError):
        build_chord('C', 'm')
    with pytest.raises(UnknownChordTypeError):
        get_chord_type('13')
    compare(issubclass(UnknownChordTypeError, MusicError), True)

    compare(resolve_chord_type('m').name, 'Minor Triad')
    compare(resolve_chord_type('13'), None)

def test_invert():
    c = build_chord('C', 'maj')
    inversions = invert(c)
    compare(len(inversions), 3)
    compare(inversions[0], c)
    compare(inversions[1].notes, ('E', 'G', 'C'))
    compare(inversions[1].symbol, 'C/E')
    compare(inversions[2].symbol, 'C/G')
    compare(inversions[2].bass, 'G')
    compare(inversions[2].inversion, 2)
    # inverting never changes the original chord:
    compare(c.notes, ('C', 'E', 'G'))

    compare(len(invert(build_chord('G', '7'))), 4)

def test_color_tags():
    compare(color_tags('maj7'), {'bright'})
    compare(color_tags('7b9'), {'dark', 'jazzy'})
    compare(color_tags('7'), set())
    compare(build_chord('C', 'm9').colors, {'warm'})

def test_tension_progression():
    chords = [build_chord('C', 'maj7'), build_chord('G', '7'), build_chord('G', '7'), build_chord('C', 'maj')]
    steps = analyze_tension_progression(chords)
    compare([s.movement for s in steps], ['increasing', 'stable', 'decreasing', 'stable'])
    compare([s.tension for s in steps], [0, 3, 3, 0])
    compare(steps[-1].next_tension, None)
    compare(analyze_tension_progression([]), [])
