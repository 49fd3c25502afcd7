import pytest
from ..notes import index_of, note_at, transpose, interval_between, NoteList, UnknownNoteError
from ..parsing import note_names
from ..util import MusicError
from .testing_tools import compare

def test_index_of():
    compare(index_of('C'), 0)
    compare(index_of('A#'), 10)
    compare(index_of('B'), 11)
    # octave digits are ignored:
    compare(index_of('C#4'), 1)

    # flats are not in the table:
    with pytest.raises(UnknownNoteError):
        index_of('Db')
    with pytest.raises(UnknownNoteError):
        index_of('H')
    with pytest.raises(TypeError):
        index_of(3)

    # unknown notes are both music errors and value errors:
    compare(issubclass(UnknownNoteError, MusicError), True)
    compare(issubclass(UnknownNoteError, ValueError), True)

def test_transpose():
    compare(transpose('C', 4), 'E')
    compare(transpose('A', 3), 'C')
    compare(transpose('C', -1), 'B')
    compare(transpose('G', 6), 'C#')
    compare(transpose('E', 25), 'F')
    compare(transpose('D', -14), 'C')
    compare(note_at(-1), 'B')

    # transposing there and back always returns the original note:
    for note in note_names:
        for k in (-13, -7, -1, 0, 5, 12, 19):
            compare(transpose(transpose(note, k), -k), note)

def test_interval_between():
    compare(interval_between('C', 'G'), 7)
    compare(interval_between('G', 'C'), 5)
    compare(interval_between('A', 'A'), 0)

def test_notelist():
    nl = NoteList('C', 'E', 'G')
    compare(nl, ['C', 'E', 'G'])
    compare(NoteList(['C', 'Eb', 'G']), ['C', 'D#', 'G'])
    compare(nl.positions, [0, 4, 7])
    compare(nl.transpose(2), ['D', 'F#', 'A'])
    compare(str(nl), '𝄃C, E, G 𝄂')
