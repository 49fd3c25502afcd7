### this module handles pitch-class arithmetic over the canonical 12-note table.
### Notes are abstract pitch classes in no particular octave, such as C or D#,
### and are represented simply by their canonical (all-sharps) name strings.

from .parsing import note_names, canonical_positions, strip_octave, canonical_note_name
from .util import MusicError
from . import _settings


class UnknownNoteError(MusicError, ValueError):
    """raised when a note name is not in the canonical 12-note table"""
    pass


def index_of(note):
    """returns the position of a note in the chromatic scale starting from C,
    i.e. C is 0, C# is 1, ... B is 11.
    any octave digits are ignored, so 'C#4' is the same as 'C#'.
    only canonical (sharp) spellings are accepted: 'Db' raises UnknownNoteError."""
    if not isinstance(note, str):
        raise TypeError(f'expected a note name str but got: {type(note)}')
    name = strip_octave(note)
    if name not in canonical_positions:
        raise UnknownNoteError(f'Not a note in the 12-note table: {note!r} (valid names are: {", ".join(note_names)})')
    return canonical_positions[name]

def note_at(position):
    """returns the canonical name of the note at a chromatic position,
    wrapping around the octave for positions outside 0-11"""
    return note_names[int(position) % 12]

def transpose(note, semitones):
    """returns the note that lies a number of semitones above (or, if negative, below)
    the given note. e.g. transpose('A', 3) is 'C' and transpose('C', -1) is 'B'"""
    # python's modulo is always non-negative for a positive divisor:
    return note_at(index_of(note) + int(semitones))

def interval_between(root, other):
    """returns the ascending distance in semitones (0-11) from root up to other"""
    return (index_of(other) - index_of(root)) % 12


class NoteList(list):
    """a plain list of note names, with a compact string method
    and enharmonic-free membership checks"""
    def __init__(self, *items):
        if len(items) == 1 and isinstance(items[0], (list, tuple)):
            items = items[0]
        super().__init__([self._canonical(n) for n in items])

    @staticmethod
    def _canonical(name):
        # unlike index_of, a NoteList accepts any spelling and stores its sharp equivalent:
        canonical = canonical_note_name(name) if isinstance(name, str) else None
        if canonical is None:
            raise UnknownNoteError(f"Not a valid note name: {name!r}")
        return canonical

    @property
    def positions(self):
        return [index_of(n) for n in self]

    def transpose(self, semitones):
        return NoteList([transpose(n, semitones) for n in self])

    # outer brackets for this container class:
    _brackets = _settings.BRACKETS['NoteList']

    def __str__(self):
        lb, rb = self._brackets
        return f'{lb}{", ".join(self)}{rb}'

    def __repr__(self):
        return str(self)
