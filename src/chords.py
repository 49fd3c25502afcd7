### this module builds concrete chords (a chord type on a specific root note),
### along with their inversions, colour tags and tension analysis

from dataclasses import dataclass, replace
from .config.def_chords import chord_types, tension_levels, chord_colors
from .qualities import ChordQuality, resolve_type_id
from .notes import transpose, note_at, index_of
from .util import MusicError, unpack_and_collect_dict, rotate_list, log
from . import _settings


class UnknownChordTypeError(MusicError, ValueError):
    """raised when a chord type id is not registered in the chord type table"""
    pass


# reverse lookup from chord type id to every colour tag that includes it:
type_colors = unpack_and_collect_dict(chord_colors)


def get_chord_type(type_id):
    """returns the registered ChordTypeDef for a chord type id such as 'm7' or 'maj'"""
    if type_id not in chord_types:
        raise UnknownChordTypeError(f'Unknown chord type: {type_id!r}')
    return chord_types[type_id]

def resolve_chord_type(name):
    """as get_chord_type, but also accepts symbol suffixes (like 'm' or '')
    and returns None instead of raising for unregistered names"""
    type_id = resolve_type_id(name)
    return chord_types[type_id] if type_id is not None else None


@dataclass(frozen=True)
class Chord:
    """a chord type built on a specific root.
    Chords are never modified: inversion and substitution produce new Chord objects"""
    root: str
    type_id: str
    symbol: str
    notes: tuple
    intervals: tuple
    function: str
    tension: str            # tension label, e.g. 'stable' or 'altered'
    tension_level: int      # ordinal tension, 0-5
    name: str
    degree_names: tuple
    bass: str = None
    inversion: int = 0

    @property
    def quality(self):
        return ChordQuality.from_name(self.type_id)

    @property
    def suffix(self):
        return chord_types[self.type_id].symbol

    @property
    def colors(self):
        return color_tags(self.type_id)

    _marker = _settings.MARKERS['Chord']

    def __str__(self):
        return f'{self._marker}{self.symbol} [{" ".join(self.notes)}]'


def build_chord(root, type_id):
    """returns the Chord of the given type on the given root note,
    e.g. build_chord('A', 'm7') has notes A C E G"""
    ctype = get_chord_type(type_id)
    root = note_at(index_of(root))
    notes = tuple([transpose(root, iv) for iv in ctype.intervals])
    log(f'Built chord {root}{ctype.symbol} with notes: {notes}')
    return Chord(root=root, type_id=type_id, symbol=f'{root}{ctype.symbol}',
                 notes=notes, intervals=ctype.intervals,
                 function=ctype.function, tension=ctype.tension,
                 tension_level=tension_levels.get(ctype.tension, 0),
                 name=ctype.name, degree_names=ctype.degrees, bass=root)

def invert(chord):
    """returns every inversion of a chord as a list of Chords, one per note,
    where inversion 0 is the chord in root position.
    inverted chords are written with a slash bass, e.g. 'C/E'"""
    inversions = []
    for i in range(len(chord.notes)):
        notes = tuple(rotate_list(list(chord.notes), i))
        symbol = chord.symbol if i == 0 else f'{chord.symbol}/{notes[0]}'
        inversions.append(replace(chord, notes=notes, bass=notes[0], inversion=i, symbol=symbol))
    return inversions

def color_tags(type_id):
    """returns the set of descriptive colour tags (like 'bright' or 'jazzy') of a chord type.
    types with no tags return an empty set"""
    return set(type_colors.get(type_id, []))


@dataclass(frozen=True)
class TensionStep:
    chord: Chord
    tension: int
    movement: str           # 'increasing', 'decreasing' or 'stable'
    next_tension: int = None

def analyze_tension_progression(chords):
    """accepts a sequence of Chords and returns a TensionStep for each,
    describing how tension moves from that chord to the next.
    the last chord is always 'stable' with no next tension."""
    steps = []
    for i, chord in enumerate(chords):
        tension = chord.tension_level
        next_tension = chords[i+1].tension_level if i < len(chords) - 1 else None
        movement = 'stable'
        if next_tension is not None:
            if next_tension > tension:
                movement = 'increasing'
            elif next_tension < tension:
                movement = 'decreasing'
        steps.append(TensionStep(chord, tension, movement, next_tension))
    return steps
