### this module builds the scales of each registered mode, and the seventh chords
### that are native to each degree of those scales (the 'diatonic' chords)

from dataclasses import dataclass
from .config.def_modes import mode_defs, major_key_modes
from .config.def_chords import chord_types
from .qualities import ChordQuality
from .notes import NoteList, transpose, index_of
from .util import MusicError, log
from . import _settings


class UnknownModeError(MusicError, ValueError):
    """raised when a mode id is not registered in the mode table"""
    pass


# degree numbers to their (upper-case) roman numerals:
roman_numerals = {1: 'I', 2: 'II', 3: 'III', 4: 'IV', 5: 'V', 6: 'VI', 7: 'VII'}

mode_names = list(mode_defs.keys())


def get_mode(mode_id):
    """returns the registered ModeDef for a mode id such as 'Dorian' or 'HarmonicMinor'"""
    if mode_id not in mode_defs:
        raise UnknownModeError(f'Unknown mode: {mode_id!r} (registered modes are: {", ".join(mode_names)})')
    return mode_defs[mode_id]

def is_major_key(mode_id):
    return mode_id in major_key_modes

def build_scale(root, mode_id):
    """returns the 7 notes of the given mode starting on root, as a NoteList"""
    mode = get_mode(mode_id)
    return NoteList([transpose(root, iv) for iv in mode.intervals])

def roman_numeral(degree, quality):
    """returns the roman numeral label of a chord with the given quality on a scale degree.
    quality can be a chord type id or symbol suffix (like 'm7' or 'm') or a ChordQuality object.

    the numeral is lower-case for chords with a minor third, followed by a glyph
    for diminished (°), half-diminished (ø) or augmented (+) chords,
    and then by the seventh/extension size, e.g. 'viiø7', 'IVmaj7' or 'V9'.
    an unregistered quality gives the bare upper-case numeral,
    and a degree outside 1-7 gives the degree number as a string."""
    if degree not in roman_numerals:
        return f'{degree}'
    if not isinstance(quality, ChordQuality):
        quality = ChordQuality.from_name(quality)

    numeral = roman_numerals[degree]
    if not quality.is_known:
        return numeral
    if quality.minor:
        numeral = numeral.lower()
    # glyph before the seventh marker, giving 'viiø7' and 'vii°7' rather than 'vii7ø':
    return f'{numeral}{quality.glyph}{quality.seventh_marker}'


@dataclass(frozen=True)
class DiatonicChord:
    """a chord that is native to a key, with its position in that key"""
    root: str
    quality: str            # chord type id
    symbol: str
    degree: int             # 1-7
    roman_numeral: str
    function: str

    _marker = _settings.MARKERS['DiatonicChord']

    def __str__(self):
        return f'{self._marker}{self.symbol} ({self.roman_numeral})'


def build_diatonic_chords(root, mode_id):
    """returns the 7 DiatonicChords of the given key, in degree order"""
    mode = get_mode(mode_id)
    scale = build_scale(root, mode_id)
    diatonic_chords = []
    for i, (note, quality) in enumerate(zip(scale, mode.qualities)):
        degree = i + 1
        if quality in chord_types:
            ctype = chord_types[quality]
            symbol, function = f'{note}{ctype.symbol}', ctype.function
        else:
            # mode tables should only name registered chord types, but we can survive it
            log(f'Mode {mode_id} names an unregistered chord quality on degree {degree}: {quality}')
            symbol, function = f'{note}{quality}', 'unknown'
        diatonic_chords.append(DiatonicChord(note, quality, symbol, degree, roman_numeral(degree, quality), function))
    return diatonic_chords

def scale_degree(note, root, mode_id):
    """returns the degree (1-7) of a note within the given key,
    or None if the note is not in that key's scale"""
    position = index_of(note)
    for i, scale_note in enumerate(build_scale(root, mode_id)):
        if index_of(scale_note) == position:
            return i + 1
    return None

def parallel_modes(root):
    """returns a dict mapping each registered mode id to its diatonic chords on the given root,
    in mode registration order"""
    return {mode_id: build_diatonic_chords(root, mode_id) for mode_id in mode_names}
