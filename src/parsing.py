#### string parsing functions: note names, accidentals, and chord symbols
from dataclasses import dataclass
from .util import unpack_and_reverse_dict, log

################### accidentals

# map semitone offset values to accidental character aliases:
offset_accidentals = {-2: ['𝄫', '♭♭', 'bb'],
                -1: ['♭', 'b'],
                 0: ['', '♮'],
                 1: ['♯', '#'],
                 2: ['𝄪', '♯♯', '##']}
# map accidental aliases to offsets:
accidental_offsets = unpack_and_reverse_dict(offset_accidentals)

# the single characters that may follow a root letter in a chord symbol:
root_accidental_chars = {'#', 'b', '♯', '♭'}


################### note names

# the canonical 12-note table. pitch classes are always spelled with sharps,
# so the index of a name in this list is its position above C:
note_names = ('C', 'C#', 'D', 'D#', 'E', 'F', 'F#', 'G', 'G#', 'A', 'A#', 'B')
canonical_positions = {name:i for i, name in enumerate(note_names)}

natural_note_names = ['C', 'D', 'E', 'F', 'G', 'A', 'B']

# map every accepted spelling of a note (C, C#, Db, E#, F𝄪 etc.) to its position:
note_positions = dict(canonical_positions)
for n in natural_note_names:
    for offset, accidentals in offset_accidentals.items():
        for acc in accidentals:
            note_positions[f'{n}{acc}'] = (canonical_positions[n] + offset) % 12
valid_note_names = set(note_positions.keys())


def strip_octave(name):
    """removes any octave digits from a note name, e.g. 'C#4' becomes 'C#'"""
    return ''.join([c for c in name if not c.isdigit()])

def is_valid_note_name(name):
    """True if name is any accepted spelling of a note (ignoring octave digits)"""
    if not isinstance(name, str):
        return False
    return strip_octave(name) in valid_note_names

def canonical_note_name(name):
    """casts any accepted spelling of a note to its name in the canonical all-sharps table,
    e.g. 'Db' becomes 'C#' and 'E#' becomes 'F'. returns None for unrecognised names."""
    name = strip_octave(name)
    if name in note_positions:
        return note_names[note_positions[name]]
    else:
        return None

def note_split(symbol):
    """splits a chord symbol into its root and everything after it.
    the root is the first character, plus the second character if (and only if)
    it is a sharp or flat sign. e.g. 'F#m7' splits into ('F#', 'm7')"""
    if len(symbol) > 1 and symbol[1] in root_accidental_chars:
        return symbol[:2], symbol[2:]
    else:
        return symbol[:1], symbol[1:]


################### chord symbols

@dataclass(frozen=True)
class ParsedChord:
    """the structured result of parsing a chord symbol typed by a user.
    'symbol' is always the input as given. 'root' and 'bass' are canonical note names,
    and 'quality' is whatever remained after the root, which is NOT guaranteed
    to be a registered chord type.
    an unparseable symbol has root=None and quality=None."""
    symbol: str
    root: str = None
    quality: str = None
    bass: str = None

    @property
    def is_parsed(self):
        return self.root is not None

    def __str__(self):
        if not self.is_parsed:
            return f'?{self.symbol}?'
        bass_str = f'/{self.bass}' if self.bass is not None else ''
        return f'{self.root}:{self.quality}{bass_str}'

def parse_chord_symbol(symbol, default_quality='maj'):
    """best-effort parse of a chord symbol like 'Am', 'G7', 'Bbmaj7' or 'C/E'
    into a ParsedChord. never raises on bad input: unrecognisable symbols
    return a ParsedChord with is_parsed=False instead.

    the quality is not checked against the chord type table, and defaults
    to 'maj' if the symbol is a bare root."""
    if not isinstance(symbol, str):
        raise TypeError(f'parse_chord_symbol expects a str, but got: {type(symbol)}')
    original = symbol
    symbol = symbol.strip()

    # split off a slash bass, but only if it is actually a note name:
    bass = None
    if '/' in symbol:
        body, slash_part = symbol.rsplit('/', 1)
        if is_valid_note_name(slash_part):
            bass = canonical_note_name(slash_part)
            symbol = body

    root_name, quality = note_split(symbol)
    root = canonical_note_name(root_name) if len(root_name) > 0 else None
    if root is None:
        log(f'Could not parse a root note from chord symbol: {original!r}')
        return ParsedChord(original)

    if quality == '':
        quality = default_quality
    return ParsedChord(original, root=root, quality=quality, bass=bass)
