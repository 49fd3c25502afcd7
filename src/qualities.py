# OOP representation of chord quality, as a set of explicit facets
# (third, fifth, seventh, extension) decided once from a chord type's intervals
from .config.def_chords import chord_types
from .util import log

# every registered chord type, keyed by its symbol suffix instead of its id.
# ids and suffixes differ only for the bare triads: 'maj' is written '' and 'min' is written 'm'
suffix_type_ids = {ctype.symbol: type_id for type_id, ctype in chord_types.items()}

# the interval (in semitones above the root) that signals each chord extension:
extension_intervals = {21: 13, 17: 11, 14: 9}


def resolve_type_id(name):
    """accepts a chord quality as written after a root in a chord symbol,
    and returns the id of the registered chord type it refers to.
    registered ids are matched first, then symbol suffixes,
    so that 'm', 'min', '' and 'maj' are all understood.
    returns None if the quality is not a registered chord type."""
    if name is None:
        return None
    if name in chord_types:
        return name
    elif name in suffix_type_ids:
        return suffix_type_ids[name]
    else:
        log(f'Unregistered chord quality: {name!r}')
        return None


class ChordQuality:
    """the quality of a chord, broken down into facets that describe each chord factor:
        third:      'major', 'minor', 'suspended' or 'none'
        fifth:      'perfect', 'diminished', 'augmented' or 'none'
        seventh:    'major', 'minor', 'diminished' or 'none'
        extension:  9, 11, 13 or None
        diminished_kind: 'half' (m7b5), 'full' (dim7), 'triad' (dim), or None if not diminished
    a quality built from an unregistered chord type name has is_known=False,
    and all of its facets are empty."""
    def __init__(self, intervals=None, type_id=None):
        self.type_id = type_id
        self.is_known = intervals is not None
        ivs = set(intervals) if intervals is not None else set()

        if 4 in ivs:
            self.third = 'major'
        elif 3 in ivs:
            self.third = 'minor'
        elif (2 in ivs) or (5 in ivs):
            self.third = 'suspended'
        else:
            self.third = 'none'

        if 7 in ivs:
            self.fifth = 'perfect'
        elif 6 in ivs:
            self.fifth = 'diminished'
        elif 8 in ivs:
            self.fifth = 'augmented'
        else:
            self.fifth = 'none'

        if 11 in ivs:
            self.seventh = 'major'
        elif 10 in ivs:
            self.seventh = 'minor'
        elif (9 in ivs) and self.fifth == 'diminished':
            # a sixth above a diminished triad is a diminished seventh
            self.seventh = 'diminished'
        else:
            self.seventh = 'none'

        self.extension = None
        for interval, ext in extension_intervals.items():
            if interval in ivs:
                self.extension = ext
                break

        if self.third == 'minor' and self.fifth == 'diminished':
            self.diminished_kind = {'minor': 'half', 'diminished': 'full', 'none': 'triad'}.get(self.seventh)
        else:
            self.diminished_kind = None

    @classmethod
    def from_name(cls, name):
        """initialise a ChordQuality from a chord type id or symbol suffix,
        such as 'm7', 'maj' or 'm'. unregistered names give an unknown quality"""
        type_id = resolve_type_id(name)
        if type_id is None:
            return cls()
        return cls(chord_types[type_id].intervals, type_id=type_id)

    @property
    def minor(self):
        return self.third == 'minor'

    @property
    def major(self):
        return self.third == 'major'

    @property
    def has_seventh(self):
        return self.seventh != 'none'

    @property
    def augmented(self):
        return self.fifth == 'augmented' and self.third == 'major'

    @property
    def glyph(self):
        """the symbol that a roman numeral carries for this quality, if any"""
        if self.diminished_kind == 'half':
            return 'ø'
        elif self.diminished_kind in ('full', 'triad'):
            return '°'
        elif self.augmented:
            return '+'
        else:
            return ''

    @property
    def seventh_marker(self):
        """the chord-size suffix of a roman numeral for this quality: '7', 'maj7', '9', 'maj9' etc."""
        if self.extension is not None:
            prefix = 'maj' if self.seventh == 'major' else ''
            return f'{prefix}{self.extension}'
        elif self.seventh == 'major':
            return 'maj7'
        elif self.has_seventh:
            return '7'
        else:
            return ''

    def facets(self):
        return {'third': self.third, 'fifth': self.fifth, 'seventh': self.seventh,
                'extension': self.extension, 'diminished_kind': self.diminished_kind}

    def __eq__(self, other):
        if not isinstance(other, ChordQuality):
            raise TypeError(f'ChordQuality can only be compared to other ChordQuality objects, not: {type(other)}')
        return (self.is_known == other.is_known) and (self.facets() == other.facets())

    def __hash__(self):
        return hash((self.is_known, tuple(self.facets().items())))

    def __str__(self):
        if not self.is_known:
            return '?'
        return '/'.join([f'{k}:{v}' for k,v in self.facets().items() if v not in (None, 'none')])

    def __repr__(self):
        name = self.type_id if self.type_id is not None else 'unknown'
        return f'ChordQuality({name}: {self})'
