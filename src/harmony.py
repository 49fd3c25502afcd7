### this module holds the harmonic rules that relate chords to one another inside a key:
### diatonic movement weights, secondary dominants and their chains,
### borrowing from parallel modes, and substitution rules

from dataclasses import dataclass
from enum import Enum
from .config.def_harmony import progression_weights, secondary_dominant_targets as target_offsets
from .config.def_harmony import modal_interchange_chords as borrowing_reference
from .config.def_chords import chord_types
from .scales import build_diatonic_chords, get_mode, is_major_key, mode_names
from .chords import build_chord
from .notes import transpose, index_of
from .util import log
from . import _settings


#### diatonic movement

def progression_weight(from_degree, to_degree):
    """returns the probability weight of moving from one scale degree to another.
    movements that are not in the weight table get the default weight"""
    weights = progression_weights.get(from_degree, {})
    return weights.get(to_degree, _settings.DEFAULT_PROGRESSION_WEIGHT)


#### secondary dominants

def key_type(mode_id):
    """returns 'major' or 'minor': the key type that determines which
    chords in a mode are eligible for secondary dominants"""
    get_mode(mode_id)
    return 'major' if is_major_key(mode_id) else 'minor'

def secondary_dominant_targets(mode_id):
    """returns the set of semitone offsets from the tonic whose chords can be
    preceded by their own secondary dominant in a key of this mode"""
    return target_offsets[key_type(mode_id)]

def secondary_dominant(target):
    """returns the dominant seventh chord that resolves to the given target chord,
    i.e. the 7 chord built a perfect fifth above the target's root.
    the target can be anything with a .root attribute; its own quality is irrelevant"""
    return build_chord(transpose(target.root, 7), '7')


@dataclass(frozen=True)
class DominantChain:
    """a sequence of stacked secondary dominants that ends on a dominant chord of the key.
    chain[0] is the outermost (newest) dominant, i.e. the chord to play first,
    and chain[-1] is the key's own dominant chord"""
    chain: tuple
    depth: int
    target: str

    @property
    def symbols(self):
        return [ch.symbol for ch in self.chain]

    @property
    def progression(self):
        return _settings.MARKERS['right'].join(self.symbols)

    @property
    def explanation(self):
        return f'{self.depth}-level dominant chain resolving to {self.target}'

    def __len__(self):
        return len(self.chain)

def build_double_dominant_chains(root, mode_id, max_depth=None):
    """for each diatonic chord of the key that has dominant function,
    repeatedly prepend the secondary dominant of the chain's first chord,
    and return one DominantChain per depth level from 1 to max_depth.
    so each dominant chord yields max_depth chains of increasing length."""
    if max_depth is None:
        max_depth = _settings.DOUBLE_DOMINANT_DEPTH
    dominant_chords = [ch for ch in build_diatonic_chords(root, mode_id)
                       if ch.quality in chord_types and chord_types[ch.quality].function == 'dominant']

    chains = []
    for dominant in dominant_chords:
        chain = [build_chord(dominant.root, dominant.quality)]
        for depth in range(1, max_depth+1):
            chain.insert(0, secondary_dominant(chain[0]))
            chains.append(DominantChain(tuple(chain), depth, dominant.symbol))
    log(f'Built {len(chains)} dominant chains from {len(dominant_chords)} dominant chords in {root} {mode_id}')
    return chains


#### modal interchange

@dataclass(frozen=True)
class BorrowedChord:
    chord: object           # a DiatonicChord of the source mode
    source_mode: str

    @property
    def explanation(self):
        return f'{self.chord.symbol} borrowed from {get_mode(self.source_mode).name}'

def modal_interchange_chords(root, mode_id):
    """returns the chords of every other registered mode on the same root
    that are not diatonic to the current mode, as BorrowedChords.
    each chord symbol appears once (attributed to the first mode, in registration order, that contains it),
    and the result is sorted by the pitch class of each chord's root."""
    current_symbols = {ch.symbol for ch in build_diatonic_chords(root, mode_id)}
    borrowed = {}
    for other_mode in mode_names:
        if other_mode == mode_id:
            continue
        for ch in build_diatonic_chords(root, other_mode):
            if ch.symbol not in current_symbols and ch.symbol not in borrowed:
                borrowed[ch.symbol] = BorrowedChord(ch, other_mode)
    # sorted() is stable, so chords on the same root keep their discovery order:
    return sorted(borrowed.values(), key=lambda b: index_of(b.chord.root))


def common_borrowed_chords(mode_id):
    """returns the reference table of commonly borrowed chords for a key of this mode,
    as a dict of roman numeral labels to BorrowedChordDefs.
    major keys borrow from the parallel minor, and minor keys from the parallel major"""
    direction = 'major_from_minor' if key_type(mode_id) == 'major' else 'minor_from_major'
    return dict(borrowing_reference[direction])


#### substitution

class Substitution(Enum):
    """the closed set of chord substitution rules, in the order they are tried"""
    HALF_DIMINISHED = 'half_diminished'
    DIMINISHED = 'diminished'
    AUGMENTED = 'augmented'
    TRITONE = 'tritone'
    RELATIVE_MINOR = 'relative_minor'

    @property
    def description(self):
        return substitution_descriptions[self]

substitution_descriptions = {
    Substitution.HALF_DIMINISHED: 'half-diminished substitute',
    Substitution.DIMINISHED: 'diminished substitute',
    Substitution.AUGMENTED: 'augmented substitute',
    Substitution.TRITONE: 'tritone substitute',
    Substitution.RELATIVE_MINOR: 'relative minor substitute',
    }

def substitute(kind, chord):
    """applies one substitution rule to a Chord, returning the substitute Chord,
    or None if the chord's quality does not meet the rule's precondition.
    every dominant rule requires a dominant seventh ('7'),
    and the relative minor rule requires a major seventh ('maj7')."""
    if kind in (Substitution.HALF_DIMINISHED, Substitution.DIMINISHED,
                Substitution.AUGMENTED, Substitution.TRITONE):
        if chord.type_id != '7':
            return None
        if kind is Substitution.HALF_DIMINISHED:
            return build_chord(transpose(chord.root, 1), 'm7b5')
        elif kind is Substitution.DIMINISHED:
            return build_chord(transpose(chord.root, 1), 'dim7')
        elif kind is Substitution.AUGMENTED:
            return build_chord(chord.root, 'aug')
        else:
            return build_chord(transpose(chord.root, 6), '7')
    elif kind is Substitution.RELATIVE_MINOR:
        if chord.type_id != 'maj7':
            return None
        return build_chord(transpose(chord.root, 9), 'm7')
    else:
        raise ValueError(f'Unrecognised substitution kind: {kind}')


@dataclass(frozen=True)
class ChordSubstitution:
    kind: Substitution
    original: object        # the Chord that was substituted
    chord: object           # the substitute Chord

    def explanation(self, original_symbol=None):
        """describes this substitution, referring to the original chord by
        original_symbol if given (e.g. the symbol the user actually typed)"""
        if original_symbol is None:
            original_symbol = self.original.symbol
        return f'{self.kind.description} for {original_symbol}'

def chord_substitutions(chord):
    """runs every substitution rule against a Chord and returns
    a ChordSubstitution for each rule that applies"""
    substitutions = []
    for kind in Substitution:
        result = substitute(kind, chord)
        if result is not None:
            substitutions.append(ChordSubstitution(kind, chord, result))
    return substitutions

def relative_substitution(root, type_id):
    """the basic relative major/minor substitute of a chord, for use when no substitution rule applies:
    minor chords go to their relative major seventh (3 semitones up),
    and major chords to their relative minor seventh (9 semitones up).
    returns None for any other chord type."""
    if type_id in ('min', 'm7'):
        return build_chord(transpose(root, 3), 'maj7')
    elif type_id in ('maj', 'maj7'):
        return build_chord(transpose(root, 9), 'm7')
    else:
        return None
