### the recommendation engine: given a key, a mode and the chord currently being played,
### suggests chords to play next by five independent strategies,
### and merges them into one ranked list

from dataclasses import dataclass
from .parsing import parse_chord_symbol, ParsedChord
from .qualities import resolve_type_id
from .scales import build_diatonic_chords, roman_numeral
from .chords import Chord, build_chord
from .harmony import (progression_weight, secondary_dominant_targets, secondary_dominant,
                      build_double_dominant_chains, modal_interchange_chords,
                      chord_substitutions, relative_substitution)
from .notes import interval_between
from .util import clamp, log
from . import _settings

# the recommendation strategies, in the order that they are enumerated (and deduplicated):
strategies = ['diatonic', 'secondary_dominant', 'double_dominant', 'modal_interchange', 'chord_substitution']

# triads are treated as their corresponding seventh chords when testing substitution rules:
seventh_coercions = {'maj': 'maj7', 'min': 'm7'}


@dataclass(frozen=True)
class Recommendation:
    """a chord suggested by one of the engine's strategies, with the probability
    (a fixed heuristic weight, always in [0,1]) and reasoning behind it.
    the optional fields are filled in by whichever strategies they are relevant to."""
    chord: Chord
    probability: float
    explanation: str
    strategy: str
    progression: str = None         # e.g. 'D7 → G7'
    target: str = None              # symbol of the chord this one resolves to
    degree: int = None              # scale degree, for diatonic and borrowed chords
    roman_numeral: str = None
    source_mode: str = None         # for borrowed chords
    chain: tuple = None             # for dominant chains
    depth: int = None               # for dominant chains
    substitution: str = None        # the substitution rule that produced this chord

    def __post_init__(self):
        object.__setattr__(self, 'probability', clamp(float(self.probability), 0.0, 1.0))

    @property
    def symbol(self):
        return self.chord.symbol

    @property
    def root(self):
        return self.chord.root

    @property
    def type_id(self):
        return self.chord.type_id

    @property
    def notes(self):
        return self.chord.notes

    _marker = _settings.MARKERS['Recommendation']
    _brackets = _settings.BRACKETS['Probability']

    def __str__(self):
        lb, rb = self._brackets
        return f'{self._marker}{self.symbol} {lb}{self.probability:.2f}{rb} {self.explanation}'

    def __repr__(self):
        return str(self)


@dataclass
class EngineContext:
    """the mutable tonal context owned by one RecommendationEngine"""
    key: str = _settings.DEFAULT_KEY
    mode: str = _settings.DEFAULT_MODE
    chord: ParsedChord = None


class RecommendationEngine:
    """suggests next chords for the current chord in the current key.
    each engine owns its own context, so separate engines are fully independent.

    errors arising from an invalid key or mode are raised by the underlying
    scale and chord builders when recommendations are requested, and are not caught here.
    an unrecognisable current chord is not an error: strategies that cannot place it
    fall back to generic suggestions (or none) instead."""
    def __init__(self, key=None, mode=None):
        key = key if key is not None else _settings.DEFAULT_KEY
        mode = mode if mode is not None else _settings.DEFAULT_MODE
        self.context = EngineContext(key, mode)

    @property
    def key(self):
        return self.context.key

    @property
    def mode(self):
        return self.context.mode

    @property
    def current_chord(self):
        return self.context.chord

    def set_key(self, key, mode='Ionian'):
        log(f'Setting key: {key} {mode}')
        self.context.key = key
        self.context.mode = mode

    def set_current_chord(self, symbol):
        """sets the current chord from a chord symbol like 'Am' or 'G7'.
        the symbol is parsed leniently and its quality is not validated"""
        self.context.chord = parse_chord_symbol(symbol)
        log(f'Setting current chord: {self.context.chord}')

    def clear_current_chord(self):
        self.context.chord = None

    #### strategies:

    def diatonic_recommendations(self):
        """recommends the other chords of the key, weighted by how strongly the
        current chord's scale degree tends to move to each of them.
        movements by a fourth or fifth are boosted.
        if the current chord's root is outside the key, every diatonic chord is returned at a flat probability."""
        key, mode, current = self.key, self.mode, self.current_chord
        diatonic_chords = build_diatonic_chords(key, mode)
        if current is None:
            return []

        current_degree = None
        for ch in diatonic_chords:
            if current.root is not None and ch.root == current.root:
                current_degree = ch.degree
                break

        if current_degree is None:
            log(f'{current.symbol} is outside the key of {key} {mode}')
            return [self._diatonic_rec(ch, _settings.OUT_OF_KEY_PROBABILITY,
                                       f'{ch.symbol} is in {key} {mode}, which {current.symbol} is outside of')
                    for ch in diatonic_chords]

        current_numeral = roman_numeral(current_degree, current.quality)
        recs = []
        for ch in diatonic_chords:
            if ch.degree == current_degree:
                continue
            probability = progression_weight(current_degree, ch.degree)
            # movements of a fourth or fifth are the strongest functional pulls:
            if (ch.degree - current_degree) % 7 in (3, 4):
                probability = min(probability * _settings.FUNCTIONAL_PULL_BOOST, 1.0)
            recs.append(self._diatonic_rec(ch, probability,
                                           f'{current_numeral} to {ch.roman_numeral} in {key} {mode}',
                                           progression=f'{current.symbol}{_settings.MARKERS["right"]}{ch.symbol}'))
        recs = sorted(recs, key=lambda r: -r.probability)
        log(f'Found {len(recs)} diatonic recommendations from degree {current_degree}')
        return recs

    def _diatonic_rec(self, diatonic_chord, probability, explanation, progression=None):
        return Recommendation(build_chord(diatonic_chord.root, diatonic_chord.quality), probability,
                              explanation, 'diatonic', progression=progression,
                              degree=diatonic_chord.degree, roman_numeral=diatonic_chord.roman_numeral)

    def secondary_dominant_recommendations(self):
        """recommends the secondary dominant of each eligible chord in the key,
        other than the current chord itself"""
        key, mode, current = self.key, self.mode, self.current_chord
        targets = secondary_dominant_targets(mode)
        current_symbol = current.symbol.strip() if current is not None else None
        recs = []
        for target in build_diatonic_chords(key, mode):
            if interval_between(key, target.root) in targets and target.symbol != current_symbol:
                dominant = secondary_dominant(target)
                recs.append(Recommendation(dominant, _settings.SECONDARY_DOMINANT_PROBABILITY,
                                           f'secondary dominant of {target.symbol}', 'secondary_dominant',
                                           progression=f'{dominant.symbol}{_settings.MARKERS["right"]}{target.symbol}',
                                           target=target.symbol))
        log(f'Found {len(recs)} secondary dominants in {key} {mode}')
        return recs

    def double_dominant_recommendations(self, max_depth=None):
        """recommends the first chord of each chain of stacked dominants
        that leads to a dominant chord of the key. longer chains are less probable"""
        recs = []
        for chain in build_double_dominant_chains(self.key, self.mode, max_depth):
            probability = max(_settings.DOUBLE_DOMINANT_BASE - (_settings.DOUBLE_DOMINANT_STEP * chain.depth),
                              _settings.DOUBLE_DOMINANT_FLOOR)
            recs.append(Recommendation(chain.chain[0], probability, chain.explanation, 'double_dominant',
                                       progression=chain.progression, target=chain.target,
                                       chain=chain.chain, depth=chain.depth))
        return recs

    def modal_interchange_recommendations(self):
        """recommends chords borrowed from the parallel modes of the current key"""
        recs = []
        for borrowed in modal_interchange_chords(self.key, self.mode):
            ch = borrowed.chord
            recs.append(Recommendation(build_chord(ch.root, ch.quality), _settings.MODAL_INTERCHANGE_PROBABILITY,
                                       borrowed.explanation, 'modal_interchange',
                                       degree=ch.degree, roman_numeral=ch.roman_numeral,
                                       source_mode=borrowed.source_mode))
        log(f'Found {len(recs)} borrowed chords for {self.key} {self.mode}')
        return recs

    def chord_substitution_recommendations(self):
        """recommends chords that can substitute for the current chord.
        triads are treated as seventh chords for the purpose of the substitution rules,
        and if no rule applies, a basic relative major/minor substitute is suggested instead"""
        current = self.current_chord
        if current is None or not current.is_parsed:
            return []

        type_id = resolve_type_id(current.quality)
        rule_type = seventh_coercions.get(type_id, type_id)
        recs = []
        if rule_type is not None:
            chord = build_chord(current.root, rule_type)
            for sub in chord_substitutions(chord):
                recs.append(Recommendation(sub.chord, _settings.SUBSTITUTION_PROBABILITY,
                                           sub.explanation(current.symbol), 'chord_substitution',
                                           progression=f'{current.symbol}{_settings.MARKERS["right"]}{sub.chord.symbol}',
                                           substitution=sub.kind.value))

        if len(recs) == 0:
            relative = relative_substitution(current.root, type_id)
            if relative is not None:
                direction = 'major' if relative.type_id == 'maj7' else 'minor'
                recs.append(Recommendation(relative, _settings.FALLBACK_SUBSTITUTION_PROBABILITY,
                                           f'relative {direction} substitute for {current.symbol}', 'chord_substitution',
                                           progression=f'{current.symbol}{_settings.MARKERS["right"]}{relative.symbol}',
                                           substitution=f'relative_{direction}'))
        log(f'Found {len(recs)} substitutions for {current.symbol}')
        return recs

    #### combined:

    def all_recommendations(self):
        """returns a dict mapping each strategy name to its list of Recommendations,
        without any ranking across strategies"""
        return {'diatonic': self.diatonic_recommendations(),
                'secondary_dominant': self.secondary_dominant_recommendations(),
                'double_dominant': self.double_dominant_recommendations(),
                'modal_interchange': self.modal_interchange_recommendations(),
                'chord_substitution': self.chord_substitution_recommendations()}

    def comprehensive_recommendations(self, limit=None):
        """merges the recommendations of every strategy into one list, sorted by descending probability.
        chords suggested by more than one strategy are kept only once, attributed to whichever
        strategy comes first in enumeration order (not whichever gave the highest probability)."""
        if limit is None:
            limit = _settings.DEFAULT_RECOMMENDATION_LIMIT
        seen_symbols = set()
        unique = []
        for strategy, recs in self.all_recommendations().items():
            for rec in recs:
                if rec.symbol not in seen_symbols:
                    seen_symbols.add(rec.symbol)
                    unique.append(rec)
        ranked = sorted(unique, key=lambda r: -r.probability)
        return ranked[:limit]

    # aliases for the names used by front-ends:
    get_all_recommendations = all_recommendations
    get_comprehensive_recommendations = comprehensive_recommendations

    def __str__(self):
        chord_str = self.current_chord.symbol if self.current_chord is not None else 'no chord'
        return f'RecommendationEngine({self.key} {self.mode}, {chord_str})'

    def __repr__(self):
        return str(self)


def create_engine(key=None, mode=None):
    """returns a new RecommendationEngine, with the default key and mode from _settings unless given"""
    return RecommendationEngine(key, mode)

def quick_recommendations(key, current_chord, mode=None):
    """one-shot convenience: returns the recommendations of every strategy
    for a single chord in a single key"""
    engine = create_engine(key, mode)
    engine.set_current_chord(current_chord)
    return engine.all_recommendations()
