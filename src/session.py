### a ChordSession accumulates the chords of a progression as they are played,
### keeping a RecommendationEngine pointed at the most recent one

from .parsing import parse_chord_symbol
from .scales import scale_degree
from .recommendations import RecommendationEngine
from .progressions import ProgressionAnalysis
from .util import log
from . import _settings


class ChordSession:
    """an ordered list of chords typed by the user, in one key.
    adding a chord also makes it the engine's current chord,
    so recommend() always answers 'what should come next?'"""
    def __init__(self, key=None, mode=None, engine=None):
        if engine is None:
            engine = RecommendationEngine(key, mode)
        elif (key is not None) or (mode is not None):
            engine.set_key(key if key is not None else engine.key,
                           mode if mode is not None else engine.mode)
        self.engine = engine
        self.chords = []

    @property
    def key(self):
        return self.engine.key

    @property
    def mode(self):
        return self.engine.mode

    def set_key(self, key, mode='Ionian'):
        self.engine.set_key(key, mode)

    def add(self, symbol):
        """appends a chord symbol to the progression and returns its ParsedChord"""
        parsed = parse_chord_symbol(symbol)
        self.chords.append(parsed)
        self.engine.set_current_chord(symbol)
        return parsed

    def remove(self, index=-1):
        """removes and returns the chord at the given position (by default, the last one).
        the engine's current chord becomes whichever chord is now last"""
        removed = self.chords.pop(index)
        self._sync_current()
        return removed

    def clear(self):
        self.chords = []
        self._sync_current()

    def _sync_current(self):
        if len(self.chords) > 0:
            self.engine.set_current_chord(self.chords[-1].symbol)
        else:
            self.engine.clear_current_chord()

    def degrees(self):
        """returns the scale degree of each chord's root in the current key,
        with None for chords that are outside the key or could not be parsed"""
        return [scale_degree(ch.root, self.key, self.mode) if ch.is_parsed else None
                for ch in self.chords]

    def analyze(self, partial_matches=True):
        """runs a ProgressionAnalysis over the degrees of the chords that are in the key"""
        in_key = [d for d in self.degrees() if d is not None]
        if len(in_key) == 0:
            raise ValueError(f'No chords in this session belong to the key of {self.key} {self.mode}')
        if len(in_key) < len(self.chords):
            log(f'Skipping {len(self.chords) - len(in_key)} chords that are outside the key')
        return ProgressionAnalysis(in_key, partial_matches=partial_matches)

    def recommend(self, limit=None):
        """comprehensive recommendations for the chord to follow the last one added"""
        return self.engine.comprehensive_recommendations(limit)

    def __len__(self):
        return len(self.chords)

    def __str__(self):
        lb, rb = _settings.BRACKETS['Progression']
        return f'{lb}{" ".join([ch.symbol for ch in self.chords])}{rb} in {self.key} {self.mode}'

    def __repr__(self):
        return str(self)
