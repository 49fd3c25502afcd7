### analysis of chord progressions, expressed as sequences of scale degrees (1-7):
### harmonic function, tension curves, mood, and recognition of well-known progressions

import math
from numbers import Integral
from dataclasses import dataclass
import numpy as np

from .config.def_harmony import function_degrees, function_descriptions, degree_step_names
from .config.def_progressions import classic_progressions, modal_progressions, modern_progressions, resolution_strengths
from .scales import roman_numeral
from .util import log
from . import _settings

# the base tension value of each harmonic function, before positional effects:
function_tensions = {'tonic': 1, 'subdominant': 3, 'dominant': 5, 'unknown': 0}
MAX_TENSION = 7

# every progression library, by family name:
progression_libraries = {'classic': classic_progressions,
                         'modal': modal_progressions,
                         'modern': modern_progressions}


def _check_degrees(degrees):
    degrees = list(degrees)
    if len(degrees) == 0:
        raise ValueError('Cannot analyse an empty progression')
    for d in degrees:
        if not isinstance(d, Integral) or isinstance(d, bool):
            raise TypeError(f'Progression degrees must be ints, but got: {d!r} ({type(d)})')
    # numpy integers are cast so that results hold plain ints:
    return [int(d) for d in degrees]

def classify_degree(degree):
    """returns the harmonic function of a scale degree: 'tonic', 'subdominant', 'dominant' or 'unknown'.
    functions are checked in that order, so degree 6 (which is both tonic and subdominant) is tonic"""
    for function, members in function_degrees.items():
        if degree in members:
            return function
    return 'unknown'


@dataclass(frozen=True)
class FunctionAnalysis:
    degree: int
    function: str
    next_relation: str      # movement to the following degree, or None for the last position
    position: int
    is_resolution: bool     # True for tonic chords after the first position

    @property
    def description(self):
        return function_descriptions.get(self.function, 'has no clear harmonic function')

def analyze_function(degrees):
    """classifies each degree of a progression by harmonic function,
    and labels the movement from each degree to the next (e.g. 'fifth_up')"""
    degrees = _check_degrees(degrees)
    analysis = []
    for i, degree in enumerate(degrees):
        function = classify_degree(degree)
        next_relation = None
        if i < len(degrees) - 1:
            next_relation = degree_step_names[(degrees[i+1] - degree) % 7]
        analysis.append(FunctionAnalysis(degree, function, next_relation, i,
                                         is_resolution=(function == 'tonic' and i > 0)))
    return analysis


@dataclass(frozen=True)
class TensionCurve:
    values: tuple
    peak: float
    average: float
    curve_type: str         # 'ascending' if the progression ends more tense than it starts, otherwise 'descending'

    def __len__(self):
        return len(self.values)

def tension_curve(degrees):
    """computes the tension at each position of a progression: a base value by harmonic function,
    plus a positional arc that peaks in the middle of the progression, capped at MAX_TENSION"""
    degrees = _check_degrees(degrees)
    n = len(degrees)
    base = np.array([function_tensions[classify_degree(d)] for d in degrees], dtype=float)
    if n > 1:
        fractions = np.arange(n) / (n - 1)
    else:
        fractions = np.zeros(1)
    # rounded so that float noise in sin(pi) cannot separate equal endpoints:
    arc = np.round(np.sin(fractions * np.pi) * 2, 12)
    values = np.minimum(base + arc, MAX_TENSION)

    curve_type = 'ascending' if values[-1] > values[0] else 'descending'
    return TensionCurve(values=tuple([float(v) for v in values]),
                        peak=float(np.max(values)),
                        average=float(np.mean(values)),
                        curve_type=curve_type)


@dataclass(frozen=True)
class ProgressionMood:
    primary: str        # 'peaceful', 'intense', 'building', 'resolving', 'restless' or 'dramatic'
    intensity: int      # rounded average tension
    character: str      # the curve type of the tension curve
    stability: float    # proportion of tonic-function chords

def progression_mood(degrees):
    """describes the mood of a progression from its tension curve and harmonic functions"""
    degrees = _check_degrees(degrees)
    curve = tension_curve(degrees)
    functions = [a.function for a in analyze_function(degrees)]

    if curve.average < 2:
        mood = 'peaceful'
    elif curve.average > 4:
        mood = 'intense'
    elif curve.curve_type == 'ascending':
        mood = 'building'
    else:
        mood = 'resolving'

    tonic_count, dominant_count = functions.count('tonic'), functions.count('dominant')
    if dominant_count > tonic_count:
        mood = 'restless' if mood == 'peaceful' else 'dramatic'

    return ProgressionMood(primary=mood,
                           intensity=int(math.floor(curve.average + 0.5)),
                           character=curve.curve_type,
                           stability=tonic_count / len(degrees))


#### named progressions

@dataclass(frozen=True)
class ProgressionMatch:
    family: str         # 'classic', 'modal' or 'modern'
    category: str       # e.g. 'jazz' or 'Dorian'
    label: str          # e.g. 'ii-V-I'
    definition: object  # the matching ProgressionDef

    @property
    def name(self):
        return self.definition.name

def identify_progressions(degrees, partial=False):
    """returns every named progression in the progression library whose degree pattern
    equals the given degrees. if partial is True, also return patterns that occur
    anywhere inside the given degrees as a contiguous run."""
    degrees = tuple(_check_degrees(degrees))
    matches = []
    for family, library in progression_libraries.items():
        for category, progs in library.items():
            for label, prog_def in progs.items():
                pattern = prog_def.pattern
                if degrees == pattern:
                    matches.append(ProgressionMatch(family, category, label, prog_def))
                elif partial and len(pattern) < len(degrees):
                    windows = [degrees[i:i+len(pattern)] for i in range(len(degrees) - len(pattern) + 1)]
                    if pattern in windows:
                        matches.append(ProgressionMatch(family, category, label, prog_def))
    log(f'Found {len(matches)} named progressions matching {degrees}')
    return matches

def resolution_strength(from_degree, to_degree):
    """scores how strongly one scale degree resolves to another, from 0 (unlisted) to 10 (V-I)"""
    return resolution_strengths.get((from_degree, to_degree), 0)


class ProgressionAnalysis:
    """bundles every analysis of one progression of scale degrees:
    function analysis, tension curve, mood, named progression matches,
    and the resolution strength of each movement (the last of which is the cadence)"""
    def __init__(self, degrees, partial_matches=True):
        self.degrees = _check_degrees(degrees)
        self.functions = analyze_function(self.degrees)
        self.tension = tension_curve(self.degrees)
        self.mood = progression_mood(self.degrees)
        self.matches = identify_progressions(self.degrees, partial=partial_matches)
        self.resolutions = [resolution_strength(a, b) for a, b in zip(self.degrees, self.degrees[1:])]

    @property
    def cadence_strength(self):
        """resolution strength of the final movement, or 0 for a single chord"""
        return self.resolutions[-1] if len(self.resolutions) > 0 else 0

    @property
    def numerals(self):
        """the bare roman numeral of each degree"""
        return [roman_numeral(d, None) for d in self.degrees]

    def summary(self):
        lines = [f'Progression: {"-".join(self.numerals)}',
                 f'Functions:   {" ".join([a.function for a in self.functions])}',
                 f'Tension:     {" ".join([f"{v:.1f}" for v in self.tension.values])} ({self.tension.curve_type}, peak {self.tension.peak:.1f})',
                 f'Mood:        {self.mood.primary} (intensity {self.mood.intensity}, stability {self.mood.stability:.2f})',
                 f'Cadence:     {self.cadence_strength}/10']
        if len(self.matches) > 0:
            lines.append(f'Matches:     {", ".join([m.name for m in self.matches])}')
        return '\n'.join(lines)

    def __str__(self):
        lb, rb = _settings.BRACKETS['Progression']
        return f'{lb}{" ".join(self.numerals)}{rb}'

    def __repr__(self):
        return f'ProgressionAnalysis{self}'
