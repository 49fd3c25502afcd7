############# context defaults:

### DEFAULT_KEY and DEFAULT_MODE determine the tonal context that a
### RecommendationEngine starts with, before any call to set_key.
DEFAULT_KEY = 'C'
DEFAULT_MODE = 'Ionian'

### DEFAULT_RECOMMENDATION_LIMIT controls how many chords are returned by
### RecommendationEngine.comprehensive_recommendations if no limit is given.
DEFAULT_RECOMMENDATION_LIMIT = 10

### DOUBLE_DOMINANT_DEPTH is the number of secondary dominants that get
### stacked in front of each dominant chord when building dominant chains.
### e.g. with a depth of 3, G7 in C major yields: D7 G7, A7 D7 G7, E7 A7 D7 G7
DOUBLE_DOMINANT_DEPTH = 3


############# recommendation weights:

### these are fixed heuristic weights, not learned probabilities.
### every probability attached to a Recommendation is clamped into [0,1] regardless.

# used for diatonic movements that are missing from the progression weight table:
DEFAULT_PROGRESSION_WEIGHT = 0.3
# diatonic movements of a fourth or fifth are multiplied by this (and capped at 1.0):
FUNCTIONAL_PULL_BOOST = 1.3
# flat probability for every diatonic chord when the current chord is outside the key:
OUT_OF_KEY_PROBABILITY = 0.5

SECONDARY_DOMINANT_PROBABILITY = 0.8

# dominant chains decay linearly with chain depth, down to a floor:
DOUBLE_DOMINANT_BASE = 0.9
DOUBLE_DOMINANT_STEP = 0.2
DOUBLE_DOMINANT_FLOOR = 0.3

MODAL_INTERCHANGE_PROBABILITY = 0.6

# substitutions found by the substitution rules:
SUBSTITUTION_PROBABILITY = 0.7
# basic relative major/minor substitutions used when no rule applies:
FALLBACK_SUBSTITUTION_PROBABILITY = 0.6


############# display settings:

# chordcompass objects use little unicode MARKERS in their string methods
# to identify them at a glance. the default markers are defined here, so you
# can change them if you don't like them:
MARKERS = {  'Chord': '♬ ',
     'DiatonicChord': '♫ ',
    'Recommendation': '➤ ',

           # chord-movement marker used in progression labels:
           'right': ' → ',
            }

### BRACKETS are used similarly to markers, but placed around the objects they contain:
BRACKETS = {  'NoteList': ['𝄃', ' 𝄂'],
           'Progression': ['𝄆 ', ' 𝄇'],
           'Probability': ['(', ')'],
            }

### STRATEGY_LABELS are the human-readable names of each recommendation strategy,
### as shown in recommendation tables:
STRATEGY_LABELS = {      'diatonic': 'Diatonic',
               'secondary_dominant': 'Secondary dominant',
                  'double_dominant': 'Double dominant',
                'modal_interchange': 'Borrowed',
               'chord_substitution': 'Substitution',
                  }
