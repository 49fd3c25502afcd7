from dataclasses import dataclass

### static harmony rule tables: diatonic movement weights, secondary dominant targets,
### harmonic function membership, and modal interchange reference data.
### none of these are mutated after import.

### probability weights of moving from one scale degree (outer key)
### to another (inner key), based on traditional functional harmony.
### note that these are asymmetric: 1->5 is not the same as 5->1.
### movements missing from this table are given a default weight at query time (see _settings).
progression_weights = {
    1: {2: 0.8,  3: 0.6, 4: 0.9, 5: 0.95, 6: 0.85, 7: 0.4},
    2: {1: 0.3,  3: 0.4, 4: 0.6, 5: 0.9,  6: 0.5,  7: 0.7},
    3: {1: 0.4,  2: 0.5, 4: 0.7, 5: 0.6,  6: 0.8,  7: 0.3},
    4: {1: 0.8,  2: 0.7, 3: 0.5, 5: 0.9,  6: 0.6,  7: 0.8},
    5: {1: 0.95, 2: 0.4, 3: 0.5, 4: 0.3,  6: 0.7,  7: 0.2},
    6: {1: 0.6,  2: 0.8, 3: 0.7, 4: 0.9,  5: 0.5,  7: 0.4},
    7: {1: 0.9,  2: 0.3, 3: 0.8, 4: 0.4,  5: 0.6,  6: 0.5},
    }

### semitone offsets from the tonic of the chords that are eligible
### to be preceded by their own secondary dominant:
secondary_dominant_targets = {
    'major': frozenset({2, 4, 7, 9, 10}),  # ii, iii, V, vi, (b)VII
    'minor': frozenset({0, 2, 5, 7, 10}),  # i, ii, iv, v, VII
    }

### the scale degrees belonging to each harmonic function.
### degree 6 is both tonic and subdominant; classification checks them in this order,
### so degree 6 is always classified as tonic.
function_degrees = {'tonic':       (1, 3, 6),
                    'subdominant': (2, 4, 6),
                    'dominant':    (5, 7),
                    }

function_descriptions = {'tonic': 'provides stability, can serve as a start or end point',
                         'subdominant': 'departs from the tonic, usually leads to the dominant',
                         'dominant': 'creates tension that strongly wants to resolve to the tonic',
                         }

### the label given to a movement between two scale degrees,
### indexed by the (mod 7) step upward from the first degree to the second:
degree_step_names = {0: 'same',
                     1: 'step_up',
                     2: 'third_up',
                     3: 'fourth_up',
                     4: 'fifth_up',
                     5: 'sixth_up',
                     6: 'step_down',
                     }


@dataclass(frozen=True)
class BorrowedChordDef:
    degree: str     # roman numeral label of the borrowed chord
    quality: str    # chord type id
    source: str     # the mode it is borrowed from

### common borrowed chords in each direction of modal interchange.
### this is reference data only: RecommendationEngine discovers borrowed chords
### structurally, by comparing parallel modes, rather than from this table.
modal_interchange_chords = {
    'major_from_minor': {
        'bII':  BorrowedChordDef('bII',  'maj7', 'Phrygian'),
        'bIII': BorrowedChordDef('bIII', 'maj7', 'Aeolian'),
        'iv':   BorrowedChordDef('iv',   'm7',   'Aeolian'),
        'bVI':  BorrowedChordDef('bVI',  'maj7', 'Aeolian'),
        'bVII': BorrowedChordDef('bVII', '7',    'Mixolydian'),
        },
    'minor_from_major': {
        'II':  BorrowedChordDef('II',  'm7',   'Dorian'),
        'IV':  BorrowedChordDef('IV',  'maj7', 'Ionian'),
        'VI':  BorrowedChordDef('VI',  'maj7', 'Ionian'),
        'VII': BorrowedChordDef('VII', 'maj7', 'Ionian'),
        },
    }
