from dataclasses import dataclass

### chord types and their names - for example, 'm7' and 'sus4' and '7b9' are defined in this module.
### new chord types can be freely added by following the examples below,
### where hopefully the template is self-explanatory.

@dataclass(frozen=True)
class ChordTypeDef:
    name: str           # human-readable name, e.g. 'Minor 7th'
    symbol: str         # suffix appended to the root in a chord symbol, e.g. 'm7' in 'Am7'
    intervals: tuple    # semitones above the root, beginning with 0 (and may exceed 12 for extensions)
    degrees: tuple      # the chord factor of each interval, e.g. ('1', 'b3', '5', 'b7')
    function: str       # one of: 'tonic', 'subdominant', 'dominant', 'neutral'
    tension: str        # a key into tension_levels below


chord_types = {
    #### triads:
    'maj':    ChordTypeDef('Major Triad',      '',      (0, 4, 7),        ('1', '3', '5'),           'tonic',       'stable'),
    'min':    ChordTypeDef('Minor Triad',      'm',     (0, 3, 7),        ('1', 'b3', '5'),          'tonic',       'stable'),
    'dim':    ChordTypeDef('Diminished Triad', 'dim',   (0, 3, 6),        ('1', 'b3', 'b5'),         'dominant',    'unstable'),
    'aug':    ChordTypeDef('Augmented Triad',  'aug',   (0, 4, 8),        ('1', '3', '#5'),          'dominant',    'unstable'),

    #### sevenths:
    'maj7':   ChordTypeDef('Major 7th',        'maj7',  (0, 4, 7, 11),    ('1', '3', '5', '7'),      'tonic',       'stable'),
    'm7':     ChordTypeDef('Minor 7th',        'm7',    (0, 3, 7, 10),    ('1', 'b3', '5', 'b7'),    'subdominant', 'mild'),
    '7':      ChordTypeDef('Dominant 7th',     '7',     (0, 4, 7, 10),    ('1', '3', '5', 'b7'),     'dominant',    'unstable'),
    'm7b5':   ChordTypeDef('Half Diminished',  'm7b5',  (0, 3, 6, 10),    ('1', 'b3', 'b5', 'b7'),   'subdominant', 'unstable'),
    'dim7':   ChordTypeDef('Diminished 7th',   'dim7',  (0, 3, 6, 9),     ('1', 'b3', 'b5', 'bb7'),  'dominant',    'very_unstable'),
    'mMaj7':  ChordTypeDef('Minor Major 7th',  'mMaj7', (0, 3, 7, 11),    ('1', 'b3', '5', '7'),     'tonic',       'mild'),
    # (built on the third degree of harmonic and melodic minor)
    'maj7#5': ChordTypeDef('Major 7th Sharp 5', 'maj7#5', (0, 4, 8, 11),  ('1', '3', '#5', '7'),     'tonic',       'altered'),

    #### extended chords:
    'maj9':   ChordTypeDef('Major 9th',        'maj9',  (0, 4, 7, 11, 14),     ('1', '3', '5', '7', '9'),          'tonic',       'colorful'),
    'm9':     ChordTypeDef('Minor 9th',        'm9',    (0, 3, 7, 10, 14),     ('1', 'b3', '5', 'b7', '9'),        'subdominant', 'colorful'),
    '9':      ChordTypeDef('Dominant 9th',     '9',     (0, 4, 7, 10, 14),     ('1', '3', '5', 'b7', '9'),         'dominant',    'colorful'),
    'maj11':  ChordTypeDef('Major 11th',       'maj11', (0, 4, 7, 11, 14, 17), ('1', '3', '5', '7', '9', '11'),    'tonic',       'very_colorful'),
    'm11':    ChordTypeDef('Minor 11th',       'm11',   (0, 3, 7, 10, 14, 17), ('1', 'b3', '5', 'b7', '9', '11'),  'subdominant', 'very_colorful'),
    '11':     ChordTypeDef('Dominant 11th',    '11',    (0, 4, 7, 10, 14, 17), ('1', '3', '5', 'b7', '9', '11'),   'dominant',    'very_colorful'),

    #### suspended chords:
    'sus2':   ChordTypeDef('Suspended 2nd',    'sus2',  (0, 2, 7),        ('1', '2', '5'),           'neutral',     'suspended'),
    'sus4':   ChordTypeDef('Suspended 4th',    'sus4',  (0, 5, 7),        ('1', '4', '5'),           'neutral',     'suspended'),
    '7sus4':  ChordTypeDef('Dominant 7th Suspended 4th', '7sus4', (0, 5, 7, 10), ('1', '4', '5', 'b7'), 'dominant', 'suspended'),

    #### altered dominants:
    '7b5':    ChordTypeDef('Dominant 7th Flat 5',  '7b5', (0, 4, 6, 10),      ('1', '3', 'b5', 'b7'),        'dominant', 'altered'),
    '7#5':    ChordTypeDef('Dominant 7th Sharp 5', '7#5', (0, 4, 8, 10),      ('1', '3', '#5', 'b7'),        'dominant', 'altered'),
    '7b9':    ChordTypeDef('Dominant 7th Flat 9',  '7b9', (0, 4, 7, 10, 13),  ('1', '3', '5', 'b7', 'b9'),   'dominant', 'altered'),
    '7#9':    ChordTypeDef('Dominant 7th Sharp 9', '7#9', (0, 4, 7, 10, 15),  ('1', '3', '5', 'b7', '#9'),   'dominant', 'altered'),
    'alt':    ChordTypeDef('Altered Dominant',     'alt', (0, 4, 6, 10, 13, 15), ('1', '3', 'b5', 'b7', 'b9', '#9'), 'dominant', 'very_altered'),
    }


### tension labels map onto an ordinal tension level, where higher is more unstable/colourful:
tension_levels = {'stable': 0,
                  'mild': 1,
                  'colorful': 2,
                  'suspended': 2,
                  'unstable': 3,
                  'very_colorful': 3,
                  'altered': 4,
                  'very_unstable': 4,
                  'very_altered': 5,
                  }


### chord colours are descriptive tags. a chord type can carry any number of them (including none),
### and the type ids listed here need not all be registered above:
chord_colors = {'bright': ['maj7', 'maj9', 'maj11', '7#11'],
                  'warm': ['m7', 'm9', 'm11'],
                  'dark': ['m7b5', 'dim7', '7b5', '7b9'],
            'mysterious': ['mMaj7', '7#5', 'alt'],
             'suspended': ['sus2', 'sus4', '7sus4'],
                 'jazzy': ['9', '11', '13', '7#9', '7b9'],
             'classical': ['maj', 'min', 'dim', 'aug'],
                }
