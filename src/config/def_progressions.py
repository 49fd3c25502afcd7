from dataclasses import dataclass

### a library of well-known chord progressions, expressed as sequences of scale degrees.
### used by the progression analyzer to put a name to a sequence of degrees.

@dataclass(frozen=True)
class ProgressionDef:
    name: str
    pattern: tuple          # scale degrees, 1-indexed
    description: str
    mood: str
    genres: tuple = ()
    examples: tuple = ()
    chord_types: tuple = () # explicit chord qualities, where the progression calls for them


classic_progressions = {
    ### pop:
    'pop': {
        'I-V-vi-IV': ProgressionDef('I-V-vi-IV (pop progression)', (1, 5, 6, 4),
                                    'the most common pop progression, strongly cyclical', 'uplifting',
                                    ('pop', 'rock', 'country'), ('C-G-Am-F', 'G-D-Em-C')),
        'vi-IV-I-V': ProgressionDef('vi-IV-I-V (minor start)', (6, 4, 1, 5),
                                    'the pop progression, starting from the relative minor', 'melancholic_to_hopeful',
                                    ('pop', 'ballad'), ('Am-F-C-G', 'Em-C-G-D')),
        'I-vi-IV-V': ProgressionDef('I-vi-IV-V (50s progression)', (1, 6, 4, 5),
                                    'classic doo-wop and early rock progression', 'nostalgic',
                                    ('doo-wop', 'oldies', 'rock'), ('C-Am-F-G', 'F-Dm-Bb-C')),
        },

    ### jazz:
    'jazz': {
        'ii-V-I': ProgressionDef('ii-V-I (jazz cadence)', (2, 5, 1),
                                 'the fundamental jazz cadence', 'sophisticated',
                                 ('jazz', 'bossa nova'), ('Dm7-G7-Cmaj7', 'Am7-D7-Gmaj7')),
        'I-vi-ii-V': ProgressionDef('I-vi-ii-V (jazz turnaround)', (1, 6, 2, 5),
                                    'standard turnaround used throughout jazz standards', 'smooth',
                                    ('jazz', 'swing'), ('Cmaj7-Am7-Dm7-G7',)),
        'iii-vi-ii-V': ProgressionDef('iii-vi-ii-V (descending fifths)', (3, 6, 2, 5),
                                      'a chain of descending fifths into the dominant', 'flowing',
                                      ('jazz', 'latin'), ('Em7-Am7-Dm7-G7',)),
        'I-IV-vii-iii-vi-ii-V-I': ProgressionDef('circle of fifths', (1, 4, 7, 3, 6, 2, 5, 1),
                                                 'the complete diatonic circle of fifths', 'complex',
                                                 ('jazz', 'bebop'), ('Cmaj7-Fmaj7-Bm7b5-Em7-Am7-Dm7-G7-Cmaj7',)),
        },

    ### classical:
    'classical': {
        'I-IV-V-I': ProgressionDef('I-IV-V-I (authentic cadence)', (1, 4, 5, 1),
                                   'the most basic cadential formula', 'resolved',
                                   ('classical', 'hymn'), ('C-F-G-C', 'G-C-D-G')),
        'I-V-I': ProgressionDef('I-V-I (simple cadence)', (1, 5, 1),
                                'the simplest complete cadence', 'conclusive',
                                ('classical', 'folk'), ('C-G-C', 'F-C-F')),
        'vi-IV-I-V': ProgressionDef('vi-IV-I-V (plagal motion)', (6, 4, 1, 5),
                                    'begins in the relative minor before settling', 'dramatic',
                                    ('classical', 'romantic'), ('Am-F-C-G',)),
        },

    ### blues:
    'blues': {
        '12-bar-blues': ProgressionDef('12-bar blues', (1, 1, 1, 1, 4, 4, 1, 1, 5, 4, 1, 5),
                                       'the standard twelve-bar blues form', 'bluesy',
                                       ('blues', 'rock', 'jazz'), ('C7-C7-C7-C7-F7-F7-C7-C7-G7-F7-C7-G7',)),
        'quick-change': ProgressionDef('quick-change blues', (1, 4, 1, 1, 4, 4, 1, 1, 5, 4, 1, 5),
                                       'twelve-bar blues with the IV chord in bar two', 'energetic',
                                       ('blues', 'boogie'), ('C7-F7-C7-C7-F7-F7-C7-C7-G7-F7-C7-G7',)),
        },
    }


### progressions characteristic of particular modes:
modal_progressions = {
    'Dorian': {
        'i-IV': ProgressionDef('i-IV', (1, 4), 'minor tonic to major IV, the dorian signature', 'bittersweet',
                               examples=('Dm-G (D Dorian)',)),
        'i-bVII-IV': ProgressionDef('i-bVII-IV', (1, 7, 4), 'dorian three-chord vamp', 'modal_flavor',
                                    examples=('Dm-C-G (D Dorian)',)),
        },
    'Mixolydian': {
        'I-bVII': ProgressionDef('I-bVII', (1, 7), 'major tonic to flat seven, the mixolydian signature', 'rock_modal',
                                 examples=('G-F (G Mixolydian)',)),
        'I-bVII-IV': ProgressionDef('I-bVII-IV', (1, 7, 4), 'the anthemic rock mixolydian progression', 'anthemic',
                                    examples=('G-F-C (G Mixolydian)',)),
        },
    'Phrygian': {
        'i-bII': ProgressionDef('i-bII', (1, 2), 'minor tonic to flat two, the phrygian signature', 'spanish_flavor',
                                examples=('Em-F (E Phrygian)',)),
        'i-bII-bIII': ProgressionDef('i-bII-bIII', (1, 2, 3), 'ascending phrygian progression', 'exotic',
                                     examples=('Em-F-G (E Phrygian)',)),
        },
    }


### progressions that call for explicit chord qualities:
modern_progressions = {
    'neo_soul': {
        'Imaj7-II7-III7-IVmaj7': ProgressionDef('neo-soul sevenths', (1, 2, 3, 4), 'neo-soul seventh chord progression',
                                                'sophisticated_groove', examples=('Cmaj7-D7-E7-Fmaj7',),
                                                chord_types=('maj7', '7', '7', 'maj7')),
        },
    'r_and_b': {
        'i7-iv7-V7': ProgressionDef('minor R&B blues', (1, 4, 5), 'minor R&B blues progression', 'soulful',
                                    examples=('Am7-Dm7-E7',), chord_types=('7', '7', '7')),
        },
    'gospel': {
        'I-iii-IV-iv': ProgressionDef('gospel minor plagal', (1, 3, 4, 4), 'classic gospel progression with a borrowed iv',
                                      'spiritual', examples=('Cmaj7-Em7-Fmaj7-Fm7',),
                                      chord_types=('maj7', 'm7', 'maj7', 'm7')),
        },
    }


### how strongly one scale degree resolves to another (higher is stronger), keyed by degree pair:
resolution_strengths = {
    (5, 1): 10,  # perfect authentic cadence
    (7, 1): 9,   # leading-tone resolution
    (5, 6): 8,   # deceptive cadence
    (4, 1): 7,   # plagal cadence
    (2, 5): 6,   # predominant to dominant
    (1, 6): 5,   # to the relative minor
    (6, 4): 4,   # descending thirds
    (1, 5): 3,   # half cadence motion
    (3, 6): 3,
    (1, 4): 2,
    }
