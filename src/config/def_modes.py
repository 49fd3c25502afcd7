from dataclasses import dataclass

### modes and their diatonic chords are defined in this module.
### a mode definition lists the semitone offset of each scale degree from the tonic,
### and the (seventh) chord quality that is built on each of those degrees.
### new modes can be freely added by following the examples below; every chord quality
### named here must also be a registered chord type in def_chords.

@dataclass(frozen=True)
class ModeDef:
    name: str               # display name
    intervals: tuple        # 7 strictly increasing semitone offsets, beginning with 0
    qualities: tuple        # 7 chord type ids, one per scale degree
    extra: bool = False     # True for the minor variants that are not rotations of the major scale


mode_defs = {
    ### the seven diatonic modes, i.e. rotations of the major scale:
    'Ionian':     ModeDef('Ionian',     (0, 2, 4, 5, 7, 9, 11), ('maj7', 'm7', 'm7', 'maj7', '7', 'm7', 'm7b5')),  # natural major
    'Dorian':     ModeDef('Dorian',     (0, 2, 3, 5, 7, 9, 10), ('m7', 'm7', 'maj7', '7', 'm7', 'm7b5', 'maj7')),
    'Phrygian':   ModeDef('Phrygian',   (0, 1, 3, 5, 7, 8, 10), ('m7', 'maj7', '7', 'm7', 'm7b5', 'maj7', 'm7')),
    'Lydian':     ModeDef('Lydian',     (0, 2, 4, 6, 7, 9, 11), ('maj7', '7', 'm7', 'm7b5', 'maj7', 'm7', 'm7')),
    'Mixolydian': ModeDef('Mixolydian', (0, 2, 4, 5, 7, 9, 10), ('7', 'm7', 'm7b5', 'maj7', 'm7', 'm7', 'maj7')),
    'Aeolian':    ModeDef('Aeolian',    (0, 2, 3, 5, 7, 8, 10), ('m7', 'm7b5', 'maj7', 'm7', 'm7', 'maj7', '7')),  # natural minor
    'Locrian':    ModeDef('Locrian',    (0, 1, 3, 5, 6, 8, 10), ('m7b5', 'maj7', 'm7', 'm7', 'maj7', '7', 'm7')),

    ### 'extra' minor variants:
    'HarmonicMinor': ModeDef('Harmonic Minor', (0, 2, 3, 5, 7, 8, 11), ('mMaj7', 'm7b5', 'maj7#5', 'm7', '7', 'maj7', 'dim7'), extra=True),
    # (melodic minor here means the ascending 'jazz minor' form)
    'MelodicMinor':  ModeDef('Melodic Minor',  (0, 2, 3, 5, 7, 9, 11), ('mMaj7', 'm7', 'maj7#5', '7', '7', 'm7b5', 'm7b5'), extra=True),
    }

# the only mode whose secondary dominants are drawn from the major-key target set;
# every other mode is treated as a minor key for that purpose:
major_key_modes = ('Ionian',)
