### this demo script imports the entire chordcompass namespace for easy access.
### it's intended to be used interactively without the need to install the package properly, e.g.:
###     $ ipython -i demo.py

import time

# time how long init takes for debugging purposes:
init_start_time = time.time()

from src import util, parsing, display, _settings
from src.parsing import parse_chord_symbol, ParsedChord
from src.notes import *
from src.qualities import *
from src.scales import *
from src.chords import *
from src.harmony import *
from src.recommendations import *
from src.progressions import *
from src.session import ChordSession
from src.display import recommendation_table, show_all_recommendations, diatonic_table, plot_tension_curve

init_end_time = time.time()
init_time = init_end_time - init_start_time
print(f'chordcompass library initialised in {init_time:.2} seconds')

if __name__ == '__main__':
    engine = create_engine('C', 'Ionian')
    engine.set_current_chord('Am')
    diatonic_table('C', 'Ionian')
    print()
    show_all_recommendations(engine)
    print('\nTop picks:')
    recommendation_table(engine.comprehensive_recommendations(), columns=['idx', 'chord', 'prob', 'strategy', 'explanation'])

    session = ChordSession('C', 'Ionian')
    for symbol in ['C', 'G', 'Am', 'F']:
        session.add(symbol)
    print(f'\n{session}')
    print(session.analyze().summary())
