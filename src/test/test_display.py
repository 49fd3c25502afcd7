import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
import pytest

from ..display import DataFrame, recommendation_table, show_all_recommendations, diatonic_table, plot_tension_curve
from ..recommendations import create_engine
from ..progressions import tension_curve
from .testing_tools import compare

def test_dataframe():
    df = DataFrame(['Chord', 'Prob.'])
    df.append(['Dm7', '1.00'])
    df.append(['Fmaj7', '0.90'])
    compare(len(df), 2)
    compare(df.column_widths(), [5, 5])
    compare(df.render().split('\n'), ['Chord Prob.',
                                      '===========',
                                      'Dm7   1.00',
                                      'Fmaj7 0.90'])
    compare(len(df.render(max_rows=1).split('\n')), 3)
    with pytest.raises(ValueError):
        df.append(['too', 'many', 'columns'])

def test_recommendation_table(capsys):
    engine = create_engine('C', 'Ionian')
    engine.set_current_chord('G7')
    recs = engine.chord_substitution_recommendations()
    df = recommendation_table(recs, columns=['idx', 'chord', 'prob', 'strategy'])
    out = capsys.readouterr().out
    compare('C#7' in out, True)
    compare('Substitution' in out, True)
    compare(df.row_data[3], ['4', 'C#7', '0.70', 'Substitution'])

    recommendation_table(recs, show=False)
    compare(capsys.readouterr().out, '')

    with pytest.raises(ValueError):
        recommendation_table(recs, columns=['chord', 'mood'])

def test_show_all_recommendations():
    engine = create_engine('C', 'Ionian')
    engine.set_current_chord('Am')
    text = show_all_recommendations(engine, show=False)
    compare(text.startswith('Recommendations after Am in C Ionian:'), True)
    for label in ['Diatonic (6):', 'Secondary dominant (4):', 'Double dominant (3):', 'Substitution (1):']:
        compare(label in text, True)

    empty = create_engine('C', 'Ionian')
    compare('Diatonic: none' in show_all_recommendations(empty, show=False), True)

def test_diatonic_table():
    df = diatonic_table('C', 'Ionian', show=False)
    compare(df.column_data[2], ['Cmaj7', 'Dm7', 'Em7', 'Fmaj7', 'G7', 'Am7', 'Bm7b5'])
    compare(df.column_data[1][6], 'viiø7')

def test_plot_tension_curve():
    curve = tension_curve([1, 5, 6, 4])
    fig = plot_tension_curve(curve, labels=['C', 'G', 'Am', 'F'], show=False)
    ax = fig.axes[0]
    compare(len(ax.lines[0].get_ydata()), 4)
    compare([t.get_text() for t in ax.get_xticklabels()], ['C', 'G', 'Am', 'F'])
    compare(ax.get_title(), 'Tension curve (ascending, peak 6.7)')
    plt.close(fig)

    with pytest.raises(ValueError):
        plot_tension_curve(curve, labels=['C'], show=False)
    plt.close('all')
