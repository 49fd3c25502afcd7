### text tables and plots for showing recommendations and progression analyses

from . import _settings
from .scales import build_diatonic_chords
from .util import log

import numpy as np
import matplotlib.pyplot as plt


class DataFrame:
    def __init__(self, colnames):
        self.column_names = colnames
        self.num_columns = len(colnames)
        self.column_data = {i:[] for i in range(self.num_columns)}

        self.row_data = []
        self.num_rows = 0

    def append(self, data_lst):
        """add a row of data to this dataframe, which we store as objects"""
        if len(data_lst) != self.num_columns:
            raise ValueError(f"tried to append row of length {len(data_lst)} but dataframe has {self.num_columns} columns")
        row = data_lst
        self.row_data.append(row)
        self.num_rows += 1

        for i, item in enumerate(row):
            self.column_data[i].append(item)

    def __len__(self):
        """DataFrame length is the number of rows"""
        return self.num_rows

    def column_widths(self, up_to_row=None):
        """return the max str size in each column, up to a specified row"""
        widths = []
        for col_num, col in self.column_data.items():
            col_strs = [str(c) for c in col[:up_to_row]]
            str_lens = [len(s) for s in col_strs] + [len(self.column_names[col_num])]
            widths.append(max(str_lens))
        return widths

    def render(self, margin=' ', header_border=True, max_rows=None):
        """returns the table as a single string, with aligned columns"""
        margin_size = len(margin)
        printed_rows = []
        widths = self.column_widths(up_to_row=max_rows)
        # make header:
        header_row = [f'{self.column_names[i]:{widths[i]}}' for i in range(self.num_columns)]
        printed_rows.append(margin.join(header_row).rstrip())
        if header_border:
            total_width = sum(widths) + (self.num_columns-1)*margin_size
            printed_rows.append('='*total_width)
        # make rows:
        for row in self.row_data[:max_rows]:
            this_row = [f'{str(row[i]):{widths[i]}}' for i in range(self.num_columns)]
            printed_rows.append(margin.join(this_row).rstrip())
        return '\n'.join(printed_rows)

    def show(self, **kwargs):
        print(self.render(**kwargs))


def recommendation_table(recommendations, columns=['chord', 'prob', 'strategy', 'explanation'],
                         max_results=None, show=True, **kwargs):
    """builds (and, by default, prints) a DataFrame of Recommendations.
    returns the DataFrame either way"""
    col_name_lookup = {      'idx': '',
                           'chord': 'Chord',
                           'notes': 'Notes',
                            'prob': 'Prob.',
                        'strategy': 'Strategy',
                           'roman': 'Roman',
                     'progression': 'Progression',
                     'explanation': 'Explanation',
                      }
    for col_name in columns:
        if col_name not in col_name_lookup:
            raise ValueError(f"Unknown recommendation table column: {col_name} (must be one of: {', '.join(col_name_lookup)})")

    df = DataFrame([col_name_lookup[c] for c in columns])
    for i, rec in enumerate(recommendations):
        df_row = []
        for col_name in columns:
            if col_name == 'idx':
                df_row.append(str(i+1))
            elif col_name == 'chord':
                df_row.append(rec.symbol)
            elif col_name == 'notes':
                df_row.append(' '.join(rec.notes))
            elif col_name == 'prob':
                df_row.append(f'{rec.probability:.2f}')
            elif col_name == 'strategy':
                df_row.append(_settings.STRATEGY_LABELS.get(rec.strategy, rec.strategy))
            elif col_name == 'roman':
                df_row.append(rec.roman_numeral if rec.roman_numeral is not None else '')
            elif col_name == 'progression':
                df_row.append(rec.progression if rec.progression is not None else '')
            elif col_name == 'explanation':
                df_row.append(rec.explanation)
        df.append(df_row)

    if show:
        df.show(max_rows=max_results, **kwargs)
    return df

def show_all_recommendations(engine, max_results=None, show=True):
    """renders one recommendation table per strategy for an engine's current context.
    returns the combined text"""
    sections = []
    current = engine.current_chord
    chord_str = current.symbol if current is not None else '(no chord)'
    sections.append(f'Recommendations after {chord_str} in {engine.key} {engine.mode}:')
    for strategy, recs in engine.all_recommendations().items():
        label = _settings.STRATEGY_LABELS.get(strategy, strategy)
        if len(recs) == 0:
            sections.append(f'\n{label}: none')
            continue
        df = recommendation_table(recs, columns=['chord', 'prob', 'progression', 'explanation'], show=False)
        sections.append(f'\n{label} ({len(recs)}):')
        sections.append(df.render(max_rows=max_results))
    text = '\n'.join(sections)
    if show:
        print(text)
    return text

def diatonic_table(key, mode='Ionian', show=True):
    """builds (and, by default, prints) a DataFrame of the diatonic chords of a key"""
    df = DataFrame(['Degree', 'Roman', 'Chord', 'Function'])
    for ch in build_diatonic_chords(key, mode):
        df.append([str(ch.degree), ch.roman_numeral, ch.symbol, ch.function])
    if show:
        df.show()
    return df


def plot_tension_curve(curve, labels=None, title=None, ax=None, figsize=(8,4), show=True):
    """plots a TensionCurve as a line over progression positions,
    with optional chord labels along the x-axis.
    draws onto ax if given, otherwise makes a new figure. returns the figure."""
    values = np.array(curve.values)
    positions = np.arange(len(values))
    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.figure

    ax.plot(positions, values, marker='o')
    ax.axhline(curve.average, linestyle='--', color='grey', linewidth=1)
    ax.set_ylim(0, 7.5)
    ax.set_ylabel('Tension')
    ax.set_xticks(positions)
    if labels is not None:
        if len(labels) != len(values):
            raise ValueError(f'Got {len(labels)} labels for a tension curve of length {len(values)}')
        ax.set_xticklabels([str(l) for l in labels])
    if title is None:
        title = f'Tension curve ({curve.curve_type}, peak {curve.peak:.1f})'
    ax.set_title(title)
    fig.tight_layout()
    log(f'Plotted tension curve of length {len(values)}')

    if show:
        plt.show()
    return fig
