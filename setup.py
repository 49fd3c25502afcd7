#!/usr/bin/env python

from setuptools import setup

setup(name='chordcompass',
      version='1.0',
      description='A python library that recommends what chord to play next, using the rules of functional harmony',
      install_requires=['numpy', 'matplotlib'],
      extras_require={
        'dev': [ 'ipdb' ],
        'test': [ 'pytest' ],
      },
      packages=['chordcompass', 'chordcompass.config', 'chordcompass.test'],
      package_dir = {'chordcompass': 'src'}
     )
