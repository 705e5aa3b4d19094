#!/usr/bin/env python
#-*- coding:utf-8 -*-

from setuptools import setup, find_packages


# install
setup(
    name = 'PyBurstPhase',
    version = '0.1.0',
    description = 'Python tools to detect bursts and study the phase '
                  'relationships of periodic neuronal activity',
    packages = find_packages('.', include=['PyBurstPhase', 'PyBurstPhase.*']),
    python_requires = '>=3.6',

    # Requirements
    install_requires = ['numpy>=1.17', 'scipy>=0.11', 'matplotlib>=3.1',
                        'pandas'],
    extras_require = {
        'test': 'pytest'
    },

    # Metadata
    url = 'https://github.com/SENeC-Initiative/PyBurstPhase',
    author = 'Tanguy Fardet',
    author_email = 'tanguy.fardet@univ-paris-diderot.fr',
    license = 'GPL3',
    keywords = 'neural activity burst phase actogram'
)
