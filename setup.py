#!/usr/bin/env python
"""
========
ftsquery
========

Translates Google style search expressions, with quoted phrases,
OR/AND/exclude operators, proximity groups, thesaurus and exact match
markers, into the search condition syntax of SQL Server's ``CONTAINS``
and ``CONTAINSTABLE`` predicates.

    >>> from ftsquery import translate
    >>> translate('drugs -marijuana')
    ('FORMSOF (INFLECTIONAL, drugs) AND NOT(FORMSOF (INFLECTIONAL, marijuana))', True)

"""
from setuptools import setup, find_packages

setup(
  name="ftsquery",
  version="0.1.0",
  packages=find_packages(exclude=['tests.*', 'tests', '.virt']),

  tests_require=['pytest'],
  extras_require={
        'test': ['pytest'],
        },

  description='Google style search expressions for SQL Server full-text search',
  long_description=__doc__,
  license='MIT License',
  python_requires='>=3.7',
      install_requires=[
        'pyparsing>=3.0',
        ],
  classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Topic :: Database',
        ],
)
