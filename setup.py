from setuptools import setup

# install with: pip install -e .
# tests: pip install -e .[test] && pytest

setup(
    name='wordhelper',
    version='0.1.0',
    python_requires='>=3.8',
    packages=['wordhelper'],
    package_data={
        'wordhelper': ['data/words.txt'],
    },
    install_requires=[
        'click',
        'rich',
        'urwid',
        'blinker',
    ],
    extras_require={
        'test': [
            'pytest',
        ],
    },
    entry_points={
        'console_scripts': [
            'crossword = wordhelper.crosswordui:cli',
            'wordle = wordhelper.wordleui:cli',
            'letters = wordhelper.lettersui:cli',
            'interactive = wordhelper.interactive:cli',
        ],
    },
)
