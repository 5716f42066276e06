import pathlib

import click

from rich.console import Console
print = Console(color_system='truecolor', highlight=False).print

import logging
logging.basicConfig(format="%(message)s", level=logging.INFO)
logger = logging.getLogger()

import wordhelper
from wordhelper.dictionary import Dictionary
from wordhelper.wordle import Grid, TileState, ConstraintMatcher, derive_constraints
from wordhelper.crosswordui import print_words
from wordhelper.utils import dotdict

def to_list(ctx, param, value):
    return list(value)

class WordleUI:

    COLORS = {
        TileState.EMPTY:  'default',
        TileState.GREEN:  'bold white on green',
        TileState.YELLOW: 'bold white on dark_goldenrod',
        TileState.GRAY:   'bold white on grey50',
    }

    @classmethod
    def colorize(cls, state, text):
        """
        colorize text using rich color tags
        state: the TileState to paint
        text: the text to wrap with color tags
        """
        color = cls.COLORS[state]
        return f"[{color}]{text}[/{color}]"

    @classmethod
    def colorize_row(cls, row):
        return ''.join([
            cls.colorize(tile.state, f" {tile.letter} ")
            for tile in row
        ])

    def __init__(self, args):
        args = dotdict(args)

        self.args    = args
        self.wordlen = args.wordlen
        self.matcher = ConstraintMatcher(Dictionary.read_dict(args.dict))
        self.grid    = Grid(rows=max(len(args.guesses), 1), wordlen=self.wordlen)

    def parse_guesses(self):
        """
        each guess is 'word,response', eg. crane,oieoo
        e=exact spot (green), i=in word (yellow), o=not in word (gray)
        """
        for row, guess in enumerate(self.args.guesses):
            word, _, resp = guess.partition(',')
            self.grid.enter(row, word.strip(), resp.strip().lower())

    def show_grid(self):
        for row in self.grid:
            if any([tile.letter for tile in row]):
                print(self.colorize_row(row))
        print()

    def solve(self):
        self.parse_guesses()
        self.show_grid()

        logger.debug(derive_constraints(self.grid))

        result = self.matcher.solve(self.grid)
        print_words(result)
        return result


@click.command()
@click.option('--dict', default=wordhelper.dictfile, type=click.Path(exists=True, readable=True, path_type=pathlib.Path))
@click.option('--len', 'wordlen', default=wordhelper.wordlen, type=int)
@click.option('--verbose', '-v', is_flag=True, help="debug logging")
@click.argument('guesses', required=False, nargs=-1, callback=to_list)
@click.pass_context
def cli(ctx, *_, **args):
    """
    list the words still possible after some Wordle guesses

    \b
    pass each guess as WORD,RESPONSE where RESPONSE is one letter per tile:
    e=exact spot (green), i=in word but wrong spot (yellow), o=not in word (gray)
    eg. wordle crane,oieoo light,ooooe
    """
    if args['verbose']:
        logger.setLevel(logging.DEBUG)

    try:
        ui = WordleUI(args)
        ui.solve()
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint='guesses')
