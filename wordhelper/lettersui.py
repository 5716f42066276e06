import pathlib
import itertools

import click

from rich.console import Console
print = Console(color_system='truecolor', highlight=False).print

import logging
logging.basicConfig(format="%(message)s", level=logging.INFO)
logger = logging.getLogger()

import wordhelper
from wordhelper.dictionary import Dictionary
from wordhelper.letters import AnagramMatcher, Anchor, Tiles
from wordhelper.results import SearchStatus
from wordhelper.utils import dotdict, clean_letters


class LettersUI:

    def __init__(self, args):
        args = dotdict(args)

        self.args    = args
        self.matcher = AnagramMatcher(Dictionary.read_dict(args.dict))

    @staticmethod
    def highlight(scored):
        """
        letters made from a blank tile are shown lowercase and dimmed
        """
        return ''.join([
            f"[dim]{c.lower()}[/dim]" if i in scored.blanks else c
            for i, c in enumerate(scored.word)
        ])

    def print_group(self, words, n=10):
        """
        one line per score, best first
        """
        if not n:
            n = len(words)

        for i, (score, group) in enumerate(itertools.groupby(words, key=lambda item: item.score)):
            if i >= n:
                break

            print(f"{score}: {', '.join([self.highlight(w) for w in group])}")

    def search(self):
        tiles = Tiles.parse(self.args.tiles)
        fixed = clean_letters(self.args.fixed)

        result = self.matcher.match(tiles, fixed, self.args.anchor)

        if result.status == SearchStatus.NOT_SEARCHED:
            print("[grey]enter some letters to search[/grey]")
        elif result.status == SearchStatus.EMPTY:
            print("[bold yellow]no words found[/bold yellow]")
        else:
            s = 's' if len(result) != 1 else ''
            print(f"[green]found {len(result)} word{s}[/green]")
            self.print_group(result.words, self.args.top)

        return result


@click.command()
@click.option('--dict', default=wordhelper.dictfile, type=click.Path(exists=True, readable=True, path_type=pathlib.Path))
@click.option('--fixed', '-f', metavar='letters', default='', help="letters already on the board")
@click.option('--at', '-a', 'anchor', default=Anchor.BEGINNING.value,
              type=click.Choice([a.value for a in Anchor]), help="where the fixed letters go")
@click.option('--top', '-n', default=10, type=int, help="number of score groups to show, 0 for all")
@click.option('--verbose', '-v', is_flag=True, help="debug logging")
@click.argument('tiles', required=False, default='')
@click.pass_context
def cli(ctx, *_, **args):
    """
    find the words you can make from TILES, highest scrabble score first

    \b
    use . or ? for a blank tile, eg. letters deroibu.
    blank tiles score nothing
    """
    if args['verbose']:
        logger.setLevel(logging.DEBUG)

    ui = LettersUI(args)
    ui.search()
