import pathlib

import click

from rich.console import Console
from rich.markup import escape
print = Console(color_system='truecolor', highlight=False).print

import logging
logging.basicConfig(format="%(message)s", level=logging.INFO)
logger = logging.getLogger()

import wordhelper
from wordhelper.dictionary import Dictionary
from wordhelper.crossword import PatternMatcher, InvalidPatternError
from wordhelper.results import SearchStatus
from wordhelper.utils import dotdict


def print_words(result, empty_msg="no words found"):
    """
    shared by the crossword and wordle commands, both return plain words
    """
    if result.status == SearchStatus.NOT_SEARCHED:
        print("[grey]nothing to search for yet[/grey]")
        return

    if result.status == SearchStatus.EMPTY:
        print(f"[bold yellow]{empty_msg}[/bold yellow]")
        return

    s = 's' if len(result) != 1 else ''
    print(f"[green]found {len(result)} word{s}[/green]")
    print(' '.join(result))


class CrosswordUI:

    def __init__(self, args):
        args = dotdict(args)

        self.args    = args
        self.matcher = PatternMatcher(Dictionary.read_dict(args.dict))

    def search(self):
        pattern = self.args.pattern

        if pattern.strip():
            print(f"{len(pattern.strip())}-letter word: {escape(pattern.strip().upper())}")

        result = self.matcher.match(pattern, self.args.required)
        print_words(result)
        return result


@click.command()
@click.option('--dict', default=wordhelper.dictfile, type=click.Path(exists=True, readable=True, path_type=pathlib.Path))
@click.option('--require', '-r', 'required', metavar='letters', default='', help="letters that must appear somewhere")
@click.option('--verbose', '-v', is_flag=True, help="debug logging")
@click.argument('pattern')
@click.pass_context
def cli(ctx, *_, **args):
    """
    find crossword answers matching PATTERN

    \b
    _ or ? for an unknown letter, eg. C_T -> CAT, COT, CUT
    """
    if args['verbose']:
        logger.setLevel(logging.DEBUG)

    try:
        ui = CrosswordUI(args)
        ui.search()
    except InvalidPatternError as e:
        print(f"[bold red]{escape(str(e))}[/bold red]")
        ctx.exit(1)
