import pathlib
import asyncio
import string

import click
import urwid
from blinker import signal

import logging
logging.basicConfig(format="%(message)s", level=logging.INFO)
logging.getLogger('asyncio').setLevel(logging.WARNING)
logger = logging.getLogger()

import wordhelper
from wordhelper.dictionary import Dictionary
from wordhelper.crossword import PatternMatcher, InvalidPatternError
from wordhelper.results import SearchResult, SearchStatus
from wordhelper.utils import clean_letters

HELP = '_ or ? is a wildcard\n+c to require a letter, - to drop the last one'

class Signal:
    """
    a blinker.signal that is also a variable
    when signal.value is set, emit the new value
    """

    def __init__(self, *args, **kw):
        self._value = kw.pop('value', None)
        self._signal = signal(*args, **kw)

    @property
    def value(self):
        return self._value

    @value.setter
    def value(self, value):
        self._value = value
        self._signal.send(self._signal.name, value=self.value)

    def __getattr__(self, name):
        return getattr(self._signal, name)


class Signals:

    pattern    = Signal('pattern',    value='')
    required   = Signal('required',   value='')
    dictionary = Signal('dictionary', value=Dictionary([]))
    result     = Signal('result',     value=SearchResult.not_searched())

signals = Signals()


class Window(urwid.WidgetWrap):
    def __init__(self, *args, **kw):
        super().__init__(
            urwid.LineBox(*args, **kw)
        )

    def __repr__(self):
        return self.__class__.__name__

    @property
    def original_widget(self):
        # return what's inside the LineBox
        return self._w


class WinPattern(Window):
    def __init__(self, *args, **kw):
        label = urwid.Text('pattern:')
        edit = urwid.AttrMap(
            urwid.Edit('', '', multiline=False, align='left', wrap='clip',),
            'default', 'focused'
        )
        widget = urwid.Columns([
                (10, label),
                ('weight', 2, edit),
        ], dividechars=-1)

        super().__init__(widget)

        self.prev = ''

    def keypress(self, size, key):

        if key == '+':
            self.prev = key
            return

        if self.prev == '+' and len(key) == 1:
            signals.required.value = clean_letters(signals.required.value + key)
            self.prev = ''
            return

        if key == '-':
            signals.required.value = signals.required.value[:-1]
            return

        if key == 'backspace':
            self.text = self.text[:-1]
            return

        # propagate keypress if not a letter or wildcard
        if len(key) != 1 or key not in string.ascii_letters + PatternMatcher.WILDCARDS:
            return key

        self.text += key.upper()
        self.prev = key

    @property
    def widget(self):
        # the edit box
        return self.original_widget.original_widget.contents[1][0].original_widget

    @property
    def text(self):
        return self.widget.get_edit_text()

    @text.setter
    def text(self, text):
        self.widget.set_edit_text(text)
        self.widget.edit_pos = len(text) # end

        signals.pattern.value = self.text


class WinRequired(Window):
    def __init__(self, *args, **kw):
        widget = urwid.Text('')
        super().__init__(widget, tlcorner='┬', blcorner='┴', )

        signals.required.connect(self.cb_required)
        self.text = 'required: ' + signals.required.value

    def cb_required(self, sender, value):
        self.text = 'required: ' + value

    @property
    def widget(self):
        return self.original_widget.original_widget

    @property
    def text(self):
        text, _ = self.widget.get_text()
        return text

    @text.setter
    def text(self, text):
        self.widget.set_text(text)


class WinMatches(Window):

    def __init__(self, *args, **kw):
        super().__init__(
            urwid.Filler(
                urwid.Text(HELP),
                valign='top',
            )
        )

        signals.dictionary.connect(self.cb_dictionary)
        signals.pattern.connect(self.cb_pattern)
        signals.required.connect(self.cb_required)

    def cb_dictionary(self, sender, value):
        logger.info(f"dictionary loaded, {len(value)} words")
        self.recalc()

    def cb_pattern(self, sender, value):
        self.recalc()

    def cb_required(self, sender, value):
        self.recalc()

    @property
    def widget(self):
        return self.original_widget.original_widget.original_widget

    @property
    def text(self):
        text, _ = self.widget.get_text()
        return text

    @text.setter
    def text(self, value):
        return self.widget.set_text(value)

    @property
    def matcher(self):
        return PatternMatcher(signals.dictionary.value)

    @property
    def result(self):
        return signals.result.value

    @result.setter
    def result(self, value):
        signals.result.value = value

        if value.status == SearchStatus.NOT_SEARCHED:
            self.text = HELP
        elif value.status == SearchStatus.EMPTY:
            self.text = 'no words found'
        else:
            self.text = ' '.join(value)

    def recalc(self):
        """
        runs on every pattern/required change, the newest result wins
        """
        logger.debug("recalculating wordlist")

        try:
            self.result = self.matcher.match(signals.pattern.value, signals.required.value)
        except InvalidPatternError as e:
            logger.warning(str(e))
            self.result = SearchResult.not_searched()
            self.text = 'invalid pattern'


class WinCounts(Window):
    def __init__(self, *args, **kw):
        font = urwid.Thin3x3Font()
        widget = urwid.Padding(
            urwid.BigText('', font),
            align='center', width='clip'
        )
        super().__init__(widget, title='Word Count', title_align='left')

        signals.result.connect(self.cb_result)

    def cb_result(self, sender, value):
        self.widget.set_text(str(len(value)) if value.searched else '')

    @property
    def widget(self):
        return self.original_widget.original_widget.original_widget


class WinLogging(Window):

    def __init__(self, *args, **kw):
        super().__init__(
            urwid.BoxAdapter(
                urwid.ListBox(urwid.SimpleListWalker([])),
                height=3
            ),
            title="Logging", title_align='left', tlcorner='┬', blcorner='┴',
        )


class MainFrame(urwid.Frame):
    def __init__(self, *args, **kw):
        super().__init__(urwid.Text(''), *args, **kw)

        win_pattern = WinPattern()
        win_required = WinRequired()

        self.header = urwid.Columns([
            ("weight", 2, win_pattern),
            ("weight", 1, win_required),
        ],  dividechars=-1,)

        self.body = WinMatches()

        win_logging = WinLogging()
        win_count = WinCounts()

        self.footer = urwid.Columns([
            ("weight", 1, win_count),
            ("weight", 2, win_logging),
        ], dividechars=-1)

    @property
    def win_pattern(self):
        return self.header.contents[0][0]

    @property
    def win_logging(self):
        # LineBox -> BoxAdapter -> ListBox
        return self.footer.contents[1][0].original_widget.original_widget.original_widget


class App:

    def __init__(self, args):
        self.args = args

    def setup(self):

        self.frame = MainFrame(focus_part='header')
        replace_handlers(logger, self.frame.win_logging)

        signals.required.value = clean_letters(self.args['required'])

        # load and send dictionary to listeners
        signals.dictionary.value = Dictionary.read_dict(self.args['dict'])

        if self.args['pattern']:
            self.frame.win_pattern.text = self.args['pattern'].strip().upper()

    def run(self):
        palette = [
            # (name, foreground, background, mono, foreground_high, background_high)
            # standout is usually displayed with foreground and background reversed
            ('unfocused', 'default', '', '', '', ''),
            ('focused', 'light gray', 'dark blue', '', '#ffd', '#00a'),
            ('editing', 'dark blue', 'light gray', '', 'standout', 'black'),
            ('header', 'black,underline', 'light gray', 'standout,underline', 'white,underline,bold', 'black'),
        ]

        event_loop = urwid.AsyncioEventLoop(loop=asyncio.new_event_loop())
        self.loop = urwid.MainLoop(self.frame,
                                   palette,
                                   unhandled_input=self.handle_keypress,
                                   handle_mouse=False,
                                   event_loop=event_loop,
                                   )

        self.loop.screen.set_terminal_properties(colors=256)
        self.loop.run() # blocking

    def handle_keypress(self, key):

        if key in ('f10', 'esc'):
            raise urwid.ExitMainLoop()

        return key


class UrwidHandler(logging.StreamHandler):
    def __init__(self, listbox):
        super().__init__()
        self.listbox = listbox

    def emit(self, record):
        msg = self.format(record)
        msg = urwid.Text(msg)
        self.listbox.body.append(msg)
        self.listbox.set_focus(len(self.listbox.body) - 1) # scroll to last line


def replace_handlers(logger, listbox):
    """
    replace current handlers and emit to given urwid.ListBox
    """
    logger.handlers = [UrwidHandler(listbox)]


@click.command()
@click.option('--dict', default=wordhelper.dictfile, type=click.Path(exists=True, readable=True, path_type=pathlib.Path))
@click.option('--require', '-r', 'required', metavar='letters', default='', type=str)
@click.option('--verbose', '-v', is_flag=True, help="debug logging")
@click.argument('pattern', required=False, default='')
@click.pass_context
def cli(ctx, *_, **args):
    """
    interactively solve a crossword clue, the word list updates as you type

    \b
    _ or ? for wildcard
    +c to require a letter, - to drop the last required letter
    esc or f10 to quit
    """
    if args['verbose']:
        logger.setLevel(logging.DEBUG)

    app = App(args)
    app.setup()
    app.run()       # blocking call
